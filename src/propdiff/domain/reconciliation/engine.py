"""Pure reconciliation of a ``base`` and an ``override`` property map.

Every operation re-scans both inputs and returns a fresh :class:`PropertyMap`;
inputs are never mutated, so one engine can be shared between threads.

Whenever both sides define a key with different values, the value comes from
the side named by ``precedence``. The rule is applied identically by
``intersect_diff``, ``common`` and ``union``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from propdiff.domain.property_map import PropertyMap, PropertyMapBuilder

from .operations import Operation

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)


class Precedence(StrEnum):
    """Which side wins when both maps define a key."""

    OVERRIDE = "override"
    BASE = "base"


@dataclass(frozen=True, slots=True)
class ReconciliationEngine:
    """Compare two property maps and derive the six reconciliation results."""

    base: PropertyMap
    override: PropertyMap
    precedence: Precedence = Precedence.OVERRIDE

    @property
    def winner(self) -> PropertyMap:
        return self.override if self.precedence is Precedence.OVERRIDE else self.base

    def intersect_equal(self) -> PropertyMap:
        """Keys defined by both maps with identical values."""

        result = PropertyMapBuilder()
        for key, value in self.base.items():
            if self.override.get(key) == value:
                result.put(key, value)
        return result.build()

    def intersect_diff(self) -> PropertyMap:
        """Keys defined by both maps with different values, carrying the winning value."""

        winner = self.winner
        result = PropertyMapBuilder()
        for key, value in self.base.items():
            other = self.override.get(key)
            if other is not None and other != value:
                result.put(key, winner[key])
        return result.build()

    def common(self) -> PropertyMap:
        """Keys defined by both maps, carrying the winning value."""

        winner = self.winner
        result = PropertyMapBuilder()
        for key in self.override:
            if key in self.base:
                result.put(key, winner[key])
        return result.build()

    def union(self) -> PropertyMap:
        """Every key of either map; the winning value where both define it."""

        winner = self.winner
        result = PropertyMapBuilder()
        for key, value in self.base.items():
            result.put(key, winner[key] if key in self.override else value)
        for key, value in self.override.items():
            if key not in self.base:
                result.put(key, value)
        return result.build()

    def only_in_base(self) -> PropertyMap:
        return _only_in(self.base, self.override)

    def only_in_override(self) -> PropertyMap:
        return _only_in(self.override, self.base)

    def run(self, operation: Operation) -> PropertyMap:
        """Compute the result of ``operation``."""

        method: Callable[[ReconciliationEngine], PropertyMap] = _DISPATCH[operation]
        result = method(self)
        log.debug("%s produced %d properties", operation, len(result))
        return result


def _only_in(present: PropertyMap, absent: PropertyMap) -> PropertyMap:
    result = PropertyMapBuilder()
    for key, value in present.items():
        if key not in absent:
            result.put(key, value)
    return result.build()


_DISPATCH: dict[Operation, Callable[[ReconciliationEngine], PropertyMap]] = {
    Operation.INTERSECT_EQUAL: ReconciliationEngine.intersect_equal,
    Operation.INTERSECT_DIFF: ReconciliationEngine.intersect_diff,
    Operation.COMMON: ReconciliationEngine.common,
    Operation.ONLY_IN_OVERRIDE: ReconciliationEngine.only_in_override,
    Operation.ONLY_IN_BASE: ReconciliationEngine.only_in_base,
    Operation.UNION: ReconciliationEngine.union,
}
