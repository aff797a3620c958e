"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from propdiff.adapters.properties import FilePropertyLoader, build_sink
from propdiff.config import get_output_config
from propdiff.domain.reconciliation import Operation, Precedence, ReconciliationEngine

if TYPE_CHECKING:
    from collections.abc import Iterable

    from propdiff.config import OutputConfig
    from propdiff.domain.ports import PropertyLoader, PropertySink
    from propdiff.domain.property_map import PropertyMap


log = getLogger(__name__)


@dataclass(slots=True)
class DiffResult:
    """Outcome of reconciling two property sources."""

    base_source: str
    override_source: str
    results: dict[Operation, PropertyMap] = field(default_factory=dict["Operation", "PropertyMap"])

    def counts(self) -> dict[Operation, int]:
        return {operation: len(properties) for operation, properties in self.results.items()}


def diff_property_files(
    base_source: str,
    override_source: str,
    *,
    operations: Iterable[Operation] | None = None,
    precedence: Precedence = Precedence.OVERRIDE,
    loader: PropertyLoader | None = None,
    sink: PropertySink | None = None,
    output: OutputConfig | None = None,
) -> DiffResult:
    """Reconcile ``override_source`` layered on ``base_source`` and emit the results.

    Both sources are loaded before anything else happens, so a ``LoadError`` for
    either one means no operation runs and nothing is written. Every result is
    computed before the sink is touched and the sink commits them together, so a
    ``StoreError`` leaves no partial output behind. Operations run in
    :meth:`Operation.ordered` order regardless of the order given; an empty
    selection means all of them.
    """

    effective_output = output or get_output_config()
    effective_loader = loader or FilePropertyLoader(encoding=effective_output.encoding)
    effective_sink = sink or build_sink(effective_output)
    selected = set(operations or ()) or set(Operation)

    base = effective_loader(base_source)
    override = effective_loader(override_source)
    log.info(
        "Reconciling %s (%d properties) with %s (%d properties), %s takes precedence",
        base_source,
        len(base),
        override_source,
        len(override),
        precedence,
    )

    engine = ReconciliationEngine(base=base, override=override, precedence=precedence)
    result = DiffResult(base_source=base_source, override_source=override_source)
    for operation in Operation.ordered():
        if operation in selected:
            result.results[operation] = engine.run(operation)

    with effective_sink:
        for operation, properties in result.results.items():
            effective_sink(
                properties,
                name=operation.filename,
                comment=operation.describe(base_source, override_source),
            )
        effective_sink.commit()

    log.info(
        "Finished reconciliation: %s",
        ", ".join(f"{operation}={count}" for operation, count in result.counts().items()),
    )
    return result
