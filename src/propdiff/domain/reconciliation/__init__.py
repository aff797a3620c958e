"""Reconciliation of two property collections.

A ``base`` map holds defaults and an ``override`` map is layered on top of it.
The engine derives six collections from the pair:

- ``intersect_equal``: keys in both with equal values
- ``intersect_diff``: keys in both with different values (winning value)
- ``common``: keys in both (winning value)
- ``union``: keys in either (winning value where both define it)
- ``only_in_base`` / ``only_in_override``: keys present on one side only
"""

from __future__ import annotations

from .engine import Precedence, ReconciliationEngine
from .operations import Operation

__all__ = [
    "Operation",
    "Precedence",
    "ReconciliationEngine",
]
