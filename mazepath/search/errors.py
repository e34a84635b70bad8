"""Exceptions raised by the search engine for caller contract violations."""

from __future__ import annotations


class NegativeEdgeCostError(ValueError):
    """A successor function reported an edge with negative cost."""

    def __init__(self, source: object, target: object, cost: float) -> None:
        super().__init__(
            f"edge {source!r} -> {target!r} has negative cost {cost!r}"
        )
        self.source = source
        self.target = target
        self.cost = cost


class SearchBudgetExceeded(RuntimeError):
    """The expansion cap was reached before the search finished."""

    def __init__(self, expanded: int) -> None:
        super().__init__(f"search stopped after {expanded} expansions")
        self.expanded = expanded


__all__ = ["NegativeEdgeCostError", "SearchBudgetExceeded"]
