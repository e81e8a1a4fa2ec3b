"""Exceptions raised by the search engine."""

from __future__ import annotations

from typing import Hashable


class PathNotFoundError(LookupError):
    """Raised when the frontier is exhausted before the goal is reached."""

    def __init__(self, goal: Hashable, evaluated: int = 0) -> None:
        super().__init__(
            f"no path to {goal!r} after evaluating {evaluated} position(s)"
        )
        self.goal = goal
        self.evaluated = evaluated


class FrontierError(LookupError):
    """Raised when no candidate can be selected from the open set."""


class EmptyFrontierError(FrontierError):
    """Raised when the open set has no positions left."""


class MissingCostError(FrontierError):
    """Raised when an open position has no recorded cost.

    This signals a broken model rather than an unreachable goal and is never
    converted into :class:`PathNotFoundError`.
    """

    def __init__(self, position: Hashable) -> None:
        super().__init__(f"open position {position!r} has no recorded cost")
        self.position = position


class SearchLimitError(RuntimeError):
    """Raised when a search exceeds its configured iteration budget."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"search exceeded {limit} iteration(s)")
        self.limit = limit


__all__ = [
    "EmptyFrontierError",
    "FrontierError",
    "MissingCostError",
    "PathNotFoundError",
    "SearchLimitError",
]
