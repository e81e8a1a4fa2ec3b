"""
Cached pathfinding facade.

Primary goals:
- Bind a cost function and a move function once, then answer many queries.
- Cache results per (start, goal, budget_key) so repeated queries are free.
- Offer a cache invalidation mechanism via a version key when the graph changes.

Usage:
    pf = PathFinder(cost_function, move_function)
    path = pf.path(start, goal, budget_key=graph_version)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, Iterable, List, Tuple

from .config import SearchConfig
from .errors import PathNotFoundError
from .search import find_path

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Search facade.

    - Validates every query through :class:`SearchConfig`.
    - Returns ``None`` instead of raising when no path exists.
    - Caches results keyed on (start, goal, budget_key).
    """

    def __init__(
        self,
        cost_function: Callable[[Any, Any], float],
        move_function: Callable[[Any], Iterable[Any]],
        *,
        max_iterations: int | None = None,
        tie_breaker: Callable[[Any], Any] | None = None,
    ) -> None:
        self.cost_function = cost_function
        self.move_function = move_function
        self.max_iterations = max_iterations
        self.tie_breaker = tie_breaker
        self._cache: Dict[Tuple[Hashable, Hashable, int], List[Any] | None] = {}

    # --------- Public API ---------

    def path(self, start: Hashable, goal: Hashable, *, budget_key: int = 0) -> List[Any] | None:
        """
        Compute a path from start to goal, excluding start. Returns None if unreachable.
        Cached by (start, goal, budget_key).
        """
        key = (start, goal, budget_key)
        if key in self._cache:
            logger.debug("cache hit for %r -> %r (budget_key=%d)", start, goal, budget_key)
            return self._cache[key]

        try:
            path: List[Any] | None = find_path(self.config(start, goal))
        except PathNotFoundError:
            path = None

        self._cache[key] = path
        return path

    def config(self, start: Hashable, goal: Hashable) -> SearchConfig:
        """Return the validated search configuration for one query."""
        return SearchConfig(
            cost_function=self.cost_function,
            move_function=self.move_function,
            start=start,
            end=goal,
            max_iterations=self.max_iterations,
            tie_breaker=self.tie_breaker,
        )

    def invalidate(self) -> None:
        """
        Clear the internal path cache. Call after large updates.
        Prefer passing a new budget_key for fine-grained control.
        """
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


__all__ = ["PathFinder"]
