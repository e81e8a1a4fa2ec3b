"""A* search loop and the public ``find_path`` entry point.

The loop threads an immutable :class:`~astar_engine.model.Model` through
each step:

1. pick the cheapest open position, scored with ``cost_function(goal, p)``;
2. stop if it is the goal;
3. otherwise expand it, moving it to the evaluated set and relaxing every
   neighbour that has not been evaluated yet.

Usage:
    config = SearchConfig(
        cost_function=lambda goal, p: abs(goal - p),
        move_function=lambda n: {n + 1} if n < 3 else set(),
        start=0,
        end=3,
    )
    find_path(config)  # [1, 2, 3]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator

from .errors import EmptyFrontierError, PathNotFoundError, SearchLimitError
from .frontier import cheapest_open
from .model import Model, P, initial_model
from .reconstruct import reconstruct_path
from .relax import update_cost

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import SearchConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchStep(Generic[P]):
    """A frontier selection together with the model it was made from."""

    current: P
    model: Model[P]


def expand(
    current: P,
    move_function: Callable[[P], Iterable[P]],
    model: Model[P],
    *,
    tie_breaker: Callable[[P], Any] | None = None,
) -> Model[P]:
    """Return the model after evaluating ``current``."""

    evaluated = model.evaluated | {current}
    neighbours = frozenset(move_function(current))
    new_neighbours = neighbours - evaluated

    model = replace(
        model,
        evaluated=evaluated,
        open_set=(model.open_set - {current}) | new_neighbours,
    )

    ordered: Iterable[P] = new_neighbours
    if tie_breaker is not None:
        ordered = sorted(new_neighbours, key=tie_breaker)
    for neighbour in ordered:
        model = update_cost(current, neighbour, model)
    return model


def search_steps(
    cost_function: Callable[[P, P], float],
    move_function: Callable[[P], Iterable[P]],
    goal: P,
    model: Model[P],
    *,
    tie_breaker: Callable[[P], Any] | None = None,
) -> Iterator[SearchStep[P]]:
    """Yield every frontier selection of a search.

    The generator stops after yielding the step that selects ``goal``, or
    without yielding anything further once the open set is exhausted.
    """

    def score(position: P) -> float:
        return cost_function(goal, position)

    while True:
        try:
            current = cheapest_open(score, model, tie_breaker=tie_breaker)
        except EmptyFrontierError:
            return
        yield SearchStep(current, model)
        if current == goal:
            return
        model = expand(current, move_function, model, tie_breaker=tie_breaker)


def astar(
    cost_function: Callable[[P, P], float],
    move_function: Callable[[P], Iterable[P]],
    goal: P,
    model: Model[P],
    *,
    max_iterations: int | None = None,
    tie_breaker: Callable[[P], Any] | None = None,
) -> list[P]:
    """Run the search from ``model`` until ``goal`` is selected.

    Returns the path from just after the start up to ``goal`` inclusive.

    Raises:
        PathNotFoundError: If the open set runs out before reaching ``goal``.
        SearchLimitError: If more than ``max_iterations`` expansions are needed.
    """

    evaluated = len(model.evaluated)
    for iteration, step in enumerate(
        search_steps(cost_function, move_function, goal, model, tie_breaker=tie_breaker)
    ):
        evaluated = len(step.model.evaluated)
        if step.current == goal:
            path = reconstruct_path(step.model.came_from, goal)
            logger.debug(
                "reached %r after %d expansion(s), path has %d hop(s)",
                goal,
                iteration,
                len(path),
            )
            return path
        if max_iterations is not None and iteration >= max_iterations:
            logger.warning(
                "search for %r stopped after %d expansion(s)", goal, max_iterations
            )
            raise SearchLimitError(max_iterations)
        logger.debug(
            "expanding %r (open=%d, evaluated=%d)",
            step.current,
            len(step.model.open_set),
            evaluated,
        )
        evaluated += 1

    logger.debug("frontier exhausted before reaching %r", goal)
    raise PathNotFoundError(goal, evaluated)


def find_path(config: SearchConfig) -> list[Any]:
    """Return the path described by ``config``.

    The start position is not part of the result; ``start == end`` gives an
    empty list.
    """

    return astar(
        config.cost_function,
        config.move_function,
        config.end,
        initial_model(config.start),
        max_iterations=config.max_iterations,
        tie_breaker=config.tie_breaker,
    )


__all__ = [
    "SearchStep",
    "astar",
    "expand",
    "find_path",
    "search_steps",
]
