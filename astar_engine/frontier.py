from __future__ import annotations

from typing import Any, Callable, Iterable

from .errors import EmptyFrontierError, MissingCostError
from .model import Model, P


def cheapest_open(
    score: Callable[[P], float],
    model: Model[P],
    *,
    tie_breaker: Callable[[P], Any] | None = None,
) -> P:
    """Return the open position with the lowest ``cost + score(position)``.

    Ties go to the first candidate visited. Candidates are visited in set
    order unless ``tie_breaker`` is given, in which case they are visited in
    ascending ``tie_breaker`` order.
    """

    if not model.open_set:
        raise EmptyFrontierError("open set is empty")

    def total(position: P) -> float:
        try:
            recorded = model.costs[position]
        except KeyError:
            raise MissingCostError(position) from None
        return recorded + float(score(position))

    candidates: Iterable[P] = model.open_set
    if tie_breaker is not None:
        candidates = sorted(model.open_set, key=tie_breaker)

    remaining = iter(candidates)
    best = next(remaining)
    best_total = total(best)
    for position in remaining:
        candidate_total = total(position)
        if candidate_total < best_total:
            best = position
            best_total = candidate_total
    return best
