"""Search state threaded through each step of the A* loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, Mapping, TypeVar

P = TypeVar("P", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Model(Generic[P]):
    """Immutable snapshot of a search.

    Steps never mutate a model in place; they build the next one with
    :func:`dataclasses.replace` and fresh mappings.

    Attributes:
        evaluated: Positions already popped from the frontier and expanded.
        open_set: Positions discovered but not yet expanded.
        costs: Best known hop count from the start for each discovered position.
        came_from: Predecessor of each position on its best known path.
    """

    evaluated: frozenset[P] = frozenset()
    open_set: frozenset[P] = frozenset()
    costs: Mapping[P, float] = field(default_factory=dict)
    came_from: Mapping[P, P] = field(default_factory=dict)


def initial_model(start: P) -> Model[P]:
    """Return the model a search starts from, seeded with ``start``."""

    return Model(
        evaluated=frozenset(),
        open_set=frozenset({start}),
        costs={start: 0.0},
        came_from={},
    )


__all__ = ["Model", "P", "initial_model"]
