"""Adapters that let the engine search :mod:`networkx` graphs."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Callable, Hashable, Sequence, TypeAlias

import networkx as nx

from .config import SearchConfig
from .search import find_path

if TYPE_CHECKING:  # pragma: no cover - typing only
    SearchGraph: TypeAlias = nx.Graph[Hashable]
else:  # pragma: no cover - runtime alias without subscripting
    SearchGraph: TypeAlias = nx.Graph

Metric = Callable[[Sequence[float], Sequence[float]], float]


def moves_from_graph(graph: SearchGraph) -> Callable[[Hashable], frozenset[Hashable]]:
    """Return a move function enumerating the nodes reachable in one edge.

    Directed graphs follow successors only. Nodes missing from ``graph`` have
    no moves.
    """

    def moves(node: Hashable) -> frozenset[Hashable]:
        if node not in graph:
            return frozenset()
        if graph.is_directed():
            return frozenset(graph.successors(node))
        return frozenset(graph.neighbors(node))

    return moves


def heuristic_from_attribute(
    graph: SearchGraph,
    attribute: str = "coord",
    *,
    metric: Metric = math.dist,
) -> Callable[[Hashable, Hashable], float]:
    """Return a cost function comparing a coordinate attribute of two nodes."""

    def heuristic(node_a: Hashable, node_b: Hashable) -> float:
        coord_a = graph.nodes[node_a].get(attribute) if node_a in graph else None
        coord_b = graph.nodes[node_b].get(attribute) if node_b in graph else None
        if coord_a is None or coord_b is None:
            return 0.0
        return float(metric(coord_a, coord_b))

    return heuristic


def _no_estimate(node_a: Any, node_b: Any) -> float:
    return 0.0


def find_graph_path(
    graph: SearchGraph,
    start: Hashable,
    goal: Hashable,
    *,
    attribute: str | None = None,
    max_iterations: int | None = None,
) -> list[Hashable]:
    """Return the fewest-hop path from ``start`` to ``goal`` within ``graph``.

    When ``attribute`` names a coordinate attribute the frontier is ordered by
    the distance between coordinates, otherwise it is explored breadth first.
    """

    cost_function = (
        _no_estimate if attribute is None else heuristic_from_attribute(graph, attribute)
    )
    config = SearchConfig(
        cost_function=cost_function,
        move_function=moves_from_graph(graph),
        start=start,
        end=goal,
        max_iterations=max_iterations,
        tie_breaker=repr,
    )
    return find_path(config)


__all__ = [
    "Metric",
    "SearchGraph",
    "find_graph_path",
    "heuristic_from_attribute",
    "moves_from_graph",
]
