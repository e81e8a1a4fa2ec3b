import logging
from itertools import pairwise

import pytest

from astar_engine import (
    PathNotFoundError,
    SearchConfig,
    SearchLimitError,
    astar,
    expand,
    find_path,
    initial_model,
    search_steps,
)


def unit_cost(goal, position):
    return 1.0


def chain_moves(n):
    return {n + 1} if n < 3 else set()


def graph_moves(edges):
    def moves(node):
        return set(edges.get(node, ()))

    return moves


def test_linear_chain():
    config = SearchConfig(cost_function=unit_cost, move_function=chain_moves, start=0, end=3)

    assert find_path(config) == [1, 2, 3]


def test_start_equal_to_end_gives_empty_path():
    config = SearchConfig(cost_function=unit_cost, move_function=chain_moves, start=2, end=2)

    assert find_path(config) == []


def test_no_connecting_edges_raises_path_not_found():
    config = SearchConfig(
        cost_function=unit_cost,
        move_function=lambda n: set(),
        start="a",
        end="b",
    )

    with pytest.raises(PathNotFoundError) as excinfo:
        find_path(config)

    assert excinfo.value.goal == "b"
    assert excinfo.value.evaluated == 1


@pytest.mark.parametrize("tie_breaker", [str, lambda p: -ord(p[0])])
def test_branching_prefers_fewest_hops_over_cost_function(tie_breaker):
    # s -> a -> g is two hops, s -> b -> c -> g is three, but the cost function
    # rates a as the expensive detour.
    edges = {"s": ["a", "b"], "a": ["g"], "b": ["c"], "c": ["g"]}
    weights = {"a": 1.5, "b": 0.5, "c": 0.5}
    config = SearchConfig(
        cost_function=lambda goal, p: weights.get(p, 0.0),
        move_function=graph_moves(edges),
        start="s",
        end="g",
        tie_breaker=tie_breaker,
    )

    assert find_path(config) == ["a", "g"]


def test_direct_neighbour_leading_to_longer_path_is_skipped():
    edges = {
        0: [1, 10],
        1: [2],
        2: [3],
        3: [4],
        4: [99],
        10: [99],
    }
    config = SearchConfig(
        cost_function=unit_cost,
        move_function=graph_moves(edges),
        start=0,
        end=99,
        tie_breaker=int,
    )

    assert find_path(config) == [10, 99]


def test_evaluated_grows_monotonically_and_stays_disjoint():
    edges = {
        "s": ["a", "b"],
        "a": ["c", "s"],
        "b": ["c", "d"],
        "c": ["e"],
        "d": ["e", "b"],
        "e": [],
    }
    steps = list(
        search_steps(unit_cost, graph_moves(edges), "e", initial_model("s"), tie_breaker=str)
    )

    assert steps[-1].current == "e"
    for before, after in pairwise(steps):
        assert before.model.evaluated <= after.model.evaluated
        assert before.current in after.model.evaluated
    for step in steps:
        assert not (step.model.open_set & step.model.evaluated)


def test_expand_skips_evaluated_neighbours():
    model = initial_model("s")
    model = expand("s", lambda n: {"a", "s"}, model)

    assert model.evaluated == frozenset({"s"})
    assert model.open_set == frozenset({"a"})
    assert model.costs["a"] == 1.0

    model = expand("a", lambda n: {"s"}, model)

    assert model.open_set == frozenset()
    assert model.evaluated == frozenset({"s", "a"})


def test_disjoint_graph_terminates_within_reachable_count():
    edges = {0: [1], 1: [2], 2: [0], 10: [11]}
    reachable = 3

    with pytest.raises(PathNotFoundError) as excinfo:
        astar(unit_cost, graph_moves(edges), 11, initial_model(0), max_iterations=reachable)

    assert excinfo.value.evaluated == reachable


def test_unbounded_graph_hits_iteration_limit(caplog):
    config = SearchConfig(
        cost_function=unit_cost,
        move_function=lambda n: {n + 1},
        start=0,
        end=-1,
        max_iterations=25,
    )

    with caplog.at_level(logging.WARNING, logger="astar_engine.search"):
        with pytest.raises(SearchLimitError) as excinfo:
            find_path(config)

    assert excinfo.value.limit == 25
    assert "stopped after 25" in caplog.text


def test_zero_iterations_only_allows_trivial_search():
    trivial = SearchConfig(
        cost_function=unit_cost, move_function=chain_moves, start=0, end=0, max_iterations=0
    )
    assert find_path(trivial) == []

    with pytest.raises(SearchLimitError):
        find_path(trivial.with_endpoints(0, 3))


def test_search_steps_stops_silently_when_frontier_empties():
    steps = list(search_steps(unit_cost, lambda n: set(), "goal", initial_model("start")))

    assert [step.current for step in steps] == ["start"]
