from __future__ import annotations

from collections import ChainMap
from dataclasses import replace

from .model import Model, P
from .reconstruct import reconstruct_path


def update_cost(current: P, neighbour: P, model: Model[P]) -> Model[P]:
    """Route ``neighbour`` through ``current`` if that shortens its path.

    Path length is measured in hops along the predecessor chain, independent
    of the cost function that orders the frontier. Returns ``model`` itself
    when the recorded path is at least as short.
    """

    tentative = ChainMap({neighbour: current}, model.came_from)
    distance_to = float(len(reconstruct_path(tentative, neighbour)))

    previous = model.costs.get(neighbour)
    if previous is not None and distance_to >= previous:
        return model

    costs = dict(model.costs)
    costs[neighbour] = distance_to
    came_from = dict(model.came_from)
    came_from[neighbour] = current
    return replace(model, costs=costs, came_from=came_from)
