"""Generic A* search over caller-supplied positions."""

from .config import SearchConfig
from .errors import (
    EmptyFrontierError,
    FrontierError,
    MissingCostError,
    PathNotFoundError,
    SearchLimitError,
)
from .frontier import cheapest_open
from .graphs import find_graph_path, heuristic_from_attribute, moves_from_graph
from .model import Model, initial_model
from .pathfinding import PathFinder
from .reconstruct import reconstruct_path
from .relax import update_cost
from .search import SearchStep, astar, expand, find_path, search_steps

__version__ = "0.1.0"

__all__ = [
    "EmptyFrontierError",
    "FrontierError",
    "MissingCostError",
    "Model",
    "PathFinder",
    "PathNotFoundError",
    "SearchConfig",
    "SearchLimitError",
    "SearchStep",
    "astar",
    "cheapest_open",
    "expand",
    "find_graph_path",
    "find_path",
    "heuristic_from_attribute",
    "initial_model",
    "moves_from_graph",
    "reconstruct_path",
    "search_steps",
    "update_cost",
]
