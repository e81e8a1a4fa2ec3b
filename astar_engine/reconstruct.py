from __future__ import annotations

from typing import Mapping

from .model import P


def reconstruct_path(came_from: Mapping[P, P], goal: P) -> list[P]:
    """Walk predecessor links back from ``goal`` and return the forward path.

    The root of the chain (normally the start) is not part of the result, so a
    ``goal`` without a predecessor yields an empty list.
    """

    rev: list[P] = []
    node = goal
    while node in came_from:
        rev.append(node)
        node = came_from[node]
    rev.reverse()
    return rev
