# heuristic.py
"""Warnsdorf move ordering.

Candidates with fewer onward moves are tried first. Equal degrees keep the
move-table order, so a given board and start always rank identically.
"""
from __future__ import annotations

from typing import List, Sequence

import numpy as np
from numba import njit

from tour3d.common.shared_types import INDEX_DTYPE, Position
from tour3d.common.coord_utils import PositionIndex

@njit(cache=True)
def _onward_degree_kernel(grid, x, y, z, vectors, size, layers):
    """Count in-bounds, unvisited cells one knight move away from (x, y, z)."""
    count = 0
    for k in range(vectors.shape[0]):
        tx = x + vectors[k, 0]
        ty = y + vectors[k, 1]
        tz = z + vectors[k, 2]
        if tx < 0 or tx >= size or ty < 0 or ty >= size or tz < 0 or tz >= layers:
            continue
        if not grid[tx, ty, tz]:
            count += 1
    return count

def onward_degree(candidate: Position, index: PositionIndex, vectors: np.ndarray) -> int:
    """Onward degree of candidate, counted with candidate itself marked visited.

    The grid is restored before returning.
    """
    grid = index.grid
    x, y, z = candidate.x, candidate.y, candidate.layer
    was_visited = grid[x, y, z]
    grid[x, y, z] = True
    try:
        return int(_onward_degree_kernel(grid, x, y, z, vectors,
                                         index.board_size, index.layer_count))
    finally:
        grid[x, y, z] = was_visited

def accessibility(candidates: Sequence[Position], index: PositionIndex,
                  vectors: np.ndarray) -> np.ndarray:
    """Onward degree of every candidate, in candidate order."""
    degrees = np.empty(len(candidates), dtype=INDEX_DTYPE)
    for i, candidate in enumerate(candidates):
        degrees[i] = onward_degree(candidate, index, vectors)
    return degrees

def order_by_accessibility(candidates: Sequence[Position], index: PositionIndex,
                           vectors: np.ndarray) -> List[Position]:
    """Sort candidates ascending by onward degree (stable)."""
    if len(candidates) < 2:
        return list(candidates)
    degrees = accessibility(candidates, index, vectors)
    order = np.argsort(degrees, kind='stable')
    return [candidates[i] for i in order]

__all__ = ['onward_degree', 'accessibility', 'order_by_accessibility']
