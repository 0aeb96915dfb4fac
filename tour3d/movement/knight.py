"""Knight movement tables - generalized L-shaped leaper for 2 or 3 axes.

One axis moves by 2, exactly one other axis by 1, every remaining axis by 0.
Both tables are written out in full so their contents can be checked by
direct enumeration. Row order is the tie-break order of the search.
"""

import numpy as np
from typing import List

from tour3d.common.shared_types import COORD_DTYPE, Axes, Position
from tour3d.common.coord_utils import PositionIndex, in_bounds_scalar

# ------------------------------------------------------------------
# 8 planar knight offsets (dx, dy)
# ------------------------------------------------------------------
PLANAR_KNIGHT_VECTORS = np.array([
    [2, 1],
    [2, -1],
    [-2, 1],
    [-2, -1],
    [1, 2],
    [1, -2],
    [-1, 2],
    [-1, -2],
], dtype=COORD_DTYPE)

# ------------------------------------------------------------------
# 24 spatial knight offsets (dx, dy, dlayer)
# grouped by the resting axis: x, then y, then layer
# ------------------------------------------------------------------
SPATIAL_KNIGHT_VECTORS = np.array([
    # x at rest
    [0, 2, 1],
    [0, 2, -1],
    [0, -2, 1],
    [0, -2, -1],
    [0, 1, 2],
    [0, -1, 2],
    [0, 1, -2],
    [0, -1, -2],
    # y at rest
    [2, 0, 1],
    [2, 0, -1],
    [-2, 0, 1],
    [-2, 0, -1],
    [1, 0, 2],
    [-1, 0, 2],
    [1, 0, -2],
    [-1, 0, -2],
    # layer at rest
    [2, 1, 0],
    [2, -1, 0],
    [-2, 1, 0],
    [-2, -1, 0],
    [1, 2, 0],
    [-1, 2, 0],
    [1, -2, 0],
    [-1, -2, 0],
], dtype=COORD_DTYPE)

KNIGHT_VECTORS_BY_AXES = {
    Axes.PLANAR: PLANAR_KNIGHT_VECTORS,
    Axes.SPATIAL: SPATIAL_KNIGHT_VECTORS,
}

def axes_for_layers(layer_count: int) -> Axes:
    """A single layer degrades to the planar knight."""
    return Axes.PLANAR if layer_count == 1 else Axes.SPATIAL

def get_knight_vectors(axes: Axes) -> np.ndarray:
    """Move table for the given arity, lifted to (dx, dy, dlayer) columns.

    Planar vectors get a zero layer column so the search works on one shape.
    """
    vectors = KNIGHT_VECTORS_BY_AXES[Axes(axes)]
    if vectors.shape[1] == 3:
        return vectors
    lifted = np.zeros((vectors.shape[0], 3), dtype=COORD_DTYPE)
    lifted[:, :2] = vectors
    return lifted

def generate_knight_moves(pos: Position, index: PositionIndex, vectors: np.ndarray) -> List[Position]:
    """All in-bounds, unvisited knight successors of pos, in table order."""
    moves: List[Position] = []
    size, layers, grid = index.board_size, index.layer_count, index.grid
    for dx, dy, dz in vectors:
        tx, ty, tz = pos.x + int(dx), pos.y + int(dy), pos.layer + int(dz)
        if not in_bounds_scalar(tx, ty, tz, size, layers):
            continue
        if grid[tx, ty, tz]:
            continue
        moves.append(Position(tx, ty, tz))
    return moves

__all__ = [
    'PLANAR_KNIGHT_VECTORS', 'SPATIAL_KNIGHT_VECTORS', 'KNIGHT_VECTORS_BY_AXES',
    'axes_for_layers', 'get_knight_vectors', 'generate_knight_moves',
]
