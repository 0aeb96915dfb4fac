"""Coordinate utilities - bounds checks, flat indexing and the visited index.

Flat index layout matches the board grid: idx = x + size * y + size^2 * layer.
Only in-bounds coordinates are ever encoded, which keeps the encoding
collision-free (negative or oversized coordinates are rejected, never wrapped).
"""

import numpy as np
from numba import njit

from tour3d.common.shared_types import BOOL_DTYPE, Position
from tour3d.common.validation import ValidationError, format_bounds_error

# =============================================================================
# SCALAR KERNELS
# =============================================================================

@njit(cache=True)
def in_bounds_scalar(x: int, y: int, z: int, size: int, layers: int) -> bool:
    """Scalar bounds check for an (x, y, layer) triple."""
    return 0 <= x < size and 0 <= y < size and 0 <= z < layers

@njit(cache=True)
def coord_to_idx_scalar(x: int, y: int, z: int, size: int) -> int:
    """Scalar coordinate to flat index conversion."""
    return x + size * y + size * size * z

def in_bounds(pos: Position, board_size: int, layer_count: int) -> bool:
    """Bounds check for arbitrary Python ints, including ones wider than int64."""
    return (0 <= pos.x < board_size and 0 <= pos.y < board_size
            and 0 <= pos.layer < layer_count)

def idx_to_position(idx: int, board_size: int) -> Position:
    """Inverse of coord_to_idx_scalar."""
    area = board_size * board_size
    layer, remainder = divmod(int(idx), area)
    y, x = divmod(remainder, board_size)
    return Position(x, y, layer)

# =============================================================================
# POSITION INDEX
# =============================================================================

class PositionIndex:
    """O(1) visited-membership index over one board.

    Backed by a boolean grid of shape (board_size, board_size, layer_count);
    the grid is what the numba kernels read directly.
    """

    def __init__(self, board_size: int, layer_count: int):
        self.board_size = board_size
        self.layer_count = layer_count
        self.grid = np.zeros((board_size, board_size, layer_count), dtype=BOOL_DTYPE)
        self._count = 0

    def _require_in_bounds(self, pos: Position) -> None:
        if not in_bounds(pos, self.board_size, self.layer_count):
            raise ValidationError(format_bounds_error(pos, self.board_size, self.layer_count))

    def key(self, pos: Position) -> int:
        """Collision-free flat key for an in-bounds position."""
        self._require_in_bounds(pos)
        return int(coord_to_idx_scalar(pos.x, pos.y, pos.layer, self.board_size))

    def add(self, pos: Position) -> None:
        self._require_in_bounds(pos)
        if self.grid[pos.x, pos.y, pos.layer]:
            raise ValidationError(f"{pos.as_tuple()} is already visited")
        self.grid[pos.x, pos.y, pos.layer] = True
        self._count += 1

    def discard(self, pos: Position) -> None:
        self._require_in_bounds(pos)
        if not self.grid[pos.x, pos.y, pos.layer]:
            raise ValidationError(f"{pos.as_tuple()} is not visited")
        self.grid[pos.x, pos.y, pos.layer] = False
        self._count -= 1

    def __contains__(self, pos: Position) -> bool:
        if not in_bounds(pos, self.board_size, self.layer_count):
            return False
        return bool(self.grid[pos.x, pos.y, pos.layer])

    def __len__(self) -> int:
        return self._count

__all__ = [
    'in_bounds_scalar', 'coord_to_idx_scalar', 'in_bounds', 'idx_to_position',
    'PositionIndex',
]
