"""
Centralized constants and types for the 3D knight's tour solver.
Single source of truth for all type definitions and constants.
"""

import numpy as np
from enum import Enum, IntEnum
from dataclasses import dataclass
from typing import Tuple, Union, Mapping, Sequence

class Axes(IntEnum):
    """Board arity tag - number of spatial axes a knight may move along."""
    PLANAR = 2
    SPATIAL = 3

class SearchState(IntEnum):
    """States of the backtracking search state machine."""
    EXPLORING = 0
    BACKTRACKING = 1
    SUCCESS = 2
    EXHAUSTED = 3
    LIMIT_EXCEEDED = 4

    def is_terminal(self) -> bool:
        """Check if the search stops in this state."""
        return self >= SearchState.SUCCESS

class FailureReason(str, Enum):
    """Why a TourResult carries no solution."""
    UNSUPPORTED_BOARD_SIZE = "unsupported_board_size"
    INVALID_START = "invalid_start"
    EXHAUSTED = "exhausted"
    LIMIT_EXCEEDED = "limit_exceeded"

@dataclass(frozen=True)
class Position:
    """A single cell: column x, row y and stacked board layer."""
    x: int
    y: int
    layer: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.layer)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "layer": self.layer}

# Core data types
COORD_DTYPE = np.int16
INDEX_DTYPE = np.int32
BOOL_DTYPE = np.bool_

# Input type hints
PositionLike = Union[Position, Sequence[int], Mapping[str, int]]

# Time conversion (perf_counter seconds -> milliseconds)
MS_TO_S = 1000.0

# Board sizes refused by product policy
DEFAULT_EXCLUDED_BOARD_SIZES = frozenset({5})

# File letters for chess notation
FILE_LETTERS = "abcdefghijklmnopqrstuvwxyz"

__all__ = [
    'Axes', 'SearchState', 'FailureReason', 'Position', 'PositionLike',
    'COORD_DTYPE', 'INDEX_DTYPE', 'BOOL_DTYPE', 'MS_TO_S',
    'DEFAULT_EXCLUDED_BOARD_SIZES', 'FILE_LETTERS',
]
