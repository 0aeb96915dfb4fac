# validation.py
"""Contract validation for solver inputs.

Everything here guards against caller bugs. A failing check raises
ValidationError; routine search outcomes never pass through this module.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Mapping, Sequence

import numpy as np

from tour3d.common.shared_types import Position

# ==============================================================================
# PRIMARY EXCEPTION CLASS
# ==============================================================================

class ValidationError(Exception):
    """Primary exception for all contract violations."""
    pass

# ==============================================================================
# SCALAR CHECKS
# ==============================================================================

def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid dimension or coordinate
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)

def validate_dimension(value: Any, name: str) -> int:
    """Validate a board dimension (board size or layer count)."""
    if not _is_int(value):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{name} must be at least 1, got {value}")
    return int(value)

def validate_board_config(board_size: Any, layer_count: Any) -> tuple[int, int]:
    return (validate_dimension(board_size, "board_size"),
            validate_dimension(layer_count, "layer_count"))

def validate_max_backtracks(value: Any) -> int:
    if not _is_int(value):
        raise ValidationError(f"max_backtracks must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"max_backtracks cannot be negative, got {value}")
    return int(value)

def validate_max_ms(value: Any) -> float:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise ValidationError(f"max_ms must be a number, got {type(value).__name__}")
    if math.isnan(value) or value < 0:
        raise ValidationError(f"max_ms must be a non-negative number, got {value}")
    return float(value)

# ==============================================================================
# POSITION NORMALIZATION
# ==============================================================================

def validate_position(pos: Any) -> Position:
    """Normalize a Position, an (x, y, layer) sequence or array, or an {x, y, layer} mapping.

    Only the shape and the integer type of each coordinate are checked here.
    Whether the cell lies on the board is a search policy, not a contract.
    """
    if isinstance(pos, Position):
        coords = (pos.x, pos.y, pos.layer)
    elif isinstance(pos, Mapping):
        missing = [k for k in ("x", "y", "layer") if k not in pos]
        if missing:
            raise ValidationError(f"position mapping is missing keys: {missing}")
        coords = (pos["x"], pos["y"], pos["layer"])
    elif isinstance(pos, np.ndarray):
        if pos.shape != (3,):
            raise ValidationError(f"position array must have shape (3,), got {pos.shape}")
        coords = tuple(pos.tolist())
    elif isinstance(pos, Sequence) and not isinstance(pos, (str, bytes)):
        if len(pos) != 3:
            raise ValidationError(f"position must have exactly 3 elements, got {len(pos)}")
        coords = tuple(pos)
    else:
        raise ValidationError(f"position must be a Position, sequence or mapping, got {type(pos).__name__}")

    for name, value in zip(("x", "y", "layer"), coords):
        if not _is_int(value):
            raise ValidationError(f"position.{name} must be an integer, got {value!r}")

    return Position(int(coords[0]), int(coords[1]), int(coords[2]))

def format_bounds_error(pos: Position, board_size: int, layer_count: int) -> str:
    return (f"{pos.as_tuple()} lies outside "
            f"[0,{board_size})x[0,{board_size})x[0,{layer_count})")

__all__ = [
    'ValidationError', 'validate_dimension', 'validate_board_config',
    'validate_max_backtracks', 'validate_max_ms', 'validate_position',
    'format_bounds_error',
]
