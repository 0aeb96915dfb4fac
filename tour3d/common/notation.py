"""Chess notation for tour playback - "L<layer>:<file><rank>", e.g. L1:a1."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from tour3d.common.shared_types import FILE_LETTERS, Position
from tour3d.common.validation import ValidationError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ChessMove:
    """A single tour step in notation form."""
    move_number: int  # 1-indexed
    from_square: str
    to_square: str
    formatted: str

def x_to_file(x: int, board_size: int) -> str:
    if x < 0 or x >= board_size:
        raise ValidationError(f"Invalid x coordinate: {x}. Must be between 0 and {board_size - 1}")
    if x >= len(FILE_LETTERS):
        raise ValidationError(f"Board size too large: x={x} exceeds available file letters")
    return FILE_LETTERS[x]

def y_to_rank(y: int, board_size: int) -> str:
    """y=0 is rank 1."""
    if y < 0 or y >= board_size:
        raise ValidationError(f"Invalid y coordinate: {y}. Must be between 0 and {board_size - 1}")
    return str(y + 1)

def layer_to_notation(layer: int, layer_count: int) -> str:
    if layer < 0 or layer >= layer_count:
        raise ValidationError(f"Invalid layer: {layer}. Must be between 0 and {layer_count - 1}")
    return f"L{layer + 1}"

def position_to_notation(pos: Position, board_size: int, layer_count: int) -> str:
    if pos is None:
        raise ValidationError("Position cannot be None")
    layer = layer_to_notation(pos.layer, layer_count)
    return f"{layer}:{x_to_file(pos.x, board_size)}{y_to_rank(pos.y, board_size)}"

def format_move(move_number: int, from_pos: Position, to_pos: Position,
                board_size: int, layer_count: int) -> ChessMove:
    from_square = position_to_notation(from_pos, board_size, layer_count)
    to_square = position_to_notation(to_pos, board_size, layer_count)
    return ChessMove(
        move_number=move_number,
        from_square=from_square,
        to_square=to_square,
        formatted=f"{move_number}. {from_square} → {to_square}",
    )

def format_move_list(path: Sequence[Position], board_size: int, layer_count: int) -> List[ChessMove]:
    """Notation for every step of path. Steps that cannot be formatted are skipped."""
    if not path or len(path) < 2:
        return []
    moves: List[ChessMove] = []
    for i in range(len(path) - 1):
        try:
            moves.append(format_move(i + 1, path[i], path[i + 1], board_size, layer_count))
        except ValidationError as e:
            logger.error(f"format_move_list: failed to format move {i + 1}: {e}")
    return moves

__all__ = [
    'ChessMove', 'x_to_file', 'y_to_rank', 'layer_to_notation',
    'position_to_notation', 'format_move', 'format_move_list',
]
