"""Movement tables and successor generation."""
from tour3d.movement.knight import (
    PLANAR_KNIGHT_VECTORS,
    SPATIAL_KNIGHT_VECTORS,
    axes_for_layers,
    get_knight_vectors,
    generate_knight_moves,
)

__all__ = [
    'PLANAR_KNIGHT_VECTORS', 'SPATIAL_KNIGHT_VECTORS',
    'axes_for_layers', 'get_knight_vectors', 'generate_knight_moves',
]
