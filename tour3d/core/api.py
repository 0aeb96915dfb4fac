
"""
High-Level Tour API.
Validates inputs, applies board policy and runs one search.
"""

import logging
import time
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from tour3d.common.shared_types import FailureReason, Position, PositionLike
from tour3d.common.coord_utils import in_bounds
from tour3d.common.validation import validate_board_config, validate_position
from tour3d.common.performance_utils import create_timing_context, calculate_elapsed_ms
from tour3d.movement.knight import axes_for_layers, get_knight_vectors
from tour3d.search.engine import TourSearchEngine
from tour3d.search.result import TourResult, rejected
from tour3d.search.searchconfig import SearchLimits, SolverConfig

logger = logging.getLogger(__name__)

def solve(board_size: int, layer_count: int, start: PositionLike,
          limits: Optional[Union[SearchLimits, Mapping[str, Any]]] = None,
          config: Optional[SolverConfig] = None,
          clock: Callable[[], float] = time.perf_counter,
          should_stop: Optional[Callable[[], bool]] = None) -> TourResult:
    """
    Find a knight's tour covering every cell of layer_count stacked boards.

    Args:
        board_size: Side length N of each N x N layer
        layer_count: Number of stacked layers (1 gives a planar tour)
        start: First cell of the tour
        limits: SearchLimits or a {max_backtracks, max_ms} mapping; defaults to config.limits
        config: Solver policy; defaults to SolverConfig()
        clock: Time source in seconds
        should_stop: Optional cancellation hook, checked before every forward move

    Returns:
        TourResult - unsolved outcomes carry a reason, they are not raised

    Raises:
        ValidationError: malformed dimensions, start or limits
    """
    config = config if config is not None else SolverConfig()
    board_size, layer_count = validate_board_config(board_size, layer_count)
    start = validate_position(start)
    limits = SearchLimits.coerce(limits, default=config.limits)

    t0 = create_timing_context(clock=clock)
    if not config.is_supported(board_size):
        logger.info(f"Board size {board_size} is excluded by policy")
        return rejected(FailureReason.UNSUPPORTED_BOARD_SIZE, calculate_elapsed_ms(t0, clock))
    if not in_bounds(start, board_size, layer_count):
        logger.info(f"Start {start.as_tuple()} is off the "
                    f"{board_size}x{board_size}x{layer_count} board")
        return rejected(FailureReason.INVALID_START, calculate_elapsed_ms(t0, clock))

    engine = TourSearchEngine(board_size, layer_count, start, limits,
                              clock=clock, should_stop=should_stop)
    return engine.run()

def is_valid_tour(path: Sequence[Position], board_size: int, layer_count: int) -> bool:
    """Check a path is a complete knight's tour: legal moves, full coverage, no repeats."""
    if len(path) != board_size * board_size * layer_count:
        return False
    if any(not in_bounds(p, board_size, layer_count) for p in path):
        return False
    if len(set(path)) != len(path):
        return False
    steps = {tuple(int(c) for c in v) for v in get_knight_vectors(axes_for_layers(layer_count))}
    for a, b in zip(path, path[1:]):
        if (b.x - a.x, b.y - a.y, b.layer - a.layer) not in steps:
            return False
    return True

__all__ = ['solve', 'is_valid_tour']
