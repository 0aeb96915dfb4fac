import math
import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from tour3d import (
    FailureReason, Position, SearchLimits, SolverConfig, ValidationError,
    is_valid_tour, solve,
)
from tour3d.movement.knight import PLANAR_KNIGHT_VECTORS

GENEROUS = {"max_backtracks": 1_000_000, "max_ms": math.inf}

def _deltas(solution):
    return [(b.x - a.x, b.y - a.y, b.layer - a.layer) for a, b in zip(solution, solution[1:])]

def test_classic_8x8_from_corner():
    result = solve(8, 1, {"x": 0, "y": 0, "layer": 0}, GENEROUS)
    assert len(result.solution) == 64
    assert result.solution[0] == Position(0, 0, 0)
    assert result.reason is None
    assert not result.hit_limit
    planar = {(int(dx), int(dy), 0) for dx, dy in PLANAR_KNIGHT_VECTORS}
    assert all(d in planar for d in _deltas(result.solution))
    assert is_valid_tour(result.solution, 8, 1)

def test_6x6_tour_covers_every_cell_once():
    result = solve(6, 1, (0, 0, 0), GENEROUS)
    assert len(result.solution) == 36
    assert len(set(result.solution)) == 36
    assert all(p.layer == 0 for p in result.solution)
    assert is_valid_tour(result.solution, 6, 1)

def test_stacked_8x8x3_tour():
    result = solve(8, 3, Position(7, 7, 0), GENEROUS)
    assert result.solved
    assert len(result.solution) == 192
    assert result.solution[0] == Position(7, 7, 0)
    assert is_valid_tour(result.solution, 8, 3)
    assert any(p.layer == 2 for p in result.solution)

def test_identical_calls_are_deterministic():
    limits = {"max_backtracks": 2000, "max_ms": math.inf}
    a = solve(6, 2, (0, 0, 0), limits)
    b = solve(6, 2, (0, 0, 0), limits)
    assert a.solution == b.solution
    assert a.backtracks == b.backtracks
    assert a.reason == b.reason

@pytest.mark.parametrize("layers", [1, 2, 3])
@pytest.mark.parametrize("start", [(0, 0, 0), (4, 4, 0), (9, 9, 9)])
def test_board_size_5_is_refused(layers, start):
    result = solve(5, layers, start, {"max_backtracks": 0, "max_ms": 0})
    assert result.solution == ()
    assert result.reason == FailureReason.UNSUPPORTED_BOARD_SIZE
    assert result.backtracks == 0
    assert not result.hit_limit

def test_excluded_sizes_come_from_config():
    config = SolverConfig(excluded_board_sizes=frozenset())
    result = solve(5, 1, (0, 0, 0), GENEROUS, config=config)
    assert result.solved
    assert is_valid_tour(result.solution, 5, 1)

    result = solve(6, 1, (0, 0, 0), GENEROUS, config=SolverConfig(excluded_board_sizes=frozenset({6})))
    assert result.reason == FailureReason.UNSUPPORTED_BOARD_SIZE

@pytest.mark.parametrize("start", [
    (8, 0, 0), (0, 8, 0), (0, 0, 1), (-1, 0, 0),
    (2**70, 0, 0), (-2**70, 0, 0), (0, 10**20, 0), (0, 0, -2**63 - 1),
])
def test_off_board_start_is_rejected(start):
    result = solve(8, 1, start, GENEROUS)
    assert result.solution == ()
    assert result.reason == FailureReason.INVALID_START
    assert result.backtracks == 0

def test_zero_budget_on_unsolvable_board():
    result = solve(3, 1, (0, 0, 0), {"maxBacktracks": 0, "maxMs": math.inf})
    assert result.hit_limit
    assert result.reason == FailureReason.LIMIT_EXCEEDED

def test_config_limits_apply_when_omitted():
    config = SolverConfig(limits=SearchLimits(max_backtracks=0, max_ms=math.inf))
    result = solve(3, 1, (0, 0, 0), config=config)
    assert result.reason == FailureReason.LIMIT_EXCEEDED

def test_elapsed_is_non_negative():
    assert solve(6, 1, (0, 0, 0), GENEROUS).elapsed_ms >= 0

@pytest.mark.parametrize("board_size, layer_count", [
    ("8", 1), (8.0, 1), (0, 1), (-3, 1), (True, 1), (8, 0), (8, None),
])
def test_bad_dimensions_raise(board_size, layer_count):
    with pytest.raises(ValidationError):
        solve(board_size, layer_count, (0, 0, 0), GENEROUS)

@pytest.mark.parametrize("start", [
    (0, 0), (0, 0, 0, 0), "000", {"x": 0, "y": 0}, (0.0, 0, 0), (0, None, 0), 7,
])
def test_malformed_start_raises(start):
    with pytest.raises(ValidationError):
        solve(8, 1, start, GENEROUS)

@pytest.mark.parametrize("limits", [
    {"max_backtracks": -1}, {"max_ms": -5}, {"max_backtracks": 1.5},
    {"max_ms": "fast"}, {"budget": 3}, 42,
])
def test_bad_limits_raise(limits):
    with pytest.raises(ValidationError):
        solve(8, 1, (0, 0, 0), limits)

def test_is_valid_tour_rejects_broken_paths():
    result = solve(6, 1, (0, 0, 0), GENEROUS)
    path = list(result.solution)
    assert not is_valid_tour(path[:-1], 6, 1)
    swapped = path[:]
    swapped[1], swapped[2] = swapped[2], swapped[1]
    assert not is_valid_tour(swapped, 6, 1)
    assert not is_valid_tour(path[:-1] + [path[0]], 6, 1)

def test_numpy_start_is_accepted():
    import numpy as np
    result = solve(6, 1, np.array([0, 0, 0], dtype=np.int16), GENEROUS)
    assert result.solution[0] == Position(0, 0, 0)
    with pytest.raises(ValidationError):
        solve(6, 1, np.array([0, 0]), GENEROUS)
