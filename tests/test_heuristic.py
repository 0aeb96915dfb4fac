import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tour3d.common.shared_types import Axes, Position
from tour3d.common.coord_utils import PositionIndex
from tour3d.movement.knight import get_knight_vectors
from tour3d.search.heuristic import onward_degree, accessibility, order_by_accessibility

PLANAR = get_knight_vectors(Axes.PLANAR)
SPATIAL = get_knight_vectors(Axes.SPATIAL)

def test_onward_degree_on_empty_board():
    index = PositionIndex(8, 1)
    assert onward_degree(Position(0, 0, 0), index, PLANAR) == 2
    assert onward_degree(Position(1, 0, 0), index, PLANAR) == 3
    assert onward_degree(Position(3, 3, 0), index, PLANAR) == 8

def test_onward_degree_ignores_visited():
    index = PositionIndex(8, 1)
    index.add(Position(2, 1, 0))
    assert onward_degree(Position(0, 0, 0), index, PLANAR) == 1

def test_onward_degree_restores_grid():
    index = PositionIndex(8, 1)
    onward_degree(Position(3, 3, 0), index, PLANAR)
    assert not index.grid.any()
    assert len(index) == 0

def test_spatial_degree_counts_layer_moves():
    index = PositionIndex(8, 3)
    # from the middle layer every resting-axis group contributes
    assert onward_degree(Position(3, 3, 1), index, SPATIAL) == 8 + 4 + 4

def test_ascending_sort():
    index = PositionIndex(8, 1)
    ranked = order_by_accessibility(
        [Position(3, 3, 0), Position(1, 0, 0), Position(0, 0, 0)], index, PLANAR)
    assert ranked == [Position(0, 0, 0), Position(1, 0, 0), Position(3, 3, 0)]

def test_ties_keep_generation_order():
    index = PositionIndex(8, 1)
    corners = [Position(7, 7, 0), Position(0, 0, 0), Position(0, 7, 0), Position(7, 0, 0)]
    assert list(accessibility(corners, index, PLANAR)) == [2, 2, 2, 2]
    assert order_by_accessibility([Position(3, 3, 0)] + corners, index, PLANAR) == corners + [Position(3, 3, 0)]
    assert order_by_accessibility(list(reversed(corners)), index, PLANAR) == list(reversed(corners))

def test_trivial_inputs():
    index = PositionIndex(8, 1)
    assert order_by_accessibility([], index, PLANAR) == []
    assert order_by_accessibility([Position(1, 1, 0)], index, PLANAR) == [Position(1, 1, 0)]
