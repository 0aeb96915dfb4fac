"""Knight's tour search over stacked N x N boards."""
from tour3d.common.shared_types import Axes, FailureReason, Position, SearchState
from tour3d.common.validation import ValidationError
from tour3d.search.searchconfig import SearchLimits, SolverConfig
from tour3d.search.result import TourResult
from tour3d.core.api import solve, is_valid_tour

__all__ = [
    'Axes', 'FailureReason', 'Position', 'SearchState', 'ValidationError',
    'SearchLimits', 'SolverConfig', 'TourResult', 'solve', 'is_valid_tour',
]
