# tour3d/search/searchconfig.py

"""Configuration settings for the tour search."""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Mapping, Optional, Union

from tour3d.common.shared_types import DEFAULT_EXCLUDED_BOARD_SIZES
from tour3d.common.validation import (
    ValidationError, validate_dimension, validate_max_backtracks, validate_max_ms,
)

@dataclass(frozen=True)
class SearchLimits:
    """Resource budget for one search."""
    max_backtracks: int = 1_000_000
    max_ms: float = 10_000.0  # wall clock, milliseconds

    def __post_init__(self):
        object.__setattr__(self, "max_backtracks", validate_max_backtracks(self.max_backtracks))
        object.__setattr__(self, "max_ms", validate_max_ms(self.max_ms))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'SearchLimits':
        """Build limits from snake_case or camelCase keys."""
        aliases = {
            "max_backtracks": ("max_backtracks", "maxBacktracks"),
            "max_ms": ("max_ms", "maxMs"),
        }
        kwargs = {}
        for name, keys in aliases.items():
            for key in keys:
                if key in data:
                    kwargs[name] = data[key]
                    break
        unknown = set(data) - {k for keys in aliases.values() for k in keys}
        if unknown:
            raise ValidationError(f"unknown limit keys: {sorted(unknown)}")
        return cls(**kwargs)

    @classmethod
    def coerce(cls, limits: Optional[Union['SearchLimits', Mapping[str, Any]]],
               default: Optional['SearchLimits'] = None) -> 'SearchLimits':
        if limits is None:
            return default if default is not None else cls()
        if isinstance(limits, SearchLimits):
            return limits
        if isinstance(limits, Mapping):
            return cls.from_mapping(limits)
        raise ValidationError(f"limits must be SearchLimits or a mapping, got {type(limits).__name__}")

@dataclass(frozen=True)
class SolverConfig:
    """Solver-wide policy: refused board sizes and default limits."""
    excluded_board_sizes: FrozenSet[int] = field(default=DEFAULT_EXCLUDED_BOARD_SIZES)
    limits: SearchLimits = field(default_factory=SearchLimits)

    def __post_init__(self):
        sizes = frozenset(validate_dimension(s, "excluded board size")
                          for s in self.excluded_board_sizes)
        object.__setattr__(self, "excluded_board_sizes", sizes)
        if not isinstance(self.limits, SearchLimits):
            raise ValidationError("limits must be a SearchLimits instance")

    def is_supported(self, board_size: int) -> bool:
        return board_size not in self.excluded_board_sizes

__all__ = ['SearchLimits', 'SolverConfig']
