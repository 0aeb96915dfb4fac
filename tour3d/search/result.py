"""Terminal outcome of a tour search."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from tour3d.common.shared_types import FailureReason, Position, SearchState

_REASON_BY_STATE = {
    SearchState.EXHAUSTED: FailureReason.EXHAUSTED,
    SearchState.LIMIT_EXCEEDED: FailureReason.LIMIT_EXCEEDED,
}

@dataclass(frozen=True)
class TourResult:
    """Stable result record handed to rendering and stats consumers.

    solution is empty unless the tour is complete, in which case reason is None.
    """
    solution: Tuple[Position, ...] = ()
    backtracks: int = 0
    elapsed_ms: float = 0.0
    hit_limit: bool = False
    reason: Optional[FailureReason] = None

    @property
    def solved(self) -> bool:
        return bool(self.solution)

    @property
    def total_moves(self) -> int:
        return len(self.solution) - 1 if self.solution else 0

    def to_dict(self) -> dict:
        return {
            "solution": [p.to_dict() for p in self.solution],
            "backtracks": self.backtracks,
            "elapsed_ms": self.elapsed_ms,
            "hit_limit": self.hit_limit,
            "reason": self.reason.value if self.reason is not None else None,
        }

def rejected(reason: FailureReason, elapsed_ms: float = 0.0) -> TourResult:
    """Unsolved result for an input refused before any search work."""
    return TourResult(solution=(), backtracks=0, elapsed_ms=elapsed_ms,
                      hit_limit=False, reason=reason)

def report(state: SearchState, path: Sequence[Position], backtracks: int,
           elapsed_ms: float) -> TourResult:
    """Package a terminal search state."""
    if not state.is_terminal():
        raise ValueError(f"cannot report non-terminal state {state.name}")
    if state == SearchState.SUCCESS:
        return TourResult(solution=tuple(path), backtracks=backtracks,
                          elapsed_ms=elapsed_ms, hit_limit=False, reason=None)
    return TourResult(solution=(), backtracks=backtracks, elapsed_ms=elapsed_ms,
                      hit_limit=state == SearchState.LIMIT_EXCEEDED,
                      reason=_REASON_BY_STATE[state])

__all__ = ['TourResult', 'rejected', 'report']
