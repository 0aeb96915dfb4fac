# engine.py
"""Backtracking knight's tour search over stacked square boards.

The search is an explicit stack of frames instead of recursion, so depth is
bounded only by the number of cells. Each frame holds one path position, its
Warnsdorf-ranked successors and the index of the next successor to try.
Backtracking is a pop followed by advancing the parent's index.

Every successor of every frame is eventually tried, so EXHAUSTED proves no
tour exists from the start. LIMIT_EXCEEDED proves nothing.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from tour3d.common.shared_types import Position, SearchState
from tour3d.common.coord_utils import PositionIndex
from tour3d.common.performance_utils import create_timing_context, calculate_elapsed_ms
from tour3d.movement.knight import axes_for_layers, get_knight_vectors, generate_knight_moves
from tour3d.search.heuristic import order_by_accessibility
from tour3d.search.result import TourResult, report
from tour3d.search.searchconfig import SearchLimits

logger = logging.getLogger(__name__)

@dataclass
class SearchFrame:
    """One level of the path stack."""
    position: Position
    candidates: Optional[List[Position]] = None  # ranked on first expansion
    next_idx: int = 0

    def has_untried(self) -> bool:
        return self.candidates is not None and self.next_idx < len(self.candidates)

class TourSearchEngine:
    """Single-use search for one (board, start, limits) invocation.

    All mutable search state lives on the instance; nothing is shared between
    engines. `should_stop` is an optional external cancellation hook consulted
    at the limit checkpoint, before every forward push.
    """

    def __init__(self, board_size: int, layer_count: int, start: Position,
                 limits: SearchLimits,
                 clock: Callable[[], float] = time.perf_counter,
                 should_stop: Optional[Callable[[], bool]] = None):
        self.board_size = board_size
        self.layer_count = layer_count
        self.start = start
        self.limits = limits
        self.axes = axes_for_layers(layer_count)
        self.vectors = get_knight_vectors(self.axes)
        self.total_cells = board_size * board_size * layer_count

        self.index = PositionIndex(board_size, layer_count)
        self.path: List[Position] = []
        self.frames: List[SearchFrame] = []
        self.backtracks = 0
        self.state = SearchState.EXPLORING

        self._clock = clock
        self._should_stop = should_stop
        self._start_time: Optional[float] = None
        self.last_checked_ms = 0.0

    # ------------------------------------------------------------------
    # stack primitives - path, frames and index always change together
    # ------------------------------------------------------------------
    def _push(self, pos: Position) -> None:
        self.index.add(pos)
        self.path.append(pos)
        self.frames.append(SearchFrame(pos))

    def _pop(self) -> SearchFrame:
        frame = self.frames.pop()
        self.path.pop()
        self.index.discard(frame.position)
        return frame

    # ------------------------------------------------------------------
    # limits
    # ------------------------------------------------------------------
    def elapsed_ms(self) -> float:
        if self._start_time is None:
            return 0.0
        return calculate_elapsed_ms(self._start_time, self._clock)

    def limit_exceeded(self) -> bool:
        """One clock read per checkpoint; kept in last_checked_ms."""
        self.last_checked_ms = self.elapsed_ms()
        if self.backtracks > self.limits.max_backtracks:
            return True
        if self.last_checked_ms > self.limits.max_ms:
            return True
        return self._should_stop is not None and bool(self._should_stop())

    # ------------------------------------------------------------------
    # state transitions
    # ------------------------------------------------------------------
    def _advance(self, frame: SearchFrame) -> None:
        """Push frame's next ranked successor, or fall back to backtracking."""
        if not frame.has_untried():
            self.state = SearchState.BACKTRACKING
            return
        if self.limit_exceeded():
            logger.warning(
                f"Search budget spent at depth {len(self.path)}/{self.total_cells}: "
                f"backtracks={self.backtracks}, elapsed={self.last_checked_ms:.1f}ms"
            )
            self.state = SearchState.LIMIT_EXCEEDED
            return
        nxt = frame.candidates[frame.next_idx]
        frame.next_idx += 1
        self._push(nxt)
        self.state = SearchState.EXPLORING

    def _explore(self) -> None:
        if len(self.path) == self.total_cells:
            self.state = SearchState.SUCCESS
            return
        frame = self.frames[-1]
        if frame.candidates is None:
            moves = generate_knight_moves(frame.position, self.index, self.vectors)
            frame.candidates = order_by_accessibility(moves, self.index, self.vectors)
        self._advance(frame)

    def _backtrack(self) -> None:
        if len(self.frames) == 1:
            # the start cell is released, not counted as a backtrack
            self._pop()
            self.state = SearchState.EXHAUSTED
            return
        dead_end = self._pop()
        self.backtracks += 1
        if logger.isEnabledFor(logging.DEBUG) and self.backtracks % 10_000 == 0:
            logger.debug(f"backtracks={self.backtracks}, depth={len(self.path)}, "
                         f"last dead end={dead_end.position.as_tuple()}")
        self._advance(self.frames[-1])

    # ------------------------------------------------------------------
    # driver
    # ------------------------------------------------------------------
    def run(self) -> TourResult:
        """Run the search to a terminal state and report it."""
        if self._start_time is not None:
            raise RuntimeError("TourSearchEngine instances are single-use")
        self._start_time = create_timing_context(clock=self._clock)
        logger.info(
            f"Searching {self.board_size}x{self.board_size}x{self.layer_count} "
            f"({self.axes.name.lower()}, {len(self.vectors)} moves) "
            f"from {self.start.as_tuple()}"
        )

        self._push(self.start)
        while not self.state.is_terminal():
            if self.state == SearchState.EXPLORING:
                self._explore()
            else:
                self._backtrack()

        result = report(self.state, self.path, self.backtracks, self.elapsed_ms())
        logger.info(
            f"Search finished: {self.state.name}, cells={len(result.solution)}, "
            f"backtracks={result.backtracks}, elapsed={result.elapsed_ms:.1f}ms"
        )
        return result

__all__ = ['SearchFrame', 'TourSearchEngine']
