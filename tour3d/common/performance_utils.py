# Timing utilities for the tour solver
import time
from typing import Callable, Optional
from ..common.shared_types import MS_TO_S

def create_timing_context(start_time: Optional[float] = None,
                          clock: Callable[[], float] = time.perf_counter) -> float:
    """
    Create a standardized timing context.

    Args:
        start_time: Optional custom start time
        clock: Time source in seconds

    Returns:
        float: The start time to use for timing
    """
    return start_time if start_time is not None else clock()

def calculate_elapsed_ms(start_time: float,
                         clock: Callable[[], float] = time.perf_counter) -> float:
    """
    Calculate elapsed time in milliseconds using MS_TO_S constant.

    Args:
        start_time: Start time from the same clock
        clock: Time source in seconds

    Returns:
        float: Elapsed time in milliseconds, never negative
    """
    return max(0.0, (clock() - start_time) * MS_TO_S)
