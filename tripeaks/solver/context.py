"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import BoardState

DEFAULT_MAX_ITERATIONS = 10000
DEFAULT_TIME_BUDGET_SEC = 5.0


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing board state, budgets,
    cancellation, and progress reporting.

    Attributes:
        board: Board state to solve
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds
        max_iterations: Cap on distinct states visited
        start_time: When computation started (time.monotonic)
        progress_callback: Optional callback for progress updates
    """
    board: BoardState
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: float = DEFAULT_TIME_BUDGET_SEC
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    start_time: float = field(default_factory=time.monotonic)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if time.monotonic() - self.start_time > self.timeout_sec:
            return True
        return False

    def cancel(self) -> None:
        """Ask the running strategy to stop at its next check."""
        self.cancel_flag.set()

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to a listener.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)
