"""Performance monitoring utilities for the inspector.

Context managers for timing update-cycle phases and accumulating their
statistics. Timings go to the performance logger at DEBUG; attaching
handlers is left to the application.
"""

import time
import logging
from contextlib import contextmanager
from collections import deque
from typing import Deque, Dict

from pyqt_inspector.protocols.inspector_config import get_inspector_config

perf_logger = logging.getLogger(get_inspector_config().performance_logger_name)


@contextmanager
def timer(operation_name: str, threshold_ms: float = 0.0, **kwargs):
    """Context manager for timing operations.

    Args:
        operation_name: Name of the operation being timed
        threshold_ms: Only log if operation takes longer than this (in milliseconds)
        **kwargs: Additional context to include in log message

    Example:
        with timer("Write-back", threshold_ms=1.0, changes=len(pending)):
            service.apply_pending(world, pending)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000

        if elapsed_ms >= threshold_ms:
            msg = f"{operation_name}: {elapsed_ms:.2f}ms"
            if kwargs:
                args_str = ", ".join(f"{k}={v}" for k, v in kwargs.items())
                msg += f" ({args_str})"
            perf_logger.debug(msg)


class PerformanceMonitor:
    """Accumulates timing statistics for repeated operations.

    Example:
        monitor = get_monitor("Update cycle")
        with monitor.measure():
            cycle.run_cycle()
        monitor.report()
    """

    def __init__(self, operation_name: str, max_samples: int = 1000):
        self.operation_name = operation_name
        # Only the most recent samples are kept
        self.timings: Deque[float] = deque(maxlen=max_samples)

    @contextmanager
    def measure(self):
        start = time.perf_counter()
        try:
            yield
        finally:
            self.timings.append((time.perf_counter() - start) * 1000)

    @property
    def count(self) -> int:
        return len(self.timings)

    def report(self) -> None:
        if not self.timings:
            perf_logger.debug(f"{self.operation_name}: No measurements")
            return

        count = len(self.timings)
        total_ms = sum(self.timings)
        perf_logger.debug(
            f"{self.operation_name} - "
            f"Count: {count}, "
            f"Total: {total_ms:.2f}ms, "
            f"Avg: {total_ms / count:.2f}ms, "
            f"Min: {min(self.timings):.2f}ms, "
            f"Max: {max(self.timings):.2f}ms"
        )

    def reset(self) -> None:
        self.timings.clear()


# Global monitors for common operations
_monitors: Dict[str, PerformanceMonitor] = {}


def get_monitor(operation_name: str) -> PerformanceMonitor:
    """Get or create a global monitor for an operation."""
    if operation_name not in _monitors:
        _monitors[operation_name] = PerformanceMonitor(operation_name)
    return _monitors[operation_name]


def reset_all_monitors() -> None:
    for monitor in _monitors.values():
        monitor.reset()
