"""
Core utilities.

Timing helpers used by the update cycle.
"""

from .performance_monitor import timer, PerformanceMonitor, get_monitor, reset_all_monitors

__all__ = [
    "timer",
    "PerformanceMonitor",
    "get_monitor",
    "reset_all_monitors",
]
