"""
Read/write phase guard for the shared object store.

One update cycle runs its phases strictly one after another: traversal reads
the store, write-back mutates it, and the two never interleave. The guard
turns that ordering into an enforced protocol instead of a convention.

Usage:
    guard = PhaseGuard()
    with guard.read():
        rows = extract_fields(component)
    with guard.write():
        apply_change(...)
"""

import logging
from contextlib import contextmanager
from enum import Enum

from pyqt_inspector.store.exceptions import PhaseViolationError

logger = logging.getLogger(__name__)


class AccessPhase(Enum):
    IDLE = "idle"
    READ = "read"
    WRITE = "write"


class PhaseGuard:
    """Tracks the active access phase. Reads may nest; writes are exclusive."""

    def __init__(self):
        self._phase = AccessPhase.IDLE
        self._read_depth = 0

    @property
    def phase(self) -> AccessPhase:
        return self._phase

    @contextmanager
    def read(self):
        if self._phase is AccessPhase.WRITE:
            raise PhaseViolationError("Cannot enter a read phase while a write phase is active")
        self._phase = AccessPhase.READ
        self._read_depth += 1
        try:
            yield self
        finally:
            self._read_depth -= 1
            if self._read_depth == 0:
                self._phase = AccessPhase.IDLE

    @contextmanager
    def write(self):
        if self._phase is not AccessPhase.IDLE:
            raise PhaseViolationError(
                f"Cannot enter a write phase while the {self._phase.value} phase is active"
            )
        self._phase = AccessPhase.WRITE
        logger.debug("Entered write phase")
        try:
            yield self
        finally:
            self._phase = AccessPhase.IDLE
            logger.debug("Left write phase")

    def require_write(self, operation: str) -> None:
        """Fail loudly if a mutating operation runs outside a write phase."""
        if self._phase is not AccessPhase.WRITE:
            raise PhaseViolationError(f"{operation} requires an active write phase")

    def require_not_writing(self, operation: str) -> None:
        """Fail loudly if a read-only operation runs inside a write phase."""
        if self._phase is AccessPhase.WRITE:
            raise PhaseViolationError(f"{operation} cannot run during a write phase")
