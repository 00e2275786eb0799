"""
Field Change Dispatcher.

Collects value changes produced by edit widgets into one pending queue that
the write-back pass drains once per update cycle. Widgets never touch the
store themselves; they only dispatch events here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from pyqt_inspector.reflection.field_path import FieldPath

logger = logging.getLogger(__name__)

# Debug flag for verbose dispatcher logging
DEBUG_DISPATCHER = False


@dataclass(frozen=True)
class DragValueChanged:
    """Immutable event representing a new value for one leaf."""
    source: Any              # Widget (or controller) that produced the value
    field_path: FieldPath    # Leaf the value belongs to
    new_value: float         # Clamped value, not yet coerced to the leaf's kind


class PendingValueChanges:
    """Append-only queue of changes, drained by exactly one write-back pass."""

    def __init__(self):
        self._changes: List[DragValueChanged] = []

    def push(self, change: DragValueChanged) -> None:
        self._changes.append(change)

    def drain(self) -> List[DragValueChanged]:
        """Remove and return all queued changes in enqueue order."""
        changes, self._changes = self._changes, []
        return changes

    def __len__(self) -> int:
        return len(self._changes)

    def __iter__(self):
        return iter(list(self._changes))


ChangeListener = Callable[[DragValueChanged], None]


class FieldChangeDispatcher:
    """Routes change events into a pending queue and notifies listeners.

    One dispatcher per inspector window.
    """

    def __init__(self, pending: Optional[PendingValueChanges] = None):
        self.pending = pending if pending is not None else PendingValueChanges()
        self._listeners: List[ChangeListener] = []
        self._dispatching_sources: set = set()

    def add_listener(self, listener: ChangeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, event: DragValueChanged) -> None:
        """Queue a change event."""
        if DEBUG_DISPATCHER:
            logger.info(f"DISPATCH: {event.field_path} = {event.new_value!r}")

        # Reentrancy guard: a listener reacting to this event must not
        # dispatch again on behalf of the same source
        source_key = id(event.source)
        if source_key in self._dispatching_sources:
            if DEBUG_DISPATCHER:
                logger.warning(f"DISPATCH BLOCKED: {event.field_path} already dispatching (reentrancy guard)")
            return
        self._dispatching_sources.add(source_key)

        try:
            self.pending.push(event)
            logger.debug(f"Queued change for {event.field_path} ({len(self.pending)} pending)")
            for listener in list(self._listeners):
                listener(event)
            if DEBUG_DISPATCHER:
                logger.info(f"  Notified {len(self._listeners)} listeners")
        finally:
            self._dispatching_sources.discard(source_key)
