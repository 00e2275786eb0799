"""
Drag-value edit state machine.

A draggable number field in the style of ImGui's DragFloat:
1. Horizontal dragging increments/decrements the value
2. Double-clicking enters text editing for direct entry

States: Idle -> Dragging -> Idle, and Idle/Dragging -> Editing -> Idle
(gated by double-click). The controller is Qt-free; DragValueWidget only
translates Qt events into controller calls.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional

from pyqt_inspector.reflection.field_path import FieldPath
from pyqt_inspector.services.field_change_dispatcher import DragValueChanged

logger = logging.getLogger(__name__)

# Double-click detection threshold (milliseconds)
DOUBLE_CLICK_THRESHOLD_MS = 300

EDIT_CHARACTERS = frozenset("0123456789.-+eE")
EDIT_CURSOR = "|"


@dataclass(frozen=True)
class DragValue:
    """Configuration of one drag-value widget."""
    field_path: FieldPath
    drag_speed: float = 0.1
    precision: int = 2
    min: Optional[float] = None
    max: Optional[float] = None
    double_click_threshold_ms: int = DOUBLE_CLICK_THRESHOLD_MS

    def clamp(self, value: float) -> float:
        if self.min is not None:
            value = max(value, self.min)
        if self.max is not None:
            value = min(value, self.max)
        return value

    def format(self, value: float) -> str:
        return f"{value:.{self.precision}f}"


@dataclass
class DragValueDragState:
    """Per-widget interaction state. Discarded with the widget."""
    dragging: bool = False
    start_value: float = 0.0
    editing: bool = False
    edit_buffer: str = ""
    last_click_time: Optional[int] = None  # monotonic nanoseconds
    original_value: float = 0.0


class EditKey(Enum):
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    CHARACTER = "character"
    OTHER = "other"


@dataclass(frozen=True)
class KeyInput:
    key: EditKey
    text: str = ""
    pressed: bool = True


class InputFocus:
    """
    Holds at most one focused edit controller.

    Acquiring focus for a controller releases the previous holder, which
    leaves editing as if Escape were pressed.
    """

    def __init__(self):
        self._holder: Optional['DragValueController'] = None

    @property
    def holder(self) -> Optional['DragValueController']:
        return self._holder

    def acquire(self, controller: 'DragValueController') -> None:
        previous = self._holder
        if previous is not None and previous is not controller:
            self._holder = None
            previous.on_focus_lost()
        self._holder = controller

    def release(self, controller: 'DragValueController') -> None:
        if self._holder is controller:
            self._holder = None

    def has_focus(self, controller: 'DragValueController') -> bool:
        return self._holder is controller

    def clear(self) -> None:
        self._holder = None


class DragValueController:
    """
    Drag-value state machine for one numeric leaf.

    Usage:
        controller = DragValueController(DragValue(path), 10.0,
                                          on_change=dispatcher.dispatch)
        controller.on_drag_start()
        controller.on_drag(50)        # emits DragValueChanged(new_value=15.0)
        controller.on_drag_end()

    Callbacks:
        on_change(DragValueChanged): every value the user produces
        display listeners (text): displayed text changed
        edit-mode listeners (bool): editing entered or left
    """

    def __init__(self, props: DragValue, value: float,
                 on_change: Optional[Callable[[DragValueChanged], None]] = None,
                 focus: Optional[InputFocus] = None,
                 clock: Callable[[], int] = time.monotonic_ns,
                 source: Any = None):
        self.props = props
        self.state = DragValueDragState()
        self.focus = focus if focus is not None else InputFocus()
        self.source = source if source is not None else self
        self._clock = clock
        self._value = float(value)
        self._display_text = props.format(self._value)
        self._change_callbacks: List[Callable[[DragValueChanged], None]] = []
        self._display_callbacks: List[Callable[[str], None]] = []
        self._edit_mode_callbacks: List[Callable[[bool], None]] = []
        if on_change is not None:
            self._change_callbacks.append(on_change)

    # ========== OBSERVERS ==========

    def add_change_listener(self, callback: Callable[[DragValueChanged], None]) -> None:
        self._change_callbacks.append(callback)

    def remove_change_listener(self, callback: Callable[[DragValueChanged], None]) -> None:
        if callback in self._change_callbacks:
            self._change_callbacks.remove(callback)

    def add_display_listener(self, callback: Callable[[str], None]) -> None:
        self._display_callbacks.append(callback)

    def add_edit_mode_listener(self, callback: Callable[[bool], None]) -> None:
        self._edit_mode_callbacks.append(callback)

    # ========== VALUE ==========

    @property
    def value(self) -> float:
        return self._value

    @property
    def display_text(self) -> str:
        return self._display_text

    @property
    def displayed_value(self) -> float:
        """The value as currently shown, rounded to the display precision."""
        return float(self.props.format(self._value))

    def set_value(self, value: float) -> None:
        """Set the value without emitting a change."""
        self._value = float(value)
        if not self.state.editing:
            self._set_display(self.props.format(self._value))

    # ========== POINTER ==========

    def on_click(self) -> None:
        now = self._clock()
        last = self.state.last_click_time
        is_double_click = last is not None and now - last < self.props.double_click_threshold_ms * 1_000_000

        if is_double_click and not self.state.editing:
            self._enter_edit_mode()
            # Reset so a third click does not count as another double-click
            self.state.last_click_time = None
        else:
            self.state.last_click_time = now

    def on_drag_start(self) -> None:
        if self.state.editing:
            return
        self.state.dragging = True
        self.state.start_value = self.displayed_value

    def on_drag(self, delta_x: float) -> None:
        """Handle a drag move; delta_x is the horizontal distance from the drag start."""
        if not self.state.dragging:
            return
        new_value = self.props.clamp(self.state.start_value + delta_x * self.props.drag_speed)
        self._emit(new_value)

    def on_drag_end(self) -> None:
        self.state.dragging = False

    # ========== KEYBOARD ==========

    def on_key(self, key_input: KeyInput) -> bool:
        """Handle a key event. Returns True if it was consumed."""
        if not key_input.pressed or not self.state.editing or not self.focus.has_focus(self):
            return False

        if key_input.key is EditKey.ENTER:
            self._commit()
        elif key_input.key is EditKey.ESCAPE:
            self._cancel()
        elif key_input.key is EditKey.BACKSPACE:
            self.state.edit_buffer = self.state.edit_buffer[:-1]
            self._set_display(f"{self.state.edit_buffer}{EDIT_CURSOR}")
        elif key_input.key is EditKey.CHARACTER:
            if not key_input.text or not all(ch in EDIT_CHARACTERS for ch in key_input.text):
                return False
            self.state.edit_buffer += key_input.text
            self._set_display(f"{self.state.edit_buffer}{EDIT_CURSOR}")
        else:
            return False
        return True

    def on_focus_lost(self) -> None:
        """Focus moved elsewhere: leave editing without emitting."""
        if self.state.editing:
            self._cancel()

    # ========== INTERNAL ==========

    def _enter_edit_mode(self) -> None:
        current = self.displayed_value
        self.state.editing = True
        self.state.original_value = current
        self.state.edit_buffer = self.props.format(current)
        self.focus.acquire(self)
        self._set_display(f"{self.state.edit_buffer}{EDIT_CURSOR}")
        self._notify_edit_mode(True)
        logger.debug(f"Editing {self.props.field_path}")

    def _commit(self) -> None:
        try:
            parsed = float(self.state.edit_buffer)
        except ValueError:
            logger.debug(f"Ignoring unparseable edit buffer {self.state.edit_buffer!r}")
            self._exit_edit_mode(self.state.original_value)
            return
        new_value = self.props.clamp(parsed)
        self._exit_edit_mode(new_value)
        self._emit(new_value)

    def _cancel(self) -> None:
        self._exit_edit_mode(self.state.original_value)

    def _exit_edit_mode(self, shown_value: float) -> None:
        self.state.editing = False
        self.state.edit_buffer = ""
        self.focus.release(self)
        self._value = shown_value
        self._set_display(self.props.format(shown_value))
        self._notify_edit_mode(False)

    def _emit(self, new_value: float) -> None:
        self._value = new_value
        self._set_display(self.props.format(new_value))
        event = DragValueChanged(self.source, self.props.field_path, new_value)
        for callback in list(self._change_callbacks):
            callback(event)

    def _set_display(self, text: str) -> None:
        if text == self._display_text:
            return
        self._display_text = text
        for callback in list(self._display_callbacks):
            callback(text)

    def _notify_edit_mode(self, editing: bool) -> None:
        for callback in list(self._edit_mode_callbacks):
            callback(editing)
