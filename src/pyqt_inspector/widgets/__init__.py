"""
Edit widgets.

The Qt-free drag-value state machine and its PyQt6 widget.
"""

from .drag_value_state import (
    DOUBLE_CLICK_THRESHOLD_MS,
    DragValue,
    DragValueDragState,
    DragValueController,
    EditKey,
    KeyInput,
    InputFocus,
)
from .drag_value import DragValueWidget, key_input_from_event

__all__ = [
    "DOUBLE_CLICK_THRESHOLD_MS",
    "DragValue",
    "DragValueDragState",
    "DragValueController",
    "EditKey",
    "KeyInput",
    "InputFocus",
    "DragValueWidget",
    "key_input_from_event",
]
