"""
Drag-value widget for PyQt6.

A QLabel showing a number that can be dragged horizontally to change it, or
double-clicked to type a new value. All behavior lives in
DragValueController; this class only translates Qt events.
"""

import dataclasses
import logging
import time
from typing import Any, Callable, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFocusEvent, QKeyEvent, QMouseEvent
from PyQt6.QtWidgets import QApplication, QLabel

from pyqt_inspector.protocols.widget_protocols import (
    ChangeSignalEmitter, PyQtWidgetMeta, RangeConfigurable, ValueGettable, ValueSettable,
)
from pyqt_inspector.services.field_change_dispatcher import DragValueChanged, FieldChangeDispatcher
from pyqt_inspector.theming import ColorScheme, StyleSheetGenerator
from .drag_value_state import DragValue, DragValueController, EditKey, InputFocus, KeyInput

logger = logging.getLogger(__name__)

_KEY_MAP = {
    Qt.Key.Key_Return.value: EditKey.ENTER,
    Qt.Key.Key_Enter.value: EditKey.ENTER,
    Qt.Key.Key_Escape.value: EditKey.ESCAPE,
    Qt.Key.Key_Backspace.value: EditKey.BACKSPACE,
}


def key_input_from_event(event: QKeyEvent, pressed: bool = True) -> KeyInput:
    """Translate a Qt key event into a KeyInput."""
    key = _KEY_MAP.get(event.key())
    if key is not None:
        return KeyInput(key, pressed=pressed)
    text = event.text()
    if text and text.isprintable():
        return KeyInput(EditKey.CHARACTER, text, pressed=pressed)
    return KeyInput(EditKey.OTHER, pressed=pressed)


class DragValueWidget(QLabel, ValueGettable, ValueSettable, RangeConfigurable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Draggable numeric label bound to one FieldPath.

    Usage:
        widget = DragValueWidget(DragValue(path), 10.0, dispatcher=dispatcher)
        widget.value_changed.connect(on_value)
    """

    value_changed = pyqtSignal(float)
    editing_changed = pyqtSignal(bool)

    def __init__(self, props: DragValue, value: float,
                 dispatcher: Optional[FieldChangeDispatcher] = None,
                 focus: Optional[InputFocus] = None,
                 color_scheme: Optional[ColorScheme] = None,
                 clock: Callable[[], int] = time.monotonic_ns,
                 parent=None):
        super().__init__(parent)
        self._dispatcher = dispatcher
        self._styles = StyleSheetGenerator(color_scheme or ColorScheme())
        self._press_x: Optional[float] = None
        self._drag_started = False

        self.controller = DragValueController(
            props, value, focus=focus, clock=clock, source=self,
        )
        self.controller.add_change_listener(self._on_controller_change)
        self.controller.add_display_listener(self.setText)
        self.controller.add_edit_mode_listener(self._on_edit_mode_changed)

        self.setText(self.controller.display_text)
        self.setCursor(Qt.CursorShape.SizeHorCursor)
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        self.setStyleSheet(self._styles.generate_drag_value_style(editing=False))

    # ========== ABC IMPLEMENTATIONS ==========

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.controller.value

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.controller.set_value(float(value))

    def configure_range(self, minimum: Optional[float], maximum: Optional[float]) -> None:
        """Implement RangeConfigurable ABC."""
        self.controller.props = dataclasses.replace(self.controller.props, min=minimum, max=maximum)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.value_changed.connect(callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.value_changed.disconnect(callback)

    @property
    def field_path(self):
        return self.controller.props.field_path

    @property
    def is_editing(self) -> bool:
        return self.controller.state.editing

    # ========== QT EVENTS ==========

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self._press_x = event.position().x()
        self._drag_started = False
        event.accept()

    def mouseDoubleClickEvent(self, event: QMouseEvent):
        # Qt delivers the second press as a double-click; the controller does its own timing
        self.mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._press_x is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            super().mouseMoveEvent(event)
            return
        delta_x = event.position().x() - self._press_x
        if not self._drag_started:
            if abs(delta_x) < QApplication.startDragDistance():
                return
            self._drag_started = True
            self.controller.on_drag_start()
        self.controller.on_drag(delta_x)
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton or self._press_x is None:
            super().mouseReleaseEvent(event)
            return
        if self._drag_started:
            self.controller.on_drag_end()
        else:
            self.controller.on_click()
        self._press_x = None
        self._drag_started = False
        event.accept()

    def keyPressEvent(self, event: QKeyEvent):
        if self.controller.on_key(key_input_from_event(event)):
            event.accept()
            return
        super().keyPressEvent(event)

    def focusOutEvent(self, event: QFocusEvent):
        self.controller.on_focus_lost()
        super().focusOutEvent(event)

    # ========== CONTROLLER CALLBACKS ==========

    def _on_controller_change(self, event: DragValueChanged) -> None:
        if self._dispatcher is not None:
            self._dispatcher.dispatch(event)
        self.value_changed.emit(event.new_value)

    def _on_edit_mode_changed(self, editing: bool) -> None:
        self.setStyleSheet(self._styles.generate_drag_value_style(editing))
        if editing:
            self.setFocus(Qt.FocusReason.MouseFocusReason)
        self.editing_changed.emit(editing)
