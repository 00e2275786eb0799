"""Tests for the DragValueWidget."""

import pytest
from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent

from pyqt_inspector.reflection import FieldPath, Index, Named
from pyqt_inspector.services import FieldChangeDispatcher
from pyqt_inspector.store import ObjectId

from conftest import Transform

PATH = FieldPath(ObjectId(0), Transform, (Named("translation"), Index(0)))


@pytest.fixture
def dispatcher():
    return FieldChangeDispatcher()


@pytest.fixture
def widget(qapp, dispatcher, clock):
    from pyqt_inspector.widgets import DragValue, DragValueWidget
    return DragValueWidget(DragValue(PATH), 10.0, dispatcher=dispatcher, clock=clock)


def _key(key, text=""):
    return QKeyEvent(QEvent.Type.KeyPress, key, Qt.KeyboardModifier.NoModifier, text)


def _mouse(event_type, x, buttons=Qt.MouseButton.LeftButton):
    pos = QPointF(x, 5)
    return QMouseEvent(event_type, pos, pos, Qt.MouseButton.LeftButton, buttons,
                       Qt.KeyboardModifier.NoModifier)


def _double_click(widget, clock):
    widget.controller.on_click()
    clock.advance_ms(100)
    widget.controller.on_click()


def test_initial_text(widget):
    """Test the value is shown at display precision."""
    assert widget.text() == "10.00"
    assert widget.field_path == PATH
    assert not widget.is_editing


def test_set_value_updates_text(widget, dispatcher):
    """Test set_value refreshes the label without dispatching."""
    widget.set_value(3.14159)
    assert widget.text() == "3.14"
    assert widget.get_value() == 3.14159
    assert len(dispatcher.pending) == 0


def test_drag_dispatches_and_signals(widget, dispatcher):
    """Test a controller drag reaches the dispatcher and value_changed."""
    received = []

    def on_value(value):
        received.append(value)

    widget.connect_change_signal(on_value)

    widget.controller.on_drag_start()
    widget.controller.on_drag(50)

    assert received == [pytest.approx(15.0)]
    event = dispatcher.pending.drain()[0]
    assert event.source is widget
    assert event.field_path == PATH
    assert widget.text() == "15.00"

    widget.disconnect_change_signal(on_value)
    widget.controller.on_drag(60)
    assert len(received) == 1


def test_configure_range(widget):
    """Test range configuration clamps drags."""
    widget.configure_range(None, 12.0)
    widget.controller.on_drag_start()
    widget.controller.on_drag(50)
    assert widget.get_value() == 12.0


def test_mouse_drag(widget, dispatcher):
    """Test press, move past the drag distance, release."""
    widget.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 10))
    widget.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 60))
    widget.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 60, Qt.MouseButton.NoButton))

    assert [e.new_value for e in dispatcher.pending.drain()] == [pytest.approx(15.0)]
    assert not widget.controller.state.dragging


def test_mouse_click_without_move_counts_as_click(widget, clock):
    """Test two quick clicks enter editing."""
    for _ in range(2):
        widget.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 10))
        widget.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 10, Qt.MouseButton.NoButton))
        clock.advance_ms(100)
    assert widget.is_editing


def test_keyboard_edit(widget, dispatcher, clock):
    """Test typing a value and committing with Enter."""
    modes = []
    widget.editing_changed.connect(modes.append)
    _double_click(widget, clock)
    assert widget.text() == "10.00|"

    for _ in range(5):
        widget.keyPressEvent(_key(Qt.Key.Key_Backspace))
    widget.keyPressEvent(_key(Qt.Key.Key_4, "4"))
    widget.keyPressEvent(_key(Qt.Key.Key_2, "2"))
    assert widget.text() == "42|"
    widget.keyPressEvent(_key(Qt.Key.Key_Return))

    assert [e.new_value for e in dispatcher.pending.drain()] == [42.0]
    assert widget.text() == "42.00"
    assert modes == [True, False]


def test_escape_cancels(widget, dispatcher, clock):
    """Test Escape restores the original value."""
    _double_click(widget, clock)
    widget.keyPressEvent(_key(Qt.Key.Key_9, "9"))
    widget.keyPressEvent(_key(Qt.Key.Key_Escape))
    assert widget.text() == "10.00"
    assert len(dispatcher.pending) == 0


def test_key_input_from_event(qapp):
    """Test Qt key translation."""
    from pyqt_inspector.widgets import EditKey, key_input_from_event

    assert key_input_from_event(_key(Qt.Key.Key_Enter)).key is EditKey.ENTER
    assert key_input_from_event(_key(Qt.Key.Key_Escape)).key is EditKey.ESCAPE
    assert key_input_from_event(_key(Qt.Key.Key_5, "5")).text == "5"
    assert key_input_from_event(_key(Qt.Key.Key_Shift)).key is EditKey.OTHER
    assert not key_input_from_event(_key(Qt.Key.Key_A, "a"), pressed=False).pressed
