"""Tests for the object list, detail panel and inspector window."""

import pytest

from pyqt_inspector.app.cycle import (
    EMPTY_SELECTION_MESSAGE, STALE_SELECTION_MESSAGE, DetailContent, DetailKind, InspectorCycle,
)
from pyqt_inspector.app.state import DetailTab
from pyqt_inspector.reflection import Index, Named
from pyqt_inspector.store import Name

from conftest import Stats, Transform


@pytest.fixture
def detail_panel(qapp):
    from pyqt_inspector.panels import DetailPanel
    from pyqt_inspector.services import FieldChangeDispatcher
    return DetailPanel(FieldChangeDispatcher())


def _detail(world, object_id, tab=DetailTab.COMPONENTS):
    cycle = InspectorCycle(world)
    cycle.state.select(object_id)
    cycle.state.set_tab(tab)
    return cycle.run_cycle().detail


# ========== OBJECT LIST ==========

def test_object_list_rows(qapp, world, player):
    """Test entries are listed with their labels."""
    from pyqt_inspector.panels import ObjectListPanel

    panel = ObjectListPanel()
    entries = InspectorCycle(world).run_cycle().entries
    panel.set_entries(entries)

    assert panel.row_labels() == [entries[0].label()]
    assert panel.row_labels()[0].startswith("Player ")
    assert panel.status_label.text() == "1 objects"


def test_object_list_click_selects(qapp, world, player):
    """Test clicking a row emits its object id."""
    from pyqt_inspector.panels import ObjectListPanel

    panel = ObjectListPanel()
    panel.set_entries(InspectorCycle(world).run_cycle().entries)
    selected = []
    panel.object_selected.connect(selected.append)

    panel.list_widget.itemClicked.emit(panel.list_widget.item(0))
    assert selected == [player]


def test_object_list_filter_signal(qapp):
    """Test typing in the filter emits filter_changed."""
    from pyqt_inspector.panels import ObjectListPanel

    panel = ObjectListPanel()
    texts = []
    panel.filter_changed.connect(texts.append)
    panel.filter_input.setText("pla")
    assert texts == ["pla"]


# ========== DETAIL PANEL ==========

def test_empty_and_error_messages(detail_panel):
    """Test empty selection and stale selection messages."""
    detail_panel.show_content(DetailContent(DetailKind.EMPTY, EMPTY_SELECTION_MESSAGE))
    assert detail_panel.message_text() == EMPTY_SELECTION_MESSAGE

    detail_panel.show_content(DetailContent(DetailKind.ERROR, STALE_SELECTION_MESSAGE))
    assert detail_panel.message_text() == STALE_SELECTION_MESSAGE


def test_components_tab(detail_panel, world, player):
    """Test one drag value per numeric leaf, bound to its field path."""
    from PyQt6.QtWidgets import QLabel

    detail = _detail(world, player)
    detail_panel.show_content(detail)

    # Transform: 3 + 4 + 3 leaves; Stats: level, experience, offset, ratio, count
    assert len(detail_panel.drag_values) == 15
    paths = [w.field_path for w in detail_panel.drag_values]
    assert paths[1].steps == (Named("translation"), Index(1))
    assert paths[1].component_type_id is Transform
    assert detail_panel.drag_values[1].text() == "2.00"
    assert detail_panel.message_text() is None

    header = detail_panel.scroll_area.widget().findChild(QLabel, "detail_header")
    assert header.text() == detail.inspection.header
    assert header.maximumHeight() == detail_panel.config.title_bar_height


def test_header_height_follows_config(qapp, world, player):
    """Test the object header uses the configured title bar height."""
    from PyQt6.QtWidgets import QLabel
    from pyqt_inspector.panels import DetailPanel
    from pyqt_inspector.protocols import InspectorConfig
    from pyqt_inspector.services import FieldChangeDispatcher

    panel = DetailPanel(FieldChangeDispatcher(), config=InspectorConfig(title_bar_height=52))
    panel.show_content(_detail(world, player))

    header = panel.scroll_area.widget().findChild(QLabel, "detail_header")
    assert header.minimumHeight() == 52
    assert header.maximumHeight() == 52


def test_unreflected_card_placeholder(detail_panel, world, player):
    """Test components without reflection show a placeholder."""
    from PyQt6.QtWidgets import QLabel
    from pyqt_inspector.panels.detail_panel import NO_REFLECTED_DATA_TEXT

    world.register_component(Stats, reflect=False)
    detail_panel.show_content(_detail(world, player))

    texts = [label.text() for label in detail_panel.scroll_area.widget().findChildren(QLabel)]
    assert NO_REFLECTED_DATA_TEXT in texts
    assert len(detail_panel.drag_values) == 10


def test_relationships_tab(detail_panel, world, player):
    """Test parent and children buttons navigate."""
    child = world.spawn(Name("Child"), parent=player)
    detail_panel.show_content(_detail(world, player, DetailTab.RELATIONSHIPS))

    assert [b.text() for b in detail_panel.hierarchy_buttons] == ["Child (1 components)"]
    selected = []
    detail_panel.object_selected.connect(selected.append)
    detail_panel.hierarchy_buttons[0].click()
    assert selected == [child]


def test_relationships_of_root_without_children(detail_panel, world, player):
    """Test placeholder texts for a lone root object."""
    from PyQt6.QtWidgets import QLabel
    from pyqt_inspector.panels.detail_panel import NO_CHILDREN_TEXT, NO_PARENT_TEXT

    detail_panel.show_content(_detail(world, player, DetailTab.RELATIONSHIPS))

    texts = [label.text() for label in detail_panel.scroll_area.widget().findChildren(QLabel)]
    assert NO_PARENT_TEXT in texts
    assert NO_CHILDREN_TEXT in texts
    assert "Children (0)" in texts
    assert detail_panel.hierarchy_buttons == []


def test_tab_bar_signal(detail_panel):
    """Test switching tabs emits the DetailTab."""
    tabs = []
    detail_panel.tab_changed.connect(tabs.append)
    detail_panel.tab_bar.setCurrentIndex(1)
    assert tabs == [DetailTab.RELATIONSHIPS]

    detail_panel.set_active_tab(DetailTab.COMPONENTS)
    assert detail_panel.tab_bar.currentIndex() == 0
    assert tabs == [DetailTab.RELATIONSHIPS]


# ========== WINDOW ==========

def test_window_edit_round_trip(qapp, world, player):
    """Test select, drag, and the next cycle writes the value back."""
    from pyqt_inspector.app import InspectorWindow

    window = InspectorWindow(world, auto_start=False)
    window.run_cycle()
    assert window.object_list.row_labels()[0].startswith("Player")
    assert window.detail_panel.message_text() == EMPTY_SELECTION_MESSAGE

    window.object_list.object_selected.emit(player)
    window.run_cycle()
    drag = window.detail_panel.drag_values[1]
    drag.controller.on_drag_start()
    drag.controller.on_drag(50)
    window.run_cycle()

    assert world.get(player, Transform).translation.y == pytest.approx(7.0)
    window.close()


def test_window_tab_switch(qapp, world, player):
    """Test a tab change reaches the cycle state."""
    from pyqt_inspector.app import InspectorWindow

    window = InspectorWindow(world, auto_start=False)
    window.select_object(player)
    window.detail_panel.tab_bar.setCurrentIndex(1)
    assert window.cycle.state.active_tab is DetailTab.RELATIONSHIPS

    window.run_cycle()
    assert window.detail_panel.hierarchy_buttons == []
    assert window.timer.interval() == window.config.cycle_interval_ms
    window.close()
