"""
Inspector main window.

Object list on the left, detail panel on the right, and a QTimer that runs
one InspectorCycle per tick. Qt input handlers only queue changes and update
selection state; all store access happens inside the cycle.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QMainWindow, QSplitter

from pyqt_inspector.panels.detail_panel import DetailPanel
from pyqt_inspector.panels.object_list import ObjectListPanel
from pyqt_inspector.protocols.inspector_config import InspectorConfig, get_inspector_config
from pyqt_inspector.store.ids import ObjectId
from pyqt_inspector.store.protocols import StoreAccessor
from pyqt_inspector.theming import ColorScheme, StyleSheetGenerator
from .cycle import CycleResult, InspectorCycle
from .state import DetailTab

logger = logging.getLogger(__name__)


class InspectorWindow(QMainWindow):
    """
    Window inspecting one store.

    Usage:
        window = InspectorWindow(world)
        window.show()
        app.exec()
    """

    def __init__(self, store: StoreAccessor,
                 color_scheme: Optional[ColorScheme] = None,
                 config: Optional[InspectorConfig] = None,
                 auto_start: bool = True, parent=None):
        super().__init__(parent)
        self.config = config or get_inspector_config()
        self.color_scheme = color_scheme or ColorScheme()
        self.style_gen = StyleSheetGenerator(self.color_scheme, self.config)
        self.cycle = InspectorCycle(store, config=self.config)

        self._setup_ui()
        self._setup_connections()

        self.timer = QTimer(self)
        self.timer.setInterval(self.config.cycle_interval_ms)
        self.timer.timeout.connect(self.run_cycle)
        if auto_start:
            self.timer.start()

    def _setup_ui(self):
        self.setWindowTitle("Inspector")
        self.resize(self.config.window_width, self.config.window_height)
        self.setStyleSheet(self.style_gen.generate_window_style())

        self.object_list = ObjectListPanel(self.color_scheme, self.config)
        self.detail_panel = DetailPanel(self.cycle.dispatcher, self.color_scheme, self.config)

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.object_list)
        self.splitter.addWidget(self.detail_panel)
        left = int(self.config.window_width * self.config.left_panel_fraction)
        self.splitter.setSizes([left, self.config.window_width - left])
        self.setCentralWidget(self.splitter)

    def _setup_connections(self):
        self.object_list.filter_changed.connect(self.cycle.set_filter)
        self.object_list.object_selected.connect(self.select_object)
        self.detail_panel.object_selected.connect(self.select_object)
        self.detail_panel.tab_changed.connect(self.select_tab)

    def select_object(self, object_id: Optional[ObjectId]) -> None:
        self.cycle.state.select(object_id)

    def select_tab(self, tab: DetailTab) -> None:
        self.cycle.state.set_tab(tab)

    def run_cycle(self) -> CycleResult:
        """Run one update cycle and push its results into the panels."""
        result = self.cycle.run_cycle()
        state = self.cycle.state
        if result.list_changed:
            self.object_list.set_entries(result.entries, state.selected)
        if result.detail is not None:
            self.object_list.set_selected(state.selected)
            self.detail_panel.set_active_tab(state.active_tab)
            self.detail_panel.show_content(result.detail)
        return result

    def closeEvent(self, event):
        self.timer.stop()
        super().closeEvent(event)
