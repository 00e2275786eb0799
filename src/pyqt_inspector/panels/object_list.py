"""
Object list panel.

Filter field plus a list of every live object, labelled
"<name> <n> comp | <memory>". Filtering itself is done by the update cycle
through SearchService; this panel only shows the result.
"""

import logging
from typing import List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QLineEdit, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from pyqt_inspector.protocols.inspector_config import InspectorConfig, get_inspector_config
from pyqt_inspector.services.inspection_service import ObjectListEntry
from pyqt_inspector.store.ids import ObjectId
from pyqt_inspector.theming import ColorScheme, StyleSheetGenerator

logger = logging.getLogger(__name__)


class ObjectListPanel(QWidget):
    """
    Searchable list of objects.

    Signals:
        filter_changed(str): filter text edited
        object_selected(object): ObjectId of the clicked row
    """

    filter_changed = pyqtSignal(str)
    object_selected = pyqtSignal(object)

    def __init__(self, color_scheme: Optional[ColorScheme] = None,
                 config: Optional[InspectorConfig] = None, parent=None):
        super().__init__(parent)
        self.config = config or get_inspector_config()
        self.color_scheme = color_scheme or ColorScheme()
        self.style_gen = StyleSheetGenerator(self.color_scheme, self.config)
        self._entries: List[ObjectListEntry] = []

        self._setup_ui()
        self._setup_connections()

    def _setup_ui(self):
        cfg = self.config
        layout = QVBoxLayout(self)
        layout.setContentsMargins(cfg.panel_padding, cfg.panel_padding, cfg.panel_padding, cfg.panel_padding)
        layout.setSpacing(cfg.item_gap)

        title = QLabel("Objects")
        font = QFont()
        font.setPointSize(cfg.title_font_size)
        title.setFont(font)
        layout.addWidget(title)

        self.filter_input = QLineEdit()
        self.filter_input.setPlaceholderText("Filter objects...")
        layout.addWidget(self.filter_input)

        self.list_widget = QListWidget()
        self.list_widget.setStyleSheet(self.style_gen.generate_list_style())
        layout.addWidget(self.list_widget, 1)

        self.status_label = QLabel("No objects")
        self.status_label.setStyleSheet(
            self.style_gen.generate_label_style(self.color_scheme.text_muted, cfg.small_font_size)
        )
        layout.addWidget(self.status_label)

    def _setup_connections(self):
        self.filter_input.textChanged.connect(self.filter_changed.emit)
        self.list_widget.itemClicked.connect(self._on_item_clicked)

    def _on_item_clicked(self, item: QListWidgetItem):
        object_id = item.data(Qt.ItemDataRole.UserRole)
        if object_id is not None:
            self.object_selected.emit(object_id)

    def set_entries(self, entries: List[ObjectListEntry], selected: Optional[ObjectId] = None) -> None:
        """Replace the displayed rows."""
        self._entries = list(entries)
        self.list_widget.blockSignals(True)
        try:
            self.list_widget.clear()
            for entry in self._entries:
                item = QListWidgetItem(entry.label(self.config.name_max_len, self.config.name_truncate_len))
                item.setData(Qt.ItemDataRole.UserRole, entry.object_id)
                self.list_widget.addItem(item)
                if entry.object_id == selected:
                    item.setSelected(True)
        finally:
            self.list_widget.blockSignals(False)
        self.status_label.setText(f"{len(self._entries)} objects")

    def set_selected(self, selected: Optional[ObjectId]) -> None:
        for row in range(self.list_widget.count()):
            item = self.list_widget.item(row)
            item.setSelected(item.data(Qt.ItemDataRole.UserRole) == selected)

    def row_labels(self) -> List[str]:
        return [self.list_widget.item(row).text() for row in range(self.list_widget.count())]
