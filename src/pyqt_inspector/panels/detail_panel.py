"""
Detail panel.

Shows the selected object on two tabs:
- Components: header "<name> | <n> components | <memory>", then one card per
  component with its rows; numeric leaves become DragValueWidgets
- Relationships: parent and children as buttons that select that object

Every show_content() discards the previous widgets, including any drag-value that
was being edited.
"""

import logging
from typing import List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton, QScrollArea, QTabBar, QVBoxLayout, QWidget,
)

from pyqt_inspector.app.cycle import DetailContent, DetailKind
from pyqt_inspector.app.state import DetailTab
from pyqt_inspector.protocols.inspector_config import InspectorConfig, get_inspector_config
from pyqt_inspector.reflection.traversal import DisplayRow
from pyqt_inspector.services.field_change_dispatcher import FieldChangeDispatcher
from pyqt_inspector.services.inspection_service import (
    ComponentCardData, HierarchyNodeData, ObjectInspection, RelationshipsData,
)
from pyqt_inspector.theming import ColorScheme, StyleSheetGenerator
from pyqt_inspector.widgets.drag_value import DragValueWidget
from pyqt_inspector.widgets.drag_value_state import DragValue, InputFocus

logger = logging.getLogger(__name__)

NO_REFLECTED_DATA_TEXT = "<no reflected data>"
NO_PARENT_TEXT = "No parent (root object)"
NO_CHILDREN_TEXT = "No children"

_TABS = (DetailTab.COMPONENTS, DetailTab.RELATIONSHIPS)


class DetailPanel(QWidget):
    """
    Tabbed detail view of one object.

    Signals:
        tab_changed(object): DetailTab chosen by the operator
        object_selected(object): ObjectId of a clicked parent/child button
    """

    tab_changed = pyqtSignal(object)
    object_selected = pyqtSignal(object)

    def __init__(self, dispatcher: FieldChangeDispatcher,
                 color_scheme: Optional[ColorScheme] = None,
                 config: Optional[InspectorConfig] = None, parent=None):
        super().__init__(parent)
        self.dispatcher = dispatcher
        self.config = config or get_inspector_config()
        self.color_scheme = color_scheme or ColorScheme()
        self.style_gen = StyleSheetGenerator(self.color_scheme, self.config)
        self.input_focus = InputFocus()
        self.drag_values: List[DragValueWidget] = []
        self.hierarchy_buttons: List[QPushButton] = []
        self._content_widget: Optional[QWidget] = None

        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.tab_bar = QTabBar()
        for tab in _TABS:
            self.tab_bar.addTab(tab.value)
        self.tab_bar.setStyleSheet(self.style_gen.generate_tab_bar_style())
        self.tab_bar.currentChanged.connect(self._on_tab_changed)
        layout.addWidget(self.tab_bar)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        layout.addWidget(self.scroll_area, 1)

    def _on_tab_changed(self, index: int):
        if 0 <= index < len(_TABS):
            self.tab_changed.emit(_TABS[index])

    def set_active_tab(self, tab: DetailTab) -> None:
        self.tab_bar.blockSignals(True)
        self.tab_bar.setCurrentIndex(_TABS.index(tab))
        self.tab_bar.blockSignals(False)

    # ========== RENDERING ==========

    def show_content(self, content: DetailContent) -> None:
        """Discard the current view and build a new one."""
        self.drag_values = []
        self.hierarchy_buttons = []
        self.input_focus.clear()

        container = QWidget()
        layout = QVBoxLayout(container)
        pad = self.config.panel_padding
        layout.setContentsMargins(pad, pad, pad, pad)
        layout.setSpacing(self.config.item_gap)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        if content.kind is DetailKind.EMPTY:
            layout.addWidget(self._message_label(content.message, self.color_scheme.text_muted))
        elif content.kind is DetailKind.ERROR:
            layout.addWidget(self._message_label(content.message, self.color_scheme.text_error))
        elif content.kind is DetailKind.COMPONENTS:
            self._build_components(layout, content.inspection)
        else:
            self._build_relationships(layout, content.relationships)

        # setWidget() deletes the previous content widget and everything in it
        self.scroll_area.setWidget(container)
        self._content_widget = container

    def _message_label(self, text: str, color) -> QLabel:
        label = QLabel(text)
        label.setObjectName("detail_message")
        label.setContentsMargins(16, 16, 16, 16)
        label.setStyleSheet(self.style_gen.generate_label_style(color, self.config.body_font_size))
        return label

    def message_text(self) -> Optional[str]:
        """Text of the empty/error message, if that is what is shown."""
        if self._content_widget is None:
            return None
        label = self._content_widget.findChild(QLabel, "detail_message")
        return label.text() if label is not None else None

    # ========== COMPONENTS TAB ==========

    def _build_components(self, layout: QVBoxLayout, inspection: ObjectInspection) -> None:
        cs = self.color_scheme
        header = QLabel(inspection.header)
        header.setObjectName("detail_header")
        header.setFixedHeight(self.config.title_bar_height)
        font = QFont()
        font.setPointSize(self.config.title_font_size)
        header.setFont(font)
        header.setStyleSheet(self.style_gen.generate_label_style(cs.text_primary))
        layout.addWidget(header)

        for card in inspection.cards:
            layout.addWidget(self._build_card(card))

    def _build_card(self, card: ComponentCardData) -> QFrame:
        cs = self.color_scheme
        cfg = self.config
        frame = QFrame()
        frame.setStyleSheet(self.style_gen.generate_card_style())
        card_layout = QVBoxLayout(frame)
        card_layout.setContentsMargins(cfg.panel_padding, cfg.panel_padding, cfg.panel_padding, cfg.panel_padding)
        card_layout.setSpacing(cfg.item_gap)

        title = QLabel(card.title)
        title.setStyleSheet(self.style_gen.generate_label_style(cs.text_primary, cfg.body_font_size))
        card_layout.addWidget(title)

        if not card.rows:
            placeholder = QLabel(NO_REFLECTED_DATA_TEXT)
            placeholder.setStyleSheet(self.style_gen.generate_label_style(cs.text_muted, cfg.small_font_size))
            card_layout.addWidget(placeholder)
            return frame

        for row in card.rows:
            card_layout.addLayout(self._build_row(card, row))
        return frame

    def _build_row(self, card: ComponentCardData, row: DisplayRow) -> QHBoxLayout:
        cs = self.color_scheme
        cfg = self.config
        row_layout = QHBoxLayout()
        row_layout.setContentsMargins(row.indent * cfg.indent_px, 0, 0, 0)
        row_layout.setSpacing(cfg.column_gap)

        label = QLabel(f"{row.label}:")
        label.setStyleSheet(self.style_gen.generate_label_style(cs.field_name, cfg.small_font_size))
        row_layout.addWidget(label)

        field_path = card.field_path(row)
        if field_path is not None:
            props = DragValue(
                field_path,
                drag_speed=cfg.drag_speed,
                precision=cfg.precision,
                double_click_threshold_ms=cfg.double_click_threshold_ms,
            )
            value_widget = DragValueWidget(
                props, row.edit.numeric_value,
                dispatcher=self.dispatcher,
                focus=self.input_focus,
                color_scheme=cs,
            )
            self.drag_values.append(value_widget)
        else:
            value_widget = QLabel(row.value_text)
            value_widget.setStyleSheet(self.style_gen.generate_label_style(cs.text_primary, cfg.small_font_size))
        row_layout.addWidget(value_widget)
        row_layout.addStretch(1)
        return row_layout

    # ========== RELATIONSHIPS TAB ==========

    def _build_relationships(self, layout: QVBoxLayout, relationships: RelationshipsData) -> None:
        cs = self.color_scheme
        cfg = self.config

        layout.addWidget(self._section_label("Parent"))
        if relationships.parent is not None:
            layout.addWidget(self._hierarchy_button(relationships.parent))
        else:
            none_label = QLabel(NO_PARENT_TEXT)
            none_label.setStyleSheet(self.style_gen.generate_label_style(cs.text_muted, cfg.small_font_size))
            layout.addWidget(none_label)

        layout.addWidget(self._section_label(f"Children ({len(relationships.children)})"))
        if not relationships.children:
            none_label = QLabel(NO_CHILDREN_TEXT)
            none_label.setStyleSheet(self.style_gen.generate_label_style(cs.text_muted, cfg.small_font_size))
            layout.addWidget(none_label)
        for child in relationships.children:
            layout.addWidget(self._hierarchy_button(child))

    def _section_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(
            self.style_gen.generate_label_style(self.color_scheme.header_text, self.config.body_font_size)
        )
        return label

    def _hierarchy_button(self, node: HierarchyNodeData) -> QPushButton:
        button = QPushButton(node.label)
        button.setStyleSheet(self.style_gen.generate_button_style())
        button.clicked.connect(lambda _checked=False, object_id=node.object_id: self.object_selected.emit(object_id))
        self.hierarchy_buttons.append(button)
        return button
