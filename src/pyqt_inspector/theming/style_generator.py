"""
QStyleSheet generator for the inspector window.

Builds style sheet strings from a ColorScheme and the InspectorConfig layout
sizes, so widgets never carry hardcoded colors.
"""

import logging
from typing import Optional

from pyqt_inspector.protocols.inspector_config import InspectorConfig, get_inspector_config
from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from ColorScheme objects.

    Usage:
        styles = StyleSheetGenerator(ColorScheme())
        window.setStyleSheet(styles.generate_window_style())
    """

    def __init__(self, color_scheme: ColorScheme, config: Optional[InspectorConfig] = None):
        self.color_scheme = color_scheme
        self.config = config or get_inspector_config()

    def update_color_scheme(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def generate_window_style(self) -> str:
        """Style for the inspector main window and its panels."""
        cs = self.color_scheme
        cfg = self.config
        return f"""
            QMainWindow, QWidget#inspector_root {{
                background-color: {cs.to_hex(cs.window_bg)};
                color: {cs.to_hex(cs.text_primary)};
                font-size: {cfg.body_font_size}pt;
            }}
            QScrollArea {{
                background-color: {cs.to_hex(cs.panel_bg)};
                border: none;
            }}
            QSplitter::handle {{
                background-color: {cs.to_hex(cs.border_color)};
            }}
            {self.generate_list_style()}
            {self.generate_tab_bar_style()}
        """

    def generate_list_style(self) -> str:
        """Style for the object list and its filter field."""
        cs = self.color_scheme
        return f"""
            QListWidget {{
                background-color: {cs.to_hex(cs.panel_bg)};
                color: {cs.to_hex(cs.text_primary)};
                border: none;
                font-family: monospace;
            }}
            QListWidget::item {{
                padding: 2px 4px;
            }}
            QListWidget::item:selected {{
                background-color: {cs.to_hex(cs.selection_bg)};
                color: {cs.to_hex(cs.selection_text)};
            }}
            QLineEdit {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.text_primary)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 3px;
                padding: 4px;
            }}
        """

    def generate_tab_bar_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QTabBar::tab {{
                background-color: {cs.to_hex(cs.tab_bg)};
                color: {cs.to_hex(cs.text_primary)};
                padding: 6px 14px;
                min-height: {self.config.tab_bar_height - 12}px;
            }}
            QTabBar::tab:selected {{
                background-color: {cs.to_hex(cs.tab_active_bg)};
            }}
        """

    def generate_card_style(self) -> str:
        """Style for a component card frame."""
        cs = self.color_scheme
        return f"""
            QFrame {{
                background-color: {cs.to_hex(cs.card_bg)};
                border: 1px solid {cs.to_hex(cs.border_color)};
                border-radius: 4px;
            }}
            QLabel {{
                border: none;
                background: transparent;
            }}
        """

    def generate_label_style(self, color, font_size: Optional[int] = None) -> str:
        """Plain label in one of the scheme's colors."""
        cs = self.color_scheme
        size = f" font-size: {font_size}pt;" if font_size is not None else ""
        return f"color: {cs.to_hex(color)};{size}"

    def generate_drag_value_style(self, editing: bool) -> str:
        """Style for a drag-value widget, idle or editing."""
        cs = self.color_scheme
        if editing:
            return (
                f"color: {cs.to_hex(cs.text_primary)}; "
                f"background-color: {cs.to_hex(cs.editing_bg)}; "
                f"border: 1px solid {cs.to_hex(cs.editing_border)}; "
                f"padding: 0 2px;"
            )
        return (
            f"color: {cs.to_hex(cs.editable_value)}; "
            f"background: transparent; "
            f"border: 1px solid transparent; "
            f"padding: 0 2px;"
        )

    def generate_button_style(self) -> str:
        """Style for hierarchy node buttons on the Relationships tab."""
        cs = self.color_scheme
        return f"""
            QPushButton {{
                background-color: {cs.to_hex(cs.button_bg)};
                color: {cs.to_hex(cs.text_primary)};
                border: none;
                border-radius: 3px;
                padding: 4px 8px;
                text-align: left;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.button_hover_bg)};
            }}
        """
