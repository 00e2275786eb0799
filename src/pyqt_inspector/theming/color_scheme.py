"""
Color scheme for the inspector window.

Semantic color names for panels, rows and edit widgets, kept as RGB tuples so
they can be rendered both as QColor and as style sheet hex strings.
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Tuple

from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@dataclass
class ColorScheme:
    """
    Inspector color scheme with semantic color names.

    Defaults are a dark theme; create_light_theme() returns a light variant.
    """

    # ========== BASE UI ==========

    window_bg: RGB = (30, 30, 30)          # #1e1e1e - Main window background
    panel_bg: RGB = (38, 38, 38)           # #262626 - Object list / detail panel
    card_bg: RGB = (48, 48, 48)            # #303030 - Component card background
    border_color: RGB = (77, 77, 77)       # #4d4d4d - Card and panel borders

    # ========== TEXT ==========

    text_primary: RGB = (255, 255, 255)    # #ffffff - Headers and values
    text_muted: RGB = (153, 153, 153)      # #999999 - Empty states, sizes
    text_error: RGB = (204, 77, 77)        # #cc4d4d - Stale selection
    field_name: RGB = (153, 204, 255)      # #99ccff - Row labels
    header_text: RGB = (0, 170, 255)       # #00aaff - Nested value headers

    # ========== INTERACTIVE ==========

    editable_value: RGB = (230, 230, 153)  # #e6e699 - Drag-value text
    editing_bg: RGB = (64, 64, 64)         # #404040 - Drag-value while editing
    editing_border: RGB = (0, 170, 255)    # #00aaff - Drag-value border while editing
    button_bg: RGB = (64, 64, 64)          # #404040 - Hierarchy node buttons
    button_hover_bg: RGB = (80, 80, 80)    # #505050
    selection_bg: RGB = (0, 120, 212)      # #0078d4 - Selected object row
    selection_text: RGB = (255, 255, 255)
    input_bg: RGB = (64, 64, 64)           # #404040 - Filter field
    input_border: RGB = (102, 102, 102)    # #666666

    # ========== TABS ==========

    tab_bg: RGB = (43, 43, 43)
    tab_active_bg: RGB = (0, 120, 212)

    def to_qcolor(self, color_tuple: RGB) -> QColor:
        """Convert an RGB tuple to a QColor."""
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: RGB) -> str:
        """
        Convert an RGB tuple to a hex color string.

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        return cls(
            window_bg=(245, 245, 245),
            panel_bg=(255, 255, 255),
            card_bg=(240, 240, 240),
            border_color=(180, 180, 180),
            text_primary=(0, 0, 0),
            text_muted=(110, 110, 110),
            text_error=(170, 30, 30),
            field_name=(20, 90, 160),
            header_text=(0, 100, 170),
            editable_value=(120, 90, 0),
            editing_bg=(255, 255, 255),
            button_bg=(225, 225, 225),
            button_hover_bg=(210, 210, 210),
            input_bg=(255, 255, 255),
            input_border=(160, 160, 160),
            tab_bg=(230, 230, 230),
        )

    def get_color_dict(self) -> Dict[str, RGB]:
        """All colors by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
