"""Inspector configuration.

Layout sizes, fonts and edit-widget defaults. Applications can subclass or
replace the global instance to customize the inspector.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class InspectorConfig:
    """Configuration for the inspector window and its widgets.

    Attributes:
        left_panel_fraction: Share of the window width given to the object list
        title_bar_height: Height of the object header, in pixels
        tab_bar_height: Height of the Components / Relationships tab bar
        panel_padding: Padding inside panels and cards
        item_gap: Vertical gap between rows
        column_gap: Horizontal gap between a row's label and value
        indent_px: Horizontal indent per nesting level of a row
        title_font_size / body_font_size / small_font_size: Point sizes
        drag_speed: Value change per pixel of horizontal drag
        precision: Decimal places shown by edit widgets
        double_click_threshold_ms: Max gap between clicks that enter text editing
        max_traversal_depth: Nesting depth after which traversal stops recursing
        cycle_interval_ms: Update cycle period
        search_min_chars: Minimum filter length before the object list is filtered
        name_max_len / name_truncate_len: Object list names longer than max
            are cut to truncate_len characters followed by "..."
        performance_logger_name: Logger that receives cycle timings
        slow_cycle_threshold_ms: Cycles slower than this are logged at DEBUG
    """

    left_panel_fraction: float = 0.3
    title_bar_height: int = 40
    tab_bar_height: int = 36
    window_width: int = 1000
    window_height: int = 700

    panel_padding: int = 8
    item_gap: int = 4
    column_gap: int = 8
    indent_px: int = 12

    title_font_size: int = 16
    body_font_size: int = 13
    small_font_size: int = 11

    drag_speed: float = 0.1
    precision: int = 2
    double_click_threshold_ms: int = 300

    max_traversal_depth: int = 32
    cycle_interval_ms: int = 16
    search_min_chars: int = 1

    name_max_len: int = 20
    name_truncate_len: int = 17

    performance_logger_name: str = "pyqt_inspector.performance"
    slow_cycle_threshold_ms: float = 8.0


# Global config instance (set by application)
_inspector_config: Optional[InspectorConfig] = None


def set_inspector_config(config: Optional[InspectorConfig]) -> None:
    """Set the global inspector configuration (None restores the defaults)."""
    global _inspector_config
    _inspector_config = config


def get_inspector_config() -> InspectorConfig:
    """Get the current inspector configuration.

    Returns:
        Current InspectorConfig or default if not set
    """
    if _inspector_config is None:
        return InspectorConfig()
    return _inspector_config
