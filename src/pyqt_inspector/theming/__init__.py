"""
Theming and styling system.

Color schemes and stylesheet generation for the inspector window.
"""

from .color_scheme import ColorScheme
from .style_generator import StyleSheetGenerator

__all__ = [
    "ColorScheme",
    "StyleSheetGenerator",
]
