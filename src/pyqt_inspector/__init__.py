"""
pyqt-inspector: live object inspector for PyQt6.

Browse the objects of a running program, inspect their fields without prior
knowledge of their types, and edit numeric leaves in place with drag-value
widgets. Edits are written back into the live objects.

Architecture:
- Reflection: shape classification, field paths, traversal into display rows
- Store: StoreAccessor contracts, in-memory World, read/write phase guard
- Services: change dispatch, write-back, inspection, search
- Widgets / panels / app: PyQt6 edit widget, panels, update cycle and window
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
