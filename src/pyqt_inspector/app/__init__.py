"""
Inspector application: state, update cycle and main window.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import DetailTab, InspectorState, InspectorCache
    from .cycle import InspectorCycle, CycleResult, DetailContent, DetailKind
    from .window import InspectorWindow

_EXPORTS = {
    "DetailTab": ("pyqt_inspector.app.state", "DetailTab"),
    "InspectorState": ("pyqt_inspector.app.state", "InspectorState"),
    "InspectorCache": ("pyqt_inspector.app.state", "InspectorCache"),
    "InspectorCycle": ("pyqt_inspector.app.cycle", "InspectorCycle"),
    "CycleResult": ("pyqt_inspector.app.cycle", "CycleResult"),
    "DetailContent": ("pyqt_inspector.app.cycle", "DetailContent"),
    "DetailKind": ("pyqt_inspector.app.cycle", "DetailKind"),
    "InspectorWindow": ("pyqt_inspector.app.window", "InspectorWindow"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
