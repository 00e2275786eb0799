"""
Object store contracts and the in-memory World implementation.

Exports are resolved lazily so that reflection modules can import the
exception and id types without pulling in the world implementation.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .exceptions import (
        LocatorError,
        ObjectNotFound,
        ComponentNotFound,
        PathResolutionFailed,
        UnsupportedLeafKind,
        PhaseViolationError,
    )
    from .ids import ObjectId
    from .phase import AccessPhase, PhaseGuard
    from .protocols import (
        ObjectLookup,
        HierarchyReader,
        ComponentReader,
        ComponentWriter,
        StoreAccessor,
    )
    from .world import World, Name
    from .metadata import MemorySize, ComponentMetadata, ComponentMetadataMap

_EXPORTS = {
    "LocatorError": ("pyqt_inspector.store.exceptions", "LocatorError"),
    "ObjectNotFound": ("pyqt_inspector.store.exceptions", "ObjectNotFound"),
    "ComponentNotFound": ("pyqt_inspector.store.exceptions", "ComponentNotFound"),
    "PathResolutionFailed": ("pyqt_inspector.store.exceptions", "PathResolutionFailed"),
    "UnsupportedLeafKind": ("pyqt_inspector.store.exceptions", "UnsupportedLeafKind"),
    "PhaseViolationError": ("pyqt_inspector.store.exceptions", "PhaseViolationError"),
    "ObjectId": ("pyqt_inspector.store.ids", "ObjectId"),
    "AccessPhase": ("pyqt_inspector.store.phase", "AccessPhase"),
    "PhaseGuard": ("pyqt_inspector.store.phase", "PhaseGuard"),
    "ObjectLookup": ("pyqt_inspector.store.protocols", "ObjectLookup"),
    "HierarchyReader": ("pyqt_inspector.store.protocols", "HierarchyReader"),
    "ComponentReader": ("pyqt_inspector.store.protocols", "ComponentReader"),
    "ComponentWriter": ("pyqt_inspector.store.protocols", "ComponentWriter"),
    "StoreAccessor": ("pyqt_inspector.store.protocols", "StoreAccessor"),
    "World": ("pyqt_inspector.store.world", "World"),
    "Name": ("pyqt_inspector.store.world", "Name"),
    "MemorySize": ("pyqt_inspector.store.metadata", "MemorySize"),
    "ComponentMetadata": ("pyqt_inspector.store.metadata", "ComponentMetadata"),
    "ComponentMetadataMap": ("pyqt_inspector.store.metadata", "ComponentMetadataMap"),
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
