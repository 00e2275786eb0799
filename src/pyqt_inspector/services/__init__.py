"""
Service layer for the inspector.

Qt-free services for change dispatch, write-back, inspection and search.
"""

from .field_change_dispatcher import (
    DragValueChanged,
    PendingValueChanges,
    FieldChangeDispatcher,
)
from .write_back_service import WriteBackService, WriteBackFailure, coerce_leaf, set_field_value
from .inspection_service import (
    InspectionService,
    ObjectInspection,
    ObjectListEntry,
    ComponentCardData,
    HierarchyNodeData,
    RelationshipsData,
)
from .search_service import SearchService

__all__ = [
    "DragValueChanged",
    "PendingValueChanges",
    "FieldChangeDispatcher",
    "WriteBackService",
    "WriteBackFailure",
    "coerce_leaf",
    "set_field_value",
    "InspectionService",
    "ObjectInspection",
    "ObjectListEntry",
    "ComponentCardData",
    "HierarchyNodeData",
    "RelationshipsData",
    "SearchService",
]
