"""
Inspection Service.

Builds the plain data the panels render: object list entries, the component
cards of one object, and its parent/children relationships. Everything here
reads the store and must run inside store.read_phase().
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pyqt_inspector.protocols.inspector_config import InspectorConfig, get_inspector_config
from pyqt_inspector.reflection.field_path import FieldPath
from pyqt_inspector.reflection.semantic_names import SemanticFieldNames
from pyqt_inspector.reflection.traversal import DisplayRow, FieldExtractor
from pyqt_inspector.store.ids import ObjectId
from pyqt_inspector.store.metadata import ComponentMetadataMap, MemorySize
from pyqt_inspector.store.protocols import StoreAccessor
from pyqt_inspector.store.world import Name

logger = logging.getLogger(__name__)

UNKNOWN_TEXT = "?"


@dataclass(frozen=True)
class ObjectListEntry:
    """One row of the object list."""
    object_id: ObjectId
    display_name: str
    component_count: int
    memory_size: MemorySize

    def label(self, max_len: int = 20, truncate_len: int = 17) -> str:
        name = self.display_name
        if len(name) > max_len:
            name = f"{name[:truncate_len]}..."
        return f"{name:{max_len}} {self.component_count} comp | {self.memory_size}"


@dataclass(frozen=True)
class ComponentCardData:
    """One component of the inspected object, flattened to rows.

    component_type_id is None for components that opt out of reflection;
    such cards have no rows.
    """
    name: str
    size: str
    rows: List[DisplayRow]
    object_id: ObjectId
    component_type_id: Optional[type]

    @property
    def title(self) -> str:
        return f"{self.name} | {self.size}"

    def field_path(self, row: DisplayRow) -> Optional[FieldPath]:
        """Durable address of an editable row's leaf, or None."""
        if row.edit is None or self.component_type_id is None:
            return None
        return FieldPath(self.object_id, self.component_type_id, row.edit.path)


@dataclass(frozen=True)
class ObjectInspection:
    object_id: ObjectId
    display_name: str
    component_count: int
    total_memory: MemorySize
    cards: List[ComponentCardData] = field(default_factory=list)

    @property
    def header(self) -> str:
        return f"{self.display_name} | {self.component_count} components | {self.total_memory}"


@dataclass(frozen=True)
class HierarchyNodeData:
    object_id: ObjectId
    name: str
    component_count: int

    @property
    def label(self) -> str:
        return f"{self.name} ({self.component_count} components)"


@dataclass(frozen=True)
class RelationshipsData:
    parent: Optional[HierarchyNodeData]
    children: List[HierarchyNodeData]


class InspectionService:
    """
    Produces render data for the object list and detail panel.

    Examples:
        service = InspectionService()
        with world.read_phase():
            entries = service.list_entries(world, metadata)
            inspection = service.inspect_object(world, selected, metadata)
    """

    def __init__(self, semantic_names: Optional[SemanticFieldNames] = None,
                 config: Optional[InspectorConfig] = None):
        self.config = config or get_inspector_config()
        self.extractor = FieldExtractor(semantic_names, self.config.max_traversal_depth)

    @staticmethod
    def resolve_name(store: StoreAccessor, object_id: ObjectId) -> str:
        """Name component text, or "Object <id>" when the object has none."""
        if Name in store.list_components(object_id):
            return str(store.get_reflected_component(object_id, Name))
        return f"Object {object_id}"

    def list_entries(self, store: StoreAccessor, metadata: ComponentMetadataMap) -> List[ObjectListEntry]:
        """Entries for every live object, sorted by index."""
        entries = []
        for object_id in sorted(store.iter_objects(), key=lambda o: o.index):
            entries.append(ObjectListEntry(
                object_id=object_id,
                display_name=self.resolve_name(store, object_id),
                component_count=len(store.list_components(object_id)),
                memory_size=metadata.total_memory(store, object_id),
            ))
        return entries

    def inspect_object(self, store: StoreAccessor, object_id: ObjectId,
                       metadata: ComponentMetadataMap) -> ObjectInspection:
        """
        Flatten every component of an object into a card.

        Raises:
            ObjectNotFound: if the object does not exist
        """
        component_types = store.list_components(object_id)
        cards = []
        for type_id in component_types:
            meta = metadata.get(type_id)
            name = meta.short_name if meta is not None else UNKNOWN_TEXT
            size = str(meta.memory_size) if meta is not None else UNKNOWN_TEXT
            reflected_type = meta.type_id if meta is not None else (
                type_id if store.is_reflected(type_id) else None
            )

            rows: List[DisplayRow] = []
            if reflected_type is not None:
                component = store.get_reflected_component(object_id, reflected_type)
                rows = self.extractor.extract(component)

            cards.append(ComponentCardData(name, size, rows, object_id, reflected_type))

        inspection = ObjectInspection(
            object_id=object_id,
            display_name=self.resolve_name(store, object_id),
            component_count=len(component_types),
            total_memory=metadata.total_memory(store, object_id),
            cards=cards,
        )
        logger.debug(f"Inspected {object_id}: {len(cards)} cards, "
                     f"{sum(len(c.rows) for c in cards)} rows")
        return inspection

    def relationships(self, store: StoreAccessor, object_id: ObjectId) -> RelationshipsData:
        parent_id = store.get_parent(object_id)
        parent = self._node(store, parent_id) if parent_id is not None else None
        children = [self._node(store, child) for child in store.list_children(object_id)]
        return RelationshipsData(parent, children)

    def _node(self, store: StoreAccessor, object_id: ObjectId) -> HierarchyNodeData:
        return HierarchyNodeData(
            object_id=object_id,
            name=self.resolve_name(store, object_id),
            component_count=len(store.list_components(object_id)),
        )
