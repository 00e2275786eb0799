"""
In-memory object store.

A small entity/component world: objects are generation-tagged ids carrying
at most one component per Python type, optionally arranged in a parent/child
hierarchy. It implements the full StoreAccessor contract and is what the
inspector window, the demo and the tests run against.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set

from pyqt_inspector.store.exceptions import ComponentNotFound, ObjectNotFound
from pyqt_inspector.store.ids import ObjectId
from pyqt_inspector.store.phase import PhaseGuard
from pyqt_inspector.store.protocols import StoreAccessor

logger = logging.getLogger(__name__)


@dataclass
class Name:
    """Human-readable object name component."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class _ObjectRecord:
    generation: int
    components: Dict[type, Any] = field(default_factory=dict)
    parent: Optional[ObjectId] = None
    children: List[ObjectId] = field(default_factory=list)


class World(StoreAccessor):
    """
    Generation-tagged object store.

    Usage:
        world = World()
        player = world.spawn(Name("Player"), Transform())
        with world.read_phase():
            transform = world.get_reflected_component(player, Transform)
    """

    def __init__(self):
        self._records: Dict[int, _ObjectRecord] = {}
        self._generations: Dict[int, int] = {}
        self._free_indices: List[int] = []
        self._next_index = 0
        self._unreflected: Set[type] = set()
        self._guard = PhaseGuard()

    # ========== LIFECYCLE ==========

    def spawn(self, *components: Any, parent: Optional[ObjectId] = None) -> ObjectId:
        """Create an object with the given components and return its id."""
        if self._free_indices:
            index = self._free_indices.pop()
            generation = self._generations[index] + 1
        else:
            index = self._next_index
            self._next_index += 1
            generation = 0
        self._generations[index] = generation
        object_id = ObjectId(index, generation)
        self._records[index] = _ObjectRecord(generation)
        for component in components:
            self.insert(object_id, component)
        if parent is not None:
            self.set_parent(object_id, parent)
        logger.debug(f"Spawned object {object_id} with {len(components)} components")
        return object_id

    def despawn(self, object_id: ObjectId) -> None:
        """Remove an object and, recursively, all of its children."""
        record = self._record(object_id)
        for child in list(record.children):
            self.despawn(child)
        if record.parent is not None and self.contains(record.parent):
            self._record(record.parent).children.remove(object_id)
        del self._records[object_id.index]
        self._free_indices.append(object_id.index)
        logger.debug(f"Despawned object {object_id}")

    def set_parent(self, object_id: ObjectId, parent: Optional[ObjectId]) -> None:
        record = self._record(object_id)
        if record.parent is not None and self.contains(record.parent):
            self._record(record.parent).children.remove(object_id)
        record.parent = parent
        if parent is not None:
            self._record(parent).children.append(object_id)

    # ========== COMPONENTS ==========

    def register_component(self, type_id: type, reflect: bool = True) -> None:
        """Declare whether a component type takes part in reflection."""
        if reflect:
            self._unreflected.discard(type_id)
        else:
            self._unreflected.add(type_id)

    def insert(self, object_id: ObjectId, component: Any) -> None:
        """Add or replace the component of this type on an object."""
        self._record(object_id).components[type(component)] = component

    def remove(self, object_id: ObjectId, type_id: type) -> Any:
        components = self._record(object_id).components
        if type_id not in components:
            raise ComponentNotFound(f"Object {object_id} has no {type_id.__name__} component")
        return components.pop(type_id)

    def get(self, object_id: ObjectId, type_id: type) -> Optional[Any]:
        if not self.contains(object_id):
            return None
        return self._records[object_id.index].components.get(type_id)

    def component_types(self) -> Set[type]:
        """Every component type currently present on some object."""
        types: Set[type] = set()
        for record in self._records.values():
            types.update(record.components)
        return types

    def __len__(self) -> int:
        return len(self._records)

    # ========== StoreAccessor ==========

    def contains(self, object_id: ObjectId) -> bool:
        record = self._records.get(object_id.index)
        return record is not None and record.generation == object_id.generation

    def iter_objects(self) -> Iterator[ObjectId]:
        for index in sorted(self._records):
            yield ObjectId(index, self._records[index].generation)

    def get_parent(self, object_id: ObjectId) -> Optional[ObjectId]:
        return self._record(object_id).parent

    def list_children(self, object_id: ObjectId) -> List[ObjectId]:
        return list(self._record(object_id).children)

    def list_components(self, object_id: ObjectId) -> List[type]:
        return list(self._record(object_id).components)

    def is_reflected(self, type_id: type) -> bool:
        return type_id not in self._unreflected

    def get_reflected_component(self, object_id: ObjectId, type_id: type) -> Any:
        self._guard.require_not_writing("get_reflected_component")
        return self._component(object_id, type_id)

    def get_reflected_component_mut(self, object_id: ObjectId, type_id: type) -> Any:
        self._guard.require_write("get_reflected_component_mut")
        return self._component(object_id, type_id)

    def replace_component(self, object_id: ObjectId, type_id: type, value: Any) -> None:
        self._guard.require_write("replace_component")
        self._component(object_id, type_id)
        self._records[object_id.index].components[type_id] = value

    def read_phase(self):
        return self._guard.read()

    def write_phase(self):
        return self._guard.write()

    # ========== INTERNAL ==========

    def _record(self, object_id: ObjectId) -> _ObjectRecord:
        if not self.contains(object_id):
            raise ObjectNotFound(f"Object {object_id} does not exist")
        return self._records[object_id.index]

    def _component(self, object_id: ObjectId, type_id: type) -> Any:
        components = self._record(object_id).components
        if type_id not in components:
            raise ComponentNotFound(f"Object {object_id} has no {type_id.__name__} component")
        return components[type_id]
