"""
Store accessor ABC contracts.

The inspector never owns the object store; it reads and writes through these
capabilities. Splitting them keeps each consumer's dependency explicit:
traversal only needs ComponentReader, write-back needs ComponentWriter, the
relationships tab needs HierarchyReader.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Iterator, List, Optional

from pyqt_inspector.store.ids import ObjectId


class ObjectLookup(ABC):
    """ABC for stores that can enumerate and identify objects."""

    @abstractmethod
    def contains(self, object_id: ObjectId) -> bool:
        """True if the id refers to a live object of the same generation."""
        pass

    @abstractmethod
    def iter_objects(self) -> Iterator[ObjectId]:
        """Iterate over every live object id."""
        pass


class HierarchyReader(ABC):
    """ABC for stores with parent/child relationships between objects."""

    @abstractmethod
    def get_parent(self, object_id: ObjectId) -> Optional[ObjectId]:
        pass

    @abstractmethod
    def list_children(self, object_id: ObjectId) -> List[ObjectId]:
        pass


class ComponentReader(ABC):
    """ABC for read access to an object's components."""

    @abstractmethod
    def list_components(self, object_id: ObjectId) -> List[type]:
        """Component types carried by an object, in insertion order."""
        pass

    @abstractmethod
    def get_reflected_component(self, object_id: ObjectId, type_id: type) -> Any:
        """
        Return the live component for read-only traversal.

        Raises:
            ObjectNotFound: if the object is absent or stale
            ComponentNotFound: if the object has no component of that type
        """
        pass

    @abstractmethod
    def is_reflected(self, type_id: type) -> bool:
        """False for component types that opt out of reflection."""
        pass

    @abstractmethod
    def read_phase(self) -> AbstractContextManager:
        pass


class ComponentWriter(ABC):
    """ABC for mutable access to an object's components."""

    @abstractmethod
    def get_reflected_component_mut(self, object_id: ObjectId, type_id: type) -> Any:
        """
        Return the live component for mutation. Only valid inside write_phase().

        Raises:
            ObjectNotFound, ComponentNotFound, PhaseViolationError
        """
        pass

    @abstractmethod
    def replace_component(self, object_id: ObjectId, type_id: type, value: Any) -> None:
        """Store a rebuilt immutable component. Only valid inside write_phase()."""
        pass

    @abstractmethod
    def write_phase(self) -> AbstractContextManager:
        pass


class StoreAccessor(ObjectLookup, HierarchyReader, ComponentReader, ComponentWriter):
    """Full store contract consumed by the inspector."""
    pass
