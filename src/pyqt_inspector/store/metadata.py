"""
Component metadata: display names and approximate memory sizes per component type.

Sizes are measured once per type, from the first instance seen, and cached;
update() only measures types that were not seen before.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from pyqt_inspector.store.ids import ObjectId
from pyqt_inspector.store.protocols import StoreAccessor

logger = logging.getLogger(__name__)

_UNITS = ("B", "KiB", "MiB", "GiB")


@dataclass(frozen=True, order=True)
class MemorySize:
    """Byte count with a human-readable rendering ("24 B", "1.5 KiB")."""
    num_bytes: int

    def __add__(self, other: 'MemorySize') -> 'MemorySize':
        return MemorySize(self.num_bytes + other.num_bytes)

    def __str__(self) -> str:
        size = float(self.num_bytes)
        for unit in _UNITS:
            if size < 1024 or unit == _UNITS[-1]:
                if unit == "B":
                    return f"{int(size)} B"
                return f"{size:.1f} {unit}"
            size /= 1024
        return f"{self.num_bytes} B"


@dataclass(frozen=True)
class ComponentMetadata:
    """Per-type metadata. type_id is None for types that opt out of reflection."""
    name: str
    short_name: str
    memory_size: MemorySize
    type_id: Optional[type]


def _qualified_name(cls: type) -> str:
    module = cls.__module__
    if module in (None, "builtins"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


class ComponentMetadataMap:
    """
    Cache of ComponentMetadata keyed by component type.

    Usage:
        metadata = ComponentMetadataMap.generate(world)
        ...
        metadata.update(world)   # picks up newly seen component types
    """

    def __init__(self):
        self.map: Dict[type, ComponentMetadata] = {}

    @classmethod
    def generate(cls, store: StoreAccessor) -> 'ComponentMetadataMap':
        metadata = cls()
        metadata.update(store)
        return metadata

    def update(self, store: StoreAccessor) -> None:
        """Measure component types not seen before; known types are left untouched."""
        added = 0
        for object_id in store.iter_objects():
            for type_id in store.list_components(object_id):
                if type_id in self.map:
                    continue
                instance = store.get_reflected_component(object_id, type_id)
                self.map[type_id] = ComponentMetadata(
                    name=_qualified_name(type_id),
                    short_name=type_id.__name__,
                    memory_size=MemorySize(sys.getsizeof(instance)),
                    type_id=type_id if store.is_reflected(type_id) else None,
                )
                added += 1
        if added:
            logger.debug(f"Component metadata: {added} new types, {len(self.map)} total")

    def get(self, type_id: type) -> Optional[ComponentMetadata]:
        return self.map.get(type_id)

    def total_memory(self, store: StoreAccessor, object_id: ObjectId) -> MemorySize:
        """Sum of the known sizes of an object's components."""
        total = MemorySize(0)
        for type_id in store.list_components(object_id):
            meta = self.map.get(type_id)
            if meta is not None:
                total = total + meta.memory_size
        return total

    def __contains__(self, type_id: type) -> bool:
        return type_id in self.map

    def __iter__(self) -> Iterator[type]:
        return iter(self.map)

    def __len__(self) -> int:
        return len(self.map)
