"""Semantic field name registry for tuple structs.

Provides human-readable field names (x, y, z) instead of tuple indices
(.0, .1, .2) for the built-in vector and quaternion types.
"""

from typing import Dict, Optional, Sequence, Tuple

from .math_types import MATH_TYPE_FIELD_NAMES


class SemanticFieldNames:
    """Registry mapping types to semantic field names for tuple structs.

    Lookup walks the type's MRO, so a subclass of a registered vector type
    keeps the parent's labels unless it registers its own.

    Example:
        names = SemanticFieldNames()
        names.register(Rgb, ["r", "g", "b"])
        names.get_field_name(Rgb, 1)  # "g"
    """

    def __init__(self, seed_defaults: bool = True):
        self._overrides: Dict[type, Tuple[str, ...]] = {}
        if seed_defaults:
            for type_id, names in MATH_TYPE_FIELD_NAMES.items():
                self.register(type_id, names)

    def register(self, type_id: type, names: Sequence[str]) -> None:
        """Register names for a type, in field order."""
        self._overrides[type_id] = tuple(names)

    def get_field_name(self, type_id: type, index: int) -> Optional[str]:
        """Return the name for a field index, or None if unregistered or out of range."""
        names = self._lookup(type_id)
        if names is None or not 0 <= index < len(names):
            return None
        return names[index]

    def has_override(self, type_id: type) -> bool:
        return self._lookup(type_id) is not None

    def _lookup(self, type_id: type) -> Optional[Tuple[str, ...]]:
        for klass in getattr(type_id, "__mro__", (type_id,)):
            names = self._overrides.get(klass)
            if names is not None:
                return names
        return None


# Process-wide registry (created on first use)
_semantic_names: Optional[SemanticFieldNames] = None


def get_semantic_names() -> SemanticFieldNames:
    """Get the shared semantic name registry, seeded with the math types."""
    global _semantic_names
    if _semantic_names is None:
        _semantic_names = SemanticFieldNames()
    return _semantic_names


def register_semantic_names(type_id: type, names: Sequence[str]) -> None:
    """Register semantic names on the shared registry."""
    get_semantic_names().register(type_id, names)
