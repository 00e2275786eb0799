"""
Shape model for runtime reflection.

Classifies arbitrary Python values into a closed set of structural shapes so
traversal and write-back can work over any object without per-type code.

Design:
- ShapeKind: closed enum, one member per structural kind
- SCALAR_KIND_REGISTRY: exact Python type → ScalarKind (no isinstance checks,
  so bool never passes as int and np.float64 never passes as float)
- reflect(): single classification entry point returning a ReflectedValue view
"""

import collections
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import numpy as np


class ShapeKind(Enum):
    """Structural kind of a reflected value."""
    SCALAR = "scalar"
    STRUCT = "struct"
    TUPLE_STRUCT = "tuple_struct"
    TUPLE = "tuple"
    ENUM = "enum"
    LIST = "list"
    ARRAY = "array"
    MAP = "map"
    SET = "set"
    OPAQUE = "opaque"


class ScalarKind(Enum):
    """Concrete scalar kinds recognized by exact type."""
    F32 = "f32"
    F64 = "f64"
    I32 = "i32"
    I64 = "i64"
    U32 = "u32"
    U64 = "u64"
    F16 = "f16"
    I8 = "i8"
    I16 = "i16"
    U8 = "u8"
    U16 = "u16"
    BOOL = "bool"
    STR = "str"

    @property
    def is_numeric(self) -> bool:
        return self in NUMERIC_KINDS


class VariantType(Enum):
    """Payload layout of an enum variant."""
    UNIT = "unit"
    TUPLE = "tuple"
    STRUCT = "struct"


# Editable numeric kinds, in write-back coercion priority order
NUMERIC_KINDS: Tuple[ScalarKind, ...] = (
    ScalarKind.F32,
    ScalarKind.F64,
    ScalarKind.I32,
    ScalarKind.I64,
    ScalarKind.U32,
    ScalarKind.U64,
)

# Exact type → scalar kind. Lookup is by type(value), never isinstance.
SCALAR_KIND_REGISTRY: Dict[type, ScalarKind] = {
    np.float32: ScalarKind.F32,
    np.float64: ScalarKind.F64,
    float: ScalarKind.F64,
    np.int32: ScalarKind.I32,
    np.int64: ScalarKind.I64,
    int: ScalarKind.I64,
    np.uint32: ScalarKind.U32,
    np.uint64: ScalarKind.U64,
    np.float16: ScalarKind.F16,
    np.int8: ScalarKind.I8,
    np.int16: ScalarKind.I16,
    np.uint8: ScalarKind.U8,
    np.uint16: ScalarKind.U16,
    bool: ScalarKind.BOOL,
    np.bool_: ScalarKind.BOOL,
    str: ScalarKind.STR,
}

# Metadata key used to hide a dataclass field from inspection:
#     secret: str = field(default="", metadata={"inspect": False})
INSPECT_METADATA_KEY = "inspect"


class Variant:
    """
    Base class for data-carrying enum variants.

    Python enums cannot carry per-member payloads, so sum types are written as
    a family of Variant subclasses. Each subclass is reflected as an ENUM whose
    variant name is the class name:

        class Shape(Variant): pass

        @dataclass
        class Circle(Shape):       # struct variant
            radius: float

        class Segment(Shape, tuple):   # tuple variant
            pass

        @dataclass
        class Empty(Shape):        # unit variant (no fields)
            pass
    """

    __slots__ = ()


def scalar_kind_of(value: Any) -> Optional[ScalarKind]:
    """Return the exact scalar kind of a value, or None if it is not a scalar."""
    return SCALAR_KIND_REGISTRY.get(type(value))


def short_type_name(value: Any) -> str:
    """Short display name of a value's type (no module path)."""
    return type(value).__name__


def is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _is_plain_instance(value: Any) -> bool:
    """True for user objects whose public attributes can be listed as fields."""
    if isinstance(value, type) or callable(value):
        return False
    if type(value).__module__ == "builtins":
        return False
    return hasattr(value, "__dict__") or bool(_slot_names(type(value)))


def _slot_names(cls: type) -> List[str]:
    names: List[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in names and slot not in ("__dict__", "__weakref__"):
                names.append(slot)
    return names


def _instance_field_names(value: Any) -> List[str]:
    if dataclasses.is_dataclass(value):
        return [
            f.name for f in dataclasses.fields(value)
            if f.metadata.get(INSPECT_METADATA_KEY, True)
        ]
    names = [n for n in _slot_names(type(value)) if hasattr(value, n)]
    names.extend(n for n in getattr(value, "__dict__", {}) if n not in names)
    return [n for n in names if not n.startswith("_")]


@dataclass(frozen=True)
class ReflectedValue:
    """
    Read-only structural view over one Python value.

    Accessors are only meaningful for the matching shape kind; calling a
    struct accessor on a collection raises TypeError (fail-loud).
    """
    value: Any
    kind: ShapeKind
    scalar_kind: Optional[ScalarKind] = None

    @property
    def type_id(self) -> type:
        return type(self.value)

    @property
    def type_name(self) -> str:
        return short_type_name(self.value)

    # ========== STRUCT / TUPLE STRUCT / TUPLE ==========

    def field_names(self) -> List[str]:
        """Field names of a struct, or of a tuple struct's positional fields."""
        if self.kind is ShapeKind.STRUCT:
            return _instance_field_names(self.value)
        if self.kind is ShapeKind.TUPLE_STRUCT:
            return list(type(self.value)._fields)
        raise TypeError(f"{self.kind.value} has no named fields")

    def field_len(self) -> int:
        if self.kind is ShapeKind.STRUCT:
            return len(self.field_names())
        if self.kind in (ShapeKind.TUPLE_STRUCT, ShapeKind.TUPLE):
            return len(self.value)
        raise TypeError(f"{self.kind.value} has no fields")

    def field(self, name: str) -> Any:
        if self.kind is not ShapeKind.STRUCT:
            raise TypeError(f"{self.kind.value} has no named fields")
        return getattr(self.value, name)

    def field_at(self, index: int) -> Any:
        if self.kind is ShapeKind.STRUCT:
            return getattr(self.value, self.field_names()[index])
        if self.kind in (ShapeKind.TUPLE_STRUCT, ShapeKind.TUPLE):
            return self.value[index]
        raise TypeError(f"{self.kind.value} has no positional fields")

    # ========== ENUM ==========

    @property
    def variant_name(self) -> str:
        self._require(ShapeKind.ENUM)
        if isinstance(self.value, Enum):
            return self.value.name
        return type(self.value).__name__

    @property
    def variant_type(self) -> VariantType:
        payload = self._variant_payload()
        if payload is None:
            return VariantType.UNIT
        if dataclasses.is_dataclass(payload):
            return VariantType.STRUCT if _instance_field_names(payload) else VariantType.UNIT
        return VariantType.TUPLE if len(payload) else VariantType.UNIT

    def variant_fields(self) -> List[Tuple[Optional[str], Any]]:
        """Payload fields as (name, value); name is None for tuple variants."""
        payload = self._variant_payload()
        variant_type = self.variant_type
        if variant_type is VariantType.STRUCT:
            return [(n, getattr(payload, n)) for n in _instance_field_names(payload)]
        if variant_type is VariantType.TUPLE:
            return [(None, v) for v in payload]
        return []

    def _variant_payload(self) -> Any:
        self._require(ShapeKind.ENUM)
        if isinstance(self.value, Enum):
            payload = self.value.value
            if isinstance(payload, tuple) or dataclasses.is_dataclass(payload):
                return payload
            return None
        if isinstance(self.value, tuple) or dataclasses.is_dataclass(self.value):
            return self.value
        return None

    # ========== COLLECTIONS ==========

    def collection_len(self) -> int:
        """Element or entry count of a collection."""
        if self.kind is ShapeKind.ARRAY:
            return int(self.value.size)
        if self.kind in (ShapeKind.LIST, ShapeKind.MAP, ShapeKind.SET):
            return len(self.value)
        raise TypeError(f"{self.kind.value} is not a collection")

    def _require(self, kind: ShapeKind) -> None:
        if self.kind is not kind:
            raise TypeError(f"Expected {kind.value}, got {self.kind.value}")


def reflect(value: Any) -> ReflectedValue:
    """
    Classify a value into its shape.

    Order matters: scalars first (exact type), then enums and variants
    (which may themselves be tuples or dataclasses), then tuples, structs,
    collections, and finally plain objects.
    """
    scalar_kind = scalar_kind_of(value)
    if scalar_kind is not None:
        return ReflectedValue(value, ShapeKind.SCALAR, scalar_kind)
    if isinstance(value, (Enum, Variant)):
        return ReflectedValue(value, ShapeKind.ENUM)
    if is_named_tuple(value):
        return ReflectedValue(value, ShapeKind.TUPLE_STRUCT)
    if isinstance(value, tuple):
        return ReflectedValue(value, ShapeKind.TUPLE)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ReflectedValue(value, ShapeKind.STRUCT)
    if isinstance(value, np.ndarray):
        return ReflectedValue(value, ShapeKind.ARRAY)
    if isinstance(value, (list, collections.deque)):
        return ReflectedValue(value, ShapeKind.LIST)
    if isinstance(value, Mapping):
        return ReflectedValue(value, ShapeKind.MAP)
    if isinstance(value, (set, frozenset)):
        return ReflectedValue(value, ShapeKind.SET)
    if _is_plain_instance(value):
        return ReflectedValue(value, ShapeKind.STRUCT)
    return ReflectedValue(value, ShapeKind.OPAQUE)
