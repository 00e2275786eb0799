"""
Runtime reflection.

Shape classification, field paths, semantic naming and traversal. Pure
Python with numpy scalar kinds; no Qt dependency.
"""

from .shapes import (
    ShapeKind,
    ScalarKind,
    VariantType,
    Variant,
    ReflectedValue,
    NUMERIC_KINDS,
    SCALAR_KIND_REGISTRY,
    reflect,
    scalar_kind_of,
)
from .field_path import (
    Named,
    Index,
    Step,
    FieldPath,
    format_steps,
    parse_steps,
    resolve_steps,
    step_into,
)
from .semantic_names import SemanticFieldNames, get_semantic_names, register_semantic_names
from .traversal import (
    DisplayRow,
    LeafEdit,
    FieldExtractor,
    extract_fields,
    format_simple_value,
    try_extract_numeric,
)
from .math_types import (
    Vec2, Vec3, Vec4,
    IVec2, IVec3, IVec4,
    UVec2, UVec3, UVec4,
    DVec2, DVec3, DVec4,
    Quat,
)

__all__ = [
    "ShapeKind",
    "ScalarKind",
    "VariantType",
    "Variant",
    "ReflectedValue",
    "NUMERIC_KINDS",
    "SCALAR_KIND_REGISTRY",
    "reflect",
    "scalar_kind_of",
    "Named",
    "Index",
    "Step",
    "FieldPath",
    "format_steps",
    "parse_steps",
    "resolve_steps",
    "step_into",
    "SemanticFieldNames",
    "get_semantic_names",
    "register_semantic_names",
    "DisplayRow",
    "LeafEdit",
    "FieldExtractor",
    "extract_fields",
    "format_simple_value",
    "try_extract_numeric",
    "Vec2", "Vec3", "Vec4",
    "IVec2", "IVec3", "IVec4",
    "UVec2", "UVec3", "UVec4",
    "DVec2", "DVec3", "DVec4",
    "Quat",
]
