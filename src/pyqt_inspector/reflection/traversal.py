"""
Reflective traversal: flatten a live value into indented display rows.

Walks one value's structural shape depth-first, parent before children, and
emits a DisplayRow per field. Rows whose leaf is one of the editable numeric
kinds carry a LeafEdit with the steps needed to find that leaf again.

Dispatch is table-driven over ShapeKind; the table is checked for
completeness at import time so a new shape kind cannot be silently skipped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

from pyqt_inspector.reflection.field_path import Index, Named, Step
from pyqt_inspector.reflection.semantic_names import SemanticFieldNames, get_semantic_names
from pyqt_inspector.reflection.shapes import (
    ReflectedValue, ShapeKind, VariantType, reflect,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32
INLINE_TUPLE_MAX_LEN = 4

VARIANT_LABEL = "variant"
VALUE_LABEL = "value"
MAX_DEPTH_TEXT = "[max depth]"
CYCLE_TEXT = "[<cycle>]"


@dataclass(frozen=True)
class LeafEdit:
    """Edit handle for a numeric leaf."""
    numeric_value: float
    path: Tuple[Step, ...]


@dataclass(frozen=True)
class DisplayRow:
    """One label/value line of an inspected value."""
    label: str
    value_text: str
    indent: int
    edit: Optional[LeafEdit] = None

    @property
    def editable(self) -> bool:
        return self.edit is not None


def try_extract_numeric(value: Any) -> Optional[float]:
    """Return the value as float if it is one of the six editable numeric kinds."""
    reflected = reflect(value)
    if reflected.kind is ShapeKind.SCALAR and reflected.scalar_kind.is_numeric:
        return float(value)
    return None


def format_simple_value(value: Any) -> Optional[str]:
    """Format a value as one line of text, or None if it needs its own rows."""
    reflected = reflect(value)
    formatter = _SIMPLE_FORMATTERS[reflected.kind]
    return formatter(reflected)


def _format_scalar(reflected: ReflectedValue) -> str:
    if isinstance(reflected.value, str):
        return repr(reflected.value)
    return str(reflected.value)


def _format_inline_tuple(reflected: ReflectedValue) -> Optional[str]:
    if reflected.field_len() > INLINE_TUPLE_MAX_LEN:
        return None
    parts = [format_simple_value(v) for v in reflected.value]
    if any(p is None for p in parts):
        return None
    return f"({', '.join(parts)})"


_SIMPLE_FORMATTERS: Dict[ShapeKind, Callable[[ReflectedValue], Optional[str]]] = {
    ShapeKind.SCALAR: _format_scalar,
    ShapeKind.STRUCT: lambda r: None,
    ShapeKind.TUPLE_STRUCT: lambda r: None,
    ShapeKind.ENUM: lambda r: None,
    ShapeKind.TUPLE: _format_inline_tuple,
    ShapeKind.LIST: lambda r: f"[{r.collection_len()} items]",
    ShapeKind.ARRAY: lambda r: f"[{r.collection_len()} items]",
    ShapeKind.MAP: lambda r: f"{{{r.collection_len()} entries}}",
    ShapeKind.SET: lambda r: f"{{{r.collection_len()} items}}",
    ShapeKind.OPAQUE: lambda r: repr(r.value),
}


class FieldExtractor:
    """
    Extracts display rows from reflected values.

    Stateless between calls apart from its configuration; extract() on the
    same value always returns an equal row list.

    Usage:
        extractor = FieldExtractor(get_semantic_names())
        rows = extractor.extract(transform)
    """

    def __init__(self, semantic_names: Optional[SemanticFieldNames] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        self.semantic_names = semantic_names or get_semantic_names()
        self.max_depth = max_depth

    def extract(self, value: Any, base_path: Tuple[Step, ...] = (), indent: int = 0) -> List[DisplayRow]:
        rows: List[DisplayRow] = []
        self._extract_into(value, rows, indent, tuple(base_path), frozenset(), 0)
        return rows

    def _extract_into(self, value: Any, rows: List[DisplayRow], indent: int,
                      path: Tuple[Step, ...], ancestors: FrozenSet[int], depth: int) -> None:
        reflected = reflect(value)
        handler = _EXTRACTORS[reflected.kind]
        handler(self, reflected, rows, indent, path, ancestors | {id(value)}, depth)

    # ========== SHAPE HANDLERS ==========

    def _extract_struct(self, reflected, rows, indent, path, ancestors, depth) -> None:
        for name in reflected.field_names():
            self._emit_field(name, reflected.field(name), rows, indent,
                             path + (Named(name),), ancestors, depth)

    def _extract_tuple_struct(self, reflected, rows, indent, path, ancestors, depth) -> None:
        for i in range(reflected.field_len()):
            label = self.semantic_names.get_field_name(reflected.type_id, i) or f".{i}"
            self._emit_field(label, reflected.field_at(i), rows, indent,
                             path + (Index(i),), ancestors, depth)

    def _extract_enum(self, reflected, rows, indent, path, ancestors, depth) -> None:
        rows.append(DisplayRow(VARIANT_LABEL, reflected.variant_name, indent))
        if reflected.variant_type is VariantType.UNIT:
            return
        # Payload fields are shown but never editable
        for i, (name, field_value) in enumerate(reflected.variant_fields()):
            text = format_simple_value(field_value)
            if text is not None:
                rows.append(DisplayRow(name if name is not None else f".{i}", text, indent + 1))

    def _extract_other(self, reflected, rows, indent, path, ancestors, depth) -> None:
        text = format_simple_value(reflected.value)
        if text is not None:
            rows.append(DisplayRow(VALUE_LABEL, text, indent))

    def _extract_tuple(self, reflected, rows, indent, path, ancestors, depth) -> None:
        text = _format_inline_tuple(reflected)
        if text is not None:
            rows.append(DisplayRow(VALUE_LABEL, text, indent))
            return
        self._extract_tuple_struct(reflected, rows, indent, path, ancestors, depth)

    # ========== FIELD EMISSION ==========

    def _emit_field(self, label: str, field_value: Any, rows: List[DisplayRow], indent: int,
                    field_path: Tuple[Step, ...], ancestors: FrozenSet[int], depth: int) -> None:
        text = format_simple_value(field_value)
        if text is not None:
            numeric = try_extract_numeric(field_value)
            edit = LeafEdit(numeric, field_path) if numeric is not None else None
            rows.append(DisplayRow(label, text, indent, edit))
            return

        # Complex nested value: header row, then recurse one level deeper
        header = f"[{type(field_value).__name__}]"
        if id(field_value) in ancestors:
            rows.append(DisplayRow(label, CYCLE_TEXT, indent))
            return
        if depth + 1 > self.max_depth:
            logger.debug(f"Traversal depth cap {self.max_depth} reached at {label!r}")
            rows.append(DisplayRow(label, MAX_DEPTH_TEXT, indent))
            return
        rows.append(DisplayRow(label, header, indent))
        self._extract_into(field_value, rows, indent + 1, field_path, ancestors, depth + 1)


_EXTRACTORS: Dict[ShapeKind, Callable] = {
    ShapeKind.STRUCT: FieldExtractor._extract_struct,
    ShapeKind.TUPLE_STRUCT: FieldExtractor._extract_tuple_struct,
    ShapeKind.TUPLE: FieldExtractor._extract_tuple,
    ShapeKind.ENUM: FieldExtractor._extract_enum,
    ShapeKind.SCALAR: FieldExtractor._extract_other,
    ShapeKind.LIST: FieldExtractor._extract_other,
    ShapeKind.ARRAY: FieldExtractor._extract_other,
    ShapeKind.MAP: FieldExtractor._extract_other,
    ShapeKind.SET: FieldExtractor._extract_other,
    ShapeKind.OPAQUE: FieldExtractor._extract_other,
}

_missing = (set(ShapeKind) - set(_EXTRACTORS)) | (set(ShapeKind) - set(_SIMPLE_FORMATTERS))
if _missing:
    raise RuntimeError(f"Traversal has no handler for shape kinds: {sorted(k.value for k in _missing)}")


def extract_fields(value: Any, semantic_names: Optional[SemanticFieldNames] = None,
                   base_path: Tuple[Step, ...] = (), indent: int = 0,
                   max_depth: int = DEFAULT_MAX_DEPTH) -> List[DisplayRow]:
    """Flatten a value into display rows (convenience wrapper around FieldExtractor)."""
    return FieldExtractor(semantic_names, max_depth).extract(value, base_path, indent)
