"""
Write-Back Service.

Re-navigates a FieldPath through the live component and stores a new numeric
value at its leaf, coerced to the leaf's exact scalar kind.

Mutation model:
- mutable containers (dataclasses, plain objects) are updated in place
- immutable containers (NamedTuple, tuple, frozen dataclasses) are rebuilt
  and the rebuilt value is assigned to their parent
- a rebuilt component root is stored back with replace_component()

Coercion:
- f32 rounds to float32, f64 converts directly
- integer kinds truncate toward zero, then saturate to the target range
  (NaN becomes 0); unsigned targets clamp negatives to 0 first
- the leaf's concrete Python type is preserved (int stays int)
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

import numpy as np

from pyqt_inspector.reflection.field_path import FieldPath, Index, Named, Step, step_into
from pyqt_inspector.reflection.shapes import (
    ReflectedValue, ScalarKind, ShapeKind, reflect, scalar_kind_of,
)
from pyqt_inspector.services.field_change_dispatcher import DragValueChanged, PendingValueChanges
from pyqt_inspector.store.exceptions import (
    LocatorError, PathResolutionFailed, UnsupportedLeafKind,
)
from pyqt_inspector.store.protocols import StoreAccessor

logger = logging.getLogger(__name__)


# ========== COERCION ==========

_INT_RANGES: Dict[ScalarKind, Tuple[int, int]] = {
    ScalarKind.I32: (int(np.iinfo(np.int32).min), int(np.iinfo(np.int32).max)),
    ScalarKind.I64: (int(np.iinfo(np.int64).min), int(np.iinfo(np.int64).max)),
    ScalarKind.U32: (0, int(np.iinfo(np.uint32).max)),
    ScalarKind.U64: (0, int(np.iinfo(np.uint64).max)),
}


def _saturating_int(value: float, kind: ScalarKind) -> int:
    low, high = _INT_RANGES[kind]
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return high if value > 0 else low
    return max(low, min(high, math.trunc(value)))


def _coerce_float32(leaf: Any, value: float) -> Any:
    return np.float32(value)


def _coerce_float64(leaf: Any, value: float) -> Any:
    return type(leaf)(value)


def _int_coercer(kind: ScalarKind) -> Callable[[Any, float], Any]:
    def coerce(leaf: Any, value: float) -> Any:
        return type(leaf)(_saturating_int(value, kind))
    return coerce


# Numeric kinds in coercion priority order
_COERCERS: Dict[ScalarKind, Callable[[Any, float], Any]] = {
    ScalarKind.F32: _coerce_float32,
    ScalarKind.F64: _coerce_float64,
    ScalarKind.I32: _int_coercer(ScalarKind.I32),
    ScalarKind.I64: _int_coercer(ScalarKind.I64),
    ScalarKind.U32: _int_coercer(ScalarKind.U32),
    ScalarKind.U64: _int_coercer(ScalarKind.U64),
}


def coerce_leaf(leaf: Any, new_value: float) -> Any:
    """
    Convert new_value to the exact scalar kind of leaf.

    Raises:
        UnsupportedLeafKind: if leaf is not one of the editable numeric kinds
    """
    kind = scalar_kind_of(leaf)
    coercer = _COERCERS.get(kind)
    if coercer is None:
        kind_name = kind.value if kind is not None else type(leaf).__name__
        raise UnsupportedLeafKind(f"Cannot write a number into a {kind_name} leaf")
    return coercer(leaf, float(new_value))


# ========== ASSIGNMENT ==========

def _is_frozen_dataclass(value: Any) -> bool:
    params = getattr(type(value), "__dataclass_params__", None)
    return params is not None and params.frozen


def _struct_field_name(reflected: ReflectedValue, step: Step) -> str:
    if isinstance(step, Named):
        return step.name
    return reflected.field_names()[step.index]


def _assign_struct(reflected: ReflectedValue, step: Step, new_child: Any) -> Any:
    node = reflected.value
    name = _struct_field_name(reflected, step)
    if _is_frozen_dataclass(node):
        try:
            return dataclasses.replace(node, **{name: new_child})
        except (TypeError, ValueError) as e:
            raise PathResolutionFailed(f"Cannot rebuild frozen {reflected.type_name}: {e}") from e
    try:
        setattr(node, name, new_child)
    except AttributeError as e:
        raise PathResolutionFailed(f"Field {name!r} of {reflected.type_name} is read-only") from e
    return node


def _assign_tuple_struct(reflected: ReflectedValue, step: Step, new_child: Any) -> Any:
    node = reflected.value
    return node._replace(**{node._fields[step.index]: new_child})


def _assign_tuple(reflected: ReflectedValue, step: Step, new_child: Any) -> Any:
    node = reflected.value
    return node[:step.index] + (new_child,) + node[step.index + 1:]


def _not_assignable(reflected: ReflectedValue, step: Step, new_child: Any) -> Any:
    raise PathResolutionFailed(f"Cannot write through {reflected.kind.value} {reflected.type_name}")


_ASSIGNERS: Dict[ShapeKind, Callable[[ReflectedValue, Step, Any], Any]] = {
    ShapeKind.STRUCT: _assign_struct,
    ShapeKind.TUPLE_STRUCT: _assign_tuple_struct,
    ShapeKind.TUPLE: _assign_tuple,
    ShapeKind.SCALAR: _not_assignable,
    ShapeKind.ENUM: _not_assignable,
    ShapeKind.LIST: _not_assignable,
    ShapeKind.ARRAY: _not_assignable,
    ShapeKind.MAP: _not_assignable,
    ShapeKind.SET: _not_assignable,
    ShapeKind.OPAQUE: _not_assignable,
}

_missing = set(ShapeKind) - set(_ASSIGNERS)
if _missing:
    raise RuntimeError(f"Write-back has no assigner for shape kinds: {sorted(k.value for k in _missing)}")


def set_field_value(node: Any, steps: Sequence[Step], new_value: float) -> Any:
    """
    Write new_value at the leaf reached by steps and return the updated node.

    The returned node is the same object for mutable containers and for
    immutable ones whose changed descendant was mutated in place. Otherwise
    immutable containers come back as a rebuilt copy.

    Raises:
        PathResolutionFailed: if a step does not fit the shape it is applied to
        UnsupportedLeafKind: if the leaf is not an editable numeric kind
    """
    if not steps:
        return coerce_leaf(node, new_value)
    step, remaining = steps[0], steps[1:]
    reflected = reflect(node)
    child = step_into(reflected, step)
    new_child = set_field_value(child, remaining, new_value)
    if new_child is child:
        # Changed in place further down; the parent keeps its identity
        return node
    return _ASSIGNERS[reflected.kind](reflected, step, new_child)


# ========== SERVICE ==========

@dataclass(frozen=True)
class WriteBackFailure:
    """A change that could not be applied, and why."""
    change: DragValueChanged
    error: LocatorError


class WriteBackService:
    """
    Applies queued value changes to the store.

    Examples:
        service = WriteBackService()

        # Single change (caller owns the write phase):
        with world.write_phase():
            service.apply(world, path, 42.0)

        # One cycle's batch (opens its own write phase):
        failures = service.apply_pending(world, dispatcher.pending)
    """

    def apply(self, store: StoreAccessor, field_path: FieldPath, new_value: float) -> None:
        """
        Resolve field_path from the component root and store new_value at its leaf.

        Must run inside store.write_phase().

        Raises:
            ObjectNotFound, ComponentNotFound, PathResolutionFailed, UnsupportedLeafKind
        """
        try:
            root = store.get_reflected_component_mut(field_path.object_id, field_path.component_type_id)
            new_root = set_field_value(root, field_path.steps, new_value)
            if new_root is not root:
                store.replace_component(field_path.object_id, field_path.component_type_id, new_root)
        except LocatorError as e:
            if e.field_path is None:
                e.field_path = field_path
            raise
        logger.debug(f"Wrote {new_value!r} to {field_path}")

    def apply_pending(self, store: StoreAccessor, pending: PendingValueChanges) -> List[WriteBackFailure]:
        """
        Drain the queue and apply every change in enqueue order inside one write phase.

        Later changes to the same leaf win. A failing change is logged and
        skipped; it never aborts the batch.
        """
        changes = pending.drain()
        if not changes:
            return []

        failures: List[WriteBackFailure] = []
        with store.write_phase():
            for change in changes:
                try:
                    self.apply(store, change.field_path, change.new_value)
                except LocatorError as e:
                    logger.warning(f"Failed to set field value at {change.field_path}: {e}")
                    failures.append(WriteBackFailure(change, e))

        logger.debug(f"Write-back applied {len(changes) - len(failures)}/{len(changes)} changes")
        return failures
