"""
Field paths: durable addresses of scalar leaves inside live components.

A FieldPath is (object id, owning component type, steps). It holds no
reference to the live value; every write re-resolves it from the store root,
so it survives the component being moved or rebuilt between frames.

Steps:
    Named("translation")  - struct field by name
    Index(1)              - positional field of a struct, tuple struct or tuple

Text form (used in logs and for parsing):
    "translation[1]"  ==  (Named("translation"), Index(1))
"""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple, Union

from pyqt_inspector.reflection.shapes import ReflectedValue, ShapeKind, reflect
from pyqt_inspector.store.exceptions import PathResolutionFailed
from pyqt_inspector.store.ids import ObjectId


@dataclass(frozen=True)
class Named:
    """Named struct field step."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Index:
    """Positional field step."""
    index: int

    def __str__(self) -> str:
        return f"[{self.index}]"


Step = Union[Named, Index]

_STEP_TOKEN_RE = re.compile(r"\[(\d+)\]|\.?([A-Za-z_][A-Za-z0-9_]*)|\.(\d+)")


def format_steps(steps: Iterable[Step]) -> str:
    """Render steps as "a.b[2].c"."""
    parts = []
    for step in steps:
        if isinstance(step, Named) and parts:
            parts.append(f".{step.name}")
        else:
            parts.append(str(step))
    return "".join(parts)


def parse_steps(text: str) -> Tuple[Step, ...]:
    """Parse "a.b[2].c" (or "a.b.2.c") back into steps.

    Raises:
        ValueError: if the text contains anything that is not a step
    """
    steps = []
    pos = 0
    text = text.strip()
    while pos < len(text):
        match = _STEP_TOKEN_RE.match(text, pos)
        if match is None or match.end() == pos:
            raise ValueError(f"Invalid field path {text!r} at position {pos}")
        bracket_index, name, dotted_index = match.groups()
        if name is not None:
            steps.append(Named(name))
        else:
            steps.append(Index(int(bracket_index if bracket_index is not None else dotted_index)))
        pos = match.end()
    return tuple(steps)


@dataclass(frozen=True)
class FieldPath:
    """Locates one scalar leaf: object, owning component type, steps from the component root."""
    object_id: ObjectId
    component_type_id: type
    steps: Tuple[Step, ...] = field(default_factory=tuple)

    def child(self, step: Step) -> 'FieldPath':
        return FieldPath(self.object_id, self.component_type_id, self.steps + (step,))

    def __str__(self) -> str:
        steps = format_steps(self.steps)
        owner = f"{self.object_id}:{self.component_type_id.__name__}"
        return f"{owner}.{steps}" if steps and not steps.startswith("[") else f"{owner}{steps}"


def step_into(reflected: ReflectedValue, step: Step) -> Any:
    """
    Navigate one step into a reflected value.

    Named requires a struct with that field. Index requires a struct, tuple
    struct or tuple and an in-range index. Anything else fails.

    Raises:
        PathResolutionFailed: on shape/step mismatch, unknown name or bad index
    """
    if isinstance(step, Named):
        if reflected.kind is not ShapeKind.STRUCT:
            raise PathResolutionFailed(
                f"Cannot take field {step.name!r} of {reflected.kind.value} {reflected.type_name}"
            )
        if step.name not in reflected.field_names():
            raise PathResolutionFailed(f"{reflected.type_name} has no field {step.name!r}")
        return reflected.field(step.name)

    if isinstance(step, Index):
        if reflected.kind not in (ShapeKind.STRUCT, ShapeKind.TUPLE_STRUCT, ShapeKind.TUPLE):
            raise PathResolutionFailed(
                f"Cannot index {reflected.kind.value} {reflected.type_name}"
            )
        if not 0 <= step.index < reflected.field_len():
            raise PathResolutionFailed(
                f"Index {step.index} out of range for {reflected.type_name} "
                f"with {reflected.field_len()} fields"
            )
        return reflected.field_at(step.index)

    raise PathResolutionFailed(f"Unknown path step {step!r}")


def resolve_steps(root: Any, steps: Iterable[Step]) -> Any:
    """Follow steps from a root value and return the value they reach (read-only)."""
    current = root
    for step in steps:
        current = step_into(reflect(current), step)
    return current
