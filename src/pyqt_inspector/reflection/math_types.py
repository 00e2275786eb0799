"""
Fixed-arity numeric vector and rotation types.

Each type is an immutable NamedTuple whose components are stored as a fixed
numpy scalar kind, so reflection sees e.g. Vec3 as a tuple struct of three
float32 leaves. The semantic naming overlay labels their components x/y/z/w.
"""

from collections import namedtuple
from typing import Callable, Dict, Sequence, Tuple

import numpy as np

XY = ("x", "y")
XYZ = ("x", "y", "z")
XYZW = ("x", "y", "z", "w")


def _vector_type(name: str, components: Sequence[str], scalar: Callable,
                 defaults: Tuple = None, doc: str = "") -> type:
    """Build a NamedTuple subclass that coerces every component to `scalar`."""
    base = namedtuple(f"_{name}", components)
    default_values = defaults if defaults is not None else (0,) * len(components)

    def __new__(cls, *values, **named):
        if not values and not named:
            values = default_values
        return base.__new__(cls, *(scalar(v) for v in values),
                            **{k: scalar(v) for k, v in named.items()})

    return type(name, (base,), {
        "__slots__": (),
        "__new__": __new__,
        "__module__": __name__,
        "__doc__": doc or f"{len(components)}-component {np.dtype(scalar).name} vector.",
    })


Vec2 = _vector_type("Vec2", XY, np.float32)
Vec3 = _vector_type("Vec3", XYZ, np.float32)
Vec4 = _vector_type("Vec4", XYZW, np.float32)

IVec2 = _vector_type("IVec2", XY, np.int32)
IVec3 = _vector_type("IVec3", XYZ, np.int32)
IVec4 = _vector_type("IVec4", XYZW, np.int32)

UVec2 = _vector_type("UVec2", XY, np.uint32)
UVec3 = _vector_type("UVec3", XYZ, np.uint32)
UVec4 = _vector_type("UVec4", XYZW, np.uint32)

DVec2 = _vector_type("DVec2", XY, np.float64)
DVec3 = _vector_type("DVec3", XYZ, np.float64)
DVec4 = _vector_type("DVec4", XYZW, np.float64)

Quat = _vector_type("Quat", XYZW, np.float32, defaults=(0, 0, 0, 1),
                    doc="Rotation quaternion (x, y, z, w); defaults to identity.")

# Component names for every built-in math type, used to seed the naming overlay
MATH_TYPE_FIELD_NAMES: Dict[type, Tuple[str, ...]] = {
    Vec2: XY, Vec3: XYZ, Vec4: XYZW,
    IVec2: XY, IVec3: XYZ, IVec4: XYZW,
    UVec2: XY, UVec3: XYZ, UVec4: XYZW,
    DVec2: XY, DVec3: XYZ, DVec4: XYZW,
    Quat: XYZW,
}
