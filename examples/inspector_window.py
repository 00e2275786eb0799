"""
Opens an inspector window over a small sample world.

The window shows:
- the object list with component counts and memory usage
- a Components tab with reflected values (drag or double-click numbers to edit)
- a Relationships tab with the parent/child hierarchy (click to navigate)

Run with:
    python examples/inspector_window.py
"""

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional

import numpy as np
from PyQt6.QtWidgets import QApplication

from pyqt_inspector.app.window import InspectorWindow
from pyqt_inspector.reflection.math_types import Quat, Vec2, Vec3
from pyqt_inspector.reflection.shapes import Variant
from pyqt_inspector.store.world import Name, World


@dataclass
class Transform:
    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))


@dataclass
class Sprite:
    color: tuple = (1.0, 1.0, 1.0, 1.0)
    custom_size: Optional[Vec2] = None
    flip_x: bool = False


class Visibility(Enum):
    INHERITED = "inherited"
    HIDDEN = "hidden"
    VISIBLE = "visible"


class Health(NamedTuple):
    current: np.int32
    maximum: np.uint32


class Motion(Variant):
    pass


@dataclass(frozen=True)
class Orbit(Motion):
    radius: float
    speed: float


@dataclass
class Inventory:
    items: List[str] = field(default_factory=list)
    gold: np.uint64 = np.uint64(0)


def build_world() -> World:
    world = World()
    parent = world.spawn(
        Name("Parent Ducky"),
        Transform(),
        Sprite(),
        Visibility.VISIBLE,
        Inventory(["feather", "bread"], np.uint64(12)),
    )
    world.spawn(
        Name("Child Red"),
        Transform(translation=Vec3(50.0, 0.0, 0.0)),
        Sprite(color=(1.0, 0.0, 0.0, 1.0), custom_size=Vec2(30.0, 30.0)),
        Health(np.int32(80), np.uint32(100)),
        parent=parent,
    )
    world.spawn(
        Name("Child Blue"),
        Transform(translation=Vec3(-50.0, 0.0, 0.0)),
        Sprite(color=(0.0, 0.0, 1.0, 1.0), custom_size=Vec2(30.0, 30.0)),
        Orbit(radius=25.0, speed=1.5),
        parent=parent,
    )
    world.spawn(
        Name("Standalone Green"),
        Transform(translation=Vec3(-150.0, 0.0, 0.0)),
        Sprite(color=(0.0, 1.0, 0.0, 1.0), custom_size=Vec2(50.0, 50.0)),
    )
    # An object without a name
    world.spawn(
        Transform(translation=Vec3(150.0, 0.0, 0.0)),
        Sprite(color=(1.0, 1.0, 0.0, 1.0), custom_size=Vec2(40.0, 40.0)),
    )
    return world


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    app = QApplication(sys.argv)
    window = InspectorWindow(build_world())
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
