"""pytest configuration and fixtures for pyqt-inspector tests."""

import os
from dataclasses import dataclass, field

import numpy as np
import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pyqt_inspector.reflection.math_types import Quat, Vec3
from pyqt_inspector.store.world import Name, World


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@dataclass
class Transform:
    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))


@dataclass
class Stats:
    level: np.uint32 = np.uint32(1)
    experience: np.uint64 = np.uint64(0)
    offset: np.int32 = np.int32(0)
    ratio: float = 0.5
    count: int = 3
    label: str = "stats"
    alive: bool = True


class FakeClock:
    """Manually advanced monotonic clock (integer nanoseconds, like time.monotonic_ns)."""

    def __init__(self, now: int = 100_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance_ms(self, ms: int) -> None:
        self.now += ms * 1_000_000


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def world():
    return World()


@pytest.fixture
def player(world):
    """Object with a Transform at (1, 2, 3) and a Stats component."""
    return world.spawn(
        Name("Player"),
        Transform(translation=Vec3(1.0, 2.0, 3.0)),
        Stats(),
    )
