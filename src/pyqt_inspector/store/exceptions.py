"""Store and locator exceptions."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pyqt_inspector.reflection.field_path import FieldPath


class LocatorError(Exception):
    """Raised when a field path cannot be resolved or written.

    Recoverable and local: write-back reports and drops the offending change.
    """

    def __init__(self, message: str, field_path: Optional['FieldPath'] = None):
        super().__init__(message)
        self.field_path = field_path


class ObjectNotFound(LocatorError):
    """The object id is absent from the store or refers to a despawned generation."""


class ComponentNotFound(LocatorError):
    """The object exists but does not carry the requested component type."""


class PathResolutionFailed(LocatorError):
    """A path step does not match the shape it is applied to, or is out of range."""


class UnsupportedLeafKind(LocatorError):
    """The terminal value is not one of the editable numeric kinds."""


class PhaseViolationError(RuntimeError):
    """Raised when read and write phases are interleaved or nested illegally."""
