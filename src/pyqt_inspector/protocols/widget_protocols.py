"""
Widget ABC contracts for inspector edit widgets.

Edit widgets declare what they can do by inheritance, so the detail panel
never has to guess at Qt's inconsistent value APIs.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, ABCMeta, abstractmethod
from typing import Any, Callable, Optional

from PyQt6.QtCore import QObject


# Combines Qt's metaclass with ABCMeta so QWidget subclasses can implement ABCs.
# ABCMeta comes second: Qt's metaclass must construct the class.
class PyQtWidgetMeta(type(QObject), ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class ValueGettable(ABC):
    """ABC for widgets that can return a value."""

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current committed value.
        """
        pass


class ValueSettable(ABC):
    """ABC for widgets that can accept a value without emitting a change."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        pass


class RangeConfigurable(ABC):
    """
    ABC for widgets that support numeric range configuration.

    Either bound may be None for an open range.
    """

    @abstractmethod
    def configure_range(self, minimum: Optional[float], maximum: Optional[float]) -> None:
        """
        Args:
            minimum: Minimum allowed value, or None
            maximum: Maximum allowed value, or None
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that report user-driven value changes.

    Programmatic set_value() calls never invoke the callback.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Args:
            callback: Called with the new value on every user change.
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        pass
