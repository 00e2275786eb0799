"""
Widget protocol definitions and inspector configuration.

ABC-based widget contracts that eliminate duck typing in favor of
explicit, fail-loud inheritance-based architecture.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    RangeConfigurable,
    ChangeSignalEmitter,
    PyQtWidgetMeta,
)
from .inspector_config import InspectorConfig, set_inspector_config, get_inspector_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "RangeConfigurable",
    "ChangeSignalEmitter",
    "PyQtWidgetMeta",
    "InspectorConfig",
    "set_inspector_config",
    "get_inspector_config",
]
