"""
Protocol layer: configuration, the resource API contract and widget ABCs.

ABC-based contracts that keep the services independent of HTTP and the
form independent of concrete Qt widgets.
"""

from .console_config import ConsoleConfig, set_console_config, get_console_config
from .resource_api import ResourceApi
from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    PlaceholderCapable,
    RangeConfigurable,
    ChangeSignalEmitter,
    InvalidStateMarkable,
    FieldWidget,
)
from .widget_adapters import (
    LineEditAdapter,
    ListLineEditAdapter,
    TextEditAdapter,
    SpinBoxAdapter,
    ComboBoxAdapter,
    CheckBoxAdapter,
    FilePickerAdapter,
    PyQtWidgetMeta,
)

__all__ = [
    "ConsoleConfig",
    "set_console_config",
    "get_console_config",
    "ResourceApi",
    "ValueGettable",
    "ValueSettable",
    "PlaceholderCapable",
    "RangeConfigurable",
    "ChangeSignalEmitter",
    "InvalidStateMarkable",
    "FieldWidget",
    "LineEditAdapter",
    "ListLineEditAdapter",
    "TextEditAdapter",
    "SpinBoxAdapter",
    "ComboBoxAdapter",
    "CheckBoxAdapter",
    "FilePickerAdapter",
    "PyQtWidgetMeta",
]
