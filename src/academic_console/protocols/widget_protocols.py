"""
Widget ABC contracts for resource form fields.

The form dialog only talks to these: it fills inputs from a draft, reads
them back, listens for edits and flags fields that failed validation. Which
Qt widget sits behind a field is the widget factory's business.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """Input that reports its value in draft form (lists as lists, ids as stored)."""

    @abstractmethod
    def get_value(self) -> Any:
        pass


class ValueSettable(ABC):
    """Input that can be filled from a draft value."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """None (or a value the widget cannot show) resets the input to empty."""
        pass


class PlaceholderCapable(ABC):
    """Input showing hint text while empty, e.g. "Comma separated"."""

    @abstractmethod
    def set_placeholder(self, text: str) -> None:
        pass


class RangeConfigurable(ABC):
    """Numeric input with optional bounds."""

    @abstractmethod
    def configure_range(self, minimum: float, maximum: float) -> None:
        pass


class ChangeSignalEmitter(ABC):
    """
    Input that reports user edits.

    Hides which Qt signal fires (textChanged, valueChanged,
    currentIndexChanged, ...). Callbacks receive get_value(), never the raw
    signal arguments.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Disconnecting a callback that was never connected is a no-op."""
        pass


class InvalidStateMarkable(ABC):
    """Input that can be flagged as failing validation (drawn with the error border)."""

    @abstractmethod
    def set_invalid(self, invalid: bool) -> None:
        pass


class FieldWidget(ValueGettable, ValueSettable, ChangeSignalEmitter, InvalidStateMarkable):
    """Everything the form dialog requires of a field input."""
