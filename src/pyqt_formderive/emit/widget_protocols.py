"""
Widget ABC contracts for generated forms.

Every widget created by generated ``ui`` code implements these ABCs so that
binding a widget to a field never relies on Qt's per-class signal and
accessor names (valueChanged vs toggled vs textChanged).
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """ABC for widgets that can return their current value."""

    @abstractmethod
    def get_value(self) -> Any:
        pass


class ValueSettable(ABC):
    """ABC for widgets that can display a field's value."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        pass


class PlaceholderCapable(ABC):
    """ABC for widgets that can show a placeholder hint while empty."""

    @abstractmethod
    def set_placeholder(self, text: str) -> None:
        pass


class RangeConfigurable(ABC):
    """
    ABC for widgets with a numeric range.

    Both bounds are inclusive.
    """

    @abstractmethod
    def configure_range(self, minimum: float, maximum: float) -> None:
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that report edits.

    The callback receives the new value, as returned by get_value().
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        pass
