"""
Widget dispatcher with fail-loud ABC checking.

Generated code binds widgets to fields through this dispatcher, so a widget
that does not implement the required ABC fails immediately instead of
silently never updating its field.
"""

import logging
from typing import Any, Callable

from .widget_protocols import (
    ChangeSignalEmitter, PlaceholderCapable, RangeConfigurable, ValueSettable
)

logger = logging.getLogger(__name__)


class WidgetDispatcher:
    """ABC-based widget dispatch - NO DUCK TYPING."""

    @staticmethod
    def _require(widget: Any, abc_type: type) -> None:
        if not isinstance(widget, abc_type):
            raise TypeError(
                f"Widget {type(widget).__name__} does not implement {abc_type.__name__} ABC. "
                f"Add {abc_type.__name__} to widget's base classes."
            )

    @staticmethod
    def set_value(widget: Any, value: Any) -> None:
        WidgetDispatcher._require(widget, ValueSettable)
        widget.set_value(value)

    @staticmethod
    def set_placeholder(widget: Any, text: str) -> None:
        WidgetDispatcher._require(widget, PlaceholderCapable)
        widget.set_placeholder(text)

    @staticmethod
    def configure_range(widget: Any, minimum: float, maximum: float) -> None:
        WidgetDispatcher._require(widget, RangeConfigurable)
        widget.configure_range(minimum, maximum)

    @staticmethod
    def connect_change_signal(widget: Any, callback: Callable[[Any], None]) -> None:
        WidgetDispatcher._require(widget, ChangeSignalEmitter)
        widget.connect_change_signal(callback)

    @staticmethod
    def bind_to_field(widget: Any, owner: Any, name: str) -> Any:
        """
        Show ``owner.<name>`` in ``widget`` and write edits back to it.

        Args:
            widget: Widget implementing ValueSettable and ChangeSignalEmitter
            owner: Object holding the field
            name: Field name

        Returns:
            The widget, for chaining in generated code

        Raises:
            TypeError: If widget doesn't implement the required ABCs
        """
        WidgetDispatcher.set_value(widget, getattr(owner, name))
        WidgetDispatcher.connect_change_signal(
            widget, lambda value: setattr(owner, name, value)
        )
        logger.debug(f"Bound {type(widget).__name__} to {type(owner).__name__}.{name}")
        return widget
