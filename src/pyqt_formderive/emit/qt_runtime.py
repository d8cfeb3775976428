"""
PyQt6 primitives called by generated ``ui`` methods.

Generated code only ever calls the functions in this module, so the layout
contract lives here:

- top_down(): one vertical flow, items aligned to the top-left
- add_row(): a widget followed by its wrapped description on one line
- add_selector(): one exclusive choice between all variants of an enum
"""

import ast
import logging
import re
from typing import Any, Callable, Tuple, Union

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from pyqt_formderive.variants import selector_choices

from .widget_adapters import CheckBoxAdapter, LineEditAdapter, SelectorAdapter, SliderAdapter
from .widget_dispatcher import WidgetDispatcher

logger = logging.getLogger(__name__)

_RUST_STYLE_RANGE = re.compile(r"^\s*(.+?)\s*\.\.(=?)\s*(.+?)\s*$")


Number = Union[int, float]


def _number_literal(text: str, expression: str) -> Number:
    try:
        value = ast.literal_eval(text.strip())
    except (ValueError, SyntaxError) as e:
        raise ValueError(f"Slider bound {text!r} in {expression!r} is not a literal") from e
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Slider bound {text!r} in {expression!r} is not a number")
    return value


def parse_inclusive_range(expression: str) -> Tuple[Number, Number]:
    """
    Parse a slider range expression into inclusive numeric bounds.

    Accepted forms: ``"0..=10"``, ``"0.0..=1.0"``, ``"0, 10"`` and
    ``"0..10"`` (end excluded, integers only).

    Raises:
        ValueError: If the expression is not one of the accepted forms
    """
    match = _RUST_STYLE_RANGE.match(expression)
    if match is not None:
        start, inclusive, end = match.groups()
        low = _number_literal(start, expression)
        high = _number_literal(end, expression)
        if inclusive:
            return low, high
        if isinstance(low, float) or isinstance(high, float):
            raise ValueError(f"Exclusive range {expression!r} needs integer bounds")
        return low, high - 1

    parts = expression.split(",")
    if len(parts) == 2:
        return _number_literal(parts[0], expression), _number_literal(parts[1], expression)
    raise ValueError(f"Cannot read an inclusive range from {expression!r}")


def top_down(container: QWidget) -> QWidget:
    """Add a top-down form area to ``container`` and return it."""
    form = QWidget(container)
    layout = QVBoxLayout(form)
    layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)

    parent_layout = container.layout()
    if parent_layout is None:
        parent_layout = QVBoxLayout(container)
    parent_layout.addWidget(form)
    return form


def add_row(form: QWidget, widget: QWidget, description: str) -> QWidget:
    """Append ``widget`` and its description label as one row of ``form``."""
    row = QWidget(form)
    layout = QHBoxLayout(row)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.addWidget(widget)
    label = QLabel(description, row)
    label.setWordWrap(True)
    layout.addWidget(label, 1)
    form.layout().addWidget(row)
    return row


def slider(owner: Any, name: str, range_expression: str) -> SliderAdapter:
    widget = SliderAdapter()
    low, high = parse_inclusive_range(range_expression)
    WidgetDispatcher.configure_range(widget, low, high)
    return WidgetDispatcher.bind_to_field(widget, owner, name)


def textbox(owner: Any, name: str, hint: str = "") -> LineEditAdapter:
    widget = LineEditAdapter()
    WidgetDispatcher.set_placeholder(widget, hint)
    return WidgetDispatcher.bind_to_field(widget, owner, name)


def checkbox(owner: Any, name: str) -> CheckBoxAdapter:
    return WidgetDispatcher.bind_to_field(CheckBoxAdapter(), owner, name)


def add_selector(form: QWidget, enum_type: type, current: Any,
                 select: Callable[[Any], None]) -> SelectorAdapter:
    """
    Append the variant selector for ``enum_type`` to ``form``.

    Choosing a variant calls ``select`` with it; the caller stores it in place
    of the edited value.
    """
    widget = SelectorAdapter(selector_choices(enum_type), form)
    WidgetDispatcher.set_value(widget, current)
    WidgetDispatcher.connect_change_signal(widget, select)
    form.layout().addWidget(widget)
    return widget
