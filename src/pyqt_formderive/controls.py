"""
Control annotation grammar and widget-kind resolution.

A control annotation selects the widget generated for a field:

    control(slider(<range-expr>))   -> slider over an inclusive range
    control(textbox)                -> single-line text entry
    control(bool)                   -> checkbox without inline text

The argument text is parsed into a closed set of ControlAnnotation variants.
Unknown kind tags are explicitly reported as "no control" so that such fields
are skipped rather than rejected.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from pyqt_formderive.config import FormDeriveConfig, resolve_config
from pyqt_formderive.descriptors import FieldDescriptor, RecordDescriptor
from pyqt_formderive.errors import (
    MalformedAnnotationSyntaxError,
    MissingRequiredParameterError,
)

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"\s*([A-Za-z_][A-Za-z0-9_]*)")
_GROUP_PAIRS = {"(": ")", "[": "]", "{": "}"}


@dataclass(frozen=True)
class SliderControl:
    """Slider over ``range_expression``, kept verbatim."""
    range_expression: str


@dataclass(frozen=True)
class TextboxControl:
    """Single-line text entry."""


@dataclass(frozen=True)
class CheckboxControl:
    """Checkbox; the ``bool`` tag selects it."""


ControlAnnotation = Union[SliderControl, TextboxControl, CheckboxControl]


class WidgetKind(Enum):
    """Widget kinds a control annotation can select."""
    SLIDER = "slider"
    TEXTBOX = "textbox"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class WidgetExpression:
    """
    Widget construction bound to a field's storage.

    This is opaque to the generator; the code emitter decides how each kind
    is constructed. Only the parameters declared by the annotation are set.
    """
    kind: WidgetKind
    binding: str
    range_expression: Optional[str] = None
    hint_text: Optional[str] = None
    with_text: bool = True


def _read_group(text: str, start: int) -> Optional[tuple]:
    """
    Read a balanced bracket group starting at ``text[start]``.

    Returns:
        (inner_text, end_index) or None if ``text[start]`` opens no group

    Raises:
        MalformedAnnotationSyntaxError: If the brackets are not balanced
    """
    if start >= len(text) or text[start] not in _GROUP_PAIRS:
        return None
    stack = []
    for index in range(start, len(text)):
        char = text[index]
        if char in _GROUP_PAIRS:
            stack.append(_GROUP_PAIRS[char])
        elif char in _GROUP_PAIRS.values():
            if not stack or stack.pop() != char:
                raise MalformedAnnotationSyntaxError(
                    f"Unexpected '{char}' in control arguments {text!r}"
                )
            if not stack:
                return text[start + 1:index], index + 1
    raise MalformedAnnotationSyntaxError(f"Unclosed group in control arguments {text!r}")


def _parse_slider(arguments: str, position: int) -> SliderControl:
    while position < len(arguments) and arguments[position].isspace():
        position += 1
    if position >= len(arguments):
        raise MissingRequiredParameterError(
            "slider control requires an inclusive range, e.g. slider(0..=10)"
        )
    group = _read_group(arguments, position)
    if group is None:
        raise MissingRequiredParameterError(
            f"slider control expects a bracketed range, got {arguments[position:]!r}"
        )
    return SliderControl(range_expression=group[0].strip())


def parse_control(arguments: str) -> Optional[ControlAnnotation]:
    """
    Parse control argument text into a ControlAnnotation.

    Args:
        arguments: Raw argument text, e.g. ``"slider(1..=10)"``

    Returns:
        The parsed annotation, or None for an unrecognized kind tag

    Raises:
        MalformedAnnotationSyntaxError: If the text does not start with an identifier
        MissingRequiredParameterError: If a slider has no range group
    """
    match = _IDENTIFIER.match(arguments)
    if match is None:
        raise MalformedAnnotationSyntaxError(
            f"control arguments must start with a kind name, got {arguments!r}"
        )
    tag = match.group(1)

    if tag == "slider":
        return _parse_slider(arguments, match.end())
    if tag == "textbox":
        return TextboxControl()
    if tag == "bool":
        return CheckboxControl()

    logger.debug(f"Ignoring unrecognized control kind '{tag}'")
    return None


def build_widget_expression(annotation: ControlAnnotation, binding: str,
                            config: Optional[FormDeriveConfig] = None) -> WidgetExpression:
    """Map a parsed annotation to the widget construction for ``binding``."""
    config = resolve_config(config)
    if isinstance(annotation, SliderControl):
        return WidgetExpression(WidgetKind.SLIDER, binding,
                                range_expression=annotation.range_expression)
    if isinstance(annotation, TextboxControl):
        return WidgetExpression(WidgetKind.TEXTBOX, binding, hint_text=config.textbox_hint)
    if isinstance(annotation, CheckboxControl):
        return WidgetExpression(WidgetKind.CHECKBOX, binding, with_text=False)
    raise TypeError(f"Unknown control annotation {annotation!r}")


def resolve_field_widgets(field: FieldDescriptor,
                          config: Optional[FormDeriveConfig] = None) -> List[WidgetExpression]:
    """
    Resolve the widgets for one field, one per recognized control annotation.

    Annotations without an argument list or with an unrecognized kind add
    nothing; a field without any recognized control resolves to an empty list.
    """
    config = resolve_config(config)
    widgets = []
    for control_annotation in field.control_annotations(config.control_keyword):
        if control_annotation.arguments is None:
            continue
        try:
            annotation = parse_control(control_annotation.arguments)
        except (MalformedAnnotationSyntaxError, MissingRequiredParameterError) as e:
            e.field_name = field.identifier
            raise
        if annotation is not None:
            widgets.append(build_widget_expression(annotation, field.identifier, config))
    return widgets


def resolve_field_widget(field: FieldDescriptor,
                         config: Optional[FormDeriveConfig] = None) -> Optional[WidgetExpression]:
    """
    Resolve the first widget for one field.

    Returns:
        The widget expression, or None if the field carries no recognized control
    """
    widgets = resolve_field_widgets(field, config)
    return widgets[0] if widgets else None


def resolve_widgets(record: RecordDescriptor,
                    config: Optional[FormDeriveConfig] = None) -> List[WidgetExpression]:
    """Widgets for ``record`` in declaration order; fields without one are dropped."""
    config = resolve_config(config)
    widgets = []
    for field in record.fields:
        widgets.extend(resolve_field_widgets(field, config))
    logger.debug(f"Resolved {len(widgets)} widgets from {len(record.fields)} fields of {record.name}")
    return widgets
