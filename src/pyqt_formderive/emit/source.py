"""
Python source emission for generation plans.

A FormPlan becomes:

    def ui(self, container):
        form = _rt.top_down(container)
        _rt.add_row(form, _rt.slider(self, 'volume', '0..=100'), 'Output volume.')
        return form

and a SelectorPlan becomes a ``ui(self, container, select)`` method holding
one selector over the enum's variants. ``_rt`` is qt_runtime.
"""

import logging
from typing import Callable, List, Optional

from pyqt_formderive.controls import WidgetExpression, WidgetKind
from pyqt_formderive.plan import FormPlan, GenerationPlan, SelectorPlan

logger = logging.getLogger(__name__)

RUNTIME_NAME = "_rt"
INDENT = "    "


class SourceEmitter:
    """Turns generation plans into the source of a ``ui`` method."""

    def __init__(self, method_name: str = "ui"):
        self.method_name = method_name

    def emit(self, plan: GenerationPlan) -> str:
        if isinstance(plan, FormPlan):
            lines = self._emit_form(plan)
        elif isinstance(plan, SelectorPlan):
            lines = self._emit_selector(plan)
        else:
            raise TypeError(f"Cannot emit source for {type(plan).__name__}")
        return "\n".join(lines) + "\n"

    def widget_source(self, widget: WidgetExpression) -> str:
        """Source of the expression constructing ``widget``."""
        if widget.kind is WidgetKind.SLIDER:
            return f"{RUNTIME_NAME}.slider(self, {widget.binding!r}, {widget.range_expression!r})"
        if widget.kind is WidgetKind.TEXTBOX:
            hint = widget.hint_text or ""
            return f"{RUNTIME_NAME}.textbox(self, {widget.binding!r}, {hint!r})"
        if widget.kind is WidgetKind.CHECKBOX:
            return f"{RUNTIME_NAME}.checkbox(self, {widget.binding!r})"
        raise TypeError(f"Unknown widget kind {widget.kind!r}")

    def _emit_form(self, plan: FormPlan) -> List[str]:
        lines = [
            f"def {self.method_name}(self, container):",
            f"{INDENT}form = {RUNTIME_NAME}.top_down(container)",
        ]
        for row in plan.rows:
            lines.append(
                f"{INDENT}{RUNTIME_NAME}.add_row(form, {self.widget_source(row.widget)}, "
                f"{row.description!r})"
            )
        lines.append(f"{INDENT}return form")
        logger.debug(f"Emitted {len(plan.rows)} rows for {plan.type_name}")
        return lines

    def _emit_selector(self, plan: SelectorPlan) -> List[str]:
        return [
            f"def {self.method_name}(self, container, select):",
            f"{INDENT}form = {RUNTIME_NAME}.top_down(container)",
            f"{INDENT}{RUNTIME_NAME}.add_selector(form, type(self), self, select)",
            f"{INDENT}return form",
        ]


def compile_ui(plan: GenerationPlan, cls: type,
               emitter: Optional[SourceEmitter] = None) -> Callable:
    """
    Compile the ``ui`` method for ``plan`` and attach it to ``cls``.

    Returns:
        The attached function
    """
    from pyqt_formderive.emit import qt_runtime

    emitter = emitter or SourceEmitter()
    source = emitter.emit(plan)
    namespace = {RUNTIME_NAME: qt_runtime}
    exec(compile(source, f"<form {cls.__qualname__}>", "exec"), namespace)

    function = namespace[emitter.method_name]
    function.__qualname__ = f"{cls.__qualname__}.{emitter.method_name}"
    function.__module__ = cls.__module__
    setattr(cls, emitter.method_name, function)
    cls.__form_source__ = source
    logger.debug(f"Attached {function.__qualname__}")
    return function
