"""
pyqt-formderive: annotation-driven form generation for PyQt6.

Derives an interactive form method from a dataclass or Enum definition.
Field documentation becomes the row description and a ``control(...)``
annotation selects the widget:

    control("slider(0..=10)")   slider over an inclusive range
    control("textbox")          single-line text entry
    control("bool")             checkbox

Architecture:
- Descriptors: immutable description of the type being derived
- Docs / Controls: per-field description and widget resolution
- Assembler: pairs widgets with descriptions into a generation plan
- Emit: turns the plan into a PyQt6 ``ui`` method
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .descriptors import Annotation, control
    from .derive import derive_form, generate_form_source

__version__ = "0.1.0"

_EXPORTS = {
    "Annotation": ("pyqt_formderive.descriptors", "Annotation"),
    "control": ("pyqt_formderive.descriptors", "control"),
    "FieldDescriptor": ("pyqt_formderive.descriptors", "FieldDescriptor"),
    "RecordDescriptor": ("pyqt_formderive.descriptors", "RecordDescriptor"),
    "EnumDescriptor": ("pyqt_formderive.descriptors", "EnumDescriptor"),
    "UnsupportedDescriptor": ("pyqt_formderive.descriptors", "UnsupportedDescriptor"),
    "FormDeriveConfig": ("pyqt_formderive.config", "FormDeriveConfig"),
    "PairingStrategy": ("pyqt_formderive.config", "PairingStrategy"),
    "set_form_config": ("pyqt_formderive.config", "set_form_config"),
    "get_form_config": ("pyqt_formderive.config", "get_form_config"),
    "FormDeriveError": ("pyqt_formderive.errors", "FormDeriveError"),
    "UnsupportedShapeError": ("pyqt_formderive.errors", "UnsupportedShapeError"),
    "MissingRequiredParameterError": ("pyqt_formderive.errors", "MissingRequiredParameterError"),
    "MalformedAnnotationSyntaxError": ("pyqt_formderive.errors", "MalformedAnnotationSyntaxError"),
    "FormPlan": ("pyqt_formderive.plan", "FormPlan"),
    "FormRow": ("pyqt_formderive.plan", "FormRow"),
    "SelectorPlan": ("pyqt_formderive.plan", "SelectorPlan"),
    "GenerationResult": ("pyqt_formderive.plan", "GenerationResult"),
    "assemble": ("pyqt_formderive.assembler", "assemble"),
    "generate": ("pyqt_formderive.assembler", "generate"),
    "describe_type": ("pyqt_formderive.introspection", "describe_type"),
    "derive_form": ("pyqt_formderive.derive", "derive_form"),
    "generate_form_plan": ("pyqt_formderive.derive", "generate_form_plan"),
    "generate_form_source": ("pyqt_formderive.derive", "generate_form_source"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", *_EXPORTS.keys()]
