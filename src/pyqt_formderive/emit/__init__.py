"""
Code emission for generation plans.

SourceEmitter writes the ``ui`` method source; compile_ui() attaches it to
the derived class. Generated code calls into qt_runtime (PyQt6).
"""

from .source import SourceEmitter, compile_ui

__all__ = [
    "SourceEmitter",
    "compile_ui",
]
