"""
Class decorator deriving a ``ui`` method from annotations.

Example:
    @derive_form
    @dataclass
    class AudioSettings:
        #: Output volume.
        volume: Annotated[int, control("slider(0..=100)")] = 50
        #: Mute all output.
        muted: Annotated[bool, control("bool")] = False

    settings = AudioSettings()
    settings.ui(container)   # adds a slider row and a checkbox row

Derivation errors are raised while the class is being defined.
"""

import logging
from typing import Any, Optional

from pyqt_formderive.assembler import generate
from pyqt_formderive.config import FormDeriveConfig
from pyqt_formderive.emit.source import SourceEmitter, compile_ui
from pyqt_formderive.introspection import describe_type
from pyqt_formderive.plan import GenerationPlan

logger = logging.getLogger(__name__)


def generate_form_plan(cls: Any, config: Optional[FormDeriveConfig] = None) -> GenerationPlan:
    """
    Describe ``cls`` and build its generation plan.

    Raises:
        FormDeriveError: If no plan can be generated for ``cls``
    """
    return generate(describe_type(cls, config), config).unwrap()


def generate_form_source(cls: Any, config: Optional[FormDeriveConfig] = None) -> str:
    """Source of the ``ui`` method that derive_form would attach to ``cls``."""
    return SourceEmitter().emit(generate_form_plan(cls, config))


def derive_form(cls: Optional[type] = None, *, config: Optional[FormDeriveConfig] = None):
    """
    Attach a generated ``ui`` method to a dataclass or Enum.

    Usable bare (``@derive_form``) or with options (``@derive_form(config=...)``).
    Apply it above ``@dataclass`` so the fields exist.
    """
    def wrap(target: type) -> type:
        plan = generate_form_plan(target, config)
        compile_ui(plan, target)
        target.__form_plan__ = plan
        logger.debug(f"Derived form for {target.__qualname__}")
        return target

    if cls is None:
        return wrap
    return wrap(cls)
