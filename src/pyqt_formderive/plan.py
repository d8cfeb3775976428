"""Generation plans handed to the code emitter."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from pyqt_formderive.controls import WidgetExpression
from pyqt_formderive.errors import FormDeriveError


@dataclass(frozen=True)
class FormRow:
    """A widget shown together with its description on one line."""
    widget: WidgetExpression
    description: str


@dataclass(frozen=True)
class FormPlan:
    """Rows laid out top to bottom in a single vertical flow."""
    type_name: str
    rows: Tuple[FormRow, ...] = ()


@dataclass(frozen=True)
class SelectorPlan:
    """One exclusive selector over every variant of ``enum_name``."""
    enum_name: str


GenerationPlan = Union[FormPlan, SelectorPlan]


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one generation pass: exactly one of ``plan`` or ``error``.

    Callers must not emit anything for an error result; the error already
    names the type it belongs to.
    """
    plan: Optional[GenerationPlan] = None
    error: Optional[FormDeriveError] = None

    def __post_init__(self):
        if (self.plan is None) == (self.error is None):
            raise ValueError("GenerationResult needs exactly one of plan or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> GenerationPlan:
        """Return the plan, raising the recorded error if generation failed."""
        if self.error is not None:
            raise self.error
        return self.plan
