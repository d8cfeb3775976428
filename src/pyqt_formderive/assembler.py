"""
Plan assembly for records and enums.

FormAssembler pairs each resolved widget with a field description and
SelectorAssembler produces the single selector used for enums. assemble()
dispatches on the descriptor's shape; generate() wraps it so callers receive
a GenerationResult instead of an exception.
"""

import logging
from typing import Optional

from pyqt_formderive.config import FormDeriveConfig, PairingStrategy, resolve_config
from pyqt_formderive.controls import resolve_field_widgets, resolve_widgets
from pyqt_formderive.descriptors import (
    EnumDescriptor,
    RecordDescriptor,
    TypeDescriptor,
    UnsupportedDescriptor,
)
from pyqt_formderive.dispatch import StrategyDispatcher
from pyqt_formderive.docs import extract_descriptions
from pyqt_formderive.errors import FormDeriveError, UnsupportedShapeError
from pyqt_formderive.plan import (
    FormPlan,
    FormRow,
    GenerationPlan,
    GenerationResult,
    SelectorPlan,
)

logger = logging.getLogger(__name__)


class FormAssembler(StrategyDispatcher[PairingStrategy]):
    """
    Builds a FormPlan from a RecordDescriptor.

    Pairing strategies:
    - BY_FIELD: every widget is shown with its own field's description; a field
      with several control annotations gets one row per widget
    - POSITIONAL: widgets (after dropping fields without a control) are zipped
      with the descriptions of all fields by index, as older generated forms did
    """

    def __init__(self):
        super().__init__()
        self._register_handlers({
            PairingStrategy.BY_FIELD: self._pair_by_field,
            PairingStrategy.POSITIONAL: self._pair_positionally,
        })

    def _determine_strategy(self, context: RecordDescriptor, *,
                            config: FormDeriveConfig) -> PairingStrategy:
        return config.pairing

    def _pair_by_field(self, record: RecordDescriptor, *,
                       config: FormDeriveConfig) -> FormPlan:
        descriptions = extract_descriptions(record, config)
        rows = []
        for field, description in zip(record.fields, descriptions):
            for widget in resolve_field_widgets(field, config):
                rows.append(FormRow(widget, description))
        return FormPlan(record.name, tuple(rows))

    def _pair_positionally(self, record: RecordDescriptor, *,
                           config: FormDeriveConfig) -> FormPlan:
        descriptions = extract_descriptions(record, config)
        widgets = resolve_widgets(record, config)
        rows = tuple(FormRow(w, d) for w, d in zip(widgets, descriptions))
        return FormPlan(record.name, rows)

    def assemble(self, record: RecordDescriptor,
                 config: Optional[FormDeriveConfig] = None) -> FormPlan:
        config = resolve_config(config)
        plan = self.dispatch(record, config=config)
        logger.debug(f"Assembled {len(plan.rows)} form rows for {record.name}")
        return plan


class SelectorAssembler:
    """Builds the single-selector plan for an enum; variants are not customizable."""

    def assemble(self, enum: EnumDescriptor) -> SelectorPlan:
        logger.debug(f"Assembled selector for {enum.name}")
        return SelectorPlan(enum.name)


def assemble(descriptor: TypeDescriptor,
             config: Optional[FormDeriveConfig] = None) -> GenerationPlan:
    """
    Build the generation plan for ``descriptor``.

    Raises:
        UnsupportedShapeError: If the type is neither a record nor an enum
        MissingRequiredParameterError: If a slider lacks its range
        MalformedAnnotationSyntaxError: If a control argument list is malformed
    """
    if isinstance(descriptor, RecordDescriptor):
        return FormAssembler().assemble(descriptor, config)
    if isinstance(descriptor, EnumDescriptor):
        return SelectorAssembler().assemble(descriptor)

    shape = descriptor.shape if isinstance(descriptor, UnsupportedDescriptor) else type(descriptor).__name__
    raise UnsupportedShapeError(
        f"expected a record or an enum, got {shape}",
        type_name=descriptor.name,
    )


def generate(descriptor: TypeDescriptor,
             config: Optional[FormDeriveConfig] = None) -> GenerationResult:
    """Run one generation pass; derivation errors are returned, not raised."""
    try:
        return GenerationResult(plan=assemble(descriptor, config))
    except FormDeriveError as e:
        if e.type_name is None:
            e.type_name = descriptor.name
        logger.debug(f"Form generation failed for {descriptor.name}: {e}")
        return GenerationResult(error=e)
