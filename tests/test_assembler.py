"""Tests for form and selector plan assembly."""

import pytest

from pyqt_formderive.assembler import FormAssembler, assemble, generate
from pyqt_formderive.config import FormDeriveConfig, PairingStrategy
from pyqt_formderive.controls import WidgetExpression, WidgetKind
from pyqt_formderive.descriptors import (
    EnumDescriptor,
    FieldDescriptor,
    RecordDescriptor,
    UnsupportedDescriptor,
    control,
)
from pyqt_formderive.errors import (
    MissingRequiredParameterError,
    UnsupportedShapeError,
)
from pyqt_formderive.plan import FormPlan, FormRow, GenerationResult, SelectorPlan


@pytest.fixture
def mixed_record():
    """An undocumented-control field followed by a checkbox field."""
    return RecordDescriptor("Mixed", (
        FieldDescriptor("a", ("About a.",)),
        FieldDescriptor("b", ("About b.",), (control("bool"),)),
    ))


def test_record_without_controls_has_no_rows():
    record = RecordDescriptor("Plain", (
        FieldDescriptor("a", ("Doc.",)),
        FieldDescriptor("b"),
    ))
    assert assemble(record) == FormPlan("Plain", ())


def test_empty_record_has_no_rows():
    assert assemble(RecordDescriptor("Empty")).rows == ()


def test_checkbox_row_uses_field_description():
    record = RecordDescriptor("Flags", (
        FieldDescriptor("enabled", ("Enables X.", "Default: off."), (control("bool"),)),
    ))
    plan = assemble(record)
    assert plan.rows == (
        FormRow(
            WidgetExpression(WidgetKind.CHECKBOX, "enabled", with_text=False),
            "Enables X. Default: off.",
        ),
    )


def test_slider_row_keeps_range():
    record = RecordDescriptor("Levels", (
        FieldDescriptor("level", annotations=(control("slider(1..=10)"),)),
    ))
    row, = assemble(record).rows
    assert row.widget.range_expression == "1..=10"
    assert row.widget.binding == "level"
    assert row.description == "No doc comment found"


def test_rows_follow_declaration_order():
    record = RecordDescriptor("Ordered", (
        FieldDescriptor("c", ("C.",), (control("textbox"),)),
        FieldDescriptor("a", ("A.",), (control("bool"),)),
        FieldDescriptor("b", ("B.",), (control("slider(0, 1)"),)),
    ))
    plan = assemble(record)
    assert [(r.widget.binding, r.description) for r in plan.rows] == [
        ("c", "C."), ("a", "A."), ("b", "B."),
    ]


def test_pairing_by_field_keeps_own_description(mixed_record):
    """Fields without a control do not shift later descriptions."""
    plan = assemble(mixed_record)
    assert len(plan.rows) == 1
    assert plan.rows[0].widget.binding == "b"
    assert plan.rows[0].description == "About b."


def test_positional_pairing_zips_after_drop(mixed_record):
    """Positional pairing reproduces the index-based zip of older forms."""
    config = FormDeriveConfig(pairing=PairingStrategy.POSITIONAL)
    plan = assemble(mixed_record, config)
    assert len(plan.rows) == 1
    assert plan.rows[0].widget.binding == "b"
    assert plan.rows[0].description == "About a."


def test_global_pairing_strategy(mixed_record, reset_form_config):
    from pyqt_formderive.config import set_form_config

    set_form_config(FormDeriveConfig(pairing=PairingStrategy.POSITIONAL))
    assert assemble(mixed_record).rows[0].description == "About a."


def test_form_assembler_registers_every_strategy():
    assert set(FormAssembler().get_registered_strategies()) == set(PairingStrategy)


def test_enum_gets_single_selector():
    plan = assemble(EnumDescriptor("Level", ("LOW", "MEDIUM", "HIGH")))
    assert plan == SelectorPlan("Level")


def test_unsupported_shape_is_fatal():
    with pytest.raises(UnsupportedShapeError) as exc_info:
        assemble(UnsupportedDescriptor("Point", shape="tuple"))
    assert exc_info.value.type_name == "Point"
    assert "tuple" in str(exc_info.value)


def test_slider_without_range_aborts_whole_record():
    record = RecordDescriptor("Broken", (
        FieldDescriptor("ok", annotations=(control("bool"),)),
        FieldDescriptor("level", annotations=(control("slider"),)),
    ))
    with pytest.raises(MissingRequiredParameterError):
        assemble(record)


def test_generate_returns_plan():
    result = generate(EnumDescriptor("Level"))
    assert result.ok
    assert result.unwrap() == SelectorPlan("Level")


def test_generate_returns_error_attributed_to_type():
    record = RecordDescriptor("Broken", (
        FieldDescriptor("level", annotations=(control("slider"),)),
    ))
    result = generate(record)
    assert not result.ok
    assert result.plan is None
    assert isinstance(result.error, MissingRequiredParameterError)
    assert result.error.type_name == "Broken"
    assert result.error.field_name == "level"
    assert str(result.error).startswith("Broken.level: ")
    with pytest.raises(MissingRequiredParameterError):
        result.unwrap()


def test_generation_result_needs_exactly_one_outcome():
    with pytest.raises(ValueError):
        GenerationResult()


@pytest.fixture
def multi_control_record():
    """A field with two controls followed by a field with one."""
    return RecordDescriptor("Multi", (
        FieldDescriptor("a", ("About a.",), (control("bool"), control("textbox"))),
        FieldDescriptor("b", ("About b.",), (control("bool"),)),
    ))


def test_positional_pairing_keeps_every_control(multi_control_record):
    """Positional pairing zips one widget per control with the field descriptions."""
    config = FormDeriveConfig(pairing=PairingStrategy.POSITIONAL)
    plan = assemble(multi_control_record, config)
    assert [(r.widget.binding, r.widget.kind, r.description) for r in plan.rows] == [
        ("a", WidgetKind.CHECKBOX, "About a."),
        ("a", WidgetKind.TEXTBOX, "About b."),
    ]


def test_pairing_by_field_gives_each_control_a_row(multi_control_record):
    plan = assemble(multi_control_record)
    assert [(r.widget.binding, r.widget.kind, r.description) for r in plan.rows] == [
        ("a", WidgetKind.CHECKBOX, "About a."),
        ("a", WidgetKind.TEXTBOX, "About a."),
        ("b", WidgetKind.CHECKBOX, "About b."),
    ]
