"""Tests for source emission and the Qt runtime used by generated code."""

from enum import Enum

import pytest

from pyqt_formderive.controls import WidgetExpression, WidgetKind
from pyqt_formderive.emit import SourceEmitter
from pyqt_formderive.plan import FormPlan, FormRow, SelectorPlan


class Level(Enum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    def __str__(self):
        return self.name.title()


class Settings:
    def __init__(self):
        self.volume = 50
        self.name = "default"
        self.muted = False


def test_form_source():
    plan = FormPlan("Settings", (
        FormRow(WidgetExpression(WidgetKind.SLIDER, "volume", range_expression="0..=100"),
                "Output volume."),
        FormRow(WidgetExpression(WidgetKind.TEXTBOX, "name", hint_text=""), "Profile name."),
        FormRow(WidgetExpression(WidgetKind.CHECKBOX, "muted", with_text=False),
                "Silence all output."),
    ))
    assert SourceEmitter().emit(plan) == (
        "def ui(self, container):\n"
        "    form = _rt.top_down(container)\n"
        "    _rt.add_row(form, _rt.slider(self, 'volume', '0..=100'), 'Output volume.')\n"
        "    _rt.add_row(form, _rt.textbox(self, 'name', ''), 'Profile name.')\n"
        "    _rt.add_row(form, _rt.checkbox(self, 'muted'), 'Silence all output.')\n"
        "    return form\n"
    )


def test_empty_form_source_is_valid():
    source = SourceEmitter().emit(FormPlan("Empty"))
    compile(source, "<test>", "exec")
    assert "add_row" not in source


def test_descriptions_are_escaped():
    plan = FormPlan("Quoted", (
        FormRow(WidgetExpression(WidgetKind.CHECKBOX, "flag", with_text=False),
                "It's \"quoted\"\nand multi-line"),
    ))
    source = SourceEmitter().emit(plan)
    compile(source, "<test>", "exec")
    assert repr("It's \"quoted\"\nand multi-line") in source


def test_selector_source():
    assert SourceEmitter(method_name="show").emit(SelectorPlan("Level")) == (
        "def show(self, container, select):\n"
        "    form = _rt.top_down(container)\n"
        "    _rt.add_selector(form, type(self), self, select)\n"
        "    return form\n"
    )


@pytest.mark.parametrize("expression, bounds", [
    ("0..=100", (0, 100)),
    ("-5..=5", (-5, 5)),
    ("1..10", (1, 9)),
    ("0, 10", (0, 10)),
    ("0.0..=1.0", (0.0, 1.0)),
    ("-0.5, 0.5", (-0.5, 0.5)),
])
def test_parse_inclusive_range(expression, bounds):
    from pyqt_formderive.emit.qt_runtime import parse_inclusive_range

    assert parse_inclusive_range(expression) == bounds


@pytest.mark.parametrize("expression", ["a..=b", "10", "1, 2, 3", "0.0..1.0", "True..=2"])
def test_parse_inclusive_range_rejects(expression):
    from pyqt_formderive.emit.qt_runtime import parse_inclusive_range

    with pytest.raises(ValueError):
        parse_inclusive_range(expression)


def test_variant_choices_follow_declaration_order():
    from pyqt_formderive.variants import selector_choices

    assert selector_choices(Level) == [
        (Level.LOW, "Low"), (Level.MEDIUM, "Medium"), (Level.HIGH, "High"),
    ]


def test_registered_variant_source():
    from pyqt_formderive.variants import register_variant_source, selector_choices

    class ReversedSource:
        def variants(self, enum_type):
            return list(reversed(list(enum_type)))

        def label(self, variant):
            return variant.name.lower()

    register_variant_source(ReversedSource())
    try:
        assert [label for _v, label in selector_choices(Level)] == ["high", "medium", "low"]
    finally:
        register_variant_source(None)


def test_slider_bound_to_field(qapp):
    from pyqt_formderive.emit import qt_runtime

    settings = Settings()
    slider = qt_runtime.slider(settings, "volume", "0..=100")
    assert (slider.minimum(), slider.maximum()) == (0, 100)
    assert slider.value() == 50

    slider.setValue(70)
    assert settings.volume == 70


def test_float_slider_bound_to_field(qapp):
    """Float ranges give a slider that reads and writes float values."""
    from pyqt_formderive.emit import qt_runtime

    settings = Settings()
    settings.volume = 0.25
    slider = qt_runtime.slider(settings, "volume", "0.0..=1.0")
    assert slider.get_value() == pytest.approx(0.25)

    slider.setValue(slider.maximum())
    assert isinstance(settings.volume, float)
    assert settings.volume == pytest.approx(1.0)


def test_textbox_bound_to_field(qapp):
    from pyqt_formderive.emit import qt_runtime

    settings = Settings()
    textbox = qt_runtime.textbox(settings, "name", "")
    assert textbox.text() == "default"
    assert textbox.placeholderText() == ""

    textbox.setText("studio")
    assert settings.name == "studio"


def test_checkbox_bound_to_field(qapp):
    from pyqt_formderive.emit import qt_runtime

    settings = Settings()
    checkbox = qt_runtime.checkbox(settings, "muted")
    assert checkbox.text() == ""
    assert not checkbox.isChecked()

    checkbox.setChecked(True)
    assert settings.muted is True


def test_add_row_places_widget_before_description(qapp):
    from PyQt6.QtWidgets import QLabel, QWidget
    from pyqt_formderive.emit import qt_runtime

    container = QWidget()
    form = qt_runtime.top_down(container)
    checkbox = qt_runtime.checkbox(Settings(), "muted")
    row = qt_runtime.add_row(form, checkbox, "Silence all output.")

    layout = row.layout()
    assert layout.itemAt(0).widget() is checkbox
    label = layout.itemAt(1).widget()
    assert isinstance(label, QLabel)
    assert label.text() == "Silence all output."
    assert label.wordWrap()
    assert form.layout().count() == 1


def test_selector_offers_all_variants(qapp):
    from PyQt6.QtWidgets import QWidget
    from pyqt_formderive.emit import qt_runtime

    selected = []
    container = QWidget()
    form = qt_runtime.top_down(container)
    selector = qt_runtime.add_selector(form, Level, Level.MEDIUM, selected.append)

    assert selector.labels() == ["Low", "Medium", "High"]
    assert selector.get_value() is Level.MEDIUM

    selector.select_index(2)
    assert selected == [Level.HIGH]
    assert selector.get_value() is Level.HIGH


def test_dispatcher_rejects_plain_widgets(qapp):
    from PyQt6.QtWidgets import QSlider
    from pyqt_formderive.emit.widget_dispatcher import WidgetDispatcher

    with pytest.raises(TypeError):
        WidgetDispatcher.bind_to_field(QSlider(), Settings(), "volume")
