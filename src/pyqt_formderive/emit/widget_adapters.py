"""
Qt widget adapters used by generated forms.

Normalizes Qt's inconsistent APIs:
- QSlider.value() vs QLineEdit.text() vs QCheckBox.isChecked()
- valueChanged vs textChanged vs toggled

All adapters implement get_value()/set_value()/connect_change_signal().
"""

from abc import ABCMeta
from typing import Any, Callable, Sequence, Tuple

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtWidgets import (
    QButtonGroup, QCheckBox, QLineEdit, QRadioButton, QSlider, QVBoxLayout, QWidget
)

from .widget_protocols import (
    ChangeSignalEmitter, PlaceholderCapable, RangeConfigurable, ValueGettable, ValueSettable
)


# Order matters: Qt's metaclass first, ABCMeta supplies abstract method checks
class PyQtWidgetMeta(type(QObject), ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class SliderAdapter(QSlider, ValueGettable, ValueSettable, RangeConfigurable,
                    ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Horizontal slider over an inclusive range.

    Integer ranges map one slider step to one unit. Float ranges are split
    into FLOAT_STEPS steps and get_value() returns floats.
    """

    FLOAT_STEPS = 1000

    def __init__(self, parent=None):
        super().__init__(Qt.Orientation.Horizontal, parent)
        self._float_low = 0.0
        self._float_step = 0.0
        self._is_float = False

    def get_value(self) -> Any:
        if self._is_float:
            return self._float_low + self.value() * self._float_step
        return self.value()

    def set_value(self, value: Any) -> None:
        if value is None:
            self.setValue(self.minimum())
        elif not self._is_float:
            self.setValue(int(value))
        elif self._float_step == 0:
            self.setValue(0)
        else:
            self.setValue(round((float(value) - self._float_low) / self._float_step))

    def configure_range(self, minimum: float, maximum: float) -> None:
        self._is_float = isinstance(minimum, float) or isinstance(maximum, float)
        if self._is_float:
            self._float_low = float(minimum)
            self._float_step = (float(maximum) - float(minimum)) / self.FLOAT_STEPS
            self.setRange(0, self.FLOAT_STEPS)
        else:
            self.setRange(int(minimum), int(maximum))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.valueChanged.connect(lambda: callback(self.get_value()))


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable, PlaceholderCapable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Single-line text entry; None is shown as empty text."""

    def get_value(self) -> Any:
        return self.text()

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.textChanged.connect(lambda: callback(self.get_value()))


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Checkbox without inline text.

    Returns bool values, treats None as False.
    """

    def get_value(self) -> Any:
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.toggled.connect(lambda: callback(self.get_value()))


class SelectorAdapter(QWidget, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Mutually exclusive choice between variants, one radio button each.

    Choices are (variant, label) pairs shown top to bottom in the given order.
    """

    def __init__(self, choices: Sequence[Tuple[Any, str]], parent=None):
        super().__init__(parent)
        self._choices = list(choices)
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        for index, (_variant, label) in enumerate(self._choices):
            button = QRadioButton(label, self)
            self._group.addButton(button, index)
            layout.addWidget(button)

    def labels(self) -> list:
        return [label for _variant, label in self._choices]

    def get_value(self) -> Any:
        index = self._group.checkedId()
        if index < 0:
            return None
        return self._choices[index][0]

    def set_value(self, value: Any) -> None:
        for index, (variant, _label) in enumerate(self._choices):
            if variant == value:
                self._group.button(index).setChecked(True)
                return

    def select_index(self, index: int) -> None:
        """Check the choice at ``index`` as if the user clicked it."""
        self._group.button(index).click()

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self._group.idClicked.connect(lambda _index: callback(self.get_value()))
