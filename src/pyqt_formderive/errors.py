"""Form derivation errors.

Every error raised while deriving a form is fatal for the type being
processed: no partial plan is produced and nothing is attached to the class.
"""

from typing import Optional


class FormDeriveError(Exception):
    """Base class for all form derivation failures."""

    def __init__(self, message: str, type_name: Optional[str] = None,
                 field_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.type_name = type_name
        self.field_name = field_name

    def __str__(self) -> str:
        location = self.type_name or "<unknown type>"
        if self.field_name:
            location = f"{location}.{self.field_name}"
        return f"{location}: {self.message}"


class UnsupportedShapeError(FormDeriveError):
    """Raised when the annotated type is neither a record nor an enum."""


class MissingRequiredParameterError(FormDeriveError):
    """Raised when a slider control is declared without its range."""


class MalformedAnnotationSyntaxError(FormDeriveError):
    """Raised when a control argument list does not start with an identifier."""
