"""Configuration for form derivation.

Applications can install a process-wide default with set_form_config(), or
pass a FormDeriveConfig explicitly to any generation entry point.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PairingStrategy(Enum):
    """How widgets are paired with field descriptions in a form plan."""
    BY_FIELD = "by_field"
    POSITIONAL = "positional"


@dataclass
class FormDeriveConfig:
    """Form derivation settings.

    Attributes:
        missing_doc_text: Description used for fields without documentation
        control_keyword: Annotation keyword that selects the widget kind
        doc_comment_prefix: Comment prefix marking documentation lines above a field
        doc_metadata_key: dataclasses.field metadata key holding documentation lines
        textbox_hint: Placeholder hint for generated text boxes
        pairing: Strategy used to pair widgets with descriptions
    """

    missing_doc_text: str = "No doc comment found"
    control_keyword: str = "control"
    doc_comment_prefix: str = "#:"
    doc_metadata_key: str = "doc"
    textbox_hint: str = ""
    pairing: PairingStrategy = PairingStrategy.BY_FIELD


# Global config instance (set by application)
_form_config: Optional[FormDeriveConfig] = None


def set_form_config(config: Optional[FormDeriveConfig]) -> None:
    """Set the global form derivation configuration.

    Args:
        config: FormDeriveConfig instance, or None to restore the defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormDeriveConfig:
    """Get the current form derivation configuration.

    Returns:
        Current FormDeriveConfig or default if not set
    """
    if _form_config is None:
        return FormDeriveConfig()
    return _form_config


def resolve_config(config: Optional[FormDeriveConfig]) -> FormDeriveConfig:
    """Return the explicit config if given, else the global one."""
    return config if config is not None else get_form_config()
