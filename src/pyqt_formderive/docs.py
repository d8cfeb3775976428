"""Field description extraction from documentation fragments."""

import logging
from typing import List, Optional

from pyqt_formderive.config import FormDeriveConfig, resolve_config
from pyqt_formderive.descriptors import FieldDescriptor, RecordDescriptor

logger = logging.getLogger(__name__)

QUOTE_CHARS = "\"'"


def clean_fragment(raw: str) -> str:
    """
    Remove the quoting artifact from one raw documentation fragment.

    A single leading and a single trailing quote character are stripped if
    present, then surrounding whitespace is trimmed.

    Example:
        >>> clean_fragment('" Enables X. "')
        'Enables X.'
    """
    if raw[:1] and raw[0] in QUOTE_CHARS:
        raw = raw[1:]
    if raw[-1:] and raw[-1] in QUOTE_CHARS:
        raw = raw[:-1]
    return raw.strip()


def extract_description(field: FieldDescriptor,
                        config: Optional[FormDeriveConfig] = None) -> str:
    """
    Produce the display string for one field.

    All fragments are kept, in order, joined by a single space. A field with
    no fragments gets the configured fallback text.
    """
    config = resolve_config(config)
    if not field.documentation_fragments:
        return config.missing_doc_text
    return " ".join(clean_fragment(raw) for raw in field.documentation_fragments)


def extract_descriptions(record: RecordDescriptor,
                         config: Optional[FormDeriveConfig] = None) -> List[str]:
    """Descriptions for every field of ``record``, in declaration order."""
    config = resolve_config(config)
    descriptions = [extract_description(f, config) for f in record.fields]
    logger.debug(f"Extracted {len(descriptions)} descriptions for {record.name}")
    return descriptions
