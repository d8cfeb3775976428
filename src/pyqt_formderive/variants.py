"""Variant iteration capability used by generated enum selectors."""

from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence, Tuple


class VariantSource(Protocol):
    """Protocol for producing an enum type's variants and their labels."""

    def variants(self, enum_type: type) -> Sequence[Any]:
        ...

    def label(self, variant: Any) -> str:
        ...


class EnumVariantSource:
    """Members of an Enum in declaration order, labelled by ``str(member)``."""

    def variants(self, enum_type: type) -> Sequence[Enum]:
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"{enum_type!r} is not an Enum type")
        return list(enum_type)

    def label(self, variant: Enum) -> str:
        return str(variant)


_variant_source: Optional[VariantSource] = None


def register_variant_source(source: Optional[VariantSource]) -> None:
    """Register a global variant source (None restores the Enum default)."""
    global _variant_source
    _variant_source = source


def get_variant_source() -> VariantSource:
    """Get the registered variant source."""
    if _variant_source is None:
        return EnumVariantSource()
    return _variant_source


def selector_choices(enum_type: type) -> List[Tuple[Any, str]]:
    """(variant, label) pairs offered by a selector for ``enum_type``."""
    source = get_variant_source()
    return [(variant, source.label(variant)) for variant in source.variants(enum_type)]
