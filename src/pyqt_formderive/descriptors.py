"""
Discriminated union types describing the type being derived.

A form is generated from a TypeDescriptor rather than from the live class, so
the generation logic never touches the host's runtime objects. Descriptors are
immutable and live for exactly one generation pass.

Architecture:
    - TypeDescriptor: Base class for all type shapes
    - RecordDescriptor: Named fields in declaration order (dataclasses)
    - EnumDescriptor: Named variants (Enum subclasses)
    - UnsupportedDescriptor: Any other shape (tuples, plain classes, ...)
    - FieldDescriptor: One record field with its docs and annotations
    - Annotation: A declarative marker attached to a field

Usage:
    if isinstance(descriptor, RecordDescriptor):
        # Type checker knows descriptor.fields exists
"""

from abc import ABC
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Annotation:
    """
    Declarative marker attached to a field.

    ``arguments`` holds the raw argument text, or None when the marker has no
    argument list at all.

    Examples:
        >>> control("slider(0, 100)")
        Annotation(keyword='control', arguments='slider(0, 100)')
    """
    keyword: str
    arguments: Optional[str] = None


def control(arguments: str) -> Annotation:
    """Build a control annotation, e.g. ``Annotated[int, control("bool")]``."""
    return Annotation("control", arguments)


@dataclass(frozen=True)
class FieldDescriptor:
    """One record field in declaration order."""
    identifier: str
    documentation_fragments: Tuple[str, ...] = ()
    annotations: Tuple[Annotation, ...] = ()

    def control_annotations(self, keyword: str = "control") -> Tuple[Annotation, ...]:
        """Return the annotations keyed by ``keyword``, in declaration order."""
        return tuple(a for a in self.annotations if a.keyword == keyword)


@dataclass(frozen=True)
class TypeDescriptor(ABC):
    """ABC for type descriptors - shape is expressed by subclass."""
    name: str


@dataclass(frozen=True)
class RecordDescriptor(TypeDescriptor):
    """A type with a fixed, named set of fields in declared order."""
    fields: Tuple[FieldDescriptor, ...] = ()


@dataclass(frozen=True)
class EnumDescriptor(TypeDescriptor):
    """
    A type with named, mutually exclusive variants.

    ``variants`` is informational; at render time the variant iteration
    capability supplies the actual variants and their order.
    """
    variants: Tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class UnsupportedDescriptor(TypeDescriptor):
    """Any shape forms cannot be derived for (``shape`` names it for diagnostics)."""
    shape: str = "unknown"
