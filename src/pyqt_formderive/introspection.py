"""
Type descriptors from live Python classes.

Dataclasses become records, Enum subclasses become enums, and every other
class is described as an unsupported shape. Field documentation is read from
the class source:

    @dataclass
    class AudioSettings:
        #: Output volume.
        volume: Annotated[int, control("slider(0..=100)")] = 50
        "Applied on the next buffer."

yields the fragments ``['" Output volume."', '"Applied on the next buffer."']``
for ``volume``, plus any lines stored under the ``doc`` field metadata key.
"""

import ast
import dataclasses
import inspect
import logging
import sys
import textwrap
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Tuple, get_origin, get_type_hints

from pyqt_formderive.config import FormDeriveConfig, resolve_config
from pyqt_formderive.descriptors import (
    Annotation,
    EnumDescriptor,
    FieldDescriptor,
    RecordDescriptor,
    TypeDescriptor,
    UnsupportedDescriptor,
)
from pyqt_formderive.errors import MalformedAnnotationSyntaxError

logger = logging.getLogger(__name__)

_TRIPLE_QUOTES = ('"""', "'''")


class _SourceDocs:
    """Documentation found in a class body for one field."""

    def __init__(self):
        self.comments: List[str] = []
        self.docstring: List[str] = []


def _comment_lines_above(lines: List[str], lineno: int, prefix: str) -> List[str]:
    """Collect the ``prefix`` comment block ending right above 1-based ``lineno``."""
    collected = []
    index = lineno - 2
    while index >= 0:
        stripped = lines[index].strip()
        if not stripped.startswith(prefix):
            break
        collected.append(_as_literal(stripped[len(prefix):]))
        index -= 1
    collected.reverse()
    return collected


def _as_literal(text: str) -> str:
    """Quote plain text so that stripping the literal's delimiters restores it."""
    return f'"{text}"'


def _docstring_fragments(source: str, node: ast.expr) -> List[str]:
    """Raw literal for one-line docstrings, quoted cleaned lines otherwise."""
    segment = ast.get_source_segment(source, node)
    if (segment and "\n" not in segment and segment[0] in "\"'"
            and not segment.startswith(_TRIPLE_QUOTES)):
        return [segment]
    return [_as_literal(line) for line in inspect.cleandoc(node.value).splitlines()
            if line.strip()]


def _class_source_docs(cls: type, config: FormDeriveConfig) -> Dict[str, _SourceDocs]:
    try:
        source = textwrap.dedent(inspect.getsource(cls))
        tree = ast.parse(source)
    except (OSError, TypeError, SyntaxError) as e:
        logger.debug(f"No source documentation for {cls.__qualname__}: {e}")
        return {}

    class_node = next((n for n in tree.body if isinstance(n, ast.ClassDef)), None)
    if class_node is None:
        return {}

    lines = source.splitlines()
    docs: Dict[str, _SourceDocs] = {}
    body = class_node.body
    for index, stmt in enumerate(body):
        if not (isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name)):
            continue
        entry = _SourceDocs()
        entry.comments = _comment_lines_above(lines, stmt.lineno, config.doc_comment_prefix)
        following = body[index + 1] if index + 1 < len(body) else None
        if (isinstance(following, ast.Expr) and isinstance(following.value, ast.Constant)
                and isinstance(following.value.value, str)):
            entry.docstring = _docstring_fragments(source, following.value)
        docs[stmt.target.id] = entry
    return docs


def _collect_source_docs(cls: type, config: FormDeriveConfig) -> Dict[str, _SourceDocs]:
    """Source docs for ``cls`` and its dataclass bases; subclasses win."""
    docs: Dict[str, _SourceDocs] = {}
    for klass in reversed(cls.__mro__):
        if dataclasses.is_dataclass(klass):
            docs.update(_class_source_docs(klass, config))
    return docs


def _metadata_docs(field: dataclasses.Field, config: FormDeriveConfig) -> List[str]:
    value = field.metadata.get(config.doc_metadata_key)
    if value is None:
        return []
    if isinstance(value, str):
        return [_as_literal(value)]
    return [_as_literal(str(line)) for line in value]


def _type_hints(cls: type) -> Dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True, localns={cls.__name__: cls})
    except (NameError, TypeError) as e:
        logger.debug(f"Resolving field types of {cls.__qualname__} one by one: {e}")
        return {}


def _field_type(cls: type, field: dataclasses.Field, hints: Dict[str, Any],
                config: FormDeriveConfig) -> Any:
    """
    Resolved type of one field.

    String annotations that get_type_hints could not resolve as a whole are
    evaluated on their own, so one unresolvable field does not hide the
    controls of the others.

    Raises:
        MalformedAnnotationSyntaxError: If an unresolvable annotation declares a control
    """
    if field.name in hints:
        return hints[field.name]
    if not isinstance(field.type, str):
        return field.type

    owner = next((k for k in cls.__mro__
                  if field.name in k.__dict__.get("__annotations__", {})), cls)
    module = sys.modules.get(owner.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {cls.__name__: cls}
    try:
        return eval(field.type, globalns, localns)
    except (NameError, AttributeError, SyntaxError, TypeError) as e:
        if f"{config.control_keyword}(" in field.type:
            raise MalformedAnnotationSyntaxError(
                f"cannot resolve annotation {field.type!r} declaring a control: {e}",
                field_name=field.name,
            ) from e
        logger.debug(f"Keeping unresolved annotation of {cls.__qualname__}.{field.name}: {e}")
        return field.type


def _field_annotations(field: dataclasses.Field, field_type: Any,
                       config: FormDeriveConfig) -> Tuple[Annotation, ...]:
    annotations = []
    if get_origin(field_type) is Annotated:
        annotations.extend(m for m in field_type.__metadata__ if isinstance(m, Annotation))

    value = field.metadata.get(config.control_keyword)
    if isinstance(value, Annotation):
        annotations.append(value)
    elif isinstance(value, str):
        annotations.append(Annotation(config.control_keyword, value))
    elif value is not None:
        raise MalformedAnnotationSyntaxError(
            f"'{config.control_keyword}' metadata must be a string, got {type(value).__name__}",
            field_name=field.name,
        )
    return tuple(annotations)


def describe_record(cls: type, config: Optional[FormDeriveConfig] = None) -> RecordDescriptor:
    """Describe a dataclass as a record, fields in declaration order."""
    config = resolve_config(config)
    source_docs = _collect_source_docs(cls, config)
    hints = _type_hints(cls)

    fields = []
    for field in dataclasses.fields(cls):
        entry = source_docs.get(field.name, _SourceDocs())
        fragments = entry.comments + _metadata_docs(field, config) + entry.docstring
        try:
            field_type = _field_type(cls, field, hints, config)
            annotations = _field_annotations(field, field_type, config)
        except MalformedAnnotationSyntaxError as e:
            e.type_name = cls.__name__
            raise
        fields.append(FieldDescriptor(field.name, tuple(fragments), annotations))
    return RecordDescriptor(cls.__name__, tuple(fields))


def describe_type(cls: Any, config: Optional[FormDeriveConfig] = None) -> TypeDescriptor:
    """
    Build the TypeDescriptor for ``cls``.

    Args:
        cls: The class being derived
        config: Optional explicit configuration

    Returns:
        RecordDescriptor, EnumDescriptor or UnsupportedDescriptor
    """
    if not isinstance(cls, type):
        return UnsupportedDescriptor(getattr(cls, "__name__", repr(cls)), shape=type(cls).__name__)
    if issubclass(cls, Enum):
        return EnumDescriptor(cls.__name__, tuple(member.name for member in cls))
    if dataclasses.is_dataclass(cls):
        return describe_record(cls, config)
    if issubclass(cls, tuple):
        return UnsupportedDescriptor(cls.__name__, shape="tuple")
    return UnsupportedDescriptor(cls.__name__, shape="class")
