"""Field descriptors built from dataclass metadata.

A record type is any dataclass. Each of its fields is described once by a
``FieldDescriptor``: the field name, what kind of value it holds, whether it
is exported (its name does not start with an underscore) and the annotation
stored under the configured metadata key. Descriptor tables are cached per
record type.

Example:
    ```python
    from dataclasses import dataclass, field

    @dataclass
    class Tagged:
        tags: list[str] = field(default_factory=list, metadata={"validate": "in:a,b"})

    describe_record(Tagged)
    # (FieldDescriptor(name='tags', kind=<FieldKind.SEQUENCE: 'sequence'>,
    #                  element_kind=<FieldKind.TEXT: 'text'>, ...),)
    ```
"""

from __future__ import annotations

import collections.abc
import dataclasses
import logging
import sys
import types
import typing
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Union

from .constraints import ScalarKind

logger = logging.getLogger(__name__)

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
)


class FieldKind(Enum):
    """What a record field holds, as far as validation is concerned."""

    TEXT = "text"
    INTEGER = "integer"
    RECORD = "record"
    SEQUENCE = "sequence"
    UNSUPPORTED = "unsupported"

    @property
    def scalar_kind(self) -> ScalarKind | None:
        """The matching ScalarKind, or None if constraints cannot apply."""
        if self is FieldKind.TEXT:
            return ScalarKind.TEXT
        if self is FieldKind.INTEGER:
            return ScalarKind.INTEGER
        return None


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of one record field.

    Attributes:
        name: Field name as declared
        kind: Declared kind, or None when it must be inferred from the value
        element_kind: Element kind of a sequence field, or None when it must
            be inferred from the first element
        exported: False for fields whose name starts with an underscore
        has_annotation: True if the metadata key is present at all
        annotation: The raw annotation (meaningful only with has_annotation)
        optional: True if the declared type admits None
    """

    name: str
    kind: FieldKind | None
    element_kind: FieldKind | None = None
    exported: bool = True
    has_annotation: bool = False
    annotation: Any = None
    optional: bool = False


def is_record(value: Any) -> bool:
    """Return True for dataclass instances (not dataclass types)."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _unwrap(hint: Any) -> tuple[Any, bool]:
    """Strip ``Annotated`` and ``Optional`` wrappers from a type hint."""
    optional = False
    while True:
        origin = typing.get_origin(hint)
        if origin is typing.Annotated:
            hint = typing.get_args(hint)[0]
            continue
        if origin is Union or origin is types.UnionType:
            args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
            if len(args) == 1:
                optional = True
                hint = args[0]
                continue
        return hint, optional


def classify_hint(hint: Any) -> tuple[FieldKind | None, FieldKind | None]:
    """Classify a declared type.

    Returns:
        ``(kind, element_kind)``; either may be None when the hint does not
        pin the kind down and the runtime value has to be inspected instead
    """
    if hint is None or hint is Any or isinstance(hint, (str, typing.ForwardRef, typing.TypeVar)):
        return None, None

    origin = typing.get_origin(hint)
    if origin is not None:
        if origin in _SEQUENCE_ORIGINS:
            args = [arg for arg in typing.get_args(hint) if arg is not Ellipsis]
            if not args:
                return FieldKind.SEQUENCE, None
            element_hint, _ = _unwrap(args[0])
            element_kind, _ = classify_hint(element_hint)
            return FieldKind.SEQUENCE, element_kind
        if origin is Union or origin is types.UnionType:
            return None, None
        return FieldKind.UNSUPPORTED, None

    if not isinstance(hint, type):
        return FieldKind.UNSUPPORTED, None
    if dataclasses.is_dataclass(hint):
        return FieldKind.RECORD, None
    if issubclass(hint, bool):
        return FieldKind.UNSUPPORTED, None
    if issubclass(hint, int):
        return FieldKind.INTEGER, None
    if issubclass(hint, str):
        return FieldKind.TEXT, None
    if issubclass(hint, (list, tuple)):
        return FieldKind.SEQUENCE, None
    return FieldKind.UNSUPPORTED, None


def classify_value(value: Any) -> FieldKind:
    """Classify a runtime value."""
    if is_record(value):
        return FieldKind.RECORD
    if isinstance(value, bool):
        return FieldKind.UNSUPPORTED
    if isinstance(value, int):
        return FieldKind.INTEGER
    if isinstance(value, str):
        return FieldKind.TEXT
    if isinstance(value, (list, tuple)):
        return FieldKind.SEQUENCE
    return FieldKind.UNSUPPORTED


def _resolve_field_hint(record_type: type, f: dataclasses.Field) -> Any:
    """Evaluate one string annotation in the namespace of its declaring class."""
    owner = next(
        (
            klass
            for klass in record_type.__mro__
            if f.name in klass.__dict__.get("__annotations__", {})
        ),
        record_type,
    )
    module = sys.modules.get(owner.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        return eval(f.type, globalns, dict(vars(owner)))
    except Exception as e:
        logger.debug(
            f"Could not resolve type of {record_type.__name__}.{f.name} ({f.type!r}): {e}"
        )
        return None


def _type_hints(record_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug(f"Resolving type hints of {record_type.__name__} field by field: {e}")

    hints = {}
    for f in dataclasses.fields(record_type):
        if isinstance(f.type, str):
            hints[f.name] = _resolve_field_hint(record_type, f)
        else:
            hints[f.name] = f.type
    return hints


@lru_cache(maxsize=256)
def describe_record(record_type: type, tag: str = "validate") -> tuple[FieldDescriptor, ...]:
    """Build the descriptor table of a dataclass type.

    Args:
        record_type: A dataclass type
        tag: Metadata key holding the annotation

    Returns:
        One FieldDescriptor per field, in declaration order
    """
    hints = _type_hints(record_type)
    descriptors = []
    for f in dataclasses.fields(record_type):
        hint, optional = _unwrap(hints.get(f.name, f.type))
        kind, element_kind = classify_hint(hint)
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                kind=kind,
                element_kind=element_kind,
                exported=not f.name.startswith("_"),
                has_annotation=tag in f.metadata,
                annotation=f.metadata.get(tag),
                optional=optional,
            )
        )

    logger.debug(f"Described record {record_type.__name__}: {len(descriptors)} field(s)")
    return tuple(descriptors)
