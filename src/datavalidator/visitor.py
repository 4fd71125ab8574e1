"""Per-field validation: parse the annotation, evaluate it, descend into records.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .constraints import ConstraintRule, ScalarKind, evaluate
from .exceptions import (
    InvalidSyntaxError,
    UnexportedFieldError,
    UnsupportedTypeError,
    ValidationError,
)
from .fields import FieldDescriptor, FieldKind, classify_value
from .parser import parse_annotation

if TYPE_CHECKING:
    from .validator import RecordValidator

logger = logging.getLogger(__name__)


@dataclass
class FieldCheck:
    """Validation of one field of one record during one pass.

    Attributes:
        name: Qualified field name (``Parent.Child`` for nested records)
        value: Current value of the field
        descriptor: Static description of the field
        validator: The record validator that owns the shared error sink
    """

    name: str
    value: Any
    descriptor: FieldDescriptor
    validator: RecordValidator

    def add_error(self, *causes: BaseException, name: str | None = None) -> None:
        self.validator.errors.add_error(name or self.name, *causes)

    def eval_check(self) -> None:
        """Validate the field, appending any violations to the shared sink."""
        descriptor = self.descriptor
        kind = descriptor.kind or classify_value(self.value)

        if kind is FieldKind.RECORD:
            self._check_record()
            return

        if not descriptor.has_annotation:
            return
        if not descriptor.exported:
            self.add_error(UnexportedFieldError())
            return
        if self.value is None:
            self._check_missing()
            return

        is_sequence = kind is FieldKind.SEQUENCE
        if is_sequence:
            if classify_value(self.value) is not FieldKind.SEQUENCE:
                self.add_error(UnsupportedTypeError(context={"value": self.value}))
                return
            if len(self.value) == 0:
                return
            kind = descriptor.element_kind or classify_value(self.value[0])

        scalar_kind = kind.scalar_kind
        if scalar_kind is None:
            self.add_error(UnsupportedTypeError(context={"kind": kind.value}))
            return

        annotation = descriptor.annotation
        if not isinstance(annotation, str):
            self.add_error(InvalidSyntaxError(context={"annotation": annotation}))
            return

        try:
            rules = parse_annotation(annotation, scalar_kind, self.validator.config)
        except ValidationError as e:
            logger.debug(f"Annotation of '{self.name}' rejected: {e}")
            self.add_error(e)
            return

        if is_sequence:
            for index, item in enumerate(self.value):
                self._check_scalar(item, rules, scalar_kind, f"{self.name}[{index}]")
        else:
            self._check_scalar(self.value, rules, scalar_kind, self.name)

    def _check_missing(self) -> None:
        """Handle an annotated field holding None.

        None is an absent value for Optional fields and for fields whose type
        is not declared. Elsewhere it is a value of the wrong type.
        """
        descriptor = self.descriptor
        if descriptor.kind is None:
            return

        kind = descriptor.kind
        if kind is FieldKind.SEQUENCE:
            kind = descriptor.element_kind
        if kind is not None and kind.scalar_kind is None:
            self.add_error(UnsupportedTypeError(context={"kind": kind.value}))
            return

        if not descriptor.optional:
            self.add_error(
                UnsupportedTypeError(context={"expected": descriptor.kind.value, "value": None})
            )

    def _check_record(self) -> None:
        if self.value is None:
            return
        # Imported here: validator imports this module.
        from .validator import RecordValidator

        nested = RecordValidator(
            self.value,
            parent_name=self.name,
            errors=self.validator.errors,
            config=self.validator.config,
        )
        nested.execute()

    def _check_scalar(
        self, value: Any, rules: Sequence[ConstraintRule], scalar_kind: ScalarKind, name: str
    ) -> None:
        if classify_value(value).scalar_kind is not scalar_kind:
            self.add_error(
                UnsupportedTypeError(context={"expected": scalar_kind.value, "value": value}),
                name=name,
            )
            return

        errors = evaluate(rules, value, scalar_kind)
        if errors:
            self.add_error(*errors, name=name)
