"""Record validation entry points.

``validate`` walks every field of a dataclass instance, evaluates the
constraints annotated in the field metadata and returns every violation in
one ``ValidationErrors``, or None when the record is valid:

    ```python
    from dataclasses import dataclass, field
    from datavalidator import validate

    @dataclass
    class Person:
        name: str = field(metadata={"validate": "min:1;max:40"})
        age: int = field(metadata={"validate": "min:18;max:65"})

    errors = validate(Person(name="", age=70))
    print(errors)
    # Field name, error: string length is less than '1'
    # Field age, error: value 70 is bigger than 65
    ```

Nested dataclass fields are always descended into; their violations are
named with a dotted path (``address.zip``). Sequence elements are named with
their index (``tags[2]``).
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from .config import DEFAULT_CONFIG, ValidatorConfig
from .exceptions import NotRecordError
from .fields import describe_record, is_record
from .result import ValidationErrors
from .visitor import FieldCheck

logger = logging.getLogger(__name__)


class Validator(Protocol):
    """Anything that runs a validation pass."""

    def execute(self) -> ValidationErrors | None:
        ...


class RecordValidator:
    """Validates the fields of one record level.

    Nested record fields get their own RecordValidator sharing this one's
    error sink, so every violation of a pass ends up in a single collection.

    Args:
        value: The record to validate
        parent_name: Qualified name of the record, empty at the root
        errors: Error sink to append to; a new one is created when omitted
        config: Validator configuration; defaults apply when omitted
    """

    def __init__(
        self,
        value: Any,
        parent_name: str = "",
        errors: ValidationErrors | None = None,
        config: ValidatorConfig | None = None,
    ):
        self.value = value
        self.parent_name = parent_name
        self.errors = errors if errors is not None else ValidationErrors()
        self.config = config or DEFAULT_CONFIG

    def new_field_check(self, descriptor, value: Any) -> FieldCheck:
        name = f"{self.parent_name}.{descriptor.name}" if self.parent_name else descriptor.name
        return FieldCheck(name=name, value=value, descriptor=descriptor, validator=self)

    def execute(self) -> ValidationErrors | None:
        """Run the pass.

        Returns:
            The error sink if it holds any violation, otherwise None
        """
        if not is_record(self.value):
            name = self.parent_name or self.config.root_name
            self.errors.add_error(
                name, NotRecordError(context={"type": type(self.value).__name__})
            )
            return self.errors

        record_type = type(self.value)
        logger.debug(f"Validating {record_type.__name__} as '{self.parent_name or '<root>'}'")
        for descriptor in describe_record(record_type, self.config.tag):
            check = self.new_field_check(descriptor, getattr(self.value, descriptor.name))
            check.eval_check()

        if self.errors:
            return self.errors
        return None


def init_validator(
    value: Any, parent_name: str = "", config: ValidatorConfig | None = None
) -> Validator:
    """Create a validator for *value* with its own error sink."""
    return RecordValidator(value, parent_name=parent_name, config=config)


def validate(value: Any, config: ValidatorConfig | None = None) -> ValidationErrors | None:
    """Validate a record.

    Args:
        value: A dataclass instance
        config: Optional validator configuration

    Returns:
        None if the record is valid, otherwise a ValidationErrors holding
        every violation in field declaration order
    """
    return init_validator(value, config=config).execute()


def ensure_valid(value: Any, config: ValidatorConfig | None = None) -> None:
    """Validate a record and raise on failure.

    Raises:
        ValidationErrors: If any violation was found
    """
    errors = validate(value, config=config)
    if errors is not None:
        raise errors
