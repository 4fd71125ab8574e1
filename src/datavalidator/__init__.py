"""Declarative validation of dataclass records.

Constraints are attached to dataclass fields as annotation strings in the
field metadata and checked at runtime:

    ```python
    from dataclasses import dataclass, field
    from datavalidator import validate

    @dataclass
    class Account:
        login: str = field(metadata={"validate": "min:3;max:20"})
        role: str = field(metadata={"validate": "in:admin,staff,guest"})
        pin_digits: list[int] = field(default_factory=list, metadata={"validate": "min:0;max:9"})

    errors = validate(Account(login="al", role="root"))
    ```

Supported constraint kinds are ``len`` (text only), ``min``, ``max`` and
``in``. ``len``/``min``/``max`` bound the length of text and the value of
integers.
"""

from datavalidator.config import ValidatorConfig
from datavalidator.constraints import (
    ConstraintKind,
    ConstraintRule,
    ScalarKind,
    evaluate,
    validate_in,
    validate_length,
    validate_length_max,
    validate_length_min,
    validate_range,
)
from datavalidator.exceptions import (
    ConfigurationError,
    ConstraintViolationError,
    DatavalidatorError,
    EmptyAnnotationError,
    InvalidConstraintKindError,
    InvalidSyntaxError,
    NotRecordError,
    UnexportedFieldError,
    UnsupportedConstraintError,
    UnsupportedTypeError,
    ValidationError,
)
from datavalidator.fields import FieldDescriptor, FieldKind, describe_record
from datavalidator.parser import parse_annotation
from datavalidator.result import ValidationErrors, Violation
from datavalidator.validator import (
    RecordValidator,
    Validator,
    ensure_valid,
    init_validator,
    validate,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Entry points
    "validate",
    "ensure_valid",
    "init_validator",
    "RecordValidator",
    "Validator",
    # Configuration
    "ValidatorConfig",
    # Results
    "Violation",
    "ValidationErrors",
    # Parsing and evaluation
    "parse_annotation",
    "evaluate",
    "ConstraintKind",
    "ConstraintRule",
    "ScalarKind",
    "FieldKind",
    "FieldDescriptor",
    "describe_record",
    "validate_length",
    "validate_length_min",
    "validate_length_max",
    "validate_range",
    "validate_in",
    # Exceptions
    "DatavalidatorError",
    "ValidationError",
    "ConfigurationError",
    "NotRecordError",
    "EmptyAnnotationError",
    "InvalidSyntaxError",
    "InvalidConstraintKindError",
    "UnexportedFieldError",
    "UnsupportedTypeError",
    "UnsupportedConstraintError",
    "ConstraintViolationError",
]
