"""Exception hierarchy for the datavalidator package.

Every cause a validation pass can report is an exception class with a fixed
default message, so an instance created without arguments behaves like a
well-known sentinel:

    ```python
    from datavalidator import validate
    from datavalidator.exceptions import EmptyAnnotationError

    errors = validate(record)
    if errors is not None and errors.is_(EmptyAnnotationError):
        ...
    ```

Causes compare equal when they share a type and a message, which makes
``Violation.is_`` work against both classes and freshly created instances.
"""

from __future__ import annotations

from typing import Any, Dict


class DatavalidatorError(Exception):
    """Base exception for the datavalidator package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence when both are given)
    """

    default_message = "datavalidator error"

    def __init__(
        self,
        message: str | None = None,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message if message is not None else self.default_message)
        self.context = details or context or {}
        self.details = self.context

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatavalidatorError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class ValidationError(DatavalidatorError):
    """Base class for every cause recorded against a field."""

    default_message = "validation failed"


class ConfigurationError(DatavalidatorError):
    """Raised when a ValidatorConfig is invalid or cannot be loaded.

    Example:
        ```python
        raise ConfigurationError(
            "Separators must be distinct",
            context={"clause_separator": ";", "pair_separator": ";"}
        )
        ```
    """

    default_message = "invalid validator configuration"


class NotRecordError(ValidationError):
    """The value handed to the validator is not a record instance."""

    default_message = "wrong argument given, should be a struct"


class EmptyAnnotationError(ValidationError):
    """A field carries the validation key with an empty annotation."""

    default_message = "validator tag is empty"


class InvalidSyntaxError(ValidationError):
    """An annotation clause or its value cannot be parsed."""

    default_message = "invalid validator syntax"


class InvalidConstraintKindError(ValidationError):
    """An annotation clause names a constraint kind that does not exist."""

    default_message = "invalid validator type"


class UnexportedFieldError(ValidationError):
    """A private field carries a validation annotation."""

    default_message = "validation for unexported field is not allowed"


class UnsupportedTypeError(ValidationError):
    """The field's type is neither text, integer, a sequence of those, nor a record."""

    default_message = "field type is unsupported"


class UnsupportedConstraintError(ValidationError):
    """The constraint kind exists but cannot be applied to the field's type."""

    default_message = "validator type is unsupported"


class ConstraintViolationError(ValidationError):
    """A field value failed one of its constraint rules."""

    def __init__(self, message: str, kind: str, value: Any, bound: Any):
        self.kind = kind
        self.value = value
        self.bound = bound
        super().__init__(message, context={"kind": kind, "value": value, "bound": bound})


__all__ = [
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
