"""Constraint rules and their evaluation against scalar values.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .exceptions import ConstraintViolationError


class ConstraintKind(Enum):
    """Constraint kinds understood by the annotation grammar."""

    LEN = "len"
    MIN = "min"
    MAX = "max"
    IN = "in"


class ScalarKind(Enum):
    """Scalar types a constraint rule can be evaluated against."""

    TEXT = "text"
    INTEGER = "integer"


RuleValue = Union[int, tuple[str, ...], tuple[int, ...]]


@dataclass(frozen=True)
class ConstraintRule:
    """One parsed clause of an annotation.

    Attributes:
        kind: The constraint kind
        raw_value: The clause value exactly as written
        value: The typed value; an int for ``len``/``min``/``max`` and a tuple
            of str or int for ``in``
    """

    kind: ConstraintKind
    raw_value: str
    value: RuleValue


def validate_length(text: str, size: int) -> bool:
    """Return True if *text* has exactly *size* code points."""
    return len(text) == size


def validate_length_min(text: str, minimum: int) -> bool:
    """Return True if *text* has at least *minimum* code points."""
    length = len(text)
    return validate_range(length, minimum, length)


def validate_length_max(text: str, maximum: int) -> bool:
    """Return True if *text* has at most *maximum* code points."""
    length = len(text)
    return validate_range(length, length, maximum)


def validate_range(value: int, minimum: int, maximum: int) -> bool:
    """Return True if ``minimum <= value <= maximum``."""
    return minimum <= value <= maximum


def validate_in(value: Any, allowed: Iterable[Any]) -> bool:
    """Return True if *value* equals one of *allowed*."""
    return any(value == candidate for candidate in allowed)


def _render_set(values: Iterable[Any]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def _check_text(rule: ConstraintRule, text: str) -> ConstraintViolationError | None:
    kind = rule.kind
    if kind is ConstraintKind.LEN:
        if not validate_length(text, rule.value):  # type: ignore[arg-type]
            return ConstraintViolationError(
                f"string length is not match - '{rule.value}'", kind.value, text, rule.value
            )
    elif kind is ConstraintKind.MIN:
        if not validate_length_min(text, rule.value):  # type: ignore[arg-type]
            return ConstraintViolationError(
                f"string length is less than '{rule.value}'", kind.value, text, rule.value
            )
    elif kind is ConstraintKind.MAX:
        if not validate_length_max(text, rule.value):  # type: ignore[arg-type]
            return ConstraintViolationError(
                f"string length is bigger than '{rule.value}'", kind.value, text, rule.value
            )
    elif kind is ConstraintKind.IN:
        if not validate_in(text, rule.value):  # type: ignore[arg-type]
            return ConstraintViolationError(
                f"string value is not contains in {_render_set(rule.value)}",  # type: ignore[arg-type]
                kind.value,
                text,
                rule.value,
            )
    return None


def _check_integer(rule: ConstraintRule, number: int) -> ConstraintViolationError | None:
    kind = rule.kind
    if kind is ConstraintKind.MIN:
        if not validate_range(number, rule.value, number):  # type: ignore[arg-type]
            return ConstraintViolationError(
                f"value {number} is less than {rule.value}", kind.value, number, rule.value
            )
    elif kind is ConstraintKind.MAX:
        if not validate_range(number, number, rule.value):  # type: ignore[arg-type]
            return ConstraintViolationError(
                f"value {number} is bigger than {rule.value}", kind.value, number, rule.value
            )
    elif kind is ConstraintKind.IN:
        if not validate_in(number, rule.value):  # type: ignore[arg-type]
            return ConstraintViolationError(
                f"value {number} is not contains in {_render_set(rule.value)}",  # type: ignore[arg-type]
                kind.value,
                number,
                rule.value,
            )
    return None


def evaluate(
    rules: Sequence[ConstraintRule], value: Any, scalar_kind: ScalarKind
) -> list[ConstraintViolationError]:
    """Evaluate parsed rules against one scalar value.

    Rules are assumed to have been parsed for *scalar_kind*; kind
    compatibility is not checked again here.

    Args:
        rules: Parsed rule set, in annotation order
        value: The str or int to check
        scalar_kind: Scalar kind the rules were parsed for

    Returns:
        One error per failed rule, in rule order (empty when all pass)
    """
    check = _check_text if scalar_kind is ScalarKind.TEXT else _check_integer
    errors = []
    for rule in rules:
        error = check(rule, value)
        if error is not None:
            errors.append(error)
    return errors
