"""Annotation parser.

An annotation is a list of clauses, each a constraint kind and a value:

    len:5
    min:18;max:65
    in:admin,staff,guest

Parsing produces a tuple of typed ``ConstraintRule`` objects. Results are
memoised, so an annotation shared by many records is parsed once per scalar
kind.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from .config import DEFAULT_CONFIG, ValidatorConfig
from .constraints import ConstraintKind, ConstraintRule, ScalarKind
from .exceptions import (
    EmptyAnnotationError,
    InvalidConstraintKindError,
    InvalidSyntaxError,
    UnsupportedConstraintError,
)

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def _parse_int(raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise InvalidSyntaxError(context={"value": raw})
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidSyntaxError(context={"value": raw})
    return value


def _parse_rule(
    kind_tag: str, raw: str, scalar_kind: ScalarKind, list_separator: str
) -> ConstraintRule:
    try:
        kind = ConstraintKind(kind_tag)
    except ValueError:
        raise InvalidConstraintKindError(context={"kind": kind_tag}) from None

    if kind is ConstraintKind.LEN:
        if scalar_kind is not ScalarKind.TEXT:
            raise UnsupportedConstraintError(
                context={"kind": kind_tag, "scalar_kind": scalar_kind.value}
            )
        size = _parse_int(raw)
        if size < 0:
            raise InvalidSyntaxError(context={"value": raw})
        return ConstraintRule(kind, raw, size)

    if kind in (ConstraintKind.MIN, ConstraintKind.MAX):
        return ConstraintRule(kind, raw, _parse_int(raw))

    # ConstraintKind.IN
    items = raw.split(list_separator)
    if raw == "" or not items:
        raise InvalidSyntaxError(context={"value": raw})
    if scalar_kind is ScalarKind.TEXT:
        return ConstraintRule(kind, raw, tuple(items))
    return ConstraintRule(kind, raw, tuple(_parse_int(item) for item in items))


@lru_cache(maxsize=1024)
def _parse_cached(
    annotation: str,
    scalar_kind: ScalarKind,
    clause_separator: str,
    pair_separator: str,
    list_separator: str,
) -> tuple[ConstraintRule, ...]:
    if annotation == "":
        raise EmptyAnnotationError()

    rules = []
    for clause in annotation.split(clause_separator):
        parts = clause.split(pair_separator)
        if len(parts) != 2 or parts[0] == "" or parts[1] == "":
            raise InvalidSyntaxError(context={"clause": clause})
        rules.append(_parse_rule(parts[0], parts[1], scalar_kind, list_separator))

    logger.debug(f"Parsed annotation '{annotation}' for {scalar_kind.value}: {len(rules)} rule(s)")
    return tuple(rules)


def parse_annotation(
    annotation: str,
    scalar_kind: ScalarKind,
    config: ValidatorConfig | None = None,
) -> tuple[ConstraintRule, ...]:
    """Parse an annotation into an ordered rule set.

    Args:
        annotation: The raw annotation string
        scalar_kind: Scalar kind of the field (or of its elements)
        config: Optional configuration supplying the separators

    Returns:
        Tuple of ConstraintRule in clause order

    Raises:
        EmptyAnnotationError: If the annotation is empty
        InvalidSyntaxError: If a clause or value is malformed
        InvalidConstraintKindError: If a clause names an unknown kind
        UnsupportedConstraintError: If ``len`` is applied to a non-text field
    """
    config = config or DEFAULT_CONFIG
    return _parse_cached(
        annotation,
        scalar_kind,
        config.clause_separator,
        config.pair_separator,
        config.list_separator,
    )


def clear_cache() -> None:
    """Drop all memoised parse results."""
    _parse_cached.cache_clear()
