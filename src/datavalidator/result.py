"""Violation types collected during a validation pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import overload

from .exceptions import ValidationError

logger = logging.getLogger(__name__)


def _matches(cause: BaseException, target: BaseException | type[BaseException]) -> bool:
    if isinstance(target, type):
        return isinstance(cause, target)
    return cause is target or cause == target


@dataclass(frozen=True)
class Violation:
    """A single named validation failure.

    Attributes:
        name: Qualified field name, e.g. ``Inner.Tags[2]``
        cause: The exception describing why the field failed
    """

    name: str
    cause: BaseException

    def __str__(self) -> str:
        return f"Field {self.name}, error: {self.cause}"

    def is_(self, target: BaseException | type[BaseException]) -> bool:
        """Check whether this violation was caused by *target*.

        Args:
            target: A cause instance or an exception class

        Returns:
            True if the cause is *target*, equals it, or is an instance of it
        """
        return _matches(self.cause, target)


class ValidationErrors(ValidationError):
    """Ordered collection of violations produced by one validation pass.

    The collection is itself an exception so it can be returned as the single
    error of a pass or raised by callers that prefer exceptions. Its string
    form is every violation rendered on its own line.
    """

    def __init__(self, violations: list[Violation] | None = None):
        super().__init__("validation failed")
        self._violations: list[Violation] = list(violations or [])

    @property
    def message(self) -> str:
        return str(self)

    def add_violation(self, *violations: Violation) -> None:
        """Append already-built violations."""
        for violation in violations:
            logger.debug(f"Recording violation: {violation}")
            self._violations.append(violation)

    def add_error(self, name: str, *causes: BaseException) -> None:
        """Append one violation per cause, all under *name*."""
        self.add_violation(*(Violation(name, cause) for cause in causes))

    def extend(self, other: ValidationErrors) -> None:
        self.add_violation(*other)

    def is_(self, target: BaseException | type[BaseException]) -> bool:
        """Check whether any violation was caused by *target*."""
        return any(violation.is_(target) for violation in self._violations)

    def for_field(self, name: str) -> list[Violation]:
        """Return the violations recorded under exactly *name*."""
        return [violation for violation in self._violations if violation.name == name]

    @property
    def violations(self) -> list[Violation]:
        return list(self._violations)

    @property
    def names(self) -> list[str]:
        return [violation.name for violation in self._violations]

    def __len__(self) -> int:
        return len(self._violations)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self._violations)

    @overload
    def __getitem__(self, index: int) -> Violation: ...

    @overload
    def __getitem__(self, index: slice) -> list[Violation]: ...

    def __getitem__(self, index: int | slice) -> Violation | list[Violation]:
        return self._violations[index]

    def __bool__(self) -> bool:
        return bool(self._violations)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return "\n".join(str(violation) for violation in self._violations)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._violations!r})"
