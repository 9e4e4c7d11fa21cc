"""
Error types shared by the contracts package.

Application-side validation raises :class:`FieldValidationError`. Storage
errors are never wrapped: callers receive the driver's ``IntegrityError``
unchanged and may use :func:`classify_integrity_error` to find out which
constraint fired.
"""
from enum import Enum
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError


class FieldValidationError(ValueError):
    """A value was rejected before it reached the database."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class MigrationError(RuntimeError):
    """A schema migration step failed; the deployment must stop."""


class ConstraintKind(str, Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    NOT_NULL = "not_null"


# PostgreSQL SQLSTATE codes for integrity_constraint_violation subclasses
_SQLSTATE_KINDS = {
    "23505": ConstraintKind.UNIQUE,
    "23503": ConstraintKind.FOREIGN_KEY,
    "23514": ConstraintKind.CHECK,
    "23502": ConstraintKind.NOT_NULL,
}


def classify_integrity_error(
    exc: IntegrityError,
) -> Tuple[Optional[ConstraintKind], Optional[str]]:
    """Return ``(kind, constraint_name)`` for a storage integrity error.

    Either element is ``None`` when the driver does not report it.
    """
    orig = getattr(exc, "orig", None)
    pgcode = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    diag = getattr(orig, "diag", None)
    # asyncpg keeps the server error as the cause of the adapted exception
    cause = getattr(orig, "__cause__", None)
    constraint_name = (
        getattr(diag, "constraint_name", None)
        or getattr(orig, "constraint_name", None)
        or getattr(cause, "constraint_name", None)
    )
    return _SQLSTATE_KINDS.get(pgcode), constraint_name
