"""
Construction-time field validation.

These checks run when an entity attribute is assigned, before anything is
written. They mirror the CHECK / UNIQUE / NOT NULL rules in the migrations,
which stay authoritative at the storage boundary.
"""
from enum import Enum
from typing import Annotated, Optional, Type, TypeVar

from pydantic import EmailStr, Field, StringConstraints, TypeAdapter, ValidationError

from frameforge_contracts.errors import FieldValidationError

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
USERNAME_PATTERN = r"^[A-Za-z0-9_]+$"

Username = Annotated[
    str,
    StringConstraints(
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        pattern=USERNAME_PATTERN,
    ),
]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]
RequiredText = Annotated[str, StringConstraints(min_length=1)]

_username = TypeAdapter(Username)
_email = TypeAdapter(EmailStr)
_non_negative = TypeAdapter(NonNegativeInt)
_required_text = TypeAdapter(RequiredText)

E = TypeVar("E", bound=Enum)


def validate_username(value: str) -> str:
    try:
        return _username.validate_python(value)
    except ValidationError as exc:
        error_type = exc.errors()[0]["type"]
        if error_type == "string_type":
            message = "Username must be a string"
        elif error_type == "string_pattern_mismatch":
            message = "Username must contain only alphanumeric characters and underscores"
        else:
            message = (
                f"Username must be between {USERNAME_MIN_LENGTH} "
                f"and {USERNAME_MAX_LENGTH} characters"
            )
        raise FieldValidationError("username", message) from exc


def validate_email(value: str, field: str = "email", message: str = "Invalid email address") -> str:
    if not isinstance(value, str) or len(value) > 255:
        raise FieldValidationError(field, message)
    # EmailStr also parses the "Name <addr>" form; only a bare address is stored
    if "<" in value or ">" in value or value != value.strip():
        raise FieldValidationError(field, message)
    try:
        _email.validate_python(value)
    except ValidationError as exc:
        raise FieldValidationError(field, message) from exc
    # Stored as given; normalisation is the caller's decision
    return value


def validate_enum(value, enum_cls: Type[E], field: str, message: str) -> str:
    """Check membership and return the plain string stored in the column."""
    try:
        return enum_cls(value).value
    except ValueError as exc:
        raise FieldValidationError(field, f"{message}: {value!r}") from exc


def validate_non_negative(value: Optional[int], field: str, nullable: bool = False) -> Optional[int]:
    if value is None and nullable:
        return None
    try:
        return _non_negative.validate_python(value)
    except ValidationError as exc:
        raise FieldValidationError(field, "must be a non-negative integer") from exc


def validate_required(value: str, field: str, max_length: Optional[int] = None) -> str:
    try:
        value = _required_text.validate_python(value)
    except ValidationError as exc:
        raise FieldValidationError(field, "must be a non-empty string") from exc
    if max_length is not None and len(value) > max_length:
        raise FieldValidationError(field, f"must be at most {max_length} characters")
    return value


def validate_optional_text(value: Optional[str], field: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldValidationError(field, "must be a string")
    return value
