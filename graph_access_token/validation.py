"""
Validation utilities for the Graph access token library.

This module provides reusable validation functions with clear,
actionable error messages. They are used both for caller input
(app ids, URLs, timeouts) and for strict decoding of Graph API JSON
bodies, where numeric fields may arrive as numbers or as strings.

All validation functions raise ValidationError with descriptive
messages when validation fails.

Example:
    >>> validate_app_id(-1)
    ValidationError: Invalid 'app_id': must be at least 0 (got -1)
"""

from __future__ import annotations

import urllib.parse
from collections.abc import Mapping
from typing import Any

from .constants import ValidationLimits
from .exceptions import ValidationError

# =============================================================================
# TYPE VALIDATION
# =============================================================================


def validate_type(value: object, expected_type: type | tuple[type, ...], field_name: str) -> None:
    """Validate that value is of expected type.

    Args:
        value: The value to validate
        expected_type: Type or tuple of types to check against
        field_name: Name of the field (for error messages)

    Raises:
        ValidationError: If value is not of expected type
    """
    if not isinstance(value, expected_type):
        type_names = (
            expected_type.__name__
            if isinstance(expected_type, type)
            else " or ".join(t.__name__ for t in expected_type)
        )
        raise ValidationError(
            field_name, value, f"must be {type_names}, got {type(value).__name__}"
        )


def validate_string(value: object, field_name: str, allow_empty: bool = False) -> str:
    """Validate that value is a string (optionally non-empty).

    Args:
        value: The value to validate
        field_name: Name of the field (for error messages)
        allow_empty: If True, empty strings are allowed

    Returns:
        The validated string

    Raises:
        ValidationError: If value is not a string or is empty when not allowed
    """
    validate_type(value, str, field_name)
    assert isinstance(value, str)  # for type narrowing

    if not allow_empty and not value:
        raise ValidationError(field_name, value, "must be a non-empty string")

    return value


# =============================================================================
# RANGE VALIDATION
# =============================================================================


def validate_range(
    value: int,
    field_name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """Validate that integer is within specified range.

    Booleans are rejected even though bool is a subclass of int.

    Raises:
        ValidationError: If value is not an int or is outside range
    """
    if isinstance(value, bool):
        raise ValidationError(field_name, value, "must be int, got bool")
    validate_type(value, int, field_name)

    if min_value is not None and value < min_value:
        raise ValidationError(field_name, value, f"must be at least {min_value}")

    if max_value is not None and value > max_value:
        raise ValidationError(field_name, value, f"must be at most {max_value}")


def validate_app_id(value: object, field_name: str = "app_id") -> int:
    """Validate a Facebook app id (a non-negative integer)."""
    validate_range(value, field_name, min_value=0)  # type: ignore[arg-type]
    assert isinstance(value, int)
    return value


def validate_timeout(value: float, field_name: str = "timeout") -> float:
    """Validate an HTTP timeout in seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field_name, value, "must be a number of seconds")
    if not (
        ValidationLimits.MIN_TIMEOUT_SECONDS <= value <= ValidationLimits.MAX_TIMEOUT_SECONDS
    ):
        raise ValidationError(
            field_name,
            value,
            f"must be between {ValidationLimits.MIN_TIMEOUT_SECONDS} and "
            f"{ValidationLimits.MAX_TIMEOUT_SECONDS} seconds",
        )
    return float(value)


# =============================================================================
# FORMAT VALIDATION
# =============================================================================


def validate_url(value: str, field_name: str, require_https: bool = False) -> str:
    """Validate that value is a well-formed URL.

    Raises:
        ValidationError: If URL is malformed or has wrong scheme
    """
    validate_string(value, field_name)

    try:
        parsed = urllib.parse.urlparse(value)
    except ValueError as e:
        raise ValidationError(field_name, value, f"malformed URL: {e}") from e

    if not parsed.scheme or not parsed.netloc:
        raise ValidationError(field_name, value, "URL must have scheme and netloc")

    if require_https and parsed.scheme != "https":
        raise ValidationError(field_name, value, "URL must use HTTPS scheme")

    return value


def validate_path_segment(value: str, field_name: str) -> str:
    """Validate a single URL path segment such as an API version."""
    validate_string(value, field_name)
    if any(ch in value for ch in "/?#") or not value.isprintable() or " " in value:
        raise ValidationError(field_name, value, "must be a single URL path segment")
    return value


# =============================================================================
# JSON FIELD VALIDATION
# =============================================================================
# Strict accessors used when decoding Graph API response bodies.


def expect_mapping(value: object, field_name: str) -> Mapping[str, Any]:
    """Validate that a decoded JSON value is an object."""
    if not isinstance(value, Mapping):
        raise ValidationError(field_name, value, f"must be an object, got {type(value).__name__}")
    return value


def require_key(data: Mapping[str, Any], key: str, context: str) -> Any:
    """Return data[key], raising ValidationError when the key is missing."""
    if key not in data:
        raise ValidationError(f"{context}.{key}", None, "required field is missing")
    return data[key]


def expect_bool(value: object, field_name: str) -> bool:
    validate_type(value, bool, field_name)
    assert isinstance(value, bool)
    return value


def expect_int(value: object, field_name: str) -> int:
    """Validate a JSON integer (booleans and floats are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field_name, value, "must be an integer")
    return value


def expect_optional_int(value: object, field_name: str) -> int | None:
    return None if value is None else expect_int(value, field_name)


def expect_optional_string(value: object, field_name: str) -> str | None:
    return None if value is None else validate_string(value, field_name, allow_empty=True)


def expect_optional_float(value: object, field_name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field_name, value, "must be a number")
    return float(value)


def number_from_string(value: object, field_name: str, allow_negative: bool = False) -> int:
    """Parse an integer sent either as a JSON number or a numeric string.

    The Graph API sends ids such as ``app_id`` and ``user_id`` as
    strings; both representations decode to the same int.
    """
    if isinstance(value, bool):
        raise ValidationError(field_name, value, "must be an integer or numeric string")
    if isinstance(value, int):
        result = value
    elif isinstance(value, str):
        try:
            result = int(value.strip())
        except ValueError as e:
            raise ValidationError(field_name, value, "must be a numeric string") from e
    else:
        raise ValidationError(field_name, value, "must be an integer or numeric string")

    if not allow_negative and result < 0:
        raise ValidationError(field_name, value, "must be at least 0")
    return result


__all__ = [
    "validate_type",
    "validate_string",
    "validate_range",
    "validate_app_id",
    "validate_timeout",
    "validate_url",
    "validate_path_segment",
    "expect_mapping",
    "require_key",
    "expect_bool",
    "expect_int",
    "expect_optional_int",
    "expect_optional_string",
    "expect_optional_float",
    "number_from_string",
]
