"""Field-level validation rules reused by every DTO.

Each rule is a plain function raising ``ValueError`` (so pydantic reports it as
a regular validation error) and is exported as an ``Annotated`` type:

* ``UUIDStr`` / ``OptionalUUIDStr`` – hyphenated UUID, the latter also accepts "".
* ``NonEmptyStr`` – must contain something besides whitespace.
* ``Name`` – non-empty and restricted to RFC 3986 unreserved characters,
  without ".", because names end up in message-bus topics.
* ``ValueTypeStr`` – reading value type, normalized to its canonical spelling.
* ``DurationStr`` – Go-style duration such as "10s" or "1m30s".
* ``URIStr`` – absolute URI or absolute path.
* ``HttpMethodStr`` – REST channel method.
* ``NonZeroInt`` – required timestamps where 0 means "not set".
"""
from __future__ import annotations

import datetime as _dt
import re
from typing import Annotated
from urllib.parse import urlsplit

from pydantic import AfterValidator

from core_contracts.constants import HTTP_METHODS, VALUE_TYPES
from core_contracts.errors import ContractsError, ErrKind

__all__ = [
    "UUIDStr",
    "OptionalUUIDStr",
    "NonEmptyStr",
    "Name",
    "ValueTypeStr",
    "DurationStr",
    "URIStr",
    "HttpMethodStr",
    "NonZeroInt",
    "normalize_value_type",
    "parse_duration",
]

_UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
_UNRESERVED_CHARS_RE = re.compile(r"^[a-zA-Z0-9\-_~]+$")
_DURATION_RE = re.compile(r"^[-+]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|μs|ms|s|m|h))+$")
_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")

_DURATION_UNITS_US = {
    "ns": 1e-3,
    "us": 1.0,
    "µs": 1.0,
    "μs": 1.0,
    "ms": 1e3,
    "s": 1e6,
    "m": 60e6,
    "h": 3600e6,
}

_VALUE_TYPES_BY_LOWER = {value_type.lower(): value_type for value_type in VALUE_TYPES}


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def normalize_value_type(value_type: str) -> str:
    """Return the canonical spelling of *value_type* (``"uint8"`` -> ``"Uint8"``)."""
    try:
        return _VALUE_TYPES_BY_LOWER[value_type.lower()]
    except KeyError:
        raise ContractsError(
            ErrKind.CONTRACT_INVALID, f"unable to normalize the unknown value type {value_type}"
        ) from None


def parse_duration(value: str) -> _dt.timedelta:
    """Parse a duration string such as ``"1h30m"`` or ``"250ms"``."""
    if value == "0":
        return _dt.timedelta(0)
    if not _DURATION_RE.match(value):
        raise ValueError(f"{value!r} is not a valid duration")
    total = _dt.timedelta(0)
    try:
        for amount, unit in _DURATION_PART_RE.findall(value):
            total += _dt.timedelta(microseconds=_DURATION_UNITS_US[unit] * float(amount))
    except (OverflowError, ValueError):
        raise ValueError(f"{value!r} is out of range") from None
    return -total if value.startswith("-") else total


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _check_uuid(value: str) -> str:
    if not _UUID_RE.match(value):
        raise ValueError(f"{value!r} is not a valid UUID")
    return value


def _check_optional_uuid(value: str) -> str:
    return _check_uuid(value) if value else value


def _check_non_empty(value: str) -> str:
    if not value.strip():
        raise ValueError("value must not be empty or blank")
    return value


def _check_unreserved_chars(value: str) -> str:
    if not _UNRESERVED_CHARS_RE.match(value):
        raise ValueError(f"{value!r} contains characters outside the unreserved set [a-zA-Z0-9-_~]")
    return value


def _check_value_type(value: str) -> str:
    try:
        return normalize_value_type(value)
    except ContractsError as err:
        raise ValueError(err.message) from None


def _check_duration(value: str) -> str:
    parse_duration(value)
    return value


def _check_uri(value: str) -> str:
    parts = urlsplit(value)
    if parts.scheme and (parts.netloc or parts.path):
        return value
    if value.startswith("/"):
        return value
    raise ValueError(f"{value!r} is not a valid URI")


def _check_non_zero(value: int) -> int:
    if value == 0:
        raise ValueError("value is required and must not be 0")
    return value


def _check_http_method(value: str) -> str:
    if value not in HTTP_METHODS:
        raise ValueError(f"{value!r} is not one of {', '.join(HTTP_METHODS)}")
    return value


UUIDStr = Annotated[str, AfterValidator(_check_uuid)]
OptionalUUIDStr = Annotated[str, AfterValidator(_check_optional_uuid)]
NonEmptyStr = Annotated[str, AfterValidator(_check_non_empty)]
Name = Annotated[str, AfterValidator(_check_non_empty), AfterValidator(_check_unreserved_chars)]
ValueTypeStr = Annotated[str, AfterValidator(_check_value_type)]
DurationStr = Annotated[str, AfterValidator(_check_duration)]
URIStr = Annotated[str, AfterValidator(_check_uri)]
HttpMethodStr = Annotated[str, AfterValidator(_check_http_method)]
NonZeroInt = Annotated[int, AfterValidator(_check_non_zero)]
