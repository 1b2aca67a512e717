"""Error taxonomy shared by every DTO and client.

There is exactly one exception type, :class:`ContractsError`, carrying an
:class:`ErrKind`.  Lower-level failures are chained with ``raise ... from exc``;
the kind of a wrapper that does not set its own kind is taken from the first
:class:`ContractsError` down the ``__cause__`` chain.

Usage
-----
```python
try:
    payload = AddEventRequest.from_json(body)
except ContractsError as err:
    return err.http_status_code, str(err)
```
"""
from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Optional

__all__ = [
    "ErrKind",
    "ContractsError",
    "kind_of",
    "kind_from_status_code",
    "status_code_for_kind",
]


class ErrKind(str, Enum):
    """Categories of failure, stable across services."""

    UNKNOWN = "Unknown"
    DATABASE_ERROR = "Database"
    COMMUNICATION_ERROR = "Communication"
    ENTITY_DOES_NOT_EXIST = "NotFound"
    CONTRACT_INVALID = "ContractInvalid"
    SERVER_ERROR = "UnexpectedServerError"
    LIMIT_EXCEEDED = "LimitExceeded"
    STATUS_CONFLICT = "StatusConflict"
    DUPLICATE_NAME = "DuplicateName"
    INVALID_ID = "InvalidId"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    NOT_ALLOWED = "NotAllowed"
    SERVICE_LOCKED = "ServiceLocked"
    NOT_IMPLEMENTED = "NotImplemented"
    RANGE_NOT_SATISFIABLE = "RangeNotSatisfiable"
    IO_ERROR = "IOError"
    OVERFLOW_ERROR = "OverflowError"
    NAN_ERROR = "NaNError"
    CLIENT_ERROR = "ClientError"


_STATUS_BY_KIND: dict[ErrKind, int] = {
    ErrKind.ENTITY_DOES_NOT_EXIST: HTTPStatus.NOT_FOUND,
    ErrKind.CONTRACT_INVALID: HTTPStatus.BAD_REQUEST,
    ErrKind.INVALID_ID: HTTPStatus.BAD_REQUEST,
    ErrKind.LIMIT_EXCEEDED: HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
    ErrKind.STATUS_CONFLICT: HTTPStatus.CONFLICT,
    ErrKind.DUPLICATE_NAME: HTTPStatus.CONFLICT,
    ErrKind.SERVICE_UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
    ErrKind.NOT_ALLOWED: HTTPStatus.METHOD_NOT_ALLOWED,
    ErrKind.SERVICE_LOCKED: HTTPStatus.LOCKED,
    ErrKind.NOT_IMPLEMENTED: HTTPStatus.NOT_IMPLEMENTED,
    ErrKind.RANGE_NOT_SATISFIABLE: HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE,
}

_KIND_BY_STATUS: dict[int, ErrKind] = {
    HTTPStatus.BAD_REQUEST: ErrKind.CONTRACT_INVALID,
    HTTPStatus.NOT_FOUND: ErrKind.ENTITY_DOES_NOT_EXIST,
    HTTPStatus.METHOD_NOT_ALLOWED: ErrKind.NOT_ALLOWED,
    HTTPStatus.CONFLICT: ErrKind.DUPLICATE_NAME,
    HTTPStatus.REQUEST_ENTITY_TOO_LARGE: ErrKind.LIMIT_EXCEEDED,
    HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE: ErrKind.RANGE_NOT_SATISFIABLE,
    HTTPStatus.LOCKED: ErrKind.SERVICE_LOCKED,
    HTTPStatus.NOT_IMPLEMENTED: ErrKind.NOT_IMPLEMENTED,
    HTTPStatus.SERVICE_UNAVAILABLE: ErrKind.SERVICE_UNAVAILABLE,
}


class ContractsError(Exception):
    """Library error with a kind and a human readable message."""

    def __init__(self, kind: ErrKind, message: str) -> None:
        super().__init__(message)
        self._kind = kind
        self.message = message

    @property
    def kind(self) -> ErrKind:
        if self._kind is not ErrKind.UNKNOWN:
            return self._kind
        cause = self.__cause__
        if isinstance(cause, ContractsError):
            return cause.kind
        return ErrKind.UNKNOWN

    @property
    def http_status_code(self) -> int:
        return status_code_for_kind(self.kind)

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is None:
            return self.message
        if not self.message:
            return str(cause)
        return f"{self.message} -> {cause}"

    def __repr__(self) -> str:
        return f"ContractsError(kind={self.kind.value!r}, message={self.message!r})"


def kind_of(exc: Optional[BaseException]) -> ErrKind:
    """Kind of *exc*; foreign exceptions are reported as UNKNOWN."""
    if isinstance(exc, ContractsError):
        return exc.kind
    return ErrKind.UNKNOWN


def kind_from_status_code(status_code: int) -> ErrKind:
    """Map a non-2xx HTTP status code returned by a sibling service.

    Beyond 400 -> ContractInvalid, every status in ``_KIND_BY_STATUS`` (404, 405,
    409, 413, 416, 423, 501, 503) keeps a kind of its own, so callers can tell a
    missing entity from a duplicate name or a locked service. Any other status
    is UnexpectedServerError.
    """
    return _KIND_BY_STATUS.get(status_code, ErrKind.SERVER_ERROR)


def status_code_for_kind(kind: ErrKind) -> int:
    return int(_STATUS_BY_KIND.get(kind, HTTPStatus.INTERNAL_SERVER_ERROR))
