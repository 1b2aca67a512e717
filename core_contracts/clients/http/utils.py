"""Request/response plumbing shared by every HTTP client.

*   **Request context** – the correlation id and the body content type travel
    in :mod:`contextvars`, so callers set them once with
    :func:`request_context` instead of threading them through every call.
*   **build_request** – joins the URL, encodes query parameters and the body,
    and stamps the ``X-Correlation-ID`` header.
*   **send_request** / **async_send_request** – dispatch with a *tenacity* retry
    on transport errors, then map non-2xx status codes to
    :class:`~core_contracts.errors.ContractsError` kinds.
*   **decode_response** / **decode_response_list** – body bytes to DTOs.

Usage
-----
```python
with request_context(correlation_id="14a42ea6-c394-41c3-8bcd-a29b9f5e6835"):
    request = build_request(client, "GET", f"{base_url}{API_PING_ROUTE}")
    body = send_request(client, request)
ping = decode_response(PingResponse, body)
```
"""
from __future__ import annotations

import json
import logging
import os
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, List, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError
from tenacity import (
    AsyncRetrying,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from core_contracts.clients.http.metrics import (
    OUTCOME_ERROR_STATUS,
    OUTCOME_OK,
    OUTCOME_TRANSPORT_ERROR,
    REQUEST_LATENCY,
    REQUESTS_TOTAL,
)
from core_contracts.config import get_settings
from core_contracts.constants import (
    COMMA_SEPARATOR,
    CONTENT_TYPE,
    CONTENT_TYPE_JSON,
    CORRELATION_HEADER,
    FILE_FORM_FIELD,
)
from core_contracts.dtos.base import ContractModel
from core_contracts.dtos.common import BaseResponse
from core_contracts.errors import ContractsError, ErrKind, kind_from_status_code
from core_contracts.sentry import sentry_capture

__all__ = [
    "request_context",
    "correlated_id",
    "content_type_from_context",
    "escape_path",
    "build_request",
    "send_request",
    "async_send_request",
    "decode_response",
    "decode_response_list",
]

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=ContractModel)

_correlation_id: ContextVar[Optional[str]] = ContextVar("core_contracts_correlation_id", default=None)
_content_type: ContextVar[Optional[str]] = ContextVar("core_contracts_content_type", default=None)

# the largest status code treated as success (207 Multi-Status)
_MAX_SUCCESS_STATUS = 207


# ---------------------------------------------------------------------------
# Request context
# ---------------------------------------------------------------------------


@contextmanager
def request_context(
    *, correlation_id: Optional[str] = None, content_type: Optional[str] = None
) -> Iterator[None]:
    """Set the correlation id and/or body content type for the enclosed calls."""
    tokens = []
    if correlation_id is not None:
        tokens.append((_correlation_id, _correlation_id.set(correlation_id)))
    if content_type is not None:
        tokens.append((_content_type, _content_type.set(content_type)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def correlated_id() -> str:
    """Correlation id of the current context, or a fresh UUID4."""
    return _correlation_id.get() or str(uuid.uuid4())


def content_type_from_context() -> str:
    return _content_type.get() or CONTENT_TYPE_JSON


def escape_path(segment: Any) -> str:
    """Percent-escape one path segment (``/`` included)."""
    return quote(str(segment), safe="")


# ---------------------------------------------------------------------------
# Building requests
# ---------------------------------------------------------------------------


def _encode_query(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
    query: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = COMMA_SEPARATOR.join(str(v) for v in value)
        query[key] = str(value)
    return query


def _encode_json(body: Any) -> bytes:
    try:
        if isinstance(body, ContractModel):
            return body.to_json()
        if isinstance(body, (list, tuple)):
            body = [item.to_dict() if isinstance(item, ContractModel) else item for item in body]
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise ContractsError(ErrKind.CONTRACT_INVALID, "failed to encode the request body to JSON") from exc


def _read_file(file_path: str) -> tuple[str, bytes]:
    try:
        with open(file_path, "rb") as fh:
            return os.path.basename(file_path), fh.read()
    except OSError as exc:
        raise ContractsError(ErrKind.CLIENT_ERROR, f"failed to read the file {file_path}") from exc


def build_request(
    client: Union[httpx.Client, httpx.AsyncClient],
    method: str,
    url: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    json_body: Any = None,
    content: Optional[bytes] = None,
    content_type: Optional[str] = None,
    file_path: Optional[str] = None,
) -> httpx.Request:
    """Build (but do not send) a request.

    At most one body source is used: *json_body* (DTO, list of DTOs or plain
    data), raw *content* with its *content_type*, or *file_path* sent as a
    multipart upload in the ``file`` form field.
    """
    headers = {CORRELATION_HEADER: correlated_id()}
    kwargs: dict[str, Any] = {}

    if json_body is not None:
        kwargs["content"] = _encode_json(json_body)
        headers[CONTENT_TYPE] = content_type or content_type_from_context()
    elif content is not None:
        kwargs["content"] = content
        headers[CONTENT_TYPE] = content_type or content_type_from_context()
    elif file_path is not None:
        kwargs["files"] = {FILE_FORM_FIELD: _read_file(file_path)}

    return client.build_request(
        method, url, params=_encode_query(params), headers=headers, **kwargs
    )


# ---------------------------------------------------------------------------
# Sending requests
# ---------------------------------------------------------------------------


def _retry_kwargs(retry_attempts: Optional[int]) -> dict[str, Any]:
    settings = get_settings()
    return dict(
        stop=stop_after_attempt(retry_attempts or settings.http_retry_attempts),
        wait=wait_exponential(multiplier=0.5, max=settings.http_retry_max_wait),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )


def _request_error(request: httpx.Request, exc: httpx.RequestError) -> ContractsError:
    REQUESTS_TOTAL.labels(request.method, OUTCOME_TRANSPORT_ERROR).inc()
    logger.warning("%s %s failed: %s", request.method, request.url, exc)
    sentry_capture(exc, extras={"method": request.method, "url": str(request.url)})
    return ContractsError(ErrKind.CLIENT_ERROR, "failed to send a http request")


def _check_response(request: httpx.Request, response: httpx.Response) -> bytes:
    if response.status_code <= _MAX_SUCCESS_STATUS:
        REQUESTS_TOTAL.labels(request.method, OUTCOME_OK).inc()
        return response.content

    REQUESTS_TOTAL.labels(request.method, OUTCOME_ERROR_STATUS).inc()
    try:
        message = BaseResponse.model_validate_json(response.content).message
    except ValidationError:
        message = response.text
    logger.warning(
        "%s %s returned %s: %s", request.method, request.url, response.status_code, message
    )
    raise ContractsError(
        kind_from_status_code(response.status_code),
        f"request failed, status code: {response.status_code}, err: {message}",
    )


def send_request(
    client: httpx.Client, request: httpx.Request, *, retry_attempts: Optional[int] = None
) -> bytes:
    """Send *request* and return the body of a successful response."""
    logger.debug("%s %s", request.method, request.url)
    started = time.perf_counter()
    try:
        response = Retrying(**_retry_kwargs(retry_attempts))(client.send, request)
    except httpx.RequestError as exc:
        raise _request_error(request, exc) from exc
    finally:
        REQUEST_LATENCY.labels(request.method).observe(time.perf_counter() - started)
    return _check_response(request, response)


async def async_send_request(
    client: httpx.AsyncClient, request: httpx.Request, *, retry_attempts: Optional[int] = None
) -> bytes:
    """Coroutine twin of :func:`send_request`."""
    logger.debug("%s %s", request.method, request.url)
    started = time.perf_counter()
    try:
        response = await AsyncRetrying(**_retry_kwargs(retry_attempts))(client.send, request)
    except httpx.RequestError as exc:
        raise _request_error(request, exc) from exc
    finally:
        REQUEST_LATENCY.labels(request.method).observe(time.perf_counter() - started)
    return _check_response(request, response)


# ---------------------------------------------------------------------------
# Decoding responses
# ---------------------------------------------------------------------------


def decode_response(model: Type[_M], body: bytes, content_type: str = CONTENT_TYPE_JSON) -> _M:
    return model.decode(body, content_type)


def decode_response_list(model: Type[_M], body: bytes) -> List[_M]:
    """Decode a JSON array of *model* (the batch add/update responses)."""
    try:
        return TypeAdapter(List[model]).validate_json(body)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise ContractsError(
            ErrKind.CONTRACT_INVALID, f"failed to decode a list of {model.__name__} from JSON"
        ) from exc
