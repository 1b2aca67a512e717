"""Sync and async base classes of the resource clients.

Both own an ``httpx`` client unless one is injected (tests inject a
``fastapi.testclient.TestClient`` or an ``httpx.MockTransport``-backed client);
an injected client is never closed here.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

import httpx

from core_contracts.clients.http.utils import (
    async_send_request,
    build_request,
    decode_response,
    decode_response_list,
    send_request,
)
from core_contracts.config import get_settings
from core_contracts.dtos.common import BaseResponse, BaseWithIdResponse

__all__ = ["BaseClient", "AsyncBaseClient"]


class BaseClient:
    """Low-level verbs over one sibling service."""

    def __init__(
        self,
        base_url: str,
        *,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout or get_settings().http_timeout)

    # ------------------------------------------------------------------ lifecycle
    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------ low level
    def _send(self, method: str, path: str, **kwargs: Any) -> bytes:
        request = build_request(self._client, method, f"{self._base_url}{path}", **kwargs)
        return send_request(self._client, request)

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> bytes:
        return self._send("GET", path, params=params)

    def _post(self, path: str, body: Any) -> bytes:
        return self._send("POST", path, json_body=body)

    def _delete(self, path: str, params: Optional[Mapping[str, Any]] = None) -> BaseResponse:
        return decode_response(BaseResponse, self._send("DELETE", path, params=params))

    def _post_raw(self, path: str, content: bytes, content_type: str) -> bytes:
        return self._send("POST", path, content=content, content_type=content_type)

    def _upload(self, method: str, path: str, file_path: str) -> bytes:
        return self._send(method, path, file_path=file_path)

    # batch endpoints answer with one response per request
    def _post_many(self, path: str, requests: Sequence[Any]) -> list[BaseWithIdResponse]:
        return decode_response_list(BaseWithIdResponse, self._send("POST", path, json_body=list(requests)))

    def _put_many(self, path: str, requests: Sequence[Any]) -> list[BaseResponse]:
        return decode_response_list(BaseResponse, self._send("PUT", path, json_body=list(requests)))

    def _patch_many(self, path: str, requests: Sequence[Any]) -> list[BaseResponse]:
        return decode_response_list(BaseResponse, self._send("PATCH", path, json_body=list(requests)))


class AsyncBaseClient:
    """Coroutine twin of :class:`BaseClient`."""

    def __init__(
        self,
        base_url: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout or get_settings().http_timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _send(self, method: str, path: str, **kwargs: Any) -> bytes:
        request = build_request(self._client, method, f"{self._base_url}{path}", **kwargs)
        return await async_send_request(self._client, request)

    async def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> bytes:
        return await self._send("GET", path, params=params)

    async def _post(self, path: str, body: Any) -> bytes:
        return await self._send("POST", path, json_body=body)
