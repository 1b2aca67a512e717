"""Client of the system endpoints every service exposes.

``AsyncCommonClient`` mirrors :class:`CommonClient` with coroutines; health
checkers polling many services at once use it from an event loop.
"""
from __future__ import annotations

from core_contracts.clients import interfaces
from core_contracts.clients.http.base import AsyncBaseClient, BaseClient
from core_contracts.clients.http.utils import decode_response
from core_contracts.constants import (
    API_CONFIG_ROUTE,
    API_METRICS_ROUTE,
    API_PING_ROUTE,
    API_SECRET_ROUTE,
    API_VERSION_ROUTE,
)
from core_contracts.dtos.common import (
    BaseResponse,
    ConfigResponse,
    MetricsResponse,
    PingResponse,
    SecretRequest,
    VersionResponse,
)

__all__ = ["CommonClient", "AsyncCommonClient"]


class CommonClient(BaseClient, interfaces.CommonClient):
    def configuration(self) -> ConfigResponse:
        return decode_response(ConfigResponse, self._get(API_CONFIG_ROUTE))

    def metrics(self) -> MetricsResponse:
        return decode_response(MetricsResponse, self._get(API_METRICS_ROUTE))

    def ping(self) -> PingResponse:
        return decode_response(PingResponse, self._get(API_PING_ROUTE))

    def version(self) -> VersionResponse:
        return decode_response(VersionResponse, self._get(API_VERSION_ROUTE))

    def add_secret(self, request: SecretRequest) -> BaseResponse:
        return decode_response(BaseResponse, self._post(API_SECRET_ROUTE, request))


class AsyncCommonClient(AsyncBaseClient):
    async def configuration(self) -> ConfigResponse:
        return decode_response(ConfigResponse, await self._get(API_CONFIG_ROUTE))

    async def metrics(self) -> MetricsResponse:
        return decode_response(MetricsResponse, await self._get(API_METRICS_ROUTE))

    async def ping(self) -> PingResponse:
        return decode_response(PingResponse, await self._get(API_PING_ROUTE))

    async def version(self) -> VersionResponse:
        return decode_response(VersionResponse, await self._get(API_VERSION_ROUTE))

    async def add_secret(self, request: SecretRequest) -> BaseResponse:
        return decode_response(BaseResponse, await self._post(API_SECRET_ROUTE, request))
