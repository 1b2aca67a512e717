"""core-data reading client."""
from __future__ import annotations

from typing import Any

from core_contracts.clients import interfaces
from core_contracts.clients.http.base import BaseClient
from core_contracts.clients.http.utils import decode_response, escape_path
from core_contracts.constants import (
    API_ALL_READING_ROUTE,
    API_READING_BY_DEVICE_NAME_ROUTE,
    API_READING_BY_RESOURCE_NAME_ROUTE,
    API_READING_COUNT_BY_DEVICE_NAME_ROUTE,
    API_READING_COUNT_ROUTE,
    API_READING_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    END,
    LIMIT,
    OFFSET,
    RESOURCE_NAME,
    START,
)
from core_contracts.dtos.common import CountResponse
from core_contracts.dtos.responses.reading import MultiReadingsResponse

__all__ = ["ReadingClient"]


def _page(offset: int, limit: int) -> dict[str, Any]:
    return {OFFSET: offset, LIMIT: limit}


class ReadingClient(BaseClient, interfaces.ReadingClient):
    def _readings(self, path: str, offset: int, limit: int) -> MultiReadingsResponse:
        return decode_response(MultiReadingsResponse, self._get(path, _page(offset, limit)))

    def all_readings(self, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT) -> MultiReadingsResponse:
        return self._readings(API_ALL_READING_ROUTE, offset, limit)

    def reading_count(self) -> CountResponse:
        return decode_response(CountResponse, self._get(API_READING_COUNT_ROUTE))

    def reading_count_by_device_name(self, name: str) -> CountResponse:
        body = self._get(f"{API_READING_COUNT_BY_DEVICE_NAME_ROUTE}/{escape_path(name)}")
        return decode_response(CountResponse, body)

    def readings_by_device_name(
        self, name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiReadingsResponse:
        return self._readings(f"{API_READING_BY_DEVICE_NAME_ROUTE}/{escape_path(name)}", offset, limit)

    def readings_by_resource_name(
        self, resource_name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiReadingsResponse:
        path = f"{API_READING_BY_RESOURCE_NAME_ROUTE}/{escape_path(resource_name)}"
        return self._readings(path, offset, limit)

    def readings_by_time_range(
        self, start: int, end: int, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiReadingsResponse:
        return self._readings(f"{API_READING_ROUTE}/{START}/{start}/{END}/{end}", offset, limit)

    def readings_by_device_name_and_resource_name(
        self,
        device_name: str,
        resource_name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiReadingsResponse:
        path = _device_resource_path(device_name, resource_name)
        return self._readings(path, offset, limit)

    def readings_by_device_name_and_resource_name_and_time_range(
        self,
        device_name: str,
        resource_name: str,
        start: int,
        end: int,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiReadingsResponse:
        path = f"{_device_resource_path(device_name, resource_name)}/{START}/{start}/{END}/{end}"
        return self._readings(path, offset, limit)


def _device_resource_path(device_name: str, resource_name: str) -> str:
    return (
        f"{API_READING_BY_DEVICE_NAME_ROUTE}/{escape_path(device_name)}"
        f"/{RESOURCE_NAME}/{escape_path(resource_name)}"
    )
