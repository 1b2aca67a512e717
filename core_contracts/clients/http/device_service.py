"""core-metadata device service client."""
from __future__ import annotations

from typing import List, Optional, Sequence

from core_contracts.clients import interfaces
from core_contracts.clients.http.base import BaseClient
from core_contracts.clients.http.utils import decode_response, escape_path
from core_contracts.constants import (
    API_ALL_DEVICE_SERVICE_ROUTE,
    API_DEVICE_SERVICE_BY_NAME_ROUTE,
    API_DEVICE_SERVICE_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    LABELS,
    LIMIT,
    OFFSET,
)
from core_contracts.dtos.common import BaseResponse, BaseWithIdResponse
from core_contracts.dtos.requests.device_service import (
    AddDeviceServiceRequest,
    UpdateDeviceServiceRequest,
)
from core_contracts.dtos.responses.device_service import (
    DeviceServiceResponse,
    MultiDeviceServicesResponse,
)

__all__ = ["DeviceServiceClient"]


class DeviceServiceClient(BaseClient, interfaces.DeviceServiceClient):
    def add(self, requests: Sequence[AddDeviceServiceRequest]) -> List[BaseWithIdResponse]:
        return self._post_many(API_DEVICE_SERVICE_ROUTE, requests)

    def update(self, requests: Sequence[UpdateDeviceServiceRequest]) -> List[BaseResponse]:
        return self._patch_many(API_DEVICE_SERVICE_ROUTE, requests)

    def all_device_services(
        self,
        labels: Optional[Sequence[str]] = None,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiDeviceServicesResponse:
        body = self._get(API_ALL_DEVICE_SERVICE_ROUTE, {OFFSET: offset, LIMIT: limit, LABELS: labels})
        return decode_response(MultiDeviceServicesResponse, body)

    def device_service_by_name(self, name: str) -> DeviceServiceResponse:
        body = self._get(f"{API_DEVICE_SERVICE_BY_NAME_ROUTE}/{escape_path(name)}")
        return decode_response(DeviceServiceResponse, body)

    def delete_by_name(self, name: str) -> BaseResponse:
        return self._delete(f"{API_DEVICE_SERVICE_BY_NAME_ROUTE}/{escape_path(name)}")
