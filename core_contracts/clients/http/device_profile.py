"""core-metadata device profile client.

Profiles can be sent either as JSON DTOs or as the YAML files device
services ship with; the YAML variants upload the file untouched.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from core_contracts.clients import interfaces
from core_contracts.clients.http.base import BaseClient
from core_contracts.clients.http.utils import decode_response, escape_path
from core_contracts.constants import (
    API_ALL_DEVICE_PROFILE_ROUTE,
    API_DEVICE_PROFILE_BY_NAME_ROUTE,
    API_DEVICE_PROFILE_ROUTE,
    API_DEVICE_PROFILE_UPLOAD_FILE_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    LABELS,
    LIMIT,
    OFFSET,
)
from core_contracts.dtos.common import BaseResponse, BaseWithIdResponse
from core_contracts.dtos.requests.device_profile import DeviceProfileRequest
from core_contracts.dtos.responses.device_profile import (
    DeviceProfileResponse,
    MultiDeviceProfilesResponse,
)

__all__ = ["DeviceProfileClient"]


class DeviceProfileClient(BaseClient, interfaces.DeviceProfileClient):
    def add(self, requests: Sequence[DeviceProfileRequest]) -> List[BaseWithIdResponse]:
        return self._post_many(API_DEVICE_PROFILE_ROUTE, requests)

    def update(self, requests: Sequence[DeviceProfileRequest]) -> List[BaseResponse]:
        return self._put_many(API_DEVICE_PROFILE_ROUTE, requests)

    def add_by_yaml(self, file_path: str) -> BaseWithIdResponse:
        body = self._upload("POST", API_DEVICE_PROFILE_UPLOAD_FILE_ROUTE, file_path)
        return decode_response(BaseWithIdResponse, body)

    def update_by_yaml(self, file_path: str) -> BaseResponse:
        body = self._upload("PUT", API_DEVICE_PROFILE_UPLOAD_FILE_ROUTE, file_path)
        return decode_response(BaseResponse, body)

    def device_profile_by_name(self, name: str) -> DeviceProfileResponse:
        body = self._get(f"{API_DEVICE_PROFILE_BY_NAME_ROUTE}/{escape_path(name)}")
        return decode_response(DeviceProfileResponse, body)

    def all_device_profiles(
        self,
        labels: Optional[Sequence[str]] = None,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiDeviceProfilesResponse:
        body = self._get(API_ALL_DEVICE_PROFILE_ROUTE, {OFFSET: offset, LIMIT: limit, LABELS: labels})
        return decode_response(MultiDeviceProfilesResponse, body)

    def delete_by_name(self, name: str) -> BaseResponse:
        return self._delete(f"{API_DEVICE_PROFILE_BY_NAME_ROUTE}/{escape_path(name)}")
