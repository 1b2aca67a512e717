"""Device service response envelopes."""
from __future__ import annotations

from typing import List

from pydantic import Field

from core_contracts.dtos.common import BaseResponse
from core_contracts.dtos.device_service import DeviceService

__all__ = ["DeviceServiceResponse", "MultiDeviceServicesResponse"]


class DeviceServiceResponse(BaseResponse):
    service: DeviceService


class MultiDeviceServicesResponse(BaseResponse):
    services: List[DeviceService] = Field(default_factory=list)
