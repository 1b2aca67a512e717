"""Request envelopes for adding and updating device services."""
from __future__ import annotations

from typing import Iterable, List

from core_contracts.dtos.common import BaseRequest
from core_contracts.dtos.device_service import DeviceService, UpdateDeviceService
from core_contracts.models.metadata import DeviceService as DeviceServiceModel

__all__ = ["AddDeviceServiceRequest", "UpdateDeviceServiceRequest", "to_device_service_models"]


class AddDeviceServiceRequest(BaseRequest):
    service: DeviceService


class UpdateDeviceServiceRequest(BaseRequest):
    service: UpdateDeviceService

    def apply_to(self, service: DeviceServiceModel) -> DeviceServiceModel:
        return self.service.apply_to(service)


def to_device_service_models(requests: Iterable[AddDeviceServiceRequest]) -> List[DeviceServiceModel]:
    return [req.service.to_model() for req in requests]
