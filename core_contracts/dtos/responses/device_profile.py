"""Device profile response envelopes."""
from __future__ import annotations

from typing import List

from pydantic import Field

from core_contracts.dtos.common import BaseResponse
from core_contracts.dtos.device_profile import DeviceProfile

__all__ = ["DeviceProfileResponse", "MultiDeviceProfilesResponse"]


class DeviceProfileResponse(BaseResponse):
    profile: DeviceProfile


class MultiDeviceProfilesResponse(BaseResponse):
    profiles: List[DeviceProfile] = Field(default_factory=list)
