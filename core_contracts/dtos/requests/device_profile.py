"""Request envelope for adding or replacing device profiles.

The same envelope is used for POST (add) and PUT (full update), since a
profile update always replaces the whole profile.
"""
from __future__ import annotations

from typing import Iterable, List

from core_contracts.dtos.common import BaseRequest
from core_contracts.dtos.device_profile import DeviceProfile
from core_contracts.models.metadata import DeviceProfile as DeviceProfileModel

__all__ = ["DeviceProfileRequest", "to_device_profile_models"]


class DeviceProfileRequest(BaseRequest):
    profile: DeviceProfile


def to_device_profile_models(requests: Iterable[DeviceProfileRequest]) -> List[DeviceProfileModel]:
    return [req.profile.to_model() for req in requests]
