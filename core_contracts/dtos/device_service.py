"""Device service DTOs (add/read and partial update)."""
from __future__ import annotations

from typing import List, Optional

from core_contracts.dtos.common import UpdateByIdOrName, Versionable
from core_contracts.models.common import AdminState, Timestamps
from core_contracts.models.metadata import DeviceService as DeviceServiceModel
from core_contracts.validation import Name, OptionalUUIDStr, URIStr

__all__ = ["DeviceService", "UpdateDeviceService"]


class DeviceService(Versionable):
    id: OptionalUUIDStr = ""
    name: Name
    description: str = ""
    labels: Optional[List[str]] = None
    base_address: URIStr
    admin_state: AdminState
    created: int = 0
    modified: int = 0
    last_connected: int = 0
    last_reported: int = 0

    def to_model(self) -> DeviceServiceModel:
        return DeviceServiceModel(
            id=self.id,
            name=self.name,
            description=self.description,
            base_address=self.base_address,
            admin_state=AdminState(self.admin_state),
            labels=list(self.labels) if self.labels is not None else None,
            last_connected=self.last_connected,
            last_reported=self.last_reported,
            timestamps=Timestamps(created=self.created, modified=self.modified),
        )

    @classmethod
    def from_model(cls, service: DeviceServiceModel) -> "DeviceService":
        return cls(
            id=service.id,
            name=service.name,
            description=service.description,
            labels=service.labels,
            base_address=service.base_address,
            admin_state=service.admin_state,
            created=service.timestamps.created,
            modified=service.timestamps.modified,
            last_connected=service.last_connected,
            last_reported=service.last_reported,
        )


class UpdateDeviceService(UpdateByIdOrName):
    description: Optional[str] = None
    labels: Optional[List[str]] = None
    base_address: Optional[URIStr] = None
    admin_state: Optional[AdminState] = None
    last_connected: Optional[int] = None
    last_reported: Optional[int] = None

    def apply_to(self, service: DeviceServiceModel) -> DeviceServiceModel:
        """Overwrite the fields of *service* that this patch carries."""
        if self.name is not None:
            service.name = self.name
        if self.description is not None:
            service.description = self.description
        if self.labels is not None:
            service.labels = list(self.labels)
        if self.base_address is not None:
            service.base_address = self.base_address
        if self.admin_state is not None:
            service.admin_state = AdminState(self.admin_state)
        if self.last_connected is not None:
            service.last_connected = self.last_connected
        if self.last_reported is not None:
            service.last_reported = self.last_reported
        return service

    @classmethod
    def from_model(cls, service: DeviceServiceModel) -> "UpdateDeviceService":
        """Full patch carrying every field of *service*."""
        return cls(
            id=service.id or None,
            name=service.name,
            description=service.description,
            labels=list(service.labels or []),
            base_address=service.base_address,
            admin_state=service.admin_state,
            last_connected=service.last_connected,
            last_reported=service.last_reported,
        )
