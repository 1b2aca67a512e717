"""Core-metadata domain models: device services, device profiles, provision watchers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from core_contracts.models.common import AdminState, AutoEvent, Timestamps

__all__ = [
    "DeviceService",
    "ResourceProperties",
    "DeviceResource",
    "ResourceOperation",
    "DeviceCommand",
    "DeviceProfile",
    "ProvisionWatcher",
]


@dataclass
class DeviceService:
    id: str = ""
    name: str = ""
    description: str = ""
    base_address: str = ""
    admin_state: AdminState = AdminState.UNLOCKED
    labels: Optional[List[str]] = None
    last_connected: int = 0
    last_reported: int = 0
    timestamps: Timestamps = field(default_factory=Timestamps)


# ---------------------------------------------------------------------------
# Device profile
# ---------------------------------------------------------------------------


@dataclass
class ResourceProperties:
    value_type: str = ""
    read_write: str = ""
    units: str = ""
    minimum: str = ""
    maximum: str = ""
    default_value: str = ""
    mask: str = ""
    shift: str = ""
    scale: str = ""
    offset: str = ""
    base: str = ""
    assertion: str = ""
    media_type: str = ""


@dataclass
class DeviceResource:
    name: str = ""
    description: str = ""
    is_hidden: bool = False
    tag: str = ""
    properties: ResourceProperties = field(default_factory=ResourceProperties)
    attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ResourceOperation:
    device_resource: str = ""
    default_value: str = ""
    mappings: Dict[str, str] = field(default_factory=dict)


@dataclass
class DeviceCommand:
    name: str = ""
    is_hidden: bool = False
    read_write: str = ""
    resource_operations: List[ResourceOperation] = field(default_factory=list)


@dataclass
class DeviceProfile:
    id: str = ""
    name: str = ""
    manufacturer: str = ""
    description: str = ""
    model: str = ""
    labels: Optional[List[str]] = None
    device_resources: List[DeviceResource] = field(default_factory=list)
    device_commands: List[DeviceCommand] = field(default_factory=list)
    timestamps: Timestamps = field(default_factory=Timestamps)


# ---------------------------------------------------------------------------
# Provision watcher
# ---------------------------------------------------------------------------


@dataclass
class ProvisionWatcher:
    id: str = ""
    name: str = ""
    labels: Optional[List[str]] = None
    identifiers: Dict[str, str] = field(default_factory=dict)
    blocking_identifiers: Optional[Dict[str, List[str]]] = None
    profile_name: str = ""
    service_name: str = ""
    admin_state: AdminState = AdminState.UNLOCKED
    auto_events: List[AutoEvent] = field(default_factory=list)
    timestamps: Timestamps = field(default_factory=Timestamps)
