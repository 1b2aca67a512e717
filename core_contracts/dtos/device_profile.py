"""Device profile DTOs.

A profile declares the device resources a device exposes and the commands
grouping them.  Beyond the per-field rules, a profile is only valid when:

* resource names are unique within the profile,
* command names are unique within the profile,
* every resource operation of a command references a declared resource.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, model_validator

from core_contracts.dtos.base import ContractModel
from core_contracts.dtos.common import Versionable
from core_contracts.models.common import Timestamps
from core_contracts.models.metadata import (
    DeviceCommand as DeviceCommandModel,
    DeviceProfile as DeviceProfileModel,
    DeviceResource as DeviceResourceModel,
    ResourceOperation as ResourceOperationModel,
    ResourceProperties as ResourcePropertiesModel,
)
from core_contracts.validation import Name, NonEmptyStr, OptionalUUIDStr, ValueTypeStr

__all__ = [
    "ResourceProperties",
    "DeviceResource",
    "ResourceOperation",
    "DeviceCommand",
    "DeviceProfile",
]

ReadWrite = Literal["R", "W", "RW"]


class ResourceProperties(ContractModel):
    value_type: ValueTypeStr
    read_write: ReadWrite
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

    def to_model(self) -> ResourcePropertiesModel:
        return ResourcePropertiesModel(**self.model_dump())

    @classmethod
    def from_model(cls, props: ResourcePropertiesModel) -> "ResourceProperties":
        return cls(**vars(props))


class DeviceResource(ContractModel):
    name: Name
    description: str = ""
    is_hidden: bool = False
    tag: str = ""
    properties: ResourceProperties
    attributes: Optional[Dict[str, Any]] = None

    def to_model(self) -> DeviceResourceModel:
        return DeviceResourceModel(
            name=self.name,
            description=self.description,
            is_hidden=self.is_hidden,
            tag=self.tag,
            properties=self.properties.to_model(),
            attributes=dict(self.attributes or {}),
        )

    @classmethod
    def from_model(cls, resource: DeviceResourceModel) -> "DeviceResource":
        return cls(
            name=resource.name,
            description=resource.description,
            is_hidden=resource.is_hidden,
            tag=resource.tag,
            properties=ResourceProperties.from_model(resource.properties),
            attributes=dict(resource.attributes) if resource.attributes else None,
        )


class ResourceOperation(ContractModel):
    device_resource: NonEmptyStr
    default_value: str = ""
    mappings: Optional[Dict[str, str]] = None

    def to_model(self) -> ResourceOperationModel:
        return ResourceOperationModel(
            device_resource=self.device_resource,
            default_value=self.default_value,
            mappings=dict(self.mappings or {}),
        )

    @classmethod
    def from_model(cls, operation: ResourceOperationModel) -> "ResourceOperation":
        return cls(
            device_resource=operation.device_resource,
            default_value=operation.default_value,
            mappings=dict(operation.mappings) if operation.mappings else None,
        )


class DeviceCommand(ContractModel):
    name: Name
    is_hidden: bool = False
    read_write: ReadWrite
    resource_operations: List[ResourceOperation] = Field(..., min_length=1)

    def to_model(self) -> DeviceCommandModel:
        return DeviceCommandModel(
            name=self.name,
            is_hidden=self.is_hidden,
            read_write=self.read_write,
            resource_operations=[op.to_model() for op in self.resource_operations],
        )

    @classmethod
    def from_model(cls, command: DeviceCommandModel) -> "DeviceCommand":
        return cls(
            name=command.name,
            is_hidden=command.is_hidden,
            read_write=command.read_write,
            resource_operations=[ResourceOperation.from_model(op) for op in command.resource_operations],
        )


class DeviceProfile(Versionable):
    id: OptionalUUIDStr = ""
    name: Name
    manufacturer: str = ""
    description: str = ""
    model: str = ""
    labels: Optional[List[str]] = None
    device_resources: List[DeviceResource] = Field(..., min_length=1)
    device_commands: List[DeviceCommand] = Field(default_factory=list)
    created: int = 0
    modified: int = 0

    @model_validator(mode="after")
    def _check_references(self) -> "DeviceProfile":
        resource_names = set()
        for resource in self.device_resources:
            if resource.name in resource_names:
                raise ValueError(f"device resource {resource.name} is duplicated")
            resource_names.add(resource.name)

        command_names = set()
        for command in self.device_commands:
            if command.name in command_names:
                raise ValueError(f"device command {command.name} is duplicated")
            command_names.add(command.name)
            for operation in command.resource_operations:
                if operation.device_resource not in resource_names:
                    raise ValueError(
                        f"device command {command.name} references an undefined "
                        f"device resource {operation.device_resource}"
                    )
        return self

    def to_model(self) -> DeviceProfileModel:
        return DeviceProfileModel(
            id=self.id,
            name=self.name,
            manufacturer=self.manufacturer,
            description=self.description,
            model=self.model,
            labels=list(self.labels) if self.labels is not None else None,
            device_resources=[r.to_model() for r in self.device_resources],
            device_commands=[c.to_model() for c in self.device_commands],
            timestamps=Timestamps(created=self.created, modified=self.modified),
        )

    @classmethod
    def from_model(cls, profile: DeviceProfileModel) -> "DeviceProfile":
        return cls(
            id=profile.id,
            name=profile.name,
            manufacturer=profile.manufacturer,
            description=profile.description,
            model=profile.model,
            labels=profile.labels,
            device_resources=[DeviceResource.from_model(r) for r in profile.device_resources],
            device_commands=[DeviceCommand.from_model(c) for c in profile.device_commands],
            created=profile.timestamps.created,
            modified=profile.timestamps.modified,
        )
