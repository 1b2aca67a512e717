"""Event and reading DTOs.

A reading DTO is flat on the wire: the simple ``value`` and the binary
``binaryValue``/``mediaType`` pair sit next to the common fields, and which of
them must be filled depends on ``valueType``.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field, model_validator

from core_contracts.constants import VALUE_TYPE_BINARY
from core_contracts.dtos.base import WireBytes
from core_contracts.dtos.common import Versionable
from core_contracts.models.event import (
    BaseReading as BaseReadingModel,
    BinaryReading as BinaryReadingModel,
    Event as EventModel,
    Reading,
    SimpleReading as SimpleReadingModel,
)
from core_contracts.validation import Name, NonZeroInt, OptionalUUIDStr, UUIDStr, ValueTypeStr

__all__ = ["BaseReading", "Event"]


class BaseReading(Versionable):
    id: OptionalUUIDStr = ""
    created: int = 0
    origin: NonZeroInt
    device_name: Name
    resource_name: Name
    profile_name: Name
    value_type: ValueTypeStr

    # SimpleReading
    value: Optional[str] = None

    # BinaryReading
    binary_value: Optional[WireBytes] = None
    media_type: Optional[str] = None

    @model_validator(mode="after")
    def _check_value(self) -> "BaseReading":
        if self.value_type == VALUE_TYPE_BINARY:
            if not self.binary_value:
                raise ValueError("binaryValue is required for a Binary reading")
            if not self.media_type:
                raise ValueError("mediaType is required for a Binary reading")
        elif not self.value:
            raise ValueError(f"value is required for a {self.value_type} reading")
        return self

    def to_model(self) -> Reading:
        base = dict(
            id=self.id,
            created=self.created,
            origin=self.origin,
            device_name=self.device_name,
            resource_name=self.resource_name,
            profile_name=self.profile_name,
            value_type=self.value_type,
        )
        if self.value_type == VALUE_TYPE_BINARY:
            return BinaryReadingModel(
                binary_value=self.binary_value or b"", media_type=self.media_type or "", **base
            )
        return SimpleReadingModel(value=self.value or "", **base)

    @classmethod
    def from_model(cls, reading: BaseReadingModel) -> "BaseReading":
        extra: dict = {}
        if isinstance(reading, BinaryReadingModel):
            extra = dict(binary_value=reading.binary_value, media_type=reading.media_type)
        elif isinstance(reading, SimpleReadingModel):
            extra = dict(value=reading.value)
        return cls(
            id=reading.id,
            created=reading.created,
            origin=reading.origin,
            device_name=reading.device_name,
            resource_name=reading.resource_name,
            profile_name=reading.profile_name,
            value_type=reading.value_type,
            **extra,
        )


class Event(Versionable):
    id: UUIDStr
    device_name: Name
    profile_name: Name
    source_name: Name
    origin: NonZeroInt
    readings: List[BaseReading] = Field(..., min_length=1)
    tags: Optional[Dict[str, str]] = None

    def to_model(self) -> EventModel:
        return EventModel(
            id=self.id,
            device_name=self.device_name,
            profile_name=self.profile_name,
            source_name=self.source_name,
            origin=self.origin,
            readings=[r.to_model() for r in self.readings],
            tags=dict(self.tags or {}),
        )

    @classmethod
    def from_model(cls, event: EventModel) -> "Event":
        return cls(
            id=event.id,
            device_name=event.device_name,
            profile_name=event.profile_name,
            source_name=event.source_name,
            origin=event.origin,
            readings=[BaseReading.from_model(r) for r in event.readings],
            tags=dict(event.tags) if event.tags else None,
        )
