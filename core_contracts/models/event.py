"""Event and reading domain models.

A reading is either *simple* (its value is carried as a string, whatever the
value type) or *binary* (raw bytes plus a media type).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

__all__ = ["BaseReading", "SimpleReading", "BinaryReading", "Reading", "Event"]


@dataclass
class BaseReading:
    id: str = ""
    created: int = 0
    origin: int = 0                      # epoch nanoseconds
    device_name: str = ""
    resource_name: str = ""
    profile_name: str = ""
    value_type: str = ""


@dataclass
class SimpleReading(BaseReading):
    value: str = ""


@dataclass
class BinaryReading(BaseReading):
    binary_value: bytes = b""
    media_type: str = ""


Reading = Union[SimpleReading, BinaryReading]


@dataclass
class Event:
    id: str = ""
    device_name: str = ""
    profile_name: str = ""
    source_name: str = ""
    origin: int = 0
    readings: List[Reading] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)
