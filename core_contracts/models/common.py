"""Enums and small value objects shared by the domain models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["AdminState", "OperatingState", "Timestamps", "AutoEvent"]


class AdminState(str, Enum):
    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"


class OperatingState(str, Enum):
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


@dataclass
class Timestamps:
    created: int = 0                     # epoch milliseconds, set by the owning service
    modified: int = 0


@dataclass
class AutoEvent:
    interval: str                        # duration, e.g. "10s"
    on_change: bool = False
    source_name: str = ""
