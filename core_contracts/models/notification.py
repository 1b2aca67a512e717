"""Support-notifications domain models: channel addresses and subscriptions."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from core_contracts.constants import EMAIL, MQTT, REST
from core_contracts.models.common import AdminState, Timestamps

__all__ = ["Address", "RESTAddress", "MQTTPubAddress", "EmailAddress", "Subscription"]


@dataclass
class Address(ABC):
    host: str = ""
    port: int = 0

    @property
    @abstractmethod
    def type(self) -> str:
        """Channel type: REST, MQTT or EMAIL."""


@dataclass
class RESTAddress(Address):
    path: str = ""
    http_method: str = ""

    @property
    def type(self) -> str:
        return REST


@dataclass
class MQTTPubAddress(Address):
    publisher: str = ""
    topic: str = ""
    qos: int = 0
    keep_alive: int = 0
    retained: bool = False
    auto_reconnect: bool = False
    connect_timeout: int = 0

    @property
    def type(self) -> str:
        return MQTT


@dataclass
class EmailAddress(Address):
    recipients: List[str] = field(default_factory=list)

    @property
    def type(self) -> str:
        return EMAIL


@dataclass
class Subscription:
    id: str = ""
    name: str = ""
    channels: List[Address] = field(default_factory=list)
    receiver: str = ""
    categories: Optional[List[str]] = None
    labels: Optional[List[str]] = None
    description: str = ""
    resend_limit: int = 0
    resend_interval: str = ""
    admin_state: AdminState = AdminState.UNLOCKED
    timestamps: Timestamps = field(default_factory=Timestamps)
