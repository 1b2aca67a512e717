"""Support-notifications DTOs: channel addresses and subscriptions.

An ``Address`` is a flat union on the wire: ``type`` selects which of the
REST, MQTT or EMAIL fields are meaningful and required.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import EmailStr, Field, model_validator

from core_contracts.constants import EMAIL, MQTT, REST
from core_contracts.dtos.base import ContractModel
from core_contracts.dtos.common import UpdateByIdOrName, Versionable
from core_contracts.models.common import AdminState, Timestamps
from core_contracts.models.notification import (
    Address as AddressModel,
    EmailAddress as EmailAddressModel,
    MQTTPubAddress as MQTTPubAddressModel,
    RESTAddress as RESTAddressModel,
    Subscription as SubscriptionModel,
)
from core_contracts.validation import DurationStr, HttpMethodStr, Name, NonEmptyStr, OptionalUUIDStr

__all__ = ["Address", "Subscription", "UpdateSubscription"]


class Address(ContractModel):
    type: Literal["REST", "MQTT", "EMAIL"]
    host: str = ""
    port: int = 0

    # REST
    path: Optional[str] = None
    http_method: Optional[HttpMethodStr] = None

    # MQTT
    publisher: Optional[str] = None
    topic: Optional[str] = None
    qos: Optional[int] = None
    keep_alive: Optional[int] = None
    retained: Optional[bool] = None
    auto_reconnect: Optional[bool] = None
    connect_timeout: Optional[int] = None

    # EMAIL
    recipients: Optional[List[EmailStr]] = None

    @model_validator(mode="after")
    def _check_type_fields(self) -> "Address":
        if self.type != EMAIL:
            if not self.host.strip():
                raise ValueError(f"host is required for a {self.type} address")
            if not self.port:
                raise ValueError(f"port is required for a {self.type} address")
        if self.type == REST and not self.http_method:
            raise ValueError("httpMethod is required for a REST address")
        if self.type == MQTT:
            if not self.publisher:
                raise ValueError("publisher is required for an MQTT address")
            if not self.topic:
                raise ValueError("topic is required for an MQTT address")
        if self.type == EMAIL and not self.recipients:
            raise ValueError("at least one recipient is required for an EMAIL address")
        return self

    def to_model(self) -> AddressModel:
        if self.type == REST:
            return RESTAddressModel(
                host=self.host,
                port=self.port,
                path=self.path or "",
                http_method=self.http_method or "",
            )
        if self.type == MQTT:
            return MQTTPubAddressModel(
                host=self.host,
                port=self.port,
                publisher=self.publisher or "",
                topic=self.topic or "",
                qos=self.qos or 0,
                keep_alive=self.keep_alive or 0,
                retained=bool(self.retained),
                auto_reconnect=bool(self.auto_reconnect),
                connect_timeout=self.connect_timeout or 0,
            )
        return EmailAddressModel(host=self.host, port=self.port, recipients=list(self.recipients or []))

    @classmethod
    def from_model(cls, address: AddressModel) -> "Address":
        if isinstance(address, RESTAddressModel):
            return cls(
                type=REST,
                host=address.host,
                port=address.port,
                path=address.path or None,
                http_method=address.http_method,
            )
        if isinstance(address, MQTTPubAddressModel):
            return cls(
                type=MQTT,
                host=address.host,
                port=address.port,
                publisher=address.publisher,
                topic=address.topic,
                qos=address.qos,
                keep_alive=address.keep_alive,
                retained=address.retained,
                auto_reconnect=address.auto_reconnect,
                connect_timeout=address.connect_timeout,
            )
        if isinstance(address, EmailAddressModel):
            return cls(type=EMAIL, host=address.host, port=address.port, recipients=address.recipients)
        raise TypeError(f"unsupported address model {type(address).__name__}")


class Subscription(Versionable):
    id: OptionalUUIDStr = ""
    name: Name
    channels: List[Address] = Field(..., min_length=1)
    receiver: NonEmptyStr
    categories: Optional[List[str]] = None
    labels: Optional[List[str]] = None
    description: str = ""
    resend_limit: int = 0
    resend_interval: Optional[DurationStr] = None
    admin_state: AdminState
    created: int = 0
    modified: int = 0

    @model_validator(mode="after")
    def _check_categories_or_labels(self) -> "Subscription":
        if not self.categories and not self.labels:
            raise ValueError("categories or labels is required")
        return self

    def to_model(self) -> SubscriptionModel:
        return SubscriptionModel(
            id=self.id,
            name=self.name,
            channels=[c.to_model() for c in self.channels],
            receiver=self.receiver,
            categories=list(self.categories) if self.categories is not None else None,
            labels=list(self.labels) if self.labels is not None else None,
            description=self.description,
            resend_limit=self.resend_limit,
            resend_interval=self.resend_interval or "",
            admin_state=AdminState(self.admin_state),
            timestamps=Timestamps(created=self.created, modified=self.modified),
        )

    @classmethod
    def from_model(cls, subscription: SubscriptionModel) -> "Subscription":
        return cls(
            id=subscription.id,
            name=subscription.name,
            channels=[Address.from_model(c) for c in subscription.channels],
            receiver=subscription.receiver,
            categories=subscription.categories,
            labels=subscription.labels,
            description=subscription.description,
            resend_limit=subscription.resend_limit,
            resend_interval=subscription.resend_interval or None,
            admin_state=subscription.admin_state,
            created=subscription.timestamps.created,
            modified=subscription.timestamps.modified,
        )


class UpdateSubscription(UpdateByIdOrName):
    channels: Optional[List[Address]] = None
    receiver: Optional[NonEmptyStr] = None
    categories: Optional[List[str]] = None
    labels: Optional[List[str]] = None
    description: Optional[str] = None
    resend_limit: Optional[int] = None
    resend_interval: Optional[DurationStr] = None
    admin_state: Optional[AdminState] = None

    def apply_to(self, subscription: SubscriptionModel) -> SubscriptionModel:
        """Overwrite the fields of *subscription* that this patch carries."""
        if self.name is not None:
            subscription.name = self.name
        if self.channels is not None:
            subscription.channels = [c.to_model() for c in self.channels]
        if self.categories is not None:
            subscription.categories = list(self.categories)
        if self.labels is not None:
            subscription.labels = list(self.labels)
        if self.description is not None:
            subscription.description = self.description
        if self.receiver is not None:
            subscription.receiver = self.receiver
        if self.resend_limit is not None:
            subscription.resend_limit = self.resend_limit
        if self.resend_interval is not None:
            subscription.resend_interval = self.resend_interval
        if self.admin_state is not None:
            subscription.admin_state = AdminState(self.admin_state)
        return subscription
