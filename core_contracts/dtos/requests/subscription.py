"""Request envelopes for adding and updating notification subscriptions.

support-notifications can only deliver over e-mail and REST, so MQTT
channels are rejected here even though the ``Address`` DTO itself allows them.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from pydantic import model_validator

from core_contracts.constants import EMAIL, REST
from core_contracts.dtos.common import BaseRequest
from core_contracts.dtos.subscription import Address, Subscription, UpdateSubscription
from core_contracts.models.notification import Subscription as SubscriptionModel

__all__ = ["AddSubscriptionRequest", "UpdateSubscriptionRequest", "to_subscription_models"]

SUPPORTED_CHANNEL_TYPES = (EMAIL, REST)


def _check_channel_types(channels: Optional[List[Address]]) -> None:
    for channel in channels or []:
        if channel.type not in SUPPORTED_CHANNEL_TYPES:
            raise ValueError(f"{channel.type} is not valid type for Channel")


class AddSubscriptionRequest(BaseRequest):
    subscription: Subscription

    @model_validator(mode="after")
    def _check_channels(self) -> "AddSubscriptionRequest":
        _check_channel_types(self.subscription.channels)
        return self


class UpdateSubscriptionRequest(BaseRequest):
    subscription: UpdateSubscription

    @model_validator(mode="after")
    def _check_channels(self) -> "UpdateSubscriptionRequest":
        _check_channel_types(self.subscription.channels)
        patch = self.subscription
        if patch.categories is not None and patch.labels is not None:
            if not patch.categories and not patch.labels:
                raise ValueError("categories and labels can not be both empty")
        return self

    def apply_to(self, subscription: SubscriptionModel) -> SubscriptionModel:
        return self.subscription.apply_to(subscription)


def to_subscription_models(requests: Iterable[AddSubscriptionRequest]) -> List[SubscriptionModel]:
    return [req.subscription.to_model() for req in requests]
