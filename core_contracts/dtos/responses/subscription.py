"""Subscription response envelopes."""
from __future__ import annotations

from typing import List

from pydantic import Field

from core_contracts.dtos.common import BaseResponse
from core_contracts.dtos.subscription import Subscription

__all__ = ["SubscriptionResponse", "MultiSubscriptionsResponse"]


class SubscriptionResponse(BaseResponse):
    subscription: Subscription


class MultiSubscriptionsResponse(BaseResponse):
    subscriptions: List[Subscription] = Field(default_factory=list)
