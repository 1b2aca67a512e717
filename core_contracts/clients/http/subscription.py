"""support-notifications subscription client."""
from __future__ import annotations

from typing import List, Sequence

from core_contracts.clients import interfaces
from core_contracts.clients.http.base import BaseClient
from core_contracts.clients.http.utils import decode_response, escape_path
from core_contracts.constants import (
    API_ALL_SUBSCRIPTION_ROUTE,
    API_SUBSCRIPTION_BY_CATEGORY_ROUTE,
    API_SUBSCRIPTION_BY_LABEL_ROUTE,
    API_SUBSCRIPTION_BY_NAME_ROUTE,
    API_SUBSCRIPTION_BY_RECEIVER_ROUTE,
    API_SUBSCRIPTION_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    LIMIT,
    OFFSET,
)
from core_contracts.dtos.common import BaseResponse, BaseWithIdResponse
from core_contracts.dtos.requests.subscription import (
    AddSubscriptionRequest,
    UpdateSubscriptionRequest,
)
from core_contracts.dtos.responses.subscription import (
    MultiSubscriptionsResponse,
    SubscriptionResponse,
)

__all__ = ["SubscriptionClient"]


class SubscriptionClient(BaseClient, interfaces.SubscriptionClient):
    def add(self, requests: Sequence[AddSubscriptionRequest]) -> List[BaseWithIdResponse]:
        return self._post_many(API_SUBSCRIPTION_ROUTE, requests)

    def update(self, requests: Sequence[UpdateSubscriptionRequest]) -> List[BaseResponse]:
        return self._patch_many(API_SUBSCRIPTION_ROUTE, requests)

    def _subscriptions(self, path: str, offset: int, limit: int) -> MultiSubscriptionsResponse:
        body = self._get(path, {OFFSET: offset, LIMIT: limit})
        return decode_response(MultiSubscriptionsResponse, body)

    def all_subscriptions(self, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT) -> MultiSubscriptionsResponse:
        return self._subscriptions(API_ALL_SUBSCRIPTION_ROUTE, offset, limit)

    def subscriptions_by_category(
        self, category: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiSubscriptionsResponse:
        return self._subscriptions(f"{API_SUBSCRIPTION_BY_CATEGORY_ROUTE}/{escape_path(category)}", offset, limit)

    def subscriptions_by_label(
        self, label: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiSubscriptionsResponse:
        return self._subscriptions(f"{API_SUBSCRIPTION_BY_LABEL_ROUTE}/{escape_path(label)}", offset, limit)

    def subscriptions_by_receiver(
        self, receiver: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiSubscriptionsResponse:
        return self._subscriptions(f"{API_SUBSCRIPTION_BY_RECEIVER_ROUTE}/{escape_path(receiver)}", offset, limit)

    def subscription_by_name(self, name: str) -> SubscriptionResponse:
        body = self._get(f"{API_SUBSCRIPTION_BY_NAME_ROUTE}/{escape_path(name)}")
        return decode_response(SubscriptionResponse, body)

    def delete_subscription_by_name(self, name: str) -> BaseResponse:
        return self._delete(f"{API_SUBSCRIPTION_BY_NAME_ROUTE}/{escape_path(name)}")
