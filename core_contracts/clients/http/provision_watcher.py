"""core-metadata provision watcher client."""
from __future__ import annotations

from typing import List, Optional, Sequence

from core_contracts.clients import interfaces
from core_contracts.clients.http.base import BaseClient
from core_contracts.clients.http.utils import decode_response, escape_path
from core_contracts.constants import (
    API_ALL_PROVISION_WATCHER_ROUTE,
    API_PROVISION_WATCHER_BY_NAME_ROUTE,
    API_PROVISION_WATCHER_BY_PROFILE_NAME_ROUTE,
    API_PROVISION_WATCHER_BY_SERVICE_NAME_ROUTE,
    API_PROVISION_WATCHER_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    LABELS,
    LIMIT,
    OFFSET,
)
from core_contracts.dtos.common import BaseResponse, BaseWithIdResponse
from core_contracts.dtos.requests.provision_watcher import (
    AddProvisionWatcherRequest,
    UpdateProvisionWatcherRequest,
)
from core_contracts.dtos.responses.provision_watcher import (
    MultiProvisionWatchersResponse,
    ProvisionWatcherResponse,
)

__all__ = ["ProvisionWatcherClient"]


class ProvisionWatcherClient(BaseClient, interfaces.ProvisionWatcherClient):
    def add(self, requests: Sequence[AddProvisionWatcherRequest]) -> List[BaseWithIdResponse]:
        return self._post_many(API_PROVISION_WATCHER_ROUTE, requests)

    def update(self, requests: Sequence[UpdateProvisionWatcherRequest]) -> List[BaseResponse]:
        return self._patch_many(API_PROVISION_WATCHER_ROUTE, requests)

    def all_provision_watchers(
        self,
        labels: Optional[Sequence[str]] = None,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiProvisionWatchersResponse:
        body = self._get(API_ALL_PROVISION_WATCHER_ROUTE, {OFFSET: offset, LIMIT: limit, LABELS: labels})
        return decode_response(MultiProvisionWatchersResponse, body)

    def provision_watcher_by_name(self, name: str) -> ProvisionWatcherResponse:
        body = self._get(f"{API_PROVISION_WATCHER_BY_NAME_ROUTE}/{escape_path(name)}")
        return decode_response(ProvisionWatcherResponse, body)

    def provision_watchers_by_profile_name(
        self, name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiProvisionWatchersResponse:
        body = self._get(
            f"{API_PROVISION_WATCHER_BY_PROFILE_NAME_ROUTE}/{escape_path(name)}",
            {OFFSET: offset, LIMIT: limit},
        )
        return decode_response(MultiProvisionWatchersResponse, body)

    def provision_watchers_by_service_name(
        self, name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiProvisionWatchersResponse:
        body = self._get(
            f"{API_PROVISION_WATCHER_BY_SERVICE_NAME_ROUTE}/{escape_path(name)}",
            {OFFSET: offset, LIMIT: limit},
        )
        return decode_response(MultiProvisionWatchersResponse, body)

    def delete_provision_watcher_by_name(self, name: str) -> BaseResponse:
        return self._delete(f"{API_PROVISION_WATCHER_BY_NAME_ROUTE}/{escape_path(name)}")
