"""core-data event client."""
from __future__ import annotations

import logging

from core_contracts.clients import interfaces
from core_contracts.clients.http.base import BaseClient
from core_contracts.clients.http.utils import decode_response, escape_path
from core_contracts.constants import (
    API_ALL_EVENT_ROUTE,
    API_EVENT_BY_AGE_ROUTE,
    API_EVENT_BY_DEVICE_NAME_ROUTE,
    API_EVENT_COUNT_BY_DEVICE_NAME_ROUTE,
    API_EVENT_COUNT_ROUTE,
    API_EVENT_ROUTE,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    END,
    LIMIT,
    OFFSET,
    START,
)
from core_contracts.dtos.common import BaseResponse, BaseWithIdResponse, CountResponse
from core_contracts.dtos.requests.event import AddEventRequest
from core_contracts.dtos.responses.event import MultiEventsResponse

__all__ = ["EventClient"]

logger = logging.getLogger(__name__)


class EventClient(BaseClient, interfaces.EventClient):
    def add(self, request: AddEventRequest) -> BaseWithIdResponse:
        event = request.event
        path = "/".join(
            (
                API_EVENT_ROUTE,
                escape_path(event.profile_name),
                escape_path(event.device_name),
                escape_path(event.source_name),
            )
        )
        body, content_type = request.encode()
        logger.debug("Publishing event %s (%s, %d bytes)", event.id, content_type, len(body))
        return decode_response(BaseWithIdResponse, self._post_raw(path, body, content_type))

    def all_events(self, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT) -> MultiEventsResponse:
        body = self._get(API_ALL_EVENT_ROUTE, {OFFSET: offset, LIMIT: limit})
        return decode_response(MultiEventsResponse, body)

    def event_count(self) -> CountResponse:
        return decode_response(CountResponse, self._get(API_EVENT_COUNT_ROUTE))

    def event_count_by_device_name(self, name: str) -> CountResponse:
        body = self._get(f"{API_EVENT_COUNT_BY_DEVICE_NAME_ROUTE}/{escape_path(name)}")
        return decode_response(CountResponse, body)

    def events_by_device_name(
        self, name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiEventsResponse:
        body = self._get(
            f"{API_EVENT_BY_DEVICE_NAME_ROUTE}/{escape_path(name)}", {OFFSET: offset, LIMIT: limit}
        )
        return decode_response(MultiEventsResponse, body)

    def delete_by_device_name(self, name: str) -> BaseResponse:
        return self._delete(f"{API_EVENT_BY_DEVICE_NAME_ROUTE}/{escape_path(name)}")

    def events_by_time_range(
        self, start: int, end: int, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiEventsResponse:
        path = f"{API_EVENT_ROUTE}/{START}/{start}/{END}/{end}"
        return decode_response(MultiEventsResponse, self._get(path, {OFFSET: offset, LIMIT: limit}))

    def delete_by_age(self, age: int) -> BaseResponse:
        return self._delete(f"{API_EVENT_BY_AGE_ROUTE}/{age}")
