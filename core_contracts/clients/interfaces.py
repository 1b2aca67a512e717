"""Client interfaces, one per sibling-service resource.

The HTTP implementations live in :mod:`core_contracts.clients.http`; code
that only needs to *talk to* a service should depend on these interfaces so
it can be handed a fake in tests.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from core_contracts.constants import DEFAULT_LIMIT, DEFAULT_OFFSET
from core_contracts.dtos.common import (
    BaseResponse,
    BaseWithIdResponse,
    ConfigResponse,
    CountResponse,
    MetricsResponse,
    PingResponse,
    SecretRequest,
    VersionResponse,
)
from core_contracts.dtos.requests.device_profile import DeviceProfileRequest
from core_contracts.dtos.requests.device_service import (
    AddDeviceServiceRequest,
    UpdateDeviceServiceRequest,
)
from core_contracts.dtos.requests.event import AddEventRequest
from core_contracts.dtos.requests.provision_watcher import (
    AddProvisionWatcherRequest,
    UpdateProvisionWatcherRequest,
)
from core_contracts.dtos.requests.subscription import (
    AddSubscriptionRequest,
    UpdateSubscriptionRequest,
)
from core_contracts.dtos.responses.device_profile import (
    DeviceProfileResponse,
    MultiDeviceProfilesResponse,
)
from core_contracts.dtos.responses.device_service import (
    DeviceServiceResponse,
    MultiDeviceServicesResponse,
)
from core_contracts.dtos.responses.event import MultiEventsResponse
from core_contracts.dtos.responses.provision_watcher import (
    MultiProvisionWatchersResponse,
    ProvisionWatcherResponse,
)
from core_contracts.dtos.responses.reading import MultiReadingsResponse
from core_contracts.dtos.responses.subscription import (
    MultiSubscriptionsResponse,
    SubscriptionResponse,
)

__all__ = [
    "CommonClient",
    "EventClient",
    "ReadingClient",
    "DeviceServiceClient",
    "DeviceProfileClient",
    "ProvisionWatcherClient",
    "SubscriptionClient",
]


class CommonClient(ABC):
    """Endpoints every service exposes."""

    @abstractmethod
    def configuration(self) -> ConfigResponse:
        """Current configuration of the service."""

    @abstractmethod
    def metrics(self) -> MetricsResponse:
        """Memory and CPU usage of the service."""

    @abstractmethod
    def ping(self) -> PingResponse:
        """Liveness check; the response carries the server time."""

    @abstractmethod
    def version(self) -> VersionResponse:
        """Version of the running service."""

    @abstractmethod
    def add_secret(self, request: SecretRequest) -> BaseResponse:
        """Store a secret in the service's secret store."""


class EventClient(ABC):
    """core-data events."""

    @abstractmethod
    def add(self, request: AddEventRequest) -> BaseWithIdResponse:
        """Publish an event (JSON or CBOR, depending on its readings)."""

    @abstractmethod
    def all_events(self, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT) -> MultiEventsResponse:
        """Events sorted by creation time, newest first."""

    @abstractmethod
    def event_count(self) -> CountResponse:
        """Number of stored events."""

    @abstractmethod
    def event_count_by_device_name(self, name: str) -> CountResponse:
        """Number of stored events of one device."""

    @abstractmethod
    def events_by_device_name(
        self, name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiEventsResponse:
        """Events of one device."""

    @abstractmethod
    def delete_by_device_name(self, name: str) -> BaseResponse:
        """Delete every event (and its readings) of one device."""

    @abstractmethod
    def events_by_time_range(
        self, start: int, end: int, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiEventsResponse:
        """Events whose origin lies within ``[start, end]`` (epoch nanoseconds)."""

    @abstractmethod
    def delete_by_age(self, age: int) -> BaseResponse:
        """Delete events older than *age* nanoseconds."""


class ReadingClient(ABC):
    """core-data readings."""

    @abstractmethod
    def all_readings(self, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT) -> MultiReadingsResponse:
        """Readings sorted by creation time, newest first."""

    @abstractmethod
    def reading_count(self) -> CountResponse:
        """Number of stored readings."""

    @abstractmethod
    def reading_count_by_device_name(self, name: str) -> CountResponse:
        """Number of stored readings of one device."""

    @abstractmethod
    def readings_by_device_name(
        self, name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiReadingsResponse:
        """Readings of one device."""

    @abstractmethod
    def readings_by_resource_name(
        self, resource_name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiReadingsResponse:
        """Readings of one device resource across devices."""

    @abstractmethod
    def readings_by_time_range(
        self, start: int, end: int, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiReadingsResponse:
        """Readings whose origin lies within ``[start, end]``."""

    @abstractmethod
    def readings_by_device_name_and_resource_name(
        self,
        device_name: str,
        resource_name: str,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiReadingsResponse:
        """Readings of one resource of one device."""

    @abstractmethod
    def readings_by_device_name_and_resource_name_and_time_range(
        self,
        device_name: str,
        resource_name: str,
        start: int,
        end: int,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiReadingsResponse:
        """Readings of one resource of one device within ``[start, end]``."""


class DeviceServiceClient(ABC):
    """core-metadata device services."""

    @abstractmethod
    def add(self, requests: Sequence[AddDeviceServiceRequest]) -> List[BaseWithIdResponse]:
        """Add device services; one response per request."""

    @abstractmethod
    def update(self, requests: Sequence[UpdateDeviceServiceRequest]) -> List[BaseResponse]:
        """Patch device services; one response per request."""

    @abstractmethod
    def all_device_services(
        self,
        labels: Optional[Sequence[str]] = None,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiDeviceServicesResponse:
        """Device services, optionally only those carrying every one of *labels*."""

    @abstractmethod
    def device_service_by_name(self, name: str) -> DeviceServiceResponse:
        """One device service."""

    @abstractmethod
    def delete_by_name(self, name: str) -> BaseResponse:
        """Delete one device service."""


class DeviceProfileClient(ABC):
    """core-metadata device profiles."""

    @abstractmethod
    def add(self, requests: Sequence[DeviceProfileRequest]) -> List[BaseWithIdResponse]:
        """Add device profiles; one response per request."""

    @abstractmethod
    def update(self, requests: Sequence[DeviceProfileRequest]) -> List[BaseResponse]:
        """Replace device profiles; one response per request."""

    @abstractmethod
    def add_by_yaml(self, file_path: str) -> BaseWithIdResponse:
        """Upload a YAML profile definition."""

    @abstractmethod
    def update_by_yaml(self, file_path: str) -> BaseResponse:
        """Replace a profile with an uploaded YAML definition."""

    @abstractmethod
    def device_profile_by_name(self, name: str) -> DeviceProfileResponse:
        """One device profile."""

    @abstractmethod
    def all_device_profiles(
        self,
        labels: Optional[Sequence[str]] = None,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiDeviceProfilesResponse:
        """Device profiles, optionally filtered by *labels*."""

    @abstractmethod
    def delete_by_name(self, name: str) -> BaseResponse:
        """Delete one device profile."""


class ProvisionWatcherClient(ABC):
    """core-metadata provision watchers."""

    @abstractmethod
    def add(self, requests: Sequence[AddProvisionWatcherRequest]) -> List[BaseWithIdResponse]:
        """Add provision watchers; one response per request."""

    @abstractmethod
    def update(self, requests: Sequence[UpdateProvisionWatcherRequest]) -> List[BaseResponse]:
        """Patch provision watchers; one response per request."""

    @abstractmethod
    def all_provision_watchers(
        self,
        labels: Optional[Sequence[str]] = None,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> MultiProvisionWatchersResponse:
        """Provision watchers, optionally filtered by *labels*."""

    @abstractmethod
    def provision_watcher_by_name(self, name: str) -> ProvisionWatcherResponse:
        """One provision watcher."""

    @abstractmethod
    def provision_watchers_by_profile_name(
        self, name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiProvisionWatchersResponse:
        """Provision watchers bound to one device profile."""

    @abstractmethod
    def provision_watchers_by_service_name(
        self, name: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiProvisionWatchersResponse:
        """Provision watchers bound to one device service."""

    @abstractmethod
    def delete_provision_watcher_by_name(self, name: str) -> BaseResponse:
        """Delete one provision watcher."""


class SubscriptionClient(ABC):
    """support-notifications subscriptions."""

    @abstractmethod
    def add(self, requests: Sequence[AddSubscriptionRequest]) -> List[BaseWithIdResponse]:
        """Add subscriptions; one response per request."""

    @abstractmethod
    def update(self, requests: Sequence[UpdateSubscriptionRequest]) -> List[BaseResponse]:
        """Patch subscriptions; one response per request."""

    @abstractmethod
    def all_subscriptions(self, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT) -> MultiSubscriptionsResponse:
        """Every subscription."""

    @abstractmethod
    def subscriptions_by_category(
        self, category: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiSubscriptionsResponse:
        """Subscriptions listening to one category."""

    @abstractmethod
    def subscriptions_by_label(
        self, label: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiSubscriptionsResponse:
        """Subscriptions listening to one label."""

    @abstractmethod
    def subscriptions_by_receiver(
        self, receiver: str, offset: int = DEFAULT_OFFSET, limit: int = DEFAULT_LIMIT
    ) -> MultiSubscriptionsResponse:
        """Subscriptions of one receiver."""

    @abstractmethod
    def subscription_by_name(self, name: str) -> SubscriptionResponse:
        """One subscription."""

    @abstractmethod
    def delete_subscription_by_name(self, name: str) -> BaseResponse:
        """Delete one subscription."""
