"""Provision watcher DTOs.

Note the asymmetric wire names: the add/read DTO carries the profile and
service names under ``profile`` and ``service``, the update DTO under
``profileName`` and ``serviceName``.
"""
from __future__ import annotations

from typing import Annotated, Dict, List, Optional

from pydantic import AfterValidator, Field

from core_contracts.dtos.base import ContractModel
from core_contracts.dtos.common import UpdateByIdOrName, Versionable
from core_contracts.models.common import AdminState, AutoEvent as AutoEventModel
from core_contracts.models.metadata import ProvisionWatcher as ProvisionWatcherModel
from core_contracts.validation import DurationStr, Name, NonEmptyStr, OptionalUUIDStr

__all__ = ["AutoEvent", "ProvisionWatcher", "UpdateProvisionWatcher"]


def _check_identifiers(identifiers: Dict[str, str]) -> Dict[str, str]:
    if not identifiers:
        raise ValueError("identifiers must have at least one entry")
    for key, value in identifiers.items():
        if not key or not value:
            raise ValueError("identifier keys and values must not be empty")
    return identifiers


Identifiers = Annotated[Dict[str, str], AfterValidator(_check_identifiers)]


class AutoEvent(ContractModel):
    interval: DurationStr
    on_change: bool = False
    source_name: NonEmptyStr

    def to_model(self) -> AutoEventModel:
        return AutoEventModel(
            interval=self.interval, on_change=self.on_change, source_name=self.source_name
        )

    @classmethod
    def from_model(cls, auto_event: AutoEventModel) -> "AutoEvent":
        return cls(
            interval=auto_event.interval,
            on_change=auto_event.on_change,
            source_name=auto_event.source_name,
        )


class ProvisionWatcher(Versionable):
    id: OptionalUUIDStr = ""
    name: Name
    labels: Optional[List[str]] = None
    identifiers: Identifiers
    blocking_identifiers: Optional[Dict[str, List[str]]] = None
    profile_name: Name = Field(..., alias="profile")
    service_name: Name = Field(..., alias="service")
    admin_state: AdminState
    auto_events: Optional[List[AutoEvent]] = None

    def to_model(self) -> ProvisionWatcherModel:
        return ProvisionWatcherModel(
            id=self.id,
            name=self.name,
            labels=list(self.labels) if self.labels is not None else None,
            identifiers=dict(self.identifiers),
            blocking_identifiers=dict(self.blocking_identifiers) if self.blocking_identifiers else None,
            profile_name=self.profile_name,
            service_name=self.service_name,
            admin_state=AdminState(self.admin_state),
            auto_events=[a.to_model() for a in self.auto_events or []],
        )

    @classmethod
    def from_model(cls, watcher: ProvisionWatcherModel) -> "ProvisionWatcher":
        return cls(
            id=watcher.id,
            name=watcher.name,
            labels=watcher.labels,
            identifiers=watcher.identifiers,
            blocking_identifiers=watcher.blocking_identifiers,
            profile_name=watcher.profile_name,
            service_name=watcher.service_name,
            admin_state=watcher.admin_state,
            auto_events=[AutoEvent.from_model(a) for a in watcher.auto_events] or None,
        )


class UpdateProvisionWatcher(UpdateByIdOrName):
    labels: Optional[List[str]] = None
    identifiers: Optional[Identifiers] = None
    blocking_identifiers: Optional[Dict[str, List[str]]] = None
    profile_name: Optional[Name] = None
    service_name: Optional[Name] = None
    admin_state: Optional[AdminState] = None
    auto_events: Optional[List[AutoEvent]] = None

    def apply_to(self, watcher: ProvisionWatcherModel) -> ProvisionWatcherModel:
        """Overwrite the fields of *watcher* that this patch carries."""
        if self.name is not None:
            watcher.name = self.name
        if self.labels is not None:
            watcher.labels = list(self.labels)
        if self.identifiers is not None:
            watcher.identifiers = dict(self.identifiers)
        if self.blocking_identifiers is not None:
            watcher.blocking_identifiers = dict(self.blocking_identifiers)
        if self.profile_name is not None:
            watcher.profile_name = self.profile_name
        if self.service_name is not None:
            watcher.service_name = self.service_name
        if self.admin_state is not None:
            watcher.admin_state = AdminState(self.admin_state)
        if self.auto_events is not None:
            watcher.auto_events = [a.to_model() for a in self.auto_events]
        return watcher

    @classmethod
    def from_model(cls, watcher: ProvisionWatcherModel) -> "UpdateProvisionWatcher":
        """Full patch carrying every field of *watcher*."""
        return cls(
            id=watcher.id or None,
            name=watcher.name,
            labels=list(watcher.labels or []),
            identifiers=watcher.identifiers or None,
            blocking_identifiers=dict(watcher.blocking_identifiers or {}),
            profile_name=watcher.profile_name,
            service_name=watcher.service_name,
            admin_state=watcher.admin_state,
            auto_events=[AutoEvent.from_model(a) for a in watcher.auto_events],
        )
