"""Provision watcher response envelopes."""
from __future__ import annotations

from typing import List

from pydantic import Field

from core_contracts.dtos.common import BaseResponse
from core_contracts.dtos.provision_watcher import ProvisionWatcher

__all__ = ["ProvisionWatcherResponse", "MultiProvisionWatchersResponse"]


class ProvisionWatcherResponse(BaseResponse):
    provision_watcher: ProvisionWatcher


class MultiProvisionWatchersResponse(BaseResponse):
    provision_watchers: List[ProvisionWatcher] = Field(default_factory=list)
