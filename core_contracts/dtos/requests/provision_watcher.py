"""Request envelopes for adding and updating provision watchers."""
from __future__ import annotations

from typing import Iterable, List

from core_contracts.dtos.common import BaseRequest
from core_contracts.dtos.provision_watcher import ProvisionWatcher, UpdateProvisionWatcher
from core_contracts.models.metadata import ProvisionWatcher as ProvisionWatcherModel

__all__ = [
    "AddProvisionWatcherRequest",
    "UpdateProvisionWatcherRequest",
    "to_provision_watcher_models",
]


class AddProvisionWatcherRequest(BaseRequest):
    provision_watcher: ProvisionWatcher


class UpdateProvisionWatcherRequest(BaseRequest):
    provision_watcher: UpdateProvisionWatcher

    def apply_to(self, watcher: ProvisionWatcherModel) -> ProvisionWatcherModel:
        return self.provision_watcher.apply_to(watcher)


def to_provision_watcher_models(
    requests: Iterable[AddProvisionWatcherRequest],
) -> List[ProvisionWatcherModel]:
    return [req.provision_watcher.to_model() for req in requests]
