# tests/test_provision_watcher_dtos.py
import json

import pytest
from pydantic import ValidationError

from core_contracts.dtos.provision_watcher import AutoEvent, ProvisionWatcher, UpdateProvisionWatcher
from core_contracts.dtos.requests.provision_watcher import (
    AddProvisionWatcherRequest,
    UpdateProvisionWatcherRequest,
    to_provision_watcher_models,
)
from core_contracts.errors import ContractsError, ErrKind
from core_contracts.models.common import AdminState, AutoEvent as AutoEventModel
from core_contracts.models.metadata import ProvisionWatcher as ProvisionWatcherModel

from sample_data import EXAMPLE_UUID, TEST_PROFILE_NAME, TEST_SERVICE_NAME

TEST_WATCHER_NAME = "Modbus-Watcher"


@pytest.fixture
def watcher_payload() -> dict:
    return {
        "apiVersion": "v2",
        "name": TEST_WATCHER_NAME,
        "labels": ["modbus"],
        "identifiers": {"address": "localhost", "port": "3[0-9]{2}"},
        "blockingIdentifiers": {"port": ["397", "398"]},
        "profile": TEST_PROFILE_NAME,
        "service": TEST_SERVICE_NAME,
        "adminState": "UNLOCKED",
        "autoEvents": [{"interval": "300ms", "onChange": True, "sourceName": "TestResource"}],
    }


class TestProvisionWatcher:
    def test_wire_names_for_profile_and_service(self, watcher_payload):
        watcher = ProvisionWatcher.model_validate(watcher_payload)

        assert watcher.profile_name == TEST_PROFILE_NAME
        assert watcher.service_name == TEST_SERVICE_NAME
        dumped = watcher.to_dict()
        assert dumped["profile"] == TEST_PROFILE_NAME
        assert "profileName" not in dumped

    @pytest.mark.parametrize(
        "field, value",
        [
            ("identifiers", {}),
            ("identifiers", {"": "x"}),
            ("identifiers", {"address": ""}),
            ("profile", ""),
            ("service", "service?"),
            ("adminState", "invalid"),
            ("autoEvents", [{"interval": "300", "sourceName": "TestResource"}]),
            ("autoEvents", [{"interval": "300ms", "sourceName": ""}]),
        ],
    )
    def test_invalid(self, watcher_payload, field, value):
        watcher_payload[field] = value
        with pytest.raises(ValidationError):
            ProvisionWatcher.model_validate(watcher_payload)

    def test_add_request_to_models(self, watcher_payload):
        body = json.dumps({"apiVersion": "v2", "provisionWatcher": watcher_payload})

        models = to_provision_watcher_models([AddProvisionWatcherRequest.from_json(body)])

        assert models[0].identifiers == {"address": "localhost", "port": "3[0-9]{2}"}
        assert models[0].admin_state is AdminState.UNLOCKED
        assert models[0].auto_events == [AutoEventModel(interval="300ms", on_change=True, source_name="TestResource")]

    def test_oversized_interval_is_contract_invalid(self, watcher_payload):
        watcher_payload["autoEvents"][0]["interval"] = "9999999999999h"
        body = json.dumps({"apiVersion": "v2", "provisionWatcher": watcher_payload})

        with pytest.raises(ContractsError) as exc_info:
            AddProvisionWatcherRequest.from_json(body)

        assert exc_info.value.kind is ErrKind.CONTRACT_INVALID

    def test_model_round_trip(self, watcher_payload):
        model = ProvisionWatcher.model_validate(watcher_payload).to_model()
        assert ProvisionWatcher.from_model(model).to_model() == model


class TestUpdateProvisionWatcher:
    def test_update_wire_names(self):
        body = json.dumps(
            {
                "apiVersion": "v2",
                "provisionWatcher": {"name": TEST_WATCHER_NAME, "profileName": "new-profile"},
            }
        )

        patch = UpdateProvisionWatcherRequest.from_json(body).provision_watcher

        assert patch.profile_name == "new-profile"
        assert patch.service_name is None

    @pytest.mark.parametrize(
        "fields",
        [
            {"labels": ["x"]},
            {"name": TEST_WATCHER_NAME, "identifiers": {}},
            {"name": TEST_WATCHER_NAME, "profileName": ""},
            {"name": TEST_WATCHER_NAME, "serviceName": " "},
            {"id": EXAMPLE_UUID, "adminState": "invalid"},
        ],
    )
    def test_invalid(self, fields):
        body = json.dumps({"apiVersion": "v2", "provisionWatcher": fields})
        with pytest.raises(ContractsError):
            UpdateProvisionWatcherRequest.from_json(body)

    def test_apply_to(self):
        model = ProvisionWatcherModel(
            name=TEST_WATCHER_NAME,
            labels=["modbus"],
            identifiers={"address": "localhost"},
            profile_name=TEST_PROFILE_NAME,
            service_name=TEST_SERVICE_NAME,
            auto_events=[AutoEventModel(interval="1s", source_name="TestResource")],
        )
        patch = UpdateProvisionWatcher(
            name=TEST_WATCHER_NAME,
            identifiers={"address": "10.0.0.1"},
            auto_events=[],
            admin_state="LOCKED",
        )

        patch.apply_to(model)

        assert model.identifiers == {"address": "10.0.0.1"}
        assert model.auto_events == []
        assert model.admin_state is AdminState.LOCKED
        assert model.labels == ["modbus"]
        assert model.profile_name == TEST_PROFILE_NAME


def test_auto_event_dto():
    auto_event = AutoEvent(interval="1m30s", source_name="TestResource")

    assert auto_event.to_dict() == {"interval": "1m30s", "onChange": False, "sourceName": "TestResource"}
    assert AutoEvent.from_model(auto_event.to_model()) == auto_event
