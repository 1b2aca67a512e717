# tests/test_device_profile_dtos.py
import json

import pytest
from pydantic import ValidationError

from core_contracts.dtos.device_profile import DeviceProfile
from core_contracts.dtos.requests.device_profile import DeviceProfileRequest, to_device_profile_models
from core_contracts.errors import ContractsError, ErrKind
from core_contracts.models.metadata import DeviceProfile as DeviceProfileModel

from sample_data import TEST_PROFILE_NAME, TEST_RESOURCE_NAME


@pytest.fixture
def profile_payload() -> dict:
    return {
        "apiVersion": "v2",
        "name": TEST_PROFILE_NAME,
        "manufacturer": "IOTech",
        "model": "Virtual",
        "labels": ["virtual"],
        "deviceResources": [
            {
                "name": TEST_RESOURCE_NAME,
                "description": "random Int8 value",
                "properties": {"valueType": "int8", "readWrite": "RW", "minimum": "-100"},
                "attributes": {"register": 1},
            },
            {
                "name": "EnableRandomization_Int8",
                "isHidden": True,
                "properties": {"valueType": "Bool", "readWrite": "W", "defaultValue": "true"},
            },
        ],
        "deviceCommands": [
            {
                "name": "Int8",
                "readWrite": "RW",
                "resourceOperations": [
                    {"deviceResource": TEST_RESOURCE_NAME},
                    {"deviceResource": "EnableRandomization_Int8", "mappings": {"on": "true"}},
                ],
            }
        ],
    }


def test_valid_profile(profile_payload):
    profile = DeviceProfile.model_validate(profile_payload)

    assert profile.device_resources[0].properties.value_type == "Int8"
    assert profile.device_commands[0].resource_operations[1].mappings == {"on": "true"}


def _mutations():
    def no_resources(p):
        p["deviceResources"] = []

    def duplicated_resource(p):
        p["deviceResources"][1]["name"] = TEST_RESOURCE_NAME

    def duplicated_command(p):
        p["deviceCommands"].append(dict(p["deviceCommands"][0]))

    def undefined_resource(p):
        p["deviceCommands"][0]["resourceOperations"][0]["deviceResource"] = "Missing"

    def command_without_operations(p):
        p["deviceCommands"][0]["resourceOperations"] = []

    def bad_read_write(p):
        p["deviceResources"][0]["properties"]["readWrite"] = "X"

    def bad_value_type(p):
        p["deviceResources"][0]["properties"]["valueType"] = "Int128"

    def reserved_char_in_name(p):
        p["name"] = "profile/1"

    return [
        no_resources,
        duplicated_resource,
        duplicated_command,
        undefined_resource,
        command_without_operations,
        bad_read_write,
        bad_value_type,
        reserved_char_in_name,
    ]


@pytest.mark.parametrize("mutate", _mutations(), ids=lambda f: f.__name__)
def test_invalid_profile(profile_payload, mutate):
    mutate(profile_payload)
    with pytest.raises(ValidationError):
        DeviceProfile.model_validate(profile_payload)


def test_request_from_json(profile_payload):
    body = json.dumps({"apiVersion": "v2", "profile": profile_payload})

    req = DeviceProfileRequest.from_json(body)

    models = to_device_profile_models([req])
    assert isinstance(models[0], DeviceProfileModel)
    assert models[0].device_resources[0].attributes == {"register": 1}
    assert models[0].device_commands[0].resource_operations[0].mappings == {}


def test_request_from_json_invalid(profile_payload):
    profile_payload["deviceResources"] = []
    with pytest.raises(ContractsError) as exc_info:
        DeviceProfileRequest.from_json(json.dumps({"profile": profile_payload}))
    assert exc_info.value.kind is ErrKind.CONTRACT_INVALID


def test_model_round_trip(profile_payload):
    model = DeviceProfile.model_validate(profile_payload).to_model()

    dto = DeviceProfile.from_model(model)

    assert dto.to_model() == model
    assert dto.device_resources[1].is_hidden is True
