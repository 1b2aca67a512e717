# tests/test_common_dtos.py
import json

import pytest
from pydantic import ValidationError

from core_contracts.dtos.common import (
    BaseRequest,
    BaseResponse,
    Metrics,
    MetricsResponse,
    SecretDataKeyValue,
    SecretRequest,
    VersionSdkResponse,
)
from core_contracts.errors import ContractsError, ErrKind

from sample_data import EXAMPLE_UUID


def test_base_request_create_stamps_a_request_id():
    first = BaseRequest.create()
    second = BaseRequest.create()

    assert first.request_id and first.request_id != second.request_id
    assert first.api_version == "v2"


def test_base_request_rejects_a_malformed_request_id():
    with pytest.raises(ValidationError):
        BaseRequest(request_id="jfdw324")


def test_base_response_wire_names():
    resp = BaseResponse(request_id=EXAMPLE_UUID, message="ok", status_code=200)

    assert resp.to_dict() == {
        "apiVersion": "v2",
        "requestId": EXAMPLE_UUID,
        "message": "ok",
        "statusCode": 200,
    }


def test_version_sdk_response_from_json():
    resp = VersionSdkResponse.from_json(b'{"apiVersion":"v2","version":"2.0.0","sdkVersion":"2.1.0"}')

    assert resp.version == "2.0.0"
    assert resp.sdk_version == "2.1.0"


class TestMetrics:
    def test_bounds(self):
        Metrics(mem_alloc=2**64 - 1, cpu_busy_avg=255)
        with pytest.raises(ValidationError):
            Metrics(mem_alloc=-1)
        with pytest.raises(ValidationError):
            Metrics(mem_alloc=2**64)
        with pytest.raises(ValidationError):
            Metrics(cpu_busy_avg=256)

    def test_metrics_response_round_trip(self):
        resp = MetricsResponse(metrics=Metrics(mem_alloc=1024, cpu_busy_avg=12))

        decoded = MetricsResponse.from_json(resp.to_json())
        assert decoded.metrics.mem_alloc == 1024
        assert json.loads(resp.to_json())["metrics"]["cpuBusyAvg"] == 12


class TestSecretRequest:
    def test_valid(self):
        req = SecretRequest.create(
            path="mqtt", secret_data=[SecretDataKeyValue(key="username", value="edgex")]
        )
        assert json.loads(req.to_json())["secretData"] == [{"key": "username", "value": "edgex"}]

    def test_path_is_optional(self):
        req = SecretRequest(secret_data=[SecretDataKeyValue(key="password", value="s3cr3t")])
        assert "path" not in req.to_dict()

    @pytest.mark.parametrize(
        "payload",
        [
            {"apiVersion": "v2", "path": "mqtt", "secretData": []},
            {"apiVersion": "v2", "path": "mqtt", "secretData": [{"key": " ", "value": "v"}]},
            {"apiVersion": "v2", "path": "mqtt", "secretData": [{"key": "k", "value": ""}]},
        ],
    )
    def test_invalid(self, payload):
        with pytest.raises(ContractsError) as exc_info:
            SecretRequest.from_json(json.dumps(payload))
        assert exc_info.value.kind is ErrKind.CONTRACT_INVALID


@pytest.mark.parametrize("data", [b"", b"Invalid request", b"[]"])
def test_from_json_rejects_malformed_input(data):
    with pytest.raises(ContractsError) as exc_info:
        SecretRequest.from_json(data)
    assert exc_info.value.kind is ErrKind.CONTRACT_INVALID


def test_from_cbor_rejects_malformed_input():
    with pytest.raises(ContractsError) as exc_info:
        SecretRequest.from_cbor(b"\xa1")
    assert exc_info.value.kind is ErrKind.CONTRACT_INVALID
