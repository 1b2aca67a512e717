# tests/test_state_requests.py
import pytest

from core_contracts.dtos.requests.states import UpdateAdminStateRequest, UpdateOperatingStateRequest
from core_contracts.errors import ContractsError, ErrKind


@pytest.mark.parametrize(
    "body, expect_error",
    [
        (b'{"operatingState": "ENABLED"}', False),
        (b'{"operatingState": "DISABLED"}', False),
        (b'{"operatingState": ""}', True),
        (b'{"operatingState": "QWERTY"}', True),
        (b"{}", True),
    ],
)
def test_update_operating_state(body, expect_error):
    if expect_error:
        with pytest.raises(ContractsError) as exc_info:
            UpdateOperatingStateRequest.from_json(body)
        assert exc_info.value.kind is ErrKind.CONTRACT_INVALID
    else:
        assert UpdateOperatingStateRequest.from_json(body).operating_state in ("ENABLED", "DISABLED")


@pytest.mark.parametrize(
    "body, expect_error",
    [
        (b'{"adminState": "LOCKED"}', False),
        (b'{"adminState": "UNLOCKED"}', False),
        (b'{"adminState": "locked"}', True),
        (b'{"adminState": ""}', True),
    ],
)
def test_update_admin_state(body, expect_error):
    if expect_error:
        with pytest.raises(ContractsError):
            UpdateAdminStateRequest.from_json(body)
    else:
        UpdateAdminStateRequest.from_json(body)
