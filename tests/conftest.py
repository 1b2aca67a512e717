# tests/conftest.py
import pytest

from core_contracts.config import get_settings
from core_contracts.sentry import init_sentry

from sample_data import (
    EXAMPLE_UUID,
    TEST_DEVICE_NAME,
    TEST_ORIGIN,
    TEST_PROFILE_NAME,
    TEST_RESOURCE_NAME,
    TEST_SOURCE_NAME,
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Every test sees the environment it set up, not a cached Settings."""
    get_settings.cache_clear()
    init_sentry.cache_clear()
    yield
    get_settings.cache_clear()
    init_sentry.cache_clear()


@pytest.fixture
def simple_reading_payload() -> dict:
    return {
        "apiVersion": "v2",
        "id": EXAMPLE_UUID,
        "origin": TEST_ORIGIN,
        "deviceName": TEST_DEVICE_NAME,
        "resourceName": TEST_RESOURCE_NAME,
        "profileName": TEST_PROFILE_NAME,
        "valueType": "Int8",
        "value": "-42",
    }


@pytest.fixture
def event_payload(simple_reading_payload) -> dict:
    return {
        "apiVersion": "v2",
        "id": EXAMPLE_UUID,
        "deviceName": TEST_DEVICE_NAME,
        "profileName": TEST_PROFILE_NAME,
        "sourceName": TEST_SOURCE_NAME,
        "origin": TEST_ORIGIN,
        "readings": [simple_reading_payload],
        "tags": {"GatewayID": "Houston-0001"},
    }
