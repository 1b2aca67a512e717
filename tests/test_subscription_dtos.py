# tests/test_subscription_dtos.py
import json

import pytest
from pydantic import ValidationError

from core_contracts.dtos.requests.subscription import (
    AddSubscriptionRequest,
    UpdateSubscriptionRequest,
    to_subscription_models,
)
from core_contracts.dtos.subscription import Address, Subscription, UpdateSubscription
from core_contracts.errors import ContractsError, ErrKind
from core_contracts.models.common import AdminState
from core_contracts.models.notification import (
    Address as AddressModel,
    EmailAddress,
    MQTTPubAddress,
    RESTAddress,
    Subscription as SubscriptionModel,
)

TEST_SUBSCRIPTION_NAME = "subscriptionName"

REST_CHANNEL = {"type": "REST", "host": "localhost", "port": 48089, "httpMethod": "POST", "path": "/notify"}
EMAIL_CHANNEL = {"type": "EMAIL", "recipients": ["ops@acme-iot.io"]}
MQTT_CHANNEL = {"type": "MQTT", "host": "broker", "port": 1883, "publisher": "edgex", "topic": "alerts"}


@pytest.fixture
def subscription_payload() -> dict:
    return {
        "apiVersion": "v2",
        "name": TEST_SUBSCRIPTION_NAME,
        "channels": [dict(REST_CHANNEL), dict(EMAIL_CHANNEL)],
        "receiver": "tafuser",
        "categories": ["health-check"],
        "labels": ["rest", "email"],
        "resendLimit": 5,
        "resendInterval": "10s",
        "adminState": "UNLOCKED",
    }


def _add_request_body(subscription: dict) -> str:
    return json.dumps({"apiVersion": "v2", "subscription": subscription})


class TestAddress:
    @pytest.mark.parametrize("channel", [REST_CHANNEL, EMAIL_CHANNEL, MQTT_CHANNEL])
    def test_valid(self, channel):
        Address.model_validate(channel)

    @pytest.mark.parametrize(
        "channel",
        [
            {**REST_CHANNEL, "type": "SMS"},
            {**REST_CHANNEL, "host": ""},
            {**REST_CHANNEL, "port": 0},
            {**REST_CHANNEL, "httpMethod": None},
            {**REST_CHANNEL, "httpMethod": "FETCH"},
            {**MQTT_CHANNEL, "publisher": ""},
            {**MQTT_CHANNEL, "topic": None},
            {**EMAIL_CHANNEL, "recipients": []},
            {**EMAIL_CHANNEL, "recipients": ["not-an-email"]},
        ],
    )
    def test_invalid(self, channel):
        with pytest.raises(ValidationError):
            Address.model_validate(channel)

    @pytest.mark.parametrize(
        "channel, model_type",
        [(REST_CHANNEL, RESTAddress), (EMAIL_CHANNEL, EmailAddress), (MQTT_CHANNEL, MQTTPubAddress)],
    )
    def test_to_model_picks_the_address_type(self, channel, model_type):
        model = Address.model_validate(channel).to_model()

        assert isinstance(model, model_type)
        assert model.type == channel["type"]
        assert Address.from_model(model).to_model() == model

    def test_address_model_base_is_abstract(self):
        with pytest.raises(TypeError):
            AddressModel(host="localhost", port=48089)


class TestSubscription:
    def test_valid(self, subscription_payload):
        sub = Subscription.model_validate(subscription_payload)
        assert sub.channels[1].recipients == ["ops@acme-iot.io"]

    @pytest.mark.parametrize(
        "field, value",
        [
            ("name", "name with space"),
            ("channels", []),
            ("receiver", " "),
            ("resendInterval", "10"),
            ("adminState", "invalid"),
        ],
    )
    def test_invalid(self, subscription_payload, field, value):
        subscription_payload[field] = value
        with pytest.raises(ValidationError):
            Subscription.model_validate(subscription_payload)

    def test_categories_or_labels_required(self, subscription_payload):
        del subscription_payload["categories"]
        Subscription.model_validate(subscription_payload)

        del subscription_payload["labels"]
        with pytest.raises(ValidationError):
            Subscription.model_validate(subscription_payload)

    def test_model_round_trip(self, subscription_payload):
        model = Subscription.model_validate(subscription_payload).to_model()

        assert isinstance(model, SubscriptionModel)
        assert Subscription.from_model(model).to_model() == model


class TestAddSubscriptionRequest:
    def test_from_json(self, subscription_payload):
        req = AddSubscriptionRequest.from_json(_add_request_body(subscription_payload))

        models = to_subscription_models([req])
        assert models[0].receiver == "tafuser"
        assert models[0].resend_interval == "10s"

    def test_mqtt_channel_is_rejected(self, subscription_payload):
        subscription_payload["channels"].append(dict(MQTT_CHANNEL))

        with pytest.raises(ContractsError) as exc_info:
            AddSubscriptionRequest.from_json(_add_request_body(subscription_payload))

        assert exc_info.value.kind is ErrKind.CONTRACT_INVALID
        assert "MQTT is not valid type for Channel" in str(exc_info.value)


class TestUpdateSubscriptionRequest:
    def _body(self, fields: dict) -> str:
        return json.dumps({"apiVersion": "v2", "subscription": {"name": TEST_SUBSCRIPTION_NAME, **fields}})

    def test_valid_partial_update(self):
        req = UpdateSubscriptionRequest.from_json(self._body({"receiver": "admin"}))

        assert req.subscription.receiver == "admin"
        assert req.subscription.channels is None

    def test_categories_and_labels_cannot_both_be_cleared(self):
        with pytest.raises(ContractsError):
            UpdateSubscriptionRequest.from_json(self._body({"categories": [], "labels": []}))

        # clearing only one of them is fine
        UpdateSubscriptionRequest.from_json(self._body({"categories": []}))

    def test_mqtt_channel_is_rejected(self):
        with pytest.raises(ContractsError):
            UpdateSubscriptionRequest.from_json(self._body({"channels": [MQTT_CHANNEL]}))

    def test_id_or_name_required(self):
        body = json.dumps({"apiVersion": "v2", "subscription": {"receiver": "admin"}})
        with pytest.raises(ContractsError):
            UpdateSubscriptionRequest.from_json(body)

    def test_apply_to(self, subscription_payload):
        model = Subscription.model_validate(subscription_payload).to_model()
        patch = UpdateSubscription(
            name=TEST_SUBSCRIPTION_NAME,
            channels=[Address.model_validate(EMAIL_CHANNEL)],
            categories=[],
            resend_limit=0,
            admin_state="LOCKED",
        )

        UpdateSubscriptionRequest(subscription=patch).apply_to(model)

        assert [c.type for c in model.channels] == ["EMAIL"]
        assert model.categories == []
        assert model.labels == ["rest", "email"]
        assert model.resend_limit == 0
        assert model.resend_interval == "10s"
        assert model.admin_state is AdminState.LOCKED
