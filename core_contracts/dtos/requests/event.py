"""Request envelope for publishing an event to core-data."""
from __future__ import annotations

from typing import Tuple

import cbor2

from core_contracts.config import get_settings
from core_contracts.constants import CONTENT_TYPE_CBOR, CONTENT_TYPE_JSON, VALUE_TYPE_BINARY
from core_contracts.dtos.common import BaseRequest
from core_contracts.dtos.event import Event
from core_contracts.errors import ContractsError, ErrKind
from core_contracts.models.event import Event as EventModel

__all__ = ["AddEventRequest"]


class AddEventRequest(BaseRequest):
    event: Event

    def content_type(self) -> str:
        """CBOR when the event carries binary data (or CBOR is forced), else JSON."""
        if get_settings().encode_all_events:
            return CONTENT_TYPE_CBOR
        if any(r.value_type == VALUE_TYPE_BINARY for r in self.event.readings):
            return CONTENT_TYPE_CBOR
        return CONTENT_TYPE_JSON

    def encode(self) -> Tuple[bytes, str]:
        """Serialize the request in the encoding picked by :meth:`content_type`."""
        content_type = self.content_type()
        try:
            if content_type == CONTENT_TYPE_CBOR:
                return self.to_cbor(), content_type
            return self.to_json(), content_type
        except (cbor2.CBOREncodeError, ValueError, TypeError) as exc:
            encoding = "CBOR" if content_type == CONTENT_TYPE_CBOR else "JSON"
            raise ContractsError(
                ErrKind.CONTRACT_INVALID, f"failed to encode AddEventRequest to {encoding}"
            ) from exc

    def to_model(self) -> EventModel:
        return self.event.to_model()
