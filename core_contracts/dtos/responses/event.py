"""Event response envelopes."""
from __future__ import annotations

from typing import List

from pydantic import Field

from core_contracts.dtos.common import BaseResponse
from core_contracts.dtos.event import Event

__all__ = ["EventResponse", "MultiEventsResponse"]


class EventResponse(BaseResponse):
    event: Event


class MultiEventsResponse(BaseResponse):
    events: List[Event] = Field(default_factory=list)
