"""Reading response envelopes."""
from __future__ import annotations

from typing import List

from pydantic import Field

from core_contracts.dtos.common import BaseResponse
from core_contracts.dtos.event import BaseReading

__all__ = ["ReadingResponse", "MultiReadingsResponse"]


class ReadingResponse(BaseResponse):
    reading: BaseReading


class MultiReadingsResponse(BaseResponse):
    readings: List[BaseReading] = Field(default_factory=list)
