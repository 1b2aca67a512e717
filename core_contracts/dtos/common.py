"""Envelopes shared by every API payload, plus the system-endpoint DTOs.

* **Versionable** – every payload carries ``apiVersion``.
* **BaseRequest** – adds an optional ``requestId`` (UUID) echoed by the server.
* **BaseResponse** – ``requestId``, ``message`` and ``statusCode``.

The system endpoints (config, metrics, ping, version, secret) are served by
every service, hence their DTOs live here too.
"""
from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import Field, model_validator

from core_contracts.constants import API_VERSION
from core_contracts.dtos.base import ContractModel
from core_contracts.validation import Name, NonEmptyStr, OptionalUUIDStr, UUIDStr

__all__ = [
    "Versionable",
    "BaseRequest",
    "BaseResponse",
    "BaseWithIdResponse",
    "CountResponse",
    "ConfigResponse",
    "PingResponse",
    "VersionResponse",
    "VersionSdkResponse",
    "Metrics",
    "MetricsResponse",
    "MultiMetricsResponse",
    "SecretDataKeyValue",
    "SecretRequest",
    "UpdateByIdOrName",
]

_R = TypeVar("_R", bound="BaseRequest")

_UINT64_MAX = 2**64 - 1


class Versionable(ContractModel):
    api_version: str = API_VERSION


class BaseRequest(Versionable):
    request_id: OptionalUUIDStr = ""

    @classmethod
    def create(cls: Type[_R], **fields: Any) -> _R:
        """Build a request stamped with a fresh UUID request id."""
        return cls(request_id=str(uuid.uuid4()), **fields)


class BaseResponse(Versionable):
    request_id: str = ""
    message: str = ""
    status_code: int = 0


class BaseWithIdResponse(BaseResponse):
    id: str = ""


class CountResponse(BaseResponse):
    count: int = 0


# ---------------------------------------------------------------------------
# System endpoints
# ---------------------------------------------------------------------------


class ConfigResponse(Versionable):
    config: Any = None


class PingResponse(Versionable):
    timestamp: str = ""


class VersionResponse(Versionable):
    version: str = ""


class VersionSdkResponse(VersionResponse):
    sdk_version: str = ""


class Metrics(ContractModel):
    """Memory and CPU utilisation of a service."""

    mem_alloc: int = Field(0, ge=0, le=_UINT64_MAX)
    mem_frees: int = Field(0, ge=0, le=_UINT64_MAX)
    mem_live_objects: int = Field(0, ge=0, le=_UINT64_MAX)
    mem_mallocs: int = Field(0, ge=0, le=_UINT64_MAX)
    mem_sys: int = Field(0, ge=0, le=_UINT64_MAX)
    mem_total_alloc: int = Field(0, ge=0, le=_UINT64_MAX)
    cpu_busy_avg: int = Field(0, ge=0, le=255)


class MetricsResponse(Versionable):
    metrics: Metrics = Field(default_factory=Metrics)


class MultiMetricsResponse(BaseResponse):
    metrics: Dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Secrets
# ---------------------------------------------------------------------------


class SecretDataKeyValue(ContractModel):
    key: NonEmptyStr
    value: str = Field(..., min_length=1)


class SecretRequest(BaseRequest):
    """Secret to be stored in the service's secret store under *path*."""

    path: Optional[str] = None
    secret_data: List[SecretDataKeyValue] = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Partial updates
# ---------------------------------------------------------------------------


class UpdateByIdOrName(Versionable):
    """Base of the PATCH DTOs: the target is addressed by ``id`` or ``name``.

    Every other field of a subclass defaults to ``None``, which means "leave
    unchanged"; an empty list or map means "clear".
    """

    id: Optional[UUIDStr] = None
    name: Optional[Name] = None

    @model_validator(mode="after")
    def _check_target(self):
        if self.id is None and self.name is None:
            raise ValueError("either id or name is required")
        return self
