"""Codec base for every wire-format DTO.

All DTOs speak camelCase on the wire and snake_case in Python, and can be
encoded to / decoded from JSON and CBOR:

* ``WireBytes`` fields travel as standard base64 strings in JSON and as raw
  byte strings in CBOR.
* ``None`` fields are dropped on encode.  Update DTOs rely on this: a ``None``
  field is *absent* ("leave unchanged"), while an explicitly empty list or map
  survives the round trip ("clear this field").
* Decoding validates the payload and raises
  :class:`~core_contracts.errors.ContractsError` (``CONTRACT_INVALID``) on
  malformed input, including empty input.
"""
from __future__ import annotations

import base64
import binascii
from typing import Annotated, Any, Type, TypeVar, Union

import cbor2
from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, ValidationError, ValidationInfo
from pydantic.alias_generators import to_camel

from core_contracts.constants import CONTENT_TYPE_CBOR, CONTENT_TYPE_JSON
from core_contracts.errors import ContractsError, ErrKind

__all__ = ["ContractModel", "WireBytes"]

_M = TypeVar("_M", bound="ContractModel")

_URLSAFE_TO_STD = str.maketrans("-_", "+/")


def _b64encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _b64decode(value: Any, info: ValidationInfo) -> Any:
    if info.mode != "json" or not isinstance(value, str):
        return value
    try:
        return base64.b64decode(value.translate(_URLSAFE_TO_STD), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from None


# standard alphabet ("+", "/") in JSON, raw bytes in python and CBOR dumps;
# JSON input may use either alphabet
WireBytes = Annotated[
    bytes,
    BeforeValidator(_b64decode),
    PlainSerializer(_b64encode, return_type=str, when_used="json"),
]


class ContractModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        use_enum_values=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    # ------------------------------------------------------------------ encode
    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")

    def to_cbor(self) -> bytes:
        return cbor2.dumps(self.model_dump(by_alias=True, exclude_none=True))

    # ------------------------------------------------------------------ decode
    @classmethod
    def from_json(cls: Type[_M], data: Union[bytes, str]) -> _M:
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            raise ContractsError(
                ErrKind.CONTRACT_INVALID, f"failed to decode {cls.__name__} from JSON"
            ) from exc

    @classmethod
    def from_cbor(cls: Type[_M], data: bytes) -> _M:
        try:
            payload = cbor2.loads(data)
        except cbor2.CBORDecodeError as exc:
            raise ContractsError(
                ErrKind.CONTRACT_INVALID, f"failed to decode {cls.__name__} from CBOR"
            ) from exc
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ContractsError(
                ErrKind.CONTRACT_INVALID, f"failed to decode {cls.__name__} from CBOR"
            ) from exc

    @classmethod
    def decode(cls: Type[_M], data: bytes, content_type: str = CONTENT_TYPE_JSON) -> _M:
        """Decode *data* according to its HTTP content type."""
        if content_type.split(";", 1)[0].strip().lower() == CONTENT_TYPE_CBOR:
            return cls.from_cbor(data)
        return cls.from_json(data)
