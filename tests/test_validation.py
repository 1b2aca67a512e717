# tests/test_validation.py
from datetime import timedelta

import pytest
from pydantic import TypeAdapter, ValidationError

from core_contracts.errors import ContractsError, ErrKind
from core_contracts.validation import (
    DurationStr,
    HttpMethodStr,
    Name,
    NonEmptyStr,
    NonZeroInt,
    OptionalUUIDStr,
    URIStr,
    UUIDStr,
    ValueTypeStr,
    normalize_value_type,
    parse_duration,
)

from sample_data import EXAMPLE_UUID, NAME_WITH_UNRESERVED_CHARS, NAMES_WITH_RESERVED_CHAR


def _valid(annotation, value) -> bool:
    try:
        TypeAdapter(annotation).validate_python(value)
    except ValidationError:
        return False
    return True


class TestIdentifiers:
    def test_uuid(self):
        assert _valid(UUIDStr, EXAMPLE_UUID)
        assert _valid(UUIDStr, EXAMPLE_UUID.upper())
        assert not _valid(UUIDStr, "jfdw324")
        assert not _valid(UUIDStr, "")

    def test_optional_uuid_accepts_empty(self):
        assert _valid(OptionalUUIDStr, "")
        assert _valid(OptionalUUIDStr, EXAMPLE_UUID)
        assert not _valid(OptionalUUIDStr, "not-a-uuid")

    def test_non_empty(self):
        assert _valid(NonEmptyStr, "x")
        assert not _valid(NonEmptyStr, "")
        assert not _valid(NonEmptyStr, "   ")

    def test_non_zero(self):
        assert _valid(NonZeroInt, 1)
        assert not _valid(NonZeroInt, 0)


class TestName:
    def test_unreserved_chars_are_accepted(self):
        assert _valid(Name, NAME_WITH_UNRESERVED_CHARS)

    @pytest.mark.parametrize("name", NAMES_WITH_RESERVED_CHAR)
    def test_reserved_chars_are_rejected(self, name):
        assert not _valid(Name, name)

    def test_blank_is_rejected(self):
        assert not _valid(Name, " ")


class TestValueType:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("uint8", "Uint8"),
            ("FLOAT64", "Float64"),
            ("binary", "Binary"),
            ("int16array", "Int16Array"),
            ("String", "String"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_value_type(raw) == expected
        assert TypeAdapter(ValueTypeStr).validate_python(raw) == expected

    def test_unknown_type(self):
        with pytest.raises(ContractsError) as exc_info:
            normalize_value_type("Uint128")
        assert exc_info.value.kind is ErrKind.CONTRACT_INVALID
        assert not _valid(ValueTypeStr, "Uint128")


class TestDuration:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("10s", timedelta(seconds=10)),
            ("1m30s", timedelta(minutes=1, seconds=30)),
            ("250ms", timedelta(milliseconds=250)),
            ("1h", timedelta(hours=1)),
            ("1.5h", timedelta(minutes=90)),
            ("0", timedelta(0)),
        ],
    )
    def test_parse(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "10", "ten seconds", "10x", "s", "9999999999999h"])
    def test_invalid(self, value):
        assert not _valid(DurationStr, value)

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_duration("9999999999999h")


class TestUriAndMethod:
    @pytest.mark.parametrize(
        "value",
        ["http://localhost:59900", "https://edgex-device-virtual:59900/api", "/api/v2/callback"],
    )
    def test_valid_uri(self, value):
        assert _valid(URIStr, value)

    @pytest.mark.parametrize("value", ["invalid", "", " "])
    def test_invalid_uri(self, value):
        assert not _valid(URIStr, value)

    def test_http_method(self):
        assert _valid(HttpMethodStr, "POST")
        assert not _valid(HttpMethodStr, "post")
        assert not _valid(HttpMethodStr, "FETCH")
