"""Tests for scalar-or-table field decoding."""

import pytest

from common.flexible import (
    FieldError,
    Flexible,
    FlexibleKind,
    decode,
    decode_flexible,
    expect_str,
    optional_str,
)


def _detailed(table):
    if "value" not in table:
        raise FieldError("value", "missing field")
    return {"value": expect_str(table["value"], "value"), "extra": table.get("extra")}


def _convert(text):
    return {"value": text, "extra": None}


def test_simple_form():
    """Test a scalar decodes through the simple branch."""
    result = decode("abc", simple=expect_str, detailed=_detailed)
    assert result.kind is FlexibleKind.SIMPLE
    assert result.is_simple
    assert result.into_detailed(_convert) == {"value": "abc", "extra": None}


def test_detailed_form():
    """Test a table decodes through the detailed branch."""
    result = decode({"value": "abc", "extra": 1}, simple=expect_str, detailed=_detailed)
    assert result == Flexible.detailed({"value": "abc", "extra": 1})
    assert result.into_detailed(_convert) == {"value": "abc", "extra": 1}


def test_decode_flexible_normalizes():
    """Test both spellings normalize to the same value."""
    a = decode_flexible("abc", simple=expect_str, detailed=_detailed, convert=_convert)
    b = decode_flexible({"value": "abc"}, simple=expect_str, detailed=_detailed, convert=_convert)
    assert a == b


def test_table_error_gets_field_path():
    """Test table errors are prefixed with the field path."""
    with pytest.raises(FieldError) as exc:
        decode_flexible({}, simple=expect_str, detailed=_detailed, convert=_convert, field="meta.thing")
    assert exc.value.path == "meta.thing.value"
    assert exc.value.message == "missing field"
    assert str(exc.value) == "meta.thing.value: missing field"


def test_scalar_error_reported_when_neither_matches():
    """Test the scalar error is reported when both branches fail."""
    with pytest.raises(FieldError) as exc:
        decode_flexible(5, simple=expect_str, detailed=_detailed, convert=_convert, field="meta.thing")
    assert exc.value.path == "meta.thing"
    assert "expected a string, found int" in exc.value.message


def test_nested():
    """Test path prefixing."""
    error = FieldError("version", "bad").nested("dependencies.wget")
    assert error.path == "dependencies.wget.version"
    assert FieldError("", "bad").nested("x").path == "x"
    assert FieldError("a", "bad").nested("").path == "a"


def test_optional_str():
    """Test optional string entries."""
    assert optional_str({}, "readme") is None
    assert optional_str({"readme": None}, "readme") is None
    assert optional_str({"readme": "README.md"}, "readme") == "README.md"
    with pytest.raises(FieldError) as exc:
        optional_str({"readme": 1}, "readme", "meta")
    assert exc.value.path == "meta.readme"
