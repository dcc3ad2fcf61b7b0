"""Tests for scoped drop names."""

import pytest

from drop.name import Name, ParseError, ParseErrorKind, Query, ScopedName, ValidateError


def test_parse_valid():
    """Test a valid scoped name splits and displays back."""
    scoped = ScopedName.parse("core/wget")
    assert scoped.scope == Name.CORE
    assert scoped.name == "wget"
    assert str(scoped) == "core/wget"


def test_parse_bytes():
    """Test scoped names parse from bytes."""
    assert ScopedName.parse(b"ocean/ocean") == ScopedName.ocean(Name.OCEAN)


def test_parse_missing_separator():
    """Test text without '/' is rejected."""
    with pytest.raises(ParseError) as exc:
        ScopedName.parse("wget")
    assert exc.value.kind is ParseErrorKind.MISSING_SEPARATOR
    assert exc.value == ParseError.missing_separator()


def test_parse_invalid_scope():
    """Test an invalid scope is reported as SCOPE."""
    with pytest.raises(ParseError) as exc:
        ScopedName.parse("Core/wget")
    assert exc.value.kind is ParseErrorKind.SCOPE
    assert exc.value == ParseError.scope(ValidateError("Core"))


def test_parse_invalid_name():
    """Test only the first '/' splits, so the rest must be a valid name."""
    with pytest.raises(ParseError) as exc:
        ScopedName.parse("core/wget/extra")
    assert exc.value.kind is ParseErrorKind.NAME
    assert exc.value.cause.value == "wget/extra"


def test_equality_with_str():
    """Test comparison against 'scope/name' strings."""
    scoped = ScopedName.core(Name.parse("wget"))
    assert scoped == "core/wget"
    assert scoped != "wget"
    assert scoped != "ocean/wget"


def test_hashable_and_ordered():
    """Test hashing and ordering by scope then name."""
    a = ScopedName.parse("core/a")
    b = ScopedName.parse("core/b")
    assert len({a, ScopedName.parse("core/a"), b}) == 2
    assert sorted([b, a]) == [a, b]


def test_shares_keys_with_equal_query():
    """Test a scoped name and its versionless query are one dict key."""
    scoped = ScopedName.parse("core/wget")
    query = Query.parse("core/wget")
    assert scoped == query
    assert hash(scoped) == hash(query)
    assert len({scoped, query}) == 1
    assert {query: "wget"}[scoped] == "wget"


def test_to_query():
    """Test conversion to a versionless query."""
    query = ScopedName.parse("nikolai/ocean").to_query()
    assert query == Query.new("nikolai", "ocean")
    assert query.version is None


def test_is_reserved():
    """Test reserved scopes."""
    assert ScopedName.parse("self/update").is_reserved()
    assert not ScopedName.parse("nikolai/ocean").is_reserved()
