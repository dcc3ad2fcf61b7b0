"""Tests for drop versions."""

import pytest
import semantic_version

from common.flexible import FieldError
from drop.version import Version, VersionScheme


class TestDecode:
    """Test both manifest spellings."""

    def test_bare_string_is_semver(self):
        """Test a bare string is a semantic version."""
        version = Version.decode("1.2.3")
        assert version.scheme is VersionScheme.SEMVER
        assert version.value == semantic_version.Version("1.2.3")

    def test_semver_table(self):
        """Test the explicit semver table."""
        assert Version.decode({"semver": "0.1.0"}) == Version.semver("0.1.0")

    def test_custom_table(self):
        """Test the custom table."""
        version = Version.decode({"custom": "banana"})
        assert version.scheme is VersionScheme.CUSTOM
        assert version.value == "banana"
        assert version == Version.custom("banana")

    def test_invalid_semver_string(self):
        """Test a bad semver string reports the field path."""
        with pytest.raises(FieldError) as exc:
            Version.decode("1.2", field="meta.version")
        assert exc.value.path == "meta.version"

    def test_unknown_scheme(self):
        """Test an unknown scheme key is rejected."""
        with pytest.raises(FieldError) as exc:
            Version.decode({"calver": "2019.10"}, field="meta.version")
        assert exc.value.path == "meta.version.calver"

    def test_table_needs_exactly_one_key(self):
        """Test the table holds exactly one scheme."""
        with pytest.raises(FieldError):
            Version.decode({"semver": "1.0.0", "custom": "x"})
        with pytest.raises(FieldError):
            Version.decode({})

    def test_non_string_value(self):
        """Test non-string values are rejected."""
        with pytest.raises(FieldError):
            Version.decode(1)


class TestEncode:
    """Test writing versions back."""

    def test_semver_writes_bare_string(self):
        """Test semver is written as a bare string."""
        assert Version.semver("0.1.0").encode() == "0.1.0"

    def test_custom_writes_table(self):
        """Test custom versions are written as a table."""
        assert Version.custom("banana").encode() == {"custom": "banana"}


def test_equality():
    """Test comparison against strings and semantic versions."""
    version = Version.semver("1.0.0")
    assert version == "1.0.0"
    assert version == semantic_version.Version("1.0.0")
    assert version != "not-a-version"
    assert Version.custom("1.0.0") != version
    assert Version.custom("x") == "x"
    assert str(version) == "1.0.0"
    assert len({version, Version.semver("1.0.0")}) == 1
