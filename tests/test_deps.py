"""Tests for dependency tables."""

import pytest

from common.flexible import FieldError
from drop.manifest.deps import DepInfo, decode_deps, encode_deps
from drop.name import Query
from drop.source import Git, Ref

WGET_REPO = "https://git.savannah.gnu.org/git/wget.git"


class TestDepInfo:
    """Test the two dependency spellings."""

    def test_bare_requirement(self):
        """Test a bare string is the version requirement."""
        assert DepInfo.decode("*") == DepInfo(version="*")

    def test_table(self):
        """Test the table form with optional and git."""
        info = DepInfo.decode(
            {"version": "^1.20", "optional": True, "git": {"repo": WGET_REPO, "branch": "1.0"}}
        )
        assert info == DepInfo("^1.20", optional=True, git=Git(WGET_REPO, Ref.branch("1.0")))

    def test_table_requires_version(self):
        """Test the table form needs a version."""
        with pytest.raises(FieldError) as exc:
            DepInfo.decode({"optional": True}, field="dependencies.wget")
        assert exc.value.path == "dependencies.wget.version"

    def test_optional_must_be_bool(self):
        """Test optional must be a boolean."""
        with pytest.raises(FieldError) as exc:
            DepInfo.decode({"version": "*", "optional": "yes"}, field="dependencies.wget")
        assert exc.value.path == "dependencies.wget.optional"

    def test_encode(self):
        """Test writing back the bare requirement when possible."""
        assert DepInfo("*").encode() == "*"
        assert DepInfo("*", optional=True).encode() == {"version": "*", "optional": True}
        assert DepInfo("*", git=Git(WGET_REPO)).encode() == {"version": "*", "git": WGET_REPO}

    def test_requirement_matching(self):
        """Test npm-style range matching."""
        info = DepInfo("^1.20")
        assert info.matches("1.20.3")
        assert info.matches("1.21.0")
        assert not info.matches("2.0.0")
        assert DepInfo("*").matches("0.0.1")

    def test_invalid_requirement(self):
        """Test malformed ranges raise ValueError."""
        with pytest.raises(ValueError):
            DepInfo("not a range !").requirement()


class TestDecodeDeps:
    """Test the dependencies table."""

    def test_keys_are_strict_queries(self):
        """Test keys are parsed as strict queries."""
        deps = decode_deps({"wget": "*", "core/curl@7": {"version": "^7"}})
        assert deps[Query.parse("wget")] == DepInfo("*")
        assert deps[Query.parse_liberal("core/curl@7")] == DepInfo("^7")
        assert all(query.is_strict for query in deps)

    def test_result_is_read_only(self):
        """Test the decoded mapping cannot be modified."""
        deps = decode_deps({"wget": "*"})
        with pytest.raises(TypeError):
            deps[Query.parse("curl")] = DepInfo("*")

    def test_invalid_key(self):
        """Test an invalid key reports its path."""
        with pytest.raises(FieldError) as exc:
            decode_deps({"Wget": "*"})
        assert exc.value.path == "dependencies.Wget"

    def test_not_a_table(self):
        """Test a non-table value is rejected."""
        with pytest.raises(FieldError):
            decode_deps(["wget"])

    def test_encode_is_sorted(self):
        """Test dependencies are written in query order."""
        deps = decode_deps({"b": "*", "a": "1.0.0", "core/c": {"version": "*", "optional": True}})
        assert list(encode_deps(deps)) == ["a", "b", "core/c"]
        assert encode_deps(deps)["core/c"] == {"version": "*", "optional": True}
