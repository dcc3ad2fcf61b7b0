"""Tests for drop queries."""

import pytest

from constants import Constants
from drop.name import Name, ParseError, ParseErrorKind, Query, ScopedName


class TestLiberalParse:
    """Test splitting without validation."""

    @pytest.mark.parametrize(
        "text, scope, name, version",
        [
            ("wget", None, "wget", None),
            ("wget@1.20", None, "wget", "1.20"),
            ("core/wget", "core", "wget", None),
            ("core/wget@1.20", "core", "wget", "1.20"),
            ("ocean//ocean@1", "ocean", "/ocean", "1"),
            ("ocean//ocean@@1", "ocean", "/ocean", "@1"),
            ("wget@", None, "wget", ""),
            ("", None, "", None),
        ],
    )
    def test_parts(self, text, scope, name, version):
        """Test the first '/' and the first '@' after it split the parts."""
        query = Query.parse_liberal(text)
        assert query.scope == scope
        assert query.name == name
        assert query.version == version

    @pytest.mark.parametrize(
        "text",
        ["wget", "core/wget@1.20", "ocean//ocean@1", "ocean//ocean@@1", "a@b/c", "x/", "wget@"],
    )
    def test_display_round_trips(self, text):
        """Test ``str()`` gives back the parsed text."""
        assert str(Query.parse_liberal(text)) == text

    def test_liberal_parts_are_not_names(self):
        """Test liberal parts are left unvalidated."""
        query = Query.parse_liberal("Core/Wget")
        assert not query.is_strict


class TestStrictParse:
    """Test validated parsing."""

    def test_valid(self):
        """Test scope and name become Name values."""
        query = Query.parse("core/wget@^1.20")
        assert isinstance(query.scope, Name)
        assert isinstance(query.name, Name)
        assert query.version == "^1.20"
        assert query.is_strict

    def test_invalid_scope(self):
        """Test an invalid scope is reported as SCOPE."""
        with pytest.raises(ParseError) as exc:
            Query.parse("Core/wget")
        assert exc.value.kind is ParseErrorKind.SCOPE

    def test_invalid_name(self):
        """Test an invalid name is reported as NAME."""
        with pytest.raises(ParseError) as exc:
            Query.parse("ocean//ocean@1")
        assert exc.value.kind is ParseErrorKind.NAME

    def test_empty_version(self):
        """Test '@' with nothing after it is reported as VERSION."""
        with pytest.raises(ParseError) as exc:
            Query.parse("wget@")
        assert exc.value.kind is ParseErrorKind.VERSION

    def test_validated(self):
        """Test validating an unchecked query."""
        assert Query.new("core", "wget").validated().is_strict
        with pytest.raises(ParseError):
            Query.new("core", "Wget").validated()


class TestEquality:
    """Test comparisons between queries, strings and scoped names."""

    def test_equal_to_str(self):
        """Test comparison against query strings."""
        assert Query.parse("core/wget@1") == "core/wget@1"
        assert Query.parse("core/wget@1") != "core/wget@2"

    def test_equal_to_scoped_name(self):
        """Test versionless queries equal their scoped name."""
        assert Query.parse("core/wget") == ScopedName.parse("core/wget")
        assert Query.parse("core/wget@1") != ScopedName.parse("core/wget")

    def test_strict_and_liberal_share_hash(self):
        """Test strict and liberal queries for the same text are one key."""
        strict = Query.parse("core/wget")
        liberal = Query.parse_liberal("core/wget")
        assert strict == liberal
        assert {strict: 1}[liberal] == 1

    def test_sort_key(self):
        """Test unscoped queries sort first, then scope, name and version."""
        queries = [Query.parse(t) for t in ("b/x", "a/y", "z", "a/x@2", "a/x@1")]
        ordered = [str(q) for q in sorted(queries, key=Query.sort_key)]
        assert ordered == ["z", "a/x@1", "a/x@2", "a/y", "b/x"]


class TestConversions:
    """Test names, URLs and version comparison."""

    def test_to_scoped(self):
        """Test conversion to a scoped name."""
        assert Query.parse("core/wget@1").to_scoped() == ScopedName.parse("core/wget")
        assert Query.parse("wget").to_scoped() is None

    def test_without_version(self):
        """Test dropping the version."""
        assert Query.parse("core/wget@1").without_version() == "core/wget"

    def test_file_and_tarball_names(self):
        """Test cache file names leave out the scope."""
        assert Query.parse("core/wget").file_name() == "wget"
        assert Query.parse("core/wget@1.20").file_name() == "wget@1.20"
        assert Query.parse("wget@1.20").tarball_name() == "wget@1.20.tar.gz"

    def test_join_to_url(self):
        """Test download paths default the scope to core."""
        base = "https://api.oceanpkg.org/v1/"
        assert Query.parse("wget").join_to_url(base) == "https://api.oceanpkg.org/v1/u/core/p/wget"
        assert (
            Query.parse("nikolai/ocean@^1.0").join_to_url(base)
            == "https://api.oceanpkg.org/v1/u/nikolai/p/ocean?version=^1.0"
        )

    def test_join_to_url_quotes_version(self):
        """Test the version keeps range operators and escapes the rest."""
        base = "https://api.oceanpkg.org/v1/"
        url = Query.parse_liberal("wget@>=1.2 <2").join_to_url(base)
        assert url == "https://api.oceanpkg.org/v1/u/core/p/wget?version=>=1.2%20<2"
        url = Query.parse_liberal("wget@1+build&x").join_to_url(base)
        assert url.endswith("?version=1%2Bbuild%26x")

    def test_download_url_uses_configured_api(self, monkeypatch):
        """Test download URLs follow ``Constants.API_URL``."""
        monkeypatch.setattr(Constants, "API_URL", "http://localhost:8080")
        assert Query.parse("wget@1").download_url() == "http://localhost:8080/v1/u/core/p/wget?version=1"

    def test_cmp_version(self):
        """Test semantic version comparison."""
        assert Query.parse("a@1.2.0").cmp_version(Query.parse("a@1.10.0")) == -1
        assert Query.parse("a@2.0.0").cmp_version(Query.parse("a@1.10.0")) == 1
        assert Query.parse("a@1.0.0").cmp_version(Query.parse("a@1.0.0")) == 0
        assert Query.parse("a").cmp_version(Query.parse("a")) == 0
        assert Query.parse("a@1.0.0").cmp_version(Query.parse("a")) is None

    def test_cmp_version_falls_back_to_text(self):
        """Test non-semver versions compare as text."""
        assert Query.parse("a@beta").cmp_version(Query.parse("a@alpha")) == 1
        assert Query.parse("a@1.0.0").cmp_version(Query.parse("a@beta")) == -1
