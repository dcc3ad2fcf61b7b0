"""A drop lookup in the form ``(<scope>/)?<name>(@<version>)?``.

Two parse modes exist:

- ``Query.parse`` validates scope and name as drop names.
- ``Query.parse_liberal`` only splits the text; the parts are kept verbatim.
  This is what cache file names and URL building use, where validation happens
  later or not at all.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union
from urllib.parse import quote, urljoin

import semantic_version

from constants import Constants

from .errors import ParseError, ParseErrorKind
from .scoped import ScopedName
from .valid import Name, ValidateError

# Left unescaped in the `version` query value.
_VERSION_SAFE = "^*<>=,:"


def _split_scope(query: str) -> Tuple[Optional[str], str]:
    """Return (scope or None, rest) using the first '/'."""
    scope, sep, rest = query.partition("/")
    if not sep:
        return None, query
    return scope, rest


def _split_version(rest: str) -> Tuple[str, Optional[str]]:
    """Return (name, version or None) using the first '@'."""
    name, sep, version = rest.partition("@")
    if not sep:
        return rest, None
    return name, version


@dataclass(frozen=True)
class Query:
    """A drop lookup: optional scope, name, optional version requirement.

    Strictly parsed queries hold ``Name`` values for ``scope`` and ``name``;
    liberally parsed ones hold plain strings.
    """

    scope: Optional[str]
    name: str
    version: Optional[str] = None

    @classmethod
    def new(cls, scope: Optional[str], name: str, version: Optional[str] = None) -> "Query":
        """Create a query without validating any part."""
        return cls(scope=scope, name=name, version=version)

    @classmethod
    def parse(cls, query: str) -> "Query":
        """Strictly parse ``query``.

        Args:
            query: Text such as ``core/wget@1.20``.

        Returns:
            Query whose scope and name are validated ``Name`` values.

        Raises:
            ParseError: kind ``SCOPE`` or ``NAME`` when that part is not a valid
                name, ``VERSION`` when ``@`` is followed by nothing.
        """
        scope_text, rest = _split_scope(query)
        name_text, version = _split_version(rest)

        scope: Optional[Name] = None
        if scope_text is not None:
            try:
                scope = Name.parse(scope_text)
            except ValidateError as e:
                raise ParseError.scope(e) from None
        try:
            name = Name.parse(name_text)
        except ValidateError as e:
            raise ParseError.name(e) from None
        if version is not None and not version:
            raise ParseError(ParseErrorKind.VERSION)
        return cls(scope=scope, name=name, version=version)

    @classmethod
    def parse_liberal(cls, query: str) -> "Query":
        """Split ``query`` into parts without validating them.

        Only the first ``/`` and the first ``@`` after it are significant, so
        ``"ocean//ocean@1"`` yields scope ``"ocean"``, name ``"/ocean"`` and
        version ``"1"``. ``str()`` of the result always gives back ``query``.
        """
        scope, rest = _split_scope(query)
        name, version = _split_version(rest)
        return cls(scope=scope, name=name, version=version)

    @classmethod
    def from_scoped(cls, scoped: ScopedName, version: Optional[str] = None) -> "Query":
        """Build a new query from a scoped name."""
        return cls(scope=scoped.scope, name=scoped.name, version=version)

    def __str__(self) -> str:
        text = self.name
        if self.scope is not None:
            text = f"{self.scope}/{text}"
        if self.version is not None:
            text = f"{text}@{self.version}"
        return text

    def _key(self) -> Tuple[Optional[str], str, Optional[str]]:
        return (
            None if self.scope is None else str(self.scope),
            str(self.name),
            None if self.version is None else str(self.version),
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            other = Query.parse_liberal(other)
        if isinstance(other, ScopedName):
            other = Query.from_scoped(other)
        if not isinstance(other, Query):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def sort_key(self) -> Tuple[str, str, str]:
        """Key ordering unscoped queries first, then by scope, name, version."""
        scope, name, version = self._key()
        return (scope or "", name, version or "")

    @property
    def is_strict(self) -> bool:
        """Whether scope and name are validated ``Name`` values."""
        return isinstance(self.name, Name) and (self.scope is None or isinstance(self.scope, Name))

    def validated(self) -> "Query":
        """Return a strictly validated copy of this query.

        Raises:
            ParseError: as ``Query.parse``.
        """
        if self.is_strict:
            return self
        return Query.parse(str(self))

    def to_scoped(self) -> Optional[ScopedName]:
        """Return the scope/name pair as a ``ScopedName`` if a scope exists.

        Raises:
            ParseError: the scope or name is not a valid name.
        """
        if self.scope is None:
            return None
        return ScopedName.new(self.scope, self.name)

    def without_version(self) -> "Query":
        return Query(scope=self.scope, name=self.name)

    def file_name(self) -> str:
        """Return ``name`` or ``name@version``."""
        if self.version is None:
            return str(self.name)
        return f"{self.name}@{self.version}"

    def tarball_name(self) -> str:
        """Return the file name of this drop's cached tarball."""
        return self.file_name() + Constants.TARBALL_EXTENSION

    def join_to_url(self, base: str) -> str:
        """Join the download path for this query onto ``base``.

        The path is ``u/<scope>/p/<name>``, with ``core`` standing in for a
        missing scope, followed by ``?version=<version>`` when one is set. The version is
        percent-quoted except for requirement operators such as ``^`` and ``>=``.
        """
        scope = self.scope if self.scope is not None else Constants.DEFAULT_SCOPE
        path = f"u/{quote(str(scope), safe='')}/p/{quote(str(self.name), safe='')}"
        url = urljoin(base, path)
        if self.version is not None:
            url = f"{url}?version={quote(str(self.version), safe=_VERSION_SAFE)}"
        return url

    def download_url(self) -> str:
        """Return the download URL on the configured API (``Constants.API_URL``)."""
        return self.join_to_url(urljoin(Constants.API_URL, Constants.API_VERSION_PATH))

    def cmp_version(self, other: "Query") -> Optional[int]:
        """Compare versions with ``other``.

        Returns:
            -1, 0 or 1; ``None`` when exactly one side has no version. Versions
            that both parse as semver compare semantically, others as text.
        """
        if self.version is None and other.version is None:
            return 0
        if self.version is None or other.version is None:
            return None
        a, b = _version_key(self.version), _version_key(other.version)
        if type(a) is not type(b):
            a, b = str(self.version), str(other.version)
        return (a > b) - (a < b)


def _version_key(version: str) -> Union[semantic_version.Version, str]:
    try:
        return semantic_version.Version(version)
    except ValueError:
        return version
