"""Dependency specification information."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import semantic_version

from common.flexible import FieldError, decode_flexible, expect_str
from drop.name import ParseError, Query
from drop.source import Git

Deps = Mapping[Query, "DepInfo"]


@dataclass(frozen=True)
class DepInfo:
    """The value of an entry in the manifest's ``dependencies`` table.

    Either a bare version requirement (``wget = "^1.20"``) or a table:
    ``wget = { version = "^1.20", optional = true, git = "..." }``.
    """

    version: str
    optional: bool = False
    # May differ from the `git` field in the dependency's own manifest.
    git: Optional[Git] = None

    @classmethod
    def decode(cls, raw: Any, field: str = "") -> "DepInfo":
        """Decode either manifest form.

        Raises:
            FieldError: the value is neither a string nor a valid table.
        """
        return decode_flexible(
            raw,
            simple=expect_str,
            detailed=_decode_table,
            convert=cls,
            field=field,
        )

    def encode(self) -> Union[str, Dict[str, Any]]:
        """Return the manifest form; the bare requirement when nothing else is set."""
        if not self.optional and self.git is None:
            return self.version
        table: Dict[str, Any] = {"version": self.version}
        if self.optional:
            table["optional"] = True
        if self.git is not None:
            table["git"] = self.git.encode()
        return table

    def requirement(self) -> semantic_version.NpmSpec:
        """Parse the version requirement (``*``, ``^1.0``, ``>=1.2 <2`` ...).

        Raises:
            ValueError: the requirement is not a valid range.
        """
        return semantic_version.NpmSpec(self.version)

    def matches(self, version: Union[str, semantic_version.Version]) -> bool:
        """Return whether ``version`` satisfies the requirement."""
        if not isinstance(version, semantic_version.Version):
            version = semantic_version.Version(version)
        return self.requirement().match(version)


def _decode_table(raw: Mapping[str, Any]) -> DepInfo:
    if not isinstance(raw, Mapping):
        raise TypeError("expected a table")
    if "version" not in raw:
        raise FieldError("version", "missing field")
    version = expect_str(raw["version"], "version")

    optional = raw.get("optional", False)
    if not isinstance(optional, bool):
        raise FieldError("optional", f"expected a boolean, found {type(optional).__name__}")

    git = None
    if raw.get("git") is not None:
        git = Git.decode(raw["git"], field="git")
    return DepInfo(version=version, optional=optional, git=git)


def decode_deps(raw: Any, field: str = "dependencies") -> Deps:
    """Decode the ``dependencies`` table into a read-only ``Query`` mapping.

    Keys are strictly parsed queries.

    Raises:
        FieldError: a key is not a valid query or a value does not decode.
    """
    if not isinstance(raw, Mapping):
        raise FieldError(field, f"expected a table, found {type(raw).__name__}")
    deps: Dict[Query, DepInfo] = {}
    for key, value in raw.items():
        path = f"{field}.{key}"
        try:
            query = Query.parse(key)
        except ParseError as e:
            raise FieldError(path, str(e)) from None
        deps[query] = DepInfo.decode(value, field=path)
    return MappingProxyType(deps)


def encode_deps(deps: Deps) -> Dict[str, Any]:
    """Return the manifest form of ``deps`` ordered by query."""
    return {str(query): deps[query].encode() for query in sorted(deps, key=Query.sort_key)}
