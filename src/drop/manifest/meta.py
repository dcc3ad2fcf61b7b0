"""The ``[meta]`` table of a drop manifest."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from common.flexible import FieldError, expect_str, optional_str
from common.logging_utils import extra_context, is_debug_enabled
from drop.license import LicenseExpr, LicenseExprParseError
from drop.name import Name, ParseError, Query, ValidateError
from drop.source import Git
from drop.version import Version

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset({
    "name", "display-name", "description", "exe-path", "version", "license",
    "authors", "readme", "changelog", "homepage", "documentation", "git",
    "conflicts",
})


@dataclass(frozen=True)
class Meta:
    """Metadata describing a drop."""

    name: Name
    version: Version
    description: str
    display_name: Optional[str] = None
    # `name` is used when unset
    exe_path: Optional[str] = None
    license: Optional[LicenseExpr] = None
    authors: Optional[Tuple[str, ...]] = None
    readme: Optional[str] = None
    changelog: Optional[str] = None
    homepage: Optional[str] = None
    documentation: Optional[str] = None
    git: Optional[Git] = None
    conflicts: Optional[Mapping[Query, str]] = field(default=None, hash=False)

    def exe_path_or_name(self) -> str:
        """Return the path of the executable, defaulting to the drop name."""
        return self.exe_path if self.exe_path is not None else str(self.name)

    @classmethod
    def decode(cls, raw: Any, path: str = "meta") -> "Meta":
        """Build and validate a ``Meta`` from a decoded ``[meta]`` table.

        Raises:
            FieldError: a field is missing or invalid; ``path`` names it.
        """
        if not isinstance(raw, Mapping):
            raise FieldError(path, f"expected a table, found {type(raw).__name__}")

        unknown = sorted(key for key in raw if key not in KNOWN_KEYS)
        if unknown and is_debug_enabled(logger):
            logger.debug(
                "Ignoring unknown meta keys: %s",
                ", ".join(unknown),
                extra=extra_context(component="manifest", action="decode_meta", target=path),
            )

        for required in ("name", "version", "description"):
            if required not in raw:
                raise FieldError(f"{path}.{required}", "missing field")

        name_text = expect_str(raw["name"], f"{path}.name")
        try:
            name = Name.parse(name_text)
        except ValidateError as e:
            raise FieldError(f"{path}.name", str(e)) from None

        license_expr = None
        if raw.get("license") is not None:
            license_text = expect_str(raw["license"], f"{path}.license")
            try:
                license_expr = LicenseExpr.parse(license_text)
            except LicenseExprParseError as e:
                raise FieldError(f"{path}.license", str(e)) from None

        return cls(
            name=name,
            version=Version.decode(raw["version"], field=f"{path}.version"),
            description=expect_str(raw["description"], f"{path}.description"),
            display_name=optional_str(raw, "display-name", path),
            exe_path=optional_str(raw, "exe-path", path),
            license=license_expr,
            authors=_decode_authors(raw.get("authors"), f"{path}.authors"),
            readme=optional_str(raw, "readme", path),
            changelog=optional_str(raw, "changelog", path),
            homepage=optional_str(raw, "homepage", path),
            documentation=optional_str(raw, "documentation", path),
            git=Git.decode(raw["git"], field=f"{path}.git") if raw.get("git") is not None else None,
            conflicts=_decode_conflicts(raw.get("conflicts"), f"{path}.conflicts"),
        )

    def encode(self) -> Dict[str, Any]:
        """Return the manifest form, omitting unset fields."""
        data: Dict[str, Any] = {"name": str(self.name)}
        if self.display_name is not None:
            data["display-name"] = self.display_name
        data["description"] = self.description
        if self.exe_path is not None:
            data["exe-path"] = self.exe_path
        data["version"] = self.version.encode()
        if self.license is not None:
            data["license"] = str(self.license)
        if self.authors is not None:
            data["authors"] = list(self.authors)
        for key in ("readme", "changelog", "homepage", "documentation"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.git is not None:
            data["git"] = self.git.encode()
        if self.conflicts is not None:
            data["conflicts"] = {
                str(query): self.conflicts[query]
                for query in sorted(self.conflicts, key=Query.sort_key)
            }
        return data


def _decode_authors(raw: Any, path: str) -> Optional[Tuple[str, ...]]:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise FieldError(path, f"expected an array, found {type(raw).__name__}")
    return tuple(expect_str(author, f"{path}.{i}") for i, author in enumerate(raw))


def _decode_conflicts(raw: Any, path: str) -> Optional[Mapping[Query, str]]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise FieldError(path, f"expected a table, found {type(raw).__name__}")
    conflicts: Dict[Query, str] = {}
    for key, value in raw.items():
        try:
            query = Query.parse(key)
        except ParseError as e:
            raise FieldError(f"{path}.{key}", str(e)) from None
        conflicts[query] = expect_str(value, f"{path}.{key}")
    return MappingProxyType(conflicts)
