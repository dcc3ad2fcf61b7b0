"""Drop versioning schemes.

A manifest version is either written as a bare semantic version string
(``version = "0.1.0"``) or as a table naming the scheme
(``version = { custom = "2019-10-rc" }`` or ``{ semver = "0.1.0" }``).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union

import semantic_version

from common.flexible import FieldError, decode_flexible, expect_str


class VersionScheme(Enum):
    """Supported versioning schemes; values are the manifest table keys."""
    SEMVER = "semver"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Version:
    """A drop version: semantic (the default) or a custom opaque string."""

    scheme: VersionScheme
    value: Union[semantic_version.Version, str]

    @classmethod
    def semver(cls, version: Union[semantic_version.Version, str]) -> "Version":
        """Create a semantic version, parsing strings.

        Raises:
            ValueError: ``version`` is not a valid semantic version.
        """
        if not isinstance(version, semantic_version.Version):
            version = semantic_version.Version(version)
        return cls(VersionScheme.SEMVER, version)

    @classmethod
    def custom(cls, version: str) -> "Version":
        return cls(VersionScheme.CUSTOM, str(version))

    @classmethod
    def decode(cls, raw: Any, field: str = "version") -> "Version":
        """Decode a manifest value in either the scalar or the table form.

        Raises:
            FieldError: neither form matched.
        """
        return decode_flexible(
            raw,
            simple=_decode_semver_string,
            detailed=_decode_table,
            convert=cls.semver,
            field=field,
        )

    @property
    def is_semver(self) -> bool:
        return self.scheme is VersionScheme.SEMVER

    def encode(self) -> Union[str, Dict[str, str]]:
        """Return the manifest form; semver is written back as a bare string."""
        if self.is_semver:
            return str(self.value)
        return {VersionScheme.CUSTOM.value: str(self.value)}

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            if self.is_semver:
                try:
                    return self.value == semantic_version.Version(other)
                except ValueError:
                    return False
            return self.value == other
        if isinstance(other, semantic_version.Version):
            return self.is_semver and self.value == other
        if not isinstance(other, Version):
            return NotImplemented
        return self.scheme is other.scheme and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.scheme, str(self.value)))


def _decode_semver_string(raw: Any) -> semantic_version.Version:
    return semantic_version.Version(expect_str(raw))


def _decode_table(raw: Mapping[str, Any]) -> Version:
    if not isinstance(raw, Mapping):
        raise TypeError("expected a table")
    if len(raw) != 1:
        raise FieldError("", "expected exactly one of 'semver' or 'custom'")
    (key, value), = raw.items()
    try:
        scheme = VersionScheme(key)
    except ValueError:
        raise FieldError(key, "unknown versioning scheme") from None
    text = expect_str(value, key)
    if scheme is VersionScheme.SEMVER:
        try:
            return Version.semver(text)
        except ValueError as e:
            raise FieldError(key, str(e)) from None
    return Version.custom(text)
