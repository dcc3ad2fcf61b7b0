"""License expressions.

Grammar (note the padded spacing)::

    Single = License
    Or     = License " OR " License (" OR " License)*
    And    = License " AND " License (" AND " License)*

``OR`` is checked first and ``AND`` only when no ``OR`` is present, so
expressions mixing both are not understood: in
``"MIT AND Apache-2.0 OR BSD-3-Clause"`` the first ``Or`` member is the
unknown license ``"MIT AND Apache-2.0"``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from constants import Constants

from .base import License
from .spdx import SpdxLicense


class LicenseExprKind(Enum):
    """Shape of a license expression."""
    SINGLE = "single"
    OR = "or"
    AND = "and"


_SEPARATORS = {
    LicenseExprKind.OR: Constants.LICENSE_OR,
    LicenseExprKind.AND: Constants.LICENSE_AND,
}


class LicenseExprParseErrorKind(Enum):
    """Reasons a license expression failed to parse."""
    EMPTY = "empty"


class LicenseExprParseError(ValueError):
    """Raised when a license expression is empty or has an empty member.

    Attributes:
        kind: Always ``LicenseExprParseErrorKind.EMPTY``.
        text: The text that failed to parse.
    """

    def __init__(self, text: str = ""):
        self.kind = LicenseExprParseErrorKind.EMPTY
        self.text = text
        super().__init__("missing text in license string")


@dataclass(frozen=True)
class LicenseExpr:
    """A single license, or two or more joined by ``OR``/``AND``."""

    kind: LicenseExprKind
    members: Tuple[License, ...]

    def __post_init__(self) -> None:
        count = len(self.members)
        if self.kind is LicenseExprKind.SINGLE and count != 1:
            raise ValueError(f"Single expression needs exactly 1 license, got {count}")
        if self.kind is not LicenseExprKind.SINGLE and count < 2:
            raise ValueError(f"{self.kind.name} expression needs at least 2 licenses, got {count}")

    @classmethod
    def single(cls, license: Union[License, SpdxLicense, str]) -> "LicenseExpr":  # pylint: disable=redefined-builtin
        return cls(LicenseExprKind.SINGLE, (_to_license(license),))

    @classmethod
    def any_of(cls, licenses: Iterable[Union[License, SpdxLicense, str]]) -> "LicenseExpr":
        """Build an ``Or`` expression (dual/n-ary licensing)."""
        return cls(LicenseExprKind.OR, tuple(_to_license(item) for item in licenses))

    @classmethod
    def all_of(cls, licenses: Iterable[Union[License, SpdxLicense, str]]) -> "LicenseExpr":
        """Build an ``And`` expression (all licenses apply)."""
        return cls(LicenseExprKind.AND, tuple(_to_license(item) for item in licenses))

    @classmethod
    def parse(cls, text: str) -> "LicenseExpr":
        """Parse a license expression.

        Args:
            text: Expression such as ``"MIT OR Apache-2.0"``.

        Returns:
            The parsed expression. Members not in the SPDX catalog become
            unknown licenses.

        Raises:
            LicenseExprParseError: ``text`` is blank or a member is blank.
        """
        trimmed = text.strip()
        if not trimmed:
            raise LicenseExprParseError(text)

        or_parts = trimmed.split(Constants.LICENSE_OR)
        if len(or_parts) > 1:
            return cls(LicenseExprKind.OR, _parse_members(or_parts, text))

        and_parts = trimmed.split(Constants.LICENSE_AND)
        if len(and_parts) > 1:
            return cls(LicenseExprKind.AND, _parse_members(and_parts, text))

        return cls(LicenseExprKind.SINGLE, (License.parse(trimmed),))

    @property
    def separator(self) -> str:
        """The text placed between members when printing."""
        return _SEPARATORS.get(self.kind, "")

    @property
    def license(self) -> License:
        """The license of a ``Single`` expression.

        Raises:
            ValueError: the expression has several members.
        """
        if self.kind is not LicenseExprKind.SINGLE:
            raise ValueError(f"{self.kind.name} expression has {len(self.members)} licenses")
        return self.members[0]

    def __str__(self) -> str:
        if self.kind is LicenseExprKind.SINGLE:
            return str(self.members[0])
        return self.separator.join(str(member) for member in self.members)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            if self.kind is LicenseExprKind.SINGLE:
                return self.members[0].id == other.strip()
            parts = [part.strip() for part in other.split(self.separator)]
            return parts == [member.id for member in self.members]
        if isinstance(other, (License, SpdxLicense)):
            return self.kind is LicenseExprKind.SINGLE and self.members[0] == other
        if not isinstance(other, LicenseExpr):
            return NotImplemented
        return self.kind is other.kind and self.members == other.members

    def __hash__(self) -> int:
        return hash((self.kind, self.members))


def _to_license(value: Union[License, SpdxLicense, str]) -> License:
    if isinstance(value, License):
        return value
    if isinstance(value, SpdxLicense):
        return License.spdx(value)
    return License.parse(value)


def _parse_members(parts: Iterable[str], text: str) -> Tuple[License, ...]:
    members = []
    for part in parts:
        part = part.strip()
        if not part:
            raise LicenseExprParseError(text)
        members.append(License.parse(part))
    return tuple(members)
