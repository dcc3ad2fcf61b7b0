"""Commonly found licenses listed at https://spdx.org/licenses.

``SpdxLicense`` is a closed enumeration built from ``_catalog.LICENSES``.
Member values are the canonical SPDX ids; lookups by id are exact,
case-sensitive dict lookups.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from ._catalog import LICENSES


class SpdxParseErrorKind(Enum):
    """Reasons an SPDX id failed to parse."""
    EMPTY = "empty"
    UNKNOWN_LICENSE_ID = "unknown_license_id"


class SpdxParseError(ValueError):
    """Raised when text is not a known SPDX license id.

    Attributes:
        kind: ``EMPTY`` or ``UNKNOWN_LICENSE_ID``.
        license_id: The offending text (``None`` for ``EMPTY``).
    """

    def __init__(self, kind: SpdxParseErrorKind, license_id: Optional[str] = None):
        self.kind = kind
        self.license_id = license_id
        if kind is SpdxParseErrorKind.EMPTY:
            message = "empty string provided"
        else:
            message = f"'{license_id}' is not a known license ID"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpdxParseError):
            return NotImplemented
        return (self.kind, self.license_id) == (other.kind, other.license_id)

    def __hash__(self) -> int:
        return hash((self.kind, self.license_id))


class _SpdxLicenseBase(Enum):
    """Behavior shared by every ``SpdxLicense`` member."""

    @property
    def id(self) -> str:  # pylint: disable=invalid-name
        """The canonical SPDX identifier, e.g. ``Apache-2.0``."""
        return self.value

    @property
    def full_name(self) -> str:
        """The full license name, e.g. ``Apache License 2.0``."""
        return _FULL_NAMES[self.value]

    @property
    def index(self) -> int:
        """Position of this license in the catalog."""
        return _INDEX[self.value]

    def is_creative_commons(self) -> bool:
        """Return whether the license is a Creative Commons license."""
        return _CC_FIRST <= self.index <= _CC_LAST

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, license_id: str) -> "SpdxLicense":
        """Look up a license by its exact id.

        Raises:
            SpdxParseError: ``EMPTY`` for ``""``, ``UNKNOWN_LICENSE_ID`` otherwise.
        """
        if not license_id:
            raise SpdxParseError(SpdxParseErrorKind.EMPTY)
        found = _BY_ID.get(license_id)
        if found is None:
            raise SpdxParseError(SpdxParseErrorKind.UNKNOWN_LICENSE_ID, license_id)
        return found

    @classmethod
    def all(cls) -> Iterator["SpdxLicense"]:
        """Iterate over every license in catalog order."""
        return iter(_ALL)

    @classmethod
    def by_index(cls, index: int) -> "SpdxLicense":
        """Return the license at ``index`` in catalog order."""
        return _ALL[index]


SpdxLicense = _SpdxLicenseBase(
    "SpdxLicense",
    [(member, license_id) for member, license_id, _ in LICENSES],
    module=__name__,
)

_FULL_NAMES: Dict[str, str] = {license_id: full_name for _, license_id, full_name in LICENSES}
_ALL: Tuple["SpdxLicense", ...] = tuple(SpdxLicense)
_BY_ID: Dict[str, "SpdxLicense"] = {member.value: member for member in _ALL}
_INDEX: Dict[str, int] = {member.value: i for i, member in enumerate(_ALL)}
_CC_FIRST = _INDEX["CC-BY-1.0"]
_CC_LAST = _INDEX["CC0-1.0"]

SpdxLicense.COUNT = len(LICENSES)
if not SpdxLicense.COUNT == len(_ALL) == len(_BY_ID):
    raise ValueError("SPDX catalog contains duplicate license ids")
