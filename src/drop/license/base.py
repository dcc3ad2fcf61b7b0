"""The ``License`` type: a known SPDX license or an opaque id."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .spdx import SpdxLicense, SpdxParseError


@dataclass(frozen=True)
class License:
    """Any license: a known SPDX license or an opaque unknown id.

    Unknown ids are kept verbatim; they are not an error, since drops may use
    licenses that are not in the SPDX catalog.
    """

    value: Union["SpdxLicense", str]

    @classmethod
    def spdx(cls, license: "SpdxLicense") -> "License":  # pylint: disable=redefined-builtin
        return cls(license)

    @classmethod
    def unknown(cls, license_id: str) -> "License":
        return cls(str(license_id))

    @classmethod
    def parse(cls, text: str) -> "License":
        """Look ``text`` up in the SPDX catalog, falling back to ``Unknown``."""
        try:
            return cls(SpdxLicense.parse(text))
        except SpdxParseError:
            return cls(text)

    @property
    def is_known(self) -> bool:
        return isinstance(self.value, SpdxLicense)

    @property
    def known(self) -> Optional["SpdxLicense"]:
        """The SPDX license, or ``None`` for unknown ids."""
        return self.value if self.is_known else None

    @property
    def id(self) -> str:  # pylint: disable=invalid-name
        """The license id, known or not."""
        if isinstance(self.value, SpdxLicense):
            return self.value.id
        return self.value

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        if self.is_known:
            return f"License.spdx(SpdxLicense.{self.value.name})"
        return f"License.unknown({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.id == other
        if isinstance(other, SpdxLicense):
            return self.value is other
        if not isinstance(other, License):
            return NotImplemented
        return self.is_known == other.is_known and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.is_known, self.id))
