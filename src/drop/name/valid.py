"""Validated drop and scope names.

Valid names are lowercase, non-empty, ASCII alphanumeric, and can have dashes
(``-``) anywhere except at the beginning or end. Uppercase input is rejected,
never lowercased.
"""
from __future__ import annotations

from typing import Tuple, Union

from constants import Constants

NameLike = Union[str, bytes, bytearray]

_ALLOWED = frozenset(b"0123456789abcdefghijklmnopqrstuvwxyz-")
_DASH = ord("-")


class ValidateError(ValueError):
    """Raised when a value fails drop name validation."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"failed to validate drop name {value!r}: names must be lowercase "
            "ASCII letters, digits or '-', and may not start or end with '-'"
        )


def _as_bytes(value: NameLike) -> bytes:
    if isinstance(value, str):
        # lone surrogates must fail validation rather than raise
        return value.encode("utf-8", "surrogatepass")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, found {type(value).__name__}")


def is_valid(value: NameLike) -> bool:
    """Return whether ``value`` is a valid drop name."""
    data = _as_bytes(value)
    if not data or data[0] == _DASH or data[-1] == _DASH:
        return False
    return all(byte in _ALLOWED for byte in data)


class Name(str):
    """A string known to satisfy the drop name rules.

    Instances are only produced by ``Name.parse`` (or ``Name(...)``, which
    validates too), so holding a ``Name`` is proof of validity.
    """

    __slots__ = ()

    CORE: "Name"
    OCEAN: "Name"
    SELF: "Name"

    def __new__(cls, value: NameLike) -> "Name":
        if isinstance(value, Name):
            return value
        if not is_valid(value):
            raise ValidateError(value)
        if isinstance(value, (bytes, bytearray)):
            value = bytes(value).decode("ascii")
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, value: NameLike) -> "Name":
        """Validate ``value`` and return it as a ``Name``.

        Raises:
            ValidateError: ``value`` breaks the naming rules.
        """
        return cls(value)

    @classmethod
    def _unchecked(cls, value: str) -> "Name":
        # Only for module constants; checked by `_constant` below.
        return str.__new__(cls, value)

    def __repr__(self) -> str:
        return f"Name({str.__repr__(self)})"

    def is_reserved(self) -> bool:
        """Return whether this name is a scope owned by Ocean itself."""
        return self in RESERVED_SCOPES


def _constant(value: str) -> Name:
    if not is_valid(value):
        raise ValueError(f"invalid built-in name constant {value!r}")
    return Name._unchecked(value)


Name.CORE = _constant("core")
Name.OCEAN = _constant("ocean")
Name.SELF = _constant("self")

RESERVED_SCOPES: Tuple[Name, ...] = tuple(_constant(s) for s in Constants.RESERVED_SCOPES)
