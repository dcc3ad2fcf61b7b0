"""Errors raised when parsing scoped names and queries."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from .valid import ValidateError


class ParseErrorKind(Enum):
    """Which part of a name or query failed to parse."""
    SCOPE = "scope"
    NAME = "name"
    VERSION = "version"
    MISSING_SEPARATOR = "missing_separator"


class ParseError(ValueError):
    """Raised when a ``ScopedName`` or ``Query`` cannot be parsed.

    Attributes:
        kind: The part that failed.
        cause: The underlying validation error, if any.
    """

    def __init__(self, kind: ParseErrorKind, cause: Optional[ValidateError] = None):
        self.kind = kind
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        if self.kind is ParseErrorKind.MISSING_SEPARATOR:
            return "missing '/' separator in scoped name"
        if self.kind is ParseErrorKind.VERSION:
            return "could not parse version: empty version after '@'"
        return f"could not parse {self.kind.value}: {self.cause}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind is other.kind and _cause_value(self) == _cause_value(other)

    def __hash__(self) -> int:
        return hash((self.kind, _cause_value(self)))

    @classmethod
    def scope(cls, cause: ValidateError) -> "ParseError":
        return cls(ParseErrorKind.SCOPE, cause)

    @classmethod
    def name(cls, cause: ValidateError) -> "ParseError":
        return cls(ParseErrorKind.NAME, cause)

    @classmethod
    def missing_separator(cls) -> "ParseError":
        return cls(ParseErrorKind.MISSING_SEPARATOR)


def _cause_value(error: ParseError) -> object:
    return error.cause.value if error.cause is not None else None
