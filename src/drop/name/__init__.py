"""Drop names, scoped names and queries."""

from .errors import ParseError, ParseErrorKind
from .query import Query
from .scoped import ScopedName
from .valid import RESERVED_SCOPES, Name, ValidateError, is_valid

__all__ = [
    "Name",
    "ParseError",
    "ParseErrorKind",
    "Query",
    "RESERVED_SCOPES",
    "ScopedName",
    "ValidateError",
    "is_valid",
]
