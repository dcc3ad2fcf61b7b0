"""A drop name in the format ``<scope>/<name>``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from .errors import ParseError
from .valid import Name, NameLike, ValidateError

if TYPE_CHECKING:
    from .query import Query


def _split_scope(data: NameLike) -> Optional[Tuple[NameLike, NameLike]]:
    """Split at the first '/'; return (scope, rest) or None when absent."""
    if isinstance(data, (bytes, bytearray)):
        index = bytes(data).find(b"/")
    else:
        index = data.find("/")
    if index < 0:
        return None
    return data[:index], data[index + 1:]


@dataclass(frozen=True, order=True)
class ScopedName:
    """A name in the format ``<scope>/<name>``.

    Both halves are validated ``Name`` values.
    """

    scope: Name
    name: Name

    @classmethod
    def new(cls, scope: NameLike, name: NameLike) -> "ScopedName":
        """Create a new instance by validating ``scope`` and ``name``.

        Raises:
            ParseError: kind ``SCOPE`` or ``NAME`` depending on which half failed.
        """
        try:
            valid_scope = Name.parse(scope)
        except ValidateError as e:
            raise ParseError.scope(e) from None
        try:
            valid_name = Name.parse(name)
        except ValidateError as e:
            raise ParseError.name(e) from None
        return cls(valid_scope, valid_name)

    @classmethod
    def parse(cls, value: NameLike) -> "ScopedName":
        """Parse ``<scope>/<name>``, splitting at the first ``/``.

        Raises:
            ParseError: ``MISSING_SEPARATOR`` if there is no ``/``, otherwise
                ``SCOPE`` or ``NAME``.
        """
        parts = _split_scope(value)
        if parts is None:
            raise ParseError.missing_separator()
        return cls.new(*parts)

    @classmethod
    def core(cls, name: Name) -> "ScopedName":
        """Create an instance in the ``core`` namespace."""
        return cls(Name.CORE, Name.parse(name))

    @classmethod
    def ocean(cls, name: Name) -> "ScopedName":
        """Create an instance in the ``ocean`` namespace."""
        return cls(Name.OCEAN, Name.parse(name))

    def __str__(self) -> str:
        return f"{self.scope}/{self.name}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ScopedName):
            return self.scope == other.scope and self.name == other.name
        if isinstance(other, str):
            parts = _split_scope(other)
            return parts is not None and parts == (self.scope, self.name)
        return NotImplemented

    def __hash__(self) -> int:
        # Same hash as the equivalent versionless `Query`.
        return hash((str(self.scope), str(self.name), None))

    def to_query(self) -> "Query":
        """Return a new ``Query`` with this scope and name and no version."""
        from .query import Query  # pylint: disable=import-outside-toplevel
        return Query.from_scoped(self)

    def is_reserved(self) -> bool:
        """Return whether the scope is reserved for Ocean's own drops."""
        return self.scope.is_reserved()

