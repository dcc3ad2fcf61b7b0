"""Decoding for manifest fields written either as a bare scalar or a table.

Several manifest fields accept two spellings: a short scalar (``version =
"1.2.3"``) or a detailed table (``version = { custom = "banana" }``). Both
decode to one canonical value. ``decode_flexible`` implements the strategy:
try the scalar decoder, otherwise the structured decoder, and hand back only
the normalized result.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

D = TypeVar("D")
S = TypeVar("S")


class FieldError(ValueError):
    """A manifest field could not be decoded.

    Attributes:
        path: Dotted path of the failing field, e.g. ``meta.version``.
        message: Human readable reason.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)

    def nested(self, prefix: str) -> "FieldError":
        """Return a copy whose path is prefixed with ``prefix``."""
        if not prefix:
            return self
        path = f"{prefix}.{self.path}" if self.path else prefix
        return type(self)(path, self.message)


class FlexibleKind(Enum):
    """Which spelling a flexible field was written in."""
    SIMPLE = "simple"
    DETAILED = "detailed"


@dataclass(frozen=True)
class Flexible(Generic[S, D]):
    """A decoded value that remembers whether it was simple or detailed."""
    kind: FlexibleKind
    value: Any

    @classmethod
    def simple(cls, value: S) -> "Flexible[S, D]":
        return cls(FlexibleKind.SIMPLE, value)

    @classmethod
    def detailed(cls, value: D) -> "Flexible[S, D]":
        return cls(FlexibleKind.DETAILED, value)

    @property
    def is_simple(self) -> bool:
        return self.kind is FlexibleKind.SIMPLE

    def into_detailed(self, convert: Callable[[S], D]) -> D:
        """Normalize to the detailed form, converting the simple form if needed."""
        if self.kind is FlexibleKind.SIMPLE:
            return convert(self.value)
        return self.value


def decode(
    raw: Any,
    *,
    simple: Callable[[Any], S],
    detailed: Callable[[Mapping[str, Any]], D],
    field: str = "",
) -> Flexible[S, D]:
    """Decode ``raw`` into a ``Flexible`` without normalizing it.

    Tables always go to ``detailed``. Any other value is handed to
    ``simple``; if that raises, ``detailed`` gets a chance before the scalar
    error is reported.

    Args:
        raw: Value produced by the TOML/JSON codec.
        simple: Scalar decoder.
        detailed: Table decoder.
        field: Dotted path used in error messages.

    Returns:
        Flexible holding whichever branch succeeded.

    Raises:
        FieldError: Neither decoder accepted the value.
    """
    if isinstance(raw, Mapping):
        try:
            return Flexible.detailed(detailed(raw))
        except FieldError as e:
            raise e.nested(field) from None
        except (TypeError, ValueError) as e:
            raise FieldError(field, str(e)) from e

    try:
        return Flexible.simple(simple(raw))
    except (TypeError, ValueError) as scalar_error:
        try:
            return Flexible.detailed(detailed(raw))
        except (TypeError, ValueError, AttributeError):
            pass
        if isinstance(scalar_error, FieldError):
            raise scalar_error.nested(field) from None
        raise FieldError(field, str(scalar_error)) from scalar_error


def decode_flexible(
    raw: Any,
    *,
    simple: Callable[[Any], S],
    detailed: Callable[[Mapping[str, Any]], D],
    convert: Callable[[S], D],
    field: str = "",
) -> D:
    """Decode ``raw`` and normalize it to the detailed form ``D``."""
    return decode(raw, simple=simple, detailed=detailed, field=field).into_detailed(convert)


def expect_str(raw: Any, field: str = "") -> str:
    """Return ``raw`` if it is a string, otherwise raise ``FieldError``."""
    if not isinstance(raw, str):
        raise FieldError(field, f"expected a string, found {type(raw).__name__}")
    return raw


def optional_str(data: Mapping[str, Any], key: str, field: str = "") -> Optional[str]:
    """Read an optional string entry from a table."""
    if key not in data or data[key] is None:
        return None
    return expect_str(data[key], _join(field, key))


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key
