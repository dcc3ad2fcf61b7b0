"""Drop manifest (``Ocean.toml``) model and TOML/JSON codecs.

A manifest has a required ``[meta]`` table and an optional
``[dependencies]`` table::

    [meta]
    name = "ocean"
    description = "Cross-platform package manager"
    version = "0.1.0"
    license = "AGPL-3.0-only"

    [dependencies]
    wget = "*"
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import tomli_w

from common.flexible import FieldError
from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants
from drop.name import Query

from .deps import DepInfo, Deps, decode_deps, encode_deps
from .meta import Meta

try:
    import tomllib as toml  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - Python < 3.11
    import tomli as toml  # type: ignore

logger = logging.getLogger(__name__)

DOCUMENT_PATH = "<document>"

__all__ = ["DepInfo", "Deps", "Manifest", "ManifestError", "Meta"]


class ManifestError(FieldError):
    """A manifest document could not be read or decoded.

    ``path`` is the dotted path of the failing field, or ``<document>`` when
    the text itself is not valid TOML/JSON.
    """


@dataclass(frozen=True)
class Manifest:
    """A parsed drop manifest."""

    FILE_NAME = Constants.MANIFEST_FILE_NAME

    meta: Meta
    deps: Optional[Deps] = field(default=None, hash=False)

    @classmethod
    def from_dict(cls, data: Any) -> "Manifest":
        """Build a manifest from an already decoded document.

        Raises:
            ManifestError: a field is missing or invalid.
        """
        try:
            if not isinstance(data, Mapping):
                raise FieldError("", f"expected a table, found {type(data).__name__}")
            if "meta" not in data:
                raise FieldError("meta", "missing field")
            meta = Meta.decode(data["meta"], path="meta")
            deps = None
            if data.get("dependencies") is not None:
                deps = decode_deps(data["dependencies"], field="dependencies")
        except FieldError as e:
            raise ManifestError(e.path, e.message) from None
        return cls(meta=meta, deps=deps)

    def to_dict(self) -> Dict[str, Any]:
        """Return the document form of this manifest."""
        data: Dict[str, Any] = {"meta": self.meta.encode()}
        if self.deps is not None:
            data["dependencies"] = encode_deps(self.deps)
        return data

    @classmethod
    def parse_toml(cls, text: str) -> "Manifest":
        """Parse manifest TOML text.

        Raises:
            ManifestError: the text is not TOML or does not describe a manifest.
        """
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as e:
            raise ManifestError(DOCUMENT_PATH, str(e)) from e
        return cls.from_dict(data)

    @classmethod
    def parse_json(cls, text: Union[str, bytes]) -> "Manifest":
        """Parse manifest JSON text.

        Raises:
            ManifestError: the text is not JSON or does not describe a manifest.
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ManifestError(DOCUMENT_PATH, str(e)) from e
        return cls.from_dict(data)

    def to_toml(self, pretty: bool = False) -> str:
        """Serialize to TOML text."""
        if pretty:
            return tomli_w.dumps(self.to_dict(), multiline_strings=True, indent=4)
        return tomli_w.dumps(self.to_dict())

    def to_json(self, pretty: bool = False) -> str:
        """Serialize to JSON text."""
        if pretty:
            return json.dumps(self.to_dict(), indent=2)
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def read_toml_file(cls, path: Union[str, Path]) -> "Manifest":
        """Read and parse a TOML manifest file.

        Raises:
            ManifestError: the file cannot be read or parsed.
        """
        return cls._read_file(path, cls.parse_toml)

    @classmethod
    def read_json_file(cls, path: Union[str, Path]) -> "Manifest":
        """Read and parse a JSON manifest file.

        Raises:
            ManifestError: the file cannot be read or parsed.
        """
        return cls._read_file(path, cls.parse_json)

    @classmethod
    def _read_file(cls, path: Union[str, Path], parse) -> "Manifest":
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                "Unable to read manifest %s: %s",
                path,
                e,
                extra=extra_context(component="manifest", action="read", target=str(path)),
            )
            raise ManifestError(DOCUMENT_PATH, f"unable to read {path}: {e}") from e

        with Timer() as timer:
            manifest = parse(text)
        if is_debug_enabled(logger):
            logger.debug(
                "Parsed manifest %s for drop %s",
                path,
                manifest.meta.name,
                extra=extra_context(
                    component="manifest",
                    action="read",
                    target=str(path),
                    duration_ms=timer.duration_ms(),
                ),
            )
        return manifest

    def files(self) -> List[str]:
        """Return the files to package with the drop; currently the executable."""
        return [self.meta.exe_path_or_name()]

    def dependency(self, query: Union[Query, str]) -> Optional[DepInfo]:
        """Return the dependency entry matching ``query``, if any."""
        if self.deps is None:
            return None
        if isinstance(query, str):
            query = Query.parse_liberal(query)
        return self.deps.get(query)
