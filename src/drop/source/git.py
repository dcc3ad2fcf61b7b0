"""Git repository information for drops and dependencies."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import tomli_w

from common.flexible import FieldError, decode_flexible, expect_str, optional_str
from constants import Constants, RefKind

OCEAN_REPO = Constants.OCEAN_REPO

_REPO_KEYS = ("repo", "repository")


@dataclass(frozen=True)
class Ref:
    """A git branch, tag or revision."""

    kind: RefKind
    name: str

    @classmethod
    def branch(cls, name: str) -> "Ref":
        return cls(RefKind.BRANCH, name)

    @classmethod
    def tag(cls, name: str) -> "Ref":
        return cls(RefKind.TAG, name)

    @classmethod
    def rev(cls, name: str) -> "Ref":
        return cls(RefKind.REV, name)

    @classmethod
    def master(cls) -> "Ref":
        """The default branch."""
        return cls.branch(Constants.DEFAULT_BRANCH)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Git:
    """Where a drop or dependency can be fetched with git.

    Written in a manifest either as a bare URL (``git = "https://..."``) or as
    a table with ``repo`` and at most one of ``branch``, ``tag`` or ``rev``.
    """

    repo: str
    reference: Optional[Ref] = None

    @classmethod
    def decode(cls, raw: Any, field: str = "git") -> "Git":
        """Decode either manifest form.

        Raises:
            FieldError: the value is neither a string nor a valid table.
        """
        return decode_flexible(
            raw,
            simple=expect_str,
            detailed=_decode_table,
            convert=cls,
            field=field,
        )

    def encode(self) -> Union[str, Dict[str, str]]:
        """Return the manifest form; a bare URL when there is no reference."""
        if self.reference is None:
            return self.repo
        return {"repo": self.repo, self.reference.kind.value: self.reference.name}

    def to_toml(self) -> str:
        """Return an inline TOML ``git = { ... }`` line."""
        text = f"git = {{ repo = {_toml_str(self.repo)}"
        if self.reference is not None:
            text += f", {self.reference.kind.value} = {_toml_str(self.reference.name)}"
        return text + " }"


def _toml_str(value: str) -> str:
    """Render ``value`` as an escaped TOML basic string."""
    return tomli_w.dumps({"v": value})[len("v = "):].rstrip("\n")


def _decode_table(raw: Mapping[str, Any]) -> Git:
    if not isinstance(raw, Mapping):
        raise TypeError("expected a table")

    repos = [key for key in _REPO_KEYS if key in raw]
    if not repos:
        raise FieldError("repo", "missing field")
    if len(repos) > 1:
        raise FieldError("repository", "duplicate of 'repo'")
    repo = expect_str(raw[repos[0]], repos[0])

    refs = [kind for kind in RefKind if kind.value in raw]
    if len(refs) > 1:
        names = ", ".join(kind.value for kind in refs)
        raise FieldError("", f"expected at most one of branch, tag or rev; found {names}")
    reference = None
    if refs:
        name = optional_str(raw, refs[0].value)
        if name is not None:
            reference = Ref(refs[0], name)
    return Git(repo, reference)
