"""Places a drop's sources can be fetched from."""

from .git import OCEAN_REPO, Git, Ref

__all__ = ["Git", "OCEAN_REPO", "Ref"]
