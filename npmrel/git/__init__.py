"""Git queries."""

from .repository import LATEST_TAG, GitError, Repository

__all__ = ["GitError", "LATEST_TAG", "Repository"]
