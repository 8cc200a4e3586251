"""Abstract interface for version control clients."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class VcsClient(ABC):
    """Abstract interface for the git operations gitfuns relies on.

    Failing operations raise ``GitOperationError``.
    """

    repo_path: Path

    @abstractmethod
    def ensure_repository(self) -> None:
        """Raise ``NoRepositoryError`` unless inside a repository."""
        pass

    @abstractmethod
    def current_branch(self) -> str:
        """Short name of the checked-out ref."""
        pass

    @abstractmethod
    def has_uncommitted_changes(self) -> bool:
        """Whether the working tree differs from HEAD."""
        pass

    @abstractmethod
    def root_commits(self) -> List[str]:
        """Commits without parents reachable from HEAD, in git's order."""
        pass

    @abstractmethod
    def log(self,
            revision: str,
            pretty_format: str,
            date_format: str = "short",
            shortstat: bool = False) -> str:
        """Run ``git log`` for a revision and return its colored output.

        Args:
            revision: Range or shorthand such as ``origin/main..HEAD`` or ``-5``
            pretty_format: Value for ``--pretty=format:``
            date_format: Value for ``--date``
            shortstat: Append the per-commit diff summary line

        Returns:
            Raw log text
        """
        pass

    @abstractmethod
    def diff_stat(self) -> str:
        """Diffstat of uncommitted changes."""
        pass

    @abstractmethod
    def stash(self) -> bool:
        """Stash uncommitted changes; False when no stash entry was created."""
        pass

    @abstractmethod
    def stash_pop(self) -> None:
        pass

    @abstractmethod
    def checkout(self, ref: str) -> None:
        pass

    @abstractmethod
    def pull(self) -> None:
        """Pull the checked-out branch from its upstream."""
        pass

    @abstractmethod
    def merge(self, ref: str) -> None:
        pass

    @abstractmethod
    def rebase(self, ref: str) -> None:
        pass

    @abstractmethod
    def push(self, force: bool = False) -> None:
        """Push the checked-out branch to its upstream."""
        pass

    @abstractmethod
    def delete_branch(self, branch: str) -> None:
        """Delete a fully merged local branch."""
        pass

    @abstractmethod
    def delete_remote_branch(self, remote: str, branch: str) -> None:
        pass

    @abstractmethod
    def show_refs(self) -> List[str]:
        """Full names of all refs, e.g. ``refs/heads/main``."""
        pass
