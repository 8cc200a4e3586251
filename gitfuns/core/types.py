"""Type definitions for the gitfuns helpers."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class CommitRange:
    """A span of commits as understood by ``git log``."""
    from_ref: str
    to_ref: str = ""
    separator: str = ".."

    @property
    def revision(self) -> str:
        """The revision argument handed to git."""
        return f"{self.from_ref}{self.separator}{self.to_ref}"

    def __str__(self) -> str:
        return self.revision


@dataclass(frozen=True)
class RepositoryContext:
    """Repository path and checked-out branch for a single invocation."""
    path: Path
    branch: str

    @classmethod
    def from_client(cls, vcs) -> 'RepositoryContext':
        """Read the context fresh from a VCS client."""
        return cls(path=vcs.repo_path, branch=vcs.current_branch())


class MergeMode(Enum):
    """How the current branch gets into the target branch."""
    MERGE = "merge"
    REBASE = "rebase"

    @property
    def verb(self) -> str:
        return self.value

    @property
    def gerund(self) -> str:
        # merge -> merging, rebase -> rebasing
        return f"{self.value[:-1]}ing"

    @property
    def past_tense(self) -> str:
        return f"{self.value}d"


class MergeOutcome(Enum):
    """Terminal state of a guided merge."""
    NOTHING_TO_DO = "nothing-to-do"
    DECLINED = "declined"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class WorkflowState:
    """Per-invocation state of the guided merge."""
    current_branch: str
    target_branch: str
    mode: MergeMode = MergeMode.MERGE
    delete_source_branch: bool = False
    has_uncommitted_changes: bool = False
    unpushed_count: int = 0
    mergeable_count: int = 0
    stashed: bool = False
    repo_path: Optional[Path] = None


@dataclass
class MergeResult:
    """Result of running the guided merge."""
    outcome: MergeOutcome
    state: WorkflowState
    stash_restored: bool = False
    source_deleted: Optional[bool] = None

    @property
    def succeeded(self) -> bool:
        """Declined and no-op runs count as success."""
        return self.outcome is not MergeOutcome.FAILED


class GitFunsError(Exception):
    """Base exception for gitfuns operations."""
    pass


class GitOperationError(GitFunsError):
    """Raised when git operations fail."""
    pass


class NoRepositoryError(GitOperationError):
    """Raised when the working directory is not inside a git repository."""
    pass
