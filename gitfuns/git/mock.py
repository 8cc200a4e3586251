"""In-memory git client for testing."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
from ..core.types import GitOperationError, NoRepositoryError
from .interface import VcsClient

logger = logging.getLogger(__name__)


class MockGitClient(VcsClient):
    """Fake repository that records every operation instead of running git.

    ``log_output`` maps revision strings to the text ``log`` returns; unknown
    revisions yield an empty log. Operation names listed in ``fail_on``
    (``"checkout"``, ``"merge"``, ``"push"``...) raise ``GitOperationError``.
    ``stashes`` seeds the stash list with entries the user already had, and
    ``stat_only_changes`` makes the tree report changes that ``stash`` then
    finds nothing to save for, like files whose mtime alone was touched.
    """

    def __init__(self,
                 current_branch: str = "feature",
                 is_repository: bool = True,
                 dirty: bool = False,
                 log_output: Optional[Dict[str, str]] = None,
                 refs: Optional[Iterable[str]] = None,
                 root_commits: Optional[Iterable[str]] = None,
                 fail_on: Optional[Iterable[str]] = None,
                 diff_stat: str = " file.txt | 2 +-\n",
                 repo_path: Optional[Path] = None,
                 stashes: Optional[Iterable[str]] = None,
                 stat_only_changes: bool = False):
        self.repo_path = repo_path or Path("/tmp/mock-repo")
        self.branch = current_branch
        self.is_repository = is_repository
        self.dirty = dirty
        self.log_output = dict(log_output or {})
        self.refs = list(refs or [])
        self.root_commit_ids = list(root_commits or ["a1b2c3d4e5f6"])
        self.fail_on = set(fail_on or ())
        self.diff_stat_text = diff_stat
        self.stat_only_changes = stat_only_changes

        self.stashes: List[str] = list(stashes or [])
        self.deleted_branches: List[str] = []
        self.deleted_remote_branches: List[Tuple[str, str]] = []
        self.pushes: List[Tuple[str, bool]] = []
        self.calls: List[Tuple[str, tuple]] = []

    def _record(self, operation: str, *args) -> None:
        self.calls.append((operation, args))
        logger.debug("Mock git %s %s", operation, args)
        if operation in self.fail_on:
            raise GitOperationError(f"git {operation} failed (mock)")

    def operations(self) -> List[str]:
        """Names of the operations performed so far, in order."""
        return [name for name, _ in self.calls]

    def ensure_repository(self) -> None:
        if not self.is_repository:
            raise NoRepositoryError("No git repository found")

    def current_branch(self) -> str:
        self._record("current_branch")
        return self.branch

    def has_uncommitted_changes(self) -> bool:
        return self.dirty

    def root_commits(self) -> List[str]:
        self._record("root_commits")
        return list(self.root_commit_ids)

    def log(self, revision: str, pretty_format: str, date_format: str = "short",
            shortstat: bool = False) -> str:
        self._record("log", revision, shortstat)
        return self.log_output.get(revision, "")

    def diff_stat(self) -> str:
        return self.diff_stat_text

    def stash(self) -> bool:
        self._record("stash")
        if not self.dirty or self.stat_only_changes:
            return False
        self.stashes.append(f"WIP on {self.branch}")
        self.dirty = False
        return True

    def stash_pop(self) -> None:
        self._record("stash_pop")
        if not self.stashes:
            raise GitOperationError("No stash entries found.")
        self.stashes.pop()
        self.dirty = True

    def checkout(self, ref: str) -> None:
        self._record("checkout", ref)
        self.branch = ref

    def pull(self) -> None:
        self._record("pull", self.branch)

    def merge(self, ref: str) -> None:
        self._record("merge", ref)

    def rebase(self, ref: str) -> None:
        self._record("rebase", ref)

    def push(self, force: bool = False) -> None:
        self._record("push", self.branch, force)
        self.pushes.append((self.branch, force))

    def delete_branch(self, branch: str) -> None:
        self._record("delete_branch", branch)
        self.deleted_branches.append(branch)

    def delete_remote_branch(self, remote: str, branch: str) -> None:
        self._record("delete_remote_branch", remote, branch)
        self.deleted_remote_branches.append((remote, branch))

    def show_refs(self) -> List[str]:
        self._record("show_refs")
        return list(self.refs)
