"""Git operations backed by the git command-line tool."""

import subprocess
import logging
from pathlib import Path
from typing import List, Optional, Union
from ..core.types import GitOperationError, NoRepositoryError
from .interface import VcsClient

logger = logging.getLogger(__name__)


class GitOperations(VcsClient):
    """Runs git in a repository directory."""

    def __init__(self, repo_path: Optional[Union[str, Path]] = None):
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()
        self.ensure_repository()

    def _run_git_command(self, cmd: List[str], check: bool = True,
                         capture: bool = True) -> subprocess.CompletedProcess:
        """Run a git command and return the result.

        With ``capture=False`` git writes straight to the terminal, which is
        how merge conflicts and rebase progress reach the user.
        """
        full_cmd = ["git"] + cmd
        logger.debug("Running git command: %s", " ".join(full_cmd))

        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_path,
                capture_output=capture,
                text=True,
                check=check
            )
            return result
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            logger.error("Git command failed: %s\nStderr: %s", " ".join(full_cmd), stderr)
            detail = stderr or f"exit status {e.returncode}"
            raise GitOperationError(f"git {' '.join(cmd)} failed: {detail}")
        except FileNotFoundError:
            raise GitOperationError("git executable not found")

    def ensure_repository(self) -> None:
        """Validate that we're in a git repository."""
        result = self._run_git_command(["rev-parse", "--git-dir"], check=False)
        if result.returncode != 0:
            raise NoRepositoryError("No git repository found")
        logger.debug("Git repository found at: %s", result.stdout.strip())

    def current_branch(self) -> str:
        """Get the name of the current branch."""
        result = self._run_git_command(["rev-parse", "--abbrev-ref", "HEAD"])
        return result.stdout.strip()

    def has_uncommitted_changes(self) -> bool:
        # Stale stat info makes diff-index report files whose content is unchanged
        self._run_git_command(["update-index", "-q", "--refresh"], check=False)
        result = self._run_git_command(["diff-index", "--quiet", "HEAD", "--"], check=False)
        return result.returncode != 0

    def root_commits(self) -> List[str]:
        result = self._run_git_command(["rev-list", "--max-parents=0", "HEAD"])
        return [line for line in result.stdout.split("\n") if line.strip()]

    def log(self, revision: str, pretty_format: str, date_format: str = "short",
            shortstat: bool = False) -> str:
        logger.debug("Fetching log for %s", revision)
        cmd = ["--no-pager", "log", "--color=always",
               f"--pretty=format:{pretty_format}", f"--date={date_format}"]
        if shortstat:
            cmd.append("--shortstat")
        cmd.append(revision)

        result = self._run_git_command(cmd)
        return result.stdout

    def diff_stat(self) -> str:
        result = self._run_git_command(["--no-pager", "diff", "--stat"])
        return result.stdout

    def _stash_head(self) -> str:
        result = self._run_git_command(["rev-parse", "-q", "--verify", "refs/stash"], check=False)
        return result.stdout.strip()

    def stash(self) -> bool:
        """Stash uncommitted changes.

        ``git stash`` exits 0 with "No local changes to save" when there is
        nothing to stash, so the stash ref is compared before and after.
        """
        logger.info("Stashing uncommitted changes")
        before = self._stash_head()
        self._run_git_command(["stash"])
        created = self._stash_head() != before
        if not created:
            logger.info("git stash saved nothing")
        return created

    def stash_pop(self) -> None:
        logger.info("Restoring stashed changes")
        self._run_git_command(["stash", "pop"])

    def checkout(self, ref: str) -> None:
        """Checkout an existing branch."""
        logger.info("Checking out branch: %s", ref)
        self._run_git_command(["checkout", ref])

    def pull(self) -> None:
        logger.info("Pulling current branch")
        self._run_git_command(["pull"])

    def merge(self, ref: str) -> None:
        logger.info("Merging %s", ref)
        self._run_git_command(["merge", ref], capture=False)

    def rebase(self, ref: str) -> None:
        logger.info("Rebasing onto %s", ref)
        self._run_git_command(["rebase", ref], capture=False)

    def push(self, force: bool = False) -> None:
        logger.info("Pushing current branch%s", " (forced)" if force else "")
        cmd = ["push"]
        if force:
            cmd.append("-f")
        self._run_git_command(cmd)

    def delete_branch(self, branch: str) -> None:
        logger.info("Deleting local branch: %s", branch)
        self._run_git_command(["branch", "-d", branch])

    def delete_remote_branch(self, remote: str, branch: str) -> None:
        logger.info("Deleting remote branch: %s/%s", remote, branch)
        self._run_git_command(["push", remote, "-d", branch])

    def show_refs(self) -> List[str]:
        # show-ref exits 1 when the repository has no refs yet
        result = self._run_git_command(["show-ref"], check=False)
        refs = []
        for line in result.stdout.split("\n"):
            parts = line.split(" ", 1)
            if len(parts) == 2:
                refs.append(parts[1].strip())
        return refs
