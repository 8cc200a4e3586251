"""Guided merge of the current branch into a target branch."""

import logging
from typing import Optional
from .core.config import GitFunsConfig
from .core.formatter import Ansi, LogFormatter, count_entries
from .core.types import (
    CommitRange, MergeMode, MergeOutcome, MergeResult, RepositoryContext,
    WorkflowState, GitOperationError
)
from .git.interface import VcsClient
from .prompt import Prompter

logger = logging.getLogger(__name__)


class GuidedMergeTool:
    """Merges or rebases the checked-out branch into a target branch.

    The run is linear: offer to push unpushed commits, bail out when there is
    nothing to merge, stash uncommitted changes, confirm, then checkout the
    target, pull, merge or rebase and push. A stash made along the way is
    restored on every exit except a failed merge, where the user is told to
    restore it by hand once the conflict is resolved.
    """

    def __init__(self,
                 vcs: VcsClient,
                 prompter: Prompter,
                 config: Optional[GitFunsConfig] = None):
        self.vcs = vcs
        self.prompter = prompter
        self.config = config or GitFunsConfig()
        self.formatter = LogFormatter(vcs, self.config)

    def run(self,
            target_branch: Optional[str] = None,
            mode: MergeMode = MergeMode.MERGE,
            delete_source: bool = False) -> MergeResult:
        """Run the guided merge and report what happened."""
        self.vcs.ensure_repository()
        context = RepositoryContext.from_client(self.vcs)
        state = WorkflowState(
            current_branch=context.branch,
            target_branch=target_branch or self.config.default_target_branch,
            mode=mode,
            delete_source_branch=delete_source,
            has_uncommitted_changes=self.vcs.has_uncommitted_changes(),
            repo_path=context.path
        )
        logger.info("Guided %s of %s into %s in %s", mode.verb, state.current_branch,
                    state.target_branch, context.path)

        self._offer_push(state)

        mergeables = self._query_log(CommitRange(
            self._remote_ref(state.target_branch),
            self._remote_ref(state.current_branch)
        ))
        state.mergeable_count = count_entries(mergeables)
        if state.mergeable_count == 0:
            print(f"Nothing to {mode.verb} from {state.current_branch} "
                  f"to {self._remote_ref(state.target_branch)}")
            return MergeResult(MergeOutcome.NOTHING_TO_DO, state)

        if state.has_uncommitted_changes and not self._stash(state):
            return MergeResult(MergeOutcome.FAILED, state)

        print(f"Commits to be {mode.past_tense}:")
        print(mergeables)
        print()
        if not self.prompter.confirm(
                f"Really {mode.verb} {state.current_branch} into {state.target_branch}?"):
            print("Going back to previous working state...")
            restored = self._restore_stash(state)
            return MergeResult(MergeOutcome.DECLINED, state, stash_restored=restored)

        return self._execute(state)

    def _remote_ref(self, branch: str) -> str:
        return f"{self.config.remote}/{branch}"

    def _query_log(self, commit_range: CommitRange) -> str:
        """Formatted log for a range; an unknown ref reads as no commits."""
        try:
            return self.formatter.format_log(commit_range)
        except GitOperationError as e:
            logger.warning("Could not list commits in %s: %s", commit_range.revision, e)
            return ""

    def _offer_push(self, state: WorkflowState) -> None:
        unpushed = self._query_log(CommitRange(
            self._remote_ref(state.current_branch), state.current_branch
        ))
        state.unpushed_count = count_entries(unpushed)
        if state.unpushed_count == 0:
            return

        print(f"You currently have {state.unpushed_count} unpushed commits "
              f"on the branch {state.current_branch}:")
        print(unpushed)
        print()
        if not self.prompter.confirm(f"Push commits before {state.mode.gerund}?"):
            logger.info("Not pushing %s", state.current_branch)
            return

        try:
            self.vcs.push()
        except GitOperationError as e:
            print(f"{Ansi.BOLD}{Ansi.RED}Error pushing {state.current_branch}:{Ansi.RESET} {e}")

    def _stash(self, state: WorkflowState) -> bool:
        print("You currently have uncommitted changes:")
        print(self.vcs.diff_stat())
        try:
            state.stashed = self.vcs.stash()
        except GitOperationError as e:
            print(f"{Ansi.BOLD}{Ansi.RED}Error stashing your changes, "
                  f"nothing has been {state.mode.past_tense}:{Ansi.RESET} {e}")
            return False

        if not state.stashed:
            # The stash may still hold older entries of the user; never pop those
            logger.info("Nothing was stashed, continuing without a stash")
            print("There was nothing to stash after all.")
            print()
            return True

        print(f"I've {Ansi.BOLD}stashed{Ansi.RESET} these changes for you, "
              "and will unstash them again if nothing goes awry!")
        print(f"You can also unstash them manually with "
              f"`{Ansi.BOLD}git stash pop{Ansi.RESET}` if something goes wrong.")
        print()
        return True

    def _restore_stash(self, state: WorkflowState) -> bool:
        if not state.stashed:
            return False
        try:
            self.vcs.stash_pop()
        except GitOperationError as e:
            print(f"{Ansi.YELLOW}Could not restore your stashed changes ({e}). "
                  f"Use '{Ansi.BOLD}git stash pop{Ansi.NORMAL_INTENSITY}' "
                  f"to unstash them!{Ansi.RESET}")
            return False
        return True

    def _execute(self, state: WorkflowState) -> MergeResult:
        mode = state.mode
        cur, target = state.current_branch, state.target_branch
        print(f"Preparing to {mode.verb} {cur} into {target}...")

        try:
            self.vcs.checkout(target)
            self.vcs.pull()
            if mode is MergeMode.REBASE:
                self.vcs.rebase(cur)
            else:
                self.vcs.merge(cur)
            self.vcs.push(force=mode is MergeMode.REBASE)
        except GitOperationError as e:
            logger.error("Guided %s failed: %s", mode.verb, e)
            print()
            print(f"{Ansi.BOLD}{Ansi.RED}Error {mode.gerund} {cur} into {target}."
                  f"{Ansi.NORMAL_INTENSITY} Staying in {target} for manual conflict "
                  f"resolving.{Ansi.RESET}")
            if state.stashed:
                print(f"{Ansi.YELLOW}Your working state has been {Ansi.BOLD}STASHED"
                      f"{Ansi.NORMAL_INTENSITY}. Use '{Ansi.BOLD}git stash pop"
                      f"{Ansi.NORMAL_INTENSITY}' to unstash it!{Ansi.RESET}")
            return MergeResult(MergeOutcome.FAILED, state)

        print()
        print(f"{Ansi.GREEN}Successfully {mode.past_tense} {cur} into {target}.{Ansi.RESET}"
              " Going back to previous working state...")
        restored = self._restore_stash(state)

        if not state.delete_source_branch:
            try:
                self.vcs.checkout(cur)
            except GitOperationError as e:
                print(f"{Ansi.YELLOW}Could not check out {cur} again: {e}{Ansi.RESET}")
            return MergeResult(MergeOutcome.SUCCESS, state, stash_restored=restored)

        deleted = self._delete_source(state)
        return MergeResult(MergeOutcome.SUCCESS, state,
                           stash_restored=restored, source_deleted=deleted)

    def _delete_source(self, state: WorkflowState) -> bool:
        cur, target = state.current_branch, state.target_branch
        try:
            self.vcs.checkout(target)
            self.vcs.delete_branch(cur)
            self.vcs.delete_remote_branch(self.config.remote, cur)
        except GitOperationError as e:
            logger.warning("Deleting %s failed: %s", cur, e)
            print(f"{Ansi.BOLD}{Ansi.RED}Error deleting branch {cur}.{Ansi.RESET}")
            return False

        print(f"{Ansi.GREEN}Changed to {target} and deleted branch {cur}.{Ansi.RESET}")
        return True
