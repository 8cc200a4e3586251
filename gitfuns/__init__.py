"""
gitfuns - shell helpers for everyday git workflows

A colorized commit log over flexible ranges and a guided merge/rebase of the
current branch with prompts for unpushed commits and uncommitted changes.
"""

__version__ = "1.0.0"

from .core.config import GitFunsConfig
from .core.types import (
    CommitRange, RepositoryContext, MergeMode, MergeOutcome, MergeResult,
    WorkflowState, GitFunsError, GitOperationError, NoRepositoryError
)
from .core.ranges import resolve_range
from .core.formatter import LogFormatter, collapse_stats
from .git.interface import VcsClient
from .git.operations import GitOperations
from .git.mock import MockGitClient
from .prompt import Prompter, ConsolePrompter, ScriptedPrompter, is_negative_answer
from .completion import iter_ref_names
from .tool import GuidedMergeTool

__all__ = [
    "GitFunsConfig",
    "CommitRange",
    "RepositoryContext",
    "MergeMode",
    "MergeOutcome",
    "MergeResult",
    "WorkflowState",
    "GitFunsError",
    "GitOperationError",
    "NoRepositoryError",
    "resolve_range",
    "LogFormatter",
    "collapse_stats",
    "VcsClient",
    "GitOperations",
    "MockGitClient",
    "Prompter",
    "ConsolePrompter",
    "ScriptedPrompter",
    "is_negative_answer",
    "iter_ref_names",
    "GuidedMergeTool"
]
