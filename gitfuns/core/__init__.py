"""Core functionality for gitfuns."""

from .config import GitFunsConfig
from .types import (
    CommitRange, RepositoryContext, MergeMode, MergeOutcome, MergeResult,
    WorkflowState, GitFunsError, GitOperationError, NoRepositoryError
)
from .ranges import resolve_range
from .formatter import Ansi, LogFormatter, collapse_stats, count_entries

__all__ = [
    "GitFunsConfig",
    "CommitRange", "RepositoryContext", "MergeMode", "MergeOutcome",
    "MergeResult", "WorkflowState",
    "GitFunsError", "GitOperationError", "NoRepositoryError",
    "resolve_range",
    "Ansi", "LogFormatter", "collapse_stats", "count_entries"
]
