"""Colorized one-line-per-commit log output."""

import re
import logging
from typing import Optional
from .config import GitFunsConfig
from .types import CommitRange

logger = logging.getLogger(__name__)


class Ansi:
    """Escape sequences used in terminal output."""
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    NORMAL_INTENSITY = "\x1b[22m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    CYAN = "\x1b[36m"
    DEFAULT_FG = "\x1b[39m"
    BRIGHT_MAGENTA = "\x1b[95m"


def pretty_placeholder(code: str) -> str:
    """Spell an escape sequence the way git's --pretty format expects it."""
    return code.replace("\x1b", "%x1b")


_DATE_COLOR = pretty_placeholder(Ansi.BRIGHT_MAGENTA)
_HASH_COLOR = pretty_placeholder(Ansi.YELLOW)
_AUTHOR_COLOR = pretty_placeholder(Ansi.CYAN)
_RESET = pretty_placeholder(Ansi.RESET)

_STAT_LINE = re.compile(r'\n ([0-9]+ files? changed.+)(?:\n+|\Z)')
_FILES_CHANGED = re.compile(r'([0-9]+) file(s?) changed')
_INSERTIONS = re.compile(r'([0-9]+) insertions?\(\+\)')
_DELETIONS = re.compile(r'([0-9]+) deletions?\(-\)')


def collapse_stats(text: str) -> str:
    """Fold ``--shortstat`` summaries onto the commit lines above them.

    " 2 files changed, 3 insertions(+), 1 deletion(-)" becomes a dimmed
    "2 files, +3, -1" with the counts colored green and red.
    """
    text = _STAT_LINE.sub(lambda m: f"   {Ansi.DIM}{m.group(1)}{Ansi.RESET}\n", text)
    text = _FILES_CHANGED.sub(r'\1 file\2', text)
    text = _INSERTIONS.sub(lambda m: f"{Ansi.GREEN}+{m.group(1)}{Ansi.DEFAULT_FG}", text)
    text = _DELETIONS.sub(lambda m: f"{Ansi.RED}-{m.group(1)}{Ansi.DEFAULT_FG}", text)
    return text


def count_entries(text: str) -> int:
    """Number of non-empty lines, one per commit once stats are collapsed."""
    return sum(1 for line in text.split("\n") if line)


class LogFormatter:
    """Builds and runs the formatted ``git log`` query."""

    def __init__(self, vcs, config: Optional[GitFunsConfig] = None):
        self.vcs = vcs
        self.config = config or GitFunsConfig()

    @property
    def pretty_format(self) -> str:
        author = f"%<({self.config.author_width},trunc)%an"
        message = f"%<({self.config.message_width},trunc)%s"
        return (f" {_DATE_COLOR}%ad{_RESET}"
                f" {_HASH_COLOR}%h{_RESET}"
                f" {_AUTHOR_COLOR}{author}{_RESET}"
                f"  {message}")

    def format_log(self, commit_range: CommitRange,
                   include_stats: Optional[bool] = None) -> str:
        """Return the formatted log for a range.

        Git errors (unknown refs and the like) propagate unchanged as
        ``GitOperationError``.
        """
        if include_stats is None:
            include_stats = self.config.include_stats

        logger.debug("Formatting log for %s (stats=%s)", commit_range.revision, include_stats)
        text = self.vcs.log(
            commit_range.revision,
            self.pretty_format,
            date_format=self.config.date_format,
            shortstat=include_stats
        )

        if include_stats:
            text = collapse_stats(text)
        return text.rstrip("\n")
