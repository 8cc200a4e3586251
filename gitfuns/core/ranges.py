"""Interpretation of the positional range argument of ``gitlog``."""

import re
import logging
from typing import Optional
from .types import CommitRange, RepositoryContext

logger = logging.getLogger(__name__)

# Two non-empty parts around the first ".."
RANGE_PATTERN = re.compile(r'^(.+?)\.\.(.+)$')
COUNT_PATTERN = re.compile(r'^-?[0-9]+$')

ALL_KEYWORD = "all"


def resolve_range(range_arg: Optional[str],
                  to_arg: Optional[str],
                  context: RepositoryContext,
                  vcs,
                  remote: str = "origin") -> CommitRange:
    """Turn the ``gitlog`` arguments into a commit range.

    The first matching rule wins:

    * ``A..B`` without a second argument splits at the first ``..``,
      so ``A..B..C`` gives ``A`` and ``B..C``.
    * ``all`` starts at the first root commit reported by git.
    * an integer ``N`` or ``-N`` without a second argument means the last N
      commits, written as ``-N`` with no range separator.
    * anything else is used as the start of the range, defaulting to the
      remote counterpart of the current branch.

    Malformed input is never rejected; it falls through to the last rule.
    """
    range_arg = range_arg or ""
    to_arg = to_arg or ""

    match = RANGE_PATTERN.match(range_arg)
    if match and not to_arg:
        commit_range = CommitRange(match.group(1), match.group(2))

    elif range_arg == ALL_KEYWORD:
        roots = vcs.root_commits()
        if len(roots) > 1:
            logger.debug("Found %d root commits, using %s", len(roots), roots[0])
        commit_range = CommitRange(roots[0] if roots else "", to_arg)

    elif COUNT_PATTERN.match(range_arg) and not to_arg:
        commit_range = CommitRange(f"-{range_arg.lstrip('-')}", "", separator="")

    else:
        from_ref = range_arg or f"{remote}/{context.branch}"
        commit_range = CommitRange(from_ref, to_arg)

    logger.debug("Resolved %r %r to %s", range_arg, to_arg, commit_range.revision)
    return commit_range
