"""Command line interface for gitfuns."""

from typing import Optional
import argparse
import logging
import os
import sys

from .completion import bash_completion_script, iter_ref_names
from .core.config import GitFunsConfig
from .core.formatter import LogFormatter
from .core.ranges import resolve_range
from .core.types import GitFunsError, MergeMode, NoRepositoryError, RepositoryContext
from .git.operations import GitOperations
from .prompt import ConsolePrompter
from .tool import GuidedMergeTool

logger = logging.getLogger(__name__)

MERGE_DESCRIPTION = "Merge or rebase the current branch into another branch."
MERGE_BRANCH_HELP = ("An optional branch name which specifies the branch into which "
                     "the current branch should be merged or rebased. (Default: master)")

LOG_EPILOG = """
Range arguments:
  A..B        commits reachable from B but not from A
  all         everything since the root commit
  5, -5       the last 5 commits
  REF [TO]    commits after REF (default: origin/<current branch>) up to TO or HEAD

Examples:
  %(prog)s                      # unpushed commits on the current branch
  %(prog)s -10                  # last ten commits
  %(prog)s master..feature      # commits on feature missing from master

Environment Variables:
  GITFUNS_VERBOSE   Set to enable debug logging
"""


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--remote',
        default='origin',
        help='Remote holding the published branches (default: %(default)s)',
        metavar='REMOTE'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )


def _add_log_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'range_arg',
        nargs='?',
        metavar='range',
        help='Range, "all", a commit count, or the ref to start from'
    )

    parser.add_argument(
        'to_arg',
        nargs='?',
        metavar='to',
        help='Ref to end at (default: HEAD)'
    )

    parser.add_argument(
        '--no-stats',
        action='store_true',
        help='Omit the per-commit diff statistics'
    )
    _add_common_arguments(parser)


def _add_merge_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'branch',
        nargs='?',
        help=MERGE_BRANCH_HELP
    )

    parser.add_argument(
        '-d',
        dest='delete_source',
        action='store_true',
        help='Delete the current branch after successfully merging or rebasing it.'
    )

    parser.add_argument(
        '-r',
        dest='rebase',
        action='store_true',
        help='Use `git rebase` instead of `git merge`.'
    )
    _add_common_arguments(parser)


def create_log_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Parser for the standalone ``gitlog`` command."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description='Print a colorized commit log with diff statistics.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=LOG_EPILOG
    )
    _add_log_arguments(parser)
    return parser


def create_merge_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Parser for the standalone ``gitmerge`` command."""
    parser = argparse.ArgumentParser(prog=prog, description=MERGE_DESCRIPTION)
    _add_merge_arguments(parser)
    return parser


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the ``gitfuns`` parser with one subcommand per helper."""
    parser = argparse.ArgumentParser(
        prog='gitfuns',
        description='Shell helpers for everyday git workflows'
    )
    subparsers = parser.add_subparsers(dest='command', metavar='command')
    subparsers.required = True

    log_parser = subparsers.add_parser(
        'log',
        help='Print a colorized commit log',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=LOG_EPILOG
    )
    _add_log_arguments(log_parser)
    log_parser.set_defaults(handler=run_log)

    merge_parser = subparsers.add_parser(
        'guided-merge',
        aliases=['merge'],
        help=MERGE_DESCRIPTION,
        description=MERGE_DESCRIPTION
    )
    _add_merge_arguments(merge_parser)
    merge_parser.set_defaults(handler=run_merge)

    complete_parser = subparsers.add_parser(
        'complete',
        help='List ref names starting with a prefix'
    )
    complete_parser.add_argument('prefix', nargs='?', default='')
    complete_parser.add_argument('--verbose', '-v', action='store_true', help=argparse.SUPPRESS)
    complete_parser.set_defaults(handler=run_complete)

    script_parser = subparsers.add_parser(
        'completion-script',
        help='Print a bash completion snippet for gitlog and gitmerge'
    )
    script_parser.add_argument('--verbose', '-v', action='store_true', help=argparse.SUPPRESS)
    script_parser.set_defaults(handler=run_completion_script)

    return parser


def run_log(args) -> int:
    config = GitFunsConfig.from_cli_args(args)
    git_ops = GitOperations()
    context = RepositoryContext.from_client(git_ops)
    commit_range = resolve_range(args.range_arg, args.to_arg, context, git_ops,
                                 remote=config.remote)

    output = LogFormatter(git_ops, config).format_log(commit_range)
    if output:
        print(output)
    return 0


def run_merge(args) -> int:
    config = GitFunsConfig.from_cli_args(args)
    tool = GuidedMergeTool(GitOperations(), ConsolePrompter(), config)
    result = tool.run(
        target_branch=args.branch,
        mode=MergeMode.REBASE if args.rebase else MergeMode.MERGE,
        delete_source=args.delete_source
    )
    logger.debug("Guided merge finished: %s", result.outcome.value)
    return 0 if result.succeeded else 1


def run_complete(args) -> int:
    for name in iter_ref_names(GitOperations(), args.prefix):
        print(name)
    return 0


def run_completion_script(args) -> int:
    print(bash_completion_script(), end="")
    return 0


def _dispatch(parsed_args) -> int:
    env_verbose = bool(os.environ.get('GITFUNS_VERBOSE', ""))
    setup_logging(getattr(parsed_args, 'verbose', False) or env_verbose)

    try:
        return parsed_args.handler(parsed_args)

    except NoRepositoryError as e:
        print(e, file=sys.stderr)
        return 1

    except GitFunsError as e:
        logger.debug("gitfuns error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        return 1

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def main(args: Optional[list] = None) -> int:
    """Main entry point for the ``gitfuns`` command."""
    parser = create_argument_parser()
    return _dispatch(parser.parse_args(args))


def log_main(args: Optional[list] = None) -> int:
    """Entry point for ``gitlog``."""
    parsed_args = create_log_parser(prog='gitlog').parse_args(args)
    parsed_args.handler = run_log
    return _dispatch(parsed_args)


def merge_main(args: Optional[list] = None) -> int:
    """Entry point for ``gitmerge``."""
    parsed_args = create_merge_parser(prog='gitmerge').parse_args(args)
    parsed_args.handler = run_merge
    return _dispatch(parsed_args)


if __name__ == '__main__':
    sys.exit(main())
