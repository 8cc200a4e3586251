"""Tests for CLI functionality."""

import pytest
from unittest.mock import patch
from gitfuns.cli import (
    create_argument_parser, create_log_parser, create_merge_parser,
    main, log_main, merge_main
)
from gitfuns.core.types import NoRepositoryError
from gitfuns.git.mock import MockGitClient
from gitfuns.prompt import ScriptedPrompter


class TestArgumentParser:
    """Test CLI argument parsing."""

    def test_log_defaults(self):
        parser = create_argument_parser()
        args = parser.parse_args(["log"])

        assert args.range_arg is None
        assert args.to_arg is None
        assert args.no_stats is False
        assert args.remote == "origin"
        assert args.verbose is False

    def test_log_negative_count_is_positional(self):
        parser = create_argument_parser()
        args = parser.parse_args(["log", "-5"])

        assert args.range_arg == "-5"

    def test_log_two_positionals(self):
        args = create_log_parser().parse_args(["origin/main", "HEAD", "--no-stats"])

        assert args.range_arg == "origin/main"
        assert args.to_arg == "HEAD"
        assert args.no_stats is True

    def test_merge_defaults(self):
        args = create_argument_parser().parse_args(["guided-merge"])

        assert args.branch is None
        assert args.delete_source is False
        assert args.rebase is False

    def test_merge_flags(self):
        args = create_argument_parser().parse_args(["merge", "-d", "-r", "develop"])

        assert args.branch == "develop"
        assert args.delete_source is True
        assert args.rebase is True

    def test_merge_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            create_merge_parser(prog="gitmerge").parse_args(["-h"])

        assert excinfo.value.code == 0
        out = capsys.readouterr().out
        assert "usage: gitmerge [-h] [-d] [-r]" in out
        assert "Delete the current branch" in out

    def test_command_required(self):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args([])


class TestMain:
    """Test the entry points with an in-memory repository."""

    @patch('gitfuns.cli.GitOperations')
    def test_log(self, mock_git_class, capsys):
        vcs = MockGitClient(log_output={"A..B": " D1 h1 Alice  Fix bug\n"})
        mock_git_class.return_value = vcs

        assert main(["log", "A..B"]) == 0

        assert capsys.readouterr().out == " D1 h1 Alice  Fix bug\n"
        assert ("log", ("A..B", True)) in vcs.calls

    @patch('gitfuns.cli.GitOperations')
    def test_gitlog_count(self, mock_git_class):
        vcs = MockGitClient()
        mock_git_class.return_value = vcs

        assert log_main(["-3", "--no-stats"]) == 0

        assert ("log", ("-3", False)) in vcs.calls

    @patch('gitfuns.cli.GitOperations')
    def test_log_default_range(self, mock_git_class):
        vcs = MockGitClient(current_branch="topic")
        mock_git_class.return_value = vcs

        assert log_main([]) == 0

        assert ("log", ("origin/topic..", True)) in vcs.calls

    @patch('gitfuns.cli.GitOperations')
    def test_log_git_error(self, mock_git_class, capsys):
        mock_git_class.return_value = MockGitClient(fail_on={"log"})

        assert main(["log", "nope"]) == 1

        assert "Error:" in capsys.readouterr().err

    @patch('gitfuns.cli.GitOperations')
    def test_no_repository(self, mock_git_class, capsys):
        mock_git_class.side_effect = NoRepositoryError("No git repository found")

        assert merge_main([]) == 1

        assert "No git repository found" in capsys.readouterr().err

    @patch('gitfuns.cli.ConsolePrompter')
    @patch('gitfuns.cli.GitOperations')
    def test_merge_success(self, mock_git_class, mock_prompter_class):
        vcs = MockGitClient(log_output={"origin/master..origin/feature": " c1\n"})
        mock_git_class.return_value = vcs
        mock_prompter_class.return_value = ScriptedPrompter(["y"])

        assert main(["merge"]) == 0

        assert ("merge", ("feature",)) in vcs.calls

    @patch('gitfuns.cli.ConsolePrompter')
    @patch('gitfuns.cli.GitOperations')
    def test_merge_declined_exits_zero(self, mock_git_class, mock_prompter_class):
        vcs = MockGitClient(log_output={"origin/dev..origin/feature": " c1\n"})
        mock_git_class.return_value = vcs
        mock_prompter_class.return_value = ScriptedPrompter(["n"])

        assert merge_main(["dev"]) == 0

        assert "checkout" not in vcs.operations()

    @patch('gitfuns.cli.ConsolePrompter')
    @patch('gitfuns.cli.GitOperations')
    def test_merge_failure_exits_nonzero(self, mock_git_class, mock_prompter_class):
        vcs = MockGitClient(log_output={"origin/master..origin/feature": " c1\n"},
                            fail_on={"rebase"})
        mock_git_class.return_value = vcs
        mock_prompter_class.return_value = ScriptedPrompter()

        assert merge_main(["-r"]) == 1

    @patch('gitfuns.cli.GitOperations')
    def test_complete(self, mock_git_class, capsys):
        mock_git_class.return_value = MockGitClient(
            refs=["refs/heads/main", "refs/heads/feature", "refs/tags/v1"]
        )

        assert main(["complete", "f"]) == 0

        assert capsys.readouterr().out == "feature\n"

    def test_completion_script(self, capsys):
        assert main(["completion-script"]) == 0

        assert "complete -F _gitfuns_refs_complete gitlog gitmerge" in capsys.readouterr().out

    @patch.dict('os.environ', {'GITFUNS_VERBOSE': '1'})
    @patch('gitfuns.cli.setup_logging')
    @patch('gitfuns.cli.GitOperations')
    def test_verbose_environment(self, mock_git_class, mock_setup_logging):
        mock_git_class.return_value = MockGitClient()

        main(["log"])

        mock_setup_logging.assert_called_once_with(True)

    @patch('gitfuns.cli.GitOperations')
    def test_keyboard_interrupt(self, mock_git_class, capsys):
        mock_git_class.side_effect = KeyboardInterrupt

        assert main(["log"]) == 1

        assert "Interrupted by user." in capsys.readouterr().err
