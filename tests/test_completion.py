"""Tests for ref name completion."""

import inspect
from gitfuns import MockGitClient, iter_ref_names
from gitfuns.completion import bash_completion_script, short_ref_name


REFS = [
    "refs/heads/main",
    "refs/heads/feature/login",
    "refs/remotes/origin/main",
    "refs/tags/v1.0",
    "refs/stash",
]


class TestRefCompletion:
    """Test the completion provider."""

    def setup_method(self):
        self.vcs = MockGitClient(refs=REFS)

    def test_short_ref_name(self):
        assert short_ref_name("refs/heads/feature/login") == "feature/login"
        assert short_ref_name("refs/remotes/origin/main") == "origin/main"
        assert short_ref_name("refs/tags/v1.0") == "v1.0"

    def test_all_refs(self):
        names = list(iter_ref_names(self.vcs))

        assert names == ["main", "feature/login", "origin/main", "v1.0"]

    def test_prefix_filter(self):
        assert list(iter_ref_names(self.vcs, "ma")) == ["main"]
        assert list(iter_ref_names(self.vcs, "origin/")) == ["origin/main"]
        assert list(iter_ref_names(self.vcs, "zzz")) == []

    def test_is_lazy(self):
        names = iter_ref_names(self.vcs, "")

        assert inspect.isgenerator(names)
        assert "show_refs" not in self.vcs.operations()

    def test_recomputed_on_each_call(self):
        assert list(iter_ref_names(self.vcs, "release")) == []

        self.vcs.refs.append("refs/heads/release/2.0")

        assert list(iter_ref_names(self.vcs, "release")) == ["release/2.0"]

    def test_bash_completion_script(self):
        script = bash_completion_script()

        assert 'local cur="${COMP_WORDS[COMP_CWORD]}"' in script
        assert 'gitfuns complete "$cur"' in script
        assert script.rstrip().endswith("complete -F _gitfuns_refs_complete gitlog gitmerge")
