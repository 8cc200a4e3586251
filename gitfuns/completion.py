"""Tab-completion of ref names."""

import re
from typing import Iterator, Sequence

_REF_KIND_PREFIX = re.compile(r'^.*refs/[^/]+/')

BASH_TEMPLATE = """\
_gitfuns_refs_complete() {{
  local cur="${{COMP_WORDS[COMP_CWORD]}}"
  COMPREPLY=( $(gitfuns complete "$cur" 2>/dev/null) )
  return 0
}}
complete -F _gitfuns_refs_complete {commands}
"""


def short_ref_name(ref: str) -> str:
    """Strip ``refs/<kind>/``: ``refs/remotes/origin/main`` -> ``origin/main``."""
    return _REF_KIND_PREFIX.sub("", ref, count=1)


def iter_ref_names(vcs, prefix: str = "") -> Iterator[str]:
    """Yield branch and tag short names starting with ``prefix``.

    Refs are read from the repository on every call, in git's order.
    """
    for ref in vcs.show_refs():
        if not _REF_KIND_PREFIX.match(ref):
            continue
        name = short_ref_name(ref)
        if name.startswith(prefix):
            yield name


def bash_completion_script(commands: Sequence[str] = ("gitlog", "gitmerge")) -> str:
    """Bash snippet completing ref names for the given commands."""
    return BASH_TEMPLATE.format(commands=" ".join(commands))
