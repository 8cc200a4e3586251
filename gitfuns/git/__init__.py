"""Version control clients."""

from .interface import VcsClient
from .operations import GitOperations
from .mock import MockGitClient

__all__ = ["VcsClient", "GitOperations", "MockGitClient"]
