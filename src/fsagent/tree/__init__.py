"""Recursive directory-tree enumeration.

The walker lists a directory, drops ignored names, classifies each
remaining child as a file or directory and recurses into directories,
producing a nested list of :class:`~fsagent.domain.models.Entry`.
"""

from fsagent.tree.ignore import DEFAULT_IGNORE
from fsagent.tree.walker import TreeWalker

__all__ = ["DEFAULT_IGNORE", "TreeWalker"]
