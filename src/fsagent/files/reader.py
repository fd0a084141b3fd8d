"""Single-file reader confined to a root directory.

Requested paths are joined onto the root and canonicalized before any
read; anything that resolves outside the root (``..`` segments, absolute
paths, symlinks pointing elsewhere) is reported as not found.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fsagent.domain.models import FileContents

logger = logging.getLogger(__name__)


class FileReader:
    """Reads whole text files beneath ``root``.

    Files are decoded with ``encoding``; undecodable bytes are replaced
    with U+FFFD, so binary files come back garbled rather than failing.
    """

    def __init__(self, root: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        self._root = Path(os.path.realpath(root))
        self._encoding = encoding

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, rel_path: str) -> Path:
        """Map a root-relative path to a canonical regular file.

        Raises:
            PathNotFoundError: If the path is empty, escapes the root, or
                does not name an existing regular file.
        """
        if not rel_path:
            raise PathNotFoundError(rel_path, "empty path")

        try:
            resolved = Path(os.path.realpath(self._root / rel_path))
        except (OSError, ValueError) as e:
            raise PathNotFoundError(rel_path, str(e)) from e
        if resolved == self._root or not resolved.is_relative_to(self._root):
            logger.warning("Rejected path outside root: %r", rel_path)
            raise PathNotFoundError(rel_path, "outside root")
        if not resolved.is_file():
            raise PathNotFoundError(rel_path, "not a regular file")
        return resolved

    def read(self, rel_path: str) -> FileContents:
        """Read the file at ``rel_path`` as text, newlines untranslated."""
        resolved = self.resolve(rel_path)
        try:
            with open(resolved, encoding=self._encoding, errors="replace", newline="") as f:
                contents = f.read()
        except OSError as e:
            raise PathNotFoundError(rel_path, str(e)) from e
        logger.debug("Read %d chars from %s", len(contents), resolved)
        return FileContents(path=rel_path, contents=contents)


class PathNotFoundError(Exception):
    """Raised when a requested path cannot be served."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path!r}: {reason}" if reason else repr(path))
