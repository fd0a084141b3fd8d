"""Recursive directory walker.

Builds a nested list of :class:`Entry` for a directory beneath a fixed
root. Every per-entry filesystem query is guarded: an entry that vanishes
between listing and stat, or that cannot be stat'ed or listed, is skipped
with a warning instead of failing the whole traversal.

Known limitation: with no ``max_depth`` the full tree is materialized in
memory before it is returned. There is no streaming and no deadline.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from fsagent.domain.models import Entry, EntryType
from fsagent.tree.ignore import DEFAULT_IGNORE

logger = logging.getLogger(__name__)

# (st_dev, st_ino) pairs of the directories on the current descent path
_Ancestors = frozenset[tuple[int, int]]


class TreeWalker:
    """Enumerates directory trees relative to a fixed root.

    Args:
        root: Directory that all emitted ``path`` values are relative to.
        ignore: Base names to exclude, together with their descendants.
        max_depth: Deepest level to descend into (top-level children are
            depth 1). ``None`` means unbounded.
        follow_symlinks: Whether to descend into symlinked directories.
            Links are always classified by their target's type.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        ignore: Iterable[str] = DEFAULT_IGNORE,
        max_depth: int | None = None,
        follow_symlinks: bool = False,
    ) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self._root = Path(os.path.abspath(root))
        self._ignore = frozenset(ignore)
        self._max_depth = max_depth
        self._follow_symlinks = follow_symlinks

    @property
    def root(self) -> Path:
        return self._root

    @property
    def ignore(self) -> frozenset[str]:
        return self._ignore

    def walk(self, directory: str | os.PathLike[str] | None = None) -> list[Entry]:
        """Enumerate ``directory`` (the root when omitted).

        Raises:
            FileNotFoundError: If ``directory`` does not exist.
            NotADirectoryError: If ``directory`` is not a directory.
            ValueError: If ``directory`` lies outside the root or its
                children would lie deeper than ``max_depth``.
            OSError: If ``directory`` itself cannot be listed.
        """
        target = self._root if directory is None else Path(os.path.abspath(directory))
        if not target.exists():
            raise FileNotFoundError(f"No such directory: {target}")
        if not target.is_dir():
            raise NotADirectoryError(f"Not a directory: {target}")
        if not target.is_relative_to(self._root):
            raise ValueError(f"{target} is outside the root {self._root}")

        depth = len(target.relative_to(self._root).parts) + 1
        if self._max_depth is not None and depth > self._max_depth:
            raise ValueError(f"{target} is deeper than max_depth={self._max_depth}")
        st = target.stat()
        logger.debug("Walking %s", target)
        return self._walk_dir(target, depth, frozenset({(st.st_dev, st.st_ino)}))

    def _walk_dir(self, directory: Path, depth: int, ancestors: _Ancestors) -> list[Entry]:
        entries: list[Entry] = []
        with os.scandir(directory) as it:
            for dirent in it:
                if dirent.name in self._ignore:
                    continue
                entry = self._visit(dirent, depth, ancestors)
                if entry is not None:
                    entries.append(entry)
        return entries

    def _visit(self, dirent: os.DirEntry[str], depth: int, ancestors: _Ancestors) -> Entry | None:
        full = Path(dirent.path)
        rel = full.relative_to(self._root).as_posix()

        try:
            st = dirent.stat(follow_symlinks=True)
        except OSError as e:
            logger.warning("Skipping %s: %s", rel, e)
            return None

        if not stat.S_ISDIR(st.st_mode):
            return Entry(name=dirent.name, type=EntryType.FILE, path=rel)

        entry = Entry(name=dirent.name, type=EntryType.DIR, path=rel, children=[])
        if not self._should_descend(dirent, rel, depth, st, ancestors):
            return entry

        try:
            children = self._walk_dir(full, depth + 1, ancestors | {(st.st_dev, st.st_ino)})
        except OSError as e:
            logger.warning("Skipping %s: %s", rel, e)
            return None
        entry.children.extend(children)
        return entry

    def _should_descend(
        self,
        dirent: os.DirEntry[str],
        rel: str,
        depth: int,
        st: os.stat_result,
        ancestors: _Ancestors,
    ) -> bool:
        if self._max_depth is not None and depth >= self._max_depth:
            return False
        if dirent.is_symlink():
            if not self._follow_symlinks:
                return False
            if (st.st_dev, st.st_ino) in ancestors:
                logger.warning("Not descending into %s: symlink cycle", rel)
                return False
        return True
