"""Shared test fixtures for the fsagent test suite.

Provides a small on-disk directory tree with ignored directories at
several levels.
"""

from __future__ import annotations

from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Filesystem Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_root(tmp_path: Path) -> Path:
    """A project-like tree under ``tmp_path/project``.

    project/
        README.md
        src/
            main.py
            lib/
                util.py
        docs/
            node_modules/
                dep.js
            guide.txt
        empty/
        node_modules/
            pkg/
                index.js
        .git/
            HEAD
    """
    root = tmp_path / "project"
    (root / "src" / "lib").mkdir(parents=True)
    (root / "docs" / "node_modules").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / ".git").mkdir()

    (root / "README.md").write_text("# project\n")
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "src" / "lib" / "util.py").write_text("X = 1\n")
    (root / "docs" / "guide.txt").write_text("guide\n")
    (root / "docs" / "node_modules" / "dep.js").write_text("module.exports = {}\n")
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = {}\n")
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return root
