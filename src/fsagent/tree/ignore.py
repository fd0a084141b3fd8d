"""Names excluded from every tree traversal."""

from __future__ import annotations

DEFAULT_IGNORE: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
    }
)
