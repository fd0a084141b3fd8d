"""Canned-output terminal.

``TerminalStub`` looks like a command executor but only pattern-matches a
few exact command strings. It never spawns a process or touches the
filesystem; a real executor would need a sandboxing design of its own.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LS_OUTPUT = "index.ts\npackage.json\nignore.ts\ntest"


class TerminalStub:
    """Answers ``pwd``, ``ls`` and ``whoami``; echoes anything else."""

    def __init__(
        self,
        root: str | os.PathLike[str],
        user: str = "user",
        ls_output: str = DEFAULT_LS_OUTPUT,
    ) -> None:
        self._root = Path(os.path.abspath(root))
        self._user = user
        self._ls_output = ls_output
        self._handlers: dict[str, Callable[[], str]] = {
            "pwd": self._pwd,
            "ls": self._ls,
            "whoami": self._whoami,
        }

    def execute(self, command: str) -> str:
        """Return the canned output for ``command``."""
        handler = self._handlers.get(command)
        if handler is None:
            logger.debug("Unrecognized command: %r", command)
            return f"Command '{command}' executed successfully"
        return handler()

    def _pwd(self) -> str:
        return str(self._root)

    def _ls(self) -> str:
        return self._ls_output

    def _whoami(self) -> str:
        return self._user
