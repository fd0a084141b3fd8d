"""Stub terminal for fsagent.

Answers a handful of command literals with canned output. Nothing is
ever executed.
"""

from fsagent.terminal.stub import TerminalStub

__all__ = ["TerminalStub"]
