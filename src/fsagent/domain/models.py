"""Core domain models for the fsagent service.

These models describe the data flowing out of the HTTP API: tree entries
produced by the walker, file contents produced by the reader, and the
request/response envelopes of the terminal stub.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class EntryType(str, enum.Enum):
    """Classification of a filesystem entry."""

    FILE = "file"
    DIR = "dir"


# ---------------------------------------------------------------------------
# Tree Models
# ---------------------------------------------------------------------------


class Entry(BaseModel):
    """One node in an enumerated directory tree.

    ``children`` is ``None`` for files and a (possibly empty) list for
    directories. Serialize with ``exclude_none=True`` so that files carry
    no ``children`` key at all.
    """

    name: str = Field(description="Base name of the file or directory")
    type: EntryType = Field(description="Whether the entry is a file or a directory")
    path: str = Field(description="Location relative to the root, forward-slash separated")
    children: list[Entry] | None = Field(
        default=None, description="Child entries, present only for directories"
    )

    @property
    def is_dir(self) -> bool:
        return self.type is EntryType.DIR


class TreeResponse(BaseModel):
    root: str = Field(description="Base name of the traversal root")
    tree: list[Entry] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# File Models
# ---------------------------------------------------------------------------


class FileContents(BaseModel):
    path: str = Field(description="Path as requested, relative to the root")
    contents: str = Field(description="Full text of the file")


# ---------------------------------------------------------------------------
# Terminal Models
# ---------------------------------------------------------------------------


class ExecuteRequest(BaseModel):
    command: str = Field(default="", description="Command line to 'execute'")


class ExecuteResponse(BaseModel):
    output: str
