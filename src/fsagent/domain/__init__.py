"""Domain models for fsagent.

All models use Pydantic v2 for validation and serialization.
"""

from fsagent.domain.models import (
    Entry,
    EntryType,
    ExecuteRequest,
    ExecuteResponse,
    FileContents,
    TreeResponse,
)

__all__ = [
    "Entry",
    "EntryType",
    "ExecuteRequest",
    "ExecuteResponse",
    "FileContents",
    "TreeResponse",
]
