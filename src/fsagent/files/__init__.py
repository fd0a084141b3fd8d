"""Root-confined file reading for fsagent."""

from fsagent.files.reader import FileReader, PathNotFoundError

__all__ = ["FileReader", "PathNotFoundError"]
