"""fsagent -- HTTP inspector for a local filesystem.

Exposes a small FastAPI service that enumerates a directory tree, reads
single files beneath a fixed root, and answers a stub terminal endpoint
with canned output.
"""

__version__ = "0.1.0"
