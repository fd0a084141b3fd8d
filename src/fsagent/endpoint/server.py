"""FastAPI HTTP server for the filesystem inspector.

    GET  /health             -> "OK"
    GET  /tree               -> {"root": "<basename>", "tree": [...]}
    GET  /file/<path>        -> {"path": "<path>", "contents": "..."}
    POST /terminal/execute   <- {"command": "pwd"}  -> {"output": "..."}

The terminal endpoint is a stub: it answers a few literal commands with
canned strings and never executes anything.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from fsagent.config.settings import Settings
from fsagent.domain.models import (
    ExecuteRequest,
    ExecuteResponse,
    FileContents,
    TreeResponse,
)
from fsagent.files.reader import FileReader, PathNotFoundError
from fsagent.terminal.stub import TerminalStub
from fsagent.tree.walker import TreeWalker

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

def create_app(
    settings: Settings | None = None,
    root: Path | str | None = None,
    walker: TreeWalker | None = None,
    reader: FileReader | None = None,
    terminal: TerminalStub | None = None,
) -> FastAPI:
    """Create the inspector application.

    Args:
        settings: Loaded configuration. Defaults are used when omitted.
        root: Traversal root, overriding ``settings.walker.root``.
        walker: Optional pre-configured TreeWalker (for testing).
        reader: Optional pre-configured FileReader (for testing).
        terminal: Optional pre-configured TerminalStub (for testing).
    """
    if settings is None:
        settings = Settings()
    root_path = Path(root).absolute() if root is not None else settings.walker.resolve_root()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Agent serving %s", app.state.root)
        yield
        logger.info("Agent stopped")

    app = FastAPI(
        title="fsagent",
        description="HTTP inspector for a local filesystem",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.root = root_path
    app.state.walker = walker or TreeWalker(
        root_path,
        ignore=settings.walker.ignore,
        max_depth=settings.walker.max_depth,
        follow_symlinks=settings.walker.follow_symlinks,
    )
    app.state.reader = reader or FileReader(root_path, encoding=settings.files.encoding)
    app.state.terminal = terminal or TerminalStub(root_path)

    @app.exception_handler(PathNotFoundError)
    async def path_not_found(request: Request, exc: PathNotFoundError) -> PlainTextResponse:
        logger.debug("404 for %s: %s", request.url.path, exc)
        return PlainTextResponse("Not found", status_code=404)

    @app.get("/health", response_class=PlainTextResponse)
    async def health_check() -> str:
        return "OK"

    @app.get("/tree", response_model=TreeResponse, response_model_exclude_none=True)
    def get_tree() -> TreeResponse:
        w: TreeWalker = app.state.walker
        return TreeResponse(root=app.state.root.name, tree=w.walk())

    @app.get("/file/{path:path}", response_model=FileContents)
    def get_file(path: str) -> FileContents:
        r: FileReader = app.state.reader
        return r.read(path)

    @app.post("/terminal/execute", response_model=ExecuteResponse)
    async def execute_command(request: ExecuteRequest | None = None) -> ExecuteResponse:
        t: TerminalStub = app.state.terminal
        command = request.command if request is not None else ""
        return ExecuteResponse(output=t.execute(command))

    return app


# ---------------------------------------------------------------------------
# Standalone entry point
# ---------------------------------------------------------------------------

def main(settings: Settings | None = None) -> None:
    """Run the inspector server."""
    if settings is None:
        settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    main()
