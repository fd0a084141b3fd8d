"""Command-line interface for fsagent.

Provides the main entry point for serving the HTTP API or printing a
directory tree from the shell.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="fsagent",
        description="HTTP inspector for a local filesystem",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/fsagent.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Traversal root (default: walker.root from config, else the working directory)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    tree_parser = subparsers.add_parser("tree", help="Print the directory tree as JSON")
    tree_parser.add_argument(
        "directory", nargs="?", type=Path, default=None,
        help="Directory beneath the root to enumerate (default: the root)",
    )
    tree_parser.add_argument(
        "--max-depth", type=int, default=None,
        help="Deepest level to descend into",
    )

    return parser.parse_args(argv)


def _print_tree(settings, args) -> int:
    """Walk the configured root and print the result."""
    from fsagent.domain.models import TreeResponse
    from fsagent.tree.walker import TreeWalker

    root = settings.walker.resolve_root()
    directory = root / args.directory if args.directory is not None else None
    try:
        walker = TreeWalker(
            root,
            ignore=settings.walker.ignore,
            max_depth=(
                args.max_depth if args.max_depth is not None else settings.walker.max_depth
            ),
            follow_symlinks=settings.walker.follow_symlinks,
        )
        tree = walker.walk(directory)
    except (OSError, ValueError) as e:
        print(f"fsagent: {e}", file=sys.stderr)
        return 1

    response = TreeResponse(root=root.name, tree=tree)
    print(json.dumps(response.model_dump(mode="json", exclude_none=True), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the fsagent CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return 0

    from fsagent.config.settings import load_settings
    from fsagent.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"
    if args.root is not None:
        settings.walker.root = args.root

    setup_logging(settings.logging)

    if args.command == "serve":
        from fsagent.endpoint.server import create_app
        import uvicorn

        host = args.host or settings.server.host
        port = args.port or settings.server.port
        logger.info("Starting server on %s:%d", host, port)
        uvicorn.run(create_app(settings), host=host, port=port)

    elif args.command == "tree":
        return _print_tree(settings, args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
