"""Tests for the fsagent command-line interface."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from fsagent.cli import main, parse_args


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger("fsagent")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def no_config(tmp_path: Path) -> list[str]:
    return ["-c", str(tmp_path / "nonexistent.yaml")]


class TestParseArgs:
    def test_serve_options(self) -> None:
        """serve should accept bind overrides."""
        args = parse_args(["serve", "--port", "8000"])
        assert args.command == "serve"
        assert args.port == 8000
        assert args.host is None

    def test_tree_directory(self) -> None:
        """tree should accept a directory, root and depth."""
        args = parse_args(["--root", "/srv", "tree", "sub", "--max-depth", "2"])
        assert args.root == Path("/srv")
        assert args.directory == Path("sub")
        assert args.max_depth == 2


class TestTreeCommand:
    def test_prints_tree_json(
        self, sample_root: Path, no_config: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """tree should print the root envelope as JSON."""
        assert main([*no_config, "--root", str(sample_root), "tree"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["root"] == "project"
        assert sorted(e["name"] for e in data["tree"]) == ["README.md", "docs", "empty", "src"]

    def test_max_depth(
        self, sample_root: Path, no_config: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--max-depth should stop descent below the limit."""
        main([*no_config, "--root", str(sample_root), "tree", "--max-depth", "1"])
        data = json.loads(capsys.readouterr().out)
        src = next(e for e in data["tree"] if e["name"] == "src")
        assert src["children"] == []

    def test_missing_directory(
        self, sample_root: Path, no_config: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A missing directory should exit 1 with a message."""
        code = main([*no_config, "--root", str(sample_root), "tree", str(sample_root / "nope")])
        assert code == 1
        assert "No such directory" in capsys.readouterr().err

    def test_zero_max_depth_rejected(
        self, sample_root: Path, no_config: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--max-depth 0 should exit 1 instead of falling back to unbounded."""
        code = main([*no_config, "--root", str(sample_root), "tree", "--max-depth", "0"])
        assert code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "max_depth" in captured.err

    def test_directory_below_depth_limit(
        self, sample_root: Path, no_config: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A directory deeper than --max-depth allows should exit 1."""
        code = main([*no_config, "--root", str(sample_root), "tree", "src", "--max-depth", "1"])
        assert code == 1
        assert "max_depth" in capsys.readouterr().err


class TestServeCommand:
    def test_serve_runs_uvicorn(self, sample_root: Path, no_config: list[str]) -> None:
        """serve should hand the app to uvicorn."""
        with patch("uvicorn.run") as run:
            main([*no_config, "--root", str(sample_root), "serve", "--port", "8123"])
        run.assert_called_once()
        app = run.call_args.args[0]
        assert app.state.root == sample_root
        assert run.call_args.kwargs == {"host": "0.0.0.0", "port": 8123}
