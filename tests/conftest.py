"""Shared pytest fixtures and test helpers for repval tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from repval.infrastructure.stream import InputStream
from repval.output.console import create_console
from repval.services.reader import TypedReader


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no REPVAL_* overrides.

    Keeps a stray ``repval.toml`` or environment variable from leaking
    into settings discovery.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("REPVAL_CONFIG", "REPVAL_ELEMENT__KIND", "REPVAL_VERBOSE", "REPVAL_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    """CLI invocations reconfigure the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def console() -> Console:
    """Colorless StringIO-backed console."""
    return create_console(no_color=True)


@pytest.fixture
def make_reader(console: Console) -> Callable[[str], TypedReader]:
    """Build a TypedReader over an in-memory input text."""

    def _make(text: str, *, discard_limit: int = 80) -> TypedReader:
        return TypedReader(InputStream.from_text(text), console, discard_limit=discard_limit)

    return _make

