"""pytest common fixtures: in-memory Rich consoles and a clean environment."""

from __future__ import annotations

import io

import pytest
from rich.console import Console


class BufferedConsole:
    """Rich console writing to a StringIO, plus helpers to read it back."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        self.console = Console(file=self.buffer, width=200)

    def lines(self) -> list[str]:
        return self.buffer.getvalue().splitlines()


@pytest.fixture
def buffered() -> BufferedConsole:
    return BufferedConsole()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test without ORDER_DISPATCH_* variables or a stray `.env`."""

    for name in ("ORDER_DISPATCH_LOG_LEVEL", "ORDER_DISPATCH_SHOW_BANNER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
