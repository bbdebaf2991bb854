"""Pytest configuration and shared fixtures."""

import io

import pytest
from rich.console import Console

from core.domain.models import DemoFixtures


class CapturedConsole:
    """A Rich console writing plain text into memory."""

    def __init__(self):
        self.buffer = io.StringIO()
        self.console = Console(file=self.buffer, width=120, color_system=None, force_terminal=False)

    @property
    def text(self):
        return self.buffer.getvalue()


@pytest.fixture
def captured():
    return CapturedConsole()


@pytest.fixture
def fixtures():
    return DemoFixtures()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep developer env vars and `.env` files out of the tests."""
    for name in ("CURRENCY", "DEBUG_DUMP", "FIXTURES_PATH", "SHOW_BANNER", "LOG_LEVEL"):
        monkeypatch.delenv(f"PATTERN_DEMOS_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
