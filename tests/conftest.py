"""Pytest configuration for scrollback-view tests."""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from scrollback_view.models import LogLine


@pytest.fixture
def numbered_log():
    """25 plain lines with texts "1".."25"."""
    return [LogLine.plain(str(i)) for i in range(1, 26)]


@pytest.fixture
def no_env(monkeypatch):
    """Clear SCROLLBACK_* overrides so tests see defaults."""
    for name in ("SCROLLBACK_MAX_LINES", "SCROLLBACK_INSET", "SCROLLBACK_REFRESH"):
        monkeypatch.delenv(name, raising=False)
