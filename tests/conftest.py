"""Test configuration to ensure project package import resolution.

Adds the repository root to sys.path so `import anylog` works without an
editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from anylog.core.registry import Registry  # noqa: E402


class RecordingSink:
    """Console stand-in that records (method, args) for the methods it has."""

    def __init__(self, *methods: str):
        self.calls: list[tuple[str, tuple]] = []
        for name in methods:
            setattr(self, name, self._recorder(name))

    def _recorder(self, name):
        def record(*args):
            self.calls.append((name, args))

        record.__name__ = name
        return record


@pytest.fixture
def make_sink():
    return RecordingSink


@pytest.fixture
def sink():
    return RecordingSink("error", "warn", "info", "log", "debug", "trace")


@pytest.fixture
def registry(sink):
    return Registry(sink=sink)
