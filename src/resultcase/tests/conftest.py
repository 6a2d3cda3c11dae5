"""Shared fixtures: isolated settings and captured log output."""

from __future__ import annotations

import os
from io import StringIO
from typing import Iterator

import pytest

from resultcase.config import clear_settings_cache
from resultcase.observability import configure_logging


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip RESULTCASE_* variables and silence logging for every test."""
    for key in [k for k in os.environ if k.startswith("RESULTCASE_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    configure_logging(format="none", level="INFO")
    yield
    clear_settings_cache()


@pytest.fixture
def log_buffer() -> StringIO:
    """Route DEBUG-level JSON log lines into an in-memory buffer."""
    buf = StringIO()
    configure_logging(format="json", level="DEBUG", output=buf)
    return buf
