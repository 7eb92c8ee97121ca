# File: tests/conftest.py
# Purpose: Shared pytest fixtures for stream-json decoding tests
import io

import pytest

from claude_stream.config import get_settings


@pytest.fixture()
def settings_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's shell and any .env file"""
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "LOG_DIR", "LOG_JSON", "COLOR", "NOTICE_STREAM", "READ_CHUNK_SIZE"):
        monkeypatch.delenv(f"CLAUDE_STREAM_{name}", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture()
def text_streams():
    return io.StringIO(), io.StringIO()
