"""Shared test fixtures for ccline."""

from pathlib import Path

import orjson
import pytest

_CREDENTIAL_ENV_VARS = (
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_AUTH_TOKEN",
    "ANTHROPIC_BASE_URL",
    "INFO_URL",
    "PARCKY_JWT_TOKEN",
    "CCLINE_DEBUG",
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch) -> Path:
    """Point HOME at an empty directory and clear credential variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in _CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def claude_dir(isolated_home) -> Path:
    path = isolated_home / ".claude"
    path.mkdir()
    return path


@pytest.fixture
def write_settings(claude_dir):
    """Write ~/.claude/settings.json from a dict."""
    def _write(settings: dict) -> Path:
        path = claude_dir / "settings.json"
        path.write_bytes(orjson.dumps(settings))
        return path
    return _write


@pytest.fixture
def write_transcript(tmp_path):
    """Write a JSONL transcript from a list of records or raw lines."""
    def _write(records: list, name: str = "transcript.jsonl") -> Path:
        path = tmp_path / name
        lines = [r if isinstance(r, str) else orjson.dumps(r).decode() for r in records]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write

