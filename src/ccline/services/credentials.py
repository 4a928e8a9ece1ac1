"""Credential and endpoint resolution for the remote quota segments.

Values are looked up in layers: the Claude Code settings file first, then
environment variables, then (for the API key only) a plaintext key file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import orjson

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.anthropic.com"

SETTINGS_FILENAME = "settings.json"
API_KEY_FILENAME = "api_key"


@dataclass(frozen=True)
class QuotaCredentials:
    api_key: Optional[str]
    base_url: str = DEFAULT_BASE_URL
    info_url: Optional[str] = None


@dataclass(frozen=True)
class InfoShareCredentials:
    info_share_url: Optional[str]
    token: Optional[str]

    @property
    def complete(self) -> bool:
        return bool(self.info_share_url and self.token)


def claude_config_dir() -> Path:
    """The Claude Code configuration directory (~/.claude)."""
    return Path.home() / ".claude"


def load_settings(config_dir: Path | None = None) -> dict:
    """Read settings.json, returning an empty dict if missing or invalid."""
    path = (config_dir or claude_config_dir()) / SETTINGS_FILENAME
    try:
        data = orjson.loads(path.read_bytes())
    except OSError:
        return {}
    except orjson.JSONDecodeError as e:
        logger.debug("Ignoring malformed settings file %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def resolve_quota_credentials(
    config_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> QuotaCredentials:
    """Resolve the API key, base URL and custom info endpoint."""
    config_dir = config_dir or claude_config_dir()
    environ = os.environ if environ is None else environ
    settings = load_settings(config_dir)
    settings_env = _settings_env(settings)

    api_key = _first(
        settings_env.get("ANTHROPIC_AUTH_TOKEN"),
        settings_env.get("ANTHROPIC_API_KEY"),
        environ.get("ANTHROPIC_API_KEY"),
        environ.get("ANTHROPIC_AUTH_TOKEN"),
    )
    if api_key is None:
        api_key = _read_key_file(config_dir / API_KEY_FILENAME)

    base_url = _first(
        settings_env.get("ANTHROPIC_BASE_URL"),
        environ.get("ANTHROPIC_BASE_URL"),
    ) or DEFAULT_BASE_URL
    info_url = _first(settings.get("info_url"), environ.get("INFO_URL"))

    return QuotaCredentials(api_key=api_key, base_url=base_url.rstrip("/"), info_url=info_url)


def resolve_info_share_credentials(
    config_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> InfoShareCredentials:
    """Resolve the peer-spend URL and its bearer token."""
    environ = os.environ if environ is None else environ
    settings = load_settings(config_dir)
    settings_env = _settings_env(settings)

    return InfoShareCredentials(
        info_share_url=_first(settings.get("info_share_url")),
        token=_first(settings_env.get("PARCKY_JWT_TOKEN"), environ.get("PARCKY_JWT_TOKEN")),
    )


def _settings_env(settings: dict) -> dict:
    env = settings.get("env")
    return env if isinstance(env, dict) else {}


def _first(*values) -> Optional[str]:
    """First non-empty string value."""
    for value in values:
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _read_key_file(path: Path) -> Optional[str]:
    try:
        key = path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    return key or None
