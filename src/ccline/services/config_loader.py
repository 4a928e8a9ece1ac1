"""Configuration file loading for ccline."""

import logging
import tomllib
from dataclasses import asdict, fields, replace
from pathlib import Path

import tomli_w

from ccline.types.config import Config, SegmentsConfig
from ccline.utils.icons import THEMES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".claude" / "ccline" / "config.toml"

_SEGMENT_KEYS = frozenset(f.name for f in fields(SegmentsConfig))
_TOP_LEVEL_KEYS = frozenset({"theme", "show_git_sha", "segments"})


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from a TOML file.

    With no explicit path, the default location is used and a missing file
    yields the default configuration. An explicit path must exist.
    """
    if path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.exists():
            logger.debug("No config at %s, using defaults", config_path)
            return Config()
    else:
        config_path = Path(path).expanduser()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    return config_from_dict(data)


def config_from_dict(data: dict) -> Config:
    """Validate a decoded configuration table and build a Config."""
    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    theme = data.get("theme", Config.theme)
    if not isinstance(theme, str) or theme not in THEMES:
        raise ConfigError(f"Unknown theme {theme!r}; expected one of {', '.join(THEMES)}")

    show_git_sha = data.get("show_git_sha", Config.show_git_sha)
    if not isinstance(show_git_sha, bool):
        raise ConfigError("show_git_sha must be a boolean")

    raw_segments = data.get("segments", {})
    if not isinstance(raw_segments, dict):
        raise ConfigError("[segments] must be a table")
    unknown = set(raw_segments) - _SEGMENT_KEYS
    if unknown:
        raise ConfigError(f"Unknown segments: {', '.join(sorted(unknown))}")
    for key, value in raw_segments.items():
        if not isinstance(value, bool):
            raise ConfigError(f"segments.{key} must be a boolean")

    return Config(
        theme=theme,
        segments=SegmentsConfig(**raw_segments),
        show_git_sha=show_git_sha,
    )


def with_theme(config: Config, theme: str) -> Config:
    """Copy of config with the theme replaced, validating the name."""
    if theme not in THEMES:
        raise ConfigError(f"Unknown theme {theme!r}; expected one of {', '.join(THEMES)}")
    return replace(config, theme=theme)


def dump_config(config: Config) -> str:
    """Serialize a Config as TOML."""
    return tomli_w.dumps(asdict(config))
