"""Services for ccline."""

from ccline.services.config_loader import ConfigError, load_config
from ccline.services.git_resolver import resolve_git_info
from ccline.services.transcript_parser import parse_transcript_usage

__all__ = [
    "ConfigError",
    "load_config",
    "resolve_git_info",
    "parse_transcript_usage",
]
