"""Streaming JSONL parser extracting token usage from session transcripts."""

import logging
from pathlib import Path
from typing import Iterator

import orjson

from ccline.types.usage import TokenUsage, TranscriptUsage, usage_from_dict

logger = logging.getLogger(__name__)

# Max size for a single JSONL line (10MB)
MAX_LINE_SIZE = 10 * 1024 * 1024


def parse_transcript_usage(file_path: str | Path) -> TranscriptUsage:
    """Collect cumulative and latest-turn usage in one pass over a transcript.

    A transcript that cannot be opened yields all-zero usage.
    """
    result = TranscriptUsage()
    cumulative = result.cumulative

    for usage in stream_assistant_usage(file_path):
        cumulative.input_tokens += usage.input_tokens
        cumulative.output_tokens += usage.output_tokens
        cumulative.cache_read_input_tokens += usage.cache_read_input_tokens
        cumulative.cache_creation_input_tokens += usage.cache_creation_input_tokens
        result.latest = usage
        result.assistant_records += 1

    return result


def stream_assistant_usage(file_path: str | Path) -> Iterator[TokenUsage]:
    """Stream-parse a transcript, yielding the usage of each assistant record.

    Malformed lines are logged and skipped.
    Lines exceeding MAX_LINE_SIZE are skipped with a warning.
    """
    if not file_path:
        return
    path = Path(file_path)

    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("Transcript not readable: %s (%s)", path, e)
        return

    line_num = 0
    with f:
        for line in f:
            line_num += 1
            line = line.strip()
            if not line:
                continue

            if len(line) > MAX_LINE_SIZE:
                logger.warning(
                    "Line %d in %s exceeds %dMB, skipping",
                    line_num, path.name, MAX_LINE_SIZE // (1024 * 1024),
                )
                continue

            try:
                raw = orjson.loads(line)
            except orjson.JSONDecodeError as e:
                logger.debug("Malformed JSON at line %d in %s: %s", line_num, path.name, e)
                continue

            if not isinstance(raw, dict):
                continue

            usage = _extract_usage(raw)
            if usage is not None:
                yield usage


def _extract_usage(raw: dict) -> TokenUsage | None:
    """Usage of an assistant record, or None for any other record."""
    if raw.get("type") != "assistant":
        return None

    message = raw.get("message")
    if not isinstance(message, dict):
        return None

    raw_usage = message.get("usage")
    if not isinstance(raw_usage, dict):
        return None

    return usage_from_dict(raw_usage)
