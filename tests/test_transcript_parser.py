"""Tests for ccline.services.transcript_parser."""

from helpers import assistant_record, user_record

from ccline.services.transcript_parser import (
    parse_transcript_usage,
    stream_assistant_usage,
)
from ccline.types.usage import TokenUsage


# ---------------------------------------------------------------------------
# 1. Missing transcript
# ---------------------------------------------------------------------------

def test_nonexistent_file_yields_zero_usage(tmp_path):
    """A transcript that cannot be opened yields all-zero usage."""
    usage = parse_transcript_usage(tmp_path / "does_not_exist.jsonl")
    assert usage.cumulative == TokenUsage()
    assert usage.latest == TokenUsage()
    assert usage.assistant_records == 0
    assert usage.context_tokens == 0


def test_empty_path_yields_zero_usage():
    assert parse_transcript_usage("").assistant_records == 0


def test_directory_path_yields_zero_usage(tmp_path):
    assert parse_transcript_usage(tmp_path).assistant_records == 0


# ---------------------------------------------------------------------------
# 2. No assistant records
# ---------------------------------------------------------------------------

def test_only_user_records(write_transcript):
    path = write_transcript([user_record("a"), user_record("b")])
    usage = parse_transcript_usage(path)
    assert usage.assistant_records == 0
    assert usage.cost_usage == TokenUsage()


# ---------------------------------------------------------------------------
# 3. Cumulative vs latest views
# ---------------------------------------------------------------------------

def test_cumulative_output_is_sum(write_transcript):
    """Output tokens accumulate across every assistant record."""
    path = write_transcript([
        assistant_record(input_tokens=100, output_tokens=10, cache_read=1000, cache_write=50),
        user_record(),
        assistant_record(input_tokens=200, output_tokens=20, cache_read=2000, cache_write=60),
        assistant_record(input_tokens=300, output_tokens=30, cache_read=3000, cache_write=70),
    ])
    usage = parse_transcript_usage(path)

    assert usage.assistant_records == 3
    assert usage.cumulative.output_tokens == 60
    assert usage.cumulative.input_tokens == 600
    assert usage.cumulative.cache_read_input_tokens == 6000
    assert usage.cumulative.cache_creation_input_tokens == 180


def test_latest_context_is_last_record_only(write_transcript):
    """Context tokens are the last record's input + cache, not a sum."""
    path = write_transcript([
        assistant_record(input_tokens=100, output_tokens=10, cache_read=1000, cache_write=50),
        assistant_record(input_tokens=300, output_tokens=30, cache_read=3000, cache_write=70),
    ])
    usage = parse_transcript_usage(path)

    assert usage.latest == TokenUsage(300, 30, 3000, 70)
    assert usage.context_tokens == 300 + 3000 + 70


def test_cost_usage_mixes_views(write_transcript):
    path = write_transcript([
        assistant_record(input_tokens=100, output_tokens=10, cache_read=1000, cache_write=50),
        assistant_record(input_tokens=300, output_tokens=30, cache_read=3000, cache_write=70),
    ])
    cost_usage = parse_transcript_usage(path).cost_usage

    assert cost_usage.output_tokens == 40
    assert cost_usage.input_tokens == 300
    assert cost_usage.cache_read_input_tokens == 3000
    assert cost_usage.cache_creation_input_tokens == 70


# ---------------------------------------------------------------------------
# 4. Malformed input is skipped
# ---------------------------------------------------------------------------

def test_malformed_lines_skipped(write_transcript):
    """Corrupt lines, non-objects and untagged records do not abort parsing."""
    path = write_transcript([
        assistant_record(input_tokens=10, output_tokens=5),
        "{not json",
        "[1, 2, 3]",
        '"just a string"',
        "",
        '{"message": {"usage": {"output_tokens": 999}}}',
        '{"type": "assistant", "message": "oops"}',
        '{"type": "assistant", "message": {"content": "no usage"}}',
        assistant_record(input_tokens=20, output_tokens=7),
    ])
    usage = parse_transcript_usage(path)

    assert usage.assistant_records == 2
    assert usage.cumulative.output_tokens == 12
    assert usage.latest.input_tokens == 20


def test_truncated_final_line(write_transcript, tmp_path):
    path = write_transcript([assistant_record(output_tokens=5)])
    with open(path, "a", encoding="utf-8") as f:
        f.write('{"type": "assistant", "message": {"usa')
    assert parse_transcript_usage(path).cumulative.output_tokens == 5


def test_bad_counter_values_read_as_zero(write_transcript):
    path = write_transcript([{
        "type": "assistant",
        "message": {"usage": {
            "input_tokens": -5,
            "output_tokens": "12",
            "cache_read_input_tokens": 1.5,
            "cache_creation_input_tokens": True,
        }},
    }])
    usage = parse_transcript_usage(path)
    assert usage.assistant_records == 1
    assert usage.latest == TokenUsage()


# ---------------------------------------------------------------------------
# 5. Streaming
# ---------------------------------------------------------------------------

def test_stream_yields_one_usage_per_assistant_record(write_transcript):
    path = write_transcript([
        assistant_record(output_tokens=1),
        user_record(),
        assistant_record(output_tokens=2),
    ])
    assert [u.output_tokens for u in stream_assistant_usage(path)] == [1, 2]
