"""Token usage types derived from transcript records."""

from dataclasses import dataclass, field


@dataclass
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    cache_read_input_tokens: int = 0
    cache_creation_input_tokens: int = 0

    @property
    def context_tokens(self) -> int:
        """Tokens occupying the context window for one request."""
        return (self.input_tokens + self.cache_read_input_tokens +
                self.cache_creation_input_tokens)


@dataclass
class TranscriptUsage:
    """Both usage views collected in a single pass over a transcript.

    ``cumulative`` sums every assistant record; ``latest`` holds the counters
    of the last assistant record only.
    """
    cumulative: TokenUsage = field(default_factory=TokenUsage)
    latest: TokenUsage = field(default_factory=TokenUsage)
    assistant_records: int = 0

    @property
    def cost_usage(self) -> TokenUsage:
        # Output is new work every turn; input and cache describe the
        # size of the next request's context.
        return TokenUsage(
            input_tokens=self.latest.input_tokens,
            output_tokens=self.cumulative.output_tokens,
            cache_read_input_tokens=self.latest.cache_read_input_tokens,
            cache_creation_input_tokens=self.latest.cache_creation_input_tokens,
        )

    @property
    def context_tokens(self) -> int:
        return self.latest.context_tokens


def _count(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def usage_from_dict(raw: dict) -> TokenUsage:
    """Build a TokenUsage from a raw ``usage`` object.

    Missing, negative or non-integer counters read as zero.
    """
    return TokenUsage(
        input_tokens=_count(raw.get("input_tokens")),
        output_tokens=_count(raw.get("output_tokens")),
        cache_read_input_tokens=_count(raw.get("cache_read_input_tokens")),
        cache_creation_input_tokens=_count(raw.get("cache_creation_input_tokens")),
    )
