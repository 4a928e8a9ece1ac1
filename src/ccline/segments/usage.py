"""Context usage and session cost segment."""

import logging

from ccline.segments.base import Segment
from ccline.services.transcript_parser import parse_transcript_usage
from ccline.types.config import SegmentKind
from ccline.types.input import InputData
from ccline.utils.formatting import (
    BAR_FILLED_COLOR,
    RESET,
    format_token_count,
    progress_bar,
)
from ccline.utils.pricing import (
    calculate_cost,
    context_limit,
    context_percentage,
    price_for,
)

logger = logging.getLogger(__name__)

BAR_WIDTH = 10


class UsageSegment(Segment):
    """Context window fill and estimated session cost from the transcript.

    Cost combines cumulative output tokens with the latest turn's input and
    cache tokens; the fill percentage uses the latest turn only. The pricing
    tier is chosen from the input tokens accumulated over the session, and
    the payload's ``context_window_size`` overrides the name-based limit.
    """

    kind = SegmentKind.USAGE

    def render(self, input_data: InputData) -> str:
        if not self.enabled:
            return ""

        usage = parse_transcript_usage(input_data.transcript_path)
        model_name = input_data.model_name

        used = usage.context_tokens
        limit = window_limit(input_data)
        percentage = context_percentage(used, limit)

        pricing = price_for(model_name, usage.cumulative.context_tokens)
        cost = calculate_cost(usage.cost_usage, pricing)
        logger.debug(
            "usage: %d assistant records, %d context tokens, %s tier, $%.4f",
            usage.assistant_records, used, pricing.tier, cost,
        )

        return (
            f"{progress_bar(percentage, BAR_WIDTH)} "
            f"{BAR_FILLED_COLOR}{percentage:.1f}% "
            f"({format_token_count(used)}/{format_token_count(limit)}){RESET} "
            f"${cost:.2f}"
        )


def window_limit(input_data: InputData) -> int:
    """Context window size reported in the payload, else the model's default."""
    window = input_data.context_window
    if window is not None and window.context_window_size:
        return window.context_window_size
    return context_limit(input_data.model_name)
