"""Session cost and line change totals reported by Claude Code."""

from ccline.segments.base import Segment
from ccline.types.config import SegmentKind
from ccline.types.input import Cost, InputData


def format_cost(cost: Cost) -> str:
    """``$0.1234 +10/-2``; either part is left out when it has nothing to say."""
    parts = []
    if cost.total_cost_usd is not None:
        parts.append(f"${cost.total_cost_usd:.4f}")

    added = cost.total_lines_added or 0
    removed = cost.total_lines_removed or 0
    if added > 0 or removed > 0:
        parts.append(f"+{added}/-{removed}")
    return " ".join(parts)


class CostSegment(Segment):
    kind = SegmentKind.COST

    def render(self, input_data: InputData) -> str:
        if not self.enabled or input_data.cost is None:
            return ""
        return format_cost(input_data.cost)
