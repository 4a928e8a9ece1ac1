"""Model name segment."""

from ccline.segments.base import Segment
from ccline.types.config import SegmentKind
from ccline.types.input import InputData
from ccline.utils.icons import DEFAULT_ICONS, with_icon

# (substrings, label) checked in order; first match wins
_MODEL_LABELS: list[tuple[tuple[str, ...], str]] = [
    (("opus-4-5", "opus-4.5"), "Opus 4.5"),
    (("claude-4-1-opus",), "Opus 4.1"),
    (("claude-4-opus", "opus-4"), "Opus 4"),
    (("sonnet-4-5", "sonnet-4.5"), "Sonnet 4.5"),
    (("claude-4-sonnet", "sonnet-4"), "Sonnet 4"),
    (("claude-3-7-sonnet",), "Sonnet 3.7"),
    (("claude-3-5-sonnet",), "Sonnet 3.5"),
    (("claude-3-sonnet",), "Sonnet 3"),
    (("haiku",), "Haiku"),
]


def format_model_name(display_name: str) -> str:
    """Shorten a model id or display name to a compact label."""
    name = display_name.replace("(1M context)", "1M").strip()
    for needles, label in _MODEL_LABELS:
        if any(n in name for n in needles):
            if label == "Sonnet 4.5" and "1M" in name:
                return "Sonnet 4.5 1M"
            return label
    return name


class ModelSegment(Segment):
    kind = SegmentKind.MODEL

    def __init__(self, enabled: bool = True, icon: str = DEFAULT_ICONS.model):
        super().__init__(enabled)
        self._icon = icon

    def render(self, input_data: InputData) -> str:
        if not self.enabled:
            return ""
        return with_icon(self._icon, format_model_name(input_data.model_name))
