"""Status line composition from the enabled segments."""

import logging

from ccline.segments import (
    CostSegment,
    DirectorySegment,
    GitSegment,
    InfoShareSegment,
    ModelSegment,
    QuotaSegment,
    Segment,
    UsageSegment,
)
from ccline.types.config import Config, SegmentKind
from ccline.types.input import InputData
from ccline.utils.formatting import colorize
from ccline.utils.icons import get_icons, with_icon

logger = logging.getLogger(__name__)

SEGMENT_COLORS = {
    SegmentKind.MODEL: "\x1b[1;36m",
    SegmentKind.DIRECTORY: "\x1b[1;32m",
    SegmentKind.GIT: "\x1b[1;34m",
    SegmentKind.USAGE: "\x1b[1;35m",
    SegmentKind.COST: "\x1b[1;33m",
    SegmentKind.QUOTA: "\x1b[1;93m",
    SegmentKind.INFO_SHARE: "\x1b[1;92m",
}
DIRECTORY_ICON_COLOR = "\x1b[1;33m"
SEPARATOR = "\x1b[37m | \x1b[0m"


class StatusLineGenerator:
    """Renders every enabled segment in ``SegmentKind`` order and joins them.

    Segments that render an empty string are left out. A segment that
    raises is logged and left out as well.
    """

    def __init__(self, config: Config):
        self._config = config
        self._icons = get_icons(config.theme)

    def generate(self, input_data: InputData) -> str:
        parts: list[str] = []
        for kind in SegmentKind:
            if not self._config.segments.is_enabled(kind):
                continue
            segment = self.build_segment(kind)
            try:
                content = segment.render(input_data)
            except Exception:
                logger.warning("Segment %s failed to render", segment.kind.value, exc_info=True)
                continue
            if content:
                parts.append(self._wrap(kind, content))
        return SEPARATOR.join(parts)

    def build_segment(self, kind: SegmentKind) -> Segment:
        icons = self._icons
        if kind is SegmentKind.MODEL:
            return ModelSegment(icon=icons.model)
        if kind is SegmentKind.DIRECTORY:
            return DirectorySegment(icon=icons.directory)
        if kind is SegmentKind.GIT:
            return GitSegment(show_sha=self._config.show_git_sha, icon=icons.git)
        if kind is SegmentKind.USAGE:
            return UsageSegment()
        if kind is SegmentKind.COST:
            return CostSegment()
        if kind is SegmentKind.QUOTA:
            return QuotaSegment()
        if kind is SegmentKind.INFO_SHARE:
            return InfoShareSegment(quota_segment=QuotaSegment())
        raise ValueError(f"Unknown segment kind: {kind}")

    def _wrap(self, kind: SegmentKind, content: str) -> str:
        if kind is SegmentKind.DIRECTORY:
            icon = colorize(self._icons.directory, DIRECTORY_ICON_COLOR) if self._icons.directory else ""
            return with_icon(icon, colorize(content, SEGMENT_COLORS[kind]))
        return colorize(content, SEGMENT_COLORS[kind])
