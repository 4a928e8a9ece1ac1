"""Git branch and working tree segment."""

from ccline.segments.base import Segment
from ccline.services.git_resolver import resolve_git_info
from ccline.types.config import SegmentKind
from ccline.types.git import GitInfo, GitStatus
from ccline.types.input import InputData
from ccline.utils.icons import DEFAULT_ICONS, with_icon

STATUS_SYMBOLS = {
    GitStatus.CLEAN: "✓",
    GitStatus.DIRTY: "●",
    GitStatus.CONFLICTS: "⚠",
}


def format_git_info(info: GitInfo, icon: str = DEFAULT_ICONS.git) -> str:
    parts = [with_icon(icon, info.branch), STATUS_SYMBOLS[info.status]]
    if info.ahead > 0:
        parts.append(f"↑{info.ahead}")
    if info.behind > 0:
        parts.append(f"↓{info.behind}")
    if info.sha:
        parts.append(info.sha)
    return " ".join(parts)


class GitSegment(Segment):
    kind = SegmentKind.GIT

    def __init__(
        self,
        enabled: bool = True,
        show_sha: bool = False,
        icon: str = DEFAULT_ICONS.git,
    ):
        super().__init__(enabled)
        self._show_sha = show_sha
        self._icon = icon

    def render(self, input_data: InputData) -> str:
        if not self.enabled:
            return ""
        info = resolve_git_info(input_data.current_dir, show_sha=self._show_sha)
        if info is None:
            return ""
        return format_git_info(info, self._icon)
