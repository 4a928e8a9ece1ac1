"""Working directory segment."""

from pathlib import PurePath

from ccline.segments.base import Segment
from ccline.types.config import SegmentKind
from ccline.types.input import InputData
from ccline.utils.icons import DEFAULT_ICONS


def directory_name(current_dir: str) -> str:
    """Last path component, or the path itself when it has none."""
    return PurePath(current_dir).name or current_dir


class DirectorySegment(Segment):
    kind = SegmentKind.DIRECTORY

    def __init__(self, enabled: bool = True, icon: str = DEFAULT_ICONS.directory):
        super().__init__(enabled)
        self.icon = icon

    def render(self, input_data: InputData) -> str:
        """Directory name only; the generator colors the icon separately."""
        if not self.enabled:
            return ""
        return directory_name(input_data.current_dir)
