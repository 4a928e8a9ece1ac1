"""Common interface for status line segments."""

from abc import ABC, abstractmethod

from ccline.types.config import SegmentKind
from ccline.types.input import InputData


class Segment(ABC):
    """One independently renderable fragment of the status line.

    ``render`` returns an empty string when the segment has nothing to show.
    """

    kind: SegmentKind

    def __init__(self, enabled: bool = True):
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    @abstractmethod
    def render(self, input_data: InputData) -> str:
        ...
