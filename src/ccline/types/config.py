"""Status line configuration types."""

from dataclasses import dataclass, field
from enum import Enum


class SegmentKind(str, Enum):
    """Segment kinds in status line emission order."""
    MODEL = "model"
    DIRECTORY = "directory"
    GIT = "git"
    USAGE = "usage"
    COST = "cost"
    QUOTA = "quota"
    INFO_SHARE = "info_share"


@dataclass(frozen=True)
class SegmentsConfig:
    model: bool = True
    directory: bool = True
    git: bool = True
    usage: bool = True
    cost: bool = True
    quota: bool = True
    info_share: bool = True

    def is_enabled(self, kind: SegmentKind) -> bool:
        return getattr(self, kind.value)


@dataclass(frozen=True)
class Config:
    theme: str = "dark"
    segments: SegmentsConfig = field(default_factory=SegmentsConfig)
    show_git_sha: bool = False
