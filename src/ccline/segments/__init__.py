"""Status line segments."""

from ccline.segments.base import Segment
from ccline.segments.cost import CostSegment
from ccline.segments.directory import DirectorySegment
from ccline.segments.git import GitSegment
from ccline.segments.info_share import InfoShareSegment
from ccline.segments.model import ModelSegment
from ccline.segments.quota import QuotaSegment
from ccline.segments.usage import UsageSegment

__all__ = [
    "Segment",
    "CostSegment",
    "DirectorySegment",
    "GitSegment",
    "InfoShareSegment",
    "ModelSegment",
    "QuotaSegment",
    "UsageSegment",
]
