"""Type definitions for ccline."""

from ccline.types.config import Config, SegmentKind, SegmentsConfig
from ccline.types.git import GitInfo, GitStatus
from ccline.types.input import ContextWindow, Cost, InputData, InputError
from ccline.types.pricing import ModelPricing
from ccline.types.quota import ApiQuota
from ccline.types.usage import TokenUsage, TranscriptUsage

__all__ = [
    "Config",
    "SegmentKind",
    "SegmentsConfig",
    "GitInfo",
    "GitStatus",
    "ContextWindow",
    "Cost",
    "InputData",
    "InputError",
    "ModelPricing",
    "ApiQuota",
    "TokenUsage",
    "TranscriptUsage",
]
