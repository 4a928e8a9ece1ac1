"""Model pricing table type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelPricing:
    """USD per 1,000,000 tokens."""
    tier: str
    input: float
    output: float
    cache_read: float
    cache_write: float
