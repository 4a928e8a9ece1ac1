"""Model pricing tiers and cost calculation."""

from ccline.types.pricing import ModelPricing
from ccline.types.usage import TokenUsage


# Per 1M tokens
PREMIUM = ModelPricing(tier="premium", input=15.00, output=75.00, cache_read=1.50, cache_write=18.75)
ECONOMY = ModelPricing(tier="economy", input=0.80, output=4.00, cache_read=0.08, cache_write=1.00)
LARGE_CONTEXT = ModelPricing(tier="large-context", input=6.00, output=22.50, cache_read=0.60, cache_write=7.50)
STANDARD = ModelPricing(tier="standard", input=3.00, output=15.00, cache_read=0.30, cache_write=3.75)

# Prompt size above which 1M-context models bill at the large-context tier
LARGE_CONTEXT_THRESHOLD = 200_000

DEFAULT_CONTEXT_LIMIT = 200_000
EXTENDED_CONTEXT_LIMIT = 1_000_000


def price_for(model_name: str, total_input_tokens: int) -> ModelPricing:
    """Select the pricing tier for a model display name.

    Rules are checked in order and the first match wins. Names matching
    nothing fall through to the standard tier.
    """
    if "opus" in model_name or "Opus" in model_name:
        return PREMIUM
    if "haiku" in model_name or "Haiku" in model_name:
        return ECONOMY
    if "1M" in model_name and total_input_tokens > LARGE_CONTEXT_THRESHOLD:
        return LARGE_CONTEXT
    return STANDARD


def context_limit(model_name: str) -> int:
    """Context window size in tokens for a model display name."""
    if "1M" in model_name:
        return EXTENDED_CONTEXT_LIMIT
    return DEFAULT_CONTEXT_LIMIT


def calculate_cost(usage: TokenUsage, pricing: ModelPricing) -> float:
    """Calculate cost in USD for the given token counts."""
    return (
        usage.input_tokens / 1_000_000 * pricing.input
        + usage.cache_read_input_tokens / 1_000_000 * pricing.cache_read
        + usage.cache_creation_input_tokens / 1_000_000 * pricing.cache_write
        + usage.output_tokens / 1_000_000 * pricing.output
    )


def context_percentage(used_tokens: int, limit: int) -> float:
    """Percentage of the context window in use. Not clamped."""
    if limit <= 0:
        return 0.0
    return used_tokens / limit * 100
