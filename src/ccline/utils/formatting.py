"""Text formatting helpers for status line segments."""

import math

RESET = "\x1b[0m"

BAR_FILLED = "▓"
BAR_EMPTY = "░"
BAR_FILLED_COLOR = "\x1b[38;5;147m"
BAR_EMPTY_COLOR = "\x1b[90m"


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def format_token_count(tokens: int) -> str:
    """Format token counts: 1.2M, 45.3K, 999."""
    if tokens >= 1_000_000:
        return f"{tokens / 1_000_000:.1f}M"
    if tokens >= 1000:
        return f"{tokens / 1000:.1f}K"
    return str(tokens)


def filled_cells(percentage: float, width: int = 10) -> int:
    """Number of filled progress bar cells, clamped to [0, width].

    Half cells round up, so 25% of a 10-cell bar fills 3 cells.
    """
    filled = math.floor(percentage / 100 * width + 0.5)
    return max(0, min(width, filled))


def progress_bar(percentage: float, width: int = 10) -> str:
    filled = filled_cells(percentage, width)
    return (
        f"{BAR_FILLED_COLOR}{BAR_FILLED * filled}"
        f"{BAR_EMPTY_COLOR}{BAR_EMPTY * (width - filled)}{RESET}"
    )
