"""Icon sets selected by the configured theme."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Icons:
    model: str
    directory: str
    git: str


DEFAULT_ICONS = Icons(model="●", directory="○", git="◐")

NERD_ICONS = Icons(
    model="\ue26d",
    directory="\U000f024b",
    git="\U000f02a2",
)

EMOJI_ICONS = Icons(model="🤖", directory="📁", git="🌿")

ASCII_ICONS = Icons(model="[M]", directory="[D]", git="[G]")

NO_ICONS = Icons(model="", directory="", git="")

THEMES: dict[str, Icons] = {
    "dark": DEFAULT_ICONS,
    "default": DEFAULT_ICONS,
    "nerd": NERD_ICONS,
    "emoji": EMOJI_ICONS,
    "ascii": ASCII_ICONS,
    "none": NO_ICONS,
}


def get_icons(theme: str) -> Icons:
    """Icons for a theme name; unknown themes use the default set."""
    return THEMES.get(theme, DEFAULT_ICONS)


def with_icon(icon: str, text: str) -> str:
    return f"{icon} {text}" if icon else text
