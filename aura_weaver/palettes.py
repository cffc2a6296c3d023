"""
aura_weaver/palettes.py
Static palette table

IMPORTANT: colors are ordered. Particle i takes color i mod len(palette)
and colors[0] tints the background and core, so reordering a palette
changes every artifact that uses it.
"""

from typing import Dict, List

from .models import Palette

WARM = Palette("warm", (
    (255, 214, 10),
    (255, 170, 0),
    (255, 128, 31),
    (255, 236, 140),
    (255, 99, 72),
))

COOL = Palette("cool", (
    (64, 156, 255),
    (0, 119, 182),
    (144, 224, 239),
    (72, 202, 228),
    (2, 62, 138),
))

VIBRANT = Palette("vibrant", (
    (255, 0, 170),
    (214, 0, 255),
    (255, 61, 127),
    (0, 229, 255),
    (255, 234, 0),
))

SOFT_GREEN = Palette("soft_green", (
    (116, 198, 157),
    (82, 183, 136),
    (183, 228, 199),
    (149, 213, 178),
    (64, 145, 108),
))

DEEP_PURPLE = Palette("deep_purple", (
    (106, 13, 173),
    (72, 12, 168),
    (157, 78, 221),
    (60, 9, 108),
    (199, 125, 255),
))

PASSION = Palette("passion", (
    (220, 20, 60),
    (255, 69, 0),
    (178, 34, 34),
    (255, 99, 71),
    (139, 0, 0),
))

# Fallback when no mood keyword matches
COSMIC = Palette("cosmic", (
    (138, 43, 226),
    (75, 0, 130),
    (0, 191, 255),
    (255, 20, 147),
    (240, 248, 255),
))

DEFAULT_PALETTE = COSMIC

PALETTES: Dict[str, Palette] = {
    p.name: p
    for p in (WARM, COOL, VIBRANT, SOFT_GREEN, DEEP_PURPLE, PASSION, COSMIC)
}


def get_palette(name: str) -> Palette:
    """Look up a palette by name, raising KeyError for unknown names."""
    try:
        return PALETTES[name]
    except KeyError:
        raise KeyError(f"Unknown palette: {name}") from None


def list_palettes() -> List[str]:
    return list(PALETTES)
