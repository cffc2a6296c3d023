"""
aura_weaver/mood.py
Mood phrase -> palette classification

Rules are evaluated top to bottom and the first hit wins, so table order
is the tie-break: "calm but energetic" is cool, not vibrant.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .models import Palette
from .palettes import (
    COOL,
    DEEP_PURPLE,
    DEFAULT_PALETTE,
    PASSION,
    SOFT_GREEN,
    VIBRANT,
    WARM,
)


@dataclass(frozen=True)
class MoodRule:
    """
    One row of the classification table.

    `stem` is the short prefix actually searched for, so "happ" also
    catches "happiness" and "happily".
    """
    keyword: str
    stem: str
    palette: Palette

    def matches(self, lowered_seed: str) -> bool:
        return self.stem in lowered_seed


# Append only: inserting or reordering rows changes existing artifacts
MOOD_RULES: Tuple[MoodRule, ...] = (
    MoodRule("happy", "happ", WARM),
    MoodRule("calm", "calm", COOL),
    MoodRule("energetic", "energ", VIBRANT),
    MoodRule("peaceful", "peace", SOFT_GREEN),
    MoodRule("mysterious", "myster", DEEP_PURPLE),
    MoodRule("passionate", "passion", PASSION),
)


def match_mood_rule(seed: str) -> Optional[MoodRule]:
    """Return the first matching rule, or None if nothing matches."""
    lowered = seed.lower()
    for rule in MOOD_RULES:
        if rule.matches(lowered):
            return rule
    return None


def classify_mood(seed: str) -> Palette:
    """Map a mood seed to its palette, falling back to DEFAULT_PALETTE."""
    rule = match_mood_rule(seed)
    if rule is None:
        return DEFAULT_PALETTE
    return rule.palette
