"""
aura_weaver/rarity.py
Rarity scoring

Two formulas live here and are deliberately kept apart:

- score_rarity(): the display score shown with the artifact
- ledger_rarity(): what the minting contract computes on its own

They do not always agree. rarity_agrees() reports when they do.
"""

from typing import Tuple

from .config import (
    LEDGER_BASES,
    LEDGER_LENGTH_BONUS,
    LEDGER_LENGTH_THRESHOLD,
    LEDGER_THRESHOLDS,
    RARITY_CONFIG,
    RARITY_TIERS,
    RarityConfig,
)


def _tier_index(value: int, thresholds: Tuple[int, ...]) -> int:
    """Number of thresholds strictly exceeded."""
    return sum(1 for th in thresholds if value > th)


def base_score(activity_count: int, config: RarityConfig = RARITY_CONFIG) -> int:
    """Step function of activity: 40 up to 50, then 50/60/70/80/90."""
    return config.bases[_tier_index(activity_count, config.thresholds)]


def length_bonus(mood_seed: str, config: RarityConfig = RARITY_CONFIG) -> int:
    n = len(mood_seed)
    if n <= config.short_length:
        return config.length_bonuses[0]
    if n <= config.medium_length:
        return config.length_bonuses[1]
    return config.length_bonuses[2]


def diversity_bonus(mood_seed: str, config: RarityConfig = RARITY_CONFIG) -> int:
    """
    Character-variety bonus, estimated from UTF-8 byte length.

    This is a bucketed heuristic, not a count of distinct characters:
    "aaaaaaaaaaaaaaaaaaaaa" earns the same as a varied phrase of equal
    size. Keep it that way; existing scores depend on it.
    """
    n_bytes = len(mood_seed.encode("utf-8"))
    if n_bytes <= config.diversity_low_bytes:
        return config.diversity_bonuses[0]
    if n_bytes <= config.diversity_high_bytes:
        return config.diversity_bonuses[1]
    return config.diversity_bonuses[2]


def score_rarity(activity_count: int, mood_seed: str,
                 config: RarityConfig = RARITY_CONFIG) -> int:
    """
    Display rarity score in [0, 100].

    Example:
        score_rarity(10, "happy") -> 40 + 5 + 0 = 45
    """
    total = (
        base_score(activity_count, config)
        + length_bonus(mood_seed, config)
        + diversity_bonus(mood_seed, config)
    )
    return max(0, min(total, config.max_score))


def rarity_breakdown(activity_count: int, mood_seed: str,
                     config: RarityConfig = RARITY_CONFIG) -> dict:
    """Components of score_rarity(), for reports and the CLI."""
    return {
        "base": base_score(activity_count, config),
        "length_bonus": length_bonus(mood_seed, config),
        "diversity_bonus": diversity_bonus(mood_seed, config),
        "score": score_rarity(activity_count, mood_seed, config),
    }


def rarity_tier(score: int) -> str:
    for floor, name in RARITY_TIERS:
        if score >= floor:
            return name
    return RARITY_TIERS[-1][1]


# =============================================================================
# Ledger-side formula
# =============================================================================

def ledger_rarity(activity_count: int, mood_seed: str) -> int:
    """
    Rarity as the minting contract computes it.

    Fewer tiers and a single length bonus. Do not merge with
    score_rarity().
    """
    base = LEDGER_BASES[_tier_index(activity_count, LEDGER_THRESHOLDS)]
    bonus = LEDGER_LENGTH_BONUS if len(mood_seed) > LEDGER_LENGTH_THRESHOLD else 0
    return min(base + bonus, 100)


def rarity_agrees(activity_count: int, mood_seed: str) -> bool:
    return score_rarity(activity_count, mood_seed) == ledger_rarity(activity_count, mood_seed)
