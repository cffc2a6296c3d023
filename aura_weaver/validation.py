"""
aura_weaver/validation.py
Input checks run before any builder

The upstream form already validates; these run again so the engine
never builds from out-of-range input.
"""

import re
from typing import Tuple

from .config import SEED_LIMITS
from .errors import ValidationError

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

# Same set the upstream form trims. str.strip() with no argument would also
# drop U+001C-U+001F, hiding them from the control character check.
_TRIM_CHARS = " \t\n\r\x0b\x0c" + "".join(
    chr(cp) for cp in (
        0x00A0, 0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029,
        0x202F, 0x205F, 0x3000, 0xFEFF,
    )
)


def validate_mood_seed(seed) -> str:
    """
    Check a mood seed and return it stripped of surrounding whitespace.

    Raises:
        ValidationError: with the violated bound in `bound`
    """
    if not isinstance(seed, str):
        raise ValidationError(
            "mood_seed", f"must be text, got {type(seed).__name__}", "type=str"
        )

    seed = seed.strip(_TRIM_CHARS)
    if len(seed) < SEED_LIMITS.min_length:
        raise ValidationError(
            "mood_seed",
            "Please enter a mood seed to generate your aura",
            f"min_length={SEED_LIMITS.min_length}",
        )
    if len(seed) > SEED_LIMITS.max_length:
        raise ValidationError(
            "mood_seed",
            f"Mood seed should be at most {SEED_LIMITS.max_length} characters",
            f"max_length={SEED_LIMITS.max_length}",
        )

    bad = sorted({c for c in seed if c in SEED_LIMITS.forbidden_chars})
    if bad:
        raise ValidationError(
            "mood_seed",
            "Mood seed contains invalid characters " + ", ".join(bad),
            "forbidden_chars",
        )
    if _CONTROL_CHARS.search(seed):
        raise ValidationError(
            "mood_seed",
            "Mood seed contains control characters",
            "control_chars",
        )
    return seed


def validate_activity_count(count) -> int:
    """Activity count must be a non-negative int (bool is rejected)."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(
            "activity_count",
            f"must be an integer, got {type(count).__name__}",
            "type=int",
        )
    if count < 0:
        raise ValidationError(
            "activity_count", "Transaction count cannot be negative", "min=0"
        )
    return count


def validate_inputs(seed, count) -> Tuple[str, int]:
    return validate_mood_seed(seed), validate_activity_count(count)
