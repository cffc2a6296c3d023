# tests/test_seeds_and_mood.py
"""
Tests for seed hashing and mood classification.
"""
import pytest

from aura_weaver.seeds import seed_hash, artifact_fingerprint
from aura_weaver.mood import MOOD_RULES, classify_mood, match_mood_rule
from aura_weaver.models import Palette
from aura_weaver.palettes import (
    COOL,
    DEEP_PURPLE,
    DEFAULT_PALETTE,
    PALETTES,
    PASSION,
    SOFT_GREEN,
    VIBRANT,
    WARM,
    get_palette,
)


class TestSeedHash:

    def test_known_value(self):
        assert seed_hash("ab") == 97 * 1 + 98 * 2

    def test_stable(self):
        assert seed_hash("calm sea") == seed_hash("calm sea")

    def test_order_sensitive(self):
        assert seed_hash("calm") != seed_hash("malc")

    def test_single_char_change(self):
        assert seed_hash("happy") != seed_hash("happz")

    def test_non_ascii_uses_code_points(self):
        # One code point, not two UTF-8 bytes
        assert seed_hash("é") == 0xE9

    def test_never_negative(self):
        assert seed_hash("x") > 0

    def test_fingerprint_format(self):
        fp = artifact_fingerprint(b"abc")
        assert fp.startswith("sha256:")
        assert len(fp) == len("sha256:") + 64


class TestMoodClassifier:

    @pytest.mark.parametrize("seed,palette", [
        ("happy", WARM),
        ("HAPPINESS overload", WARM),
        ("calm", COOL),
        ("so energetic", VIBRANT),
        ("energy", VIBRANT),
        ("peacefully drifting", SOFT_GREEN),
        ("a mystery", DEEP_PURPLE),
        ("compassion", PASSION),
    ])
    def test_keyword_match(self, seed, palette):
        assert classify_mood(seed) is palette

    def test_fallback_to_default(self):
        assert classify_mood("xyz123") is DEFAULT_PALETTE
        assert match_mood_rule("xyz123") is None

    def test_first_rule_wins(self):
        # "calm" precedes "energetic" in the table
        assert classify_mood("calm but energetic") is COOL
        assert classify_mood("passionate and happy") is WARM

    def test_rule_order_is_fixed(self):
        assert [r.keyword for r in MOOD_RULES] == [
            "happy", "calm", "energetic", "peaceful", "mysterious", "passionate",
        ]

    def test_stems_are_keyword_prefixes(self):
        for rule in MOOD_RULES:
            assert rule.keyword.startswith(rule.stem)


class TestPalettes:

    def test_all_palettes_non_empty(self):
        for palette in PALETTES.values():
            assert len(palette) > 0

    def test_default_is_registered(self):
        assert get_palette(DEFAULT_PALETTE.name) is DEFAULT_PALETTE

    def test_unknown_palette(self):
        with pytest.raises(KeyError):
            get_palette("nope")

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            Palette("empty", ())

    def test_out_of_range_channel_rejected(self):
        with pytest.raises(ValueError):
            Palette("bad", ((0, 0, 256),))

    def test_color_at_wraps(self):
        assert WARM.color_at(len(WARM)) == WARM.colors[0]
