"""
Aura Weaver - deterministic aura art and rarity scoring

Turns a short mood phrase and an activity count into a reproducible
particle/waveform image and a rarity score in [0, 100].

Usage:
    python -m aura_weaver generate --mood "calm sea" --activity 120
    python -m aura_weaver score --mood "calm sea" --activity 120
"""

__version__ = "1.0.0"

from .errors import AuraError, ValidationError, RenderError, StorageError
from .models import (
    Palette,
    Particle,
    WaveformLayer,
    MotionClass,
    Scene,
    GenerationResult,
)
from .seeds import seed_hash, artifact_fingerprint
from .mood import classify_mood, match_mood_rule, MOOD_RULES
from .palettes import PALETTES, DEFAULT_PALETTE, get_palette
from .particles import build_particles, particle_count
from .waveforms import build_waveforms, waveform_count
from .compositor import render_frame, render_static, encode_png, encode_png_async
from .rarity import score_rarity, ledger_rarity, rarity_tier, rarity_agrees
from .validation import validate_mood_seed, validate_activity_count, validate_inputs
from .engine import build_scene, generate, generate_async

__all__ = [
    # Version
    "__version__",
    # Errors
    "AuraError",
    "ValidationError",
    "RenderError",
    "StorageError",
    # Models
    "Palette",
    "Particle",
    "WaveformLayer",
    "MotionClass",
    "Scene",
    "GenerationResult",
    # Seeds / classification
    "seed_hash",
    "artifact_fingerprint",
    "classify_mood",
    "match_mood_rule",
    "MOOD_RULES",
    "PALETTES",
    "DEFAULT_PALETTE",
    "get_palette",
    # Builders
    "build_particles",
    "particle_count",
    "build_waveforms",
    "waveform_count",
    # Rendering
    "render_frame",
    "render_static",
    "encode_png",
    "encode_png_async",
    # Rarity
    "score_rarity",
    "ledger_rarity",
    "rarity_tier",
    "rarity_agrees",
    # Validation
    "validate_mood_seed",
    "validate_activity_count",
    "validate_inputs",
    # Engine
    "build_scene",
    "generate",
    "generate_async",
]
