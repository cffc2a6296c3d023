"""
aura_weaver/engine.py
Generation pipeline

(mood_seed, activity_count)
    -> validate
    -> seed_hash, classify_mood
    -> build_particles, build_waveforms
    -> render_static
    -> score_rarity
    -> GenerationResult

Nothing here keeps state between calls; concurrent calls with different
inputs cannot see each other.
"""

import logging

from .compositor import encode_png_async, render_frame, render_static
from .config import CANVAS_CONFIG
from .models import GenerationResult, Scene
from .mood import classify_mood
from .particles import build_particles
from .rarity import rarity_tier, score_rarity
from .seeds import artifact_fingerprint, seed_hash
from .validation import validate_inputs
from .waveforms import build_waveforms

logger = logging.getLogger(__name__)


def build_scene(mood_seed: str, activity_count: int) -> Scene:
    """
    Validate inputs and build the pure part of a generation.

    Raises:
        ValidationError: before anything is built
    """
    mood_seed, activity_count = validate_inputs(mood_seed, activity_count)

    h = seed_hash(mood_seed)
    palette = classify_mood(mood_seed)
    particles = build_particles(h, activity_count, palette)
    waveforms = build_waveforms(h, palette, activity_count)

    logger.debug(
        f"Scene: palette={palette.name} particles={len(particles)} "
        f"waveforms={len(waveforms)}"
    )
    return Scene(
        mood_seed=mood_seed,
        activity_count=activity_count,
        seed_hash=h,
        palette=palette,
        particles=particles,
        waveforms=waveforms,
    )


def _result(scene: Scene, artifact: bytes) -> GenerationResult:
    score = score_rarity(scene.activity_count, scene.mood_seed)
    result = GenerationResult(
        artifact=artifact,
        rarity_score=score,
        particle_count=len(scene.particles),
        palette_name=scene.palette.name,
        rarity_tier=rarity_tier(score),
        fingerprint=artifact_fingerprint(artifact),
    )
    logger.info(
        f"Generated aura: palette={result.palette_name} "
        f"particles={result.particle_count} rarity={score} ({result.rarity_tier})"
    )
    return result


def generate(mood_seed: str, activity_count: int) -> GenerationResult:
    """
    Run one full generation.

    Raises:
        ValidationError: bad seed or count, nothing was built
        RenderError: canvas or encoding failed, no partial artifact
    """
    scene = build_scene(mood_seed, activity_count)
    artifact = render_static(scene.particles, scene.waveforms, scene.palette)
    return _result(scene, artifact)


async def generate_async(mood_seed: str, activity_count: int) -> GenerationResult:
    """
    generate() with PNG encoding off the event loop.

    The pure steps run inline; only encoding is awaited.
    """
    scene = build_scene(mood_seed, activity_count)
    frame = render_frame(scene.particles, scene.waveforms, scene.palette,
                         CANVAS_CONFIG.static_time)
    artifact = await encode_png_async(frame)
    return _result(scene, artifact)
