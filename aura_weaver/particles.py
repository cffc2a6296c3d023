"""
aura_weaver/particles.py
Particle field construction

Particle geometry comes from discrete tiers indexed by i, never from a
PRNG, so any implementation that follows the same table gets the same
field. Output order (by index) is relied on for z-order and for which
particles get connection lines.
"""

import math
from typing import Tuple

from .config import PARTICLE_CONFIG, ParticleConfig
from .models import MOTION_ORDER, Palette, Particle, RGB


def particle_count(activity_count: int, config: ParticleConfig = PARTICLE_CONFIG) -> int:
    """
    Number of particles for an activity count.

    Monotonic in activity_count and hard-capped at config.ceiling.
    """
    count = max(activity_count, config.floor) + config.offset
    return max(config.floor, min(count, config.ceiling))


def perturb_color(base: RGB, seed_hash: int, index: int,
                  config: ParticleConfig = PARTICLE_CONFIG) -> RGB:
    """Shift each channel by (hash + i * prime) mod range, clamped to 255."""
    return tuple(
        min(255, channel + (seed_hash + index * prime) % config.color_range)
        for channel, prime in zip(base, config.color_primes)
    )


def build_particles(
    seed_hash: int,
    activity_count: int,
    palette: Palette,
    config: ParticleConfig = PARTICLE_CONFIG,
) -> Tuple[Particle, ...]:
    """
    Build the ordered particle field.

    Args:
        seed_hash: Output of seeds.seed_hash
        activity_count: Validated, non-negative
        palette: Output of mood.classify_mood

    Returns:
        Tuple of particles, index 0 first
    """
    count = particle_count(activity_count, config)
    rotation = seed_hash * config.hash_rotation

    particles = []
    for i in range(count):
        particles.append(Particle(
            index=i,
            angle_base=(i / count) * 2 * math.pi + rotation,
            base_radius=config.radius_tiers[i % len(config.radius_tiers)],
            radius_variation=config.variation_tiers[i % len(config.variation_tiers)],
            size=config.size_tiers[i % len(config.size_tiers)],
            color=perturb_color(palette.color_at(i), seed_hash, i, config),
            phase_offset=i * config.phase_step + (seed_hash % 100) * 0.01,
            motion=MOTION_ORDER[i % len(MOTION_ORDER)],
        ))
    return tuple(particles)
