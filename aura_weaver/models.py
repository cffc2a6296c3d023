"""
aura_weaver/models.py
Core data models for Aura Weaver

All of these are value objects: built once per invocation, never mutated,
never shared between invocations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

RGB = Tuple[int, int, int]


# =============================================================================
# Palette
# =============================================================================

@dataclass(frozen=True)
class Palette:
    """Named, ordered, non-empty list of RGB colors."""
    name: str
    colors: Tuple[RGB, ...]

    def __post_init__(self):
        if not self.colors:
            raise ValueError(f"Palette {self.name!r} has no colors")
        for color in self.colors:
            if len(color) != 3 or any(not 0 <= c <= 255 for c in color):
                raise ValueError(f"Palette {self.name!r} has bad color {color}")

    @property
    def primary(self) -> RGB:
        """First color; tints the background and the core glyph."""
        return self.colors[0]

    def __len__(self) -> int:
        return len(self.colors)

    def color_at(self, index: int) -> RGB:
        return self.colors[index % len(self.colors)]

    def to_dict(self) -> dict:
        return {"name": self.name, "colors": [list(c) for c in self.colors]}


# =============================================================================
# Particles and waveforms
# =============================================================================

class MotionClass(Enum):
    """Trajectory selector used only while drawing."""
    ORBITING = "orbiting"
    SPIRAL = "spiral"
    WAVE = "wave"


# Index order matters: particle i gets MOTION_ORDER[i % 3]
MOTION_ORDER: Tuple[MotionClass, ...] = (
    MotionClass.ORBITING,
    MotionClass.SPIRAL,
    MotionClass.WAVE,
)


@dataclass(frozen=True)
class Particle:
    index: int
    angle_base: float        # radians
    base_radius: float       # pixels from center
    radius_variation: float  # pixels
    size: float              # disk diameter in pixels
    color: RGB
    phase_offset: float      # radians
    motion: MotionClass

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "angle_base": self.angle_base,
            "base_radius": self.base_radius,
            "radius_variation": self.radius_variation,
            "size": self.size,
            "color": list(self.color),
            "phase_offset": self.phase_offset,
            "motion": self.motion.value,
        }


@dataclass(frozen=True)
class WaveformLayer:
    """
    Closed curve around the center.

    r(theta) = radius + amplitude * sin(lobes * theta + phase)
    """
    index: int
    amplitude: float
    phase: float
    color: RGB
    alpha: int  # 0-255
    radius: float
    lobes: int

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "amplitude": self.amplitude,
            "phase": self.phase,
            "color": list(self.color),
            "alpha": self.alpha,
            "radius": self.radius,
            "lobes": self.lobes,
        }


# =============================================================================
# Scene / result
# =============================================================================

@dataclass(frozen=True)
class Scene:
    """Everything the compositor needs; pure function of the inputs."""
    mood_seed: str
    activity_count: int
    seed_hash: int
    palette: Palette
    particles: Tuple[Particle, ...]
    waveforms: Tuple[WaveformLayer, ...]

    def to_dict(self) -> dict:
        return {
            "mood_seed": self.mood_seed,
            "activity_count": self.activity_count,
            "palette": self.palette.to_dict(),
            "particles": [p.to_dict() for p in self.particles],
            "waveforms": [w.to_dict() for w in self.waveforms],
        }


@dataclass(frozen=True)
class GenerationResult:
    """Public output of one generation. Owned by the caller after return."""
    artifact: bytes  # PNG
    rarity_score: int
    particle_count: int
    palette_name: str
    rarity_tier: str = ""
    fingerprint: str = ""

    def summary(self) -> dict:
        """Everything except the image bytes."""
        return {
            "rarity_score": self.rarity_score,
            "rarity_tier": self.rarity_tier,
            "particle_count": self.particle_count,
            "palette_name": self.palette_name,
            "fingerprint": self.fingerprint,
            "artifact_bytes": len(self.artifact),
        }
