"""
aura_weaver/config.py
Configuration constants for the Aura Weaver engine

Everything that shapes the artifact or the score lives here. Changing a
value here changes outputs for existing seeds.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

# =============================================================================
# Version
# =============================================================================

ENGINE_VERSION = "1.0.0"
GENERATOR_NAME = f"Aptos Aura Weaver v{ENGINE_VERSION}"

# =============================================================================
# Canvas
# =============================================================================

@dataclass
class CanvasConfig:
    """Raster surface settings for the compositor."""
    width: int = 400
    height: int = 400
    background: Tuple[int, int, int] = (8, 8, 16)
    # Gradient tint strength at the center (0-1)
    gradient_strength: float = 0.45
    # Time parameter used for every persisted frame
    static_time: float = 0.0
    # Waveform sampling step in degrees
    waveform_step_deg: int = 5
    # Every Nth particle gets a line to the center
    connection_stride: int = 5
    core_radius: float = 18.0


CANVAS_CONFIG = CanvasConfig()

# =============================================================================
# Particle field
# =============================================================================

@dataclass
class ParticleConfig:
    """
    Particle count = clamp(max(activity, floor) + offset, floor, ceiling).

    With floor 8 and offset 7 the smallest field holds 15 particles.
    """
    floor: int = 8
    offset: int = 7
    ceiling: int = 50

    # Discrete tiers indexed by i mod len(tier)
    radius_tiers: Tuple[float, ...] = (60.0, 82.0, 104.0, 126.0, 148.0)
    variation_tiers: Tuple[float, ...] = (8.0, 14.0, 20.0, 26.0)
    size_tiers: Tuple[float, ...] = (4.0, 6.5, 9.0)

    # Rotation applied per unit of seed hash
    hash_rotation: float = 0.01
    phase_step: float = 0.37

    # Color perturbation: (hash + i * prime) mod color_range, per channel
    color_primes: Tuple[int, int, int] = (31, 37, 41)
    color_range: int = 40


PARTICLE_CONFIG = ParticleConfig()

# =============================================================================
# Waveform layers
# =============================================================================

@dataclass
class WaveformConfig:
    """Waveform count = min(floor + activity // divisor, ceiling)."""
    floor: int = 3
    divisor: int = 100
    ceiling: int = 8

    base_radius: float = 70.0
    radius_step: float = 18.0
    min_amplitude: float = 6.0
    amplitude_range: int = 14
    # Lobe counts cycle through this table
    lobe_tiers: Tuple[int, ...] = (3, 4, 5, 6, 7)
    base_alpha: int = 90
    alpha_step: int = 8


WAVEFORM_CONFIG = WaveformConfig()

# =============================================================================
# Rarity (display formula)
# =============================================================================

@dataclass
class RarityConfig:
    """
    Tiered base score plus seed bonuses.

    Thresholds are strict: a count must be greater than the threshold to
    reach the next tier.
    """
    thresholds: Tuple[int, ...] = (50, 100, 500, 1000, 5000)
    bases: Tuple[int, ...] = (40, 50, 60, 70, 80, 90)

    # Seed length (code points): <= short -> 5, <= medium -> 10, else 15
    short_length: int = 10
    medium_length: int = 25
    length_bonuses: Tuple[int, int, int] = (5, 10, 15)

    # UTF-8 byte length buckets standing in for character variety
    diversity_low_bytes: int = 8
    diversity_high_bytes: int = 20
    diversity_bonuses: Tuple[int, int, int] = (0, 5, 10)

    max_score: int = 100


RARITY_CONFIG = RarityConfig()

# Ledger-side formula: base per band, one coarse length bonus
LEDGER_THRESHOLDS: Tuple[int, ...] = (100, 1000)
LEDGER_BASES: Tuple[int, ...] = (30, 50, 70)
LEDGER_LENGTH_THRESHOLD = 10
LEDGER_LENGTH_BONUS = 10

# Score bands for the metadata label, checked top-down
RARITY_TIERS: Tuple[Tuple[int, str], ...] = (
    (95, "Legendary"),
    (80, "Epic"),
    (65, "Rare"),
    (50, "Uncommon"),
    (0, "Common"),
)

# =============================================================================
# Input limits
# =============================================================================

@dataclass
class SeedLimits:
    """Bounds checked before anything is generated."""
    min_length: int = 1
    max_length: int = 100
    forbidden_chars: str = "<>\"'"


SEED_LIMITS = SeedLimits()

# =============================================================================
# Storage (pinning service)
# =============================================================================

PIN_FILE_ENDPOINT = "https://api.pinata.cloud/pinning/pinFileToIPFS"
PIN_JSON_ENDPOINT = "https://api.pinata.cloud/pinning/pinJSONToIPFS"
DEFAULT_GATEWAY = "https://gateway.pinata.cloud/ipfs/"
DEFAULT_EXTERNAL_URL = "https://aura-weaver.app"


@dataclass
class StorageConfig:
    """Credentials and endpoints for the pinning collaborator."""
    api_key: Optional[str] = None
    secret_key: Optional[str] = None
    gateway: str = DEFAULT_GATEWAY
    external_url: str = DEFAULT_EXTERNAL_URL
    timeout_sec: float = 30.0
    user_agent: str = field(default=f"aura-weaver/{ENGINE_VERSION}")

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.secret_key)


def _env_str(name: str) -> Optional[str]:
    v = os.environ.get(name)
    if not v:
        return None
    return v.strip()


def storage_config_from_env() -> StorageConfig:
    """
    Build storage settings from the environment.

    Reads PINATA_API_KEY, PINATA_SECRET_KEY, IPFS_GATEWAY and
    AURA_EXTERNAL_URL. Unset values fall back to defaults.
    """
    return StorageConfig(
        api_key=_env_str("PINATA_API_KEY"),
        secret_key=_env_str("PINATA_SECRET_KEY"),
        gateway=_env_str("IPFS_GATEWAY") or DEFAULT_GATEWAY,
        external_url=_env_str("AURA_EXTERNAL_URL") or DEFAULT_EXTERNAL_URL,
    )
