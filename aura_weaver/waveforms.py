"""
aura_weaver/waveforms.py
Background waveform layers
"""

import math
from typing import Tuple

from .config import WAVEFORM_CONFIG, WaveformConfig
from .models import Palette, WaveformLayer


def waveform_count(activity_count: int, config: WaveformConfig = WAVEFORM_CONFIG) -> int:
    return min(config.floor + activity_count // config.divisor, config.ceiling)


def build_waveforms(
    seed_hash: int,
    palette: Palette,
    activity_count: int,
    config: WaveformConfig = WAVEFORM_CONFIG,
) -> Tuple[WaveformLayer, ...]:
    """
    Build the ordered waveform layers, innermost first.

    Layers fade outward: alpha drops by config.alpha_step per layer.
    Colors walk the palette backwards from the last entry so the
    background does not repeat the first particle colors.
    """
    count = waveform_count(activity_count, config)
    n_colors = len(palette)

    layers = []
    for j in range(count):
        layers.append(WaveformLayer(
            index=j,
            amplitude=config.min_amplitude + (seed_hash + j * 13) % config.amplitude_range,
            phase=((seed_hash + j * 47) % 360) * math.pi / 180.0,
            color=palette.colors[(n_colors - 1 - j) % n_colors],
            alpha=max(0, config.base_alpha - j * config.alpha_step),
            radius=config.base_radius + j * config.radius_step,
            lobes=config.lobe_tiers[(seed_hash + j) % len(config.lobe_tiers)],
        ))
    return tuple(layers)
