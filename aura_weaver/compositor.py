"""
aura_weaver/compositor.py
Raster compositing of a scene

Draw order, back to front:
1. Radial gradient tinted by the palette's primary color
2. Waveform layers (closed polylines)
3. Particles: connection line (every Nth), three-ring glow, disk, highlight
4. Pulsing core glyph at the center

render_static() pins t to CANVAS_CONFIG.static_time and is the only path
that produces persisted bytes. render_frame() takes any t and is used by
the live preview.
"""

import asyncio
import io
import logging
import math
from typing import Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .config import CANVAS_CONFIG, CanvasConfig
from .errors import RenderError
from .models import MotionClass, Palette, Particle, RGB, WaveformLayer

logger = logging.getLogger(__name__)

# (radius scale, alpha) for the particle glow, outermost first
GLOW_RINGS: Tuple[Tuple[float, int], ...] = ((3.0, 28), (2.2, 50), (1.6, 85))
CORE_RINGS: Tuple[Tuple[float, int], ...] = ((2.2, 40), (1.6, 80))

TWO_PI = 2 * math.pi


# =============================================================================
# Geometry
# =============================================================================

def particle_position(particle: Particle, t: float,
                      center: Tuple[float, float]) -> Tuple[float, float]:
    """Position of a particle at time t, following its motion class."""
    cx, cy = center
    a = particle.angle_base
    phase = particle.phase_offset
    var = particle.radius_variation

    if particle.motion is MotionClass.ORBITING:
        angle = a + t * 0.5
        r = particle.base_radius + math.sin(t * 2 + phase) * var
    elif particle.motion is MotionClass.SPIRAL:
        angle = a + t * 0.3
        r = particle.base_radius + var * ((t * 0.2 + phase / TWO_PI) % 1.0)
    else:
        angle = a + t * 0.2
        r = particle.base_radius + var * math.sin(3 * a + t * 3 + phase)

    return cx + math.cos(angle) * r, cy + math.sin(angle) * r


def waveform_points(layer: WaveformLayer, t: float, center: Tuple[float, float],
                    step_deg: int) -> list:
    """Closed polyline for a waveform layer; last point repeats the first."""
    cx, cy = center
    points = []
    for deg in range(0, 360, step_deg):
        theta = math.radians(deg)
        r = layer.radius + layer.amplitude * math.sin(layer.lobes * theta + layer.phase + t * 0.4)
        points.append((cx + math.cos(theta) * r, cy + math.sin(theta) * r))
    points.append(points[0])
    return points


def _rgba(color: RGB, alpha: int) -> Tuple[int, int, int, int]:
    return (color[0], color[1], color[2], alpha)


def _disk(draw: ImageDraw.ImageDraw, x: float, y: float, radius: float, fill) -> None:
    draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=fill)


# =============================================================================
# Layers
# =============================================================================

def _background(palette: Palette, config: CanvasConfig) -> Image.Image:
    w, h = config.width, config.height
    if w <= 0 or h <= 0:
        raise RenderError(f"Cannot create a {w}x{h} canvas")

    cx, cy = w / 2.0, h / 2.0
    yy, xx = np.mgrid[0:h, 0:w].astype(np.float32)
    dist = np.hypot(xx + 0.5 - cx, yy + 0.5 - cy) / math.hypot(cx, cy)
    weight = (np.clip(1.0 - dist, 0.0, 1.0) ** 1.5) * config.gradient_strength

    base = np.array(config.background, dtype=np.float32)
    tint = np.array(palette.primary, dtype=np.float32)
    rgb = base * (1.0 - weight[..., None]) + tint * weight[..., None]
    arr = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    return Image.fromarray(arr)


def _draw_waveforms(draw, waveforms, t, center, config: CanvasConfig) -> None:
    for layer in waveforms:
        points = waveform_points(layer, t, center, config.waveform_step_deg)
        draw.line(points, fill=_rgba(layer.color, layer.alpha), width=2, joint="curve")


def _draw_particles(draw, particles, t, center, config: CanvasConfig) -> None:
    cx, cy = center
    for p in particles:
        x, y = particle_position(p, t, center)
        radius = p.size / 2.0 * (1.0 + 0.25 * math.sin(t * 3 + p.phase_offset))

        if p.index % config.connection_stride == 0:
            draw.line((cx, cy, x, y), fill=_rgba(p.color, 60), width=1)

        for scale, alpha in GLOW_RINGS:
            _disk(draw, x, y, radius * scale, _rgba(p.color, alpha))
        _disk(draw, x, y, radius, _rgba(p.color, 235))
        _disk(draw, x - radius / 3.0, y - radius / 3.0, radius / 3.0, (255, 255, 255, 180))


def _draw_core(draw, palette: Palette, t, center, config: CanvasConfig) -> None:
    cx, cy = center
    radius = config.core_radius * (1.0 + 0.15 * math.sin(t * 2))
    for scale, alpha in CORE_RINGS:
        _disk(draw, cx, cy, radius * scale, _rgba(palette.primary, alpha))
    _disk(draw, cx, cy, radius, _rgba(palette.primary, 230))
    _disk(draw, cx, cy, radius * 0.3, (255, 255, 255, 220))


# =============================================================================
# Public API
# =============================================================================

def render_frame(
    particles: Sequence[Particle],
    waveforms: Sequence[WaveformLayer],
    palette: Palette,
    t: float = 0.0,
    config: CanvasConfig = CANVAS_CONFIG,
) -> Image.Image:
    """
    Composite one RGBA frame at time t.

    Raises:
        RenderError: canvas could not be created or drawn on
    """
    try:
        # RGB target: ImageDraw only alpha-blends "RGBA" ink onto RGB images
        img = _background(palette, config)
        draw = ImageDraw.Draw(img, "RGBA")
        center = (config.width / 2.0, config.height / 2.0)
        _draw_waveforms(draw, waveforms, t, center, config)
        _draw_particles(draw, particles, t, center, config)
        _draw_core(draw, palette, t, center, config)
    except RenderError:
        raise
    except (OSError, ValueError, MemoryError) as e:
        logger.error(f"Frame render failed: {e}")
        raise RenderError(f"Frame render failed: {e}") from e
    return img.convert("RGBA")


def encode_png(image: Image.Image) -> bytes:
    """Encode a frame as PNG bytes."""
    buf = io.BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError) as e:
        logger.error(f"PNG encoding failed: {e}")
        raise RenderError(f"PNG encoding failed: {e}") from e
    return buf.getvalue()


async def encode_png_async(image: Image.Image) -> bytes:
    """encode_png() in the default executor, as one awaitable step."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, encode_png, image)


def render_static(
    particles: Sequence[Particle],
    waveforms: Sequence[WaveformLayer],
    palette: Palette,
    config: CanvasConfig = CANVAS_CONFIG,
) -> bytes:
    """Render the persisted frame (t fixed) and return PNG bytes."""
    frame = render_frame(particles, waveforms, palette, config.static_time, config)
    return encode_png(frame)
