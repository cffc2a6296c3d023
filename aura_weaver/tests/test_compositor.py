# tests/test_compositor.py
"""
Tests for frame compositing and PNG encoding.
"""
import asyncio
import io
import math

import pytest
from PIL import Image

from aura_weaver.compositor import (
    encode_png,
    encode_png_async,
    particle_position,
    render_frame,
    render_static,
    waveform_points,
)
from aura_weaver.config import CANVAS_CONFIG, CanvasConfig
from aura_weaver.errors import RenderError
from aura_weaver.models import MotionClass, Particle, WaveformLayer
from aura_weaver.palettes import WARM

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _particle(motion=MotionClass.ORBITING, phase=0.0):
    return Particle(
        index=0,
        angle_base=0.0,
        base_radius=100.0,
        radius_variation=10.0,
        size=6.0,
        color=(200, 100, 50),
        phase_offset=phase,
        motion=motion,
    )


def _render(scene, t=0.0, config=CANVAS_CONFIG):
    return render_frame(scene.particles, scene.waveforms, scene.palette, t, config)


class TestGeometry:

    def test_orbiting_at_zero(self):
        x, y = particle_position(_particle(), 0.0, (200.0, 200.0))
        assert x == pytest.approx(300.0)
        assert y == pytest.approx(200.0)

    def test_orbiting_moves_with_time(self):
        p = _particle()
        assert particle_position(p, 0.0, (0, 0)) != particle_position(p, 1.0, (0, 0))

    @pytest.mark.parametrize("motion", list(MotionClass))
    def test_radius_within_variation(self, motion):
        p = _particle(motion=motion, phase=1.3)
        for t in (0.0, 0.7, 5.0):
            x, y = particle_position(p, t, (0.0, 0.0))
            r = math.hypot(x, y)
            assert p.base_radius - p.radius_variation - 1e-6 <= r
            assert r <= p.base_radius + p.radius_variation + 1e-6

    def test_waveform_closed(self):
        layer = WaveformLayer(0, 10.0, 0.5, (1, 2, 3), 80, 90.0, 4)
        points = waveform_points(layer, 0.0, (200, 200), 5)
        assert len(points) == 360 // 5 + 1
        assert points[0] == points[-1]


class TestRenderFrame:

    def test_size_and_mode(self, happy_scene):
        img = _render(happy_scene)
        assert img.size == (CANVAS_CONFIG.width, CANVAS_CONFIG.height)
        assert img.mode == "RGBA"

    def test_same_time_same_pixels(self, happy_scene):
        assert _render(happy_scene).tobytes() == _render(happy_scene).tobytes()

    def test_time_changes_frame(self, happy_scene):
        assert _render(happy_scene, 0.0).tobytes() != _render(happy_scene, 1.5).tobytes()

    def test_corner_is_background(self, happy_scene):
        r, g, b, a = _render(happy_scene).getpixel((0, 0))
        bg = CANVAS_CONFIG.background
        assert abs(r - bg[0]) <= 3 and abs(g - bg[1]) <= 3 and abs(b - bg[2]) <= 3
        assert a == 255

    def test_core_is_bright(self, happy_scene):
        cx, cy = CANVAS_CONFIG.width // 2, CANVAS_CONFIG.height // 2
        r, g, b, _ = _render(happy_scene).getpixel((cx, cy))
        assert min(r, g, b) >= 150

    def test_bad_canvas_raises_render_error(self, happy_scene):
        with pytest.raises(RenderError):
            _render(happy_scene, config=CanvasConfig(width=0))


class TestLayers:
    """Pixel checks against a frame with only the background and core."""

    def _bare(self):
        return render_frame((), (), WARM, 0.0)

    def _still(self, index, angle):
        return Particle(
            index=index,
            angle_base=angle,
            base_radius=150.0,
            radius_variation=0.0,
            size=6.0,
            color=(200, 100, 50),
            phase_offset=0.0,
            motion=MotionClass.ORBITING,
        )

    def test_connection_line_every_nth_particle(self):
        # index 0 sits at (350, 200) and index 1 at (50, 200)
        particles = (self._still(0, 0.0), self._still(1, math.pi))
        img = render_frame(particles, (), WARM, 0.0)
        bare = self._bare()
        assert img.getpixel((275, 200)) != bare.getpixel((275, 200))
        assert img.getpixel((125, 200)) == bare.getpixel((125, 200))

    def test_waveform_polyline_drawn(self):
        layer = WaveformLayer(0, 0.0, 0.0, (255, 255, 255), 200, 120.0, 3)
        img = render_frame((), (layer,), WARM, 0.0)
        bare = self._bare()
        window = [(320 + dx, 200 + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]
        assert any(img.getpixel(xy) != bare.getpixel(xy) for xy in window)
        # inside the ring, away from the core, stays untouched
        assert img.getpixel((260, 200)) == bare.getpixel((260, 200))


class TestEncoding:

    def test_static_is_png(self, happy_scene):
        data = render_static(happy_scene.particles, happy_scene.waveforms, happy_scene.palette)
        assert data.startswith(PNG_MAGIC)
        img = Image.open(io.BytesIO(data))
        assert img.size == (CANVAS_CONFIG.width, CANVAS_CONFIG.height)
        assert img.mode == "RGBA"

    def test_static_ignores_preview_time(self, happy_scene):
        s = happy_scene
        static = render_static(s.particles, s.waveforms, s.palette)
        assert static == encode_png(_render(s, CANVAS_CONFIG.static_time))
        assert static != encode_png(_render(s, 2.0))

    def test_async_matches_sync(self, happy_scene):
        frame = _render(happy_scene)
        assert asyncio.run(encode_png_async(frame)) == encode_png(frame)

    def test_encode_failure(self):
        class BrokenImage:
            def save(self, fp, format=None):
                raise OSError("disk gone")

        with pytest.raises(RenderError) as exc:
            encode_png(BrokenImage())
        assert isinstance(exc.value.__cause__, OSError)
