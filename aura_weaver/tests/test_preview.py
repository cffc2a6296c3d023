# tests/test_preview.py
"""
Tests for the PyQt5 live preview.

Runs on the offscreen platform; skipped when PyQt5 is not installed.
"""
import os

import pytest

pytest.importorskip("PyQt5")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtGui import QImage  # noqa: E402
from PyQt5.QtWidgets import QApplication  # noqa: E402

from aura_weaver.compositor import render_frame  # noqa: E402
from aura_weaver.config import CANVAS_CONFIG  # noqa: E402
from aura_weaver.preview import AuraPreview, pil_to_qimage  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def test_pil_to_qimage(happy_scene):
    s = happy_scene
    img = render_frame(s.particles, s.waveforms, s.palette, 0.0)
    qimg = pil_to_qimage(img)
    assert qimg.width() == img.width
    assert qimg.height() == img.height
    assert qimg.format() == QImage.Format_RGBA8888


def test_stopped_preview_is_at_static_time(qapp, happy_scene):
    widget = AuraPreview(happy_scene)
    assert not widget.is_running()
    assert widget.current_time() == CANVAS_CONFIG.static_time


def test_set_scene_renders_frame(qapp, happy_scene):
    widget = AuraPreview()
    assert widget.render_at(0.0) is None
    widget.set_scene(happy_scene)
    frame = widget.render_at(0.5)
    assert frame is not None
    assert frame.width() == CANVAS_CONFIG.width


def test_start_stop(qapp, happy_scene):
    widget = AuraPreview(happy_scene)
    widget.start()
    assert widget.is_running()
    assert widget.current_time() >= 0.0
    widget.stop()
    assert not widget.is_running()
    assert widget.current_time() == CANVAS_CONFIG.static_time
