"""
Live Aura Preview
Redraws a scene continuously with wall-clock time.

Frames drawn here are for the screen only. The persisted artifact always
comes from compositor.render_static().
"""

import time
from typing import Optional

from PIL import Image
from PyQt5.QtCore import QTimer
from PyQt5.QtGui import QImage, QPainter
from PyQt5.QtWidgets import QWidget

from .compositor import render_frame
from .config import CANVAS_CONFIG
from .models import Scene


def pil_to_qimage(img: Image.Image) -> QImage:
    """Convert an RGBA PIL image to a QImage that owns its pixels."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    data = img.tobytes("raw", "RGBA")
    qimg = QImage(data, img.width, img.height, 4 * img.width, QImage.Format_RGBA8888)
    return qimg.copy()


class AuraPreview(QWidget):
    """Animated preview of a scene (~30fps)."""

    FRAME_INTERVAL_MS = 33

    def __init__(self, scene: Optional[Scene] = None, parent=None):
        super().__init__(parent)
        self.setFixedSize(CANVAS_CONFIG.width, CANVAS_CONFIG.height)

        self._scene = scene
        self._frame: Optional[QImage] = None
        self._started_at: Optional[float] = None

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_timer)
        self._timer.setInterval(self.FRAME_INTERVAL_MS)

    def set_scene(self, scene: Scene) -> None:
        self._scene = scene
        self._started_at = time.monotonic() if self.is_running() else None
        self.render_at(self.current_time())

    def scene(self) -> Optional[Scene]:
        return self._scene

    def is_running(self) -> bool:
        return self._timer.isActive()

    def current_time(self) -> float:
        """Seconds since start(); 0.0 while stopped."""
        if self._started_at is None:
            return CANVAS_CONFIG.static_time
        return time.monotonic() - self._started_at

    def start(self) -> None:
        self._started_at = time.monotonic()
        self._timer.start()
        self.show()

    def stop(self) -> None:
        self._timer.stop()
        self._started_at = None
        self.render_at(CANVAS_CONFIG.static_time)

    def render_at(self, t: float) -> Optional[QImage]:
        """Render the scene at time t into the widget's frame buffer."""
        if self._scene is None:
            self._frame = None
        else:
            s = self._scene
            self._frame = pil_to_qimage(render_frame(s.particles, s.waveforms, s.palette, t))
        self.update()
        return self._frame

    def _on_timer(self) -> None:
        self.render_at(self.current_time())

    def paintEvent(self, event):
        if self._frame is None:
            return
        painter = QPainter(self)
        painter.drawImage(0, 0, self._frame)
        painter.end()
