"""QPainter drawing of the decorative image and both eyes."""

from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter

from spookyeyes.animation.eye_tracking import EyeTrackingEngine
from spookyeyes.constants import DEBUG_BACKGROUND_COLOR, SOCKET_DEBUG_COLOR
from spookyeyes.core.geometry import letterbox_rect
from spookyeyes.loaders.image_loader import DecorativeImage


def draw_point(painter: QPainter, x: float, y: float, color: QColor, radius: float) -> None:
    """Fill a circle of *radius* centered at (x, y)."""
    painter.save()
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QBrush(color))
    painter.drawEllipse(QPointF(x, y), radius, radius)
    painter.restore()


def clear(painter: QPainter, width: int, height: int) -> None:
    painter.save()
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
    painter.fillRect(QRectF(0, 0, width, height), Qt.GlobalColor.transparent)
    painter.restore()


def paint_frame(painter: QPainter, width: int, height: int,
                engine: EyeTrackingEngine, image: Optional[DecorativeImage],
                now: Optional[float] = None, debug: bool = False) -> None:
    """Clear the surface, then draw the image and pupils if the image is loaded."""
    clear(painter, width, height)
    if debug:
        painter.fillRect(QRectF(0, 0, width, height), QColor(*DEBUG_BACKGROUND_COLOR))
    if image is None or not image.is_loaded or not engine.is_ready:
        return

    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

    dest = letterbox_rect(width, height, image.width, image.height)
    image.draw(painter, QRectF(dest.x, dest.y, dest.width, dest.height))

    if debug:
        socket_color = QColor(*SOCKET_DEBUG_COLOR)
        for center, radius in engine.eye_sockets().values():
            draw_point(painter, center.x, center.y, socket_color, radius)

    pupil_color = QColor(engine.pupil_color(now))
    for eye in engine.eyes.values():
        draw_point(painter, eye.x, eye.y, pupil_color, eye.radius)
