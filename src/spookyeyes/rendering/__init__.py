"""Rendering subsystem -- QPainter drawing driven by a Qt frame loop."""

from spookyeyes.rendering.eye_canvas import EyeCanvas
from spookyeyes.rendering.painter import paint_frame
from spookyeyes.rendering.render_loop import RenderLoop

__all__ = [
    "EyeCanvas",
    "RenderLoop",
    "paint_frame",
]
