"""Transparent drawing surface that follows a sibling widget's size."""

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QObject, QRect, Qt
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QWidget

from spookyeyes.animation.eye_tracking import EyeTrackingEngine
from spookyeyes.core.events import EventBus, EventType
from spookyeyes.loaders.image_loader import DecorativeImage
from spookyeyes.rendering.painter import paint_frame

logger = logging.getLogger(__name__)


class EyeCanvas(QWidget):
    """Canvas for the decorative image and the animated pupils.

    The canvas floats over the sibling's content box without joining any
    layout, so its own size never feeds back into the sibling. It
    resizes on construction, on the sibling's resize events and on the
    top-level window's resize events (layout changes such as the video
    starting to play only show up on one of the two).

    Parameters
    ----------
    sibling : QWidget
        Widget whose content size the canvas mirrors.
    engine : EyeTrackingEngine
        Eye state to draw.
    event_bus : EventBus, optional
        Receives ``FRAME_RENDERED`` after each frame.
    debug : bool
        Draw the eye sockets and a tinted background.
    """

    def __init__(self, sibling: QWidget, engine: EyeTrackingEngine,
                 event_bus: Optional[EventBus] = None, debug: bool = False,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent if parent is not None else sibling.parentWidget())
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

        self._sibling = sibling
        self._engine = engine
        self._event_bus = event_bus
        self._image: Optional[DecorativeImage] = None
        self._window: Optional[QWidget] = None
        self.debug = debug

        sibling.installEventFilter(self)
        self._watch_window()
        self.resize_surface()

    # ── Public API ──

    @property
    def engine(self) -> EyeTrackingEngine:
        return self._engine

    def set_image(self, image: DecorativeImage) -> None:
        """Attach the decorative image; eyes initialize when it becomes ready."""
        self._image = image
        if image.is_loaded:
            self._on_image_ready(image.width, image.height)
        else:
            image.ready.connect(self._on_image_ready)

    def resize_surface(self) -> None:
        """Cover the sibling's content box and snap the eyes to rest."""
        content = self._sibling.contentsRect()
        w, h = content.width(), content.height()
        if (w, h) != (self.width(), self.height()):
            logger.debug("Canvas resized to %dx%d", w, h)
        self._place()
        self._engine.set_canvas_size(w, h)
        self.update()

    def render_frame(self, elapsed: float = 0.0) -> None:
        """One frame: step the eyes, repaint now, then aim at the next target."""
        self._engine.advance()
        self.repaint()
        self._engine.retarget()
        if self._event_bus is not None:
            self._event_bus.publish(EventType.FRAME_RENDERED, elapsed=elapsed)

    # ── Qt overrides ──

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.Resize and watched in (self._sibling, self._window):
            self.resize_surface()
        elif event.type() == QEvent.Type.Move and watched is self._sibling:
            self._place()
        return super().eventFilter(watched, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._watch_window()
        self.resize_surface()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            paint_frame(painter, self.width(), self.height(), self._engine,
                        self._image, debug=self.debug)
        finally:
            painter.end()

    # ── Internal ──

    def _place(self) -> None:
        """Position the canvas over the sibling's content box."""
        content = self._sibling.contentsRect()
        parent = self.parentWidget()
        origin = content.topLeft()
        if parent is not None and parent is not self._sibling:
            origin = self._sibling.mapTo(parent, origin)
        self.setGeometry(QRect(origin, content.size()))
        self.raise_()

    def _watch_window(self) -> None:
        window = self._sibling.window()
        if window is self._window or window is self._sibling:
            return
        if self._window is not None:
            self._window.removeEventFilter(self)
        window.installEventFilter(self)
        self._window = window

    def _on_image_ready(self, width: int, height: int) -> None:
        self._engine.set_image_size(width, height)
        self.update()
