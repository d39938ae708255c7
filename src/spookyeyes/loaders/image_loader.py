"""Decorative image loading (raster or SVG) for the eye canvas."""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, QRectF, QTimer, Qt, Signal
from PySide6.QtGui import QImage, QPainter
from PySide6.QtSvg import QSvgRenderer

logger = logging.getLogger(__name__)


class DecorativeImage(QObject):
    """The image the eyes are drawn over.

    Loading is deferred to the event loop; ``ready(width, height)`` is
    emitted exactly once, when the bitmap is available. Until then
    :attr:`is_loaded` is False and callers skip drawing it.
    """

    ready = Signal(int, int)

    def __init__(self, path: Path, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.path = Path(path)
        self._image: Optional[QImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._image is not None

    @property
    def width(self) -> int:
        return self._image.width() if self._image is not None else 0

    @property
    def height(self) -> int:
        return self._image.height() if self._image is not None else 0

    def load_later(self, delay_ms: int = 0) -> None:
        QTimer.singleShot(delay_ms, self.load)

    def load(self) -> bool:
        """Load the image now. Returns True once the image is available."""
        if self._image is not None:
            return True

        if self.path.suffix.lower() == ".svg":
            image = self._render_svg()
        else:
            image = QImage(str(self.path))
            if image.isNull():
                image = None

        if image is None:
            logger.warning("Could not load decorative image: %s", self.path)
            return False

        self._image = image
        logger.info("Loaded %s (%dx%d)", self.path.name, image.width(), image.height())
        self.ready.emit(image.width(), image.height())
        return True

    def draw(self, painter: QPainter, target: QRectF) -> None:
        if self._image is not None:
            painter.drawImage(target, self._image)

    def _render_svg(self) -> Optional[QImage]:
        renderer = QSvgRenderer(str(self.path))
        if not renderer.isValid():
            return None
        size = renderer.defaultSize()
        if size.isEmpty():
            return None
        image = QImage(size, QImage.Format.Format_ARGB32_Premultiplied)
        image.fill(Qt.GlobalColor.transparent)
        painter = QPainter(image)
        try:
            renderer.render(painter)
        finally:
            painter.end()
        return image
