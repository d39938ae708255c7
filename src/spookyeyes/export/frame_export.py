"""Screenshot and GIF export from the eye canvas.

Frames are grabbed from the widget as QImages and encoded to GIF via
PIL/Pillow.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image
from PySide6.QtGui import QImage
from PySide6.QtWidgets import QWidget

from spookyeyes.constants import FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)

# GIF viewers stretch shorter frame delays to 100 ms
MIN_GIF_FRAME_MS = 20


def qimage_to_pil(qimage: QImage) -> Image.Image:
    qimage = qimage.convertToFormat(QImage.Format.Format_RGBA8888)
    raw = bytes(qimage.constBits())
    # Rows may be padded; respect bytesPerLine
    return Image.frombuffer("RGBA", (qimage.width(), qimage.height()), raw,
                            "raw", "RGBA", qimage.bytesPerLine(), 1)


class FrameExporter:
    """Captures rendered frames from a widget.

    Parameters
    ----------
    widget : QWidget
        Widget to grab, normally the :class:`EyeCanvas`.
    max_frames : int
        Recording stops collecting once this many frames are held.
    """

    def __init__(self, widget: QWidget, max_frames: int = 600):
        self._widget = widget
        self.max_frames = max_frames
        self._frames: list[QImage] = []
        self._elapsed: list[Optional[float]] = []
        self.recording = False

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    def export_screenshot(self, output_path: str) -> bool:
        """Save the current frame as an image."""
        frame = self._grab_frame()
        if frame is None:
            return False
        if not frame.save(str(output_path)):
            logger.error("Screenshot failed: %s", output_path)
            return False
        logger.info("Saved screenshot: %s", output_path)
        return True

    def start_recording(self) -> None:
        self._frames.clear()
        self._elapsed.clear()
        self.recording = True

    def capture_frame(self, elapsed: Optional[float] = None, **kw) -> None:
        """Grab one frame while recording; usable as a FRAME_RENDERED handler.

        ``elapsed`` is the frame's render time in seconds and becomes its
        display time in the GIF.
        """
        if not self.recording or len(self._frames) >= self.max_frames:
            return
        frame = self._grab_frame()
        if frame is not None:
            self._frames.append(frame)
            self._elapsed.append(elapsed)

    def frame_durations(self, fps: Optional[float] = None) -> list[int]:
        """Per-frame GIF delays in ms.

        Frames captured without an elapsed time use ``1000 / fps``, or the
        render interval when no fps is given.
        """
        fallback = 1000.0 / fps if fps else float(FRAME_INTERVAL_MS)
        durations = []
        for elapsed in self._elapsed:
            ms = elapsed * 1000.0 if elapsed else fallback
            durations.append(max(MIN_GIF_FRAME_MS, int(round(ms))))
        return durations

    def save_gif(self, output_path: str, fps: Optional[float] = None) -> bool:
        """Stop recording and encode the captured frames to a GIF."""
        self.recording = False
        if not self._frames:
            logger.warning("No frames recorded, nothing written to %s", output_path)
            return False

        pil_frames = []
        for qimg in self._frames:
            img = qimage_to_pil(qimg)
            # P mode for GIF
            pil_frames.append(img.convert("RGB").quantize(colors=256, dither=Image.Dither.FLOYDSTEINBERG))

        pil_frames[0].save(
            output_path,
            save_all=True,
            append_images=pil_frames[1:],
            duration=self.frame_durations(fps),
            loop=0,
        )
        logger.info("Exported GIF: %s (%d frames)", output_path, len(pil_frames))
        self._frames.clear()
        self._elapsed.clear()
        return True

    def _grab_frame(self) -> Optional[QImage]:
        image = self._widget.grab().toImage()
        if image.isNull():
            logger.warning("Frame grab failed")
            return None
        return image
