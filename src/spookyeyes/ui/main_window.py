"""Main application window: camera preview with the eye canvas laid over it."""

from typing import Optional

from PySide6.QtWidgets import QVBoxLayout, QMainWindow, QWidget

from spookyeyes.animation.eye_tracking import EyeTrackingEngine
from spookyeyes.core.events import EventBus, EventType
from spookyeyes.rendering.eye_canvas import EyeCanvas
from spookyeyes.ui.video_view import VideoView


class MainWindow(QMainWindow):
    """Top-level window holding the video preview and the eye canvas.

    Only the video view is in the layout; the canvas is a floating child
    that tracks the view's content box.
    """

    def __init__(self, event_bus: EventBus, engine: EyeTrackingEngine,
                 debug: bool = False, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("SpookyEyes")
        self.resize(960, 540)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)

        self.video_view = VideoView(central)
        layout.addWidget(self.video_view)

        self.canvas = EyeCanvas(self.video_view, engine, event_bus=event_bus,
                                debug=debug, parent=central)

        self.setCentralWidget(central)

        event_bus.subscribe(EventType.FRAME_CAPTURED, self.video_view.show_frame)
        event_bus.subscribe(EventType.FACE_DETECTED, self.video_view.show_detection)
