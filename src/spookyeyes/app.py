"""SpookyEyes application entry point.

Wires together the camera, face detection, the eye engine and the canvas.
"""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from spookyeyes.animation.eye_tracking import EyeTrackingEngine
from spookyeyes.constants import CAMERA_INDEX, DEFAULT_IMAGE_PATH, DEFAULT_MODEL_PATH
from spookyeyes.core.config_loader import load_eye_config
from spookyeyes.core.events import EventBus, EventType
from spookyeyes.export.frame_export import FrameExporter
from spookyeyes.loaders.image_loader import DecorativeImage
from spookyeyes.rendering.render_loop import RenderLoop
from spookyeyes.tracking.camera import Camera
from spookyeyes.tracking.detection_worker import DetectionWorker
from spookyeyes.tracking.face_detector import FaceDetector
from spookyeyes.ui.main_window import MainWindow

logger = logging.getLogger("spookyeyes")


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="spookyeyes",
        description="Cartoon eyes that follow your nose through the webcam.",
    )
    parser.add_argument("--config", type=Path, default=None,
                        help="Eye config JSON (default: assets/config/eyes.json)")
    parser.add_argument("--image", type=Path, default=DEFAULT_IMAGE_PATH,
                        help="Decorative image (SVG or raster)")
    parser.add_argument("--camera", type=int, default=CAMERA_INDEX,
                        help="Webcam index")
    parser.add_argument("--model", type=Path, default=DEFAULT_MODEL_PATH,
                        help="MediaPipe face_landmarker.task bundle")
    parser.add_argument("--debug", action="store_true",
                        help="Draw eye sockets and tint the canvas")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--record", type=Path, default=None,
                        help="Record the canvas to this GIF file")
    parser.add_argument("--record-seconds", type=float, default=5.0,
                        help="Recording length in seconds")
    return parser.parse_args(argv)


def _create_detector(model_path: Path):
    try:
        return FaceDetector(model_path)
    except FileNotFoundError as e:
        logger.error("%s; eyes will stay at rest", e)
        return None


def main(argv=None):
    """Launch the SpookyEyes application."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(name)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])

    # Core systems
    event_bus = EventBus()
    config = load_eye_config(args.config)
    engine = EyeTrackingEngine(config)

    window = MainWindow(event_bus, engine, debug=args.debug)
    canvas = window.canvas

    image = DecorativeImage(args.image)
    canvas.set_image(image)

    # ── Wire detections → engine ──

    def on_face_detected(detection=None, **kw):
        engine.report_face(detection.bounds, detection.landmarks, detection.expressions)

    event_bus.subscribe(EventType.FACE_DETECTED, on_face_detected)

    camera = Camera(args.camera)
    worker = None
    if camera.start():
        detector = _create_detector(args.model)
        worker = DetectionWorker(camera, detector, event_bus,
                                 window.video_view.display_size)
        if detector is not None:
            app.aboutToQuit.connect(detector.close)
    else:
        logger.error("Camera %d unavailable; eyes will stay at rest", args.camera)

    # ── Optional GIF recording ──

    if args.record is not None:
        exporter = FrameExporter(canvas)
        event_bus.subscribe(EventType.FRAME_RENDERED, exporter.capture_frame)
        exporter.start_recording()

        def finish_recording():
            event_bus.unsubscribe(EventType.FRAME_RENDERED, exporter.capture_frame)
            exporter.save_gif(str(args.record))

        QTimer.singleShot(int(args.record_seconds * 1000), finish_recording)

    render_loop = RenderLoop(canvas.render_frame)

    window.show()
    image.load_later()
    render_loop.start()
    if worker is not None:
        worker.start()
        app.aboutToQuit.connect(worker.stop)
    app.aboutToQuit.connect(camera.stop)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
