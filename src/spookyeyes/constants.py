"""Shared constants and paths for SpookyEyes."""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
CONFIG_DIR = ASSETS_DIR / "config"
IMAGES_DIR = ASSETS_DIR / "images"
MODELS_DIR = ASSETS_DIR / "models"

DEFAULT_IMAGE_PATH = IMAGES_DIR / "spooky.svg"
DEFAULT_MODEL_PATH = MODELS_DIR / "face_landmarker.task"
EYE_CONFIG_NAME = "eyes.json"

# Eye geometry in image design pixels (scaled by the letterbox factor)
PUPIL_RADIUS = 30.0
EYE_RADIUS = 80.0
LEFT_EYE_OFFSET = (-165.0, -135.0)
RIGHT_EYE_OFFSET = (140.0, -100.0)
EYE_NAMES = ("left", "right")

# Pupil colors
CALM_COLOR = "black"
ALERT_COLOR = "#b3121f"
SOCKET_DEBUG_COLOR = (255, 0, 0, 204)  # rgba(255,0,0,0.8)
DEBUG_BACKGROUND_COLOR = (0, 255, 0, 51)

# Seconds after the last observation during which pupils stay alert
ALERT_WINDOW = 1.0

# Pixels a pupil moves per rendered frame
EYE_SPEED = 1.0

# Timing
FRAME_INTERVAL_MS = 16  # ~60 fps
DETECTION_INTERVAL_MS = 100

# Camera defaults
CAMERA_INDEX = 0
CAMERA_WIDTH = 1280
CAMERA_HEIGHT = 720
