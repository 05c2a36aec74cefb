"""UI-independent core: configuration, transform math, gestures and image I/O."""

from .config import ViewerConfig, ConfigError, load_config
from .transform import ViewTransform, clamp, zoom_at_point, clamp_pan, fit_to_viewport, wheel_zoom_factor
from .gestures import GestureMode, GestureSession
from .image_io import numpy_to_qimage, load_image, load_qimage, is_image_file

__all__ = [
    "ViewerConfig",
    "ConfigError",
    "load_config",
    "ViewTransform",
    "clamp",
    "zoom_at_point",
    "clamp_pan",
    "fit_to_viewport",
    "wheel_zoom_factor",
    "GestureMode",
    "GestureSession",
    "numpy_to_qimage",
    "load_image",
    "load_qimage",
    "is_image_file",
]
