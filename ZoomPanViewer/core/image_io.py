"""Image I/O utilities for loading and converting images.

This module provides functions for:
- Loading images from files (OpenCV, NumPy)
- Converting NumPy arrays to QImage for Qt display
- Validating image file extensions
"""

from pathlib import Path
from typing import Union

import cv2
import numpy as np
from PySide6.QtGui import QImage

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".gif", ".webp", ".npy"}


def numpy_to_qimage(arr: np.ndarray) -> QImage:
    """Convert a NumPy image array to a Qt QImage suitable for display.

    The returned QImage owns its pixels (it is detached from the NumPy
    buffer), so the caller does not need to keep the array alive.

    Supported input shapes:
      - (H, W) -> 8-bit grayscale
      - (H, W, 1) -> 8-bit grayscale
      - (H, W, 3) -> RGB (8-bit per channel)
      - (H, W, 4) -> RGBA (8-bit per channel)
      - Any other channel count -> converted to grayscale by averaging

    Args:
        arr: Numeric image array. Float arrays are treated as [0, 1];
            integer arrays wider than 8 bits are rescaled from their full
            dtype range (e.g. 16-bit PNG/TIFF). Values outside [0, 255]
            are clipped.

    Returns:
        QImage: A freshly allocated QImage. ``None`` yields an empty QImage.

    Raises:
        ValueError: If ``arr`` is not 2- or 3-dimensional.
    """
    if arr is None:
        return QImage()
    a = np.asarray(arr)
    if np.issubdtype(a.dtype, np.floating):
        a = a * 255.0
    elif np.issubdtype(a.dtype, np.integer) and a.dtype.itemsize > 1:
        a = a.astype(np.float64) * 255.0 / np.iinfo(a.dtype).max
    if a.ndim == 3 and a.shape[2] == 1:
        a = a[..., 0]

    if a.ndim == 2:
        disp = np.ascontiguousarray(np.clip(a, 0, 255).astype(np.uint8))
        h, w = disp.shape
        return QImage(disp.data, w, h, w, QImage.Format_Grayscale8).copy()
    if a.ndim == 3:
        h, w, c = a.shape
        disp = np.ascontiguousarray(np.clip(a, 0, 255).astype(np.uint8))
        if c == 3:
            return QImage(disp.data, w, h, 3 * w, QImage.Format_RGB888).copy()
        if c == 4:
            return QImage(disp.data, w, h, 4 * w, QImage.Format_RGBA8888).copy()
        gray = np.ascontiguousarray(np.clip(a.mean(axis=2), 0, 255).astype(np.uint8))
        return QImage(gray.data, w, h, w, QImage.Format_Grayscale8).copy()
    raise ValueError(f"Unsupported array shape: {a.shape}")


def cv2_imread_unicode(path: str):
    data = np.fromfile(path, dtype=np.uint8)
    return cv2.imdecode(data, cv2.IMREAD_UNCHANGED)


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Load an image file into a NumPy array.

    Supported inputs:
      - .npy: loaded via numpy.load and returned as-is.
      - other supported extensions: read with OpenCV. Color images are
        converted from BGR/BGRA to RGB/RGBA; grayscale images are 2-D.

    Args:
        path: Path to the image file.

    Returns:
        np.ndarray: Image data (H, W[, C]).

    Raises:
        RuntimeError: If the file cannot be decoded or the format is unsupported.
        ValueError: If the decoded array is not 2- or 3-dimensional.
    """
    path_str = str(path)
    ext = Path(path_str).suffix.lower()

    if ext == ".npy":
        arr = np.load(path_str)
    elif ext in IMAGE_EXTENSIONS:
        arr = cv2_imread_unicode(path_str)
        if arr is None:
            raise RuntimeError(f"Cannot open image: {path_str}")
        if arr.ndim == 3 and arr.shape[2] == 4:
            arr = cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)
        elif arr.ndim == 3 and arr.shape[2] == 3:
            arr = cv2.cvtColor(arr, cv2.COLOR_BGR2RGB)
    else:
        raise RuntimeError(f"Cannot open image: {path_str} (unsupported format)")

    if arr.ndim not in (2, 3):
        raise ValueError(f"Expected a 2-D or 3-D image array, got shape {arr.shape}")
    return arr


def load_qimage(path: Union[str, Path]) -> QImage:
    """Load an image file straight into a display-ready QImage."""
    return numpy_to_qimage(load_image(path))


def is_image_file(path: Union[str, Path]) -> bool:
    """Return True if the given path has a supported image file suffix.

    Only the suffix is checked (case-insensitive); the file is not opened.
    """
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS
