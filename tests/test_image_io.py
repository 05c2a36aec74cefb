"""Tests for image loading and NumPy to QImage conversion."""

import cv2
import numpy as np
import pytest
from PySide6.QtGui import QImage

from ZoomPanViewer.core.image_io import numpy_to_qimage, load_image, load_qimage, is_image_file


@pytest.mark.parametrize(
    "shape,fmt",
    [
        ((20, 30), QImage.Format_Grayscale8),
        ((20, 30, 1), QImage.Format_Grayscale8),
        ((20, 30, 3), QImage.Format_RGB888),
        ((20, 30, 4), QImage.Format_RGBA8888),
        ((20, 30, 2), QImage.Format_Grayscale8),
    ],
)
def test_numpy_to_qimage_formats(shape, fmt):
    qimg = numpy_to_qimage(np.zeros(shape, dtype=np.uint8))
    assert qimg.width() == 30
    assert qimg.height() == 20
    assert qimg.format() == fmt


def test_numpy_to_qimage_outlives_array():
    arr = np.full((4, 5, 3), 200, dtype=np.uint8)
    qimg = numpy_to_qimage(arr)
    del arr
    assert qimg.pixelColor(2, 2).red() == 200


def test_numpy_to_qimage_scales_floats():
    qimg = numpy_to_qimage(np.ones((2, 2), dtype=np.float32))
    assert qimg.pixelColor(0, 0).red() == 255


def test_numpy_to_qimage_edge_cases():
    assert numpy_to_qimage(None).isNull()
    with pytest.raises(ValueError):
        numpy_to_qimage(np.zeros(5, dtype=np.uint8))


def test_load_png_converts_bgr_to_rgb(tmp_path):
    bgr = np.zeros((10, 12, 3), dtype=np.uint8)
    bgr[..., 2] = 255  # red in OpenCV's channel order
    path = tmp_path / "red.png"
    assert cv2.imwrite(str(path), bgr)

    arr = load_image(path)
    assert arr.shape == (10, 12, 3)
    assert arr[0, 0].tolist() == [255, 0, 0]

    qimg = load_qimage(path)
    assert (qimg.width(), qimg.height()) == (12, 10)


def test_load_npy(tmp_path):
    path = tmp_path / "gradient.npy"
    np.save(path, np.arange(12, dtype=np.uint8).reshape(3, 4))
    arr = load_image(path)
    assert arr.shape == (3, 4)


def test_load_errors(tmp_path):
    with pytest.raises(RuntimeError, match="unsupported"):
        load_image(tmp_path / "notes.txt")

    garbage = tmp_path / "garbage.png"
    garbage.write_bytes(b"not a png")
    with pytest.raises(RuntimeError):
        load_image(garbage)

    flat = tmp_path / "flat.npy"
    np.save(flat, np.zeros(7))
    with pytest.raises(ValueError):
        load_image(flat)


def test_is_image_file():
    assert is_image_file("schematic.PNG")
    assert is_image_file("board.jpeg")
    assert is_image_file("data.npy")
    assert not is_image_file("readme.md")


def test_load_16bit_png_uses_full_range(tmp_path):
    gray = np.zeros((4, 4), dtype=np.uint16)
    gray[:, :2] = 1000
    gray[:, 2:] = 40000
    path = tmp_path / "deep.png"
    assert cv2.imwrite(str(path), gray)

    assert load_image(path).dtype == np.uint16
    qimg = load_qimage(path)
    left = qimg.pixelColor(0, 0).red()
    right = qimg.pixelColor(3, 0).red()
    assert left == 3
    assert right == 155


def test_numpy_to_qimage_rescales_wide_integers():
    arr = np.array([[0, 65535]], dtype=np.uint16)
    qimg = numpy_to_qimage(arr)
    assert qimg.pixelColor(0, 0).red() == 0
    assert qimg.pixelColor(1, 0).red() == 255
