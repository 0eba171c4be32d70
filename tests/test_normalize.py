import numpy as np
import pytest
from PIL import Image

from imgsig import DEFAULT_PARAMS, SignatureParams, compute_default_signature
from imgsig.extract.normalize import image_signature, image_to_rgba
from imgsig.signature import signature_length


def test_rgba_image_bytes_pass_through():
    img = Image.new("RGBA", (3, 2), (10, 20, 30, 40))

    rgba, width = image_to_rgba(img)

    assert width == 3
    assert rgba == bytes([10, 20, 30, 40]) * 6


def test_other_modes_are_converted_to_rgba():
    img = Image.new("L", (4, 4), 90)

    rgba, width = image_to_rgba(img)

    assert width == 4
    assert len(rgba) == 4 * 4 * 4
    assert rgba[:4] == bytes([90, 90, 90, 255])


def test_non_image_raises_type_error():
    with pytest.raises(TypeError):
        image_to_rgba(np.zeros((4, 4, 4), dtype=np.uint8))


def test_image_signature_matches_buffer_signature(wave_pixels, rgba_bytes):
    rgb = wave_pixels()
    img = Image.fromarray(rgb)

    assert image_signature(img) == compute_default_signature(rgba_bytes(rgb), 200)
    assert image_signature(img, DEFAULT_PARAMS) == image_signature(img)


def test_image_signature_with_tuning(wave_pixels):
    img = Image.fromarray(wave_pixels())

    signature = image_signature(img, SignatureParams(crop=0.1, grid_size=6))

    assert len(signature) == signature_length(6)
