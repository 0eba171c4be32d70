"""Adapters from decoded Pillow images to raw RGBA buffers."""

from __future__ import annotations

from PIL import Image

from ..config import DEFAULT_PARAMS, SignatureParams
from ..io.models import Signature
from ..signature import compute_signature_with


def image_to_rgba(img: Image.Image) -> tuple[bytes, int]:
    """Return the RGBA bytes of *img* and its width in pixels."""
    if not isinstance(img, Image.Image):
        raise TypeError("image_to_rgba expects a PIL.Image.Image instance")

    rgba_image = img.convert("RGBA") if img.mode != "RGBA" else img
    return rgba_image.tobytes(), rgba_image.width


def image_signature(
    img: Image.Image, params: SignatureParams = DEFAULT_PARAMS
) -> Signature:
    """Return the signature of a Pillow image of any mode."""
    rgba, width = image_to_rgba(img)
    return compute_signature_with(rgba, width, params)
