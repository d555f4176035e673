"""Pillow-backed decode and resize primitives.

Variants are re-encoded in the source's own format; there is no format
conversion. JPEG output keeps fixed save parameters.
"""

import io
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from pixel_density.errors import DecodeError, ResizeError


@dataclass(frozen=True)
class SourceImage:
    """A decoded source image.

    ``image`` is fully loaded and only ever read, so several threads may
    resize it at once.
    """

    data: bytes
    width: int
    height: int
    format: str
    image: Image.Image


def decode(data: bytes) -> SourceImage:
    try:
        im = Image.open(io.BytesIO(data))
        im.load()
    except (UnidentifiedImageError, OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"not a readable image: {e}") from e
    if not im.format:
        raise DecodeError("image format could not be determined")
    w, h = im.size
    return SourceImage(data=data, width=w, height=h, format=im.format, image=im)


def save_params(fmt: str) -> dict:
    params = {}
    if fmt.lower() in ("jpg", "jpeg"):
        params["quality"] = 95
        params["optimize"] = True
    return params


def resize(source: SourceImage, width: int, height: int) -> bytes:
    """Resize the original decoded image to ``width`` x ``height`` and encode it."""
    if width <= 0 or height <= 0:
        raise ResizeError(f"invalid target size {width}x{height}")
    try:
        out = source.image.resize((width, height), Image.LANCZOS)
        if source.format == "JPEG" and out.mode not in ("RGB", "L", "CMYK"):
            out = out.convert("RGB")
        buf = io.BytesIO()
        out.save(buf, format=source.format, **save_params(source.format))
    except (OSError, ValueError, KeyError) as e:
        raise ResizeError(f"failed to resize to {width}x{height}: {e}") from e
    return buf.getvalue()
