"""Pytest configuration and shared image fixtures."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image


def pytest_sessionstart() -> None:
    """Add the project root to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


def encode_image(width: int, height: int, fmt: str = "PNG", mode: str = "RGBA") -> bytes:
    """Encode a gradient image so resized output differs from the source."""
    image = Image.new(mode, (width, height))
    for x in range(width):
        for y in range(height):
            shade = (x * 7 + y * 3) % 256
            image.putpixel((x, y), (shade, 255 - shade, 128, 255)[: len(mode)])
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Return a factory for encoded test images."""
    return encode_image
