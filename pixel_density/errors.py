"""Exceptions raised by the density variant pipeline.

Every failure is fatal to the invocation that raised it; nothing is retried.
"""


class PixelDensityError(Exception):
    """Base exception for all pipeline failures."""


class ConfigError(PixelDensityError):
    """Raised for an unrecognized or malformed configuration option."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class DecodeError(PixelDensityError):
    """Raised when the source bytes are not a readable image."""


class ResizeError(PixelDensityError):
    """Raised when a variant cannot be resized or encoded."""
