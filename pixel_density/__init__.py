"""Pixel-density image variants from a single ``name@<ratio>x`` source."""

from pixel_density.config import DensityConfig
from pixel_density.descriptor import Descriptor, ImageElement
from pixel_density.errors import ConfigError, DecodeError, PixelDensityError, ResizeError
from pixel_density.naming import DirectoryEmitter, PublicPathNamer
from pixel_density.pipeline import Variant, process
from pixel_density.ratios import parse_density_suffix, resolve

__all__ = [
    "ConfigError",
    "DecodeError",
    "DensityConfig",
    "Descriptor",
    "DirectoryEmitter",
    "ImageElement",
    "PixelDensityError",
    "PublicPathNamer",
    "ResizeError",
    "Variant",
    "parse_density_suffix",
    "process",
    "resolve",
]
