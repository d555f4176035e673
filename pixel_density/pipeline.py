"""Entry point: one source image in, emitted variants and a descriptor out."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from pixel_density.config import DensityConfig
from pixel_density.descriptor import Descriptor, build
from pixel_density.imaging import decode
from pixel_density.naming import PublicPathNamer, content_hash
from pixel_density.ratios import format_ratio, resolve
from pixel_density.variants import derive

logger = logging.getLogger(__name__)

NameAssigner = Callable[[str, float, str], Tuple[str, str]]
Emitter = Callable[[str, bytes], None]


@dataclass(frozen=True)
class Variant:
    ratio: float
    name: str
    url: str
    data: bytes
    width: int
    height: int


def process(source_bytes: bytes, filename: str,
            config: Union[DensityConfig, Mapping[str, Any], None] = None, *,
            assign_name: Optional[NameAssigner] = None,
            emit: Optional[Emitter] = None,
            content_id: Optional[str] = None,
            max_workers: Optional[int] = None) -> Descriptor:
    """Derive every density variant of ``source_bytes`` and describe them.

    Args:
        source_bytes: Raw bytes of the source image.
        filename: Source filename; an ``@<ratio>x`` suffix declares its density.
        config: A ``DensityConfig`` or a mapping of options.
        assign_name: ``(content_id, ratio, ext) -> (name, url)``.
        emit: ``(name, data) -> None``, called once per variant.
        content_id: Base identifier for names; defaults to a content hash.
        max_workers: Thread count for the resize pool.

    Raises:
        ConfigError: Before any decoding, for a bad option.
        DecodeError: If the source is not an image. Nothing is emitted.
        ResizeError: If any variant fails. Nothing is emitted.
    """
    if not isinstance(config, DensityConfig):
        config = DensityConfig.from_options(config)
    if assign_name is None:
        assign_name = PublicPathNamer()

    source = decode(source_bytes)
    resolution = resolve(filename, source.width, source.height)
    logger.info(
        "processing %s (%dx%d) at ratios %s",
        filename, source.width, source.height,
        ", ".join(format_ratio(r) for r in resolution.ratios),
    )
    renditions = derive(
        source,
        resolution.base_width,
        resolution.base_height,
        resolution.ratios,
        native_ratio=resolution.native_ratio,
        max_workers=max_workers,
    )

    if content_id is None:
        content_id = content_hash(source_bytes)
    _, ext = os.path.splitext(filename)
    variants: Dict[float, Variant] = {}
    for ratio, rendition in renditions.items():
        name, url = assign_name(content_id, ratio, ext)
        variants[ratio] = Variant(ratio, name, url, rendition.data, rendition.width, rendition.height)

    if emit is not None:
        for variant in variants.values():
            emit(variant.name, variant.data)

    return build(
        lambda r: variants[r].url,
        resolution.ratios,
        variants,
        include_markup=config.include_markup,
    )
