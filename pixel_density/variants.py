"""Per-ratio rendition of a decoded source image."""

import concurrent.futures as cf
import logging
import math
from typing import Dict, NamedTuple, Optional, Sequence, Tuple

from pixel_density.imaging import SourceImage, resize

logger = logging.getLogger(__name__)


class Rendition(NamedTuple):
    data: bytes
    width: int
    height: int


def target_size(base_width: float, base_height: float, ratio: float) -> Tuple[int, int]:
    """Round base times ratio half-up to whole pixels."""
    return _round_half_up(base_width * ratio), _round_half_up(base_height * ratio)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def derive(source: SourceImage, base_width: float, base_height: float,
           ratios: Sequence[float], *, native_ratio: Optional[float] = None,
           max_workers: Optional[int] = None) -> Dict[float, Rendition]:
    """Produce one rendition per ratio, keyed in ``ratios`` order.

    The member equal to ``native_ratio`` (the last one unless given) reuses
    the source bytes verbatim. Every other member is resized from the
    original decoded image, concurrently. The first failure propagates and
    nothing is returned.
    """
    if native_ratio is None:
        native_ratio = ratios[-1]

    def render(ratio: float) -> Rendition:
        # Float equality: both sides come from the same parsed suffix.
        if ratio == native_ratio:
            logger.debug("reusing source bytes for %sx", ratio)
            return Rendition(source.data, source.width, source.height)
        w, h = target_size(base_width, base_height, ratio)
        logger.debug("resizing %dx%d -> %dx%d for %sx", source.width, source.height, w, h, ratio)
        return Rendition(resize(source, w, h), w, h)

    with cf.ThreadPoolExecutor(max_workers=max_workers) as ex:
        renditions = list(ex.map(render, ratios))
    return dict(zip(ratios, renditions))
