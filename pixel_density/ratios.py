"""Density ratio parsing and ratio-set construction.

A source named ``icon@3x.png`` is the 3x rendering of a logical image, so its
1x size is the native size divided by 3 and the variants to produce are 1x,
2x and 3x. A fractional ratio (``@2.5x``) adds itself after the integers.
"""

import math
import os
import re
from typing import NamedTuple, Optional, Tuple

# "@" + decimal number + "x", anywhere in the stem; first match wins.
DENSITY_SUFFIX_RE = re.compile(r"@(\d+(?:\.\d+)?)x")


class Resolution(NamedTuple):
    base_width: float
    base_height: float
    ratios: Tuple[float, ...]
    native_ratio: float


def parse_density_suffix(filename: str) -> Optional[float]:
    """Return the declared maximum ratio of ``filename``, or None."""
    stem, _ = os.path.splitext(os.path.basename(filename))
    match = DENSITY_SUFFIX_RE.search(stem)
    if not match:
        return None
    ratio = float(match.group(1))
    if not math.isfinite(ratio) or ratio <= 0:
        return None
    return ratio


def ratio_set(ratio: float) -> Tuple[float, ...]:
    """Integers 1..floor(ratio), then ``ratio`` itself if it is fractional.

    A ratio below 1 yields only itself.
    """
    whole = math.floor(ratio)
    members = list(range(1, whole + 1))
    if whole != ratio:
        members.append(ratio)
    return tuple(members)


def resolve(filename: str, native_width: int, native_height: int) -> Resolution:
    ratio = parse_density_suffix(filename)
    if ratio is None:
        return Resolution(native_width, native_height, (1,), 1)
    return Resolution(
        native_width / ratio,
        native_height / ratio,
        ratio_set(ratio),
        ratio,
    )


def format_ratio(ratio: float) -> str:
    """Render ``2.0`` as ``2`` and ``2.5`` as ``2.5``."""
    if float(ratio).is_integer():
        return str(int(ratio))
    return repr(float(ratio))
