"""Default host collaborators: content ids, names, URLs and file emission."""

import hashlib
import logging
import os
from typing import Tuple

from pixel_density.ratios import format_ratio

logger = logging.getLogger(__name__)


def content_hash(data: bytes, length: int = 20) -> str:
    return hashlib.md5(data).hexdigest()[:length]


def variant_name(content_id: str, ratio: float, ext: str) -> str:
    return f"{content_id}-{format_ratio(ratio)}{ext}"


class PublicPathNamer:
    """Assigns ``<id>-<ratio><ext>`` names served under ``public_path``."""

    def __init__(self, public_path: str = "/"):
        self.public_path = public_path

    def __call__(self, content_id: str, ratio: float, ext: str) -> Tuple[str, str]:
        name = variant_name(content_id, ratio, ext)
        return name, self.public_path + name


class DirectoryEmitter:
    """Writes each emitted variant into ``outdir``."""

    def __init__(self, outdir: str):
        self.outdir = outdir

    def __call__(self, name: str, data: bytes) -> None:
        os.makedirs(self.outdir, exist_ok=True)
        path = os.path.join(self.outdir, name)
        with open(path, "wb") as f:
            f.write(data)
        logger.info("wrote %s (%d bytes)", path, len(data))
