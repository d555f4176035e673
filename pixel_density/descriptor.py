"""Descriptor assembly: default reference, dimensions, srcSet and markup."""

import re
from dataclasses import dataclass
from html import escape
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from pixel_density.ratios import format_ratio

ATTRIBUTE_NAME_RE = re.compile(r"""[^\s"'>/=]+""")


@dataclass(frozen=True)
class ImageElement:
    """Pre-built ``<img>`` fragment for the 1x variant and its srcSet."""

    src: str
    src_set: str
    width: int
    height: int

    def attributes(self, extra: Optional[Mapping[str, Any]] = None, **attrs: Any) -> Dict[str, Any]:
        """Return the element attributes; caller attributes win on conflict.

        Names are case-insensitive, so ``srcSet`` replaces the computed
        ``srcset``. Caller names are lowercased; invalid names raise
        ``ValueError``.
        """
        out: Dict[str, Any] = {
            "src": self.src,
            "srcset": self.src_set,
            "width": self.width,
            "height": self.height,
        }
        for source in (extra or {}, attrs):
            for name, value in source.items():
                if not ATTRIBUTE_NAME_RE.fullmatch(name):
                    raise ValueError(f"invalid attribute name {name!r}")
                out[name.lower()] = value
        return out

    def render(self, extra: Optional[Mapping[str, Any]] = None, **attrs: Any) -> str:
        parts = ["<img"]
        for name, value in self.attributes(extra, **attrs).items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{escape(str(value), quote=True)}"')
        parts.append(">")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Descriptor:
    src_set: str
    default: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    markup: Optional[ImageElement] = None

    @property
    def src(self) -> Optional[str]:
        return self.default

    def to_dict(self) -> Dict[str, Any]:
        """Exported names, omitting fields that are absent."""
        out: Dict[str, Any] = {}
        if self.default is not None:
            out["default"] = self.default
            out["src"] = self.default
            out["width"] = self.width
            out["height"] = self.height
        out["srcSet"] = self.src_set
        if self.markup is not None:
            out["markup"] = self.markup.render()
        return out


def build_src_set(url_for: Callable[[float], str], ratios: Sequence[float]) -> str:
    return ", ".join(f"{url_for(r)} {format_ratio(r)}x" for r in ratios)


def build(url_for: Callable[[float], str], ratios: Sequence[float],
          variants: Mapping[float, Any], *, include_markup: bool = False) -> Descriptor:
    """Build the descriptor for a completed variant collection.

    ``variants`` maps each ratio to an object with ``width`` and ``height``.
    Default, src, width and height are only set when a 1x variant exists,
    which is not the case for a declared ratio below 1. Width and height
    are the 1x variant's pixel size, rounded, not a fractional logical size.
    """
    src_set = build_src_set(url_for, ratios)
    base = variants.get(1)
    if base is None:
        return Descriptor(src_set=src_set)

    src = url_for(1)
    markup = None
    if include_markup:
        markup = ImageElement(src=src, src_set=src_set, width=base.width, height=base.height)
    return Descriptor(src_set=src_set, default=src, width=base.width, height=base.height, markup=markup)
