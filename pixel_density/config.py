"""Validated options for one processing call."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qsl

from pixel_density.errors import ConfigError

_QUERY_BOOLEANS = {"": True, "true": True, "false": False}
_ALIASES = {"includeMarkup": "include_markup"}


@dataclass(frozen=True)
class DensityConfig:
    """Options recognized by ``process``.

    Attributes:
        include_markup: Populate the descriptor's ``<img>`` fragment.
    """

    include_markup: bool = False

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None,
                     query: Optional[str] = None) -> "DensityConfig":
        """Merge loader-style options with a resource query.

        Query values override ``options``. ``includeMarkup`` is accepted as
        an alias of ``include_markup``. Unknown keys and non-boolean
        values raise ``ConfigError`` naming the offending field.
        """
        merged: Dict[str, Any] = {}
        for source in (options or {}, parse_query(query)):
            for key, value in source.items():
                merged[_ALIASES.get(key, key)] = value

        known = {f.name for f in fields(cls)}
        for key, value in merged.items():
            if key not in known:
                raise ConfigError(key, "unrecognized option")
            if not isinstance(value, bool):
                raise ConfigError(key, f"expected a boolean, got {value!r}")
        return cls(**merged)


def parse_query(query: Optional[str]) -> Dict[str, Any]:
    """Parse ``?include_markup`` / ``?include_markup=false`` into booleans."""
    if not query:
        return {}
    out: Dict[str, Any] = {}
    for key, raw in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        value = raw.strip().lower()
        if value not in _QUERY_BOOLEANS:
            raise ConfigError(key, f"expected true or false, got {raw!r}")
        out[key] = _QUERY_BOOLEANS[value]
    return out
