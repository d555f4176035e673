"""Unit tests for density suffix parsing and ratio sets."""

from __future__ import annotations

import pytest

from pixel_density.ratios import format_ratio, parse_density_suffix, ratio_set, resolve


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("logo@2x.png", 2.0),
        ("logo@2.5x.png", 2.5),
        ("assets/icons/logo@3x.webp", 3.0),
        ("logo@2x-dark@3x.png", 2.0),
        ("logo@0.5x.png", 0.5),
    ],
)
def test_parse_density_suffix_reads_first_match(filename: str, expected: float) -> None:
    """The first @<number>x in the stem should be the declared ratio."""
    assert parse_density_suffix(filename) == expected


@pytest.mark.parametrize("filename", ["logo.png", "logo@x.png", "logo@2.png", "logo@0x.png", "dir@2x/logo.png"])
def test_parse_density_suffix_absent_or_invalid(filename: str) -> None:
    """Missing, malformed or zero suffixes should read as absent."""
    assert parse_density_suffix(filename) is None


def test_resolve_without_suffix_keeps_native_size() -> None:
    """A plain filename is a single 1x asset."""
    resolution = resolve("logo.png", 64, 64)

    assert (resolution.base_width, resolution.base_height) == (64, 64)
    assert resolution.ratios == (1,)
    assert resolution.native_ratio == 1


def test_resolve_integer_ratio() -> None:
    """An integer ratio n yields 1..n and divides native size by n."""
    resolution = resolve("logo@2x.png", 200, 100)

    assert (resolution.base_width, resolution.base_height) == (100, 50)
    assert resolution.ratios == (1, 2)


def test_resolve_fractional_ratio_appends_itself_last() -> None:
    """A fractional ratio follows the integers exactly once."""
    resolution = resolve("logo@2.5x.png", 250, 100)

    assert (resolution.base_width, resolution.base_height) == (100, 40)
    assert resolution.ratios == (1, 2, 2.5)


def test_resolve_ratio_one_is_single_variant() -> None:
    """@1x degenerates to the no-suffix case."""
    resolution = resolve("logo@1x.png", 30, 20)

    assert resolution.ratios == (1,)
    assert (resolution.base_width, resolution.base_height) == (30, 20)


def test_ratio_set_below_one_has_no_integer_members() -> None:
    """A ratio under 1 produces only itself."""
    assert ratio_set(0.5) == (0.5,)


def test_ratio_set_large_integer() -> None:
    """Integer ratios list every integer up to the ratio."""
    assert ratio_set(4.0) == (1, 2, 3, 4)


@pytest.mark.parametrize(("ratio", "expected"), [(1, "1"), (2.0, "2"), (2.5, "2.5"), (1.25, "1.25")])
def test_format_ratio(ratio: float, expected: str) -> None:
    """Integral ratios render without a decimal part."""
    assert format_ratio(ratio) == expected
