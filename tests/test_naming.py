"""Unit tests for default naming and emission collaborators."""

from __future__ import annotations

from pathlib import Path

from pixel_density.naming import DirectoryEmitter, PublicPathNamer, content_hash, variant_name


def test_content_hash_is_stable_and_truncated() -> None:
    """Identical content should hash identically."""
    assert content_hash(b"abc") == content_hash(b"abc")
    assert len(content_hash(b"abc")) == 20
    assert content_hash(b"abc") != content_hash(b"abd")


def test_variant_name_formats_ratio() -> None:
    """Names combine id, ratio and extension."""
    assert variant_name("deadbeef", 2.0, ".png") == "deadbeef-2.png"
    assert variant_name("deadbeef", 2.5, ".png") == "deadbeef-2.5.png"


def test_public_path_namer_prefixes_url() -> None:
    """URLs are the public path plus the name."""
    name, url = PublicPathNamer("/static/")("id", 1, ".jpg")

    assert name == "id-1.jpg"
    assert url == "/static/id-1.jpg"


def test_directory_emitter_writes_file(tmp_path: Path) -> None:
    """Emitted variants land in the output directory."""
    emitter = DirectoryEmitter(str(tmp_path / "out"))

    emitter("a-1.png", b"payload")

    assert (tmp_path / "out" / "a-1.png").read_bytes() == b"payload"
