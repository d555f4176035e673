"""
Generate 1x/2x/... density variants from name@<ratio>x images.

Usage examples:
  python -m pixel_density --input icon@3x.png --outdir ./out
  python -m pixel_density --input ./assets --public-path /static/ --markup

Each input's declared ratio (icon@3x.png -> 3) sets the largest variant;
smaller ones are resized from the original. Variants are written to --outdir
and a JSON object mapping every input to its descriptor is printed.
"""

import argparse
import json
import logging
import os
import sys
from typing import Iterable, List

from pixel_density.config import DensityConfig
from pixel_density.errors import PixelDensityError
from pixel_density.naming import DirectoryEmitter, PublicPathNamer
from pixel_density.pipeline import process

IMAGE_EXTS = (".png", ".jpg", ".jpeg", ".gif", ".webp")


def gather_inputs(paths: Iterable[str]) -> List[str]:
    out = []
    for p in paths:
        if os.path.isdir(p):
            for root, _, files in os.walk(p):
                for f in sorted(files):
                    if f.lower().endswith(IMAGE_EXTS):
                        out.append(os.path.join(root, f))
        else:
            out.append(p)
    return out


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate pixel-density variants from name@<ratio>x images.")
    parser.add_argument("--input", "-i", nargs="+", required=True, help="Input file(s) and/or directories")
    parser.add_argument("--outdir", "-o", default="./out_density", help="Output directory (default: ./out_density)")
    parser.add_argument("--public-path", default="/", help="URL prefix for emitted variants (default: /)")
    parser.add_argument("--markup", action="store_true", help="Include an <img> fragment in each descriptor")
    parser.add_argument("--workers", type=int, default=None, help="Resize threads per image")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    config = DensityConfig(include_markup=args.markup)

    inputs = gather_inputs(args.input)
    if not inputs:
        print("No input images found.", file=sys.stderr)
        return 2

    namer = PublicPathNamer(args.public_path)
    emitter = DirectoryEmitter(args.outdir)
    descriptors = {}
    failed = False
    for path in inputs:
        try:
            with open(path, "rb") as f:
                data = f.read()
            descriptor = process(
                data,
                os.path.basename(path),
                config,
                assign_name=namer,
                emit=emitter,
                max_workers=args.workers,
            )
        except (OSError, PixelDensityError) as e:
            print(f"Failed on {path}: {e}", file=sys.stderr)
            failed = True
            continue
        descriptors[path] = descriptor.to_dict()

    print(json.dumps(descriptors, indent=2))
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
