"""CLI entry point for geomkit."""

import argparse
import logging
from pathlib import Path

from . import generate


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Render a Perlin noise field to an image"
    )
    parser.add_argument("width", type=int, help="Output width in pixels")
    parser.add_argument("height", type=int, help="Output height in pixels")
    parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Lattice seed for reproducible generation"
    )
    parser.add_argument(
        "--scale", type=float, default=None,
        help="Noise units per pixel (default: 0.02)"
    )
    parser.add_argument(
        "--octaves", type=int, default=None,
        help="Number of noise layers (default: 4)"
    )
    parser.add_argument(
        "--falloff", type=float, default=None,
        help="Amplitude falloff per octave (default: 0.5)"
    )
    parser.add_argument(
        "--z", type=float, default=None,
        help="Slice of the field along the third axis (default: 0)"
    )
    parser.add_argument(
        "--low-color", nargs=3, type=int, default=None,
        metavar=("R", "G", "B"),
        help="Color for noise value 0 (default: 0 0 0)"
    )
    parser.add_argument(
        "--high-color", nargs=3, type=int, default=None,
        metavar=("R", "G", "B"),
        help="Color for noise value 1 (default: 255 255 255)"
    )
    parser.add_argument(
        "--output", "-o", default="noise.png",
        help="Output file path (default: noise.png)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    kwargs = {}
    for name in ("scale", "octaves", "falloff", "z"):
        value = getattr(args, name)
        if value is not None:
            kwargs[name] = value
    if args.low_color:
        kwargs["low_color"] = tuple(args.low_color)
    if args.high_color:
        kwargs["high_color"] = tuple(args.high_color)

    image = generate(args.width, args.height, seed=args.seed, **kwargs)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output))
    print(f"Saved noise ({image.size[0]}x{image.size[1]}) to {output}")


if __name__ == "__main__":
    main()
