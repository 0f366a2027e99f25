"""Command-line entry point: turn an image file into a band art PNG."""

import argparse
import sys
from pathlib import Path

from image_processing import BandProcessor
from models import BandConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert an image into horizontal color bands."
    )
    parser.add_argument("input", help="Path to the image file")
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Output PNG path (defaults to <input>-bands.png)",
    )
    parser.add_argument(
        "--threshold",
        "-t",
        type=float,
        default=BandConfig.color_threshold,
        help="Color sensitivity: lower = more bands, higher = fewer bands",
    )
    parser.add_argument(
        "--min-band-height",
        "-m",
        type=int,
        default=BandConfig.min_band_height,
        help="Minimum height for each color band, in source rows",
    )
    parser.add_argument(
        "--width",
        "-w",
        type=int,
        default=None,
        help="Width of the output image (defaults to the input width)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the extracted bands",
    )
    return parser


def main(argv: "list[str] | None" = None) -> int:
    args = build_parser().parse_args(argv)
    input_path = Path(args.input)

    config = BandConfig(
        color_threshold=args.threshold,
        min_band_height=args.min_band_height,
    )
    processor = BandProcessor(config)

    try:
        image = processor.load_image(input_path)
        config.output_width = args.width or image.width
        bands = processor.extract_bands(image)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Color Bands ({len(bands)} bands)")
    if args.list:
        for band in bands:
            print(f"  {band.hex}  rows {band.start_y}-{band.end_y - 1}  ({band.height})")

    if not bands:
        print("Error: image has no rows to render", file=sys.stderr)
        return 1

    output_path = (
        Path(args.output)
        if args.output
        else input_path.with_name(f"{input_path.stem}-bands.png")
    )
    try:
        processor.export(bands, image, output_path)
    except (OSError, ValueError) as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
