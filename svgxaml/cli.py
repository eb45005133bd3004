"""Convert an SVG file, or a folder of them, to XAML from the command line.

Usage:
    svgxaml icon.svg                 # print the template
    svgxaml icon.svg -o icon.xaml    # save it
    svgxaml icons/ -o xaml/          # batch mode, one .xaml per .svg
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from svgxaml.engine.config import ConverterConfig
from svgxaml.engine.converter import convert_document
from svgxaml.errors import ConversionError


def process_file(input_path: str, output_path: str | None, config: ConverterConfig) -> bool:
    """Convert a single SVG file. Returns False if the conversion failed."""
    try:
        # Bytes, so the parser decodes per the file's own encoding declaration
        with open(input_path, "rb") as f:
            raw = f.read()
        result = convert_document(raw, config)
    except (OSError, ConversionError) as e:
        print(f"  ERROR: {e}")
        return False

    print(f"  {result.element_count} elements, {result.gradient_count} gradients")

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(result.xaml)
        print(f"  → Saved: {output_path}")
    else:
        print(result.xaml)

    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SVG to XAML ControlTemplate converter")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("-k", "--key", help="x:Key of the emitted ControlTemplate")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = ConverterConfig()
    if args.key:
        config.template_key = args.key

    if os.path.isdir(args.input):
        # Batch mode
        svg_files = [f for f in os.listdir(args.input) if f.lower().endswith(".svg")]
        if not svg_files:
            print("No .svg files found in folder.")
            return 1

        out_dir = args.output or args.input.rstrip("/\\") + "_xaml"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processing {len(svg_files)} files...\n")
        success = 0
        for fname in sorted(svg_files):
            print(f"[{fname}]")
            out_path = os.path.join(out_dir, fname.rsplit(".", 1)[0] + ".xaml")
            if process_file(os.path.join(args.input, fname), out_path, config):
                success += 1

        print(f"\nDone: {success}/{len(svg_files)} converted → {out_dir}")
        return 0 if success == len(svg_files) else 1

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        return 1

    print(f"[{os.path.basename(args.input)}]")
    return 0 if process_file(args.input, args.output, config) else 1


if __name__ == "__main__":
    sys.exit(main())
