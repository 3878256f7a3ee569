#!/usr/bin/env python3
"""
Dungeon Map - Style Preview

Renders a swatch of every room color for a map style as a PNG, to check a
palette and its cell geometry by eye.
"""

import argparse
import logging
import sys

from PIL import Image

from dungeon_map.core.constants import MapStyle
from dungeon_map.core.render_context import RenderContext
from dungeon_map.rendering.pil_rendering import render_style_swatch


def render_preview(map_style: str, output_path: str, scale: int = 1):
    """Render the swatch for a single style and save it."""
    context = RenderContext({"map_style": map_style})
    try:
        img = render_style_swatch(context)
        if scale > 1:
            img = img.resize((img.width * scale, img.height * scale), Image.NEAREST)
        img.save(output_path)
        print(f"Saved: {output_path} ({img.width}x{img.height})")
    finally:
        context.destroy()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Render dungeon map style swatches as PNG images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Render the legal map palette:
    dungeon-map-preview legalmap

  Render every style, 4x zoom:
    dungeon-map-preview all -s 4
        """,
    )
    parser.add_argument(
        "style",
        choices=[style.value for style in MapStyle] + ["all"],
        help="Map style to render, or 'all'",
    )
    parser.add_argument(
        "output", nargs="?", help="Output PNG file (default: <style>.png, ignored with 'all')"
    )
    parser.add_argument(
        "-s",
        "--scale",
        type=int,
        default=1,
        help="Integer zoom factor (default: 1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.scale < 1:
        print("Error: --scale must be at least 1")
        sys.exit(1)

    if args.style == "all":
        for style in MapStyle:
            render_preview(style.value, f"{style.value}.png", args.scale)
        return

    output_path = args.output if args.output else f"{args.style}.png"
    render_preview(args.style, output_path, args.scale)


if __name__ == "__main__":
    main()
