#!/usr/bin/env python3
"""Snippet Generator Script - Turn pasted iframe code into an embed snippet offline.

Reads Google Sheets iframe code (or a bare published chart URL), builds the
render config with the requested styling, and prints the responsive,
animated snippet plus the shareable embed URL.

Usage:
    # From a file
    python scripts/generate_snippet.py chart.html

    # From stdin, with styling
    pbpaste | python scripts/generate_snippet.py - --preset pop --radius 12 --border-width 2

    # Re-generate the snippet behind an existing share URL's c parameter
    python scripts/generate_snippet.py --decode eyJtb2RlIjoiZ29vZ2xlLWVtYmVkIiwuLi59

    # Write the snippet to a file
    python scripts/generate_snippet.py chart.html --output snippet.html
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from chart_embed.codec import InvalidConfigError, build_embed_url, decode_config  # noqa: E402
from chart_embed.parser import parse_iframe_input  # noqa: E402
from chart_embed.render_config.builder import build_embed_config  # noqa: E402
from chart_embed.render_config.schemas import AnimationPreset, dump_render_config  # noqa: E402
from chart_embed.snippets import UnsupportedModeError, generate_snippet  # noqa: E402

DEFAULT_ORIGIN = "http://localhost:8000"


def read_input(source: str) -> str:
    """Read pasted markup from a file path, or stdin for "-"."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def log(message: str = "") -> None:
    print(message, file=sys.stderr)


def build_from_input(args):
    text = read_input(args.input)
    result = parse_iframe_input(text)
    for warning in result.warnings:
        log(f"  Warning: {warning}")
    if not result.success or result.config is None:
        for error in result.errors:
            log(f"  Error: {error}")
        return None

    return build_embed_config(
        result.config,
        preset=args.preset,
        duration_ms=args.duration_ms,
        radius_px=args.radius,
        border_width=args.border_width,
        border_color=args.border_color,
        background_color=args.background,
    )


def main():
    parser = argparse.ArgumentParser(
        description="Generate a responsive, animated Google Sheets chart snippet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help='File with iframe code or URL ("-" for stdin, the default)',
    )
    parser.add_argument(
        "--decode",
        metavar="ENCODED",
        help="Use an encoded config (an embed URL's c parameter) instead of input",
    )
    parser.add_argument(
        "--preset",
        choices=[p.value for p in AnimationPreset],
        default=AnimationPreset.FADE_UP.value,
        help="Reveal animation (default: fade-up)",
    )
    parser.add_argument(
        "--duration-ms",
        type=float,
        default=600,
        help="Animation duration in ms, 0-5000 (default: 600)",
    )
    parser.add_argument("--radius", type=float, default=0, help="Corner radius in px, 0-24")
    parser.add_argument("--border-width", type=float, default=0, help="Border width in px, 0-8")
    parser.add_argument("--border-color", default=None, help="Border colour (default: #76B900)")
    parser.add_argument("--background", default=None, help="Wrapper background colour")
    parser.add_argument(
        "--origin",
        default=DEFAULT_ORIGIN,
        help=f"Origin for the share URL (default: {DEFAULT_ORIGIN})",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Also print the config as JSON",
    )
    parser.add_argument("--output", "-o", help="Write the snippet to this file instead of stdout")

    args = parser.parse_args()

    if args.decode:
        try:
            config = decode_config(args.decode)
        except InvalidConfigError as e:
            log(f"Error: {e}")
            sys.exit(1)
    else:
        config = build_from_input(args)
        if config is None:
            sys.exit(1)

    try:
        snippet = generate_snippet(config)
    except UnsupportedModeError as e:
        log(f"Error: {e}")
        sys.exit(1)

    if args.show_config:
        log(json.dumps(dump_render_config(config), indent=2))
    log(f"Embed URL: {build_embed_url(args.origin, config)}")

    if args.output:
        Path(args.output).write_text(snippet, encoding="utf-8")
        log(f"Snippet written to {args.output}")
    else:
        print(snippet)


if __name__ == "__main__":
    main()
