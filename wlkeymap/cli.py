"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from wlkeymap.command import CommandError
from wlkeymap.keymap import KeymapError, detect_desktop_environment, set_keymap


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="setwlkbmap",
        description=(
            "Set Wayland Keyboard Map - A unified interface for setting keyboard "
            "layout in Wayland compositors"
        ),
        epilog=(
            "This CLI tool aims to provide a consistent way to set keyboard layouts, "
            "variants, and XKB options across different Wayland compositors."
        ),
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "layout", nargs="?", help="Set the primary keyboard layout (e.g., 'us', 'de', 'fr')"
    )
    parser.add_argument(
        "variant",
        nargs="?",
        help="Set the keyboard variant for the specified layout "
        "(e.g., 'altgr-intl', 'dvorak', 'us').",
    )
    parser.add_argument(
        "-d",
        "--detect",
        action="store_true",
        help="Detect the current Wayland compositor/desktop environment and exit.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool."""
    args = build_parser().parse_args(argv)

    desktop = detect_desktop_environment()
    if desktop is None:
        print("Failed to detect desktop environment", file=sys.stderr)
        return 0

    if args.detect:
        print(f"Detected desktop environment: {desktop.value}")
        return 0

    if args.layout is None and args.variant is None:
        print(
            "Error: Please provide a layout or variant, or use --detect (See --help).",
            file=sys.stderr,
        )
        return 0

    try:
        set_keymap(desktop, args.layout, args.variant)
    except (KeymapError, CommandError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    else:
        print("Keymap set")
    return 0


if __name__ == "__main__":
    sys.exit(main())