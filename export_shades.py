"""Write a JSON shade scale for every color in the palette.

    python export_shades.py --steps 8 --out shades
    python export_shades.py --color BRAND=#ff6600 --color INK=#1b1b1b
"""

import argparse
import logging
import sys
from pathlib import Path

from colorlerp.errors import ShadeError
from colorlerp.log import LEVELS, setup_default_logging
from colorlerp.shades import DEFAULT_COLORS, DEFAULT_STEPS, SHADES_DIR, ShadeConfig, export_palette

log = logging.getLogger("export_shades")


def _parse_color(value: str) -> tuple[str, str]:
    name, sep, hex_str = value.partition("=")
    if not sep or not name or not hex_str:
        raise argparse.ArgumentTypeError(f"expected NAME=#hex, got {value!r}")
    return name.strip(), hex_str.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate tonal shade scales and export them as JSON")
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS, help="even number of generated shades")
    parser.add_argument("--out", type=Path, default=SHADES_DIR, help="output directory")
    parser.add_argument(
        "--color",
        type=_parse_color,
        action="append",
        metavar="NAME=#HEX",
        help="base color to export (repeatable); replaces the default palette",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LEVELS, default="INFO")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    colors = dict(args.color) if args.color else dict(DEFAULT_COLORS)
    config = ShadeConfig(colors=colors, steps=args.steps, output_dir=args.out)
    try:
        paths = export_palette(config)
    except ShadeError as exc:
        log.error("%s", exc)
        return 2
    for path in paths:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
