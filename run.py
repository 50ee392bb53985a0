"""Command-line entry point for the ZX Spectrum display simulator."""

from __future__ import annotations

import argparse
import sys

from zxdisplay.ui.app import DEMOS, AppConfig, ZXDisplayApp
from zxdisplay.video.geometry import SCALE
from zxdisplay.video.palette import colour_index


def _colour(value: str) -> int:
    try:
        index = colour_index(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    if not 0 <= index <= 15:
        raise argparse.ArgumentTypeError(f"colour index out of range (0-15): {value}")
    return index


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run.py",
        description="ZX Spectrum display simulator",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=SCALE,
        help=f"Integer window scale factor (default: {SCALE})",
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Open the window in fullscreen mode",
    )
    parser.add_argument(
        "--demo",
        choices=DEMOS,
        default="charset",
        help="Picture to show (default: charset)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the noise demo",
    )
    parser.add_argument(
        "--ink",
        type=_colour,
        default="black",
        help="Ink colour name or index, e.g. 'blue' or 'bright-red' (default: black)",
    )
    parser.add_argument(
        "--paper",
        type=_colour,
        default="bright-yellow",
        help="Paper colour name or index (default: bright-yellow)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.scale <= 0:
        parser.error("--scale must be positive")

    config = AppConfig(
        scale=args.scale,
        fullscreen=args.fullscreen,
        demo=args.demo,
        seed=args.seed,
        ink=args.ink,
        paper=args.paper,
    )
    app = ZXDisplayApp(config)
    try:
        app.run()
    except RuntimeError as exc:
        parser.exit(1, f"run.py: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
