"""
duolayout - Entry point.

Run with:  python -m duolayout 800 480 --layout side --swap
"""

from __future__ import annotations

import argparse
import logging
import sys

from duolayout.config.settings import (
    DEFAULT_CUSTOM_BOTTOM,
    DEFAULT_CUSTOM_TOP,
    SettingsError,
    settings_from_mapping,
)
from duolayout.layout.engine import LayoutEngine
from duolayout.layout.layouts import LayoutOption


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(handler)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duolayout",
        description="Print where the top and bottom screens go inside a window.",
    )
    parser.add_argument("width", type=_positive_int, help="window width in pixels")
    parser.add_argument("height", type=_positive_int, help="window height in pixels")
    parser.add_argument(
        "--layout",
        default=LayoutOption.DEFAULT.value,
        help="default, single, large, side or custom (default: %(default)s)",
    )
    parser.add_argument("--swap", action="store_true", help="make the bottom screen primary")
    parser.add_argument(
        "--custom-top",
        default=",".join(str(v) for v in DEFAULT_CUSTOM_TOP.to_ltrb()),
        metavar="L,T,R,B",
        help="top screen rectangle for the custom layout",
    )
    parser.add_argument(
        "--custom-bottom",
        default=",".join(str(v) for v in DEFAULT_CUSTOM_BOTTOM.to_ltrb()),
        metavar="L,T,R,B",
        help="bottom screen rectangle for the custom layout",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = settings_from_mapping({
            "layout_option": args.layout,
            "swap_screen": args.swap,
            "custom_top": args.custom_top,
            "custom_bottom": args.custom_bottom,
        })
    except SettingsError as e:
        parser.error(str(e))

    engine = LayoutEngine.from_settings(settings, args.width, args.height)
    print(engine.dump_state())
    return 0


if __name__ == "__main__":
    sys.exit(main())
