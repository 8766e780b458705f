#!/usr/bin/env python3
"""romajify コマンド

    romajify hepburn かな [--upcase] [--traditional]
    romajify nihon かな [--upcase]
    romajify kunrei かな [--upcase]
"""

import argparse
import logging
from typing import List, Optional

from . import __version__
from .kana_tables import Scheme
from .romanizer import RomanizeOptions, romanize

_LOGGER = logging.getLogger("romajify")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="romajify", description="Convert kana to romaji")
    parser.add_argument("--version", action="version", version=f"romajify {__version__}")
    parser.add_argument("--debug", action="store_true", help="Print DEBUG messages to console")

    subparsers = parser.add_subparsers(dest="scheme", metavar="{hepburn,nihon,kunrei}")
    subparsers.required = True

    hepburn = subparsers.add_parser(Scheme.HEPBURN.value, help="Convert kana to Hepburn romaji")
    hepburn.add_argument("text", help="Kana text to convert")
    hepburn.add_argument("--upcase", action="store_true", help="Convert to uppercase")
    hepburn.add_argument(
        "--traditional",
        action="store_true",
        help="Convert to traditional Hepburn romaji",
    )

    nihon = subparsers.add_parser(Scheme.NIHON.value, help="Convert kana to Nihon-shiki romaji")
    nihon.add_argument("text", help="Kana text to convert")
    nihon.add_argument("--upcase", action="store_true", help="Convert to uppercase")

    kunrei = subparsers.add_parser(Scheme.KUNREI.value, help="Convert kana to Kunrei-shiki romaji")
    kunrei.add_argument("text", help="Kana text to convert")
    kunrei.add_argument("--upcase", action="store_true", help="Convert to uppercase")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)

    scheme = Scheme(args.scheme)
    options = RomanizeOptions(
        upcase=args.upcase,
        traditional=getattr(args, "traditional", False),
    )
    _LOGGER.debug("scheme=%s options=%s", scheme.value, options)

    print(romanize(args.text, scheme, options))
    return 0


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    raise SystemExit(main())
