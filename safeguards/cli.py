# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Command line entry point: ``safeguards {input,output} [TEXT ...]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .sanitization import sanitize_input_string, sanitize_output_string

logger = logging.getLogger(__name__)


def _cmd_input(args: argparse.Namespace, text: str) -> str:
    return sanitize_input_string(text)


def _cmd_output(args: argparse.Namespace, text: str) -> str:
    return sanitize_output_string(text, preserve_line_feeds=args.preserve_line_feeds)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="safeguards",
        description="Sanitize text from arguments or standard input.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_input = sub.add_parser("input", help="strip control characters and markup from user input")
    p_input.add_argument("text", nargs="*", help="text to clean (default: read stdin)")
    p_input.set_defaults(func=_cmd_input)

    p_output = sub.add_parser("output", help="clean display/log text and mask emails, cards and phones")
    p_output.add_argument("text", nargs="*", help="text to clean (default: read stdin)")
    p_output.add_argument(
        "--preserve-line-feeds",
        action="store_true",
        help="keep tab, LF and CR characters",
    )
    p_output.set_defaults(func=_cmd_output)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.text:
        text = " ".join(args.text)
    else:
        logger.debug("Reading text from stdin")
        text = sys.stdin.read()

    sys.stdout.write(args.func(args, text) + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
