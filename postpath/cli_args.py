# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for PostPath.

Handles command-line argument definition and maps the parsed options onto
the importer's system parameters.
"""

from __future__ import annotations

import argparse
from typing import Any


def _get_version() -> str:
    from . import __version__
    return __version__


def _nonnegative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: '{text}'")
    return value


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the PostPath argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="postpath",
        description="PostPath - PostScript Path Importer",
        epilog="Use '-' as an input file to read from stdin.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"PostPath {_get_version()}"
    )
    parser.add_argument("inputfiles", nargs="+", help="PostScript input files to import")
    parser.add_argument(
        "-o", "--output", dest="outputfile", help="Write instructions to this file instead of stdout"
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--encoding",
        help="Codec used to decode the input (default: latin-1)",
    )
    parser.add_argument(
        "--prolog-marker",
        help="Line up to which findfont skips font definitions (default: %%%%EndProlog)",
    )
    parser.add_argument(
        "--max-stack", type=_nonnegative_int,
        help="Operand stack depth limit, 0 for unlimited (default: 0)",
    )

    return parser


def system_params_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the system parameter overrides given on the command line."""
    params = {}
    if args.encoding is not None:
        params["Encoding"] = args.encoding
    if args.prolog_marker is not None:
        params["PrologMarker"] = args.prolog_marker
    if args.max_stack is not None:
        params["MaxOpStack"] = args.max_stack
    return params
