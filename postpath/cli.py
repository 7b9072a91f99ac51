#!/usr/bin/env python3
# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath - PostScript Path Importer

This is the command line entry point. Each input file is imported on its own
and its instructions are written out in order.

Output Formats:
    text: one instruction per line, e.g. "MOVE 0 0", "CUBIC 1 2 3 4 5 6", "END"
    json: one list per input file of {"kind": ..., "points": [[x, y], ...]}

Usage:
    postpath drawing.ps
    postpath -f json -o drawing.json drawing.ps
    cat drawing.ps | postpath -
"""

import codecs
import json
import logging
import sys
from typing import List, Optional

from . import importer
from .cli_args import build_argument_parser, system_params_from_args
from .core import error as ps_error

logger = logging.getLogger(__name__)


def _write_output(results: list, output_format: str, out) -> None:
    if output_format == "json":
        payload = [[instr.to_dict() for instr in display_list] for display_list in results]
        if len(payload) == 1:
            payload = payload[0]
        json.dump(payload, out, indent=2)
        out.write("\n")
    else:
        for display_list in results:
            for instr in display_list:
                out.write(f"{instr}\n")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the PostPath importer.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.encoding is not None:
        try:
            codecs.lookup(args.encoding)
        except LookupError:
            print(f"PostPath Error: unknown encoding '{args.encoding}'", file=sys.stderr)
            return 1

    system_params = system_params_from_args(args)

    results = []
    for inputfile in args.inputfiles:
        try:
            if inputfile == "-":
                display_list = importer.process(sys.stdin.buffer, system_params)
            else:
                display_list = importer.process_file(inputfile, system_params)
        except ps_error.PSImportError as e:
            print(f"PostPath Error: {inputfile}: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"PostPath Error: {e}", file=sys.stderr)
            return 1
        logger.debug("%s: %d instruction(s)", inputfile, len(display_list))
        results.append(display_list)

    if args.outputfile:
        try:
            with open(args.outputfile, "w") as out:
                _write_output(results, args.format, out)
        except OSError as e:
            print(f"PostPath Error: {e}", file=sys.stderr)
            return 1
    else:
        _write_output(results, args.format, sys.stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
