# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath - PostScript Path Importer

Converts a constrained subset of PostScript into an ordered list of drawing
instructions (MOVE, LINE, CUBIC, END) in device coordinates, for plotting
and toolpath pipelines.

Usage:
    >>> from postpath import process_string
    >>> for instruction in process_string("0 0 moveto 10 0 lineto stroke"):
    ...     print(instruction)
    MOVE 0 0
    LINE 10 0
    END
"""

__version__ = "0.1.0"

from .core.error import (
    PSImportError, LexError, UnknownTokenError, UnmatchedBracketError,
    UndefinedNameError, TypeMismatchError, StackUnderflowError,
    NumberFormatError, RangeCheckError, StackOverflowError,
    LimitCheckError, ExecStackOverflowError,
)
from .core.types import Instruction, Kind, Point
from .importer import (
    process, process_string, process_file, load_file,
    get_loaders, register_loader,
)
