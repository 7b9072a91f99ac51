# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging
from typing import NoReturn

logger = logging.getLogger(__name__)

# error types
LEXERROR = 0
UNKNOWNTOKEN = 1
UNMATCHEDBRACKET = 2
UNDEFINED = 3
TYPECHECK = 4
STACKUNDERFLOW = 5
NUMBERFORMAT = 6
RANGECHECK = 7
STACKOVERFLOW = 8
LIMITCHECK = 9
EXECSTACKOVERFLOW = 10


class PSImportError(Exception):
    """
    Base class for every error raised while importing a PostScript stream.

    All import errors are fatal: the whole import stops at the first one.

    Attributes:
        command: the token or operator name that failed, if known
        line_num: the input line being interpreted, if known
        detail: optional free-form explanation
    """
    name = "error"

    def __init__(self, command: str | None = None, line_num: int | None = None,
                 detail: str | None = None) -> None:
        super().__init__(command, line_num, detail)
        self.command = command
        self.line_num = line_num
        self.detail = detail

    def __str__(self) -> str:
        msg = f"/{self.name}"
        if self.command is not None:
            msg += f" in --{self.command}--"
        if self.line_num is not None:
            msg += f" (line {self.line_num})"
        if self.detail:
            msg += f": {self.detail}"
        return msg


class LexError(PSImportError):
    name = "lexerror"


class UnknownTokenError(PSImportError):
    name = "unknowntoken"


class UnmatchedBracketError(PSImportError):
    name = "unmatchedbracket"


class UndefinedNameError(PSImportError):
    name = "undefined"


class TypeMismatchError(PSImportError):
    name = "typecheck"


class StackUnderflowError(PSImportError):
    name = "stackunderflow"


class NumberFormatError(PSImportError):
    name = "numberformat"


class RangeCheckError(PSImportError):
    name = "rangecheck"


class StackOverflowError(PSImportError):
    name = "stackoverflow"


class LimitCheckError(PSImportError):
    name = "limitcheck"


class ExecStackOverflowError(PSImportError):
    name = "execstackoverflow"


# indexed by error code
error_classes = [
    LexError,
    UnknownTokenError,
    UnmatchedBracketError,
    UndefinedNameError,
    TypeMismatchError,
    StackUnderflowError,
    NumberFormatError,
    RangeCheckError,
    StackOverflowError,
    LimitCheckError,
    ExecStackOverflowError,
]

error_names = [cls.name for cls in error_classes]


def e(ctxt, error_code: int, func_name: str, detail: str | None = None) -> NoReturn:
    """
    Raise the error identified by error_code on behalf of func_name.

    The input line currently being interpreted is attached from ctxt so the
    caller can point at the offending source.
    """
    if func_name.startswith("ps_"):
        func_name = func_name[3:]

    line_num = ctxt.line_num if ctxt is not None else None
    err = error_classes[error_code](func_name, line_num, detail)
    logger.debug("raising %s", err)
    raise err
