# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import math
import re
from typing import Iterator

from . import array as ps_array
from . import dict as ps_dict
from ..core import error as ps_error
from ..core import types as ps
from ..core.tokenizer import L_CRLY_BRACKET, L_SQR_BRACKET, R_CRLY_BRACKET, R_SQR_BRACKET, SOLIDUS

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
NUMBER_START = DIGITS + ".-"

# signed decimal with optional fraction and exponent: 12  -3.5  .5  4.  1e-3
_number = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\Z", re.ASCII)


def run(ctxt: ps.Context, source: Iterator[str]) -> None:
    """
    Dispatch every lexeme from source, in order, until it is exhausted.

    source is the live tokenizer for the top level program, or an iterator
    over a procedure body when a procedure runs. A { met along the way
    captures the following lexemes from the same source.
    """
    for token in source:
        accept(ctxt, token, source)


def accept(ctxt: ps.Context, token: str, source: Iterator[str]) -> None:
    """
    Process a single lexeme, classified by its first character.

    - /name pushes the literal name
    - { captures a procedure from source and pushes it
    - a letter looks up the name and executes what it is bound to
    - a digit, '.' or '-' pushes a number
    - [ records a mark, ] gathers the values above it into an array
    """
    c = token[0]
    if c == SOLIDUS:
        _push(ctxt, ps.Name(token[1:]), token)
    elif c == L_CRLY_BRACKET:
        _push(ctxt, capture_procedure(ctxt, source), token)
    elif c.isalpha():
        value = ps_dict.lookup(ctxt, token)
        if value is None:
            ps_error.e(ctxt, ps_error.UNDEFINED, token)
        execute(ctxt, value, token)
    elif c in NUMBER_START:
        _push(ctxt, parse_number(ctxt, token), token)
    elif c == L_SQR_BRACKET:
        ps_array.mark(ctxt, ctxt.o_stack)
    elif c == R_SQR_BRACKET:
        ps_array.array_from_mark(ctxt, ctxt.o_stack)
    else:
        # includes a } with no open {
        ps_error.e(ctxt, ps_error.UNKNOWNTOKEN, token)


def _push(ctxt: ps.Context, obj: ps.PSObject, token: str) -> None:
    if ctxt.MaxOpStack and len(ctxt.o_stack) >= ctxt.MaxOpStack:
        ps_error.e(ctxt, ps_error.STACKOVERFLOW, token)
    ctxt.o_stack.append(obj)


def parse_number(ctxt: ps.Context, token: str) -> ps.Real:
    if not _number.match(token):
        ps_error.e(ctxt, ps_error.NUMBERFORMAT, token)
    val = float(token)
    if not math.isfinite(val):
        ps_error.e(ctxt, ps_error.NUMBERFORMAT, token, "number out of range")
    return ps.Real(val)


def capture_procedure(ctxt: ps.Context, source: Iterator[str]) -> ps.Procedure:
    """
    Collect the lexemes up to the } matching an already consumed {.

    Nested braces are kept as plain lexemes; they are only turned into
    procedures when the captured body runs.
    """
    tokens = []
    depth = 1
    for token in source:
        if token == L_CRLY_BRACKET:
            depth += 1
        elif token == R_CRLY_BRACKET:
            depth -= 1
            if depth == 0:
                return ps.Procedure(tokens)
        tokens.append(token)

    ps_error.e(ctxt, ps_error.LEXERROR, L_CRLY_BRACKET,
               f"stream ended inside {depth} open procedure(s)")


def execute(ctxt: ps.Context, obj: ps.PSObject, name: str) -> None:
    """
    Invoke an executable bound in the dictionary.

    Operators run directly, procedures replay their body, and literal
    procedures push a copy of their value.
    """
    if obj.TYPE == ps.T_OPERATOR:
        logger.debug("exec %s", obj)
        obj.val(ctxt, ctxt.o_stack)
    elif obj.TYPE == ps.T_PROCEDURE:
        if ctxt.exec_depth >= ctxt.MaxExecDepth:
            ps_error.e(ctxt, ps_error.EXECSTACKOVERFLOW, name)
        logger.debug("exec %s %s", name, obj)
        ctxt.exec_depth += 1
        try:
            run(ctxt, iter(obj.val))
        finally:
            ctxt.exec_depth -= 1
    elif obj.TYPE == ps.T_LITERAL_PROC:
        _push(ctxt, obj.value(), name)
    else:
        ps_error.e(ctxt, ps_error.TYPECHECK, name)


def ps_if(ctxt, ostack):
    """
    bool proc **if** -


    removes both operands from the stack, then executes proc if bool is true. The **if** operator
    pushes no results of its own on the operand stack, but proc may do so. Names in proc are
    looked up when it runs, not when it was written.

    Example
        3 4 lt {0 0 moveto} if      -> path starts at (0, 0)

    **Errors**:     **stackunderflow**, **typecheck**
    """
    op = "if"

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand types (boolean procedure)
    if ostack[-2].TYPE != ps.T_BOOL:
        ps_error.e(ctxt, ps_error.TYPECHECK, op)
    if ostack[-1].TYPE not in ps.EXECUTABLE_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, op)

    proc = ostack.pop()
    condition = ostack.pop().val

    if condition:
        execute(ctxt, proc, op)
