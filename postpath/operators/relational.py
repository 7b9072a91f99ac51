# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import operator

from ..core import error as ps_error
from ..core import types as ps


def _equal(obj1, obj2) -> bool:
    # numbers, names and booleans compare by value
    # arrays and procedures are equal only if they share the same value
    if obj1.TYPE != obj2.TYPE:
        return False
    if obj1.TYPE in (ps.T_REAL, ps.T_NAME, ps.T_BOOL):
        return obj1.val == obj2.val
    return obj1.val is obj2.val


def eq(ctxt, ostack):
    """
    any₁ any₂ **eq** bool


    pops two objects from the operand stack and pushes true if they are equal, or false
    if not. Numbers, names and booleans are equal when their values are. Arrays and
    procedures are equal only if they share the same value, as after **dup**.

    **Examples**
        4.0 4 **eq**            -> true
        /abc /abc **eq**        -> true
        [1 2 3] dup **eq**      -> true
        [1 2 3] [1 2 3] **eq**  -> false

    **Errors**:     **stackunderflow**
    **See Also**:   **ne**
    """

    if len(ostack) < 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, eq.__name__)

    result = _equal(ostack[-2], ostack[-1])
    ostack.pop()
    ostack[-1] = ps.Bool(result)


def ne(ctxt, ostack):
    """
    any₁ any₂ **ne** bool


    pops two objects from the operand stack and pushes false if they are equal, or true
    if not. What it means for objects to be equal is presented in the description of
    the **eq** operator.

    **Errors**:     **stackunderflow**
    **See Also**:   **eq**
    """

    if len(ostack) < 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, ne.__name__)

    result = not _equal(ostack[-2], ostack[-1])
    ostack.pop()
    ostack[-1] = ps.Bool(result)


def _compare(ctxt, ostack, op: str, func) -> None:
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand types
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES or ostack[-2].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, op)

    result = func(ostack[-2].val, ostack[-1].val)
    ostack.pop()
    ostack[-1] = ps.Bool(result)


def ge(ctxt, ostack):
    """
    num₁ num₂ **ge** bool


    pops two numbers from the operand stack and pushes true if the first operand is
    greater than or equal to the second, or false otherwise.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **gt**, **le**, **lt**
    """
    _compare(ctxt, ostack, ge.__name__, operator.ge)


def gt(ctxt, ostack):
    """
    num₁ num₂ **gt** bool


    pops two numbers from the operand stack and pushes true if the first operand is
    greater than the second, or false otherwise.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **ge**, **le**, **lt**
    """
    _compare(ctxt, ostack, gt.__name__, operator.gt)


def le(ctxt, ostack):
    """
    num₁ num₂ **le** bool


    pops two numbers from the operand stack and pushes true if the first operand is
    less than or equal to the second, or false otherwise.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **lt**, **ge**, **gt**
    """
    _compare(ctxt, ostack, le.__name__, operator.le)


def lt(ctxt, ostack):
    """
    num₁ num₂ **lt** bool


    pops two numbers from the operand stack and pushes true if the first operand is
    less than the second, or false otherwise.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **le**, **ge**, **gt**
    """
    _compare(ctxt, ostack, lt.__name__, operator.lt)


def ps_not(ctxt, ostack):
    """
    bool₁ **not** bool₂


    returns the logical negation of the boolean operand.

    **Examples**
        true **not**    -> false

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **eq**, **ne**
    """
    op = "not"

    if not len(ostack):
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    if ostack[-1].TYPE != ps.T_BOOL:
        ps_error.e(ctxt, ps_error.TYPECHECK, op)

    ostack[-1] = ps.Bool(not ostack[-1].val)
