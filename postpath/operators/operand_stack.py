# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from copy import copy

from ..core import error as ps_error
from ..core import types as ps


def clear(ctxt, ostack):
    """
    |- any(1) ... any(n) **clear** |-


    pops all objects from the operand stack and discards them. Pending [ marks
    are dropped as well.

    **Errors**:     **none**
    **See Also**:   **count**, **pop**
    """

    ostack.clear()
    ctxt.marks.clear()


def count(ctxt, ostack):
    """
    |- any(1) ... any(n) **count** |- any(1) ... any(n) n


    pushes the depth of the operand stack, not counting the result itself.
    Pending [ marks do not take part.

    **Examples**
        7 8 **count**       -> 7 8 2
        [ 5 **count** ]     -> [5 1]

    **Errors**:     **stackoverflow**
    **See Also**:   **clear**
    """

    if ctxt.MaxOpStack and len(ostack) >= ctxt.MaxOpStack:
        ps_error.e(ctxt, ps_error.STACKOVERFLOW, count.__name__)

    ostack.append(ps.Real(len(ostack)))


def dup(ctxt, ostack):
    """
    any **dup** any any


    duplicates the top element on the operand stack. **dup** copies only the object; the
    value of an array is not copied but is shared.

    **Errors**:     **stackoverflow**, **stackunderflow**
    **See Also**:   **exch**, **pop**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, dup.__name__)
    # 2. STACKOVERFLOW - Check stack overflow (will push 1 item)
    if ctxt.MaxOpStack and len(ostack) + 1 > ctxt.MaxOpStack:
        ps_error.e(ctxt, ps_error.STACKOVERFLOW, dup.__name__)

    ostack.append(copy(ostack[-1]))


def exch(ctxt, ostack):
    """
    any₁ any₂ **exch** any₂ any₁


    swaps the two topmost values, handy for reordering coordinates before a
    path operator.

    **Examples**
        10 20 **exch** moveto   -> pen at (20, 10)

    **Errors**:     **stackunderflow**
    **See Also**:   **dup**, **roll**, **pop**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, exch.__name__)

    ostack[-1], ostack[-2] = ostack[-2], ostack[-1]


def pop(ctxt, ostack):
    """
    any **pop** -


    drops the topmost value.

    **Examples**
        0 0 99 **pop** moveto  -> pen at (0, 0)

    **Errors**:     **stackunderflow**
    **See Also**:   **clear**, **dup**
    """

    if not len(ostack):
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, pop.__name__)

    ostack.pop()


def roll(ctxt, ostack):
    """
    any(n-1) ... any(0) n j **roll** any((j-1) mod n) ... any(0) any(n-1) ... any(j mod n)


    rotates the top n values by j places. With j positive, values move toward
    the top and the topmost ones wrap around to the bottom of the group; with j
    negative they move the other way. Both counts must be integral, n may not
    be negative, and n 0 roll does nothing.

    **Examples**
        1 2 3 3 1 **roll**     -> 3 1 2
        1 2 3 3 -1 **roll**    -> 2 3 1
        1 2 3 3 4 **roll**     -> 3 1 2

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **exch**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, roll.__name__)
    # 2. TYPECHECK - Check operand types (n j)
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES or ostack[-2].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, roll.__name__)
    if not ostack[-1].val.is_integer() or not ostack[-2].val.is_integer():
        ps_error.e(ctxt, ps_error.TYPECHECK, roll.__name__)

    n = int(ostack[-2].val)
    j = int(ostack[-1].val)

    if n < 0:
        ps_error.e(ctxt, ps_error.RANGECHECK, roll.__name__)
    if n > len(ostack) - 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, roll.__name__)

    ostack.pop()
    ostack.pop()

    if n == 0:
        return

    j %= n
    if j:
        ostack[-n:] = ostack[-j:] + ostack[-n:-j]
