# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..core import error as ps_error
from ..core import types as ps


def mark(ctxt, ostack):
    """
    - **[** -


    records the current depth of the operand stack on the mark stack. Nothing
    is pushed on the operand stack itself.

    **Errors**:     none
    **See Also**:   **]**
    """

    ctxt.marks.append(len(ostack))


def array_from_mark(ctxt, ostack):
    """
    [ obj(0) ... obj(n-1) **]** array


    creates a new array of n elements, where n is the number of values pushed
    since the matching [, and stores the values in it in the order they were
    pushed. The values are replaced on the operand stack by the array.

    **Errors**:     **stackoverflow**, **stackunderflow**, **unmatchedbracket**
    **See Also**:   **[**
    """
    op = "]"

    if not ctxt.marks:
        ps_error.e(ctxt, ps_error.UNMATCHEDBRACKET, op)

    depth = ctxt.marks.pop()
    if depth > len(ostack):
        # values pushed before the [ were consumed before the ]
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    items = ostack[depth:]
    del ostack[depth:]

    if ctxt.MaxOpStack and len(ostack) >= ctxt.MaxOpStack:
        ps_error.e(ctxt, ps_error.STACKOVERFLOW, op)

    ostack.append(ps.Array(items))


def length(ctxt, ostack):
    """
    - **length** -


    accepted for compatibility and does nothing; the operand stack is left
    untouched.

    **Errors**:     none
    """
