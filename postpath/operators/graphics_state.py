# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import math

from ..core import error as ps_error
from ..core import types as ps


def grestore(ctxt, ostack) -> None:
    """
    - **grestore** -


    resets the current graphics state from the one on the top of the graphics state
    stack and pops the graphics state stack, restoring the graphics state in effect at
    the time of the matching **gsave** operation. Any path built since then is lost.

    **Errors**:     **stackunderflow**
    **See Also**:   **gsave**
    """

    if not ctxt.gstate_stack:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, grestore.__name__,
                   "no saved graphics state")

    ctxt.gstate = ctxt.gstate_stack.pop()


def gsave(ctxt, ostack) -> None:
    """
    - **gsave** -


    pushes a copy of the current graphics state on the graphics state stack. The
    CTM, line style and current path are all saved; the current state keeps
    working on its own copy of the path. The saved state can later be restored by
    a matching **grestore**.

    **Errors**:     **limitcheck**
    **See Also**:   **grestore**
    """

    if ctxt.MaxGStack and len(ctxt.gstate_stack) >= ctxt.MaxGStack:
        ps_error.e(ctxt, ps_error.LIMITCHECK, gsave.__name__)

    ctxt.gstate_stack.append(ctxt.gstate.copy())


def _pop_style_int(ctxt, ostack, op: str, lowest: int, highest: int) -> int:
    if not len(ostack):
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, op)

    if not math.isfinite(ostack[-1].val):
        ps_error.e(ctxt, ps_error.RANGECHECK, op, f"{ostack[-1].val} not in {lowest}..{highest}")

    value = int(ostack[-1].val)
    if value < lowest or value > highest:
        ps_error.e(ctxt, ps_error.RANGECHECK, op, f"{value} not in {lowest}..{highest}")

    ostack.pop()
    return value


def setlinecap(ctxt, ostack) -> None:
    """
    int **setlinecap** -


    sets the line cap parameter in the graphics state to int, which must be 0, 1, or 2.
    Possible values are as follows.

    0   Butt cap.
    1   Round cap.
    2   Projecting square cap.

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **setlinejoin**
    """

    ctxt.gstate.line_cap = _pop_style_int(
        ctxt, ostack, setlinecap.__name__, ps.LINE_CAP_BUTT, ps.LINE_CAP_SQUARE
    )


def setlinejoin(ctxt, ostack) -> None:
    """
    int **setlinejoin** -


    sets the line join parameter in the graphics state to int, which must be 0, 1, or 2.
    Possible values are as follows:

    0   Miter join.
    1   Round join.
    2   Bevel join.

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **setlinecap**, **setmiterlimit**
    """

    ctxt.gstate.line_join = _pop_style_int(
        ctxt, ostack, setlinejoin.__name__, ps.LINE_JOIN_MITER, ps.LINE_JOIN_BEVEL
    )


def setlinewidth(ctxt, ostack) -> None:
    """
    num **setlinewidth** -


    sets the line width parameter in the graphics state to the absolute value
    of num. A width of 0 is accepted.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **stroke**
    """

    if not len(ostack):
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, setlinewidth.__name__)

    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, setlinewidth.__name__)

    # Stored in user space, as given
    ctxt.gstate.line_width = float(abs(ostack[-1].val))

    ostack.pop()


def setmiterlimit(ctxt, ostack) -> None:
    """
    num **setmiterlimit** -


    sets the miter limit parameter in the graphics state to num, which must be a number
    greater than or equal to 1. The default value of the miter limit is 10.0

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **setlinejoin**
    """

    if not len(ostack):
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, setmiterlimit.__name__)

    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, setmiterlimit.__name__)

    if ostack[-1].val < 1:
        ps_error.e(ctxt, ps_error.RANGECHECK, setmiterlimit.__name__)

    ctxt.gstate.miter_limit = float(ostack[-1].val)

    ostack.pop()
