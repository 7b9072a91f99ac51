# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..core import error as ps_error
from ..core import types as ps
from .matrix import _transform_point


def _pop_points(ctxt, ostack, n: int, op: str) -> tuple:
    """
    Pops 2*n numbers from the operand stack, treating them as n (x, y) pairs
    in user space, and returns them as device space Points.
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2 * n:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand types
    for i in range(-2 * n, 0):
        if ostack[i].TYPE not in ps.NUMERIC_TYPES:
            ps_error.e(ctxt, ps_error.TYPECHECK, op)

    coords = [obj.val for obj in ostack[-2 * n:]]
    points = tuple(
        ps.Point(*_transform_point(ctxt.gstate.CTM, coords[i], coords[i + 1]))
        for i in range(0, 2 * n, 2)
    )

    del ostack[-2 * n:]
    return points


def closepath(ctxt, ostack):
    """
    - **closepath** -


    closes the current path by appending its first instruction again, which
    brings the pen back to the point where the path started. If the current
    path is empty, **closepath** does nothing.

    **Errors**:     none
    **See Also**:   **newpath**, **moveto**, **lineto**
    """

    if ctxt.gstate.path:
        ctxt.gstate.path.append(ctxt.gstate.path[0])


def curveto(ctxt, ostack):
    """
    x₁ y₁ x₂ y₂ x₃ y₃ **curveto** -


    appends a section of a cubic Bézier curve to the current path, ending at
    (x₃, y₃) and using (x₁, y₁) and (x₂, y₂) as the Bézier control points. All
    three points are transformed by the CTM before they are stored.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **moveto**, **lineto**
    """

    points = _pop_points(ctxt, ostack, 3, curveto.__name__)
    ctxt.gstate.path.append(ps.Instruction(ps.Kind.CUBIC, points))


def lineto(ctxt, ostack):
    """
    x y **lineto** -


    appends a straight line segment to the current path, extending to the
    coordinates (x, y) in user space.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **moveto**, **curveto**, **closepath**
    """

    points = _pop_points(ctxt, ostack, 1, lineto.__name__)
    ctxt.gstate.path.append(ps.Instruction(ps.Kind.LINE, points))


def moveto(ctxt, ostack):
    """
    x y **moveto** -


    starts a new subpath of the current path by moving the pen, without
    drawing, to the coordinates (x, y) in user space.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **lineto**, **curveto**, **closepath**
    """

    points = _pop_points(ctxt, ostack, 1, moveto.__name__)
    ctxt.gstate.path.append(ps.Instruction(ps.Kind.MOVE, points))


def newpath(ctxt, ostack):
    """
    - **newpath** -


    initializes the current path in the graphics state to an empty path.

    **Errors**:     none
    **See Also**:   **closepath**, **stroke**, **fill**, **eofill**
    """
    ctxt.gstate.path.clear()
