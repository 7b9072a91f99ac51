# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from decimal import Context, Decimal, getcontext
from typing import Sequence, Tuple, Union

from ..core import error as ps_error
from ..core import types as ps

# Set high precision for decimal arithmetic
getcontext().prec = 50

# Results keep the 15 significant digits a double reliably holds, so artifacts
# such as 0.30000000000000004 round away while small values are kept
_SIGNIFICANT = Context(prec=15)


def _round(value: Decimal) -> float:
    return float(_SIGNIFICANT.plus(value))


def _transform_point(
    transformation_matrix: Sequence[float], x: Union[int, float], y: Union[int, float]
) -> Tuple[float, float]:
    """
    Maps user space (x, y) to device space through [a b c d e f]:
    (x*a + y*c + e, x*b + y*d + f).
    """
    # Use high-precision decimal arithmetic to minimize rounding errors
    x_dec = Decimal(str(x))
    y_dec = Decimal(str(y))
    m00_dec, m01_dec, m10_dec, m11_dec, m20_dec, m21_dec = (
        Decimal(str(v)) for v in transformation_matrix
    )

    xt_dec = m00_dec * x_dec + m10_dec * y_dec + m20_dec
    yt_dec = m01_dec * x_dec + m11_dec * y_dec + m21_dec

    return _round(xt_dec), _round(yt_dec)


def _matmult(mat1: Sequence[float], mat2: Sequence[float]) -> list[float]:
    """
    Multiplies mat1 by mat2 and returns the product as a new 6 element list.
    Uses high-precision decimal arithmetic to minimize rounding errors.

    Applying the product to a point is the same as applying mat1, then mat2.
    """
    m1_00, m1_01, m1_10, m1_11, m1_20, m1_21 = (Decimal(str(v)) for v in mat1)
    m2_00, m2_01, m2_10, m2_11, m2_20, m2_21 = (Decimal(str(v)) for v in mat2)

    # Matrix multiplication for 3x3 homogeneous matrices:
    # [m1_00 m1_01  0 ]   [m2_00 m2_01  0 ]
    # [m1_10 m1_11  0 ] × [m2_10 m2_11  0 ]
    # [m1_20 m1_21  1 ]   [m2_20 m2_21  1 ]
    return [
        _round(m1_00 * m2_00 + m1_01 * m2_10),  # a
        _round(m1_00 * m2_01 + m1_01 * m2_11),  # b
        _round(m1_10 * m2_00 + m1_11 * m2_10),  # c
        _round(m1_10 * m2_01 + m1_11 * m2_11),  # d
        _round(m1_20 * m2_00 + m1_21 * m2_10 + m2_20),  # tx
        _round(m1_20 * m2_01 + m1_21 * m2_11 + m2_21),  # ty
    ]


def concat(ctxt, ostack):
    """
    matrix **concat** -


    applies the transformation represented by matrix to the user coordinate space.
    **concat** accomplishes this by concatenating matrix with the current transformation
    matrix (CTM); that is, it replaces the CTM with the matrix product matrix X CTM.
    Points already added to the current path keep their device coordinates.

    **Example**
        [72 0 0 72 0 0] **concat**

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **matrix**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, concat.__name__)
    # 2. TYPECHECK - Check operand type (matrix array)
    if ostack[-1].TYPE != ps.T_ARRAY:
        ps_error.e(ctxt, ps_error.TYPECHECK, concat.__name__)

    if ostack[-1].length != 6:
        ps_error.e(ctxt, ps_error.RANGECHECK, concat.__name__,
                   f"matrix has {ostack[-1].length} elements")

    if not ostack[-1].is_numeric():
        ps_error.e(ctxt, ps_error.TYPECHECK, concat.__name__)

    ctxt.gstate.CTM = _matmult(ostack[-1].numbers(), ctxt.gstate.CTM)
    ostack.pop()


def matrix(ctxt, ostack):
    """
    - **matrix** **matrix**


    returns a six-element array object filled with the identity **matrix**

        [1 0 0 1 0 0]

    This **matrix** represents the identity transformation, which leaves all coordinates
    unchanged.

    **Errors**:     **stackoverflow**
    **See Also**:   **concat**
    """

    if ctxt.MaxOpStack and len(ostack) >= ctxt.MaxOpStack:
        ps_error.e(ctxt, ps_error.STACKOVERFLOW, matrix.__name__)

    ostack.append(ps.Array(ps.Real(v) for v in ps.IDENTITY_MATRIX))
