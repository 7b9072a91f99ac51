# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import math
import operator

from ..core import error as ps_error
from ..core import types as ps


def _binary(ctxt, ostack, op: str, func) -> None:
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand types
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES or ostack[-2].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, op)

    result = func(ostack[-2].val, ostack[-1].val)
    if not math.isfinite(result):
        ps_error.e(ctxt, ps_error.RANGECHECK, op, "result out of range")

    ostack.pop()
    ostack[-1] = ps.Real(result)


def add(ctxt, ostack):
    """
    num₁ num₂ **add** sum


    returns the sum of num₁ and num₂.

    **Examples**
        3 4 **add**     -> 7
        9.9 1.1 **add** -> 11.0

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **sub**, **mul**, **div**
    """
    _binary(ctxt, ostack, add.__name__, operator.add)


def div(ctxt, ostack):
    """
    num₁ num₂ **div** quotient


    divides num₁ by num₂, producing a result that is always a real number.

    **Examples**
        3 2 **div**     -> 1.5
        4 2 **div**     -> 2.0

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **mul**
    """

    if len(ostack) >= 2 and ostack[-1].TYPE in ps.NUMERIC_TYPES and ostack[-1].val == 0:
        ps_error.e(ctxt, ps_error.RANGECHECK, div.__name__, "division by zero")

    _binary(ctxt, ostack, div.__name__, operator.truediv)


def mul(ctxt, ostack):
    """
    num₁ num₂ **mul** product


    returns the product of num₁ and num₂.

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **div**, **add**, **sub**
    """
    _binary(ctxt, ostack, mul.__name__, operator.mul)


def neg(ctxt, ostack):
    """
    num₁ **neg** num₂


    returns the negative of num₁.

    **Examples**
        4.5 **neg**     -> -4.5
        -3 **neg**      -> 3

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **sub**
    """

    if not len(ostack):
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, neg.__name__)

    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, neg.__name__)

    ostack[-1] = ps.Real(-ostack[-1].val)


def sub(ctxt, ostack):
    """
    num₁ num₂ **sub** difference


    returns the result of subtracting num₂ from num₁.

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **add**, **neg**
    """
    _binary(ctxt, ostack, sub.__name__, operator.sub)
