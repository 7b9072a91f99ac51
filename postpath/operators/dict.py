# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from types import MappingProxyType
from typing import Any

from . import array as ps_array
from . import color_ops as ps_color_ops
from . import control as ps_control
from ..core import error as ps_error
from . import font_ops as ps_font_ops
from . import graphics_state as ps_gstate
from . import math as ps_math
from . import matrix as ps_matrix
from . import operand_stack as ps_operand_stack
from . import painting as ps_painting
from . import path as ps_path
from . import relational as ps_relational
from ..core import types as ps


def add_to_dict(d: dict, name: str, the_type: Any, val) -> None:
    d[name] = the_type(val)


def create_system_dict(ctxt) -> MappingProxyType:
    """
    Build the read-only mapping of built-in operators.

    Constants such as true are bound as literal procedures, so every entry
    is executable and a name lookup always ends in an invocation.
    """
    d = {}

    ops = [
        # boolean constants
        ("true", ps.LiteralProcedure, ps.Bool(True)),
        ("false", ps.LiteralProcedure, ps.Bool(False)),
        # color operators
        ("setgray", ps.Operator, ps_color_ops.setgray),
        ("setrgbcolor", ps.Operator, ps_color_ops.setrgbcolor),
        # font operators
        ("findfont", ps.Operator, ps_font_ops.findfont),
        # path construction operators
        ("closepath", ps.Operator, ps_path.closepath),
        ("curveto", ps.Operator, ps_path.curveto),
        ("lineto", ps.Operator, ps_path.lineto),
        ("moveto", ps.Operator, ps_path.moveto),
        ("newpath", ps.Operator, ps_path.newpath),
        # painting operators
        ("clip", ps.Operator, ps_painting.clip),
        ("eofill", ps.Operator, ps_painting.eofill),
        ("fill", ps.Operator, ps_painting.fill),
        ("stroke", ps.Operator, ps_painting.stroke),
        # array operators
        ("length", ps.Operator, ps_array.length),
        # arithmetic operators
        ("add", ps.Operator, ps_math.add),
        ("div", ps.Operator, ps_math.div),
        ("mul", ps.Operator, ps_math.mul),
        ("neg", ps.Operator, ps_math.neg),
        ("sub", ps.Operator, ps_math.sub),
        # relational and boolean operators
        ("eq", ps.Operator, ps_relational.eq),
        ("ge", ps.Operator, ps_relational.ge),
        ("gt", ps.Operator, ps_relational.gt),
        ("le", ps.Operator, ps_relational.le),
        ("lt", ps.Operator, ps_relational.lt),
        ("ne", ps.Operator, ps_relational.ne),
        ("not", ps.Operator, ps_relational.ps_not),
        # operand stack operators
        ("clear", ps.Operator, ps_operand_stack.clear),
        ("count", ps.Operator, ps_operand_stack.count),
        ("dup", ps.Operator, ps_operand_stack.dup),
        ("exch", ps.Operator, ps_operand_stack.exch),
        ("pop", ps.Operator, ps_operand_stack.pop),
        ("roll", ps.Operator, ps_operand_stack.roll),
        # matrix operators
        ("concat", ps.Operator, ps_matrix.concat),
        ("matrix", ps.Operator, ps_matrix.matrix),
        # graphics state operators
        ("grestore", ps.Operator, ps_gstate.grestore),
        ("gsave", ps.Operator, ps_gstate.gsave),
        ("setlinecap", ps.Operator, ps_gstate.setlinecap),
        ("setlinejoin", ps.Operator, ps_gstate.setlinejoin),
        ("setlinewidth", ps.Operator, ps_gstate.setlinewidth),
        ("setmiterlimit", ps.Operator, ps_gstate.setmiterlimit),
        # dictionary operators
        ("bind", ps.Operator, bind),
        ("def", ps.Operator, ps_def),
        ("load", ps.Operator, load),
        # control operators
        ("if", ps.Operator, ps_control.ps_if),
    ]

    for name, the_type, val in ops:
        add_to_dict(d, name, the_type, val)

    return MappingProxyType(d)


def lookup(ctxt, key: str):
    # lookup a name in userdict, then systemdict
    # returns the bound executable or None if not found

    value = ctxt.userdict.get(key)
    if value is None:
        value = ctxt.systemdict.get(key)
    return value


def bind(ctxt, ostack):
    """
    proc **bind** proc


    accepted for compatibility and does nothing: names inside procedures are
    always looked up when the procedure runs.

    **Errors**:     none
    **See Also**:   **load**, **def**
    """


def ps_def(ctxt, ostack):
    """
    key value **def** –


    associates key with value in the user dictionary. If key is already
    defined, including as a built-in operator, the new binding shadows the
    old one.

    A procedure or operator value is bound as is, so invoking key runs it.
    Any other value is wrapped in a procedure that pushes the value, so
    invoking key pushes it back.

    **Examples**
        /ncnt 1 **def**             % ncnt now pushes 1
        /sq {dup mul} **def**       % sq squares the top of the stack

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **load**, **bind**
    """
    op = "def"

    if len(ostack) < 2:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, op)

    if ostack[-2].TYPE != ps.T_NAME:
        ps_error.e(ctxt, ps_error.TYPECHECK, op)

    value = ostack[-1]
    if value.TYPE not in ps.EXECUTABLE_TYPES:
        value = ps.LiteralProcedure(value)

    ctxt.userdict[ostack[-2].val] = value

    ostack.pop()
    ostack.pop()


def load(ctxt, ostack):
    """
    key **load** value


    looks up key the same way the interpreter looks up executable names, but
    pushes the bound procedure on the operand stack instead of running it.

    **Examples**
        /avg {add 2 div} def
        /avg **load**               -> {add 2 div}

    **Errors**:     **stackunderflow**, **typecheck**, **undefined**
    **See Also**:   **def**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, load.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE != ps.T_NAME:
        ps_error.e(ctxt, ps_error.TYPECHECK, load.__name__)

    val = lookup(ctxt, ostack[-1].val)
    if val is None:
        ps_error.e(ctxt, ps_error.UNDEFINED, load.__name__, ostack[-1].val)

    ostack[-1] = val
