# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from postpath.core import error as ps_error
from postpath.core import types as ps
from postpath.operators import dict as ps_dict
from postpath.operators import path as ps_path

from conftest import END, line, move, reals


@pytest.mark.parametrize(
    "value, expected",
    [
        ("5", ps.Real(5)),
        ("-0.75", ps.Real(-0.75)),
        ("/foo", ps.Name("foo")),
        ("true", ps.Bool(True)),
        ("[1 2 3]", ps.Array(reals(1, 2, 3))),
    ],
)
def test_def_reproduces_value(interpret, value, expected):
    ctxt = interpret(f"/x {value} def x x")
    assert ctxt.o_stack == [expected, expected]


def test_def_procedure_runs_when_invoked(interpret):
    ctxt = interpret("/sq { dup mul } def 3 sq")
    assert ctxt.o_stack == reals(9)


def test_def_shadows_builtin(run):
    source = "/lineto { moveto } def 0 0 moveto 1 1 lineto stroke"
    assert run(source) == [move(0, 0), move(1, 1), END]


def test_redefinition(interpret):
    assert interpret("/x 1 def /x 2 def x").o_stack == reals(2)


def test_def_stores_in_userdict(interpret):
    ctxt = interpret("/x 1 def")
    assert ctxt.userdict["x"] == ps.LiteralProcedure(ps.Real(1))
    assert "x" not in ctxt.systemdict


def test_systemdict_is_read_only(ctxt):
    with pytest.raises(TypeError):
        ctxt.systemdict["moveto"] = None


def test_lookup_prefers_userdict(ctxt):
    assert ps_dict.lookup(ctxt, "lineto") == ps.Operator(ps_path.lineto)
    ctxt.userdict["lineto"] = ps.Operator(ps_path.moveto)
    assert ps_dict.lookup(ctxt, "lineto") == ps.Operator(ps_path.moveto)
    assert ps_dict.lookup(ctxt, "nosuchname") is None


def test_load_pushes_without_invoking(interpret):
    ctxt = interpret("/p { 1 2 } def /p load")
    (proc,) = ctxt.o_stack
    assert proc.TYPE == ps.T_PROCEDURE
    assert proc.val == ("1", "2")


def test_load_builtin(interpret):
    ctxt = interpret("/moveto load")
    assert ctxt.o_stack == [ps.Operator(ps_path.moveto)]
    assert str(ctxt.o_stack[0]) == "--moveto--"


def test_load_then_def_aliases(run):
    source = "/mv /moveto load def /ln /lineto load bind def 0 0 mv 3 4 ln stroke"
    assert run(source) == [move(0, 0), line(3, 4), END]


def test_load_undefined(interpret):
    with pytest.raises(ps_error.UndefinedNameError) as excinfo:
        interpret("/nothing load")
    assert excinfo.value.command == "load"
    assert excinfo.value.detail == "nothing"


@pytest.mark.parametrize("source", ["1 load", "1 2 def", "true /x def"])
def test_typecheck(interpret, source):
    with pytest.raises(ps_error.TypeMismatchError):
        interpret(source)


@pytest.mark.parametrize("source", ["load", "/x def"])
def test_stackunderflow(interpret, source):
    with pytest.raises(ps_error.StackUnderflowError):
        interpret(source)


def test_bind_is_a_no_op(interpret):
    ctxt = interpret("{ 1 } bind")
    assert ctxt.o_stack == [ps.Procedure(("1",))]


def test_length_is_a_no_op(interpret):
    ctxt = interpret("[1 2 3] length")
    assert ctxt.o_stack == [ps.Array(reals(1, 2, 3))]


def test_boolean_constants(interpret):
    assert interpret("true false").o_stack == [ps.Bool(True), ps.Bool(False)]


def test_color_operators_consume_operands(interpret):
    ctxt = interpret("9 0.5 setgray 1 0 0 setrgbcolor")
    assert ctxt.o_stack == reals(9)


@pytest.mark.parametrize("source", ["/a setgray", "1 0 /b setrgbcolor"])
def test_color_typecheck(interpret, source):
    with pytest.raises(ps_error.TypeMismatchError):
        interpret(source)


@pytest.mark.parametrize("source", ["setgray", "1 0 setrgbcolor"])
def test_color_stackunderflow(interpret, source):
    with pytest.raises(ps_error.StackUnderflowError):
        interpret(source)


def test_findfont_skips_prolog(run):
    source = (
        "0 0 moveto /Helvetica findfont 12 scalefont setfont\n"
        "/F { undefined stuff } bind def\n"
        "%%EndProlog\n"
        "1 1 lineto stroke\n"
    )
    assert run(source) == [move(0, 0), line(1, 1), END]


def test_findfont_custom_marker(run):
    source = "/Times findfont\n(junk)\n%%EndSetup\n2 2 moveto stroke\n"
    assert run(source, {"PrologMarker": "%%EndSetup"}) == [move(2, 2), END]


def test_findfont_missing_marker(run):
    with pytest.raises(ps_error.LexError) as excinfo:
        run("/Helvetica findfont\n0 0 moveto\n")
    assert excinfo.value.command == "findfont"


def test_findfont_stackunderflow(run):
    with pytest.raises(ps_error.StackUnderflowError):
        run("findfont\n%%EndProlog\n")
