# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from postpath.core import error as ps_error
from postpath.core import types as ps
from postpath.operators.matrix import _matmult, _transform_point

from conftest import END, move, reals


def _float_transform(m, x, y):
    return (x * m[0] + y * m[2] + m[4], x * m[1] + y * m[3] + m[5])


def test_matrix_pushes_identity(interpret):
    ctxt = interpret("matrix")
    assert ctxt.o_stack == [ps.Array(reals(1, 0, 0, 1, 0, 0))]


def test_concat_identity(interpret):
    ctxt = interpret("matrix concat")
    assert ctxt.gstate.CTM == [1, 0, 0, 1, 0, 0]
    assert ctxt.o_stack == []


def test_concat_order(interpret):
    # scale by 2, then translate by (10, 0): the new matrix applies first
    ctxt = interpret("[1 0 0 1 10 0] concat [2 0 0 2 0 0] concat")
    assert ctxt.gstate.CTM == [2, 0, 0, 2, 10, 0]


def test_concat_formula():
    a = [1, 2, 3, 4, 5, 6]
    b = [7, 8, 9, 10, 11, 12]
    assert _matmult(a, b) == [
        1 * 7 + 2 * 9, 1 * 8 + 2 * 10,
        3 * 7 + 4 * 9, 3 * 8 + 4 * 10,
        5 * 7 + 6 * 9 + 11, 5 * 8 + 6 * 10 + 12,
    ]


@pytest.mark.parametrize(
    "m1, m2",
    [
        ([2, 0, 0, 3, 5, -7], [0, 1, -1, 0, 0.5, 0.25]),
        ([0.7071, 0.7071, -0.7071, 0.7071, 0, 0], [1.5, 0, 0, -1.5, 100, 200]),
        ([1, 0.1, 0.2, 1, 0.3, 0.4], [0.9, -0.3, 0.3, 0.9, -12.5, 4.75]),
    ],
)
def test_composition_matches_sequential_application(m1, m2):
    product = _matmult(m1, m2)
    for x, y in [(0, 0), (1, 0), (0, 1), (3.25, -8.5), (123.456, 0.001)]:
        expected = _float_transform(m2, *_float_transform(m1, x, y))
        got = _transform_point(product, x, y)
        assert got == pytest.approx(expected, abs=1e-9)


def test_transform_removes_float_artifacts():
    assert _transform_point([1, 0, 0, 1, 0.1, 0], 0.2, 0) == (0.3, 0.0)


def test_transform_keeps_small_and_precise_coordinates(run):
    assert run("0.000000000012 0.123456789012345 moveto stroke") == [
        move(1.2e-11, 0.123456789012345), END
    ]


def test_small_translation_survives_concat(interpret):
    ctxt = interpret("[1 0 0 1 1e-11 -2.5e-12] concat 0 0 moveto")
    assert ctxt.gstate.path[0].points == (ps.Point(1e-11, -2.5e-12),)


def test_concat_array_built_from_operators(interpret):
    ctxt = interpret("[2 0 0 2 1 2 add 0] concat 1 1 moveto")
    assert ctxt.gstate.CTM == [2, 0, 0, 2, 3, 0]
    assert ctxt.gstate.path[0].points == (ps.Point(5, 2),)


def test_concat_through_named_matrix(interpret):
    ctxt = interpret("/m [0 1 -1 0 0 0] def m concat 1 0 moveto")
    assert ctxt.gstate.path[0].points == (ps.Point(0, 1),)


@pytest.mark.parametrize("source", ["1 concat", "/m concat", "[1 0 0 1 0 /a] concat"])
def test_concat_typecheck(interpret, source):
    with pytest.raises(ps_error.TypeMismatchError):
        interpret(source)


@pytest.mark.parametrize("source", ["[1 0 0 1 0] concat", "[1 0 0 1 0 0 0] concat", "[] concat"])
def test_concat_rangecheck(interpret, source):
    with pytest.raises(ps_error.RangeCheckError) as excinfo:
        interpret(source)
    assert excinfo.value.command == "concat"


def test_concat_stackunderflow(interpret):
    with pytest.raises(ps_error.StackUnderflowError):
        interpret("concat")
