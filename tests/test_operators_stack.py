# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from postpath.core import error as ps_error
from postpath.core import types as ps

from conftest import reals


def test_dup(interpret):
    assert interpret("1 2 dup").o_stack == reals(1, 2, 2)


def test_dup_shares_array_value(interpret):
    ctxt = interpret("[1 2] dup")
    assert ctxt.o_stack[0].val is ctxt.o_stack[1].val


def test_exch(interpret):
    assert interpret("1 2 3 exch").o_stack == reals(1, 3, 2)


def test_pop(interpret):
    assert interpret("1 2 pop").o_stack == reals(1)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1 2 3 3 1 roll", (3, 1, 2)),
        ("1 2 3 3 -1 roll", (2, 3, 1)),
        ("1 2 3 3 0 roll", (1, 2, 3)),
        ("1 2 3 3 4 roll", (3, 1, 2)),
        ("1 2 3 2 1 roll", (1, 3, 2)),
        ("1 2 3 0 5 roll", (1, 2, 3)),
    ],
)
def test_roll(interpret, source, expected):
    assert interpret(source).o_stack == reals(*expected)


def test_count_and_clear(interpret):
    assert interpret("1 2 3 count").o_stack == reals(1, 2, 3, 3)
    assert interpret("1 2 clear count").o_stack == reals(0)


def test_clear_drops_marks(interpret):
    with pytest.raises(ps_error.UnmatchedBracketError):
        interpret("[ 1 clear ]")


@pytest.mark.parametrize("source", ["dup", "exch", "1 exch", "pop", "1 roll", "1 2 3 roll"])
def test_stackunderflow(interpret, source):
    with pytest.raises(ps_error.StackUnderflowError):
        interpret(source)


@pytest.mark.parametrize("source", ["1 2 /a 1 roll", "1 2 2 0.5 roll", "1 2 1.5 1 roll"])
def test_roll_typecheck(interpret, source):
    with pytest.raises(ps_error.TypeMismatchError):
        interpret(source)


def test_roll_rangecheck(interpret):
    with pytest.raises(ps_error.RangeCheckError):
        interpret("1 2 -1 1 roll")


def test_dup_overflow(interpret):
    with pytest.raises(ps_error.StackOverflowError):
        interpret("1 2 dup", MaxOpStack=2)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("3 4 add", 7),
        ("10 4 sub", 6),
        ("2.5 4 mul", 10),
        ("1 4 div", 0.25),
        ("7 neg", -7),
        ("0.1 0.2 add", 0.1 + 0.2),
    ],
)
def test_arithmetic(interpret, source, expected):
    assert interpret(source).o_stack == reals(expected)


def test_division_by_zero(interpret):
    with pytest.raises(ps_error.RangeCheckError):
        interpret("1 0 div")


@pytest.mark.parametrize(
    "source", ["1e308 10 mul", "1e308 1e308 add", "-1e308 1e308 sub", "1e308 0.1 div"]
)
def test_arithmetic_overflow(interpret, source):
    with pytest.raises(ps_error.RangeCheckError):
        interpret(source)


@pytest.mark.parametrize("source", ["1 /a add", "true 1 sub", "/x neg", "[1] 2 mul"])
def test_arithmetic_typecheck(interpret, source):
    with pytest.raises(ps_error.TypeMismatchError):
        interpret(source)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("4.0 4 eq", True),
        ("1 2 eq", False),
        ("/abc /abc eq", True),
        ("/abc 1 eq", False),
        ("true true eq", True),
        ("[1 2] dup eq", True),
        ("[1 2] [1 2] eq", False),
        ("1 2 ne", True),
        ("/a /a ne", False),
        ("1 2 lt", True),
        ("2 2 le", True),
        ("3 2 gt", True),
        ("2 3 ge", False),
        ("true not", False),
        ("1 2 gt not", True),
    ],
)
def test_relational(interpret, source, expected):
    assert interpret(source).o_stack == [ps.Bool(expected)]


@pytest.mark.parametrize("source", ["1 /a lt", "/a /b gt", "1 not"])
def test_relational_typecheck(interpret, source):
    with pytest.raises(ps_error.TypeMismatchError):
        interpret(source)
