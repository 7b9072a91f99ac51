# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared fixtures for the PostPath test suite.

- run(source): imports source and returns the instruction list, END included
- interpret(source): runs source and returns the Context it left behind
- ctxt: a fresh Context over an empty stream, for calling operators directly
"""

import io

import pytest

from postpath import importer
from postpath.core import context_init
from postpath.core import types as ps


@pytest.fixture
def run():
    return importer.process_string


@pytest.fixture
def interpret():
    def _interpret(source, **system_params):
        return importer.execute_stream(io.StringIO(source), system_params or None)
    return _interpret


@pytest.fixture
def ctxt():
    return context_init.create_context(io.BytesIO(b""))


def reals(*values):
    """Operand stack contents as the interpreter would leave them."""
    return [ps.Real(v) for v in values]


def move(x, y):
    return ps.Instruction(ps.Kind.MOVE, (ps.Point(float(x), float(y)),))


def line(x, y):
    return ps.Instruction(ps.Kind.LINE, (ps.Point(float(x), float(y)),))


def cubic(x1, y1, x2, y2, x3, y3):
    points = ((x1, y1), (x2, y2), (x3, y3))
    return ps.Instruction(ps.Kind.CUBIC, tuple(ps.Point(float(x), float(y)) for x, y in points))


END = ps.Instruction(ps.Kind.END)
