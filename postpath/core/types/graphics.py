# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath Types Graphics Classes Module

This module contains the graphics state and the drawing instructions the
importer emits. Instructions always carry device coordinates: points are
run through the CTM when the path is built, never afterwards.
"""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass
from typing import NamedTuple

from .constants import (
    DEFAULT_LINE_WIDTH, DEFAULT_MITER_LIMIT, IDENTITY_MATRIX,
    LINE_CAP_BUTT, LINE_JOIN_MITER
)


# GSTATE
class GraphicsState(object):
    def __init__(self) -> None:
        self.CTM = list(IDENTITY_MATRIX)  # [a b c d e f], user space -> device space
        self.path = Path()  # instructions not yet flushed by stroke/fill
        self.line_width = DEFAULT_LINE_WIDTH
        self.line_cap = LINE_CAP_BUTT
        self.line_join = LINE_JOIN_MITER
        self.miter_limit = DEFAULT_MITER_LIMIT

    # Attributes that need deep copy (mutable containers that could be modified)
    _DEEPCOPY_ATTRS = frozenset({'CTM', 'path'})

    _ALL_ATTRS = (
        'CTM', 'path', 'line_width', 'line_cap', 'line_join', 'miter_limit',
    )

    def copy(self) -> GraphicsState:
        """
        Copy for gsave - shallow copy scalars, deep copy mutable containers.

        When adding new attributes to GraphicsState, add them to _ALL_ATTRS and,
        if mutable, to _DEEPCOPY_ATTRS.
        """
        new_gs = object.__new__(GraphicsState)
        for attr in GraphicsState._ALL_ATTRS:
            value = getattr(self, attr)
            if attr in GraphicsState._DEEPCOPY_ATTRS:
                setattr(new_gs, attr, copy.deepcopy(value))
            else:
                setattr(new_gs, attr, value)
        return new_gs

    def style(self) -> tuple:
        """The CTM and line style as one comparable tuple."""
        return (
            tuple(self.CTM), self.line_width, self.line_cap,
            self.line_join, self.miter_limit,
        )


class Path(list):
    """The path under construction: a list of Instructions."""


class DisplayList(list):
    """The output of an import: flushed Instructions, in emission order."""


class Point(NamedTuple):
    x: float
    y: float


class Kind(enum.Enum):
    MOVE = "MOVE"
    LINE = "LINE"
    CUBIC = "CUBIC"
    END = "END"


_POINT_COUNTS = {Kind.MOVE: 1, Kind.LINE: 1, Kind.CUBIC: 3, Kind.END: 0}


def _fmt(v: float) -> str:
    if v.is_integer():
        return str(int(v))
    return repr(v)


@dataclass(frozen=True)
class Instruction:
    """
    One drawing primitive in device coordinates.

    MOVE and LINE carry one point, CUBIC carries two control points followed
    by the end point, END carries none.
    """
    kind: Kind
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        if len(self.points) != _POINT_COUNTS[self.kind]:
            raise ValueError(
                f"{self.kind.value} takes {_POINT_COUNTS[self.kind]} point(s), "
                f"got {len(self.points)}"
            )

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "points": [[p.x, p.y] for p in self.points],
        }

    def __str__(self) -> str:
        coords = " ".join(f"{_fmt(p.x)} {_fmt(p.y)}" for p in self.points)
        return f"{self.kind.value} {coords}" if coords else self.kind.value
