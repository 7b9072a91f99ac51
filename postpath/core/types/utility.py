# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath Types Utility Classes Module

Executable wrappers bound in the variable dictionary: built-in operators and
the push-a-value procedures synthesized by def.
"""

from __future__ import annotations

import copy
from typing import Callable

from .base import PSObject
from .constants import T_LITERAL_PROC, T_OPERATOR


class Operator(PSObject):
    TYPE = T_OPERATOR

    def __init__(self, op: Callable) -> None:
        super().__init__(op)

    @property
    def name(self) -> str:
        name = self.val.__name__
        return name[3:] if name.startswith("ps_") else name

    def __eq__(self, other) -> bool:
        return isinstance(other, Operator) and self.val is other.val

    def __hash__(self):
        return hash(self.val)

    def __str__(self) -> str:
        return f"--{self.name}--"


class LiteralProcedure(PSObject):
    """
    A zero-argument procedure whose only effect is pushing val.

    def wraps every non-executable value in one of these, which is what makes
    /x 5 def x push 5.
    """
    TYPE = T_LITERAL_PROC

    def __init__(self, val: PSObject) -> None:
        super().__init__(val)

    def value(self) -> PSObject:
        return copy.copy(self.val)

    def __str__(self) -> str:
        return "{ " + str(self.val) + " }"
