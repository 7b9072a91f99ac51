# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath Types Composite Classes Module

Arrays built by [ ... ] and procedures captured from { ... }.
"""

from __future__ import annotations

from typing import Iterable

from .base import PSObject
from .constants import NUMERIC_TYPES, T_ARRAY, T_PROCEDURE


class Array(PSObject):
    """
    An ordered sequence of values built by the ] operator.

    Elements may be of any type. Copies share the underlying list.
    """
    TYPE = T_ARRAY

    __hash__ = None

    def __init__(self, val: Iterable[PSObject] = ()) -> None:
        super().__init__(list(val))

    @property
    def length(self) -> int:
        return len(self.val)

    def is_numeric(self) -> bool:
        return all(item.TYPE in NUMERIC_TYPES for item in self.val)

    def numbers(self) -> list[float]:
        return [item.val for item in self.val]

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self.val) + "]"


class Procedure(PSObject):
    """
    A deferred block of code captured between { and }.

    The body is kept as the raw lexemes it was written with, nested braces
    included. Executing the procedure replays those lexemes through the
    dispatcher, so names inside the body are looked up when it runs rather
    than when it was defined.
    """
    TYPE = T_PROCEDURE

    def __init__(self, tokens: Iterable[str]) -> None:
        super().__init__(tuple(tokens))

    def __str__(self) -> str:
        if not self.val:
            return "{}"
        return "{ " + " ".join(self.val) + " }"
