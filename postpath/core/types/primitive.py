# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath Types Primitive Classes Module

This module contains the simple atomic PostScript types. These types are
immutable and have straightforward value semantics.
"""

from .base import PSObject
from .constants import T_BOOL, T_NAME, T_REAL


class Bool(PSObject):
    """PostScript boolean type - represents true/false values."""
    TYPE = T_BOOL

    def __init__(self, val: bool) -> None:
        super().__init__(bool(val))

    def __str__(self) -> str:
        return str(self.val).lower()


class Real(PSObject):
    """PostScript number. Every numeric literal is held as a float."""
    TYPE = T_REAL

    def __init__(self, val: float) -> None:
        super().__init__(float(val))

    def __str__(self) -> str:
        if self.val.is_integer():
            return str(int(self.val))
        return repr(self.val)


class Name(PSObject):
    """A literal name such as /foo, pushed unresolved."""
    TYPE = T_NAME

    def __init__(self, val: str) -> None:
        super().__init__(val)

    def __str__(self) -> str:
        return "/" + self.val
