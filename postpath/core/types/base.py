# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath Types Base Classes Module

This module contains the base class shared by every value the interpreter
can hold on the operand stack or bind in the variable dictionary.
"""

from typing import Any


class PSObject(object):
    """
    Base class for all PostScript objects.

    Each concrete subclass sets TYPE to one of the T_* tags from constants.py
    and stores its payload in val. Operators dispatch on TYPE, never on the
    Python class.
    """
    TYPE = None  # Base class - no specific type

    def __init__(self, val: Any) -> None:
        self.val = val

    def __copy__(self):
        """Shallow copy - composite payloads are shared, as in PostScript."""
        new_obj = self.__class__.__new__(self.__class__)
        new_obj.val = self.val
        return new_obj

    def __eq__(self, other) -> bool:
        if not isinstance(other, PSObject):
            return NotImplemented
        return self.TYPE == other.TYPE and self.val == other.val

    def __hash__(self):
        return hash((self.TYPE, self.val))

    def __repr__(self) -> str:
        return self.__str__()
