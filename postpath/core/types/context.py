# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath Types Context Module

The execution context: every piece of mutable interpreter state for one
import lives here, so two imports never share anything.
"""

from __future__ import annotations

from .graphics import DisplayList, GraphicsState


class Context(object):
    """
    PostScript execution context containing all execution state.

    Holds the operand and mark stacks, the built-in and user dictionaries,
    the current graphics state with its save stack, and the display list
    that stroke and fill flush into.
    """
    def __init__(self, system_params: dict) -> None:
        self.system_params = (
            system_params                                   # system_params is a native python dictionary
        )

        self.o_stack = Stack()                              # the operand stack
        self.marks = []                                     # operand stack depths recorded at each [

        self.systemdict = None                              # read-only built-in operators
        self.userdict = {}                                  # bindings made by def

        self.gstate = GraphicsState()
        self.gstate_stack = Stack()                         # states saved by gsave

        self.display_list = DisplayList()                   # the import result

        self.tokenizer = None                               # set by create_context()
        self.exec_depth = 0                                 # nesting of running procedures

    @property
    def MaxOpStack(self) -> int:
        return self.system_params["MaxOpStack"]

    @property
    def MaxGStack(self) -> int:
        return self.system_params["MaxGStack"]

    @property
    def MaxExecDepth(self) -> int:
        return self.system_params["MaxExecDepth"]

    @property
    def line_num(self) -> int | None:
        """Input line currently being interpreted, if a tokenizer is attached."""
        if self.tokenizer is None:
            return None
        return self.tokenizer.line_num


class Stack(list):
    """
    PostScript stack with a readable string representation.

    Extends Python list; the top of the stack is the end of the list.
    """

    def __str__(self) -> str:
        return "[" + ", ".join(item.__str__() for item in self) + "]"

    def __repr__(self) -> str:
        return self.__str__()
