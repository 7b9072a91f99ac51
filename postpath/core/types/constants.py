# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath Types Constants Module

This module contains the constants and type tags used throughout the PostPath
interpreter. Every object that can live on the operand stack or in the
variable dictionary carries one of the T_* tags below as its TYPE.
"""

# PSObject types
T_ARRAY = 0
T_BOOL = 1
T_NAME = 2
T_OPERATOR = 3
T_PROCEDURE = 4
T_LITERAL_PROC = 5
T_REAL = 6

# Type grouping constants for fast type checking
# For single types, use direct comparison: obj.TYPE == T_XXX
NUMERIC_TYPES = frozenset({T_REAL})
EXECUTABLE_TYPES = frozenset({T_OPERATOR, T_PROCEDURE, T_LITERAL_PROC})

# line cap styles
LINE_CAP_BUTT = 0
LINE_CAP_ROUND = 1
LINE_CAP_SQUARE = 2

# line join styles
LINE_JOIN_MITER = 0
LINE_JOIN_ROUND = 1
LINE_JOIN_BEVEL = 2

# graphics state defaults
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_MITER_LIMIT = 10.0
IDENTITY_MATRIX = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

