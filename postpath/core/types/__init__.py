# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostPath Types Package - Public API

This package provides the unified PostScript types interface for the PostPath
importer. All types, constants, and classes are available through this single
namespace to support the standard import pattern: `from ..core import types as ps`

**Internal Module Organization:**
- constants.py: type tags, type groups, graphics defaults
- base.py: the PSObject base class
- primitive.py: Bool, Real, Name
- composite.py: Array, Procedure
- utility.py: Operator, LiteralProcedure
- graphics.py: GraphicsState, Point, Kind, Instruction, Path, DisplayList
- context.py: Context, Stack

**Usage:**
```python
from ..core import types as ps

ostack.append(ps.Real(1.5))
ps.Instruction(ps.Kind.MOVE, (ps.Point(0.0, 0.0),))
```
"""

from .constants import *
from .base import *
from .primitive import *
from .composite import *
from .utility import *
from .graphics import *
from .context import *
