# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from ..core import error as ps_error
from ..core import types as ps

logger = logging.getLogger(__name__)

# Color is not carried by the emitted instructions. These operators validate
# and consume their operands so that programs setting colors still run.


def setgray(ctxt, ostack):
    """
    num **setgray** -


    consumes a gray level. The value is discarded; emitted instructions carry
    no color.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **setrgbcolor**
    """

    if not len(ostack):
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, setgray.__name__)

    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ctxt, ps_error.TYPECHECK, setgray.__name__)

    logger.debug("ignoring gray level %s", ostack[-1])
    ostack.pop()


def setrgbcolor(ctxt, ostack):
    """
    red green blue **setrgbcolor** -


    consumes three color components. The values are discarded; emitted
    instructions carry no color.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **setgray**
    """

    if len(ostack) < 3:
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, setrgbcolor.__name__)

    for i in range(-3, 0):
        if ostack[i].TYPE not in ps.NUMERIC_TYPES:
            ps_error.e(ctxt, ps_error.TYPECHECK, setrgbcolor.__name__)

    logger.debug("ignoring rgb color %s %s %s", ostack[-3], ostack[-2], ostack[-1])
    del ostack[-3:]
