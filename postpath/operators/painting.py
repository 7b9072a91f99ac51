# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from ..core import types as ps

logger = logging.getLogger(__name__)


def _flush_path(ctxt: ps.Context, op: str) -> None:
    """Moves every instruction of the current path to the display list."""
    path = ctxt.gstate.path
    logger.debug("%s: flushing %d instruction(s)", op, len(path))
    ctxt.display_list.extend(path)
    path.clear()


def fill(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    - **fill** -


    emits the current path and then clears it. Filled and stroked geometry
    are emitted the same way.

    **Errors**:     none
    **See Also**:   **stroke**, **eofill**
    """
    _flush_path(ctxt, fill.__name__)


def eofill(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    - **eofill** -


    clears the current path without emitting it; the even-odd rule is not
    supported.

    **Errors**:     none
    **See Also**:   **fill**
    """
    logger.debug("eofill: discarding %d instruction(s)", len(ctxt.gstate.path))
    ctxt.gstate.path.clear()


def stroke(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    - **stroke** -


    emits the current path and then clears it. The line style in the
    graphics state is not attached to the emitted instructions.

    **Errors**:     none
    **See Also**:   **fill**, **setlinewidth**
    """
    _flush_path(ctxt, stroke.__name__)


def clip(ctxt: ps.Context, ostack: ps.Stack) -> None:
    """
    - **clip** -


    accepted for compatibility and does nothing; the current path is left
    untouched.

    **Errors**:     none
    **See Also**:   **eofill**
    """
