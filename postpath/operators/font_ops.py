# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..core import error as ps_error


def findfont(ctxt, ostack):
    """
    key **findfont** -


    removes key from the operand stack and skips the font definitions that
    follow in the input: the rest of the current line and every line up to
    and including the prolog marker line (%%EndProlog by default) are
    discarded unread. Text is not rendered, so no font is pushed.

    **Errors**:     **lexerror**, **stackunderflow**
    **See Also**:   **def**
    """

    if not len(ostack):
        ps_error.e(ctxt, ps_error.STACKUNDERFLOW, findfont.__name__)

    ostack.pop()

    marker = ctxt.system_params["PrologMarker"]
    if not ctxt.tokenizer.skip_lines(marker):
        ps_error.e(ctxt, ps_error.LEXERROR, findfont.__name__,
                   f"stream ended before {marker}")
