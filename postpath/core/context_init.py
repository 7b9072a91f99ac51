# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PostScript context initialization.

Creates the execution environment for one import: stacks, the built-in
operator dictionary, the initial graphics state and the tokenizer over the
input stream.
"""

from typing import IO, Any, Dict, Optional

from . import types as ps
from .tokenizer import Tokenizer
from ..operators import dict as ps_dict


def init_system_params() -> Dict[str, Any]:
    """
    Initialize the default system parameters for the importer.

    Returns:
        Dict[str, Any]: System parameters dictionary containing:
            - Encoding: codec used to decode binary input
            - PrologMarker: the line findfont skips up to
            - MaxOpStack: operand stack depth limit, 0 for unlimited
            - MaxGStack: gsave nesting limit, 0 for unlimited
            - MaxExecDepth: procedure nesting limit
    """

    return {
        "Encoding": "latin-1",
        "PrologMarker": "%%EndProlog",
        "MaxOpStack": 0,
        "MaxGStack": 0,
        "MaxExecDepth": 100,
    }


def create_context(
    source: IO,
    system_params: Optional[Dict[str, Any]] = None,
) -> ps.Context:
    """
    Create and initialize a complete execution context over source.

    Args:
        source: binary or text stream holding the PostScript program
        system_params: overrides for the defaults from init_system_params()

    Returns:
        ps.Context: ready to run, with systemdict populated, an empty
        userdict, an identity CTM and an empty path

    Raises:
        ValueError: if system_params names an unknown parameter
    """

    params = init_system_params()
    if system_params:
        unknown = set(system_params) - set(params)
        if unknown:
            raise ValueError(
                f"Unknown system parameter(s): {', '.join(sorted(unknown))}"
            )
        params.update(system_params)

    ctxt = ps.Context(params)
    ctxt.systemdict = ps_dict.create_system_dict(ctxt)
    ctxt.tokenizer = Tokenizer(source, params["Encoding"])

    return ctxt
