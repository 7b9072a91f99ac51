# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
The importer entry points.

An import consumes one PostScript stream and returns the drawing
instructions it produced, in device coordinates, always terminated by an END
instruction. Every call builds a fresh context; nothing is shared between
imports.

Loaders are registered by file extension so that callers can pick one from
a filename with load_file(); get_loaders() lists what is supported.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Any, Callable, Dict, Optional, Union

from .core import context_init
from .core import types as ps
from .operators import control as ps_control

logger = logging.getLogger(__name__)

_loaders = []


def register_loader(extension: str, human_name: Optional[str] = None) -> Callable:
    """
    A decorator which registers a loader taking the file contents, for use
    by load_file().
    """
    def _register_loader(loader):
        _loaders.append((loader, extension, human_name))
        return loader

    return _register_loader


def get_loaders() -> list:
    """
    Returns a list [(loader, extension, human_name), ...] containing all supported
    loaders.
    """
    return _loaders[:]


def execute_stream(stream: IO, system_params: Optional[Dict[str, Any]] = None) -> ps.Context:
    """
    Run the program in stream and return the context it left behind.

    The display list holds what stroke and fill emitted, without the trailing
    END. Errors propagate unchanged.
    """
    ctxt = context_init.create_context(stream, system_params)
    ps_control.run(ctxt, ctxt.tokenizer)
    return ctxt


def process(stream: IO, system_params: Optional[Dict[str, Any]] = None) -> ps.DisplayList:
    """
    Import a PostScript stream.

    Args:
        stream: binary or text stream holding the program
        system_params: overrides for context_init.init_system_params()

    Returns:
        ps.DisplayList: the emitted instructions followed by END

    Raises:
        PSImportError: on the first error; no partial result is returned
    """
    ctxt = execute_stream(stream, system_params)
    ctxt.display_list.append(ps.Instruction(ps.Kind.END))

    logger.info(
        "imported %d instruction(s) from %d line(s)",
        len(ctxt.display_list) - 1, ctxt.tokenizer.line_num,
    )
    if ctxt.o_stack:
        logger.debug("%d value(s) left on the operand stack: %s",
                     len(ctxt.o_stack), ctxt.o_stack)

    return ctxt.display_list


@register_loader(".eps", "Encapsulated PostScript")
@register_loader(".ps", "PostScript")
def process_string(source: Union[str, bytes],
                   system_params: Optional[Dict[str, Any]] = None) -> ps.DisplayList:
    """Import a PostScript program held in a str or bytes object."""
    if isinstance(source, str):
        return process(io.StringIO(source), system_params)
    return process(io.BytesIO(source), system_params)


def process_file(filename: str, system_params: Optional[Dict[str, Any]] = None) -> ps.DisplayList:
    """Import the PostScript file at filename."""
    with open(filename, "rb") as f:
        return process(f, system_params)


def load_file(filename: str, system_params: Optional[Dict[str, Any]] = None):
    """
    Given a filename, picks a loader by extension and returns its result. If
    no loader was found, returns None.
    """
    for loader, extension, _ in _loaders:
        if filename.lower().endswith(extension):
            with open(filename, "rb") as f:
                return loader(f.read(), system_params)

    return None
