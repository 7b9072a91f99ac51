# PostPath - A PostScript Path Importer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import collections
import logging
from typing import IO, Iterator

logger = logging.getLogger(__name__)

# White-space characters (PLRM Table 3.1)
NULL = "\x00"
TAB = "\t"
LINE_FEED = "\n"
FORM_FEED = "\x0c"
RETURN = "\r"
SPACE = " "

# Delimiter characters
L_SQR_BRACKET = "["
R_SQR_BRACKET = "]"
L_CRLY_BRACKET = "{"
R_CRLY_BRACKET = "}"
SOLIDUS = "/"
PERCENT = "%"

# always lexed as a token of their own
self_delimiting = frozenset([L_SQR_BRACKET, R_SQR_BRACKET, L_CRLY_BRACKET, R_CRLY_BRACKET])

# the white_space set (PLRM Table 3.1: Null, Tab, LF, FF, CR, Space)
white_space = frozenset([NULL, SPACE, TAB, LINE_FEED, FORM_FEED, RETURN])


def split_line(line: str) -> Iterator[str]:
    """
    Split one line of source into lexemes.

    Whitespace separates lexemes, % discards the rest of the line, brackets
    and braces always stand alone, and / always begins a new lexeme so that
    a/b lexes as 'a' '/b'.
    """
    token = []
    for ch in line:
        if ch in white_space:
            if token:
                yield "".join(token)
                token = []
        elif ch == PERCENT:
            break
        elif ch in self_delimiting:
            if token:
                yield "".join(token)
                token = []
            yield ch
        elif ch == SOLIDUS:
            if token:
                yield "".join(token)
            token = [ch]
        else:
            token.append(ch)
    if token:
        yield "".join(token)


class Tokenizer(object):
    """
    Lazily turns a source stream into lexemes, one line at a time.

    The source may be a binary or a text stream; binary lines are decoded
    with the given encoding. Iterating yields lexemes as plain strings until
    the stream is exhausted. The stream is read forward only.

    Attributes:
        line_num: number of the last line read from the source
    """

    def __init__(self, source: IO, encoding: str = "latin-1") -> None:
        self.source = source
        self.encoding = encoding
        self.line_num = 0
        self._pending = collections.deque()

    def _read_line(self) -> str | None:
        line = self.source.readline()
        if not line:
            return None
        if isinstance(line, (bytes, bytearray)):
            line = line.decode(self.encoding)
        self.line_num += 1
        return line

    def __iter__(self) -> Tokenizer:
        return self

    def __next__(self) -> str:
        while not self._pending:
            line = self._read_line()
            if line is None:
                raise StopIteration
            self._pending.extend(split_line(line))
        return self._pending.popleft()

    def skip_lines(self, marker: str) -> bool:
        """
        Discard the rest of the current line, then whole lines up to and
        including the first line equal to marker.

        Returns False if the stream ended before marker was found.
        """
        self._pending.clear()
        skipped = 0
        while True:
            line = self._read_line()
            if line is None:
                return False
            skipped += 1
            if line.rstrip("\r\n") == marker:
                logger.debug("skipped %d line(s) up to %s at line %d",
                             skipped, marker, self.line_num)
                return True
