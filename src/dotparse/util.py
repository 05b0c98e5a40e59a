# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared utilities: the input cursor and character classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# Whitespace inside a statement. Excludes newline, which ends the statement.
INLINE_SPACE = frozenset("\t\v\f\r \x85\xa0")

LINE_ENDS = frozenset("\n\r")

COMMENT = "#"


def is_inline_space(char: str) -> bool:
    return char in INLINE_SPACE


def is_line_end(char: str) -> bool:
    return char in LINE_ENDS


def normalize_newlines(data: str | bytes) -> str:
    """Decode *data* (UTF-8 when bytes) and fold ``\\r\\n`` into ``\\n``."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    return data.replace("\r\n", "\n")


@dataclass(frozen=True)
class Cursor:
    """The unconsumed suffix ``text[pos:]`` of an immutable buffer.

    Every parsing step takes a cursor and returns a new one further along;
    a cursor is never moved backwards.
    """

    text: str
    pos: int = 0

    def __len__(self) -> int:
        return len(self.text) - self.pos

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def peek(self) -> str:
        """Return the current character, or ``""`` at end of input."""
        return self.text[self.pos:self.pos + 1]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def find(self, sub: str) -> int:
        """Absolute index of *sub* at or after the cursor, or -1."""
        return self.text.find(sub, self.pos)

    def seek(self, pos: int) -> Cursor:
        return Cursor(self.text, pos)

    def advance(self, count: int) -> Cursor:
        return Cursor(self.text, min(self.pos + count, len(self.text)))

    def skip_while(self, predicate: Callable[[str], bool]) -> Cursor:
        i = self.pos
        end = len(self.text)
        while i < end and predicate(self.text[i]):
            i += 1
        return Cursor(self.text, i)

    @property
    def line(self) -> int:
        """1-based line number of the cursor position."""
        return self.text.count("\n", 0, self.pos) + 1

    def line_rest(self) -> str:
        """Text from the cursor to the end of its line."""
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        return self.text[self.pos:end]
