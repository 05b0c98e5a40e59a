# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Variable name extraction.

A statement starts with an optional ``export`` marker followed by the
variable name and an ``=`` or ``:`` delimiter::

    export DATABASE_URL = postgres://...
    app.name: demo

Names are made of Unicode letters, Unicode digits, ``_`` and ``.``.
Whitespace may sit between the name and the delimiter but not inside the
name, so ``A B=1`` is rejected.
"""

from __future__ import annotations

from dotparse.errors import EmptyKey, InvalidKeyCharacter, MissingDelimiter
from dotparse.util import Cursor, is_inline_space

EXPORT_PREFIX = "export"

DELIMITERS = frozenset("=:")


def is_key_char(char: str) -> bool:
    return char in ("_", ".") or char.isalpha() or char.isnumeric()


def _strip_export(cursor: Cursor) -> Cursor:
    """Drop a leading ``export`` marker, but only when whitespace follows it."""
    if not cursor.startswith(EXPORT_PREFIX):
        return cursor
    after = cursor.advance(len(EXPORT_PREFIX))
    if after.peek().isspace():
        return after.skip_while(str.isspace)
    return cursor


def extract_key(cursor: Cursor) -> tuple[str, Cursor]:
    """Return the variable name and a cursor at the start of its value.

    The returned cursor has leading inline whitespace skipped, so it points
    at the first real character of the value (an opening quote, if any).
    """
    cursor = _strip_export(cursor)
    text = cursor.text
    gap: int | None = None  # first whitespace after the name

    i = cursor.pos
    while i < len(text):
        char = text[i]
        if is_inline_space(char):
            if gap is None:
                gap = i
        elif char in DELIMITERS:
            if i == cursor.pos:
                raise EmptyKey(cursor)
            name = text[cursor.pos:gap if gap is not None else i]
            return name, cursor.seek(i + 1).skip_while(is_inline_space)
        elif char == "\n":
            raise MissingDelimiter(cursor)
        elif not is_key_char(char):
            raise InvalidKeyCharacter(char, cursor.seek(i))
        elif gap is not None:
            raise InvalidKeyCharacter(text[gap], cursor.seek(gap))
        i += 1

    raise MissingDelimiter(cursor)
