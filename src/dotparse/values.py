# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Value extraction: unquoted, single-quoted and double-quoted values."""

from __future__ import annotations

from typing import Mapping

from dotparse.errors import UnterminatedQuote
from dotparse.escapes import unescape
from dotparse.expand import expand
from dotparse.util import COMMENT, Cursor, is_line_end

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'


def extract_value(
    cursor: Cursor,
    known: Mapping[str, str],
    environ: Mapping[str, str] | None = None,
    *,
    strict: bool = True,
) -> tuple[str, Cursor | None]:
    """Read the value starting at *cursor*.

    Returns the resolved value and a cursor just past it, or ``None`` in
    place of the cursor when the input is exhausted.

    With ``strict=False`` an unterminated quote yields an empty value and
    ends the input instead of raising :class:`UnterminatedQuote`.
    """
    quote = cursor.peek()
    if quote in (SINGLE_QUOTE, DOUBLE_QUOTE):
        return _extract_quoted(cursor, quote, known, environ, strict)
    return _extract_unquoted(cursor, known, environ)


def _extract_unquoted(
    cursor: Cursor,
    known: Mapping[str, str],
    environ: Mapping[str, str] | None,
) -> tuple[str, Cursor | None]:
    if not cursor:
        return "", None
    text = cursor.text
    line_end = cursor.skip_while(lambda c: not is_line_end(c)).pos

    # ``#`` only opens a comment when whitespace precedes it: a=b#c keeps "b#c".
    value_end = line_end
    for i in range(cursor.pos, line_end):
        if text[i] == COMMENT and i > 0 and text[i - 1].isspace():
            value_end = i
            break

    value = text[cursor.pos:value_end].strip()
    return expand(value, known, environ), cursor.seek(line_end)


def _closing_quote(text: str, start: int, quote: str) -> int:
    """Index of the quote that closes a value opened just before *start*, or -1.

    A quote with a backslash right before it is escaped, in single and double
    quotes alike.
    """
    i = start
    while True:
        i = text.find(quote, i)
        if i == -1:
            return -1
        if i == start or text[i - 1] != "\\":
            return i
        i += 1


def _extract_quoted(
    cursor: Cursor,
    quote: str,
    known: Mapping[str, str],
    environ: Mapping[str, str] | None,
    strict: bool,
) -> tuple[str, Cursor | None]:
    start = cursor.pos + 1
    close = _closing_quote(cursor.text, start, quote)
    if close == -1:
        if strict:
            raise UnterminatedQuote(quote, cursor)
        return "", None

    value = cursor.text[start:close]
    if quote == DOUBLE_QUOTE:
        value = expand(unescape(value), known, environ)
    return value, cursor.seek(close + 1)
