# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Find the start of the next assignment statement."""

from __future__ import annotations

from dotparse.util import COMMENT, Cursor


def next_statement(cursor: Cursor) -> Cursor | None:
    """Skip whitespace and full-line comments.

    Returns a cursor at the first character of the next statement, or
    ``None`` when only whitespace and comments remain.
    """
    while True:
        cursor = cursor.skip_while(str.isspace)
        if not cursor:
            return None
        if cursor.peek() != COMMENT:
            return cursor
        newline = cursor.find("\n")
        if newline == -1:
            return None
        cursor = cursor.seek(newline)
