# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised while parsing env file content."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotparse.util import Cursor


class ParseError(ValueError):
    """Base class for all parse failures.

    Carries where the failure happened: ``offset`` into the normalized
    buffer, the 1-based ``line``, and ``near``, the untouched text from the
    failure point to the end of that line.
    """

    def __init__(self, reason: str, cursor: Cursor) -> None:
        self.reason = reason
        self.offset = cursor.pos
        self.line = cursor.line
        self.near = cursor.line_rest()
        super().__init__(f"line {self.line}: {reason}")


class InvalidKeyCharacter(ParseError):
    """A character outside letters, digits, ``_`` and ``.`` appeared in a name."""

    def __init__(self, char: str, cursor: Cursor) -> None:
        self.char = char
        super().__init__(
            f"unexpected character {char!r} in variable name near {cursor.line_rest()!r}",
            cursor,
        )


class MissingDelimiter(ParseError):
    """A variable name was not followed by ``=`` or ``:`` on its line."""

    def __init__(self, cursor: Cursor) -> None:
        super().__init__(f"missing '=' or ':' after variable name near {cursor.line_rest()!r}", cursor)


class EmptyKey(ParseError):
    """An assignment delimiter with no variable name before it."""

    def __init__(self, cursor: Cursor) -> None:
        super().__init__(f"empty variable name near {cursor.line_rest()!r}", cursor)


class UnterminatedQuote(ParseError):
    """A quoted value that is never closed before end of input."""

    def __init__(self, quote: str, cursor: Cursor) -> None:
        self.quote = quote
        super().__init__(f"unterminated {quote} quote near {cursor.line_rest()!r}", cursor)
