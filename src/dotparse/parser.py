# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse env file content into a dict (python-dotenv style, no I/O)."""

from __future__ import annotations

from typing import Mapping, MutableMapping

from dotparse.keys import extract_key
from dotparse.scanner import next_statement
from dotparse.util import Cursor, normalize_newlines
from dotparse.values import extract_value


def parse_into(
    data: str | bytes,
    out: MutableMapping[str, str],
    environ: Mapping[str, str] | None = None,
    *,
    strict: bool = True,
) -> MutableMapping[str, str]:
    """Parse *data* and store each assignment in *out*.

    Values may reference variables assigned earlier in *data* (or already in
    *out*), then variables in *environ* (default ``os.environ``). On a parse
    error the assignments made before the failing statement stay in *out*.

    Parameters
    ----------
    data : str or bytes
        File content; bytes are decoded as UTF-8.
    out : mutable mapping
        Destination, updated in place and returned.
    environ : mapping, optional
        Fallback for ``$NAME`` lookups. Defaults to ``os.environ``.
    strict : bool, default True
        Raise :class:`~dotparse.errors.UnterminatedQuote` for a quote that is
        never closed. When False, such a value is empty and parsing stops.

    Raises
    ------
    ParseError
        On the first malformed statement.
    """
    cursor: Cursor | None = Cursor(normalize_newlines(data))
    while cursor is not None:
        start = next_statement(cursor)
        if start is None:
            break
        key, value_start = extract_key(start)
        value, cursor = extract_value(value_start, out, environ, strict=strict)
        out[key] = value
    return out


def parse(
    data: str | bytes,
    environ: Mapping[str, str] | None = None,
    *,
    strict: bool = True,
) -> dict[str, str]:
    """Return the variables assigned in *data* as a new dict.

    >>> parse("A=1\\nB=${A}2", environ={})
    {'A': '1', 'B': '12'}
    """
    result: dict[str, str] = {}
    parse_into(data, result, environ, strict=strict)
    return result
