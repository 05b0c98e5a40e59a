# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render a mapping back to env file text that parses to the same mapping."""

from __future__ import annotations

import re
from typing import Mapping

from dotparse.keys import is_key_char

_DOUBLE_QUOTE_SPECIALS = '\\\n\r"!$`'

_INT_RE = re.compile(r"-?(0|[1-9][0-9]*)")

QUOTE_STYLES = ("double", "single")


def double_quote_escape(value: str) -> str:
    """Escape *value* for use inside double quotes."""
    for char in _DOUBLE_QUOTE_SPECIALS:
        if char == "\n":
            replacement = "\\n"
        elif char == "\r":
            replacement = "\\r"
        else:
            replacement = "\\" + char
        value = value.replace(char, replacement)
    return value


def _single_quotable(value: str) -> bool:
    # No escapes exist in single quotes, and \r\n would be folded on re-parse.
    return "'" not in value and "\r" not in value and not value.endswith("\\")


def _bare_safe(value: str) -> bool:
    # Unquoted values are stripped, end at a line break and only expand $.
    return (
        value == value.strip()
        and not any(c in value for c in "\n\r#$")
        and value[:1] not in ("'", '"')
    )


def _format_value(value: str, quote: str) -> str:
    if _INT_RE.fullmatch(value):
        return value
    if quote == "single" and _single_quotable(value):
        return f"'{value}'"
    if value.endswith("\\"):
        # Any quote right after a backslash is escaped, so the value cannot
        # be quoted at all.
        if _bare_safe(value):
            return value
        raise ValueError(f"Cannot represent value ending in a backslash: {value!r}")
    return f'"{double_quote_escape(value)}"'


def marshal(mapping: Mapping[str, str], *, quote: str = "double") -> str:
    """Return ``KEY=VALUE`` lines for *mapping*, sorted by key.

    Integers are written bare. Other values are double-quoted and escaped,
    or single-quoted with ``quote="single"`` when the value allows it. A value
    ending in a backslash is written unquoted, since a quote after it would
    not close.

    Raises ``ValueError`` for an unknown *quote* style, a key that would
    not parse back, or a value ending in a backslash that is not safe to
    write unquoted.
    """
    if quote not in QUOTE_STYLES:
        raise ValueError(f"Unknown quote style: {quote}. Use one of: {', '.join(QUOTE_STYLES)}")
    lines: list[str] = []
    for key, value in sorted(mapping.items()):
        if not key or not all(is_key_char(c) for c in key):
            raise ValueError(f"Invalid variable name: {key!r}")
        lines.append(f"{key}={_format_value(value, quote)}")
    return "\n".join(lines)
