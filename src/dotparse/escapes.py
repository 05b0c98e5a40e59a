# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Backslash escape resolution for double-quoted values."""

from __future__ import annotations

_CONTROL_ESCAPES = {"n": "\n", "r": "\r"}


def unescape(text: str) -> str:
    """Resolve backslash escapes in the body of a double-quoted value.

    ``\\n`` and ``\\r`` become control characters, then every other ``\\X``
    collapses to ``X``. ``\\$`` is left alone so that variable expansion can
    turn it into a literal dollar sign.
    """
    if "\\" not in text:
        return text
    return _strip_backslashes(_resolve_control_escapes(text))


def _resolve_control_escapes(text: str) -> str:
    out: list[str] = []
    i = 0
    end = len(text)
    while i < end:
        char = text[i]
        if char == "\\" and i + 1 < end and text[i + 1] != "\n":
            pair = text[i:i + 2]
            out.append(_CONTROL_ESCAPES.get(pair[1], pair))
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)


def _strip_backslashes(text: str) -> str:
    out: list[str] = []
    i = 0
    end = len(text)
    while i < end:
        char = text[i]
        if char == "\\" and i + 1 < end and text[i + 1] != "$":
            out.append(text[i + 1])
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)
