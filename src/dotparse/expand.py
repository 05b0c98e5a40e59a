# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``$NAME`` / ``${NAME}`` substitution.

Recognized, left to right, without re-scanning substituted text:

- ``\\$``      literal ``$``
- ``$(``       left as is (subshell syntax is not executed)
- ``${NAME}``  value of ``NAME``
- ``$NAME``    value of ``NAME``

``NAME`` is one or more of ``A-Z``, ``0-9`` and ``_``. Names are looked up
in the variables parsed so far, then in *environ*; unknown names expand to
an empty string. Any other ``$`` is kept.
"""

from __future__ import annotations

import os
import string
from typing import Mapping

_NAME_CHARS = frozenset(string.ascii_uppercase + string.digits + "_")


def _scan_name(text: str, start: int) -> int:
    """Return the index just past a run of name characters starting at *start*."""
    i = start
    while i < len(text) and text[i] in _NAME_CHARS:
        i += 1
    return i


def lookup(name: str, known: Mapping[str, str], environ: Mapping[str, str]) -> str:
    if name in known:
        return known[name]
    return environ.get(name, "")


def expand(
    text: str,
    known: Mapping[str, str],
    environ: Mapping[str, str] | None = None,
) -> str:
    """Substitute variable references in *text*.

    *environ* defaults to ``os.environ``; pass an explicit mapping (or ``{}``)
    to keep the result independent of the process environment.
    """
    if "$" not in text:
        return text
    if environ is None:
        environ = os.environ

    out: list[str] = []
    i = 0
    end = len(text)
    while i < end:
        char = text[i]
        if char == "\\" and text.startswith("$", i + 1):
            out.append("$")
            i += 2
            continue
        if char != "$":
            out.append(char)
            i += 1
            continue

        follow = text[i + 1:i + 2]
        if follow == "(":
            out.append("$(")
            i += 2
            continue
        if follow == "{":
            name_end = _scan_name(text, i + 2)
            if name_end > i + 2 and text.startswith("}", name_end):
                out.append(lookup(text[i + 2:name_end], known, environ))
                i = name_end + 1
                continue
        else:
            name_end = _scan_name(text, i + 1)
            if name_end > i + 1:
                out.append(lookup(text[i + 1:name_end], known, environ))
                i = name_end
                continue

        out.append(char)
        i += 1
    return "".join(out)
