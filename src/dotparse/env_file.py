# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read a single .env file from disk and parse it."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from dotparse.parser import parse


def parse_env_file(
    path: str | Path,
    environ: Mapping[str, str] | None = None,
    *,
    strict: bool = True,
) -> dict[str, str]:
    """Read *path* and return its variables.

    Raises ``FileNotFoundError`` if *path* does not exist and
    :class:`~dotparse.errors.ParseError` if its content is malformed.
    """
    return parse(Path(path).read_bytes(), environ, strict=strict)
