# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotparse -- parse shell-style .env content with quoting, escapes and ${VAR} expansion."""

from dotparse.errors import (
    EmptyKey,
    InvalidKeyCharacter,
    MissingDelimiter,
    ParseError,
    UnterminatedQuote,
)
from dotparse.env_file import parse_env_file
from dotparse.parser import parse, parse_into
from dotparse.serialize import marshal

__all__ = [
    "__version__",
    "parse",
    "parse_into",
    "parse_env_file",
    "marshal",
    "ParseError",
    "InvalidKeyCharacter",
    "MissingDelimiter",
    "EmptyKey",
    "UnterminatedQuote",
]
__version__ = "0.1.0"
