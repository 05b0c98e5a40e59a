""".dotparse.toml configuration loading.

Looks for ``.dotparse.toml`` in the working directory (or the file named by
``DOTPARSE_CONFIG``) and merges with CLI flags.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

CONFIG_FILENAME = ".dotparse.toml"

OUTPUT_FORMATS = ("dotenv", "unix", "win", "json", "yaml", "quoted")


@dataclass
class DotparseConfig:
    """Resolved configuration for the current invocation."""

    strict: bool = True
    inherit_environ: bool = True
    output_format: str = "dotenv"
    mask: bool = False
    config_path: Path | None = None


def find_config_file(start: Path | None = None) -> Path | None:
    """Return ``$DOTPARSE_CONFIG`` or ``.dotparse.toml`` in *start* (default cwd).

    Parent directories are not searched.
    """
    override = os.environ.get("DOTPARSE_CONFIG")
    if override:
        path = Path(override)
        if not path.is_file():
            raise ValueError(f"Config file not found: {override}")
        return path
    candidate = (start or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def _flag(section: dict[str, Any], name: str, default: bool) -> bool:
    value = section.get(name, default)
    if not isinstance(value, bool):
        raise ValueError(f"Invalid {name}: {value!r}. Must be true or false")
    return value


def load_config(path: Path | None = None) -> DotparseConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return DotparseConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("dotparse", {})

    output_format = section.get("output_format", "dotenv")
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid output_format: {output_format}. Must be one of: {', '.join(OUTPUT_FORMATS)}"
        )

    return DotparseConfig(
        strict=_flag(section, "strict", True),
        inherit_environ=_flag(section, "inherit_environ", True),
        output_format=output_format,
        mask=_flag(section, "mask", False),
        config_path=path,
    )
