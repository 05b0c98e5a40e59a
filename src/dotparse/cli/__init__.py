# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotparse CLI -- inspect and validate .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``read_env``, ``_mask``) live
here so every command module can import them.
"""

from __future__ import annotations

import os
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from dotparse import __version__
from dotparse.config import load_config
from dotparse.env_file import parse_env_file
from dotparse.errors import ParseError

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def read_env(ctx: click.Context, file: str) -> dict[str, str]:
    """Parse *file* with the invocation's strictness and environment settings."""
    path = Path(file)
    if not path.is_file():
        raise click.BadParameter(f"File not found: {file}", param_hint="FILE")

    environ = os.environ if ctx.obj["inherit_environ"] else {}
    try:
        pairs = parse_env_file(path, environ, strict=ctx.obj["strict"])
    except ParseError as e:
        raise click.ClickException(f"{file}: {e}")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{file}: not valid UTF-8 ({e.reason} at byte {e.start})")

    if ctx.obj["verbose"]:
        console.print(f"[dim]Parsed {len(pairs)} variable(s) from {escape(file)}[/dim]")
    return pairs


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Config file (default: DOTPARSE_CONFIG or ./.dotparse.toml).",
)
@click.option("--no-environ", is_flag=True, help="Do not fall back to the process environment for ${VAR}.")
@click.option("--compat", is_flag=True, help="Treat an unterminated quote as end of input instead of an error.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    no_environ: bool,
    compat: bool,
    verbose: bool,
) -> None:
    """Parse shell-style .env files with quoting, escapes and ${VAR} expansion."""
    try:
        cfg = load_config(Path(config_path) if config_path else None)
    except ValueError as e:
        raise click.ClickException(f"Invalid config: {e}")

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["strict"] = cfg.strict and not compat
    ctx.obj["inherit_environ"] = cfg.inherit_environ and not no_environ
    ctx.obj["verbose"] = verbose
    if verbose and cfg.config_path is not None:
        console.print(f"[dim]Using config {escape(str(cfg.config_path))}[/dim]")


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from dotparse.cli import (  # noqa: E402, F401
    check_cmd,
    get_cmd,
    show_cmd,
)
