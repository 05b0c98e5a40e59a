# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotparse get`` command."""

from __future__ import annotations

import click

from dotparse.cli import cli, read_env


@cli.command()
@click.argument("file", type=click.Path(exists=False))
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, file: str, key: str) -> None:
    """Print the resolved value of a single variable."""
    pairs = read_env(ctx, file)
    if key not in pairs:
        raise click.ClickException(f"Key '{key}' not found in {file}.")
    click.echo(pairs[key])
