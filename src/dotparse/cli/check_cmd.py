# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotparse check`` command."""

from __future__ import annotations

import click
from rich.markup import escape

from dotparse.cli import cli, console, read_env


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=False))
@click.pass_context
def check(ctx: click.Context, files: tuple[str, ...]) -> None:
    """Parse each FILE and report whether it is well-formed.

    Exits with status 1 if any file fails to parse.
    """
    failed = 0
    for file in files:
        try:
            pairs = read_env(ctx, file)
        except click.ClickException as e:
            console.print(f"[red]FAIL[/red] {escape(e.format_message())}")
            failed += 1
            continue
        console.print(f"[green]OK[/green] {escape(file)} ({len(pairs)} variable(s))")

    if failed:
        console.print(f"[red]{failed} of {len(files)} file(s) failed to parse[/red]")
        ctx.exit(1)
