"""``dotparse show`` command."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from dotparse.cli import HAS_YAML, _mask, cli, console, read_env
from dotparse.config import OUTPUT_FORMATS
from dotparse.serialize import double_quote_escape, marshal

if HAS_YAML:
    import yaml


@cli.command()
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format", "fmt",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format: dotenv (KEY=value, multi-line values double-quoted), "
    "unix (export KEY=value), win (PowerShell), json, yaml, "
    "quoted (re-parseable KEY=\"value\"). Default: from config, else dotenv.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.option("--mask", is_flag=True, help="Show a table of masked values instead.")
@click.pass_context
def show(ctx: click.Context, file: str, fmt: str | None, output: str | None, mask: bool) -> None:
    """Print the resolved variables of FILE, sorted by name."""
    cfg = ctx.obj["config"]
    fmt = fmt or cfg.output_format
    pairs = read_env(ctx, file)

    if mask or cfg.mask:
        table = Table(title=f"Variables ({escape(file)})")
        table.add_column("Key", style="white")
        table.add_column("Value (masked)", style="dim")
        if not pairs:
            table.add_row("(empty)", "(empty)")
        for key, val in sorted(pairs.items()):
            table.add_row(escape(key), escape(_mask(val)) if val else "(empty)")
        console.print(table)
        return

    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install pyyaml")

    text = _render(pairs, fmt)
    if output:
        Path(output).write_text(text)
        console.print(f"[green]Wrote {len(pairs)} variable(s) to {escape(output)}[/green]")
    else:
        click.echo(text, nl=False)


def _render(pairs: dict[str, str], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(pairs, indent=2, sort_keys=True) + "\n"
    if fmt == "yaml":
        return yaml.dump(pairs, default_flow_style=False, sort_keys=True)
    if fmt == "quoted":
        return marshal(pairs) + "\n" if pairs else ""
    return "".join(line + "\n" for line in _format_export_lines(pairs, fmt))


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}*?<>~"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def _powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def _format_export_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in sorted(pairs.items()):
        if fmt == "unix":
            lines.append(f"export {key}={_shell_escape(value)}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{_powershell_escape(value)}'")
        elif "\n" in value or "\r" in value:
            lines.append(f'{key}="{double_quote_escape(value)}"')
        else:
            lines.append(f"{key}={value}")
    return lines
