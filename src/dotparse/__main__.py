# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the dotparse CLI (run via ``dotparse`` or ``python -m dotparse``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from dotparse.cli import cli
    except ImportError:
        sys.stderr.write("dotparse CLI dependencies missing. Install with: pip install dotparse\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
