"""Inspect the resolved runtime settings."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from ..config import get_settings

__all__ = ["app"]

app = typer.Typer(help="Inspect the unitconv configuration.", add_completion=False)


@app.command("show")
def show_settings(
    ctx: typer.Context,
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        help="TOML/YAML document to resolve instead of UNITCONV_CONFIG_FILE",
    ),
) -> None:
    """Print the settings the interactive loop would use, as JSON."""

    if config_file is not None:
        settings = get_settings(config_file=config_file)
    elif ctx.obj and "settings" in ctx.obj:
        # Resolved by the top-level callback, including its --config-file.
        settings = ctx.obj["settings"]
    else:
        settings = get_settings(refresh=True)
    typer.echo(json.dumps(settings.as_dict(), indent=2, ensure_ascii=False))
