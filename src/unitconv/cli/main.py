import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from .._version import __version__
from ..config import Settings, get_settings, parse_log_level
from ..dispatcher import UnitConverter
from ..units.registry import DOMAINS, get_domain
from ..utils.logging import configure_json_logger, flush_handlers
from .config import app as config_app
from .session import run_session


__all__ = ["app", "run"]


app = typer.Typer(help="Convert temperatures, lengths and masses", add_completion=False)
app.add_typer(config_app, name="config")


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj["settings"]


def _logger(ctx: typer.Context) -> logging.Logger:
    return ctx.obj["logger"]


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show unitconv version and exit", is_eager=True),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", exists=True, dir_okay=False, help="TOML/YAML settings document"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Write JSONL events for every request to this file"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (debug, info, warning...)"),
) -> None:
    """Handle global options, then start the interactive loop when no command is given."""

    if version:
        typer.echo(f"unitconv {__version__}")
        raise typer.Exit()

    settings = get_settings(config_file=config_file) if config_file is not None else get_settings()
    try:
        level = parse_log_level(log_level) if log_level is not None else settings.log_level
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    logger = configure_json_logger(log_file or settings.log_path, level=level)
    ctx.obj = {"settings": settings, "logger": logger}
    ctx.call_on_close(lambda: flush_handlers(logger))

    if ctx.invoked_subcommand is None:
        run_session(
            typer.get_text_stream("stdin"),
            UnitConverter(logger=logger),
            prompt=settings.prompt,
            exit_command=settings.exit_command,
            logger=logger,
        )


@app.command(
    "convert",
    context_settings={"ignore_unknown_options": True, "allow_extra_args": False},
)
def convert_command(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., help="Request such as: 100 C to F"),
) -> None:
    """Answer a single conversion request and exit (status 1 when it is rejected)."""

    line = " ".join(words)
    outcome = UnitConverter(logger=_logger(ctx)).handle(line)
    typer.echo(outcome.message)
    if not outcome.ok:
        raise typer.Exit(code=1)


def _describe_domain(name: str) -> Dict[str, Any]:
    domain = get_domain(name)
    return {
        "domain": domain.name,
        "units": [
            {
                "key": unit.key,
                "singular": domain.singular(unit),
                "plural": domain.plural(unit),
                "aliases": domain.aliases_of(unit),
            }
            for unit in domain
        ],
    }


@app.command("units")
def units_command(
    domain: Optional[str] = typer.Option(None, "--domain", help="Only list this domain (temperature, mass, length)"),
    as_json: bool = typer.Option(False, "--json", help="Emit the listing as JSON"),
) -> None:
    """List the supported units and their aliases."""

    names = [domain] if domain else [item.name for item in DOMAINS]
    try:
        listing = [_describe_domain(name) for name in names]
    except KeyError as exc:
        raise typer.BadParameter(f"unknown domain {domain!r}", param_hint="--domain") from exc

    if as_json:
        typer.echo(json.dumps(listing, indent=2, ensure_ascii=False))
        return

    for entry in listing:
        typer.echo(entry["domain"])
        for unit in entry["units"]:
            aliases = ", ".join(unit["aliases"])
            typer.echo(f"  {unit['key']:<3} {unit['singular']} / {unit['plural']}  [{aliases}]")


def run() -> None:
    """Entry point compatible with ``python -m unitconv`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()
