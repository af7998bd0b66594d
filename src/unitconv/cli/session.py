"""Interactive read/convert/print loop."""
from __future__ import annotations

import logging
from typing import Callable, Optional, TextIO

import typer

from ..dispatcher import UnitConverter
from ..formatting import PARSE_ERROR
from ..utils.logging import generate_trace_id, log_event

__all__ = ["is_exit_command", "run_session"]


def is_exit_command(line: str, exit_command: str) -> bool:
    return line.split(" ")[0] == exit_command


def run_session(
    stream: TextIO,
    converter: UnitConverter,
    *,
    prompt: str,
    exit_command: str = "exit",
    echo: Callable[..., None] = typer.echo,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Prompt for requests on ``stream`` until ``exit_command`` or end of input.

    Returns the number of requests forwarded to ``converter``.
    """

    trace_id = generate_trace_id()
    if logger is not None:
        log_event(logger, "session.start", trace_id=trace_id)

    handled = 0
    reason = "eof"
    while True:
        echo(prompt, nl=False)
        raw = stream.readline()
        if not raw:
            break
        line = raw.rstrip("\r\n")
        if not line.strip():
            echo(PARSE_ERROR)
            continue
        if is_exit_command(line, exit_command):
            reason = "exit"
            break
        echo(converter.handle(line, trace_id=trace_id).message)
        handled += 1

    if logger is not None:
        log_event(logger, "session.end", trace_id=trace_id, requests=handled, reason=reason)
    return handled
