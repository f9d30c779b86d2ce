from __future__ import annotations

import sys

import typer
from loguru import logger

from stremthru.cli.alldebrid import app as alldebrid_app
from stremthru.core.config import settings

app = typer.Typer(no_args_is_help=True)
app.add_typer(alldebrid_app, name="alldebrid")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else settings.log_level)
