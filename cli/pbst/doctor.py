from __future__ import annotations

import sys

import typer

from pbst import __version__
from pbst import config as pbst_config


def doctor_command() -> None:
    """Print the resolved runtime configuration."""

    try:
        runtime = pbst_config.runtime_config()
    except ValueError as exc:
        typer.echo(f"configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    limit = runtime.recursion_limit if runtime.recursion_limit is not None else "default"
    typer.echo(f"pbst version: {__version__}")
    typer.echo(f"python: {sys.version.split()[0]}")
    typer.echo(f"log level: {runtime.log_level}")
    typer.echo(f"default mode: {runtime.default_mode}")
    typer.echo(f"recursion limit: {limit} (effective {runtime.effective_recursion_limit})")


__all__ = ["doctor_command"]
