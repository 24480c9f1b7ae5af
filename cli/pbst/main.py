from __future__ import annotations

import typer

from .build_cli import build_command
from .doctor import doctor_command


_HELP = """Persistent binary search tree command line interface.

Subcommands build trees from values and report runtime diagnostics."""

app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=_HELP,
)


@app.callback()
def pbst_callback() -> None:
    """Root callback reserved for shared options (none yet)."""
    pass


app.command("build", help="Build a tree from values and print a traversal.")(build_command)
app.command("doctor", help="Run preflight environment checks.")(doctor_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
