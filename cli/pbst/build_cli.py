from __future__ import annotations

import json
from typing import List, Optional

import typer

from pbst import config as pbst_config
from pbst.algo import collect, delete_many, describe_tree, insert_many
from pbst.logging import get_logger

from .options import resolve_format_flag, resolve_mode_flag

LOGGER = get_logger("cli.build")


def build_command(
    values: List[int] = typer.Argument(..., help="Values inserted in order."),
    delete: List[int] = typer.Option(
        [], "--delete", "-d", help="Values removed after all insertions (repeatable)."
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Traversal mode: in_order, pre_order, post_order or reverse.",
    ),
    fmt: str = typer.Option("text", "--format", "-f", help="Output format: text or json."),
) -> None:
    """Build a tree from VALUES and print its contents and shape summary."""

    try:
        pbst_config.runtime_config()
        traversal_mode = resolve_mode_flag(mode)
        output_format = resolve_format_flag(fmt)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    tree = insert_many(None, values)
    if delete:
        tree = delete_many(tree, delete)
    collected = collect(tree, traversal_mode)
    stats = describe_tree(tree)
    LOGGER.debug("Built tree with %d nodes (height %d).", stats.size, stats.height)

    if output_format == "json":
        payload = {
            "mode": traversal_mode.value,
            "values": collected,
            "stats": stats.as_dict(),
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    typer.echo(f"{traversal_mode.value}: {' '.join(str(value) for value in collected)}")
    typer.echo(
        f"size={stats.size} height={stats.height} "
        f"min={stats.minimum} max={stats.maximum} valid={stats.valid}"
    )


__all__ = ["build_command"]
