from __future__ import annotations

from typing import Literal, Optional

from pbst import config as pbst_config
from pbst.algo.traverse import TraversalMode
from pbst.errors import InvalidTraversalModeError


def resolve_mode_flag(mode: Optional[str]) -> TraversalMode:
    """Return the effective traversal mode derived from CLI inputs."""

    if mode is None:
        return TraversalMode.parse(pbst_config.runtime_config().default_mode)
    try:
        return TraversalMode.parse(mode.strip().lower().replace("-", "_"))
    except InvalidTraversalModeError as exc:
        raise ValueError(f"Invalid traversal mode: {exc}") from exc


def resolve_format_flag(fmt: str) -> Literal["text", "json"]:
    value = fmt.strip().lower()
    if value not in ("text", "json"):
        raise ValueError(f"Unsupported output format '{fmt}'. Expected 'text' or 'json'.")
    return value  # type: ignore[return-value]


__all__ = ["resolve_mode_flag", "resolve_format_flag"]
