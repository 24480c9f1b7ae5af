from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache

from .logging import configure_root_logger, get_logger

_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
_SUPPORTED_MODES = {"in_order", "pre_order", "post_order", "reverse"}


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _normalise_log_level(value: str | None) -> str:
    if value is None:
        return "INFO"
    value = value.strip().upper()
    if value not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{value}'. Expected one of {_SUPPORTED_LOG_LEVELS}.")
    return value


def _normalise_mode(value: str | None) -> str:
    if value is None:
        return "in_order"
    value = value.strip().lower().replace("-", "_")
    if value not in _SUPPORTED_MODES:
        raise ValueError(f"Unsupported traversal mode '{value}'. Expected one of {_SUPPORTED_MODES}.")
    return value


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: str
    recursion_limit: int | None
    default_mode: str

    @property
    def effective_recursion_limit(self) -> int:
        return sys.getrecursionlimit()


def _apply_recursion_limit(config: RuntimeConfig) -> None:
    if config.recursion_limit is None:
        return
    if config.recursion_limit <= 0:
        raise ValueError(f"Recursion limit must be positive, got {config.recursion_limit}.")
    current = sys.getrecursionlimit()
    if config.recursion_limit > current:
        sys.setrecursionlimit(config.recursion_limit)
        get_logger().debug(
            "Raised recursion limit from %d to %d.", current, config.recursion_limit
        )


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    log_level = _normalise_log_level(os.getenv("PBST_LOG_LEVEL"))
    recursion_limit = _parse_optional_int(os.getenv("PBST_RECURSION_LIMIT"))
    default_mode = _normalise_mode(os.getenv("PBST_DEFAULT_MODE"))

    config = RuntimeConfig(
        log_level=log_level,
        recursion_limit=recursion_limit,
        default_mode=default_mode,
    )
    configure_root_logger(config.log_level)
    _apply_recursion_limit(config)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
