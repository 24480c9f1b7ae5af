"""Logger lookup for the `pbst` namespace.

Module loggers are plain children of the `pbst` logger and carry no level of
their own. The `pbst` logger picks up its level and handler when
`pbst.config.runtime_config()` is first resolved, which the command line and
benchmark entry points do before any work. Importing library modules never
reads the environment.
"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "pbst"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the `pbst` logger or one of its children."""

    logger_name = ROOT_LOGGER_NAME if name is None else f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(logger_name)


def configure_root_logger(level: str) -> logging.Logger:
    """Apply `level` to the `pbst` logger and attach one stream handler."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
