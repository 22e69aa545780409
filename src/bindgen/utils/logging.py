"""Logging utilities for bindgen.

Library modules only ever call ``logging.getLogger(__name__)``. Handlers are
attached here, on the package root logger, and only when an application (the
CLI, a build script) asks for it.
"""

from __future__ import annotations

import logging
from typing import Union

ROOT_LOGGER = "bindgen"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, level: Union[str, int, None] = None) -> None:
    """Attach a stream handler to the ``bindgen`` logger.

    Calling this more than once only adjusts the level.

    Args:
        verbose: Log at DEBUG when True.
        level: Explicit level; overrides `verbose`.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if not any(getattr(handler, "_bindgen_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._bindgen_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    if level is None:
        level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(_level_value(level))


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    Accepts either string levels (e.g., "INFO") or numeric constants. Short
    component names are resolved below the package root (``naming`` means
    ``bindgen.naming``).
    """
    in_package = component == ROOT_LOGGER or component.startswith(f"{ROOT_LOGGER}.")
    name = component if in_package else f"{ROOT_LOGGER}.{component}"
    logging.getLogger(name).setLevel(_level_value(level))


def _level_value(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


__all__ = ["configure_logging", "get_logger", "set_component_level"]
