"""
Logging setup for the virtual shell.

Diagnostics go to stderr through the standard logging module; user-facing
command output never does. Configuration is idempotent: the handler installed
here is tagged so repeated calls do not stack duplicates.
"""

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

_HANDLER_TAG_ATTR = "_virtualshell_handler"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable logging configuration parameters.

    Attributes:
        level: Logging level name ("DEBUG", "INFO", ...)
        fmt: Format string for the stderr handler
    """

    level: str = "WARNING"
    fmt: str = "%(levelname)s | %(name)s | %(message)s"


def configure_logging(
    cfg: LoggingConfig, *, force: bool = False, stream: TextIO | None = None
) -> logging.Logger:
    """
    Install a single stderr handler on the root logger.

    Params:
        cfg: Logging configuration
        force: Replace an existing virtualshell handler instead of keeping it
        stream: Stream to write to, defaults to sys.stderr

    Returns:
        The root logger
    """
    root = logging.getLogger()
    ours = [handler for handler in root.handlers if getattr(handler, _HANDLER_TAG_ATTR, False)]

    if ours and not force:
        root.setLevel(cfg.level.upper())
        return root

    for handler in ours:
        root.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(cfg.fmt))
    setattr(handler, _HANDLER_TAG_ATTR, True)
    root.addHandler(handler)
    root.setLevel(cfg.level.upper())
    return root
