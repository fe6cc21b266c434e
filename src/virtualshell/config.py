"""
Virtual shell configuration.

Sensible defaults with override from the environment and the command line.

Environment Variables:
    VIRTUALSHELL_ROOT_LABEL - Label given to every new root directory
    VIRTUALSHELL_PROMPT - REPL prompt template, '{cwd}' is the working directory
    VIRTUALSHELL_SHOW_BANNER - Show the welcome banner ("1"/"0", "true"/"false")
    VIRTUALSHELL_LOG_LEVEL - Diagnostic log level (DEBUG, INFO, WARNING, ERROR)
"""

import logging
import os
from collections.abc import Mapping

from attrs import field, frozen

from virtualshell.core.directory import ROOT_LABEL
from virtualshell.exceptions import ConfigurationError

ENV_PREFIX = "VIRTUALSHELL_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _check_root_label(instance, attribute, value: str) -> None:
    if not value or any(char.isspace() for char in value):
        raise ConfigurationError(attribute.name, "must be a non-empty label without whitespace")


def _check_log_level(instance, attribute, value: str) -> None:
    if value not in _LOG_LEVELS:
        raise ConfigurationError(
            attribute.name, f"must be one of {', '.join(sorted(_LOG_LEVELS))}"
        )


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(name, f"cannot interpret '{raw}' as a boolean")


@frozen
class ShellConfig:
    """Settings for one shell session."""

    root_label: str = field(default=ROOT_LABEL, validator=_check_root_label)
    prompt: str = "{cwd} $ "
    show_banner: bool = True
    log_level: str = field(
        default="WARNING",
        converter=str.upper,
        validator=_check_log_level,
    )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def render_prompt(self, cwd: str) -> str:
        """Fill the prompt template with the working directory path."""
        return self.prompt.replace("{cwd}", cwd)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ShellConfig":
        """
        Build a configuration from VIRTUALSHELL_* environment variables.

        Params:
            environ: Mapping to read from, defaults to os.environ

        Returns:
            ShellConfig with defaults for every unset variable

        Raises:
            ConfigurationError: When a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        overrides = {}

        for setting in ("root_label", "prompt", "log_level"):
            raw = environ.get(ENV_PREFIX + setting.upper())
            if raw is not None:
                overrides[setting] = raw

        raw_banner = environ.get(ENV_PREFIX + "SHOW_BANNER")
        if raw_banner is not None:
            overrides["show_banner"] = _parse_bool("show_banner", raw_banner)

        return cls(**overrides)
