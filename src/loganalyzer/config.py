"""Configuration utilities for LOGANALYZER.

This module centralizes the environment variables the application reads and
the small `Settings` object the bootstrap builds collaborators from.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from loganalyzer.domain.file_names import DEFAULT_EXTENSIONS, DEFAULT_MIN_NAME_LENGTH

EXTENSIONS_ENV = "LOGANALYZER_EXTENSIONS"  # pragma: no mutate
EXTENSIONS_FILE_ENV = "LOGANALYZER_EXTENSIONS_FILE"  # pragma: no mutate
MIN_NAME_LENGTH_ENV = "LOGANALYZER_MIN_NAME_LENGTH"  # pragma: no mutate
ERROR_LOG_ENV = "LOGANALYZER_ERROR_LOG"  # pragma: no mutate
ADMIN_EMAIL_ENV = "LOGANALYZER_ADMIN_EMAIL"  # pragma: no mutate

DEFAULT_ADMIN_EMAIL = "admin@example.com"


class ConfigError(Exception):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"{name}={value!r}: {reason}")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class Settings:
    """Resolved application settings.

    Attributes:
        extensions: Extensions accepted by the default extension manager.
        extensions_file: Optional file listing extensions, one per line. When
            set it takes precedence over `extensions`.
        min_name_length: Names shorter than this are reported as too short.
        error_log: Optional JSON-lines file receiving reported errors. When
            unset, errors are reported through `logging`.
        admin_email: Recipient of the fallback email.
    """

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    extensions_file: Path | None = None
    min_name_length: int = DEFAULT_MIN_NAME_LENGTH
    error_log: Path | None = None
    admin_email: str = DEFAULT_ADMIN_EMAIL


def _split_list(value: str) -> tuple[str, ...]:
    return tuple(s for s in re.split(r"[,\s]+", value) if s)


def _parse_min_length(value: str) -> int:
    try:
        length = int(value)
    except ValueError as e:
        raise ConfigError(MIN_NAME_LENGTH_ENV, value, "not an integer") from e
    if length < 1:
        raise ConfigError(MIN_NAME_LENGTH_ENV, value, "must be at least 1")
    return length


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from the environment.

    Args:
        environ: Mapping to read from; defaults to `os.environ`. Empty values
            are treated as unset.

    Returns:
        The resolved settings.

    Raises:
        ConfigError: If `LOGANALYZER_MIN_NAME_LENGTH` is not a positive integer
            or `LOGANALYZER_EXTENSIONS` lists nothing.
    """
    env = os.environ if environ is None else environ

    extensions = DEFAULT_EXTENSIONS
    if raw := env.get(EXTENSIONS_ENV):
        if not (extensions := _split_list(raw)):
            raise ConfigError(EXTENSIONS_ENV, raw, "no extensions listed")

    min_name_length = DEFAULT_MIN_NAME_LENGTH
    if raw := env.get(MIN_NAME_LENGTH_ENV):
        min_name_length = _parse_min_length(raw)

    extensions_file = env.get(EXTENSIONS_FILE_ENV)
    error_log = env.get(ERROR_LOG_ENV)

    return Settings(
        extensions=extensions,
        extensions_file=Path(extensions_file) if extensions_file else None,
        min_name_length=min_name_length,
        error_log=Path(error_log) if error_log else None,
        admin_email=env.get(ADMIN_EMAIL_ENV) or DEFAULT_ADMIN_EMAIL,
    )
