"""Settings for vtodo, built from explicit values, then environment, then defaults.

Nothing else in the package looks at the home directory or the environment:
commands receive a Settings object.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models import (
    DEFAULT_DATA_FILE,
    DEFAULT_DIR_NAME,
    DEFAULT_NAME_ATTEMPTS,
    DEFAULT_WORDS_FILE,
    ConfigError,
)

ENV_PREFIX = "VTODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def default_data_dir() -> Path:
    """~/.todo.d; fails with ConfigError when there is no usable home directory."""
    try:
        home = Path.home()
    except RuntimeError as e:
        raise ConfigError(
            "Couldn't find your home folder; pass --dir or set "
            f"{_k('DIR')} to choose where tasks are stored"
        ) from e
    return home / DEFAULT_DIR_NAME


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    data_file: str = DEFAULT_DATA_FILE
    words_file: str = DEFAULT_WORDS_FILE
    name_attempts: int = DEFAULT_NAME_ATTEMPTS
    color: bool = True
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @property
    def data_path(self) -> Path:
        return self.data_dir / self.data_file

    @property
    def words_path(self) -> Path:
        return self.data_dir / self.words_file


def load_settings(
    data_dir: Optional[Path] = None,
    color: Optional[bool] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Resolve settings. Explicit arguments win over environment variables."""
    if data_dir is None:
        data_dir = _env_path(_k("DIR")) or default_data_dir()

    if color is None:
        color = os.getenv("NO_COLOR") is None

    name_attempts = _env_int(_k("NAME_ATTEMPTS"), DEFAULT_NAME_ATTEMPTS)
    if name_attempts < 1:
        raise ConfigError(f"{_k('NAME_ATTEMPTS')} must be at least 1")

    level = (log_level or _env(_k("LOG_LEVEL"), "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level {level!r}")

    return Settings(
        data_dir=Path(data_dir).expanduser(),
        data_file=_env(_k("DATA_FILE"), DEFAULT_DATA_FILE),
        words_file=_env(_k("WORDS_FILE"), DEFAULT_WORDS_FILE),
        name_attempts=name_attempts,
        color=color,
        log_level=level,
        log_file=_env_path(_k("LOG_FILE")),
    )
