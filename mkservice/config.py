"""Runtime settings for mkservice, read from the environment."""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from mkservice.exceptions import ConfigError

ENV_PREFIX = "MKSERVICE_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _default_user_unit_dir(environ: Mapping[str, str]) -> Path:
    config_home = environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "systemd" / "user"


class Settings(BaseModel):
    """Paths and binaries mkservice talks to."""

    systemctl: str = Field(default="systemctl")
    system_unit_dir: Path = Field(default=Path("/etc/systemd/system"))
    user_unit_dir: Path = Field(default_factory=lambda: _default_user_unit_dir(os.environ))
    systemd_runtime_dir: Path = Field(default=Path("/run/systemd/system"))
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{v}'. Expected one of: {', '.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``MKSERVICE_*`` variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Settings with unset variables left at their defaults.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """
        if environ is None:
            environ = os.environ

        values: dict[str, object] = {"user_unit_dir": _default_user_unit_dir(environ)}
        for field in cls.model_fields:
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw:
                values[field] = raw

        try:
            return cls(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}" for err in e.errors()
            )
            raise ConfigError(f"Invalid configuration: {problems}") from e
