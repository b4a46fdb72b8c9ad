"""Service model for mkservice."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mkservice.utils.args import validate_name


class ServiceLevel(str, Enum):
    """Where a unit is installed and which systemd manager owns it."""

    USER = "user"
    SYSTEM = "system"


class ServiceSpec(BaseModel):
    """Everything needed to render and install one service unit."""

    name: str = Field(description="Unit name, also used as Description")
    command: tuple[str, ...] = Field(
        min_length=1, description="Executable path followed by its arguments"
    )
    env_vars: tuple[tuple[str, str], ...] = Field(
        default=(), description="Environment assignments in command-line order"
    )
    level: ServiceLevel = Field(default=ServiceLevel.SYSTEM)

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        return validate_name(v)

    @property
    def unit_name(self) -> str:
        """Filename of the unit, e.g. ``myprogram.service``."""
        return f"{self.name}.service"
