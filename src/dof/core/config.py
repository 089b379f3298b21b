"""Configuration models for the depth-of-field calculator.

Pydantic models for sensor formats, per-invocation lens parameters and the
runtime settings read from the environment. Lengths are in millimeters.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..physics.geometry import circle_of_confusion, diagonal
from .errors import ConfigError
from .units import m_to_mm

LOG_LEVEL_ENV = "DOF_LOG_LEVEL"


class SensorFormat(BaseModel):
    """Named physical sensor or film size."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique format name")
    width_mm: float = Field(description="Frame width in millimeters")
    height_mm: float = Field(description="Frame height in millimeters")

    @field_validator("width_mm", "height_mm")
    @classmethod
    def validate_dimension(cls, v: float) -> float:
        """Validate frame dimensions are positive."""
        if not v > 0:
            raise ValueError(f"Frame dimensions must be positive, got {v}")
        return v

    @property
    def diagonal_mm(self) -> float:
        return diagonal(self.width_mm, self.height_mm)

    @property
    def circle_of_confusion_mm(self) -> float:
        return circle_of_confusion(self.width_mm, self.height_mm)


class LensParameters(BaseModel):
    """Lens settings for a single depth-of-field computation.

    Values are not range checked; a zero focal length is carried through to
    the formula as-is.
    """

    model_config = ConfigDict(frozen=True)

    focal_length_mm: float = Field(description="Focal length in millimeters")
    aperture: float = Field(description="f-number")
    focus_distance_mm: float = Field(description="Focus distance in millimeters")

    @classmethod
    def from_cli(
        cls, focal_length_mm: float, aperture: float, focus_distance_m: float
    ) -> LensParameters:
        """Build from command-line values, focus distance given in meters."""
        return cls(
            focal_length_mm=focal_length_mm,
            aperture=aperture,
            focus_distance_mm=m_to_mm(focus_distance_m),
        )


class RuntimeConfig(BaseModel):
    """Ambient runtime settings."""

    model_config = ConfigDict(frozen=True)

    log_level: int = Field(default=logging.WARNING, description="Logging level")


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"invalid {LOG_LEVEL_ENV} {name!r}")
    return level


def load_runtime_config(environ: Mapping[str, str] | None = None) -> RuntimeConfig:
    """Resolve runtime settings from the environment.

    Args:
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        RuntimeConfig instance

    Raises:
        ConfigError: If the log level name is not recognized
    """
    env = os.environ if environ is None else environ
    name = env.get(LOG_LEVEL_ENV)
    if not name:
        return RuntimeConfig()
    return RuntimeConfig(log_level=_parse_level(name))


__all__ = [
    "LOG_LEVEL_ENV",
    "SensorFormat",
    "LensParameters",
    "RuntimeConfig",
    "load_runtime_config",
]
