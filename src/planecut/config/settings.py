"""Configuration settings for Planecut."""

import sys
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CropMode(str, Enum):
    """Which side of the frame a crop keeps."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


class GeometryConfig(BaseModel):
    """Floating-point tolerances for geometric comparisons.

    Every approximate comparison in the kernel reads one of these values, so a
    whole computation can be made stricter or looser from a single place (see
    `planecut.config.context.geometry_context`).
    """

    epsilon: float = Field(
        default=1e-12,
        gt=0.0,
        le=1e-3,
        description="Relative and absolute tolerance for approximate float equality",
    )
    interpolation_epsilon: float = Field(
        default=1e-5,
        gt=0.0,
        le=1e-1,
        description="Allowed disagreement between per-axis interpolation fractions",
    )
    winding_epsilon: float = Field(
        default=1e-5,
        gt=0.0,
        le=1e-1,
        description="Winding sums closer than this to zero count as outside",
    )
    point_merge_epsilon: float = Field(
        default=sys.float_info.epsilon * 1e9,
        gt=0.0,
        le=1e-2,
        description="Tolerance for merging crop graph nodes created by different arithmetic paths",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch crop processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )
    default_mode: CropMode = Field(
        default=CropMode.INCLUSIVE,
        description="Crop mode used by jobs that do not name one",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PlanecutSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PlanecutSettings:
    """Get default application settings."""
    return PlanecutSettings()
