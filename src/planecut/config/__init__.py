"""Configuration management for planecut.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Floating-point tolerances
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- PlanecutSettings: Main application settings
"""

from planecut.config.context import current_geometry, geometry_context
from planecut.config.settings import (
    CropMode,
    GeometryConfig,
    LoggingConfig,
    PlanecutSettings,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "CropMode",
    "GeometryConfig",
    "LoggingConfig",
    "PlanecutSettings",
    "ProcessingConfig",
    "current_geometry",
    "geometry_context",
    "get_default_settings",
]
