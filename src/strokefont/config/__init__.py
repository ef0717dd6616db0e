"""Configuration management for strokefont.

This module provides configuration management using Pydantic models.
The host (CLI or an editor UI) builds these value objects once and passes
them into the core; the core never reads configuration from anywhere else.

Key classes:
- SimplifyConfig: Stroke simplification tolerance
- ArcConfig: Arc detection thresholds
- LayoutConfig: Text size, spacing, wrapping and auto-fit
- ExportConfig: G-code and drawing parameters
- LoggingConfig: Logging settings
- StrokeFontSettings: Main application settings
"""

from strokefont.config.settings import (
    ArcConfig,
    ExportConfig,
    GCodeConfig,
    LayoutConfig,
    LoggingConfig,
    RenderConfig,
    SimplifyConfig,
    StrokeFontSettings,
    get_default_settings,
)

__all__ = [
    "ArcConfig",
    "ExportConfig",
    "GCodeConfig",
    "LayoutConfig",
    "LoggingConfig",
    "RenderConfig",
    "SimplifyConfig",
    "StrokeFontSettings",
    "get_default_settings",
]
