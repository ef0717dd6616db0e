"""Configuration settings for Strokefont."""

from pathlib import Path

from pydantic import BaseModel, Field


class SimplifyConfig(BaseModel):
    """Configuration for freehand stroke simplification."""

    tolerance: float = Field(
        default=2.0,
        ge=0.0,
        description="Douglas-Peucker tolerance in design units",
    )


class ArcConfig(BaseModel):
    """Configuration for arc detection.

    Radius bounds and the tolerance are in design units. The angle and ratio
    thresholds reject fits that are too short or too flat to be worth an arc
    move.
    """

    tolerance: float = Field(
        default=0.5,
        gt=0.0,
        description="Maximum distance from a point to the fitted circle",
    )
    window: int = Field(
        default=20,
        ge=4,
        le=200,
        description="Maximum number of points examined per arc candidate",
    )
    min_points: int = Field(
        default=5,
        ge=4,
        description="Strokes with fewer points are always emitted as a line",
    )
    min_radius: float = Field(
        default=0.5,
        gt=0.0,
        description="Smallest accepted arc radius",
    )
    max_radius: float = Field(
        default=50.0,
        gt=0.0,
        description="Largest accepted arc radius (larger means nearly straight)",
    )
    min_angle_deg: float = Field(
        default=20.0,
        ge=0.0,
        le=180.0,
        description="Smallest accepted angular span in degrees",
    )
    min_arc_chord_ratio: float = Field(
        default=1.05,
        ge=1.0,
        description="Smallest accepted arc length / chord length ratio",
    )


class LayoutConfig(BaseModel):
    """Text layout options. Lengths are in output units (mm)."""

    output_size: float = Field(
        default=10.0,
        gt=0.0,
        description="Target glyph height",
    )
    char_spacing: float = Field(
        default=0.0,
        description="Extra gap added after every character",
    )
    space_width: float = Field(
        default=3.0,
        ge=0.0,
        description="Width of a space when the font does not define one",
    )
    line_gap: float = Field(
        default=2.0,
        description="Extra vertical gap between non-blank lines",
    )
    max_width: float = Field(
        default=0.0,
        ge=0.0,
        description="Wrap width (0 disables wrapping)",
    )
    max_height: float = Field(
        default=0.0,
        ge=0.0,
        description="Height bound for auto-fit (0 disables)",
    )
    auto_fit: bool = Field(
        default=False,
        description="Grow the text size to the largest size that fits the bounds",
    )
    max_text_size: float = Field(
        default=50.0,
        gt=0.0,
        description="Upper bound for auto-fit",
    )


class GCodeConfig(BaseModel):
    """Motion-code emission parameters."""

    feed_rate: float = Field(default=1000.0, gt=0.0, description="Cutting feed (mm/min)")
    plunge_rate: float = Field(default=300.0, gt=0.0, description="Plunge feed (mm/min)")
    safe_z: float = Field(default=5.0, description="Travel height between strokes")
    engrave_depth: float = Field(default=-0.5, description="Z height while cutting")
    decimals: int = Field(default=3, ge=0, le=6, description="Digits after the decimal point")
    include_timestamp: bool = Field(
        default=True,
        description="Write a generation timestamp comment in the header",
    )


class RenderConfig(BaseModel):
    """Drawing options shared by the SVG and PNG exporters."""

    padding: float = Field(default=20.0, ge=0.0, description="Margin around the text")
    svg_stroke_width: float = Field(default=0.3, gt=0.0, description="SVG line width")
    raster_line_width: float = Field(default=0.5, gt=0.0, description="PNG line width")
    supersample: int = Field(default=3, ge=1, le=8, description="PNG pixels per output unit")


class ExportConfig(BaseModel):
    """Configuration for all exporters."""

    gcode: GCodeConfig = Field(default_factory=GCodeConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)


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


class StrokeFontSettings(BaseModel):
    """Main application settings."""

    simplify: SimplifyConfig = Field(default_factory=SimplifyConfig)
    arcs: ArcConfig = Field(default_factory=ArcConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StrokeFontSettings:
    """Get default application settings."""
    return StrokeFontSettings()
