"""Configuration settings for bsptree."""

from pathlib import Path

from pydantic import BaseModel, Field


class TreeConfig(BaseModel):
    """Configuration for tree construction.

    Tolerances are in world units, the same units polygon vertices use.
    """

    epsilon: float = Field(
        default=0.1,
        gt=0.0,
        le=100.0,
        description="Half-width of the band around a plane treated as on the plane",
    )
    max_split_depth: int = Field(
        default=64,
        ge=1,
        le=10_000,
        description="Maximum number of successive splits of one polygon during an insert",
    )
    fresh_fragment_ids: bool = Field(
        default=True,
        description="Give each split fragment a new identifier instead of reusing its parent's",
    )


class SceneConfig(BaseModel):
    """Configuration for scene generation and the default viewpoint."""

    viewpoint_x: float = Field(default=250.0, description="Default viewpoint X")
    viewpoint_y: float = Field(default=450.0, description="Default viewpoint Y")
    origin_min_x: float = Field(default=50.0, description="Smallest random square origin X")
    origin_span_x: float = Field(default=350.0, gt=0.0, description="Range of random origin X")
    origin_min_y: float = Field(default=100.0, description="Smallest random square origin Y")
    origin_span_y: float = Field(default=300.0, gt=0.0, description="Range of random origin Y")
    min_size: float = Field(default=50.0, gt=0.0, description="Smallest random square side")
    size_span: float = Field(default=50.0, ge=0.0, description="Range of random square side")


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


class BSPSettings(BaseModel):
    """Main application settings."""

    tree: TreeConfig = Field(default_factory=TreeConfig)
    scene: SceneConfig = Field(default_factory=SceneConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BSPSettings:
    """Get default application settings."""
    return BSPSettings()
