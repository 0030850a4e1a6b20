"""timberline-heatmaps: SVG heatmap strips and calendars."""

from .charts import calendar_plan, linear_plan, render_calendar, render_linear, save
from .errors import ConfigError, FormatError, HeatmapError
from .palette import darken, mute, resolve_palette, score_to_color
from .theme import (
    BLUE_OCEAN,
    GITHUB_GREEN,
    PALETTES,
    PURPLE_VIBES,
    RED_TO_GREEN,
    WARM_SUNSET,
)

__version__ = "0.1.0"

__all__ = [
    "render_linear",
    "render_calendar",
    "linear_plan",
    "calendar_plan",
    "save",
    "resolve_palette",
    "score_to_color",
    "darken",
    "mute",
    "HeatmapError",
    "ConfigError",
    "FormatError",
    "GITHUB_GREEN",
    "BLUE_OCEAN",
    "WARM_SUNSET",
    "PURPLE_VIBES",
    "RED_TO_GREEN",
    "PALETTES",
]
