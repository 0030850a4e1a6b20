"""Exception types raised while building a heatmap."""


class HeatmapError(ValueError):
    """Base class for every error raised by timberline_heatmaps."""


class ConfigError(HeatmapError):
    """An option, color spec, or input container is invalid."""


class FormatError(HeatmapError):
    """A hex color string could not be parsed."""
