"""Pure data: palettes, fonts, labels, and layout constants.

No library imports. This module defines the visual identity as plain
Python dicts and lists so both render modes (and any other consumer) can
use it.
"""

COLORS = {
    "text": "#000000",
    "label": "#666666",
}

# GitHub contribution greens; the default for both modes
GITHUB_GREEN = ["#ebedf0", "#9be9a8", "#40c463", "#30a14e", "#216e39"]

BLUE_OCEAN = ["#f0f9ff", "#bae6fd", "#7dd3fc", "#38bdf8", "#0284c7"]

WARM_SUNSET = ["#fef3e2", "#fdd49e", "#fdbb84", "#fc8d59", "#d7301f"]

PURPLE_VIBES = ["#f3e8ff", "#d8b4fe", "#c084fc", "#a855f7", "#7c3aed"]

# Generated in OKLCH, so the hue sweeps through yellow rather than brown
RED_TO_GREEN = {"from": "#e5534b", "to": "#2da44e", "steps": 6}

PALETTES = {
    "github_green": GITHUB_GREEN,
    "blue_ocean": BLUE_OCEAN,
    "warm_sunset": WARM_SUNSET,
    "purple_vibes": PURPLE_VIBES,
    "red_to_green": RED_TO_GREEN,
}

FONTS = {
    "sans": "Arial, sans-serif",
}

# Sunday-first; rotated to match start_of_week at render time
DAY_LABELS = ["S", "M", "T", "W", "T", "F", "S"]

MONTH_LABELS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

WEEKDAYS = [
    "sunday", "monday", "tuesday", "wednesday",
    "thursday", "friday", "saturday",
]

LAYOUT = {
    "linear": {
        "cell_size": 10,
        "cell_spacing": 1,
        "font_size": 8,
        "border_width": 1,
        "corner_radius": 0,
        "border_darken": 0.7,
    },
    "calendar": {
        "cell_size": 12,
        "cell_spacing": 1,
        "font_size": 8,
        "border_width": 1,
        "corner_radius": 0,
        "border_darken": 0.9,
        "month_spacing": 5,
        "start_of_week": "monday",
    },
    # Text baseline sits this many font-sizes below the cell's vertical center
    "baseline_shift": 0.35,
    # Muted (outside-range) cells: OKLCH lightness and chroma scale
    "mute_lightness": 0.85,
    "mute_chroma": 0.4,
}
