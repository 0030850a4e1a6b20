"""Color specs -> concrete palettes, score lookup, and border/muted variants."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Integral

from .colorspace import (
    hex_to_oklch,
    interpolate_oklch,
    normalize_hex,
    oklch_to_hex,
)
from .errors import ConfigError, FormatError
from .theme import LAYOUT

_GENERATOR_KEYS = ("from", "to", "steps")


def resolve_palette(colors: Sequence[str] | Mapping[str, object]) -> tuple[str, ...]:
    """Turn a color spec into an ordered tuple of ``#rrggbb`` colors.

    ``colors`` is either a list of at least two hex colors, or a generator
    mapping ``{"from": hex, "to": hex, "steps": int}`` interpolated in
    OKLCH. Generated palettes reproduce both endpoints exactly.
    """
    if isinstance(colors, Mapping):
        return _generate(colors)
    if isinstance(colors, (str, bytes)) or not isinstance(colors, Sequence):
        raise ConfigError(
            f"colors must be a list of hex colors or a from/to/steps mapping, got {colors!r}"
        )
    if len(colors) < 2:
        raise ConfigError(f"colors must have at least 2 entries, got {len(colors)}")
    return tuple(_checked_hex(c, "colors entry") for c in colors)


def _generate(spec: Mapping[str, object]) -> tuple[str, ...]:
    missing = [k for k in _GENERATOR_KEYS if k not in spec]
    if missing:
        raise ConfigError(f"colors mapping is missing key(s): {', '.join(missing)}")

    steps = spec["steps"]
    if isinstance(steps, bool) or not isinstance(steps, Integral) or steps < 2:
        raise ConfigError(f"colors steps must be an integer >= 2, got {steps!r}")
    steps = int(steps)

    start = _checked_hex(spec["from"], "colors 'from'")
    end = _checked_hex(spec["to"], "colors 'to'")
    start_lch = hex_to_oklch(start)
    end_lch = hex_to_oklch(end)

    inner = [
        oklch_to_hex(*interpolate_oklch(start_lch, end_lch, i / (steps - 1)))
        for i in range(1, steps - 1)
    ]
    return (start, *inner, end)


def _checked_hex(value: object, what: str) -> str:
    try:
        return normalize_hex(value)
    except FormatError as exc:
        raise ConfigError(f"{what} is not a valid hex color: {value!r}") from exc


def score_to_color(score: int, palette: Sequence[str]) -> str:
    """Pick a palette color for a score.

    Score 0 is the base color; positive scores cycle through the rest, so
    any non-negative score maps to a color.
    """
    if score == 0:
        return palette[0]
    return palette[1 + (score - 1) % (len(palette) - 1)]


def darken(hex_color: str, factor: float = 0.7) -> str:
    """Scale OKLCH lightness by ``factor``; chroma and hue are kept."""
    lightness, chroma, hue = hex_to_oklch(hex_color)
    return oklch_to_hex(lightness * factor, chroma, hue)


def mute(hex_color: str) -> str:
    """Dimmed, desaturated variant of a color with the same hue."""
    lightness, chroma, hue = hex_to_oklch(hex_color)
    return oklch_to_hex(
        lightness * LAYOUT["mute_lightness"],
        chroma * LAYOUT["mute_chroma"],
        hue,
    )
