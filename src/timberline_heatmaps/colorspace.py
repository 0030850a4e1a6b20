"""sRGB hex <-> OKLCH conversions and hue-aware interpolation.

OKLCH is Oklab in polar form: L (lightness, 0-1), C (chroma), H (hue in
degrees, [0, 360)). All blending and adjustment math in this package runs
here so lightness and chroma changes look perceptually even.
"""

from __future__ import annotations

import math
import re

import numpy as np

from .errors import FormatError

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")

# Linear sRGB -> LMS
_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# Cube-rooted LMS -> Oklab
_LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

_OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

_LMS_TO_RGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` (``#`` optional, any case) into 0-255 channels."""
    if not isinstance(hex_color, str):
        raise FormatError(f"hex color must be a string, got {hex_color!r}")
    m = _HEX_RE.fullmatch(hex_color)
    if not m:
        raise FormatError(f"Cannot parse hex color: {hex_color!r}")
    digits = m.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format channels as lowercase ``#rrggbb``, rounding and clamping each."""
    return "#" + "".join(f"{_to_byte(c):02x}" for c in (r, g, b))


def normalize_hex(hex_color: str) -> str:
    """Canonical lowercase ``#rrggbb`` form of a hex color."""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def _to_byte(c: float) -> int:
    # Round half up; Python's round() is banker's rounding
    return int(math.floor(min(max(float(c), 0.0), 255.0) + 0.5))


def _srgb_to_linear(c: np.ndarray) -> np.ndarray:
    return np.where(c > 0.04045, ((c + 0.055) / 1.055) ** 2.4, c / 12.92)


def _linear_to_srgb(c: np.ndarray) -> np.ndarray:
    # np.maximum keeps the unused branch away from fractional powers of negatives
    curved = 1.055 * np.power(np.maximum(c, 0.0031308), 1 / 2.4) - 0.055
    return np.where(c > 0.0031308, curved, 12.92 * c)


def rgb_to_oklch(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert 0-255 sRGB channels to ``(L, C, H)``."""
    rgb = np.array([r, g, b], dtype=float) / 255.0
    lms = _RGB_TO_LMS @ _srgb_to_linear(rgb)
    lab_l, lab_a, lab_b = _LMS_TO_OKLAB @ np.cbrt(lms)

    chroma = math.hypot(lab_a, lab_b)
    hue = math.degrees(math.atan2(lab_b, lab_a)) % 360.0
    if hue >= 360.0:
        hue = 0.0
    return float(lab_l), float(chroma), hue


def oklch_to_rgb(lightness: float, chroma: float, hue: float) -> tuple[int, int, int]:
    """Convert ``(L, C, H)`` back to 0-255 sRGB, clamping out-of-gamut channels."""
    h = math.radians(hue)
    lab = np.array([lightness, chroma * math.cos(h), chroma * math.sin(h)])
    lms = (_OKLAB_TO_LMS @ lab) ** 3
    srgb = _linear_to_srgb(_LMS_TO_RGB @ lms)
    r, g, b = (_to_byte(c * 255.0) for c in srgb)
    return r, g, b


def interpolate_oklch(
    c1: tuple[float, float, float],
    c2: tuple[float, float, float],
    ratio: float,
) -> tuple[float, float, float]:
    """Blend two OKLCH colors; hue travels the shorter way round the circle."""
    l1, ch1, h1 = c1
    l2, ch2, h2 = c2

    dh = h2 - h1
    if dh > 180:
        dh -= 360
    elif dh < -180:
        dh += 360

    hue = (h1 + dh * ratio) % 360.0
    if hue >= 360.0:
        hue = 0.0
    return (
        l1 + (l2 - l1) * ratio,
        ch1 + (ch2 - ch1) * ratio,
        hue,
    )


def hex_to_oklch(hex_color: str) -> tuple[float, float, float]:
    return rgb_to_oklch(*hex_to_rgb(hex_color))


def oklch_to_hex(lightness: float, chroma: float, hue: float) -> str:
    return rgb_to_hex(*oklch_to_rgb(lightness, chroma, hue))
