"""Translate theme.py constants into per-mode option structs.

Both structs validate themselves on construction; ``linear_options()`` and
``calendar_options()`` merge caller overrides onto the theme defaults.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, fields
from numbers import Integral, Real
from typing import Any

from .calendar_grid import weekday_index
from .colorspace import normalize_hex
from .errors import ConfigError, FormatError
from .theme import COLORS, DAY_LABELS, GITHUB_GREEN, LAYOUT, MONTH_LABELS, WEEKDAYS

ColorSpec = Sequence[str] | Mapping[str, object]


@dataclass(frozen=True)
class LinearOptions:
    cell_size: int = LAYOUT["linear"]["cell_size"]
    cell_spacing: int = LAYOUT["linear"]["cell_spacing"]
    font_size: int = LAYOUT["linear"]["font_size"]
    border_width: int = LAYOUT["linear"]["border_width"]
    corner_radius: int = LAYOUT["linear"]["corner_radius"]
    colors: ColorSpec = field(default_factory=lambda: list(GITHUB_GREEN))
    text_color: str = COLORS["text"]
    value_min: float | None = None
    value_max: float | None = None
    value_to_score: Callable[..., int] | None = None

    def __post_init__(self) -> None:
        _check_shared(self)


@dataclass(frozen=True)
class CalendarOptions:
    cell_size: int = LAYOUT["calendar"]["cell_size"]
    cell_spacing: int = LAYOUT["calendar"]["cell_spacing"]
    font_size: int = LAYOUT["calendar"]["font_size"]
    border_width: int = LAYOUT["calendar"]["border_width"]
    corner_radius: int = LAYOUT["calendar"]["corner_radius"]
    colors: ColorSpec = field(default_factory=lambda: list(GITHUB_GREEN))
    text_color: str = COLORS["label"]
    value_min: float | None = None
    value_max: float | None = None
    value_to_score: Callable[..., int] | None = None
    start_of_week: str = LAYOUT["calendar"]["start_of_week"]
    month_spacing: int = LAYOUT["calendar"]["month_spacing"]
    show_month_labels: bool = True
    show_day_labels: bool = True
    show_outside_cells: bool = False
    day_labels: list[str] = field(default_factory=lambda: list(DAY_LABELS))
    month_labels: list[str] = field(default_factory=lambda: list(MONTH_LABELS))

    def __post_init__(self) -> None:
        _check_shared(self)
        _non_negative_int(self, "month_spacing")

        object.__setattr__(self, "start_of_week", WEEKDAYS[weekday_index(self.start_of_week)])

        for name in ("show_month_labels", "show_day_labels", "show_outside_cells"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be True or False, got {getattr(self, name)!r}")
        _labels(self, "day_labels", 7)
        _labels(self, "month_labels", 12)


def linear_options(**overrides: Any) -> LinearOptions:
    """Defaults for a linear strip with ``overrides`` merged on top."""
    return _merge(LinearOptions, overrides)


def calendar_options(**overrides: Any) -> CalendarOptions:
    """Defaults for a calendar grid with ``overrides`` merged on top."""
    return _merge(CalendarOptions, overrides)


def _merge(cls: type, overrides: Mapping[str, Any]):
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigError(f"Unknown option(s): {', '.join(unknown)}")
    return cls(**overrides)


def _check_shared(opts: LinearOptions | CalendarOptions) -> None:
    _positive_int(opts, "cell_size")
    _positive_int(opts, "font_size")
    _non_negative_int(opts, "cell_spacing")
    _non_negative_int(opts, "border_width")
    _non_negative_int(opts, "corner_radius")
    _hex(opts, "text_color")

    for name in ("value_min", "value_max"):
        v = getattr(opts, name)
        if v is not None and (isinstance(v, bool) or not isinstance(v, Real) or not math.isfinite(v)):
            raise ConfigError(f"{name} must be a finite number, got {v!r}")
    if opts.value_min is not None and opts.value_max is not None and opts.value_min > opts.value_max:
        raise ConfigError(
            f"value_min ({opts.value_min}) must not exceed value_max ({opts.value_max})"
        )
    if opts.value_to_score is not None and not callable(opts.value_to_score):
        raise ConfigError("value_to_score must be callable")


def _is_int(v: object) -> bool:
    return isinstance(v, Integral) and not isinstance(v, bool)


def _positive_int(opts: object, name: str) -> None:
    v = getattr(opts, name)
    if not _is_int(v) or v <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {v!r}")


def _non_negative_int(opts: object, name: str) -> None:
    v = getattr(opts, name)
    if not _is_int(v) or v < 0:
        raise ConfigError(f"{name} must be a non-negative integer, got {v!r}")


def _hex(opts: object, name: str) -> None:
    v = getattr(opts, name)
    try:
        object.__setattr__(opts, name, normalize_hex(v))
    except FormatError as exc:
        raise ConfigError(f"{name} is not a valid hex color: {v!r}") from exc


def _labels(opts: object, name: str, count: int) -> None:
    v = getattr(opts, name)
    if (
        isinstance(v, str)
        or not isinstance(v, Sequence)
        or len(v) != count
        or not all(isinstance(s, str) for s in v)
    ):
        raise ConfigError(f"{name} must be a list of {count} strings, got {v!r}")
    object.__setattr__(opts, name, list(v))
