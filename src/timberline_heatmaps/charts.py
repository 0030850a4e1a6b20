"""Convenience render functions: render_linear(), render_calendar(), save()."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date
from numbers import Integral
from pathlib import Path
from typing import Any

import numpy as np

from . import svg
from .calendar_grid import CalendarPlan, normalize_keys, plan_calendar
from .errors import ConfigError
from .geometry import (
    LinearPlan,
    Rect,
    border_radius,
    border_rect,
    clamp_corner_radius,
    plan_linear,
    text_baseline,
)
from .palette import darken, mute, resolve_palette, score_to_color
from .style import CalendarOptions, LinearOptions, calendar_options, linear_options
from .theme import LAYOUT
from .values import check_value, value_range, value_to_score

logger = logging.getLogger(__name__)

# Default output directory (relative to the working directory)
_HEATMAPS_DIR = Path("static") / "img" / "heatmaps"


def save(
    document: str,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Write an SVG document to static/img/heatmaps/ (or a custom directory).

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else _HEATMAPS_DIR
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    path.write_text(document, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", path, len(document.encode("utf-8")))
    return path


def render_linear(
    scores: Sequence[int] | np.ndarray | None = None,
    *,
    values: Sequence[float | None] | np.ndarray | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    **options: Any,
) -> str:
    """Single-row heatmap strip, one labelled cell per score (or value)."""
    opts = linear_options(**options)
    palette = resolve_palette(opts.colors)
    plan = plan_linear(
        _linear_scores(scores, values, opts, len(palette)),
        opts.cell_size,
        opts.cell_spacing,
    )

    radius = clamp_corner_radius(opts.corner_radius, opts.cell_size)
    body = []
    for cell in plan.cells:
        fill = score_to_color(cell.score, palette)
        body.append(_cell_markup(cell.x, cell.y, fill, opts, radius, LAYOUT["linear"]["border_darken"]))
        body.append(svg.text(
            cell.score,
            x=cell.x + opts.cell_size / 2,
            y=text_baseline(cell.y, opts.cell_size, opts.font_size),
            font_size=opts.font_size,
            fill=opts.text_color,
        ))

    document = svg.document(plan.width, plan.height, "".join(body))
    logger.debug("Rendered linear heatmap: %d cells, %sx%s", len(plan.cells), plan.width, plan.height)
    if filename:
        save(document, filename, output_dir)
    return document


def render_calendar(
    scores: Mapping[date | str, int] | None = None,
    *,
    values: Mapping[date | str, float | None] | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    today: date | None = None,
    **options: Any,
) -> str:
    """GitHub-style calendar heatmap: one column per week, one row per weekday."""
    opts = calendar_options(**options)
    palette = resolve_palette(opts.colors)
    plan = calendar_plan(scores, values=values, options=opts, palette=palette, today=today)

    radius = clamp_corner_radius(opts.corner_radius, opts.cell_size)
    border_factor = LAYOUT["calendar"]["border_darken"]
    body = []
    for label in plan.day_labels:
        body.append(svg.text(label.text, x=label.x, y=label.y, font_size=opts.font_size, fill=opts.text_color))

    for cell in plan.cells:
        if cell.is_outside:
            if not opts.show_outside_cells:
                continue
            fill = mute(score_to_color(0, palette))
        else:
            fill = score_to_color(cell.score, palette)
        body.append(_cell_markup(cell.x, cell.y, fill, opts, radius, border_factor))

    for label in plan.month_labels:
        body.append(svg.text(label.text, x=label.x, y=label.y, font_size=opts.font_size, fill=opts.text_color))

    document = svg.document(plan.width, plan.height, "".join(body))
    logger.debug(
        "Rendered calendar heatmap %s..%s: %d weeks, %sx%s",
        plan.start, plan.end, plan.weeks, plan.width, plan.height,
    )
    if filename:
        save(document, filename, output_dir)
    return document


def calendar_plan(
    scores: Mapping[date | str, int] | None = None,
    *,
    values: Mapping[date | str, float | None] | None = None,
    options: CalendarOptions | None = None,
    palette: Sequence[str] | None = None,
    today: date | None = None,
) -> CalendarPlan:
    """Grid positions and labels for a calendar heatmap, without markup."""
    opts = options or calendar_options()
    if palette is None:
        palette = resolve_palette(opts.colors)

    data = _exactly_one(scores, values)
    if not isinstance(data, Mapping):
        raise ConfigError(f"calendar {_input_name(values)} must be a mapping of date -> number")
    entries = normalize_keys(data)

    if values is None:
        by_date = {d: _check_score(s, f"score for {d}") for d, s in entries.items()}
    else:
        raw = {d: check_value(v, f"value for {d}") for d, v in entries.items()}
        rng = value_range(raw.values(), opts.value_min, opts.value_max)
        by_date = {
            d: value_to_score(v, rng, len(palette), opts.value_to_score, date=d)
            for d, v in raw.items()
        }
    return plan_calendar(by_date, opts, today=today)


def linear_plan(
    scores: Sequence[int] | np.ndarray | None = None,
    *,
    values: Sequence[float | None] | np.ndarray | None = None,
    options: LinearOptions | None = None,
) -> LinearPlan:
    """Cell positions and scores for a linear strip, without markup."""
    opts = options or linear_options()
    palette = resolve_palette(opts.colors)
    return plan_linear(
        _linear_scores(scores, values, opts, len(palette)),
        opts.cell_size,
        opts.cell_spacing,
    )


def _cell_markup(
    x: float,
    y: float,
    fill: str,
    opts: LinearOptions | CalendarOptions,
    radius: int,
    border_factor: float,
) -> str:
    cell = Rect(x, y, opts.cell_size, opts.cell_size)
    markup = svg.rect(cell.x, cell.y, cell.width, cell.height, radius, fill=fill)

    border = border_rect(cell, opts.border_width)
    if border is not None:
        markup += svg.rect(
            border.x, border.y, border.width, border.height,
            border_radius(radius, opts.border_width) if radius else 0,
            fill="none",
            stroke=darken(fill, border_factor),
            stroke_width=opts.border_width,
        )
    return markup


def _linear_scores(
    scores: Sequence[int] | np.ndarray | None,
    values: Sequence[float | None] | np.ndarray | None,
    opts: LinearOptions,
    bucket_count: int,
) -> list[int]:
    data = _exactly_one(scores, values)
    if isinstance(data, np.ndarray):
        data = data.tolist()
    if isinstance(data, (str, bytes, Mapping)) or not isinstance(data, Sequence):
        raise ConfigError(f"linear {_input_name(values)} must be a list, got {type(data).__name__}")

    if values is None:
        return [_check_score(s, f"scores[{i}]") for i, s in enumerate(data)]

    raw = [check_value(v, f"values[{i}]") for i, v in enumerate(data)]
    rng = value_range(raw, opts.value_min, opts.value_max)
    return [
        value_to_score(v, rng, bucket_count, opts.value_to_score, index=i)
        for i, v in enumerate(raw)
    ]


def _exactly_one(scores: object, values: object) -> object:
    if scores is not None and values is not None:
        raise ConfigError("Pass either scores or values, not both")
    if scores is None and values is None:
        raise ConfigError("One of scores or values is required")
    return scores if values is None else values


def _input_name(values: object) -> str:
    return "scores" if values is None else "values"


def _check_score(score: object, where: str) -> int:
    if isinstance(score, bool) or not isinstance(score, Integral) or score < 0:
        raise ConfigError(f"{where} must be a non-negative integer, got {score!r}")
    return int(score)
