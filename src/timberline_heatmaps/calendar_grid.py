"""Calendar grid planning: full-week padding, columns, month gaps, labels.

Everything here works on ``datetime.date``; keys arriving as strings or
datetimes are converted once by :func:`normalize_keys` before any grid
arithmetic happens.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, TypeVar

from .errors import ConfigError
from .geometry import cell_offset, span, text_baseline
from .theme import WEEKDAYS

if TYPE_CHECKING:
    from .style import CalendarOptions

T = TypeVar("T")

DAYS_PER_WEEK = 7
DEFAULT_LOOKBACK = timedelta(days=365)


@dataclass(frozen=True)
class CalendarCell:
    date: date
    score: int
    is_outside: bool
    week: int
    day: int
    x: float
    y: float


@dataclass(frozen=True)
class Label:
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class CalendarPlan:
    start: date
    end: date
    grid_start: date
    grid_end: date
    cells: tuple[CalendarCell, ...]
    day_labels: tuple[Label, ...]
    month_labels: tuple[Label, ...]
    width: float
    height: float

    @property
    def weeks(self) -> int:
        return ((self.grid_end - self.grid_start).days + 1) // DAYS_PER_WEEK

    @property
    def active_cells(self) -> tuple[CalendarCell, ...]:
        return tuple(c for c in self.cells if not c.is_outside)


def to_date(key: object) -> date:
    """Canonical date for a calendar key (``date``, ``datetime`` or ISO string)."""
    if isinstance(key, datetime):
        return key.date()
    if isinstance(key, date):
        return key
    if isinstance(key, str):
        try:
            return date.fromisoformat(key.strip())
        except ValueError as exc:
            raise ConfigError(f"Cannot parse calendar date: {key!r}") from exc
    raise ConfigError(f"calendar keys must be dates or ISO date strings, got {key!r}")


def normalize_keys(entries: Mapping[object, T]) -> dict[date, T]:
    return {to_date(k): v for k, v in entries.items()}


def weekday_index(name: str) -> int:
    """Sunday-based index (0-6) of a weekday name."""
    if not isinstance(name, str) or name.lower() not in WEEKDAYS:
        raise ConfigError(f"start_of_week must be one of: {', '.join(WEEKDAYS)}; got {name!r}")
    return WEEKDAYS.index(name.lower())


def _sunday_based(d: date) -> int:
    return (d.weekday() + 1) % 7


def data_range(dates: Iterable[date], today: date | None = None) -> tuple[date, date]:
    """``(min, max)`` of the dates, or the year up to ``today`` when empty."""
    dates = list(dates)
    if not dates:
        today = today or date.today()
        return today - DEFAULT_LOOKBACK, today
    return min(dates), max(dates)


def week_bounds(start: date, end: date, start_of_week: str) -> tuple[date, date]:
    """Pad ``[start, end]`` out to whole weeks beginning on ``start_of_week``."""
    first = weekday_index(start_of_week)
    grid_start = start - timedelta(days=(_sunday_based(start) - first) % 7)
    grid_end = end + timedelta(days=(first + 6 - _sunday_based(end)) % 7)
    return grid_start, grid_end


def rotated_day_labels(labels: list[str], start_of_week: str) -> list[str]:
    """Sunday-first ``labels`` rotated so index 0 is ``start_of_week``."""
    i = weekday_index(start_of_week)
    return list(labels[i:]) + list(labels[:i])


def _month_bounds(d: date) -> tuple[date, date]:
    first = d.replace(day=1)
    if first.month == 12:
        following = first.replace(year=first.year + 1, month=1)
    else:
        following = first.replace(month=first.month + 1)
    return first, following - timedelta(days=1)


def plan_calendar(
    scores: Mapping[date, int],
    options: CalendarOptions,
    today: date | None = None,
) -> CalendarPlan:
    """Lay out every cell and label of a calendar heatmap.

    ``scores`` must already be keyed by ``date``. Dates inside the data
    range without an entry score 0. Cells in the padding weeks are flagged
    ``is_outside``; whether they are drawn is up to the renderer.
    """
    start, end = data_range(scores, today)
    grid_start, grid_end = week_bounds(start, end, options.start_of_week)

    size, spacing = options.cell_size, options.cell_spacing
    label_column = options.font_size * 2 if options.show_day_labels else 0
    label_row = options.font_size + 5 if options.show_month_labels else 0

    cells: list[CalendarCell] = []
    month_labels: list[Label] = []
    labelled: set[tuple[int, int]] = set()
    last_month: tuple[int, int] | None = None
    x_extra = 0

    week = 0
    column_start = grid_start
    while column_start <= grid_end:
        month = (column_start.year, column_start.month)
        if month != last_month:
            if last_month is not None:
                x_extra += options.month_spacing
            if month not in labelled:
                labelled.add(month)
                month_first, month_last = _month_bounds(column_start)
                if options.show_month_labels and month_first <= end and month_last >= start:
                    month_labels.append(Label(
                        options.month_labels[column_start.month - 1],
                        label_column + cell_offset(week, size, spacing, x_extra),
                        options.font_size + 2,
                    ))
        last_month = month

        x = label_column + cell_offset(week, size, spacing, x_extra)
        for day in range(DAYS_PER_WEEK):
            current = column_start + timedelta(days=day)
            outside = not start <= current <= end
            cells.append(CalendarCell(
                date=current,
                score=0 if outside else scores.get(current, 0),
                is_outside=outside,
                week=week,
                day=day,
                x=x,
                y=label_row + cell_offset(day, size, spacing),
            ))

        column_start += timedelta(days=DAYS_PER_WEEK)
        week += 1

    day_labels: list[Label] = []
    if options.show_day_labels:
        for i, text in enumerate(rotated_day_labels(options.day_labels, options.start_of_week)):
            top = label_row + cell_offset(i, size, spacing)
            day_labels.append(Label(text, options.font_size, text_baseline(top, size, options.font_size)))

    return CalendarPlan(
        start=start,
        end=end,
        grid_start=grid_start,
        grid_end=grid_end,
        cells=tuple(cells),
        day_labels=tuple(day_labels),
        month_labels=tuple(month_labels),
        width=label_column + span(week, size, spacing) + x_extra,
        height=label_row + span(DAYS_PER_WEEK, size, spacing),
    )
