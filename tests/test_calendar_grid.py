"""Tests for calendar date arithmetic and grid planning."""

from datetime import date, datetime, timedelta

import pytest

from timberline_heatmaps.calendar_grid import (
    data_range,
    plan_calendar,
    rotated_day_labels,
    to_date,
    week_bounds,
    weekday_index,
)
from timberline_heatmaps.errors import ConfigError
from timberline_heatmaps.style import calendar_options
from timberline_heatmaps.theme import DAY_LABELS, MONTH_LABELS


def _every_day(start: date, end: date, score: int = 1) -> dict:
    days = (end - start).days + 1
    return {start + timedelta(days=i): score for i in range(days)}


class TestDates:
    @pytest.mark.parametrize(
        "key", ["2024-01-01", " 2024-01-01 ", date(2024, 1, 1), datetime(2024, 1, 1, 15, 30)]
    )
    def test_to_date(self, key) -> None:
        assert to_date(key) == date(2024, 1, 1)

    @pytest.mark.parametrize("key", ["garbage", "2024-13-01", 20240101, None])
    def test_to_date_rejects(self, key) -> None:
        with pytest.raises(ConfigError):
            to_date(key)

    def test_weekday_index(self) -> None:
        assert weekday_index("sunday") == 0
        assert weekday_index("Monday") == 1
        assert weekday_index("SATURDAY") == 6
        with pytest.raises(ConfigError):
            weekday_index("funday")

    def test_rotated_day_labels(self) -> None:
        assert rotated_day_labels(DAY_LABELS, "sunday") == ["S", "M", "T", "W", "T", "F", "S"]
        assert rotated_day_labels(DAY_LABELS, "monday") == ["M", "T", "W", "T", "F", "S", "S"]
        assert rotated_day_labels(DAY_LABELS, "saturday")[0] == "S"

    def test_data_range(self) -> None:
        dates = [date(2024, 3, 5), date(2024, 1, 9), date(2024, 2, 1)]
        assert data_range(dates) == (date(2024, 1, 9), date(2024, 3, 5))

    def test_empty_range_defaults_to_past_year(self) -> None:
        assert data_range([], today=date(2024, 6, 1)) == (date(2023, 6, 2), date(2024, 6, 1))


class TestWeekBounds:
    # 2024-01-01 is a Monday
    def test_monday_start(self) -> None:
        assert week_bounds(date(2024, 1, 1), date(2024, 1, 1), "monday") == (
            date(2024, 1, 1),
            date(2024, 1, 7),
        )

    def test_sunday_start(self) -> None:
        assert week_bounds(date(2024, 1, 1), date(2024, 1, 1), "sunday") == (
            date(2023, 12, 31),
            date(2024, 1, 6),
        )

    @pytest.mark.parametrize("start_of_week", ["sunday", "monday", "wednesday", "saturday"])
    def test_always_whole_weeks(self, start_of_week) -> None:
        first, last = week_bounds(date(2024, 2, 14), date(2024, 5, 3), start_of_week)
        assert ((last - first).days + 1) % 7 == 0
        assert first <= date(2024, 2, 14) and last >= date(2024, 5, 3)
        assert (first.weekday() + 1) % 7 == weekday_index(start_of_week)


class TestPlanCalendar:
    def test_single_day_expands_to_one_week(self) -> None:
        plan = plan_calendar({date(2024, 1, 1): 1}, calendar_options(start_of_week="sunday"))

        assert len(plan.cells) == 7
        assert plan.weeks == 1
        assert plan.cells[0].date == date(2023, 12, 31)
        assert [c.score for c in plan.active_cells] == [1]
        assert sum(c.is_outside for c in plan.cells) == 6

    def test_single_day_geometry(self) -> None:
        plan = plan_calendar({date(2024, 1, 1): 1}, calendar_options(start_of_week="sunday"))

        # label column 2 * 8, month label row 8 + 5, cells 12px with 1px spacing
        active = plan.active_cells[0]
        assert (active.x, active.y) == (16, 26)
        assert plan.width == 16 + 12
        assert plan.height == 13 + 7 * 12 + 6

    def test_december_padding_gets_no_month_label(self) -> None:
        plan = plan_calendar({date(2024, 1, 1): 1}, calendar_options(start_of_week="sunday"))
        assert plan.month_labels == ()

    def test_day_labels_follow_start_of_week(self) -> None:
        plan = plan_calendar({date(2024, 1, 1): 1}, calendar_options(start_of_week="sunday"))

        assert [label.text for label in plan.day_labels] == ["S", "M", "T", "W", "T", "F", "S"]
        assert plan.day_labels[0].x == 8
        assert plan.day_labels[0].y == pytest.approx(13 + 6 + 2.8)

    def test_month_gap_and_labels(self) -> None:
        plan = plan_calendar(_every_day(date(2024, 1, 1), date(2024, 2, 29)), calendar_options())

        assert plan.weeks == 9
        assert [(m.text, m.x, m.y) for m in plan.month_labels] == [("Jan", 16, 10), ("Feb", 86, 10)]
        feb5 = next(c for c in plan.cells if c.date == date(2024, 2, 5))
        assert (feb5.week, feb5.day, feb5.x, feb5.y) == (5, 0, 86, 13)
        assert plan.width == 16 + 9 * 12 + 8 + 5

    def test_outside_cells_are_flagged_with_score_zero(self) -> None:
        plan = plan_calendar(_every_day(date(2024, 1, 1), date(2024, 2, 29), 3), calendar_options())

        outside = [c for c in plan.cells if c.is_outside]
        assert [c.date for c in outside] == [date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 3)]
        assert all(c.score == 0 for c in outside)
        assert len(plan.active_cells) == 60

    def test_missing_days_in_range_score_zero(self) -> None:
        plan = plan_calendar({date(2024, 1, 1): 2, date(2024, 1, 5): 4}, calendar_options())
        scores = {c.date: c.score for c in plan.active_cells}
        assert scores == {
            date(2024, 1, 1): 2,
            date(2024, 1, 2): 0,
            date(2024, 1, 3): 0,
            date(2024, 1, 4): 0,
            date(2024, 1, 5): 4,
        }

    def test_each_month_labelled_once_across_years(self) -> None:
        plan = plan_calendar({date(2023, 1, 1): 1, date(2024, 12, 31): 1}, calendar_options())
        assert [m.text for m in plan.month_labels] == MONTH_LABELS * 2

    def test_month_spacing_zero(self) -> None:
        plan = plan_calendar(
            _every_day(date(2024, 1, 1), date(2024, 2, 29)), calendar_options(month_spacing=0)
        )
        assert plan.width == 16 + 9 * 12 + 8
        assert plan.month_labels[1].x == 16 + 5 * 13

    def test_labels_can_be_hidden(self) -> None:
        plan = plan_calendar(
            {date(2024, 1, 1): 1},
            calendar_options(show_day_labels=False, show_month_labels=False),
        )

        assert plan.day_labels == () and plan.month_labels == ()
        assert (plan.cells[0].x, plan.cells[0].y) == (0, 0)
        assert plan.width == 12
        assert plan.height == 7 * 12 + 6

    def test_custom_month_labels(self) -> None:
        names = ["Jän", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"]
        plan = plan_calendar({date(2024, 3, 4): 1}, calendar_options(month_labels=names))
        assert [m.text for m in plan.month_labels] == ["Mär"]

    def test_empty_data_uses_default_range(self) -> None:
        plan = plan_calendar({}, calendar_options(), today=date(2024, 6, 1))

        assert (plan.start, plan.end) == (date(2023, 6, 2), date(2024, 6, 1))
        assert len(plan.active_cells) == 366
        assert len(plan.cells) % 7 == 0
