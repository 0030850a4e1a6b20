"""Example: a year of activity as a GitHub-style calendar, Sunday first."""

from datetime import date, timedelta

import numpy as np

import timberline_heatmaps as th

rng = np.random.default_rng(7)
start = date(2024, 1, 1)
days = [start + timedelta(days=i) for i in range(366)]

# Busier on weekdays, quieter at weekends
weekday = np.array([d.weekday() < 5 for d in days])
activity = rng.poisson(np.where(weekday, 2.5, 0.8))

th.render_calendar(
    {d: int(n) for d, n in zip(days, activity)},
    start_of_week="sunday",
    cell_size=14,
    month_spacing=4,
    filename="calendar-year.svg",
)

th.render_calendar(
    {d: int(n) for d, n in zip(days[100:160], activity[100:160])},
    colors=th.BLUE_OCEAN,
    show_outside_cells=True,
    filename="calendar-spring-outside-cells.svg",
)
