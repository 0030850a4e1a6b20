"""Example: one week of scores as a linear strip."""

import timberline_heatmaps as th

th.render_linear(
    [0, 1, 3, 2, 4, 1, 0],
    cell_size=18,
    font_size=10,
    corner_radius=3,
    filename="weekly-progress.svg",
)
