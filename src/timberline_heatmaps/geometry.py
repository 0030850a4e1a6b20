"""Fixed-grid cell arithmetic shared by the linear and calendar layouts."""

from __future__ import annotations

from dataclasses import dataclass

from .theme import LAYOUT


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


def cell_offset(index: int, cell_size: int, cell_spacing: int, extra: float = 0) -> float:
    """Pixel offset of the ``index``-th cell along one axis."""
    return index * (cell_size + cell_spacing) + extra


def span(count: int, cell_size: int, cell_spacing: int) -> int:
    """Total extent of ``count`` cells with spacing between (not after) them."""
    if count <= 0:
        return 0
    return count * cell_size + (count - 1) * cell_spacing


def clamp_corner_radius(radius: int, cell_size: int) -> int:
    return max(0, min(radius, cell_size // 2))


def border_rect(cell: Rect, border_width: int) -> Rect | None:
    """Stroke box inset by half the stroke so the stroke stays inside ``cell``."""
    if border_width <= 0:
        return None
    inset = border_width / 2
    return Rect(
        cell.x + inset,
        cell.y + inset,
        max(cell.width - border_width, 0),
        max(cell.height - border_width, 0),
    )


def border_radius(corner_radius: int, border_width: int) -> float:
    """Corner radius of the inset border so it follows the fill's rounding."""
    return max(corner_radius - border_width / 2, 0)


def text_baseline(top: float, cell_size: int, font_size: int) -> float:
    """Baseline y that visually centers a line of text in a cell."""
    return top + cell_size / 2 + font_size * LAYOUT["baseline_shift"]


@dataclass(frozen=True)
class LinearCell:
    index: int
    score: int
    x: float
    y: float


@dataclass(frozen=True)
class LinearPlan:
    cells: tuple[LinearCell, ...]
    width: int
    height: int


def plan_linear(scores: list[int], cell_size: int, cell_spacing: int) -> LinearPlan:
    """One row of cells, left to right."""
    cells = tuple(
        LinearCell(i, score, cell_offset(i, cell_size, cell_spacing), 0)
        for i, score in enumerate(scores)
    )
    return LinearPlan(cells, span(len(cells), cell_size, cell_spacing), cell_size)
