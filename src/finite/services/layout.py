"""Proportional layout helpers for the 800x500 reference design."""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from finite.domain.scene import Color, DotElement

REFERENCE_WIDTH = 800
REFERENCE_HEIGHT = 500


@dataclass(frozen=True)
class LayoutFrame:
    """Canvas geometry with the padded content region and scale factors."""

    width: int
    height: int
    content_top: float
    content_bottom: float

    @property
    def content_height(self) -> float:
        return self.content_bottom - self.content_top

    @property
    def scale_x(self) -> float:
        return self.width / REFERENCE_WIDTH

    @property
    def scale_y(self) -> float:
        return self.content_height / REFERENCE_HEIGHT

    @property
    def scale(self) -> float:
        """Uniform factor bound by the more constrained dimension."""
        return min(self.scale_x, self.scale_y)

    @property
    def center_x(self) -> float:
        return self.width / 2

    def top(self, offset: float) -> float:
        """Y coordinate ``offset`` reference units below the content top."""
        return self.content_top + offset * self.scale_y

    def font(self, base_size: float) -> int:
        """Scaled font size, never below one pixel."""
        return max(1, round(base_size * self.scale))


def compute_frame(
    width: int, height: int, padding_top: int = 0, padding_bottom: int = 0
) -> LayoutFrame:
    """Build the frame for a canvas, reserving the padded bands."""
    if width < 1 or height < 1:
        raise ValueError("Canvas dimensions must be positive")
    content_bottom = height - padding_bottom
    if content_bottom - padding_top <= 0:
        raise ValueError("Content height must be positive")
    return LayoutFrame(
        width=width,
        height=height,
        content_top=padding_top,
        content_bottom=content_bottom,
    )


@dataclass(frozen=True)
class GridArea:
    """Rectangle reserved for a dot grid."""

    left: float
    top: float
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class DotGrid:
    """One dot per unit laid out in ``columns`` x ``rows`` cells."""

    area: GridArea
    columns: int
    rows: int
    total: int
    elapsed: int
    radius_ratio: float
    elapsed_start: Color
    elapsed_end: Color
    remaining: Color

    def cells(self) -> Iterator[DotElement]:
        """Yield a dot for every unit, skipping cells past ``total``."""
        if self.area.is_empty or self.columns < 1 or self.rows < 1:
            return
        spacing_x = self.area.width / self.columns
        spacing_y = self.area.height / self.rows
        radius = min(spacing_x, spacing_y) * self.radius_ratio
        for index in range(min(self.total, self.columns * self.rows)):
            row, col = divmod(index, self.columns)
            center = (
                self.area.left + col * spacing_x + spacing_x / 2,
                self.area.top + row * spacing_y + spacing_y / 2,
            )
            yield DotElement(center=center, radius=radius, fill=self.color_for(index))

    def color_for(self, index: int) -> Color:
        """Gradient color for elapsed cells, flat grey for the rest."""
        if index >= self.elapsed:
            return self.remaining
        return interpolate_color(
            self.elapsed_start, self.elapsed_end, index / self.total
        )


def best_fit_shape(total: int, aspect_ratio: float) -> tuple[int, int]:
    """Return ``(columns, rows)`` whose cells best match ``aspect_ratio``."""
    if total < 1:
        return 0, 0
    columns = max(1, math.ceil(math.sqrt(total * aspect_ratio)))
    rows = math.ceil(total / columns)
    while columns * rows < total:
        rows += 1
    return columns, rows


def interpolate_color(start: Color, end: Color, ratio: float) -> Color:
    """Linear RGB mix of ``start`` and ``end``; ``ratio`` is clamped to 0..1."""
    ratio = max(0.0, min(1.0, ratio))
    r, g, b = (round(s + (e - s) * ratio) for s, e in zip(start, end, strict=True))
    return r, g, b
