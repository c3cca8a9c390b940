"""Scene composition for each image variant.

Every variant shares the same skeleton: gradient background, a centered
title block, a row of three stat cards and, for the progress variants, a
dot grid filling the rest of the content area. ``SceneBuilder`` collects
those pieces into an immutable ``Scene`` that the renderer draws in a single
pass.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

from finite.domain.scene import (
    CardElement,
    Color,
    Gradient,
    GradientTextElement,
    ProgressBarElement,
    Scene,
    SceneElement,
    SceneKind,
    StarElement,
    TextElement,
    hex_to_rgb,
)
from finite.domain.stats import CountdownStats, LifeStats, YearProgressStats
from finite.services.layout import (
    DotGrid,
    GridArea,
    LayoutFrame,
    best_fit_shape,
)

BACKGROUND = Gradient(start=hex_to_rgb("#1a1a2e"), end=hex_to_rgb("#16213e"))
WHITE = hex_to_rgb("#ffffff")
MUTED = hex_to_rgb("#a0aec0")
BAR_TRACK = hex_to_rgb("#2d3748")
REMAINING_DOT = hex_to_rgb("#3d4555")
INDIGO = hex_to_rgb("#667eea")
PURPLE = hex_to_rgb("#764ba2")
PINK = hex_to_rgb("#f093fb")
TEAL = hex_to_rgb("#4fd1c5")
SLATE = hex_to_rgb("#718096")
CARD_COLORS = (INDIGO, PINK, TEAL)

LIFE_TITLES = {
    SceneKind.LIFE_WEEKS: "Life in Weeks",
    SceneKind.LIFE_DAYS: "Life in Days",
}
LIFE_COLUMNS = {SceneKind.LIFE_WEEKS: 52, SceneKind.LIFE_DAYS: 365}
LIFE_UNITS = {SceneKind.LIFE_WEEKS: "week", SceneKind.LIFE_DAYS: "day"}


@dataclass(frozen=True)
class StatCard:
    """Content of one stat card."""

    label: str
    value: str


@dataclass(frozen=True)
class CardRow:
    """Geometry of a row of cards, in reference units."""

    top: float
    width: float
    height: float
    gap: float
    content_scale: float = 1.0


class SceneBuilder:
    """Fluent builder that lays out elements against a ``LayoutFrame``."""

    def __init__(self, frame: LayoutFrame, background: Gradient = BACKGROUND) -> None:
        self.frame = frame
        self.background = background
        self._elements: list[SceneElement] = []

    def text(  # noqa: PLR0913
        self,
        y: float,
        text: str,
        *,
        size: float,
        fill: Color = WHITE,
        bold: bool = False,
    ) -> Self:
        """Add a horizontally centered line with its baseline at ``y``."""
        self._elements.append(
            TextElement(
                position=(self.frame.center_x, y),
                text=text,
                size=self.frame.font(size),
                fill=fill,
                bold=bold,
            )
        )
        return self

    def gradient_text(  # noqa: PLR0913
        self,
        y: float,
        text: str,
        *,
        size: float,
        gradient: Gradient,
        top: float,
        bottom: float,
    ) -> Self:
        """Add a centered bold line filled with a vertical gradient."""
        self._elements.append(
            GradientTextElement(
                position=(self.frame.center_x, y),
                text=text,
                size=self.frame.font(size),
                gradient=gradient,
                top=top,
                bottom=bottom,
            )
        )
        return self

    def progress_bar(self, top: float, fraction: float) -> Self:
        """Add the full-width progress bar."""
        frame = self.frame
        left = 50 * frame.scale_x
        width = frame.width - 100 * frame.scale_x
        height = 50 * frame.scale
        self._elements.append(
            ProgressBarElement(
                box=(left, top, left + width, top + height),
                radius=25 * frame.scale,
                track=BAR_TRACK,
                fill=Gradient(start=INDIGO, end=PURPLE),
                fraction=max(0.0, min(1.0, fraction)),
            )
        )
        return self

    def cards(self, row: CardRow, cards: Sequence[StatCard]) -> Self:
        """Add a horizontally centered row of cards."""
        scale = self.frame.scale
        width = row.width * scale
        height = row.height * scale
        gap = row.gap * scale
        content_scale = scale * row.content_scale
        start_x = (self.frame.width - (len(cards) * width + (len(cards) - 1) * gap)) / 2
        for index, (card, color) in enumerate(zip(cards, CARD_COLORS, strict=False)):
            left = start_x + index * (width + gap)
            self._elements.append(
                CardElement(
                    box=(left, row.top, left + width, row.top + height),
                    radius=15 * content_scale,
                    border=color,
                    border_width=max(1, round(3 * content_scale)),
                    value=card.value,
                    value_size=self.frame.font(42 * row.content_scale),
                    label=card.label,
                    label_size=self.frame.font(18 * row.content_scale),
                )
            )
        return self

    def star(self, center_y: float, radius: float, fill: Color) -> Self:
        """Add the celebration glyph, centered horizontally."""
        self._elements.append(
            StarElement(
                center=(self.frame.center_x, center_y), radius=radius, fill=fill
            )
        )
        return self

    def dot_grid(self, grid: DotGrid) -> Self:
        """Add one dot per grid cell."""
        self._elements.extend(grid.cells())
        return self

    def build(self) -> Scene:
        """Freeze the collected elements into a ``Scene``."""
        return Scene(
            width=self.frame.width,
            height=self.frame.height,
            background=self.background,
            elements=tuple(self._elements),
        )


def build_scene(
    kind: SceneKind,
    stats: YearProgressStats | LifeStats | CountdownStats,
    frame: LayoutFrame,
) -> Scene:
    """Compose the scene for ``kind`` from a matching statistics record."""
    kind = SceneKind(kind)
    if kind is SceneKind.YEAR and isinstance(stats, YearProgressStats):
        return year_progress_scene(stats, frame)
    if kind in LIFE_COLUMNS and isinstance(stats, LifeStats):
        return life_scene(kind, stats, frame)
    if kind is SceneKind.COUNTDOWN and isinstance(stats, CountdownStats):
        return countdown_scene(stats, frame)
    raise TypeError(f"{type(stats).__name__} cannot be rendered as a {kind} scene")


def year_progress_scene(stats: YearProgressStats, frame: LayoutFrame) -> Scene:
    scale = frame.scale
    bar_top = frame.top(100)
    bar_height = 50 * scale
    card_top = bar_top + bar_height + 20 * scale
    card_row = CardRow(top=card_top, width=220, height=120, gap=30)
    dots_top = card_top + card_row.height * scale + 40 * scale
    area = GridArea(
        left=40 * frame.scale_x,
        top=dots_top,
        width=frame.width - 80 * frame.scale_x,
        height=frame.content_bottom - dots_top - 20 * scale,
    )
    columns, rows = (0, 0)
    if not area.is_empty:
        columns, rows = best_fit_shape(stats.total_units, area.width / area.height)

    return (
        SceneBuilder(frame)
        .text(frame.top(70), f"Year {stats.year} Progress", size=48, bold=True)
        .progress_bar(bar_top, stats.units_elapsed / stats.total_units)
        .text(
            bar_top + bar_height * 0.7,
            f"{stats.percentage_elapsed:g}%",
            size=24,
            bold=True,
        )
        .cards(
            card_row,
            [
                StatCard("Days Passed", str(stats.units_elapsed)),
                StatCard("Days Remaining", str(stats.units_remaining)),
                StatCard("Remaining", f"{stats.percentage_remaining:g}%"),
            ],
        )
        .dot_grid(
            DotGrid(
                area=area,
                columns=columns,
                rows=rows,
                total=stats.total_units,
                elapsed=stats.units_elapsed,
                radius_ratio=0.35,
                elapsed_start=INDIGO,
                elapsed_end=PURPLE,
                remaining=REMAINING_DOT,
            )
        )
        .build()
    )


def life_scene(kind: SceneKind, stats: LifeStats, frame: LayoutFrame) -> Scene:
    """Weeks or days of a lifespan, one grid row per year of life."""
    if stats.unit != LIFE_UNITS[kind]:
        raise TypeError(f"{stats.unit} statistics cannot be rendered as a {kind} scene")
    unit = "Weeks" if kind is SceneKind.LIFE_WEEKS else "Days"
    scale = frame.scale
    card_row = CardRow(
        top=frame.top(120), width=200, height=90, gap=25, content_scale=0.85
    )
    dots_top = card_row.top + card_row.height * scale + 30 * scale
    area = GridArea(
        left=30 * frame.scale_x,
        top=dots_top,
        width=frame.width - 60 * frame.scale_x,
        height=frame.content_bottom - dots_top - 10 * scale,
    )

    return (
        SceneBuilder(frame)
        .text(frame.top(60), LIFE_TITLES[kind], size=44, bold=True)
        .text(
            frame.top(95),
            f"{stats.current_age:g} years old • {stats.max_age} year lifespan",
            size=22,
            fill=MUTED,
        )
        .cards(
            card_row,
            [
                StatCard(f"{unit} Lived", f"{stats.units_elapsed:,}"),
                StatCard(f"{unit} Left", f"{stats.units_remaining:,}"),
                StatCard("Life Lived", f"{stats.percentage_elapsed:g}%"),
            ],
        )
        .dot_grid(
            DotGrid(
                area=area,
                columns=LIFE_COLUMNS[kind],
                rows=stats.max_age,
                total=stats.total_units,
                elapsed=stats.units_elapsed,
                radius_ratio=0.4,
                elapsed_start=INDIGO,
                elapsed_end=PINK,
                remaining=REMAINING_DOT,
            )
        )
        .build()
    )


def countdown_scene(stats: CountdownStats, frame: LayoutFrame) -> Scene:
    """Big day count towards (or since) a target date."""
    scale = frame.scale
    if stats.is_today:
        heading = "TODAY"
    elif stats.is_past:
        heading = "Since"
    else:
        heading = "Countdown to"

    builder = (
        SceneBuilder(frame)
        .text(frame.top(50), heading, size=28, fill=MUTED)
        .text(frame.top(110), stats.title, size=48, bold=True)
        .text(frame.top(150), format_long_date(stats), size=22, fill=MUTED)
    )
    if stats.is_today:
        return builder.star(frame.top(300) - 45 * scale, 60 * scale, TEAL).build()

    gradient = (
        Gradient(start=MUTED, end=SLATE)
        if stats.is_past
        else Gradient(start=INDIGO, end=PURPLE)
    )
    return (
        builder.gradient_text(
            frame.top(310),
            f"{stats.days_remaining:,}",
            size=140,
            gradient=gradient,
            top=frame.top(180),
            bottom=frame.top(320),
        )
        .text(
            frame.top(360),
            "days ago" if stats.is_past else "days to go",
            size=32,
        )
        .cards(
            CardRow(
                top=frame.top(390), width=180, height=80, gap=25, content_scale=0.8
            ),
            [
                StatCard("Weeks", f"{stats.weeks_remaining:,}"),
                StatCard("Months", f"{stats.months_remaining:,}"),
                StatCard("Hours", f"{stats.hours_remaining:,}"),
            ],
        )
        .build()
    )


def format_long_date(stats: CountdownStats) -> str:
    """Format the target as e.g. ``January 1, 2020``."""
    target = stats.target_date
    return f"{target:%B} {target.day}, {target.year}"
