"""Immutable scene description consumed by the image renderer."""

from dataclasses import dataclass, field
from enum import StrEnum

Color = tuple[int, int, int]
Point = tuple[float, float]
Box = tuple[float, float, float, float]


class SceneKind(StrEnum):
    """Supported image variants."""

    YEAR = "year"
    LIFE_WEEKS = "life-weeks"
    LIFE_DAYS = "life-days"
    COUNTDOWN = "countdown"


def hex_to_rgb(value: str) -> Color:
    """Convert ``#rrggbb`` into an RGB tuple."""
    h = value.strip().lstrip("#")
    if len(h) != 6:
        raise ValueError(f"Invalid hex color: {value}")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


@dataclass(frozen=True)
class Gradient:
    """Two-stop linear gradient between ``start`` and ``end``."""

    start: Color
    end: Color


@dataclass(frozen=True)
class TextElement:
    """Single line of text anchored at its horizontal center and baseline."""

    position: Point
    text: str
    size: int
    fill: Color
    bold: bool = False


@dataclass(frozen=True)
class GradientTextElement:
    """Text filled with a vertical gradient spanning ``top`` to ``bottom``."""

    position: Point
    text: str
    size: int
    gradient: Gradient
    top: float
    bottom: float
    bold: bool = True


@dataclass(frozen=True)
class CardElement:
    """Stat card: translucent rounded box with a value and a label."""

    box: Box
    radius: float
    border: Color
    border_width: int
    value: str
    value_size: int
    label: str
    label_size: int


@dataclass(frozen=True)
class ProgressBarElement:
    """Rounded progress bar filled left to right with a gradient."""

    box: Box
    radius: float
    track: Color
    fill: Gradient
    fraction: float


@dataclass(frozen=True)
class DotElement:
    """Filled circle."""

    center: Point
    radius: float
    fill: Color


@dataclass(frozen=True)
class StarElement:
    """Five-pointed star, used as the celebration glyph."""

    center: Point
    radius: float
    fill: Color


SceneElement = (
    TextElement
    | GradientTextElement
    | CardElement
    | ProgressBarElement
    | DotElement
    | StarElement
)


@dataclass(frozen=True)
class Scene:
    """Everything needed to draw one image, in drawing order."""

    width: int
    height: int
    background: Gradient
    elements: tuple[SceneElement, ...] = field(default_factory=tuple)

    def dots(self) -> list[DotElement]:
        """Return the dot-grid cells in drawing order."""
        return [element for element in self.elements if isinstance(element, DotElement)]
