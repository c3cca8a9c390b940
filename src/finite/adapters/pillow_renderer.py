"""Pillow implementation of the scene renderer."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from io import BytesIO

from PIL import Image, ImageChops, ImageDraw, ImageFont

from finite.domain.scene import (
    Box,
    CardElement,
    DotElement,
    Gradient,
    GradientTextElement,
    ProgressBarElement,
    Scene,
    SceneElement,
    StarElement,
    TextElement,
)

logger = logging.getLogger(__name__)

FONT_FILES = {
    False: "DejaVuSans.ttf",
    True: "DejaVuSans-Bold.ttf",
}
CARD_FILL = (255, 255, 255, 26)
TEXT_ANCHOR = "ms"
STAR_POINTS = 5
STAR_INNER_RATIO = 0.4

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


@lru_cache(maxsize=64)
def load_font(size: int, bold: bool = False) -> Font:
    """Load DejaVu Sans at ``size``, falling back to Pillow's bundled font."""
    try:
        return ImageFont.truetype(FONT_FILES[bold], size)
    except OSError:
        logger.debug("DejaVu Sans not available, using default font at %s", size)
        return ImageFont.load_default(size=size)


@dataclass
class PillowSceneRenderer:
    """Draws a ``Scene`` onto an RGB canvas and encodes it as PNG."""

    def render(self, scene: Scene) -> bytes:
        """Return PNG bytes for ``scene``."""
        image = _gradient_fill(
            (scene.width, scene.height), scene.background, _diagonal_mask
        )
        draw = ImageDraw.Draw(image, "RGBA")
        for element in scene.elements:
            self._draw(image, draw, element)
        buffer = BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

    def _draw(
        self, image: Image.Image, draw: ImageDraw.ImageDraw, element: SceneElement
    ) -> None:
        if isinstance(element, DotElement):
            x, y = element.center
            r = element.radius
            draw.ellipse((x - r, y - r, x + r, y + r), fill=element.fill)
        elif isinstance(element, TextElement):
            draw.text(
                element.position,
                element.text,
                fill=element.fill,
                font=load_font(element.size, element.bold),
                anchor=TEXT_ANCHOR,
            )
        elif isinstance(element, CardElement):
            _draw_card(draw, element)
        elif isinstance(element, ProgressBarElement):
            _draw_progress_bar(image, draw, element)
        elif isinstance(element, GradientTextElement):
            _draw_gradient_text(image, element)
        elif isinstance(element, StarElement):
            points = _star_points(element.center, element.radius)
            draw.polygon(points, fill=element.fill)
        else:
            raise TypeError(f"Unsupported scene element: {element!r}")


def _draw_card(draw: ImageDraw.ImageDraw, card: CardElement) -> None:
    left, top, right, bottom = card.box
    height = bottom - top
    center_x = (left + right) / 2
    draw.rounded_rectangle(card.box, radius=card.radius, fill=CARD_FILL)
    draw.rounded_rectangle(
        card.box, radius=card.radius, outline=card.border, width=card.border_width
    )
    draw.text(
        (center_x, top + height * 0.5),
        card.value,
        fill=(255, 255, 255),
        font=load_font(card.value_size, bold=True),
        anchor=TEXT_ANCHOR,
    )
    draw.text(
        (center_x, top + height * 0.8),
        card.label,
        fill=card.border,
        font=load_font(card.label_size),
        anchor=TEXT_ANCHOR,
    )


def _draw_progress_bar(
    image: Image.Image, draw: ImageDraw.ImageDraw, bar: ProgressBarElement
) -> None:
    draw.rounded_rectangle(bar.box, radius=bar.radius, fill=bar.track)
    left, top, right, bottom = _pixel_box(bar.box)
    width, height = right - left, bottom - top
    fill_width = round(width * bar.fraction)
    if fill_width <= 0 or height <= 0:
        return
    strip = _gradient_fill((width, height), bar.fill, _horizontal_mask)
    mask = Image.new("L", (width, height), 0)
    radius = min(bar.radius, fill_width / 2, height / 2)
    ImageDraw.Draw(mask).rounded_rectangle(
        (0, 0, fill_width - 1, height - 1), radius=radius, fill=255
    )
    image.paste(strip, (left, top), mask)


def _draw_gradient_text(image: Image.Image, element: GradientTextElement) -> None:
    mask = Image.new("L", image.size, 0)
    ImageDraw.Draw(mask).text(
        element.position,
        element.text,
        fill=255,
        font=load_font(element.size, element.bold),
        anchor=TEXT_ANCHOR,
    )

    def band(size: tuple[int, int]) -> Image.Image:
        return _vertical_band_mask(size, element.top, element.bottom)

    image.paste(_gradient_fill(image.size, element.gradient, band), (0, 0), mask)


def _gradient_fill(
    size: tuple[int, int],
    gradient: Gradient,
    mask_factory: Callable[[tuple[int, int]], Image.Image],
) -> Image.Image:
    """Blend the two gradient stops through a 0..255 ramp mask."""
    start = Image.new("RGB", size, gradient.start)
    end = Image.new("RGB", size, gradient.end)
    return Image.composite(end, start, mask_factory(size))


def _diagonal_mask(size: tuple[int, int]) -> Image.Image:
    """Ramp from the top-left corner to the bottom-right corner.

    The gradient parameter ``(x*w + y*h) / (w*w + h*h)`` is a sum of a
    horizontal and a vertical term, so two 1-pixel ramps are stretched and
    added instead of evaluating every pixel.
    """
    width, height = size
    norm = width * width + height * height
    horizontal = _ramp([255 * x * width / norm for x in range(width)], size, "x")
    vertical = _ramp([255 * y * height / norm for y in range(height)], size, "y")
    return ImageChops.add(horizontal, vertical)


def _horizontal_mask(size: tuple[int, int]) -> Image.Image:
    width, _ = size
    span = max(width - 1, 1)
    return _ramp([255 * x / span for x in range(width)], size, "x")


def _vertical_band_mask(
    size: tuple[int, int], top: float, bottom: float
) -> Image.Image:
    _, height = size
    span = max(bottom - top, 1.0)
    values = [255 * min(1.0, max(0.0, (y - top) / span)) for y in range(height)]
    return _ramp(values, size, "y")


def _ramp(values: list[float], size: tuple[int, int], axis: str) -> Image.Image:
    strip_size = (len(values), 1) if axis == "x" else (1, len(values))
    strip = Image.new("L", strip_size)
    strip.putdata([round(value) for value in values])
    return strip.resize(size, Image.Resampling.NEAREST)


def _pixel_box(box: Box) -> tuple[int, int, int, int]:
    left, top, right, bottom = (round(value) for value in box)
    return left, top, right, bottom


def _star_points(
    center: tuple[float, float], radius: float
) -> list[tuple[float, float]]:
    cx, cy = center
    inner = radius * STAR_INNER_RATIO
    points = []
    for index in range(STAR_POINTS * 2):
        r = radius if index % 2 == 0 else inner
        angle = -math.pi / 2 + index * math.pi / STAR_POINTS
        points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
    return points
