"""Tests for the Pillow scene renderer."""

from datetime import UTC, datetime
from io import BytesIO

import pytest
from PIL import Image

from finite.adapters.pillow_renderer import PillowSceneRenderer, load_font
from finite.domain.scene import Gradient, Scene, SceneKind, StarElement
from finite.images import (
    render_countdown,
    render_life_days,
    render_life_weeks,
    render_scene,
    render_year_progress,
)
from finite.services.stats import (
    compute_countdown,
    compute_life_days,
    compute_life_weeks,
    compute_year_progress,
)
from tests.conftest import PNG_SIGNATURE

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=UTC)


def _decode(payload: bytes) -> Image.Image:
    assert payload.startswith(PNG_SIGNATURE)
    image = Image.open(BytesIO(payload))
    image.load()
    return image


@pytest.mark.parametrize(
    ("width", "height", "padding_top", "padding_bottom"),
    [(800, 500, 0, 0), (1170, 2532, 200, 300), (1290, 2796, 540, 560)],
)
def test_every_variant_renders_at_requested_size(
    width: int, height: int, padding_top: int, padding_bottom: int
) -> None:
    payloads = [
        render_year_progress(
            compute_year_progress("UTC", now=NOW),
            width,
            height,
            padding_top,
            padding_bottom,
        ),
        render_life_weeks(
            compute_life_weeks("1990-05-15", "UTC", 80, now=NOW),
            width,
            height,
            padding_top,
            padding_bottom,
        ),
        render_life_days(
            compute_life_days("1990-05-15", "UTC", 80, now=NOW),
            width,
            height,
            padding_top,
            padding_bottom,
        ),
        render_countdown(
            compute_countdown("2030-01-01", "UTC", "Launch", now=NOW),
            width,
            height,
            padding_top,
            padding_bottom,
        ),
    ]

    for payload in payloads:
        image = _decode(payload)
        assert image.format == "PNG"
        assert image.size == (width, height)


def test_background_starts_at_top_left_gradient_color() -> None:
    payload = render_scene(
        SceneKind.YEAR, compute_year_progress("UTC", now=NOW), 800, 500
    )

    image = _decode(payload).convert("RGB")
    assert image.getpixel((0, 0)) == (26, 26, 46)


def test_countdown_today_renders() -> None:
    stats = compute_countdown("2024-05-15", "UTC", "Birthday", now=NOW)

    image = _decode(render_countdown(stats, 400, 300))

    assert image.size == (400, 300)


def test_star_is_drawn_in_its_fill_color() -> None:
    scene = Scene(
        width=400,
        height=300,
        background=Gradient(start=(0, 0, 0), end=(0, 0, 0)),
        elements=(StarElement(center=(200, 150), radius=60, fill=(79, 209, 197)),),
    )

    image = _decode(PillowSceneRenderer().render(scene)).convert("RGB")

    assert image.getpixel((200, 150)) == (79, 209, 197)
    assert image.getpixel((10, 10)) == (0, 0, 0)


def test_load_font_is_cached() -> None:
    assert load_font(24, bold=True) is load_font(24, bold=True)
