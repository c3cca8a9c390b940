"""Tests for scene composition."""

from datetime import UTC, datetime

import pytest

from finite.domain.scene import (
    CardElement,
    GradientTextElement,
    ProgressBarElement,
    SceneKind,
    StarElement,
    TextElement,
)
from finite.services.layout import compute_frame
from finite.services.scenes import REMAINING_DOT, build_scene
from finite.services.stats import (
    compute_countdown,
    compute_life_days,
    compute_life_weeks,
    compute_year_progress,
)

BIRTHDAY_2024 = datetime(2024, 5, 15, 12, 0, tzinfo=UTC)


def _texts(scene) -> list[str]:
    return [e.text for e in scene.elements if isinstance(e, TextElement)]


def _cards(scene) -> list[CardElement]:
    return [e for e in scene.elements if isinstance(e, CardElement)]


def test_year_scene_draws_one_colored_dot_per_day_passed() -> None:
    stats = compute_year_progress("UTC", now=datetime(2023, 2, 3, tzinfo=UTC))

    scene = build_scene(SceneKind.YEAR, stats, compute_frame(800, 500))

    dots = scene.dots()
    assert len(dots) == 365
    assert len([dot for dot in dots if dot.fill != REMAINING_DOT]) == 34
    assert "Year 2023 Progress" in _texts(scene)
    assert "9.3%" in _texts(scene)


def test_year_scene_has_progress_bar_and_cards() -> None:
    stats = compute_year_progress("UTC", now=datetime(2023, 2, 3, tzinfo=UTC))

    scene = build_scene(SceneKind.YEAR, stats, compute_frame(800, 500))

    bars = [e for e in scene.elements if isinstance(e, ProgressBarElement)]
    assert len(bars) == 1
    assert bars[0].fraction == pytest.approx(34 / 365)
    assert bars[0].box == pytest.approx((50, 100, 750, 150))
    assert [(c.label, c.value) for c in _cards(scene)] == [
        ("Days Passed", "34"),
        ("Days Remaining", "331"),
        ("Remaining", "90.7%"),
    ]


def test_cards_are_centered_as_a_row() -> None:
    stats = compute_year_progress("UTC", now=datetime(2023, 2, 3, tzinfo=UTC))

    scene = build_scene(SceneKind.YEAR, stats, compute_frame(800, 500))

    cards = _cards(scene)
    left = cards[0].box[0]
    right = cards[-1].box[2]
    assert left == pytest.approx(800 - right)


def test_life_weeks_scene_grid() -> None:
    stats = compute_life_weeks("1990-05-15", "UTC", 80, now=BIRTHDAY_2024)

    scene = build_scene(SceneKind.LIFE_WEEKS, stats, compute_frame(800, 500))

    dots = scene.dots()
    assert len(dots) == 52 * 80
    assert len([dot for dot in dots if dot.fill != REMAINING_DOT]) == 1774
    assert "Life in Weeks" in _texts(scene)
    assert "34 years old • 80 year lifespan" in _texts(scene)
    assert [c.value for c in _cards(scene)] == ["1,774", "2,386", "42.6%"]


def test_life_days_scene_grid_is_bounded_by_rows() -> None:
    stats = compute_life_days("1990-05-15", "UTC", 80, now=BIRTHDAY_2024)

    scene = build_scene(
        SceneKind.LIFE_DAYS, stats, compute_frame(1290, 2796, 540, 560)
    )

    dots = scene.dots()
    assert len(dots) == 365 * 80
    assert len([dot for dot in dots if dot.fill != REMAINING_DOT]) == 12419
    assert [c.label for c in _cards(scene)] == ["Days Lived", "Days Left", "Life Lived"]


def test_life_scene_rejects_mismatched_unit() -> None:
    stats = compute_life_weeks("1990-05-15", "UTC", 80, now=BIRTHDAY_2024)

    with pytest.raises(TypeError):
        build_scene(SceneKind.LIFE_DAYS, stats, compute_frame(800, 500))


def test_scene_kind_must_match_stats() -> None:
    stats = compute_year_progress("UTC", now=BIRTHDAY_2024)

    with pytest.raises(TypeError):
        build_scene(SceneKind.COUNTDOWN, stats, compute_frame(800, 500))


def test_future_countdown_scene() -> None:
    stats = compute_countdown(
        "2030-01-01", "UTC", "Launch", now=datetime(2024, 6, 1, tzinfo=UTC)
    )

    scene = build_scene(SceneKind.COUNTDOWN, stats, compute_frame(800, 500))

    assert scene.dots() == []
    texts = _texts(scene)
    assert texts[:3] == ["Countdown to", "Launch", "January 1, 2030"]
    assert "days to go" in texts
    big = [e for e in scene.elements if isinstance(e, GradientTextElement)]
    assert big[0].text == "2,040"
    assert [c.label for c in _cards(scene)] == ["Weeks", "Months", "Hours"]
    assert _cards(scene)[2].value == "48,960"


def test_past_countdown_scene_uses_muted_gradient() -> None:
    stats = compute_countdown("2020-01-01", "UTC", "Event", now=BIRTHDAY_2024)

    scene = build_scene(SceneKind.COUNTDOWN, stats, compute_frame(800, 500))

    assert _texts(scene)[0] == "Since"
    assert "days ago" in _texts(scene)
    big = [e for e in scene.elements if isinstance(e, GradientTextElement)]
    assert big[0].gradient.start == (160, 174, 192)


def test_countdown_today_shows_star_without_cards() -> None:
    stats = compute_countdown("2024-05-15", "UTC", "Birthday", now=BIRTHDAY_2024)

    scene = build_scene(SceneKind.COUNTDOWN, stats, compute_frame(800, 500))

    assert _texts(scene)[0] == "TODAY"
    assert len([e for e in scene.elements if isinstance(e, StarElement)]) == 1
    assert _cards(scene) == []
    assert not [e for e in scene.elements if isinstance(e, GradientTextElement)]
