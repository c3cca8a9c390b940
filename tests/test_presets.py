"""Tests for canvas resolution."""

import pytest

from finite.api.presets import DEVICE_PRESETS, Canvas, resolve_canvas
from finite.domain.errors import InvalidRequest


def test_defaults_to_reference_canvas() -> None:
    assert resolve_canvas() == Canvas(width=800, height=500)


@pytest.mark.parametrize("name", sorted(DEVICE_PRESETS))
def test_presets_are_valid(name: str) -> None:
    assert resolve_canvas(name) == DEVICE_PRESETS[name]


def test_preset_ignores_explicit_values() -> None:
    canvas = resolve_canvas("iphone-pro", width=500, padding_top=0)

    assert canvas == Canvas(
        width=1179, height=2556, padding_top=200, padding_bottom=300
    )


def test_explicit_dimensions_and_padding() -> None:
    canvas = resolve_canvas(None, 1000, 2000, 100, 150)

    assert canvas == Canvas(
        width=1000, height=2000, padding_top=100, padding_bottom=150
    )


@pytest.mark.parametrize(("width", "height"), [(400, 300), (3000, 4000)])
def test_bounds_are_inclusive(width: int, height: int) -> None:
    assert resolve_canvas(width=width, height=height).width == width


def test_unknown_preset_lists_known_ones() -> None:
    with pytest.raises(InvalidRequest, match="iphone-standard"):
        resolve_canvas("galaxy")
