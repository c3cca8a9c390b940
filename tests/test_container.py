"""Tests for container wiring."""

from finite.adapters.pillow_renderer import PillowSceneRenderer
from finite.containers import build_container
from finite.services.stats import SystemClock


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert isinstance(container.stats_service.clock, SystemClock)
    assert isinstance(container.render_service.renderer, PillowSceneRenderer)
