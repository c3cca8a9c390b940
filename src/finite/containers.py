"""Dependency container wiring for the application."""

from dataclasses import dataclass

from finite.adapters.pillow_renderer import PillowSceneRenderer
from finite.config import Settings
from finite.services.render import RenderService
from finite.services.stats import StatsService, SystemClock


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    stats_service: StatsService
    render_service: RenderService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        stats_service=StatsService(clock=SystemClock()),
        render_service=RenderService(renderer=PillowSceneRenderer()),
    )
