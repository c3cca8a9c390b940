"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import NoReturn

import pytest

from finite.adapters.pillow_renderer import PillowSceneRenderer
from finite.config import Settings
from finite.containers import AppContainer
from finite.domain.scene import Scene
from finite.services.render import RenderService, SceneRenderer
from finite.services.stats import Clock, StatsService

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@dataclass
class FixedClock(Clock):
    """Clock frozen at a single instant."""

    instant: datetime = field(
        default_factory=lambda: datetime(2024, 6, 1, 12, 0, tzinfo=UTC)
    )

    def now(self) -> datetime:
        return self.instant


@dataclass
class RecordingRenderer(SceneRenderer):
    """Renderer that keeps every scene and returns a stub payload."""

    scenes: list[Scene] = field(default_factory=list)

    def render(self, scene: Scene) -> bytes:
        self.scenes.append(scene)
        return PNG_SIGNATURE + b"stub"


@dataclass
class FailingRenderer(SceneRenderer):
    """Renderer that always blows up."""

    def render(self, scene: Scene) -> bytes:
        raise RuntimeError("renderer exploded")


@dataclass
class FailingStatsService(StatsService):
    """Stats service whose year and countdown computations fail."""

    def year_progress(self, timezone_name: str) -> NoReturn:
        raise RuntimeError("clock exploded")

    def countdown(
        self, target_date: str, timezone_name: str, title: str
    ) -> NoReturn:
        raise RuntimeError("clock exploded")


@pytest.fixture
def settings() -> Settings:
    return Settings(default_timezone="UTC", log_level="INFO")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def stats_service(clock: FixedClock) -> StatsService:
    return StatsService(clock=clock)


@pytest.fixture
def container(settings: Settings, stats_service: StatsService) -> AppContainer:
    return AppContainer(
        settings=settings,
        stats_service=stats_service,
        render_service=RenderService(renderer=PillowSceneRenderer()),
    )
