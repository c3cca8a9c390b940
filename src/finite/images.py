"""Render statistics records straight to PNG with the Pillow renderer."""

from finite.adapters.pillow_renderer import PillowSceneRenderer
from finite.domain.scene import SceneKind
from finite.domain.stats import CountdownStats, LifeStats, YearProgressStats
from finite.services.render import RenderService, Stats

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def render_scene(  # noqa: PLR0913
    kind: SceneKind,
    stats: Stats,
    width: int,
    height: int,
    padding_top: int = 0,
    padding_bottom: int = 0,
) -> bytes:
    """Return a ``width`` x ``height`` PNG of ``stats`` drawn as ``kind``."""
    service = RenderService(renderer=PillowSceneRenderer())
    return service.render(kind, stats, width, height, padding_top, padding_bottom)


def render_year_progress(
    stats: YearProgressStats,
    width: int,
    height: int,
    padding_top: int = 0,
    padding_bottom: int = 0,
) -> bytes:
    return render_scene(
        SceneKind.YEAR, stats, width, height, padding_top, padding_bottom
    )


def render_life_weeks(
    stats: LifeStats,
    width: int,
    height: int,
    padding_top: int = 0,
    padding_bottom: int = 0,
) -> bytes:
    return render_scene(
        SceneKind.LIFE_WEEKS, stats, width, height, padding_top, padding_bottom
    )


def render_life_days(
    stats: LifeStats,
    width: int,
    height: int,
    padding_top: int = 0,
    padding_bottom: int = 0,
) -> bytes:
    return render_scene(
        SceneKind.LIFE_DAYS, stats, width, height, padding_top, padding_bottom
    )


def render_countdown(
    stats: CountdownStats,
    width: int,
    height: int,
    padding_top: int = 0,
    padding_bottom: int = 0,
) -> bytes:
    return render_scene(
        SceneKind.COUNTDOWN, stats, width, height, padding_top, padding_bottom
    )
