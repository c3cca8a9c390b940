"""Image rendering service."""

import logging
import time
from dataclasses import dataclass
from typing import Protocol

from finite.domain.scene import Scene, SceneKind
from finite.domain.stats import CountdownStats, LifeStats, YearProgressStats
from finite.services.layout import compute_frame
from finite.services.scenes import build_scene

logger = logging.getLogger(__name__)

Stats = YearProgressStats | LifeStats | CountdownStats


class SceneRenderer(Protocol):
    """Turns a scene description into encoded image bytes."""

    def render(self, scene: Scene) -> bytes:
        """Return the encoded image."""


@dataclass
class RenderService:
    """Lays out statistics on a canvas and hands the scene to a renderer."""

    renderer: SceneRenderer

    def compose(  # noqa: PLR0913
        self,
        kind: SceneKind,
        stats: Stats,
        width: int,
        height: int,
        padding_top: int = 0,
        padding_bottom: int = 0,
    ) -> Scene:
        """Return the scene description without drawing it."""
        frame = compute_frame(width, height, padding_top, padding_bottom)
        return build_scene(kind, stats, frame)

    def render(  # noqa: PLR0913
        self,
        kind: SceneKind,
        stats: Stats,
        width: int,
        height: int,
        padding_top: int = 0,
        padding_bottom: int = 0,
    ) -> bytes:
        """Return image bytes for ``stats`` drawn as a ``kind`` scene."""
        started = time.perf_counter()
        scene = self.compose(kind, stats, width, height, padding_top, padding_bottom)
        payload = self.renderer.render(scene)
        logger.debug(
            "Rendered %s scene %sx%s (%s elements) in %.1f ms",
            kind,
            width,
            height,
            len(scene.elements),
            (time.perf_counter() - started) * 1000,
        )
        return payload
