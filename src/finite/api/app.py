"""FastAPI application factory."""

import logging
import re
from collections.abc import Callable
from dataclasses import asdict
from typing import Annotated

from fastapi import Depends, FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from finite.api.presets import DEVICE_PRESETS, Canvas, resolve_canvas
from finite.api.schemas import PresetInfo, YearStatsResponse
from finite.app_logging import configure_logging
from finite.containers import AppContainer
from finite.domain.errors import InvalidRequest, StatsError
from finite.domain.scene import SceneKind
from finite.services.render import Stats

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
DEFAULT_MAX_AGE = 80
MIN_MAX_AGE, MAX_MAX_AGE = 1, 150
DEFAULT_TITLE = "Event"
MAX_TITLE_LENGTH = 50
PNG_MEDIA_TYPE = "image/png"

logger = logging.getLogger(__name__)


def canvas_params(
    preset: str | None = None,
    width: int | None = None,
    height: int | None = None,
    padding_top: Annotated[int | None, Query(alias="paddingTop")] = None,
    padding_bottom: Annotated[int | None, Query(alias="paddingBottom")] = None,
) -> Canvas:
    """Resolve the canvas from a preset or explicit query parameters."""
    return resolve_canvas(preset, width, height, padding_top, padding_bottom)


def timezone_param(request: Request, timezone: str | None = None) -> str:
    """Return the requested timezone or the configured default."""
    container: AppContainer = request.app.state.container
    return timezone or container.settings.default_timezone


def max_age_param(
    max_age: Annotated[int, Query(alias="maxAge")] = DEFAULT_MAX_AGE,
) -> int:
    """Return the lifespan in years, validated to 1-150."""
    if not MIN_MAX_AGE <= max_age <= MAX_MAX_AGE:
        raise InvalidRequest(
            f"maxAge must be between {MIN_MAX_AGE} and {MAX_MAX_AGE}"
        )
    return max_age


CanvasParam = Annotated[Canvas, Depends(canvas_params)]
TimezoneParam = Annotated[str, Depends(timezone_param)]
MaxAgeParam = Annotated[int, Depends(max_age_param)]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="Finite API")
    app.state.container = container

    @app.exception_handler(StatsError)
    async def stats_error_handler(
        request: Request, exc: StatsError
    ) -> JSONResponse:
        return _error(str(exc))

    @app.exception_handler(InvalidRequest)
    async def invalid_request_handler(
        request: Request, exc: InvalidRequest
    ) -> JSONResponse:
        return _error(str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error(_describe_validation_error(exc))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.get("/")
    async def index() -> dict[str, object]:
        """Describe the available endpoints and parameters."""
        return _API_DESCRIPTION

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/stats")
    async def year_stats(
        request: Request, timezone: TimezoneParam
    ) -> YearStatsResponse:
        """Return year progress statistics as JSON."""
        state_container: AppContainer = request.app.state.container
        stats = state_container.stats_service.year_progress(timezone)
        return YearStatsResponse.from_stats(stats)

    @app.get("/image")
    async def year_image(
        request: Request, timezone: TimezoneParam, canvas: CanvasParam
    ) -> Response:
        """Render the year progress image."""
        state_container: AppContainer = request.app.state.container
        return await _png_response(
            state_container,
            SceneKind.YEAR,
            lambda: state_container.stats_service.year_progress(timezone),
            canvas,
        )

    @app.get("/life")
    async def life_weeks_image(
        request: Request,
        timezone: TimezoneParam,
        canvas: CanvasParam,
        max_age: MaxAgeParam,
        birthdate: str | None = None,
    ) -> Response:
        """Render the life-in-weeks image."""
        state_container: AppContainer = request.app.state.container
        checked = _require_date(birthdate, "birthdate")
        return await _png_response(
            state_container,
            SceneKind.LIFE_WEEKS,
            lambda: state_container.stats_service.life_weeks(
                checked, timezone, max_age
            ),
            canvas,
        )

    @app.get("/life-days")
    async def life_days_image(
        request: Request,
        timezone: TimezoneParam,
        canvas: CanvasParam,
        max_age: MaxAgeParam,
        birthdate: str | None = None,
    ) -> Response:
        """Render the life-in-days image."""
        state_container: AppContainer = request.app.state.container
        checked = _require_date(birthdate, "birthdate")
        return await _png_response(
            state_container,
            SceneKind.LIFE_DAYS,
            lambda: state_container.stats_service.life_days(
                checked, timezone, max_age
            ),
            canvas,
        )

    @app.get("/countdown")
    async def countdown_image(
        request: Request,
        timezone: TimezoneParam,
        canvas: CanvasParam,
        date: str | None = None,
        titles: Annotated[list[str] | None, Query(alias="title")] = None,
    ) -> Response:
        """Render the countdown image."""
        state_container: AppContainer = request.app.state.container
        checked = _require_date(date, "date")
        title = _single_title(titles)
        if len(title) > MAX_TITLE_LENGTH:
            raise InvalidRequest(
                f"Title must be {MAX_TITLE_LENGTH} characters or less"
            )
        return await _png_response(
            state_container,
            SceneKind.COUNTDOWN,
            lambda: state_container.stats_service.countdown(
                checked, timezone, title
            ),
            canvas,
        )

    return app


async def _png_response(
    container: AppContainer,
    kind: SceneKind,
    compute: Callable[[], Stats],
    canvas: Canvas,
) -> Response:
    try:
        stats = compute()
        payload = await run_in_threadpool(
            container.render_service.render,
            kind,
            stats,
            canvas.width,
            canvas.height,
            canvas.padding_top,
            canvas.padding_bottom,
        )
    except StatsError:
        raise
    except Exception:
        logger.exception("Failed to generate %s image", kind)
        return JSONResponse(
            {"error": "Failed to generate image"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return Response(content=payload, media_type=PNG_MEDIA_TYPE)


def _require_date(value: str | None, name: str) -> str:
    if not value:
        raise InvalidRequest(f"{name} parameter is required (YYYY-MM-DD format)")
    if not DATE_PATTERN.fullmatch(value):
        raise InvalidRequest(f"Invalid {name} format. Use YYYY-MM-DD")
    return value


def _single_title(titles: list[str] | None) -> str:
    if not titles:
        return DEFAULT_TITLE
    if len(titles) > 1:
        raise InvalidRequest("Title must be a single string value")
    return titles[0]


def _error(message: str) -> JSONResponse:
    return JSONResponse(
        {"error": message}, status_code=status.HTTP_400_BAD_REQUEST
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    name = first.get("loc", ("query", "parameter"))[-1]
    return f"Invalid value for {name}: {first.get('msg', 'invalid')}"


_API_DESCRIPTION: dict[str, object] = {
    "message": "Finite API",
    "endpoints": {
        "/image": "Generate year progress image (PNG)",
        "/life": "Generate life weeks image (PNG)",
        "/life-days": "Generate life days image (PNG)",
        "/countdown": "Generate countdown image (PNG)",
        "/stats": "Get year progress statistics as JSON",
    },
    "parameters": {
        "common": {
            "timezone": "IANA timezone, e.g. America/New_York. Defaults to UTC.",
            "width": "Image width in pixels (400-3000). Defaults to 800.",
            "height": "Image height in pixels (300-4000). Defaults to 500.",
            "paddingTop": "Top padding reserved for the clock/status bar.",
            "paddingBottom": "Bottom padding reserved for widgets/dock.",
            "preset": f"Device preset: {', '.join(DEVICE_PRESETS)}",
        },
        "life": {
            "birthdate": "Required. Date of birth in YYYY-MM-DD format.",
            "maxAge": "Maximum age in years, 1-150 (default: 80).",
        },
        "countdown": {
            "date": "Required. Target date in YYYY-MM-DD format.",
            "title": "Event title, up to 50 characters (default: Event).",
        },
    },
    "presets": {
        name: PresetInfo(**asdict(canvas)).model_dump(by_alias=True)
        for name, canvas in DEVICE_PRESETS.items()
    },
}
