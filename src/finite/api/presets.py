"""Device presets and canvas parameter validation."""

from dataclasses import dataclass

from finite.domain.errors import InvalidRequest

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 500
MIN_WIDTH, MAX_WIDTH = 400, 3000
MIN_HEIGHT, MAX_HEIGHT = 300, 4000


@dataclass(frozen=True)
class Canvas:
    """Image size plus the bands reserved for device UI."""

    width: int
    height: int
    padding_top: int = 0
    padding_bottom: int = 0


DEVICE_PRESETS: dict[str, Canvas] = {
    "iphone-standard": Canvas(
        width=1170, height=2532, padding_top=200, padding_bottom=300
    ),
    "iphone-pro": Canvas(
        width=1179, height=2556, padding_top=200, padding_bottom=300
    ),
    "iphone-pro-max": Canvas(
        width=1290, height=2796, padding_top=540, padding_bottom=560
    ),
}


def resolve_canvas(
    preset: str | None = None,
    width: int | None = None,
    height: int | None = None,
    padding_top: int | None = None,
    padding_bottom: int | None = None,
) -> Canvas:
    """Return the canvas for a preset or explicit dimensions.

    A preset wins over explicit values. Raises ``InvalidRequest`` when the
    preset is unknown or the dimensions fall outside the supported range.
    """
    if preset:
        if preset not in DEVICE_PRESETS:
            raise InvalidRequest(
                f"Unknown preset. Use one of: {', '.join(DEVICE_PRESETS)}"
            )
        canvas = DEVICE_PRESETS[preset]
    else:
        canvas = Canvas(
            width=DEFAULT_WIDTH if width is None else width,
            height=DEFAULT_HEIGHT if height is None else height,
            padding_top=padding_top or 0,
            padding_bottom=padding_bottom or 0,
        )
    validate_canvas(canvas)
    return canvas


def validate_canvas(canvas: Canvas) -> None:
    """Raise ``InvalidRequest`` unless the canvas can be rendered."""
    if not (MIN_WIDTH <= canvas.width <= MAX_WIDTH) or not (
        MIN_HEIGHT <= canvas.height <= MAX_HEIGHT
    ):
        raise InvalidRequest(
            f"Invalid dimensions. Width: {MIN_WIDTH}-{MAX_WIDTH}, "
            f"Height: {MIN_HEIGHT}-{MAX_HEIGHT}"
        )
    if canvas.padding_top < 0 or canvas.padding_bottom < 0:
        raise InvalidRequest("Padding must be zero or positive")
    if canvas.padding_top + canvas.padding_bottom >= canvas.height:
        raise InvalidRequest("Padding must leave room for content")
