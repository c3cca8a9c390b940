"""Domain errors raised while computing statistics or validating requests."""


class StatsError(ValueError):
    """Base class for calculator input errors."""

    message = "Invalid input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidTimezone(StatsError):  # noqa: N818
    """Timezone name is not known to the tz database."""

    message = "Invalid timezone"


class InvalidBirthdate(StatsError):  # noqa: N818
    """Birthdate is not a valid YYYY-MM-DD calendar date."""

    message = "Invalid birthdate"


class InvalidTargetDate(StatsError):  # noqa: N818
    """Countdown target is not a valid YYYY-MM-DD calendar date."""

    message = "Invalid target date"


class InvalidRequest(ValueError):  # noqa: N818
    """Request parameters failed validation in the API layer."""
