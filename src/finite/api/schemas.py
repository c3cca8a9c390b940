"""Pydantic models for JSON responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from finite.domain.stats import YearProgressStats


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class YearStatsResponse(CamelModel):
    """Year progress payload for the ``/stats`` endpoint."""

    year: int
    timezone: str
    total_days: int
    days_passed: int
    days_remaining: int
    percentage_passed: float
    percentage_remaining: float

    @classmethod
    def from_stats(cls, stats: YearProgressStats) -> "YearStatsResponse":
        """Build the payload from a year progress record."""
        return cls(
            year=stats.year,
            timezone=stats.timezone,
            total_days=stats.total_units,
            days_passed=stats.units_elapsed,
            days_remaining=stats.units_remaining,
            percentage_passed=stats.percentage_elapsed,
            percentage_remaining=stats.percentage_remaining,
        )


class PresetInfo(CamelModel):
    """Dimensions of a device preset."""

    width: int
    height: int
    padding_top: int
    padding_bottom: int
