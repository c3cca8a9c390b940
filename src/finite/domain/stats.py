"""Domain models for date statistics."""

from dataclasses import dataclass
from datetime import date
from typing import Literal

LifeUnit = Literal["week", "day"]


@dataclass(frozen=True)
class ProgressStats:
    """Elapsed/remaining counts shared by every progress record."""

    reference_date: date
    timezone: str
    units_elapsed: int
    units_remaining: int
    total_units: int
    percentage_elapsed: float
    percentage_remaining: float


@dataclass(frozen=True)
class YearProgressStats(ProgressStats):
    """Progress through the current calendar year, in days."""

    year: int


@dataclass(frozen=True)
class LifeStats(ProgressStats):
    """Weeks or days lived against a maximum lifespan."""

    birthdate: date
    max_age: int
    current_age: float
    unit: LifeUnit


@dataclass(frozen=True)
class CountdownStats:
    """Distance between today and a target date.

    All counts are magnitudes; ``is_past`` tells which side of today the
    target falls on.
    """

    reference_date: date
    timezone: str
    target_date: date
    title: str
    days_remaining: int
    weeks_remaining: int
    months_remaining: int
    hours_remaining: int
    is_past: bool
    is_today: bool
