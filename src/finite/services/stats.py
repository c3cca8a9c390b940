"""Calendar statistics computed in the caller's timezone."""

import math
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from finite.domain.errors import (
    InvalidBirthdate,
    InvalidTargetDate,
    InvalidTimezone,
    StatsError,
)
from finite.domain.stats import (
    CountdownStats,
    LifeStats,
    LifeUnit,
    YearProgressStats,
)

WEEKS_PER_YEAR = 52
DAYS_PER_YEAR = 365.25
DAYS_PER_MONTH = 30.44
DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""


@dataclass
class SystemClock(Clock):
    """Clock backed by the host's system time."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(tz=UTC)


def resolve_timezone(timezone_name: str) -> ZoneInfo:
    """Return the zone for an IANA name or raise ``InvalidTimezone``."""
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, OSError, ValueError, TypeError) as exc:
        raise InvalidTimezone from exc


def local_today(timezone_name: str, now: datetime | None = None) -> date:
    """Return the wall-clock date in ``timezone_name`` at ``now``."""
    tz = resolve_timezone(timezone_name)
    instant = now or datetime.now(tz=UTC)
    return instant.astimezone(tz).date()


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def parse_calendar_date(value: str, error: type[StatsError]) -> date:
    """Parse ``YYYY-MM-DD`` and raise ``error`` on any malformed component."""
    parts = value.split("-") if isinstance(value, str) else []
    if len(parts) != 3 or not all(
        part.isascii() and part.isdigit() for part in parts
    ):
        raise error
    year, month, day = (int(part) for part in parts)
    if not year or not month or not day:
        raise error
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise error from exc


def compute_year_progress(
    timezone_name: str, now: datetime | None = None
) -> YearProgressStats:
    """Return how far through the current year ``timezone_name`` is."""
    today = local_today(timezone_name, now)
    total_days = 366 if is_leap_year(today.year) else 365
    days_passed = today.timetuple().tm_yday
    days_remaining = total_days - days_passed
    return YearProgressStats(
        reference_date=today,
        timezone=timezone_name,
        units_elapsed=days_passed,
        units_remaining=days_remaining,
        total_units=total_days,
        percentage_elapsed=_percentage(days_passed, total_days),
        percentage_remaining=_percentage(days_remaining, total_days),
        year=today.year,
    )


def compute_life_weeks(
    birthdate: str,
    timezone_name: str,
    max_age_years: int,
    now: datetime | None = None,
) -> LifeStats:
    """Return weeks lived against a lifespan of ``max_age_years``."""
    birth, today = _life_dates(birthdate, timezone_name, max_age_years, now)
    days_lived = (today - birth).days
    return _life_stats(
        birth=birth,
        today=today,
        timezone_name=timezone_name,
        max_age_years=max_age_years,
        lived=days_lived // DAYS_PER_WEEK,
        total=max_age_years * WEEKS_PER_YEAR,
        unit="week",
    )


def compute_life_days(
    birthdate: str,
    timezone_name: str,
    max_age_years: int,
    now: datetime | None = None,
) -> LifeStats:
    """Return days lived against a lifespan of ``max_age_years``."""
    birth, today = _life_dates(birthdate, timezone_name, max_age_years, now)
    return _life_stats(
        birth=birth,
        today=today,
        timezone_name=timezone_name,
        max_age_years=max_age_years,
        lived=(today - birth).days,
        total=round(max_age_years * DAYS_PER_YEAR),
        unit="day",
    )


def compute_countdown(
    target_date: str,
    timezone_name: str,
    title: str,
    now: datetime | None = None,
) -> CountdownStats:
    """Return the distance from today to ``target_date``.

    Weeks and months are floored from the signed day count before taking
    the magnitude, and a month is a flat 30.44 days.
    """
    resolve_timezone(timezone_name)
    target = parse_calendar_date(target_date, InvalidTargetDate)
    today = local_today(timezone_name, now)
    days = (target - today).days
    return CountdownStats(
        reference_date=today,
        timezone=timezone_name,
        target_date=target,
        title=title,
        days_remaining=abs(days),
        weeks_remaining=abs(days // DAYS_PER_WEEK),
        months_remaining=abs(math.floor(days / DAYS_PER_MONTH)),
        hours_remaining=abs(days) * HOURS_PER_DAY,
        is_past=days < 0,
        is_today=days == 0,
    )


@dataclass
class StatsService:
    """Computes statistics against an injectable clock."""

    clock: Clock = field(default_factory=SystemClock)

    def year_progress(self, timezone_name: str) -> YearProgressStats:
        """Return year progress for today in ``timezone_name``."""
        return compute_year_progress(timezone_name, now=self.clock.now())

    def life_weeks(
        self, birthdate: str, timezone_name: str, max_age_years: int
    ) -> LifeStats:
        """Return weeks lived for ``birthdate``."""
        return compute_life_weeks(
            birthdate, timezone_name, max_age_years, now=self.clock.now()
        )

    def life_days(
        self, birthdate: str, timezone_name: str, max_age_years: int
    ) -> LifeStats:
        """Return days lived for ``birthdate``."""
        return compute_life_days(
            birthdate, timezone_name, max_age_years, now=self.clock.now()
        )

    def countdown(
        self, target_date: str, timezone_name: str, title: str
    ) -> CountdownStats:
        """Return the countdown to ``target_date``."""
        return compute_countdown(
            target_date, timezone_name, title, now=self.clock.now()
        )


def _percentage(part: int, total: int) -> float:
    return round(part / total * 100, 1)


def _life_dates(
    birthdate: str,
    timezone_name: str,
    max_age_years: int,
    now: datetime | None,
) -> tuple[date, date]:
    resolve_timezone(timezone_name)
    birth = parse_calendar_date(birthdate, InvalidBirthdate)
    if isinstance(max_age_years, bool) or not isinstance(max_age_years, int):
        raise ValueError("max_age_years must be an integer")
    if max_age_years < 1:
        raise ValueError("max_age_years must be positive")
    return birth, local_today(timezone_name, now)


def _life_stats(  # noqa: PLR0913
    *,
    birth: date,
    today: date,
    timezone_name: str,
    max_age_years: int,
    lived: int,
    total: int,
    unit: LifeUnit,
) -> LifeStats:
    lived = max(0, lived)
    remaining = max(0, total - lived)
    return LifeStats(
        reference_date=today,
        timezone=timezone_name,
        units_elapsed=lived,
        units_remaining=remaining,
        total_units=total,
        percentage_elapsed=_percentage(lived, total),
        percentage_remaining=_percentage(remaining, total),
        birthdate=birth,
        max_age=max_age_years,
        current_age=max(0.0, round((today - birth).days / DAYS_PER_YEAR, 1)),
        unit=unit,
    )
