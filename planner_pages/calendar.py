"""Week numbering and the ``Week`` / ``Month`` value objects.

Week 1 of a year starts on the Monday on or before 1 January, and weeks run
Monday to Sunday. A year has as many weeks as there are Mondays from that
first Monday up to 31 December. Because that Monday never falls after 1
January, every year comes to 53 weeks.

Examples
--------
>>> year_start_monday(2025)
datetime.date(2024, 12, 30)
>>> total_weeks(2025)
53
>>> Week(2025, 2).start_date
datetime.date(2025, 1, 6)
"""

from __future__ import annotations

import calendar as _stdlib_calendar
import dataclasses as dc
import datetime as dt
import functools

QUARTER_START_MONTHS = (1, 4, 7, 10)
_SEASONS = {
    12: "Winter",
    1: "Winter",
    2: "Winter",
    3: "Spring",
    4: "Spring",
    5: "Spring",
    6: "Summer",
    7: "Summer",
    8: "Summer",
    9: "Fall",
    10: "Fall",
    11: "Fall",
}


def year_start_monday(year: int) -> dt.date:
    """Return the Monday on or before 1 January of ``year``."""
    first_day = dt.date(year, 1, 1)
    return first_day - dt.timedelta(days=first_day.weekday())


@functools.cache
def total_weeks(year: int) -> int:
    """Return the number of planner weeks in ``year``."""
    monday = year_start_monday(year)
    last_day = dt.date(year, 12, 31)
    weeks = 0
    while monday.year == year or monday <= last_day:
        weeks += 1
        monday += dt.timedelta(days=7)
    return weeks


def week_start(year: int, week_num: int) -> dt.date:
    return year_start_monday(year) + dt.timedelta(days=(week_num - 1) * 7)


def week_end(year: int, week_num: int) -> dt.date:
    return week_start(year, week_num) + dt.timedelta(days=6)


def week_number_for_date(year: int, date: dt.date) -> int:
    """Return the planner week of ``year`` that contains ``date``."""
    return (date - year_start_monday(year)).days // 7 + 1


def weeks_for_month(year: int, month: int) -> list[int]:
    """Return the week numbers that contain at least one day of ``month``."""
    first = dt.date(year, month, 1)
    last = dt.date(year, month, _stdlib_calendar.monthrange(year, month)[1])
    start = max(1, week_number_for_date(year, first))
    end = min(total_weeks(year), week_number_for_date(year, last))
    return list(range(start, end + 1))


def season_for_month(month: int) -> str:
    return _SEASONS[month]


@dc.dataclass(frozen=True, slots=True, order=True)
class Week:
    """A planner week, identified by year and 1-based number."""

    year: int
    number: int

    @property
    def start_date(self) -> dt.date:
        return week_start(self.year, self.number)

    @property
    def end_date(self) -> dt.date:
        return week_end(self.year, self.number)

    @property
    def month(self) -> int:
        """Month of the week's Monday."""
        return self.start_date.month

    @property
    def quarter(self) -> int:
        return (self.month - 1) // 3 + 1

    @property
    def in_year(self) -> bool:
        return self.start_date.year == self.year

    @property
    def starts_quarter(self) -> bool:
        return self.in_year and self.month in QUARTER_START_MONTHS

    @property
    def days(self) -> list[dt.date]:
        start = self.start_date
        return [start + dt.timedelta(days=offset) for offset in range(7)]

    def date_range(self, fmt: str = "%b %d") -> str:
        return f"{self.start_date.strftime(fmt)} - {self.end_date.strftime(fmt)}"

    def __contains__(self, date: object) -> bool:
        if not isinstance(date, dt.date):
            return False
        return self.start_date <= date <= self.end_date

    def prev(self) -> Week:
        if self.number > 1:
            return Week(self.year, self.number - 1)
        return Week(self.year - 1, total_weeks(self.year - 1))

    def next(self) -> Week:
        if self.number < total_weeks(self.year):
            return Week(self.year, self.number + 1)
        return Week(self.year + 1, 1)

    @classmethod
    def weeks_in(cls, year: int) -> list[Week]:
        return [cls(year, number) for number in range(1, total_weeks(year) + 1)]

    def __str__(self) -> str:
        return f"Week {self.number} of {self.year}"


@dc.dataclass(frozen=True, slots=True, order=True)
class Month:
    """A calendar month, identified by year and 1-based number."""

    year: int
    number: int

    def __post_init__(self) -> None:
        if not 1 <= self.number <= 12:
            msg = f"Month number must be between 1 and 12, got {self.number}."
            raise ValueError(msg)

    @property
    def name(self) -> str:
        return _stdlib_calendar.month_name[self.number]

    @property
    def abbrev(self) -> str:
        return _stdlib_calendar.month_abbr[self.number]

    @property
    def start_date(self) -> dt.date:
        return dt.date(self.year, self.number, 1)

    @property
    def end_date(self) -> dt.date:
        last_day = _stdlib_calendar.monthrange(self.year, self.number)[1]
        return dt.date(self.year, self.number, last_day)

    @property
    def days(self) -> list[dt.date]:
        start = self.start_date
        count = (self.end_date - start).days + 1
        return [start + dt.timedelta(days=offset) for offset in range(count)]

    @property
    def weeks(self) -> list[Week]:
        return [Week(self.year, number) for number in weeks_for_month(self.year, self.number)]

    @property
    def season(self) -> str:
        return season_for_month(self.number)

    @classmethod
    def months_in(cls, year: int) -> list[Month]:
        return [cls(year, number) for number in range(1, 13)]

    def __str__(self) -> str:
        return f"{self.name} {self.year}"


__all__ = [
    "Month",
    "Week",
    "season_for_month",
    "total_weeks",
    "week_end",
    "week_number_for_date",
    "week_start",
    "weeks_for_month",
    "year_start_monday",
]
