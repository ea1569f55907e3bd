"""Proleptic Gregorian calendar arithmetic and Julian Day Numbers."""

from ._types import SolarDate
from .errors import InvalidDateError

MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Returns True if year is a leap year."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)


def days_in_months(year: int) -> list[int]:
    """Returns a list of days per month for the given year."""
    return [31, 29 if is_leap_year(year) else 28, *MONTH_DAYS[2:]]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_solar_month(year: int, month: int) -> int:
    """Number of days in a Gregorian month."""
    if month < 1 or month > 12:
        raise InvalidDateError(
            f"Month {month} is invalid (must be 1-12)",
            {"year": year, "month": month},
        )
    if month == 2 and is_leap_year(year):
        return 29
    return MONTH_DAYS[month - 1]


def day_of_year(date: SolarDate) -> int:
    """Calculate day of year (1-366) from a solar date."""
    return sum(days_in_months(date.year)[: date.month - 1]) + date.day


def day_of_year_to_solar_date(year: int, doy: int) -> SolarDate:
    """Convert day-of-year to a solar date for the given year."""
    remaining = doy
    for month, dim in enumerate(days_in_months(year), 1):
        if remaining <= dim:
            return SolarDate(year, month, remaining)
        remaining -= dim
    raise InvalidDateError(
        f"Day {doy} is past the end of year {year}", {"year": year, "day": doy}
    )


def to_julian_day(date: SolarDate) -> int:
    """Julian Day Number of a solar date (noon-based, integer)."""
    a = (14 - date.month) // 12
    y = date.year + 4800 - a
    m = date.month + 12 * a - 3
    return (
        date.day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def from_julian_day(jd: int) -> SolarDate:
    """Inverse of to_julian_day."""
    l = jd + 68569
    n = (4 * l) // 146097
    l = l - (146097 * n + 3) // 4
    i = (4000 * (l + 1)) // 1461001
    l = l - (1461 * i) // 4 + 31
    j = (80 * l) // 2447
    day = l - (2447 * j) // 80
    l = j // 11
    month = j + 2 - 12 * l
    year = 100 * (n - 49) + i + l
    return SolarDate(year, month, day)
