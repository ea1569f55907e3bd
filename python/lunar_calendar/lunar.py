"""Conversion between solar (Gregorian) and Vietnamese lunar dates.

Both directions are driven by the per-year lunar data table: a date's lunar
year is decided by comparing its day-of-year with that year's Tết offset, and
the month is found by walking the year's month lengths in calendar order
(each regular month followed by its leap month, if any).
"""

from ._types import LunarDate, LunarMonthInfo, LunarYearInfo, LunarYearRecord, SolarDate
from .constants import LEAP_MONTH_SUFFIX, LUNAR_MONTH_NAMES
from .errors import InvalidDateError, InvalidLunarDateError, OutOfRangeError
from .gregorian import (
    day_of_year,
    day_of_year_to_solar_date,
    days_in_solar_month,
    days_in_year,
    from_julian_day,
    is_leap_year,
    to_julian_day,
)
from .lunar_data import (
    FIRST_TABLE_YEAR,
    MAX_YEAR,
    MIN_YEAR,
    leap_month,
    leap_month_days,
    month_days,
    new_year_offset,
    year_days,
    year_record,
)

__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "from_julian_day",
    "is_leap_year",
    "days_in_solar_month",
    "lunar_to_solar",
    "lunar_year_info",
    "month_name",
    "solar_to_lunar",
    "to_julian_day",
    "validate_lunar_date",
    "validate_solar_date",
]


def validate_solar_date(date: SolarDate) -> None:
    """Raise if the date is outside the supported range or not a real date."""
    if date.year < MIN_YEAR or date.year > MAX_YEAR:
        raise OutOfRangeError(
            f"Year {date.year} is out of supported range ({MIN_YEAR}-{MAX_YEAR})",
            date,
        )
    if date.month < 1 or date.month > 12:
        raise InvalidDateError(f"Month {date.month} is invalid (must be 1-12)", date)
    if date.day < 1 or date.day > days_in_solar_month(date.year, date.month):
        raise InvalidDateError(
            f"Day {date.day} is invalid for month {date.month}/{date.year}", date
        )


def validate_lunar_date(date: LunarDate) -> None:
    """Raise if the lunar month/leap/day combination does not exist."""
    if date.year < FIRST_TABLE_YEAR or date.year > MAX_YEAR:
        raise OutOfRangeError(
            f"Lunar year {date.year} is out of supported range "
            f"({FIRST_TABLE_YEAR}-{MAX_YEAR})",
            date,
        )
    if date.month < 1 or date.month > 12:
        raise InvalidLunarDateError(
            f"Month {date.month} is invalid (must be 1-12)", date
        )

    record = year_record(date.year)
    if date.is_leap_month and leap_month(record) != date.month:
        raise InvalidLunarDateError(
            f"Month {date.month} is not a leap month in year {date.year}", date
        )

    length = month_days(record, date.month, date.is_leap_month)
    if date.day < 1 or date.day > length:
        raise InvalidLunarDateError(
            f"Day {date.day} is invalid for lunar month {date.month}/{date.year}",
            date,
        )


def month_name(month: int, is_leap: bool = False) -> str:
    """Vietnamese name of a lunar month, e.g. "Giêng" or "Tư nhuận"."""
    name = LUNAR_MONTH_NAMES[month - 1]
    return name + LEAP_MONTH_SUFFIX if is_leap else name


def _months_in_order(record: LunarYearRecord):
    """Yield (month, is_leap, days) in calendar order."""
    for month in range(1, 13):
        yield month, False, record.month_days[month - 1]
        if leap_month(record) == month:
            yield month, True, leap_month_days(record)


def _lunar_date_from_offset(lunar_year: int, offset: int) -> LunarDate:
    """Find the lunar date ``offset`` days into a lunar year (day 1 = Tết)."""
    remaining = offset
    for month, is_leap, days in _months_in_order(year_record(lunar_year)):
        if remaining <= days:
            return LunarDate(
                year=lunar_year,
                month=month,
                day=remaining,
                is_leap_month=is_leap,
                month_name=month_name(month, is_leap),
            )
        remaining -= days
    raise OutOfRangeError(
        f"Offset {offset} is past the end of lunar year {lunar_year}",
        {"year": lunar_year, "offset": offset},
    )


def solar_to_lunar(solar: SolarDate) -> LunarDate:
    """Convert a solar date to its lunar date.

    >>> solar_to_lunar(SolarDate(2024, 2, 10))
    LunarDate(year=2024, month=1, day=1, is_leap_month=False, month_name='Giêng')
    """
    validate_solar_date(solar)

    doy = day_of_year(solar)
    offset = new_year_offset(solar.year)

    if doy <= offset:
        # Before Tết: still in the previous lunar year.
        previous = solar.year - 1
        elapsed = days_in_year(previous) - new_year_offset(previous) + doy
        return _lunar_date_from_offset(previous, elapsed)

    return _lunar_date_from_offset(solar.year, doy - offset)


def lunar_to_solar(lunar: LunarDate) -> SolarDate:
    """Convert a lunar date to its solar date.

    >>> lunar_to_solar(LunarDate(2024, 1, 1))
    SolarDate(year=2024, month=2, day=10)
    """
    validate_lunar_date(lunar)

    offset = 0
    for month, is_leap, days in _months_in_order(year_record(lunar.year)):
        if month == lunar.month and is_leap == lunar.is_leap_month:
            break
        offset += days
    offset += lunar.day

    doy = new_year_offset(lunar.year) + offset
    year = lunar.year
    if doy > days_in_year(year):
        doy -= days_in_year(year)
        year += 1

    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"Lunar date {lunar.day}/{lunar.month}/{lunar.year} falls outside "
            f"the supported range ({MIN_YEAR}-{MAX_YEAR})",
            lunar,
        )
    return day_of_year_to_solar_date(year, doy)


def lunar_year_info(year: int) -> LunarYearInfo:
    """Month layout of a lunar year."""
    record = year_record(year)
    return LunarYearInfo(
        total_days=year_days(record),
        leap_month=leap_month(record),
        months=tuple(
            LunarMonthInfo(month=month, days=days, is_leap=is_leap)
            for month, is_leap, days in _months_in_order(record)
        ),
    )
