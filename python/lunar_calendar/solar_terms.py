"""The 24 solar terms (Tiết Khí) of a year.

Dates are approximations from a fixed average date per term plus small
leap-year and century corrections; they can differ from ephemeris dates by
one or two days.
"""

import math

from ._types import SolarDate, SolarTerm
from .constants import SOLAR_TERM_BASE_DATES, SOLAR_TERMS
from .errors import InvalidDateError, OutOfRangeError
from .gregorian import days_in_solar_month, is_leap_year, to_julian_day
from .lunar import MAX_YEAR, MIN_YEAR, validate_solar_date


def _validate_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"Year {year} is out of supported range ({MIN_YEAR}-{MAX_YEAR})",
            {"year": year},
        )


def _term_date(year: int, index: int) -> SolarDate:
    month, day = SOLAR_TERM_BASE_DATES[index]
    century, year_in_century = divmod(year, 100)

    offset = 0
    # Lập Xuân and Vũ Thủy come a day early in leap years.
    if 2 <= index <= 3 and is_leap_year(year):
        offset -= 1

    if century == 20:
        offset += (year_in_century - 1) // 4
    elif century == 21:
        offset += year_in_century // 4

    # Truncated remainder: keeps the sign, so offset ends in {-1, 0, 1}.
    offset = int(math.fmod(offset, 2))

    day += offset
    dim = days_in_solar_month(year, month)
    if day > dim:
        day -= dim
        month += 1
    return SolarDate(year, month, day)


def _terms(year: int) -> tuple[SolarTerm, ...]:
    return tuple(
        SolarTerm(
            index=index,
            name=name,
            alternate_name=alternate_name,
            date=_term_date(year, index),
            description=description,
        )
        for index, (name, alternate_name, description) in enumerate(SOLAR_TERMS)
    )


def solar_term_date(year: int, index: int) -> SolarDate:
    """Approximate date of solar term ``index`` (0 = Tiểu Hàn) in ``year``."""
    _validate_year(year)
    if index < 0 or index >= len(SOLAR_TERMS):
        raise InvalidDateError(
            f"Solar term index {index} is invalid (must be 0-23)",
            {"year": year, "index": index},
        )
    return _term_date(year, index)


def solar_terms_in_year(year: int) -> tuple[SolarTerm, ...]:
    """All 24 solar terms of a year, in date order."""
    _validate_year(year)
    return _terms(year)


def solar_term_on_date(solar: SolarDate) -> SolarTerm | None:
    """The solar term starting exactly on ``solar``, if any."""
    validate_solar_date(solar)
    for term in _terms(solar.year):
        if term.date == solar:
            return term
    return None


def current_solar_term(solar: SolarDate) -> SolarTerm:
    """Most recent solar term on or before ``solar``."""
    validate_solar_date(solar)
    current = _terms(solar.year - 1)[-1]
    for term in _terms(solar.year):
        if term.date > solar:
            break
        current = term
    return current


def next_solar_term(solar: SolarDate) -> SolarTerm:
    """First solar term strictly after ``solar``."""
    validate_solar_date(solar)
    for term in _terms(solar.year):
        if term.date > solar:
            return term
    return _terms(solar.year + 1)[0]


def days_until_next_term(solar: SolarDate) -> int:
    return to_julian_day(next_solar_term(solar).date) - to_julian_day(solar)


def solar_term_by_name(name: str, year: int) -> SolarTerm | None:
    """Solar term of ``year`` by Vietnamese name, e.g. "Lập Xuân"."""
    for term in solar_terms_in_year(year):
        if term.name == name:
            return term
    return None
