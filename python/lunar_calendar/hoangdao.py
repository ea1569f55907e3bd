"""Hoàng Đạo / Hắc Đạo hours and the Trực (day officer) of a date."""

from ._types import DayQuality, HourInfo, HourType, SolarDate, TrucInfo
from .canchi import chi_from_hour, day_can_chi, hour_can_chi, hour_range_from_chi
from .constants import DIA_CHI, HOANG_DAO_STARS, HOUR_STAR_START_TABLE, TRUC_INFO
from .gregorian import days_in_solar_month
from .lunar import solar_to_lunar, validate_solar_date


def hoang_dao_hours(solar: SolarDate) -> tuple[HourInfo, ...]:
    """All 12 two-hour periods of a day, starting from Tý (23:00-01:00).

    The star sequence is rotated so the Tý hour gets
    HOUR_STAR_START_TABLE[day branch]; each later period takes the next star.
    """
    validate_solar_date(solar)
    day = day_can_chi(solar)
    start = HOUR_STAR_START_TABLE[day.chi]

    hours = []
    for chi in range(12):
        star = HOANG_DAO_STARS[(start + chi) % 12]
        start_hour, end_hour = hour_range_from_chi(chi)
        hours.append(
            HourInfo(
                chi=chi,
                chi_name=DIA_CHI[chi].name,
                start_hour=start_hour,
                end_hour=end_hour,
                type=star.type,
                star_name=star.name,
                can_chi=hour_can_chi(day.can, chi),
            )
        )
    return tuple(hours)


def good_hours(solar: SolarDate) -> tuple[HourInfo, ...]:
    return tuple(h for h in hoang_dao_hours(solar) if h.type == HourType.HOANG_DAO)


def bad_hours(solar: SolarDate) -> tuple[HourInfo, ...]:
    return tuple(h for h in hoang_dao_hours(solar) if h.type == HourType.HAC_DAO)


def is_hoang_dao_hour(solar: SolarDate, hour: int) -> bool:
    """True if clock ``hour`` (0-23) falls in a Hoàng Đạo period."""
    return hoang_dao_hours(solar)[chi_from_hour(hour)].type == HourType.HOANG_DAO


def truc(solar: SolarDate) -> TrucInfo:
    """Trực of a date: distance from the month branch to the day branch.

    Lunar month 1 is a Dần month, so the month branch is (month + 1) mod 12;
    the day whose branch equals the month branch is Kiến.
    """
    lunar = solar_to_lunar(solar)
    month_chi = (lunar.month + 1) % 12
    day_chi = day_can_chi(solar).chi
    return TRUC_INFO[(day_chi - month_chi + 12) % 12]


def is_hoang_dao_day(solar: SolarDate) -> bool:
    """Day auspiciousness, decided by the Trực alone."""
    return truc(solar).type == HourType.HOANG_DAO


def day_quality(solar: SolarDate) -> DayQuality:
    day_truc = truc(solar)
    hours = hoang_dao_hours(solar)
    return DayQuality(
        truc=day_truc,
        is_hoang_dao_day=day_truc.type == HourType.HOANG_DAO,
        hoang_dao_hours=tuple(h for h in hours if h.type == HourType.HOANG_DAO),
        hac_dao_hours=tuple(h for h in hours if h.type == HourType.HAC_DAO),
    )


def _days_of_month(year: int, month: int) -> list[SolarDate]:
    return [
        SolarDate(year, month, day)
        for day in range(1, days_in_solar_month(year, month) + 1)
    ]


def find_hoang_dao_days_in_month(year: int, month: int) -> list[SolarDate]:
    """Dates of a solar month whose Trực is Hoàng Đạo."""
    return [date for date in _days_of_month(year, month) if is_hoang_dao_day(date)]


def find_good_days_for(year: int, month: int, activity: str) -> list[SolarDate]:
    """Dates of a solar month whose Trực recommends ``activity``.

    Matching is a case-insensitive substring test against each recommended
    activity, so "khai trương" also matches "Khai trương lớn".
    """
    needle = activity.casefold()
    return [
        date
        for date in _days_of_month(year, month)
        if any(needle in good.casefold() for good in truc(date).good_for)
    ]


def format_hour_range(hour: HourInfo) -> str:
    """Format a period as "HH:00-HH:00", e.g. "23:00-01:00" for Tý."""
    return f"{hour.start_hour:02d}:00-{hour.end_hour:02d}:00"
