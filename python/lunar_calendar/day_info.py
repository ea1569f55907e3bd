"""Everything known about a date, assembled from the calculators."""

import datetime
import logging

from ._types import DayInfo, HourType, Location, SolarDate
from .canchi import full_can_chi
from .gregorian import days_in_solar_month
from .hoangdao import hoang_dao_hours, truc
from .lunar import solar_to_lunar
from .solar_terms import solar_term_on_date
from .sun_times import DEFAULT_LOCATION, sun_times

logger = logging.getLogger(__name__)


def day_info(solar: SolarDate, location: Location | None = None) -> DayInfo:
    """Complete information for a date; sun times default to Hà Nội."""
    location = location or DEFAULT_LOCATION
    logger.debug("Computing day info for %s at %s", solar, location.name)

    lunar = solar_to_lunar(solar)
    can_chi = full_can_chi(solar)
    day_truc = truc(solar)
    return DayInfo(
        solar=solar,
        lunar=lunar,
        can_chi_year=can_chi.year,
        can_chi_month=can_chi.month,
        can_chi_day=can_chi.day,
        solar_term=solar_term_on_date(solar),
        truc=day_truc,
        hours=hoang_dao_hours(solar),
        is_hoang_dao_day=day_truc.type == HourType.HOANG_DAO,
        sun_times=sun_times(solar, location),
    )


def month_calendar(
    year: int, month: int, location: Location | None = None
) -> list[DayInfo]:
    """DayInfo for every day of a solar month."""
    return [
        day_info(SolarDate(year, month, day), location)
        for day in range(1, days_in_solar_month(year, month) + 1)
    ]


def today_info(location: Location | None = None) -> DayInfo:
    """DayInfo for the current date in the location's UTC offset."""
    location = location or DEFAULT_LOCATION
    tz = datetime.timezone(datetime.timedelta(hours=location.timezone))
    now = datetime.datetime.now(tz)
    return day_info(SolarDate(now.year, now.month, now.day), location)
