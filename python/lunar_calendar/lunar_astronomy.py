"""Generator for the lunar data table.

New-moon and solar-longitude series of Jean Meeus, "Astronomical Algorithms"
(1998), evaluated at the Vietnamese time zone, following the rules of the
Vietnamese calendar:

- a lunar month starts on the local day of a new moon;
- month 11 is the month containing the winter solstice;
- when 13 months separate two consecutive month-11 starts, the first month
  after month 11 without a principal solar term is the leap month.

The literal tables in lunar_data are the output of ``render_table``; run
``python -m lunar_calendar.lunar_astronomy`` to regenerate them.
"""

import logging
import math
import time

from ._types import DEFAULT_CONFIG, LunarYearRecord, SolarDate
from .gregorian import to_julian_day

logger = logging.getLogger(__name__)

SYNODIC_MONTH = 29.530588853
# Julian date of the new moon of 1900-01-01, reference for new moon numbering.
NEW_MOON_EPOCH = 2415021.076998695


def new_moon(k: int) -> float:
    """Julian date of the k-th new moon after 1900-01-01 (UT)."""
    t = k / 1236.85
    t2 = t * t
    t3 = t2 * t
    dr = math.pi / 180.0
    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * t2 - 0.000000155 * t3
    jd1 += 0.00033 * math.sin((166.56 + 132.87 * t - 0.009173 * t2) * dr)
    m = 359.2242 + 29.10535608 * k - 0.0000333 * t2 - 0.00000347 * t3
    mpr = 306.0253 + 385.81691806 * k + 0.0107306 * t2 + 0.00001236 * t3
    f = 21.2964 + 390.67050646 * k - 0.0016528 * t2 - 0.00000239 * t3
    c1 = (0.1734 - 0.000393 * t) * math.sin(m * dr) + 0.0021 * math.sin(2 * dr * m)
    c1 += -0.4068 * math.sin(mpr * dr) + 0.0161 * math.sin(dr * 2 * mpr)
    c1 -= 0.0004 * math.sin(dr * 3 * mpr)
    c1 += 0.0104 * math.sin(dr * 2 * f) - 0.0051 * math.sin(dr * (m + mpr))
    c1 += -0.0074 * math.sin(dr * (m - mpr)) + 0.0004 * math.sin(dr * (2 * f + m))
    c1 += -0.0004 * math.sin(dr * (2 * f - m)) - 0.0006 * math.sin(dr * (2 * f + mpr))
    c1 += 0.0010 * math.sin(dr * (2 * f - mpr)) + 0.0005 * math.sin(dr * (2 * mpr + m))
    if t < -11:
        delta_t = 0.001 + 0.000839 * t + 0.0002261 * t2 - 0.00000845 * t3
        delta_t -= 0.000000081 * t * t3
    else:
        delta_t = -0.000278 + 0.000265 * t + 0.000262 * t2
    return jd1 + c1 - delta_t


def sun_longitude(jd: float) -> float:
    """True longitude of the sun in radians, normalized to [0, 2*pi)."""
    t = (jd - 2451545.0) / 36525.0
    t2 = t * t
    dr = math.pi / 180.0
    m = 357.52910 + 35999.05030 * t - 0.0001559 * t2 - 0.00000048 * t * t2
    l0 = 280.46645 + 36000.76983 * t + 0.0003032 * t2
    dl = (1.914600 - 0.004817 * t - 0.000014 * t2) * math.sin(dr * m)
    dl += (0.019993 - 0.000101 * t) * math.sin(dr * 2 * m)
    dl += 0.000290 * math.sin(dr * 3 * m)
    longitude = (l0 + dl) * dr
    return longitude - 2 * math.pi * math.floor(longitude / (2 * math.pi))


def sun_longitude_sector(day_number: int, time_zone: float) -> int:
    """Which 30-degree sector (0-11) the sun is in at local midnight."""
    return int(sun_longitude(day_number - 0.5 - time_zone / 24.0) / math.pi * 6)


def new_moon_day(k: int, time_zone: float) -> int:
    """Julian Day Number of the local day holding the k-th new moon."""
    return math.floor(new_moon(k) + 0.5 + time_zone / 24.0)


def lunar_month_11(year: int, time_zone: float) -> int:
    """Julian Day Number on which month 11 starts, for the solstice of ``year``."""
    off = to_julian_day(SolarDate(year, 12, 31)) - 2415021.0
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_day(k, time_zone)
    if sun_longitude_sector(nm, time_zone) >= 9:
        nm = new_moon_day(k - 1, time_zone)
    return nm


def leap_month_offset(a11: int, time_zone: float) -> int:
    """Position after month 11 of the first month without a principal term."""
    k = math.floor((a11 - NEW_MOON_EPOCH) / SYNODIC_MONTH + 0.5)
    i = 1
    arc = sun_longitude_sector(new_moon_day(k + i, time_zone), time_zone)
    while True:
        last = arc
        i += 1
        arc = sun_longitude_sector(new_moon_day(k + i, time_zone), time_zone)
        if arc == last or i >= 14:
            break
    return i - 1


def month_starts(a11: int, b11: int, time_zone: float) -> list[tuple[int, int, bool]]:
    """Months from one month-11 start up to the next.

    Returns (start_jdn, month, is_leap) for each month in the span.
    """
    k = math.floor(0.5 + (a11 - NEW_MOON_EPOCH) / SYNODIC_MONTH)
    leap_off = leap_month_offset(a11, time_zone) if b11 - a11 > 365 else None
    count = 12 if leap_off is None else 13
    months = []
    for i in range(count):
        position = i
        is_leap = False
        if leap_off is not None and i >= leap_off:
            position = i - 1
            is_leap = i == leap_off
        months.append((new_moon_day(k + i, time_zone), (10 + position) % 12 + 1, is_leap))
    return months


def build_tables(
    first_year: int, last_year: int, time_zone: float
) -> tuple[tuple[LunarYearRecord, ...], tuple[int, ...]]:
    """Compute lunar year records and new-year offsets for a span of years."""
    a11 = {
        year: lunar_month_11(year, time_zone)
        for year in range(first_year - 1, last_year + 1)
    }
    spans = {
        year: month_starts(a11[year - 1], a11[year], time_zone)
        for year in range(first_year, last_year + 1)
    }

    records = []
    offsets = []
    for year in range(first_year, last_year + 1):
        # spans[year] runs from month 11 of year - 1 up to month 10 of year,
        # spans[year + 1] carries on to month 1 of year + 1.
        following = spans.get(year + 1) or month_starts(
            a11[year], lunar_month_11(year + 1, time_zone), time_zone
        )
        months = spans[year] + following
        tet = next(
            i for i, (_, month, leap) in enumerate(months) if month == 1 and not leap
        )
        end = next(
            i
            for i in range(tet + 1, len(months))
            if months[i][1] == 1 and not months[i][2]
        )

        month_days = [0] * 12
        leap_month = 0
        leap_days = 0
        for i in range(tet, end):
            start, month, leap = months[i]
            length = months[i + 1][0] - start
            if leap:
                leap_month, leap_days = month, length
            else:
                month_days[month - 1] = length

        records.append(LunarYearRecord(leap_month, tuple(month_days), leap_days))
        offsets.append(months[tet][0] - to_julian_day(SolarDate(year, 1, 1)))
    return tuple(records), tuple(offsets)


def timed_build_tables(
    first_year: int, last_year: int, time_zone: float
) -> tuple[tuple[LunarYearRecord, ...], tuple[int, ...]]:
    """build_tables with the elapsed time logged at debug level."""
    started = time.perf_counter()
    tables = build_tables(first_year, last_year, time_zone)
    logger.debug(
        "Built lunar table for %d-%d in %.1f ms",
        first_year,
        last_year,
        (time.perf_counter() - started) * 1000.0,
    )
    return tables


def render_table(
    records: tuple[LunarYearRecord, ...], offsets: tuple[int, ...], first_year: int
) -> str:
    """Python source for LUNAR_YEARS and NEW_YEAR_OFFSETS."""
    lines = ["LUNAR_YEARS: tuple[LunarYearRecord, ...] = ("]
    for year, record in enumerate(records, first_year):
        days = ", ".join(str(d) for d in record.month_days)
        lines.append(
            f"    LunarYearRecord({record.leap_month}, ({days}), {record.leap_days}),"
            f"  # {year}"
        )
    lines += [")", "", "NEW_YEAR_OFFSETS: tuple[int, ...] = ("]
    for i in range(0, len(offsets), 10):
        chunk = ", ".join(str(o) for o in offsets[i : i + 10])
        lines.append(f"    {chunk},  # {first_year + i}")
    lines.append(")")
    return "\n".join(lines) + "\n"


def main():
    first_year = DEFAULT_CONFIG.min_year - 1
    records, offsets = timed_build_tables(
        first_year, DEFAULT_CONFIG.max_year, DEFAULT_CONFIG.time_zone
    )
    print(render_table(records, offsets, first_year), end="")


if __name__ == "__main__":
    main()
