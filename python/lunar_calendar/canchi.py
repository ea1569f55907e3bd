"""Can Chi (Stem-Branch) designations for years, months, days and hours.

All calculations are modular lookups:
- year: (lunar year - 4) mod 60, with 4 CE as Giáp Tý;
- month: month 1 is always a Dần month, its stem fixed by the year stem;
- day: straight from the Julian Day Number;
- hour: Tý hour stem fixed by the day stem.
"""

from ._types import CanChi, Element, ElementRelation, FullCanChi, NapAm, SolarDate
from .constants import (
    DIA_CHI,
    GENERATING_CYCLE,
    HOUR_CAN_TY_START,
    MONTH_CAN_START,
    NAP_AM,
    THIEN_CAN,
)
from .errors import InvalidDateError
from .gregorian import to_julian_day
from .lunar import solar_to_lunar


def cycle_position(can: int, chi: int) -> int:
    """Position (0-59) in the sexagenary cycle of a stem/branch pair.

    Only pairs of equal parity exist in the cycle; n satisfies
    n = can (mod 10) and n = chi (mod 12).
    """
    return (6 * can - 5 * chi) % 60


def nap_am(can: int, chi: int) -> NapAm | None:
    """Nạp Âm of a stem/branch pair, two cycle positions per entry."""
    index = (cycle_position(can, chi) // 2) % 30
    return NAP_AM[index] if index < len(NAP_AM) else None


def build_can_chi(can: int, chi: int) -> CanChi:
    """Build a CanChi from stem and branch indices."""
    stem = THIEN_CAN[can]
    branch = DIA_CHI[chi]
    sound = nap_am(can, chi)
    return CanChi(
        can=can,
        chi=chi,
        can_name=stem.name,
        chi_name=branch.name,
        full_name=f"{stem.name} {branch.name}",
        element=sound.element if sound else stem.element,
        nap_am=sound.name if sound else None,
    )


def year_can_chi(lunar_year: int) -> CanChi:
    """Can Chi of a lunar year, e.g. 2024 -> Giáp Thìn."""
    offset = (lunar_year - 4) % 60
    return build_can_chi(offset % 10, offset % 12)


def month_can_chi(lunar_year: int, lunar_month: int) -> CanChi:
    """Can Chi of a lunar month.

    Month 1 is Bính Dần in Giáp/Kỷ years, Mậu Dần in Ất/Canh years,
    Canh Dần in Bính/Tân years, Nhâm Dần in Đinh/Nhâm years and Giáp Dần in
    Mậu/Quý years. A leap month shares the Can Chi of the month it follows.
    """
    year_can = (lunar_year - 4) % 10
    can = (MONTH_CAN_START[year_can] + lunar_month - 1) % 10
    chi = (lunar_month + 1) % 12
    return build_can_chi(can, chi)


def day_can_chi(solar: SolarDate) -> CanChi:
    """Can Chi of a solar day."""
    jd = to_julian_day(solar)
    return build_can_chi((jd + 9) % 10, (jd + 1) % 12)


def hour_can_chi(day_can: int, hour_chi: int) -> CanChi:
    """Can Chi of one of the 12 two-hour periods of a day with stem ``day_can``."""
    can = (HOUR_CAN_TY_START[day_can] + hour_chi) % 10
    return build_can_chi(can, hour_chi)


def chi_from_hour(hour: int) -> int:
    """Branch index (0-11) of the two-hour period containing ``hour``."""
    if hour < 0 or hour > 23:
        raise InvalidDateError(f"Hour {hour} is invalid (must be 0-23)", {"hour": hour})
    if hour == 23:
        return 0
    return (hour + 1) // 2


def hour_range_from_chi(chi: int) -> tuple[int, int]:
    """(start, end) clock hours of a branch's period; Tý wraps midnight."""
    if chi == 0:
        return (23, 1)
    return (chi * 2 - 1, chi * 2 + 1)


def full_can_chi(solar: SolarDate) -> FullCanChi:
    """Year, month and day Can Chi of a solar date."""
    lunar = solar_to_lunar(solar)
    return FullCanChi(
        year=year_can_chi(lunar.year),
        month=month_can_chi(lunar.year, lunar.month),
        day=day_can_chi(solar),
    )


def element_relationship(first: Element, second: Element) -> ElementRelation:
    """How ``first`` acts on ``second`` in the five-element cycles."""
    if first == second:
        return ElementRelation.SAME
    i = GENERATING_CYCLE.index(first)
    if GENERATING_CYCLE[(i + 1) % 5] == second:
        return ElementRelation.GENERATES
    return ElementRelation.OVERCOMES
