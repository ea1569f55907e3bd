"""Frozen dataclasses for all structured return types."""

from dataclasses import dataclass
from enum import StrEnum


class Element(StrEnum):
    KIM = "kim"
    MOC = "moc"
    THUY = "thuy"
    HOA = "hoa"
    THO = "tho"


class ElementRelation(StrEnum):
    GENERATES = "sinh"
    OVERCOMES = "khac"
    SAME = "dong"


class HourType(StrEnum):
    HOANG_DAO = "hoangdao"
    HAC_DAO = "hacdao"


class TrucId(StrEnum):
    KIEN = "kien"
    TRU = "tru"
    MAN = "man"
    BINH = "binh"
    DINH = "dinh"
    CHAP = "chap"
    PHA = "pha"
    NGUY = "nguy"
    THANH = "thanh"
    THU = "thu"
    KHAI = "khai"
    BE = "be"


@dataclass(frozen=True, order=True)
class SolarDate:
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int
    day: int
    is_leap_month: bool = False
    month_name: str = ""


@dataclass(frozen=True)
class LunarYearRecord:
    """Month lengths of one lunar year; leap_month is 0 when there is none."""

    leap_month: int
    month_days: tuple[int, ...]
    leap_days: int = 0

    @property
    def total_days(self) -> int:
        return sum(self.month_days) + self.leap_days


@dataclass(frozen=True)
class LunarMonthInfo:
    month: int
    days: int
    is_leap: bool


@dataclass(frozen=True)
class LunarYearInfo:
    total_days: int
    leap_month: int
    months: tuple[LunarMonthInfo, ...]


@dataclass(frozen=True)
class ThienCan:
    index: int
    name: str
    element: Element
    yin: bool


@dataclass(frozen=True)
class DiaChi:
    index: int
    name: str
    animal: str
    element: Element


@dataclass(frozen=True)
class NapAm:
    name: str
    element: Element


@dataclass(frozen=True)
class CanChi:
    can: int
    chi: int
    can_name: str
    chi_name: str
    full_name: str
    element: Element
    nap_am: str | None = None


@dataclass(frozen=True)
class FullCanChi:
    year: CanChi
    month: CanChi
    day: CanChi


@dataclass(frozen=True)
class HoangDaoStar:
    name: str
    type: HourType
    meaning: str


@dataclass(frozen=True)
class HourInfo:
    chi: int
    chi_name: str
    start_hour: int
    end_hour: int
    type: HourType
    star_name: str
    can_chi: CanChi


@dataclass(frozen=True)
class TrucInfo:
    id: TrucId
    name: str
    type: HourType
    meaning: str
    good_for: tuple[str, ...]
    bad_for: tuple[str, ...]


@dataclass(frozen=True)
class DayQuality:
    truc: TrucInfo
    is_hoang_dao_day: bool
    hoang_dao_hours: tuple[HourInfo, ...]
    hac_dao_hours: tuple[HourInfo, ...]


@dataclass(frozen=True)
class SolarTerm:
    index: int
    name: str
    alternate_name: str
    date: SolarDate
    description: str


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    name: str | None = None
    timezone: float = 7.0


@dataclass(frozen=True)
class SunTimes:
    sunrise: str
    sunset: str
    solar_noon: str
    civil_dawn: str | None = None
    civil_dusk: str | None = None


@dataclass(frozen=True)
class DayInfo:
    solar: SolarDate
    lunar: LunarDate
    can_chi_year: CanChi
    can_chi_month: CanChi
    can_chi_day: CanChi
    solar_term: SolarTerm | None
    truc: TrucInfo
    hours: tuple[HourInfo, ...]
    is_hoang_dao_day: bool
    sun_times: SunTimes | None = None


@dataclass(frozen=True)
class CalendarConfig:
    min_year: int = 1900
    max_year: int = 2100
    time_zone: float = 7.0
    sunrise_altitude: float = -0.833
    civil_twilight_altitude: float = -6.0
    default_location: str = "hanoi"


DEFAULT_CONFIG = CalendarConfig()
