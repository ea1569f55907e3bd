"""Sunrise, sunset, solar noon and civil twilight for a location.

Low-precision solar position after Jean Meeus, "Astronomical Algorithms",
in the form used by the NOAA solar calculator. Typically within a minute or
two at Vietnamese latitudes.

All angles in degrees unless otherwise noted.
"""

import logging
import math

from ._types import DEFAULT_CONFIG, Location, SolarDate, SunTimes
from .errors import InvalidLocationError
from .gregorian import to_julian_day
from .lunar import validate_solar_date

logger = logging.getLogger(__name__)

DEGREES_PER_HOUR = 15.0
J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

SUNRISE_SUNSET_ALTITUDE = DEFAULT_CONFIG.sunrise_altitude
CIVIL_TWILIGHT_ALTITUDE = DEFAULT_CONFIG.civil_twilight_altitude

# Shown in place of a time when the sun does not reach the altitude that day.
NO_TIME = "--:--"

VIETNAM_LOCATIONS: dict[str, Location] = {
    "hanoi": Location(21.0285, 105.8542, "Hà Nội", 7),
    "hochiminh": Location(10.8231, 106.6297, "TP. Hồ Chí Minh", 7),
    "danang": Location(16.0544, 108.2022, "Đà Nẵng", 7),
    "haiphong": Location(20.8449, 106.6881, "Hải Phòng", 7),
    "cantho": Location(10.0452, 105.7469, "Cần Thơ", 7),
    "hue": Location(16.4637, 107.5909, "Huế", 7),
    "nhatrang": Location(12.2388, 109.1967, "Nha Trang", 7),
    "dalat": Location(11.9404, 108.4583, "Đà Lạt", 7),
    "vungtau": Location(10.346, 107.0843, "Vũng Tàu", 7),
    "quynhon": Location(13.7829, 109.2196, "Quy Nhơn", 7),
}

DEFAULT_LOCATION = VIETNAM_LOCATIONS[DEFAULT_CONFIG.default_location]


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    return angle % 360.0


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY


def sun_mean_longitude(t: float) -> float:
    return normalize_angle(280.46646 + 36000.76983 * t + 0.0003032 * t * t)


def sun_mean_anomaly(t: float) -> float:
    return normalize_angle(357.52911 + 35999.05029 * t - 0.0001537 * t * t)


def earth_eccentricity(t: float) -> float:
    return 0.016708634 - 0.000042037 * t - 0.0000001267 * t * t


def sun_equation_of_center(t: float, mean_anomaly: float) -> float:
    m = deg_to_rad(mean_anomaly)
    return (
        (1.9146 - 0.004817 * t - 0.000014 * t * t) * math.sin(m)
        + (0.019993 - 0.000101 * t) * math.sin(2 * m)
        + 0.00029 * math.sin(3 * m)
    )


def sun_true_longitude(t: float) -> float:
    m = sun_mean_anomaly(t)
    return normalize_angle(sun_mean_longitude(t) + sun_equation_of_center(t, m))


def _omega(t: float) -> float:
    """Longitude of the moon's ascending node, for nutation."""
    return 125.04 - 1934.136 * t


def sun_apparent_longitude(t: float) -> float:
    """True longitude corrected for nutation and aberration."""
    return sun_true_longitude(t) - 0.00569 - 0.00478 * math.sin(deg_to_rad(_omega(t)))


def mean_obliquity_of_ecliptic(t: float) -> float:
    return 23.439291 - 0.013004167 * t - 0.00000016389 * t * t + 0.0000005036 * t**3


def obliquity_correction(t: float) -> float:
    return mean_obliquity_of_ecliptic(t) + 0.00256 * math.cos(deg_to_rad(_omega(t)))


def sun_declination(t: float) -> float:
    e = deg_to_rad(obliquity_correction(t))
    lam = deg_to_rad(sun_apparent_longitude(t))
    return rad_to_deg(math.asin(math.sin(e) * math.sin(lam)))


def equation_of_time(t: float) -> float:
    """Equation of time in minutes."""
    epsilon = deg_to_rad(obliquity_correction(t))
    l0 = deg_to_rad(sun_mean_longitude(t))
    e = earth_eccentricity(t)
    m = deg_to_rad(sun_mean_anomaly(t))
    y = math.tan(epsilon / 2) ** 2

    eq_time = (
        y * math.sin(2 * l0)
        - 2 * e * math.sin(m)
        + 4 * e * y * math.sin(m) * math.cos(2 * l0)
        - 0.5 * y * y * math.sin(4 * l0)
        - 1.25 * e * e * math.sin(2 * m)
    )
    return 4 * rad_to_deg(eq_time)


def hour_angle(latitude: float, declination: float, altitude: float) -> float | None:
    """Hour angle at which the sun crosses ``altitude``.

    Returns None when the sun stays entirely above (polar day) or below
    (polar night) that altitude for the whole day.
    """
    lat = deg_to_rad(latitude)
    dec = deg_to_rad(declination)
    cos_h = (math.sin(deg_to_rad(altitude)) - math.sin(lat) * math.sin(dec)) / (
        math.cos(lat) * math.cos(dec)
    )
    if cos_h < -1.0 or cos_h > 1.0:
        return None
    return rad_to_deg(math.acos(cos_h))


def validate_location(location: Location) -> None:
    """Raise InvalidLocationError for coordinates out of range or NaN."""
    if not -90 <= location.latitude <= 90:
        raise InvalidLocationError("Latitude must be between -90 and 90", location)
    if not -180 <= location.longitude <= 180:
        raise InvalidLocationError("Longitude must be between -180 and 180", location)


def format_time(decimal_hours: float | None) -> str:
    """Format decimal hours as zero-padded "HH:MM" local time."""
    if decimal_hours is None or math.isnan(decimal_hours):
        return NO_TIME
    decimal_hours %= 24.0
    hours = int(decimal_hours)
    minutes = round((decimal_hours - hours) * 60)
    if minutes == 60:
        return f"{(hours + 1) % 24:02d}:00"
    return f"{hours:02d}:{minutes:02d}"


def _solar_noon_and_declination(date: SolarDate, location: Location) -> tuple[float, float]:
    """Local solar noon in decimal hours and the sun's declination."""
    t = julian_century(to_julian_day(date) + 0.5)
    noon_minutes = (
        720 - 4 * location.longitude - equation_of_time(t) + location.timezone * 60
    )
    return noon_minutes / 60.0, sun_declination(t)


def _crossings(
    noon: float, latitude: float, declination: float, altitude: float
) -> tuple[float | None, float | None]:
    """Morning and evening times (decimal hours) the sun crosses ``altitude``."""
    ha = hour_angle(latitude, declination, altitude)
    if ha is None:
        return None, None
    return noon - ha / DEGREES_PER_HOUR, noon + ha / DEGREES_PER_HOUR


def sun_times(date: SolarDate, location: Location) -> SunTimes:
    """Sunrise, sunset, solar noon and civil twilight as "HH:MM" strings.

    Under polar day or night the affected fields hold NO_TIME.
    """
    validate_solar_date(date)
    validate_location(location)
    noon, declination = _solar_noon_and_declination(date, location)

    sunrise, sunset = _crossings(
        noon, location.latitude, declination, SUNRISE_SUNSET_ALTITUDE
    )
    dawn, dusk = _crossings(noon, location.latitude, declination, CIVIL_TWILIGHT_ALTITUDE)
    if sunrise is None:
        logger.debug(
            "Sun does not cross the horizon at %s on %s", location, date
        )

    return SunTimes(
        sunrise=format_time(sunrise),
        sunset=format_time(sunset),
        solar_noon=format_time(noon),
        civil_dawn=format_time(dawn),
        civil_dusk=format_time(dusk),
    )


def sun_times_hanoi(date: SolarDate) -> SunTimes:
    return sun_times(date, VIETNAM_LOCATIONS["hanoi"])


def _parse_time(value: str) -> float:
    hours, minutes = value.split(":")
    return int(hours) + int(minutes) / 60.0


def day_length(date: SolarDate, location: Location) -> float:
    """Hours between sunrise and sunset; NaN when the sun does not rise or set."""
    times = sun_times(date, location)
    if times.sunrise == NO_TIME or times.sunset == NO_TIME:
        return math.nan
    return _parse_time(times.sunset) - _parse_time(times.sunrise)


def is_sun_up(date: SolarDate, hour: int, minute: int, location: Location) -> bool:
    """True if local clock time hour:minute lies between sunrise and sunset.

    Always False when the sun does not rise or set that day.
    """
    times = sun_times(date, location)
    if times.sunrise == NO_TIME or times.sunset == NO_TIME:
        return False
    current = hour + minute / 60.0
    return _parse_time(times.sunrise) <= current <= _parse_time(times.sunset)
