"""Solar <-> lunar conversion tests."""

import pytest

from lunar_calendar._types import LunarDate, SolarDate
from lunar_calendar.errors import (
    ErrorCode,
    InvalidDateError,
    InvalidLunarDateError,
    LunarCalendarError,
    OutOfRangeError,
)
from lunar_calendar.gregorian import day_of_year, days_in_year
from lunar_calendar.lunar import (
    days_in_solar_month,
    from_julian_day,
    is_leap_year,
    lunar_to_solar,
    lunar_year_info,
    month_name,
    solar_to_lunar,
    to_julian_day,
    validate_solar_date,
)


class TestLeapYear:
    def test_century_rules(self):
        assert is_leap_year(2000)
        assert not is_leap_year(1900)
        assert not is_leap_year(2100)
        assert is_leap_year(2024)
        assert not is_leap_year(2023)

    def test_february(self):
        assert days_in_solar_month(2024, 2) == 29
        assert days_in_solar_month(2023, 2) == 28
        assert days_in_solar_month(1900, 2) == 28

    def test_month_lengths(self):
        assert [days_in_solar_month(2023, m) for m in range(1, 13)] == [
            31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31
        ]

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month):
        with pytest.raises(InvalidDateError):
            days_in_solar_month(2024, month)


class TestJulianDay:
    def test_known_values(self):
        assert to_julian_day(SolarDate(2000, 1, 1)) == 2451545
        assert to_julian_day(SolarDate(1900, 1, 1)) == 2415021
        assert to_julian_day(SolarDate(2024, 2, 10)) == 2460351

    def test_consecutive_days(self):
        assert to_julian_day(SolarDate(2024, 3, 1)) - to_julian_day(
            SolarDate(2024, 2, 28)
        ) == 2
        assert to_julian_day(SolarDate(2025, 1, 1)) - to_julian_day(
            SolarDate(2024, 12, 31)
        ) == 1

    def test_inverse_over_range(self):
        start = to_julian_day(SolarDate(1900, 1, 1))
        end = to_julian_day(SolarDate(2100, 12, 31))
        for jd in range(start, end + 1, 97):
            assert to_julian_day(from_julian_day(jd)) == jd

    @pytest.mark.parametrize(
        "date",
        [
            SolarDate(1900, 1, 1),
            SolarDate(1900, 2, 28),
            SolarDate(2000, 2, 29),
            SolarDate(2024, 12, 31),
            SolarDate(2100, 12, 31),
        ],
    )
    def test_roundtrip(self, date):
        assert from_julian_day(to_julian_day(date)) == date


class TestValidation:
    def test_year_before_range(self):
        with pytest.raises(OutOfRangeError) as exc:
            solar_to_lunar(SolarDate(1899, 1, 1))
        assert exc.value.code == ErrorCode.OUT_OF_RANGE
        assert exc.value.details == SolarDate(1899, 1, 1)

    def test_year_after_range(self):
        with pytest.raises(OutOfRangeError):
            solar_to_lunar(SolarDate(2101, 1, 1))

    def test_february_30(self):
        with pytest.raises(InvalidDateError) as exc:
            solar_to_lunar(SolarDate(2024, 2, 30))
        assert exc.value.code == ErrorCode.INVALID_DATE

    @pytest.mark.parametrize(
        "date",
        [SolarDate(2023, 2, 29), SolarDate(2024, 13, 1), SolarDate(2024, 4, 31), SolarDate(2024, 1, 0)],
    )
    def test_invalid_dates(self, date):
        with pytest.raises(InvalidDateError):
            validate_solar_date(date)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            solar_to_lunar(SolarDate(2024, 2, 30))

    def test_nonexistent_leap_month(self):
        with pytest.raises(InvalidLunarDateError) as exc:
            lunar_to_solar(LunarDate(2024, 4, 1, is_leap_month=True))
        assert exc.value.code == ErrorCode.INVALID_LUNAR_DATE

    def test_day_past_month_end(self):
        info = lunar_year_info(2024)
        short = next(m for m in info.months if m.days == 29)
        with pytest.raises(InvalidLunarDateError):
            lunar_to_solar(LunarDate(2024, short.month, 30))

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_lunar_month(self, month):
        with pytest.raises(InvalidLunarDateError):
            lunar_to_solar(LunarDate(2024, month, 1))

    def test_lunar_year_out_of_range(self):
        with pytest.raises(LunarCalendarError) as exc:
            lunar_to_solar(LunarDate(2101, 1, 1))
        assert exc.value.code == ErrorCode.OUT_OF_RANGE

    def test_result_past_supported_range(self):
        with pytest.raises(OutOfRangeError):
            lunar_to_solar(LunarDate(2100, 12, 29))

    def test_result_before_supported_range(self):
        lunar = LunarDate(1899, 1, 1)
        with pytest.raises(OutOfRangeError) as exc:
            lunar_to_solar(lunar)
        assert exc.value.details == lunar

    def test_late_1899_lunar_date_in_range(self):
        lunar = solar_to_lunar(SolarDate(1900, 1, 15))
        assert lunar.year == 1899
        assert lunar_to_solar(lunar) == SolarDate(1900, 1, 15)


class TestSolarToLunar:
    def test_tet_2024(self):
        lunar = solar_to_lunar(SolarDate(2024, 2, 10))
        assert lunar.year == 2024
        assert lunar.month == 1
        assert lunar.day == 1
        assert lunar.is_leap_month is False
        assert lunar.month_name == "Giêng"

    def test_eve_of_tet_2024(self):
        lunar = solar_to_lunar(SolarDate(2024, 2, 9))
        assert (lunar.year, lunar.month, lunar.is_leap_month) == (2023, 12, False)
        assert lunar.day == lunar_year_info(2023).months[-1].days
        assert lunar.month_name == "Chạp"

    @pytest.mark.parametrize(
        "solar",
        [
            SolarDate(2023, 1, 22),
            SolarDate(2025, 1, 29),
            SolarDate(2026, 2, 17),
            SolarDate(1985, 1, 21),
        ],
    )
    def test_known_tet_dates(self, solar):
        lunar = solar_to_lunar(solar)
        assert (lunar.year, lunar.month, lunar.day) == (solar.year, 1, 1)

    def test_mid_autumn_2024(self):
        lunar = solar_to_lunar(SolarDate(2024, 9, 17))
        assert (lunar.year, lunar.month, lunar.day) == (2024, 8, 15)

    def test_leap_month_2023(self):
        lunar = lunar_to_solar(LunarDate(2023, 2, 1, is_leap_month=True))
        back = solar_to_lunar(lunar)
        assert back.is_leap_month is True
        assert back.month == 2
        assert back.month_name == "Hai nhuận"

    def test_january_1900_before_tet(self):
        lunar = solar_to_lunar(SolarDate(1900, 1, 1))
        assert lunar.year == 1899
        assert lunar.month in (11, 12)

    def test_last_supported_day(self):
        lunar = solar_to_lunar(SolarDate(2100, 12, 31))
        assert lunar.year == 2100


class TestLunarToSolar:
    def test_tet_2024(self):
        assert lunar_to_solar(LunarDate(2024, 1, 1)) == SolarDate(2024, 2, 10)

    def test_month_name_is_ignored(self):
        assert lunar_to_solar(LunarDate(2024, 1, 1, month_name="whatever")) == SolarDate(
            2024, 2, 10
        )

    def test_carries_into_next_solar_year(self):
        solar = lunar_to_solar(LunarDate(2023, 12, 1))
        assert solar.year == 2024
        assert solar.month == 1

    def test_leap_month_follows_regular_month(self):
        regular = lunar_to_solar(LunarDate(2023, 2, 1))
        leap = lunar_to_solar(LunarDate(2023, 2, 1, is_leap_month=True))
        gap = to_julian_day(leap) - to_julian_day(regular)
        assert gap == lunar_year_info(2023).months[1].days


class TestRoundTrip:
    @pytest.mark.parametrize("year", [1900, 1901, 1985, 2000, 2020, 2023, 2024, 2025, 2099, 2100])
    def test_every_day_of_year(self, year):
        for doy in range(1, days_in_year(year) + 1):
            solar = from_julian_day(to_julian_day(SolarDate(year, 1, 1)) + doy - 1)
            assert lunar_to_solar(solar_to_lunar(solar)) == solar

    def test_whole_range_sampled(self):
        start = to_julian_day(SolarDate(1900, 1, 1))
        end = to_julian_day(SolarDate(2100, 12, 31))
        for jd in range(start, end + 1, 13):
            solar = from_julian_day(jd)
            assert lunar_to_solar(solar_to_lunar(solar)) == solar

    def test_consecutive_days_advance_by_one(self):
        previous = solar_to_lunar(SolarDate(2023, 1, 1))
        for doy in range(2, 366):
            solar = from_julian_day(to_julian_day(SolarDate(2023, 1, 1)) + doy - 1)
            current = solar_to_lunar(solar)
            assert current.day == previous.day + 1 or current.day == 1
            previous = current


class TestLunarYearInfo:
    @pytest.mark.parametrize("year,leap", [(2020, 4), (2023, 2), (2025, 6), (2024, 0)])
    def test_known_leap_months(self, year, leap):
        assert lunar_year_info(year).leap_month == leap

    def test_months_in_order(self):
        info = lunar_year_info(2023)
        assert len(info.months) == 13
        assert [(m.month, m.is_leap) for m in info.months[:4]] == [
            (1, False),
            (2, False),
            (2, True),
            (3, False),
        ]

    def test_total_matches_months(self):
        for year in range(1900, 2101):
            info = lunar_year_info(year)
            assert info.total_days == sum(m.days for m in info.months)
            assert 353 <= info.total_days <= 385
            assert len(info.months) == (13 if info.leap_month else 12)
            assert all(m.days in (29, 30) for m in info.months)

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            lunar_year_info(2101)


class TestMonthName:
    def test_names(self):
        assert month_name(1) == "Giêng"
        assert month_name(11) == "Mười Một"
        assert month_name(12) == "Chạp"
        assert month_name(4, is_leap=True) == "Tư nhuận"


class TestDayOfYear:
    def test_known_dates(self):
        assert day_of_year(SolarDate(2026, 1, 1)) == 1
        assert day_of_year(SolarDate(2026, 3, 21)) == 80
        assert day_of_year(SolarDate(2024, 12, 31)) == 366
