"""Day info aggregation tests."""

import datetime

import pytest

from lunar_calendar._types import LunarDate, SolarDate
from lunar_calendar.day_info import day_info, month_calendar, today_info
from lunar_calendar.errors import InvalidDateError, OutOfRangeError
from lunar_calendar.hoangdao import hoang_dao_hours, is_hoang_dao_day
from lunar_calendar.sun_times import VIETNAM_LOCATIONS, sun_times

TET_2024 = SolarDate(2024, 2, 10)


class TestDayInfo:
    def test_tet_2024(self):
        info = day_info(TET_2024)
        assert info.solar == TET_2024
        assert info.lunar == LunarDate(2024, 1, 1, False, "Giêng")
        assert info.can_chi_year.full_name == "Giáp Thìn"
        assert info.can_chi_month.full_name == "Bính Dần"
        assert info.can_chi_day.full_name == "Giáp Thìn"
        assert info.truc.name == "Mãn"
        assert info.is_hoang_dao_day is False
        assert info.hours == hoang_dao_hours(TET_2024)
        assert info.solar_term is None

    def test_default_location_is_hanoi(self):
        assert day_info(TET_2024).sun_times == sun_times(TET_2024, VIETNAM_LOCATIONS["hanoi"])

    def test_location(self):
        hcm = VIETNAM_LOCATIONS["hochiminh"]
        assert day_info(TET_2024, hcm).sun_times == sun_times(TET_2024, hcm)

    def test_solar_term_day(self):
        info = day_info(SolarDate(2024, 2, 4))
        assert info.solar_term is not None
        assert info.solar_term.name == "Lập Xuân"

    def test_invalid_date(self):
        with pytest.raises(InvalidDateError):
            day_info(SolarDate(2024, 2, 30))

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            day_info(SolarDate(2101, 1, 1))


class TestMonthCalendar:
    @pytest.mark.parametrize("year,month,days", [(2024, 2, 29), (2023, 2, 28), (2024, 12, 31)])
    def test_length(self, year, month, days):
        calendar = month_calendar(year, month)
        assert len(calendar) == days
        assert [d.solar.day for d in calendar] == list(range(1, days + 1))

    def test_matches_day_info(self):
        calendar = month_calendar(2024, 2)
        assert calendar[9] == day_info(TET_2024)
        assert [d.is_hoang_dao_day for d in calendar] == [
            is_hoang_dao_day(d.solar) for d in calendar
        ]

    def test_invalid_month(self):
        with pytest.raises(InvalidDateError):
            month_calendar(2024, 13)


class TestTodayInfo:
    def test_today(self):
        info = today_info()
        now = datetime.datetime.now(datetime.timezone(datetime.timedelta(hours=7)))
        # Allow for the date rolling over between the two calls.
        assert info.solar in (
            SolarDate(now.year, now.month, now.day),
            SolarDate(*(now - datetime.timedelta(days=1)).timetuple()[:3]),
        )
