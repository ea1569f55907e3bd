"""Hoàng Đạo hours and Trực tests."""

import pytest

from lunar_calendar._types import HourType, SolarDate, TrucId
from lunar_calendar.canchi import day_can_chi
from lunar_calendar.errors import InvalidDateError
from lunar_calendar.hoangdao import (
    bad_hours,
    day_quality,
    find_good_days_for,
    find_hoang_dao_days_in_month,
    format_hour_range,
    good_hours,
    hoang_dao_hours,
    is_hoang_dao_day,
    is_hoang_dao_hour,
    truc,
)

TET_2024 = SolarDate(2024, 2, 10)  # Giáp Thìn day

HOANG_DAO_TRUC = {TrucId.TRU, TrucId.DINH, TrucId.CHAP, TrucId.THANH, TrucId.KHAI}


class TestHoangDaoHours:
    def test_twelve_periods(self):
        hours = hoang_dao_hours(TET_2024)
        assert len(hours) == 12
        assert [h.chi for h in hours] == list(range(12))
        assert hours[0].chi_name == "Tý"

    @pytest.mark.parametrize(
        "date",
        [SolarDate(2024, 2, d) for d in range(1, 13)] + [SolarDate(1900, 1, 1)],
    )
    def test_six_of_each(self, date):
        assert len(good_hours(date)) == 6
        assert len(bad_hours(date)) == 6

    def test_thin_day_pattern(self):
        good = [h.chi_name for h in good_hours(TET_2024)]
        assert good == ["Dần", "Thìn", "Tỵ", "Thân", "Dậu", "Hợi"]

    def test_pattern_repeats_with_day_branch(self):
        # 12 days later the day branch is the same.
        a = [h.type for h in hoang_dao_hours(TET_2024)]
        b = [h.type for h in hoang_dao_hours(SolarDate(2024, 2, 22))]
        assert a == b

    def test_tuple_hour_ranges(self):
        hours = hoang_dao_hours(TET_2024)
        assert (hours[0].start_hour, hours[0].end_hour) == (23, 1)
        assert (hours[6].start_hour, hours[6].end_hour) == (11, 13)

    def test_hour_stems(self):
        hours = hoang_dao_hours(TET_2024)
        assert hours[0].can_chi.full_name == "Giáp Tý"
        assert hours[1].can_chi.full_name == "Ất Sửu"

    def test_invalid_date(self):
        with pytest.raises(InvalidDateError):
            hoang_dao_hours(SolarDate(2024, 2, 30))


class TestHoangDaoHour:
    @pytest.mark.parametrize("hour,expected", [(7, True), (8, True), (9, True), (12, False), (23, False), (0, False)])
    def test_thin_day(self, hour, expected):
        assert is_hoang_dao_hour(TET_2024, hour) is expected

    def test_invalid_hour(self):
        with pytest.raises(InvalidDateError):
            is_hoang_dao_hour(TET_2024, 24)


class TestFormatHourRange:
    def test_ty(self):
        assert format_hour_range(hoang_dao_hours(TET_2024)[0]) == "23:00-01:00"

    def test_padding(self):
        assert format_hour_range(hoang_dao_hours(TET_2024)[4]) == "07:00-09:00"


class TestTruc:
    def test_tet_2024_is_man(self):
        info = truc(TET_2024)
        assert info.id == TrucId.MAN
        assert info.name == "Mãn"
        assert not is_hoang_dao_day(TET_2024)

    def test_sequence_advances_daily(self):
        ids = list(TrucId)
        first = ids.index(truc(TET_2024).id)
        for offset in range(1, 5):
            date = SolarDate(2024, 2, 10 + offset)
            assert truc(date).id == ids[(first + offset) % 12]

    def test_kien_on_month_branch(self):
        # Lunar month 1 is a Dần month; a Dần day in it is Kiến.
        for day in range(10, 22):
            date = SolarDate(2024, 2, day)
            if day_can_chi(date).chi == 2:
                assert truc(date).id == TrucId.KIEN
                break
        else:
            pytest.fail("no Dần day found")

    def test_day_type_follows_truc(self):
        for day in range(1, 32):
            date = SolarDate(2024, 3, day)
            assert is_hoang_dao_day(date) == (truc(date).id in HOANG_DAO_TRUC)


class TestDayQuality:
    def test_consistent_with_parts(self):
        quality = day_quality(TET_2024)
        assert quality.truc == truc(TET_2024)
        assert quality.is_hoang_dao_day is False
        assert quality.hoang_dao_hours == good_hours(TET_2024)
        assert quality.hac_dao_hours == bad_hours(TET_2024)
        assert all(h.type == HourType.HOANG_DAO for h in quality.hoang_dao_hours)


class TestFinders:
    def test_hoang_dao_days(self):
        days = find_hoang_dao_days_in_month(2024, 3)
        assert days
        assert all(is_hoang_dao_day(d) for d in days)
        others = [SolarDate(2024, 3, d) for d in range(1, 32) if SolarDate(2024, 3, d) not in days]
        assert not any(is_hoang_dao_day(d) for d in others)

    def test_khai_truong(self):
        days = find_good_days_for(2024, 3, "Khai trương")
        assert days
        assert all(truc(d).id in (TrucId.THANH, TrucId.KHAI) for d in days)

    def test_case_insensitive(self):
        assert find_good_days_for(2024, 3, "khai TRƯƠNG") == find_good_days_for(
            2024, 3, "Khai trương"
        )

    def test_no_match(self):
        assert find_good_days_for(2024, 3, "bay lên mặt trăng") == []
