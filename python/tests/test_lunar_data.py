"""Precomputed lunar year table tests."""

from pathlib import Path

import pytest

from lunar_calendar import lunar_data
from lunar_calendar._types import LunarYearRecord, SolarDate
from lunar_calendar.errors import OutOfRangeError
from lunar_calendar.gregorian import day_of_year, to_julian_day
from lunar_calendar.lunar_astronomy import (
    SYNODIC_MONTH,
    build_tables,
    lunar_month_11,
    main,
    month_starts,
    new_moon_day,
    render_table,
)
from lunar_calendar.lunar_data import (
    FIRST_TABLE_YEAR,
    LUNAR_YEARS,
    MAX_YEAR,
    NEW_YEAR_OFFSETS,
    leap_month,
    leap_month_days,
    month_days,
    new_year_offset,
    year_days,
    year_record,
)

TIME_ZONE = 7.0


class TestTableShape:
    def test_one_entry_per_year(self):
        expected = MAX_YEAR - FIRST_TABLE_YEAR + 1
        assert len(LUNAR_YEARS) == expected
        assert len(NEW_YEAR_OFFSETS) == expected

    def test_records(self):
        for record in LUNAR_YEARS:
            assert isinstance(record, LunarYearRecord)
            assert len(record.month_days) == 12
            assert 0 <= record.leap_month <= 12
            if record.leap_month:
                assert record.leap_days in (29, 30)
            else:
                assert record.leap_days == 0

    def test_tet_falls_between_jan_21_and_feb_20(self):
        for offset in NEW_YEAR_OFFSETS:
            assert 20 <= offset <= 50


class TestAccessors:
    @pytest.mark.parametrize(
        "tet",
        [SolarDate(2023, 1, 22), SolarDate(2024, 2, 10), SolarDate(2025, 1, 29), SolarDate(1985, 1, 21)],
    )
    def test_new_year_offset(self, tet):
        assert new_year_offset(tet.year) == day_of_year(tet) - 1

    def test_leap_month(self):
        record = year_record(2023)
        assert record.leap_month == 2
        assert month_days(record, 2, is_leap=True) == record.leap_days

    def test_record_accessors(self):
        record = year_record(2023)
        assert leap_month(record) == 2
        assert leap_month_days(record) in (29, 30)
        assert year_days(record) == sum(record.month_days) + leap_month_days(record)
        common = year_record(2024)
        assert leap_month(common) == 0
        assert leap_month_days(common) == 0
        assert year_days(common) in (354, 355)

    def test_month_days(self):
        record = year_record(2024)
        assert [month_days(record, m) for m in range(1, 13)] == list(record.month_days)
        assert record.total_days == sum(record.month_days)

    @pytest.mark.parametrize("year", [FIRST_TABLE_YEAR - 1, MAX_YEAR + 1])
    def test_out_of_range(self, year):
        with pytest.raises(OutOfRangeError):
            year_record(year)
        with pytest.raises(OutOfRangeError):
            new_year_offset(year)


class TestAstronomy:
    def test_new_moons_a_month_apart(self):
        for k in range(1300, 1320):
            gap = new_moon_day(k + 1, TIME_ZONE) - new_moon_day(k, TIME_ZONE)
            assert gap in (29, 30)

    def test_month_11_contains_winter_solstice(self):
        for year in (1950, 2000, 2023, 2024):
            start = lunar_month_11(year, TIME_ZONE)
            solstice = to_julian_day(SolarDate(year, 12, 21))
            assert start <= solstice + 1
            assert solstice - start < SYNODIC_MONTH + 1

    def test_month_starts_span(self):
        a11 = lunar_month_11(2022, TIME_ZONE)
        b11 = lunar_month_11(2023, TIME_ZONE)
        months = month_starts(a11, b11, TIME_ZONE)
        # 2023 has a leap month, so the span holds 13 months.
        assert len(months) == 13
        assert months[0] == (a11, 11, False)
        assert [m[1] for m in months[:3]] == [11, 12, 1]
        assert sum(1 for m in months if m[2]) == 1
        leap = next(m for m in months if m[2])
        assert leap[1] == 2


class TestGeneratedTable:
    def test_matches_generator(self):
        records, offsets = build_tables(FIRST_TABLE_YEAR, MAX_YEAR, TIME_ZONE)
        assert records == LUNAR_YEARS
        assert offsets == NEW_YEAR_OFFSETS

    def test_source_is_rendered_output(self):
        source = Path(lunar_data.__file__).read_text(encoding="utf-8")
        assert render_table(LUNAR_YEARS, NEW_YEAR_OFFSETS, FIRST_TABLE_YEAR) in source

    def test_render_short_span(self):
        records, offsets = build_tables(2023, 2024, TIME_ZONE)
        text = render_table(records, offsets, 2023)
        assert "LunarYearRecord(2, " in text
        assert "# 2023" in text
        assert "21, 40,  # 2023" in text

    def test_main_prints_table(self, capsys):
        main()
        out = capsys.readouterr().out
        assert out == render_table(LUNAR_YEARS, NEW_YEAR_OFFSETS, FIRST_TABLE_YEAR)
