"""Print a day report for Hà Nội on Tết Giáp Thìn (2024-02-10)."""

from lunar_calendar._types import HourType, SolarDate
from lunar_calendar.day_info import day_info
from lunar_calendar.hoangdao import format_hour_range
from lunar_calendar.solar_terms import current_solar_term, days_until_next_term, next_solar_term
from lunar_calendar.sun_times import VIETNAM_LOCATIONS, day_length


def main():
    location = VIETNAM_LOCATIONS["hanoi"]
    date = SolarDate(2024, 2, 10)

    info = day_info(date, location)
    lunar = info.lunar

    print("=== Vietnamese Lunar Calendar Example ===")
    print(f"Location: {location.name} ({location.latitude:.4f}°N, {location.longitude:.4f}°E)")
    print(f"Solar date: {date.year:04d}-{date.month:02d}-{date.day:02d}")
    print(f"Lunar date: {lunar.day} tháng {lunar.month_name} năm {info.can_chi_year.full_name}")
    print()
    print("--- Can Chi ---")
    print(f"Year:  {info.can_chi_year.full_name} ({info.can_chi_year.nap_am})")
    print(f"Month: {info.can_chi_month.full_name}")
    print(f"Day:   {info.can_chi_day.full_name}")
    print()
    print("--- Day Quality ---")
    print(f"Trực: {info.truc.name} ({'Hoàng Đạo' if info.is_hoang_dao_day else 'Hắc Đạo'})")
    print(f"Good for: {', '.join(info.truc.good_for)}")
    print(f"Avoid: {', '.join(info.truc.bad_for)}")
    print("Hoàng Đạo hours:")
    for hour in info.hours:
        if hour.type == HourType.HOANG_DAO:
            print(f"  {hour.chi_name:<5} {format_hour_range(hour)}  {hour.star_name}")
    print()
    print("--- Solar Terms ---")
    print(f"Current: {current_solar_term(date).name}")
    print(f"Next: {next_solar_term(date).name} in {days_until_next_term(date)} days")
    print()
    print("--- Sun ---")
    times = info.sun_times
    print(f"Civil dawn: {times.civil_dawn}")
    print(f"Sunrise: {times.sunrise}")
    print(f"Solar noon: {times.solar_noon}")
    print(f"Sunset: {times.sunset}")
    print(f"Civil dusk: {times.civil_dusk}")
    print(f"Day length: {day_length(date, location):.2f} hours")


if __name__ == "__main__":
    main()
