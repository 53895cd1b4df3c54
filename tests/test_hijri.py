from dataclasses import fields
from datetime import date, datetime, timedelta

import pytest

from adhantimes.hijri import (
    HIJRI_EPOCH,
    HIJRI_MONTHS,
    HIJRI_MONTHS_ARABIC,
    convert_to_hijri,
    format_hijri,
    get_observances,
)
from adhantimes.models import HijriDate


def test_epoch_is_first_of_muharram():
    h = convert_to_hijri(HIJRI_EPOCH)
    assert (h.day, h.month_index, h.month_name, h.year) == (1, 0, "Muharram", 1)


def test_year_rolls_over_every_354_days():
    h = convert_to_hijri(HIJRI_EPOCH + timedelta(days=354))
    assert (h.day, h.month_name, h.year) == (1, "Muharram", 2)


@pytest.mark.parametrize(
    "offset, month_name, day",
    [
        (29, "Muharram", 30),
        (30, "Safar", 1),
        (236, "Ramadan", 1),
        (353, "Dhu al-Hijjah", 29),
    ],
)
def test_month_boundaries_use_29_5_day_months(offset, month_name, day):
    h = convert_to_hijri(HIJRI_EPOCH + timedelta(days=offset))
    assert h.month_name == month_name
    assert h.day == day


def test_datetime_uses_its_wall_clock_date():
    assert convert_to_hijri(datetime(2024, 3, 11, 23, 59)) == convert_to_hijri(
        date(2024, 3, 11)
    )


def test_pre_epoch_dates_are_clamped():
    h = convert_to_hijri(date(600, 1, 1))
    assert (h.day, h.month_index, h.year) == (1, 0, 1)


def test_fields_stay_in_range_over_several_years():
    start = date(2020, 1, 1)
    for offset in range(0, 4 * 366):
        h = convert_to_hijri(start + timedelta(days=offset))
        assert 0 <= h.month_index <= 11
        assert 1 <= h.day <= 30
        assert h.year >= 1
        assert h.month_name == HIJRI_MONTHS[h.month_index]


def test_modern_dates_land_in_the_15th_century_ah():
    assert convert_to_hijri(date(2024, 1, 1)).year in (1445, 1446, 1447)


def test_conversion_is_repeatable():
    d = date(2031, 8, 9)
    assert convert_to_hijri(d) == convert_to_hijri(d)


def test_arabic_month_name_follows_index():
    h = convert_to_hijri(HIJRI_EPOCH + timedelta(days=236))
    assert h.month_name_arabic == HIJRI_MONTHS_ARABIC[8] == "رمضان"


def test_format_hijri():
    h = convert_to_hijri(HIJRI_EPOCH + timedelta(days=236 + 8))
    assert format_hijri(h) == "9 Ramadan 1 AH"
    assert format_hijri(h, "ar") == "9 رمضان 1 هـ"


def test_hajj_and_eid_al_adha_overlap():
    assert get_observances("Dhu al-Hijjah", 10) == ["Hajj Period", "Eid al-Adha"]


@pytest.mark.parametrize("day", [8, 9, 11, 12])
def test_hajj_period_range(day):
    assert get_observances("Dhu al-Hijjah", day) == ["Hajj Period"]


def test_start_of_ramadan_only():
    assert get_observances("Ramadan", 1) == ["Start of Ramadan"]


@pytest.mark.parametrize("day", [27, 28, 29, 30])
def test_laylat_al_qadr(day):
    assert get_observances("Ramadan", day) == ["Laylat al-Qadr"]


@pytest.mark.parametrize(
    "month, day, expected",
    [
        ("Shawwal", 1, ["Eid al-Fitr"]),
        ("Muharram", 1, ["Islamic New Year"]),
        ("Muharram", 10, ["Day of Ashura"]),
        ("Rajab", 15, []),
        ("Ramadan", 26, []),
        ("Dhu al-Hijjah", 13, []),
    ],
)
def test_observance_table(month, day, expected):
    assert get_observances(month, day) == expected


def test_format_hijri_uses_stored_arabic_name():
    h = HijriDate(
        day=1, month_index=9, month_name="Shawwal", month_name_arabic="شوال", year=1446
    )
    assert format_hijri(h, "ar") == "1 شوال 1446 هـ"
    assert "month_name_arabic" in {f.name for f in fields(HijriDate)}
