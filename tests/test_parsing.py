import datetime

import pytest

from localdate.gui.datetime_helpers import compare_to_granularity, get_day_month_and_year, get_full_date
from localdate.parsing import (
    compile_pattern,
    get_date_from_day_month_and_year_date_string,
    get_date_from_full_date_string,
    parse_with_pattern,
)
from localdate.patterns import reset_caches
from tests.helper import ZURICH


def test_parse_day_month_and_year(fr_ch_config):
    actual = get_date_from_day_month_and_year_date_string("sam. 01 févr. 2020", fr_ch_config)
    assert actual == datetime.datetime(2020, 2, 1, tzinfo=ZURICH)


def test_parse_full_date(fr_ch_config):
    actual = get_date_from_full_date_string("sam. 01 févr. 2020 à 13:14", fr_ch_config)
    assert actual == datetime.datetime(2020, 2, 1, 13, 14, tzinfo=ZURICH)


def test_parse_is_case_and_whitespace_insensitive(fr_ch_config):
    actual = get_date_from_full_date_string("  SAM.  01 FÉVR. 2020 à 13:14 ", fr_ch_config)
    assert actual == datetime.datetime(2020, 2, 1, 13, 14, tzinfo=ZURICH)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "hier",
        "01.02.2020",
        "sam. 01 févr.",
        "sam. 31 févr. 2020",
    ],
)
def test_parse_returns_none_for_other_strings(fr_ch_config, value):
    assert get_date_from_day_month_and_year_date_string(value, fr_ch_config) is None


def test_parse_defaults_to_current_year(fr_ch_config):
    actual = parse_with_pattern("mer. 20 mai", "EEE dd MMM", fr_ch_config)
    assert actual == datetime.datetime(2020, 5, 20, tzinfo=ZURICH)


def test_parse_two_digit_year_and_seconds(fr_ch_config):
    actual = parse_with_pattern("01.02.20 13:14:15", "dd.MM.yy HH:mm:ss", fr_ch_config)
    assert actual == datetime.datetime(2020, 2, 1, 13, 14, 15, tzinfo=ZURICH)


def test_parse_twelve_hour_clock(fr_ch_config):
    english = fr_ch_config.with_locale("en_US")

    assert parse_with_pattern("1:14 PM", "h:mm a", english).hour == 13
    assert parse_with_pattern("12:05 AM", "h:mm a", english).hour == 0


def test_zone_fields_cannot_be_parsed(fr_ch_config):
    with pytest.raises(ValueError):
        parse_with_pattern("13:14 UTC", "HH:mm z", fr_ch_config)


def test_round_trip_other_locale(de_ch_config, reference_timestamp):
    formatted = get_full_date(reference_timestamp, de_ch_config)

    actual = get_date_from_full_date_string(formatted, de_ch_config)

    assert compare_to_granularity(actual, reference_timestamp, "minute", de_ch_config) == 0


def test_round_trip_in_another_timezone(fr_ch_config, reference_timestamp):
    tokyo = fr_ch_config.with_timezone("Asia/Tokyo")
    formatted = get_day_month_and_year(reference_timestamp, tokyo)

    actual = get_date_from_day_month_and_year_date_string(formatted, tokyo)

    assert compare_to_granularity(actual, reference_timestamp, "day", tokyo) == 0


def test_compiled_patterns_are_cached_until_reset():
    first = compile_pattern("fr_CH", "EEE dd MMM y")
    assert compile_pattern("fr_CH", "EEE dd MMM y") is first

    reset_caches()

    assert compile_pattern("fr_CH", "EEE dd MMM y") is not first
