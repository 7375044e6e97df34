"""
Helper functions for formatting dates in the UI

"""

import datetime

import arrow
from babel.dates import format_datetime

from localdate.config import FormattingConfig
from localdate.patterns import datetime_pattern, join_date_time, patterns_for

GRANULARITIES = ("year", "month", "week", "day", "hour", "minute", "second")


def localise_datetime(date: datetime.datetime, config: FormattingConfig) -> datetime.datetime:
    """
    Localise the datetime object to the configured timezone. Naive datetimes are taken to
    already be in that timezone.
    """
    if date.tzinfo is None:
        return arrow.get(date, tzinfo=config.tzinfo).datetime
    return arrow.get(date).to(config.tzinfo).datetime


def format_pattern(date: datetime.datetime, pattern: str, config: FormattingConfig) -> str:
    """
    Formats date with a CLDR pattern, e.g. "EEE dd MMM y"
    """
    return format_datetime(localise_datetime(date, config), pattern, locale=config.locale)


def _format_styles(date: datetime.datetime, config: FormattingConfig, date_style: str, time_style: str) -> str:
    patterns = patterns_for(config.locale)
    return format_pattern(date, datetime_pattern(patterns, date_style, time_style), config)


def short_style_date_time(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. 01.02.20 13:14 (fr_CH)
    """
    return _format_styles(date, config, "short", "short")


def short_style_date_time_seconds(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. 01.02.20 13:14:15 (fr_CH)
    """
    return _format_styles(date, config, "short", "medium")


def medium_style_date_time(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. 1 févr. 2020 à 13:14:15 (fr_CH)
    """
    return _format_styles(date, config, "medium", "medium")


def medium_style_date_short_style_time(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. 1 févr. 2020 à 13:14 (fr_CH)
    """
    return _format_styles(date, config, "medium", "short")


def long_style_date_time(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. 1 février 2020 à 13:14:15 UTC+1 (fr_CH). The zone name depends on
    the configured timezone.
    """
    return _format_styles(date, config, "long", "long")


def short_style_time_no_date(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. 13:14
    """
    return format_pattern(date, patterns_for(config.locale).time["short"], config)


def get_short_date(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. 01.02.2020 (fr_CH)
    """
    return format_pattern(date, patterns_for(config.locale).short_date, config)


def get_day_month_and_year(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. sam. 01 févr. 2020 (fr_CH)
    """
    return format_pattern(date, patterns_for(config.locale).day_month_year, config)


def full_date_pattern(config: FormattingConfig) -> str:
    patterns = patterns_for(config.locale)
    return join_date_time(patterns, patterns.day_month_year, patterns.time["short"], "medium")


def get_full_date(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date as e.g. sam. 01 févr. 2020 à 13:14 (fr_CH)
    """
    return format_pattern(date, full_date_pattern(config), config)


def compare_to_granularity(
    first: datetime.datetime, second: datetime.datetime, granularity: str, config: FormattingConfig
) -> int:
    """
    Compare two dates after truncating both to the granularity, in the configured timezone.
    Returns -1, 0 or 1.
    """
    if granularity not in GRANULARITIES:
        raise ValueError(f"granularity must be one of {', '.join(GRANULARITIES)}, got {granularity!r}")
    a = arrow.get(localise_datetime(first, config)).floor(granularity)
    b = arrow.get(localise_datetime(second, config)).floor(granularity)
    return (a > b) - (a < b)
