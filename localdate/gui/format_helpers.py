"""
Helper functions for formatting dates relative to now, and for screen readers

"""
import datetime

from localdate.config import FormattingConfig
from localdate.gui.datetime_helpers import format_pattern, localise_datetime, short_style_time_no_date
from localdate.patterns import join_date_time, patterns_for

# Dates up to this many days back are shown as a weekday
WEEKDAY_RANGE_DAYS = 6


def day_offset(date: datetime.datetime, config: FormattingConfig) -> int:
    """
    Number of calendar days from today to date in the configured timezone, e.g. -1 for yesterday
    """
    return (localise_datetime(date, config).date() - config.now().date()).days


def relative_medium_date(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date relative to now, e.g. 13:14 today, hier, mercredi, mer. 20 mai or
    mar. 31 déc. 2019 (fr_CH)

    Dates are classified by calendar day in the configured timezone, not by elapsed time: on
    the day after a spring-forward change, 24 hours ago may already be two days back and is
    shown as a weekday.
    """
    patterns = patterns_for(config.locale)
    offset = day_offset(date, config)

    if offset == 0:
        return short_style_time_no_date(date, config)
    if offset == -1 and -1 in patterns.relative_days:
        return patterns.relative_days[-1]
    if -WEEKDAY_RANGE_DAYS <= offset < 0:
        return format_pattern(date, patterns.weekday, config)
    if localise_datetime(date, config).year == config.now().year:
        return format_pattern(date, patterns.day_month, config)
    return format_pattern(date, patterns.day_month_year, config)


def accessibility_date_time(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Formats date for screen readers, e.g. 1 février 2020 à 13:14 (fr_CH)
    """
    patterns = patterns_for(config.locale)
    pattern = join_date_time(patterns, patterns.date["long"], patterns.time["short"], "long")
    return format_pattern(date, pattern, config)


def accessibility_relative_day_time(date: datetime.datetime, config: FormattingConfig) -> str:
    """
    Like accessibility_date_time, but e.g. hier à 13:14 (fr_CH) when the day has a name
    """
    patterns = patterns_for(config.locale)
    day_name = patterns.relative_days.get(day_offset(date, config))
    if day_name is None:
        return accessibility_date_time(date, config)

    # Quote the name so it is not read as pattern fields
    quoted_day_name = "'{}'".format(day_name.replace("'", "''"))
    pattern = join_date_time(patterns, quoted_day_name, patterns.time["short"], "long")
    return format_pattern(date, pattern, config)
