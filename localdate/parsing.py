"""
Parse strings produced by the formatting helpers back into dates

"""
import datetime
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, Optional, Tuple

from babel.dates import tokenize_pattern

from localdate.config import FormattingConfig
from localdate.gui.datetime_helpers import full_date_pattern, localise_datetime
from localdate.locale import parse_locale
from localdate.patterns import patterns_for, register_cache

logger = logging.getLogger(__name__)

NAME_WIDTHS = {3: "abbreviated", 4: "wide", 5: "narrow"}
NUMERIC_FIELDS = {
    "y": r"\d+",
    "Y": r"\d+",
    "u": r"\d+",
    "M": r"\d{1,2}",
    "L": r"\d{1,2}",
    "d": r"\d{1,2}",
    "H": r"\d{1,2}",
    "k": r"\d{1,2}",
    "h": r"\d{1,2}",
    "K": r"\d{1,2}",
    "m": r"\d{1,2}",
    "s": r"\d{1,2}",
    "S": r"\d+",
}


@dataclass(frozen=True)
class CompiledPattern:
    regex: re.Pattern
    # (group name, field character, repetition count)
    fields: Tuple[Tuple[str, str, int], ...]
    months: Dict[str, int]
    periods: Dict[str, str]


def _alternation(names: Iterable[str]) -> str:
    ordered = sorted(set(names), key=len, reverse=True)
    return "(?:{})".format("|".join(re.escape(name) for name in ordered))


def _names(data, width: str) -> Dict[str, object]:
    """
    Map lower-cased names of every context (format, stand-alone) to their key
    """
    names = {}
    for context in ("format", "stand-alone"):
        for key, name in data.get(context, {}).get(width, {}).items():
            names[name.lower()] = key
    return names


def _literal(text: str) -> str:
    return "".join(r"\s+" if part.isspace() else re.escape(part) for part in re.split(r"(\s+)", text) if part)


@lru_cache(maxsize=64)
def compile_pattern(locale_identifier: str, pattern: str) -> CompiledPattern:
    """
    Build a regular expression matching what babel formats for the CLDR pattern
    """
    locale = parse_locale(locale_identifier)
    parts = []
    fields = []
    months: Dict[str, int] = {}
    periods: Dict[str, str] = {}

    for index, (kind, value) in enumerate(tokenize_pattern(pattern)):
        if kind == "chars":
            parts.append(_literal(value))
            continue

        char, count = value
        group = f"f{index}"
        if char in ("M", "L") and count >= 3:
            month_names = _names(locale.months, NAME_WIDTHS.get(count, "wide"))
            months.update(month_names)
            regex = _alternation(month_names)
        elif char in ("E", "e", "c") and (count >= 3 or char == "E"):
            regex = _alternation(_names(locale.days, NAME_WIDTHS.get(max(count, 3), "wide")))
        elif char == "a":
            period_names = {
                name.lower(): key
                for context in locale.day_periods.values()
                for width in context.values()
                for key, name in width.items()
                if key in ("am", "pm")
            }
            periods.update(period_names)
            regex = _alternation(period_names)
        elif char in NUMERIC_FIELDS:
            regex = r"\d{2}" if char == "y" and count == 2 else NUMERIC_FIELDS[char]
        else:
            raise ValueError(f"Cannot parse pattern field {char * count!r} in {pattern!r}")

        parts.append(f"(?P<{group}>{regex})")
        fields.append((group, char, count))

    return CompiledPattern(
        regex=re.compile("".join(parts), re.IGNORECASE),
        fields=tuple(fields),
        months=months,
        periods=periods,
    )


register_cache(compile_pattern.cache_clear)


def parse_with_pattern(value: str, pattern: str, config: FormattingConfig) -> Optional[datetime.datetime]:
    """
    Parse value formatted with the CLDR pattern in the configured locale. Returns None if it
    does not match or names a date that does not exist.
    """
    compiled = compile_pattern(config.locale_identifier, pattern)
    match = compiled.regex.fullmatch(value.strip())
    if match is None:
        logger.debug("%r does not match pattern %r", value, pattern)
        return None

    parts = {"year": config.now().year, "month": 1, "day": 1, "hour": 0, "minute": 0, "second": 0}
    microsecond = 0
    twelve_hour = None
    period = None
    for group, char, count in compiled.fields:
        text = match.group(group)
        if char in ("y", "Y", "u"):
            parts["year"] = 2000 + int(text) if count == 2 else int(text)
        elif char in ("M", "L"):
            parts["month"] = compiled.months[text.lower()] if count >= 3 else int(text)
        elif char == "d":
            parts["day"] = int(text)
        elif char == "H":
            parts["hour"] = int(text)
        elif char == "k":
            parts["hour"] = int(text) % 24
        elif char in ("h", "K"):
            twelve_hour = int(text) % 12
        elif char == "a":
            period = compiled.periods[text.lower()]
        elif char == "m":
            parts["minute"] = int(text)
        elif char == "s":
            parts["second"] = int(text)
        elif char == "S":
            microsecond = int(text.ljust(6, "0")[:6])

    if twelve_hour is not None:
        parts["hour"] = twelve_hour + (12 if period == "pm" else 0)

    try:
        date = datetime.datetime(microsecond=microsecond, **parts)
    except ValueError:
        logger.debug("%r names a date that does not exist", value)
        return None
    return localise_datetime(date, config)


def get_date_from_day_month_and_year_date_string(value: str, config: FormattingConfig) -> Optional[datetime.datetime]:
    """
    Parse a string produced by get_day_month_and_year, e.g. sam. 01 févr. 2020 (fr_CH)
    """
    return parse_with_pattern(value, patterns_for(config.locale).day_month_year, config)


def get_date_from_full_date_string(value: str, config: FormattingConfig) -> Optional[datetime.datetime]:
    """
    Parse a string produced by get_full_date, e.g. sam. 01 févr. 2020 à 13:14 (fr_CH)
    """
    return parse_with_pattern(value, full_date_pattern(config), config)
