"""
CLDR patterns used by the formatting helpers, resolved once per locale

"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, List, Mapping, Optional, Union

from babel import Locale
from babel.dates import match_skeleton

from localdate.locale import parse_locale

logger = logging.getLogger(__name__)

STYLES = ("short", "medium", "long", "full")

# {1} is replaced by the date pattern, {0} by the time pattern. CLDR keeps the
# "at time" variants of these apart from the plain ones, babel only ships the latter.
DATETIME_CONNECTORS: Dict[str, Dict[str, str]] = {
    "de": {"short": "{1}, {0}", "medium": "{1}, {0}", "long": "{1} 'um' {0}", "full": "{1} 'um' {0}"},
    "en": {"short": "{1}, {0}", "medium": "{1} 'at' {0}", "long": "{1} 'at' {0}", "full": "{1} 'at' {0}"},
    "fr": {"short": "{1} {0}", "medium": "{1} 'à' {0}", "long": "{1} 'à' {0}", "full": "{1} 'à' {0}"},
}

CUSTOM_PATTERNS: Dict[str, Dict[str, str]] = {
    "de": {"short_date": "dd.MM.y", "day_month_year": "EEE, dd. MMM y", "day_month": "EEE, dd. MMM"},
    "en": {"short_date": "MM/dd/y", "day_month_year": "EEE, MMM dd, y", "day_month": "EEE, MMM dd"},
    "en_GB": {"short_date": "dd/MM/y", "day_month_year": "EEE dd MMM y", "day_month": "EEE dd MMM"},
    "fr": {"short_date": "dd/MM/y", "day_month_year": "EEE dd MMM y", "day_month": "EEE dd MMM"},
    "fr_CA": {"short_date": "y-MM-dd", "day_month_year": "EEE dd MMM y", "day_month": "EEE dd MMM"},
    "fr_CH": {"short_date": "dd.MM.y", "day_month_year": "EEE dd MMM y", "day_month": "EEE dd MMM"},
}

# Used for locales without an entry in CUSTOM_PATTERNS
CUSTOM_SKELETONS = {"short_date": "yMMdd", "day_month_year": "yMMMEd", "day_month": "MMMEd"}

RELATIVE_DAYS: Dict[str, Dict[int, str]] = {
    "de": {-2: "vorgestern", -1: "gestern", 0: "heute", 1: "morgen", 2: "übermorgen"},
    "en": {-1: "yesterday", 0: "today", 1: "tomorrow"},
    "fr": {-2: "avant-hier", -1: "hier", 0: "aujourd’hui", 1: "demain", 2: "après-demain"},
}


@dataclass(frozen=True)
class LocalePatterns:
    identifier: str
    date: Mapping[str, str]
    time: Mapping[str, str]
    connectors: Mapping[str, str]
    short_date: str
    day_month_year: str
    day_month: str
    weekday: str
    relative_days: Mapping[int, str]


_dependent_caches: List[Callable[[], None]] = []


def register_cache(cache_clear: Callable[[], None]) -> None:
    """
    Have reset_caches() also clear a cache derived from locale data
    """
    _dependent_caches.append(cache_clear)


def reset_caches() -> None:
    """
    Drop every pattern and parser built from locale data, forcing them to be rebuilt
    """
    _patterns_for_identifier.cache_clear()
    for cache_clear in _dependent_caches:
        cache_clear()
    logger.debug("Locale pattern caches reset")


def patterns_for(locale: Union[str, Locale]) -> LocalePatterns:
    return _patterns_for_identifier(str(parse_locale(locale)))


def join_date_time(patterns: LocalePatterns, date_pattern: str, time_pattern: str, style: str) -> str:
    """
    Join a date and a time pattern with the connector of the given date style
    """
    return patterns.connectors[style].replace("{1}", date_pattern).replace("{0}", time_pattern)


def datetime_pattern(patterns: LocalePatterns, date_style: str, time_style: str) -> str:
    return join_date_time(patterns, patterns.date[date_style], patterns.time[time_style], date_style)


def _lookup(table: Mapping[str, Dict], locale: Locale) -> Optional[Dict]:
    for key in (str(locale), locale.language):
        if key in table:
            return table[key]
    return None


def _skeleton_pattern(locale: Locale, skeleton: str, fallback: str) -> str:
    skeletons = locale.datetime_skeletons
    match = match_skeleton(skeleton, skeletons)
    if match is None:
        logger.debug("No CLDR skeleton close to %s for %s", skeleton, locale)
        return fallback
    return skeletons[match].pattern


@lru_cache(maxsize=32)
def _patterns_for_identifier(identifier: str) -> LocalePatterns:
    locale = parse_locale(identifier)
    date = {style: locale.date_formats[style].pattern for style in STYLES}
    time = {style: locale.time_formats[style].pattern for style in STYLES}

    connectors = _lookup(DATETIME_CONNECTORS, locale)
    if connectors is None:
        connectors = {style: locale.datetime_formats[style] for style in STYLES}

    custom = _lookup(CUSTOM_PATTERNS, locale)
    if custom is None:
        custom = {
            name: _skeleton_pattern(locale, skeleton, date["medium"])
            for name, skeleton in CUSTOM_SKELETONS.items()
        }

    logger.debug("Resolved date patterns for %s", identifier)
    return LocalePatterns(
        identifier=identifier,
        date=date,
        time=time,
        connectors=connectors,
        short_date=custom["short_date"],
        day_month_year=custom["day_month_year"],
        day_month=custom["day_month"],
        weekday="EEEE",
        relative_days=_lookup(RELATIVE_DAYS, locale) or {},
    )
