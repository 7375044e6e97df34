"""
Formatting configuration passed explicitly to every helper

"""
import dataclasses
import datetime
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

import arrow
from babel import Locale
from dateutil import tz

from localdate.locale import get_system_locale, parse_locale

logger = logging.getLogger(__name__)

SUPPORTED_CALENDARS = ("gregorian",)

Clock = Callable[[], datetime.datetime]
TimeZoneLike = Union[None, str, datetime.tzinfo]


def _utcnow() -> datetime.datetime:
    return arrow.utcnow().datetime


def resolve_timezone(value: TimeZoneLike) -> datetime.tzinfo:
    """
    Resolve an IANA zone name, a tzinfo or None (the system time zone)
    """
    if value is None:
        return tz.tzlocal()
    if isinstance(value, datetime.tzinfo):
        return value
    timezone = tz.gettz(value)
    if timezone is None:
        raise ValueError(f"Unknown time zone: {value!r}")
    return timezone


@dataclass(frozen=True)
class FormattingConfig:
    locale: Locale
    tzinfo: datetime.tzinfo
    calendar: str = "gregorian"
    clock: Clock = field(default=_utcnow, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.calendar not in SUPPORTED_CALENDARS:
            raise ValueError(
                f"calendar must be one of {', '.join(SUPPORTED_CALENDARS)}, got {self.calendar!r}"
            )

    @classmethod
    def create(
        cls,
        locale_identifier: Union[str, Locale],
        timezone: TimeZoneLike = None,
        clock: Optional[Clock] = None,
    ) -> "FormattingConfig":
        config = cls(
            locale=parse_locale(locale_identifier),
            tzinfo=resolve_timezone(timezone),
            clock=clock or _utcnow,
        )
        logger.debug("Created formatting config for %s", config.locale_identifier)
        return config

    @classmethod
    def from_system(cls, clock: Optional[Clock] = None) -> "FormattingConfig":
        """
        Use the operating system's locale and time zone
        """
        return cls(locale=get_system_locale(), tzinfo=tz.tzlocal(), clock=clock or _utcnow)

    @property
    def locale_identifier(self) -> str:
        return str(self.locale)

    def with_locale(self, locale_identifier: Union[str, Locale]) -> "FormattingConfig":
        return dataclasses.replace(self, locale=parse_locale(locale_identifier))

    def with_timezone(self, timezone: TimeZoneLike) -> "FormattingConfig":
        return dataclasses.replace(self, tzinfo=resolve_timezone(timezone))

    def now(self) -> datetime.datetime:
        """
        Current time in the configured time zone
        """
        return arrow.get(self.clock()).to(self.tzinfo).datetime
