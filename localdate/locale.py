import locale
import logging
from typing import NewType, Union

from babel import Locale, UnknownLocaleError

logger = logging.getLogger(__name__)

LanguageCode = NewType("LanguageCode", str)
DEFAULT_LANGUAGE = LanguageCode("en")
DEFAULT_LOCALE = "en_US"


class UnsupportedLocaleError(ValueError):
    """Raised when a locale identifier has no CLDR data behind it."""


def get_locale() -> str:
    """Get the current locale."""
    try:
        # Use the operating system's locale.
        current_locale, encoding = locale.getlocale()
        if current_locale is None or current_locale in ("C", "POSIX"):
            return DEFAULT_LOCALE
    except ValueError:  # pragma: no cover
        return DEFAULT_LOCALE
    return current_locale


def get_locale_code() -> LanguageCode:
    """Get the current locale code."""
    try:
        return LanguageCode(parse_locale(get_locale()).language)
    except UnsupportedLocaleError:
        return DEFAULT_LANGUAGE


def parse_locale(identifier: Union[str, Locale]) -> Locale:
    """
    Resolve a locale identifier to its CLDR data.

    Both POSIX ("fr_CH", "fr_CH.UTF-8") and BCP 47 ("fr-CH") spellings are
    accepted.
    """
    if isinstance(identifier, Locale):
        return identifier
    try:
        # Encodings such as UTF-8 may contain a hyphen, so drop them and any modifier
        base = identifier.split(".", 1)[0].split("@", 1)[0]
        return Locale.parse(base, sep="-" if "-" in base else "_")
    except (UnknownLocaleError, ValueError, TypeError, AttributeError) as e:
        raise UnsupportedLocaleError(f"Unsupported locale: {identifier!r}") from e


def get_system_locale() -> Locale:
    """Get the operating system's locale, or the default one if it is unknown to CLDR."""
    current_locale = get_locale()
    try:
        return parse_locale(current_locale)
    except UnsupportedLocaleError:
        logger.warning(
            "System locale %r is not supported, falling back to %s", current_locale, DEFAULT_LOCALE
        )
        return parse_locale(DEFAULT_LOCALE)
