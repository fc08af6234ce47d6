"""Locale name tables for month, weekday and day-period lookup.

Names come from the Babel CLDR data of the build-time locale
(constants.LOCALE_CODE) and are loaded once, at import. The resulting tables
are immutable and shared by every parse call without synchronization.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from babel import Locale

from diligentdate.constants import (
    LOCALE_CODE,
    MONTH_NAME_ALIASES,
    WEEKDAY_NAME_ALIASES,
    ZONE_OFFSETS,
)

__all__ = [
    "LOCALE_NAMES",
    "LocaleNames",
    "load_locale_names",
    "names_alternation",
]

logger = logging.getLogger(__name__)

# Day period markers used when the CLDR data has no format/abbreviated entry.
_PERIOD_FALLBACK: tuple[str, str] = ("AM", "PM")


@dataclass(frozen=True, slots=True)
class LocaleNames:
    """Immutable name tables for one locale.

    All lookup keys are lowercased; lookups are case-insensitive.

    Attributes:
        locale_code: CLDR locale the names were taken from
        months: Month name (wide or abbreviated) -> month number 1-12
        weekdays: Weekday name (wide or abbreviated) -> ISO weekday 1-7
        periods: Day period marker -> hour offset (0 for AM, 12 for PM)
        zones: Fixed-offset zone name -> minutes east of UTC
        month_names_wide: Full month names, January first
        month_names_abbreviated: Abbreviated month names, January first
        month_name_aliases: Extra month abbreviations (Sept)
        weekday_names: Every weekday spelling, wide, abbreviated and aliased
    """

    locale_code: str
    months: MappingProxyType[str, int]
    weekdays: MappingProxyType[str, int]
    periods: MappingProxyType[str, int]
    zones: MappingProxyType[str, int]
    month_names_wide: tuple[str, ...]
    month_names_abbreviated: tuple[str, ...]
    month_name_aliases: tuple[str, ...]
    weekday_names: tuple[str, ...]

    def month_number(self, text: str) -> int | None:
        """Resolve a month name to 1-12, or None if unknown."""
        return self.months.get(text.lower())

    def weekday_number(self, text: str) -> int | None:
        """Resolve a weekday name to ISO 1-7 (Monday=1), or None if unknown."""
        return self.weekdays.get(text.lower().rstrip("."))

    def period_offset(self, text: str) -> int | None:
        """Resolve AM/PM to 0 or 12, or None if unknown."""
        return self.periods.get(text.lower())

    def zone_offset(self, text: str) -> int | None:
        """Resolve a fixed-offset zone name to minutes east of UTC."""
        return self.zones.get(text.lower())


def names_alternation(names: Iterable[str]) -> str:
    """Build a regex alternation matching any of the names.

    Longer names come first so that "June" is preferred over "Jun" and
    "Wednesday" over "Wed".

    Args:
        names: Literal names to alternate

    Returns:
        Non-capturing regex group, e.g. "(?:January|Jan)"
    """
    unique = sorted(set(names), key=lambda name: (-len(name), name))
    return "(?:" + "|".join(re.escape(name) for name in unique) + ")"


def load_locale_names(locale_code: str) -> LocaleNames:
    """Load month, weekday and day-period names from Babel CLDR data.

    MONTH_NAME_ALIASES and WEEKDAY_NAME_ALIASES are merged in without
    overriding a CLDR spelling.

    Args:
        locale_code: CLDR locale identifier (e.g., "en")

    Returns:
        Immutable LocaleNames tables

    Raises:
        babel.UnknownLocaleError: If the locale is not in the CLDR data
    """
    locale = Locale.parse(locale_code)

    months_wide = tuple(locale.months["format"]["wide"][i] for i in range(1, 13))
    months_abbr = tuple(locale.months["format"]["abbreviated"][i] for i in range(1, 13))

    months: dict[str, int] = {}
    for number, (wide, abbr) in enumerate(zip(months_wide, months_abbr, strict=True), 1):
        months[wide.lower()] = number
        months[abbr.lower()] = number
    for alias, number in MONTH_NAME_ALIASES.items():
        months.setdefault(alias.lower(), number)

    # CLDR numbers weekdays 0-6 starting on Monday.
    weekdays: dict[str, int] = {}
    for width in ("wide", "abbreviated"):
        for index, name in locale.days["format"][width].items():
            weekdays[name.lower().rstrip(".")] = index + 1
    for alias, number in WEEKDAY_NAME_ALIASES.items():
        weekdays.setdefault(alias.lower(), number)

    try:
        period_names = locale.day_periods["format"]["abbreviated"]
        am, pm = period_names["am"], period_names["pm"]
    except KeyError:
        am, pm = _PERIOD_FALLBACK

    names = LocaleNames(
        locale_code=locale_code,
        months=MappingProxyType(months),
        weekdays=MappingProxyType(weekdays),
        periods=MappingProxyType({am.lower(): 0, pm.lower(): 12}),
        zones=MappingProxyType({name.lower(): offset for name, offset in ZONE_OFFSETS.items()}),
        month_names_wide=months_wide,
        month_names_abbreviated=months_abbr,
        month_name_aliases=tuple(MONTH_NAME_ALIASES),
        weekday_names=(
            *(
                name
                for width in ("wide", "abbreviated")
                for name in locale.days["format"][width].values()
            ),
            *WEEKDAY_NAME_ALIASES,
        ),
    )
    logger.debug(
        "Loaded locale names for %s: %d month names, %d weekday names",
        locale_code,
        len(months),
        len(weekdays),
    )
    return names


# Process-wide tables, built once at import.
LOCALE_NAMES: LocaleNames = load_locale_names(LOCALE_CODE)
