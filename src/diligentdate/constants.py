"""Shared constants for diligentdate.

This module provides the build-time configuration surface of the parser.
Placing constants here avoids circular imports and provides a single source
of truth. Nothing here is read from the environment or changed at runtime,
which keeps every parse deterministic.

Constants are grouped by domain:
- Locale: which CLDR locale supplies month, weekday and day-period names
- Calendar limits: year window and two-digit year pivot
- Offset limits: accepted UTC offset range and fixed-offset zone names
- Input limits: DoS prevention via size constraints

Python 3.13+.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale
    "LOCALE_CODE",
    "MONTH_NAME_ALIASES",
    "WEEKDAY_NAME_ALIASES",
    # Calendar limits
    "MIN_YEAR",
    "MAX_YEAR",
    "TWO_DIGIT_YEAR_PIVOT",
    "FRACTION_DIGITS",
    # Offset limits
    "MIN_OFFSET_MINUTES",
    "MAX_OFFSET_MINUTES",
    "ZONE_OFFSETS",
    # Input limits
    "MAX_INPUT_LENGTH",
]

# ============================================================================
# LOCALE
# ============================================================================

# CLDR locale whose month, weekday and AM/PM names are embedded at import.
# Loaded once through Babel; see diligentdate.locale_tables.
LOCALE_CODE: str = "en"

# Common abbreviations missing from the CLDR data, added to the locale tables.
# Values are month numbers 1-12 and ISO weekdays 1-7 (Monday=1).
MONTH_NAME_ALIASES: MappingProxyType[str, int] = MappingProxyType({"Sept": 9})
WEEKDAY_NAME_ALIASES: MappingProxyType[str, int] = MappingProxyType(
    {
        "Tues": 2,
        "Thur": 4,
        "Thurs": 4,
    }
)

# ============================================================================
# CALENDAR LIMITS
# ============================================================================

# Year window accepted by ParsedMoment (same as datetime.MINYEAR/MAXYEAR).
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Two-digit year century window (POSIX strptime %y convention):
#   00..68 -> 2000..2068
#   69..99 -> 1969..1999
# Two-digit values strictly below the pivot land in the 2000s.
TWO_DIGIT_YEAR_PIVOT: int = 69

# Fractional seconds are kept at microsecond precision. Longer fractions
# (e.g. nanoseconds) are truncated, never rounded.
FRACTION_DIGITS: int = 6

# ============================================================================
# OFFSET LIMITS
# ============================================================================

# UTC offset range in minutes: [-1440, 1440).
MIN_OFFSET_MINUTES: int = -1440
MAX_OFFSET_MINUTES: int = 1440

# Fixed-offset zone names (RFC 2822 section 4.3 obsolete zones plus UTC/Z).
# Values are offsets in minutes east of UTC. No timezone database is consulted:
# these names always map to the same offset, regardless of date.
ZONE_OFFSETS: MappingProxyType[str, int] = MappingProxyType(
    {
        "UT": 0,
        "UTC": 0,
        "GMT": 0,
        "Z": 0,
        "EST": -5 * 60,
        "EDT": -4 * 60,
        "CST": -6 * 60,
        "CDT": -5 * 60,
        "MST": -7 * 60,
        "MDT": -6 * 60,
        "PST": -8 * 60,
        "PDT": -7 * 60,
    }
)

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum accepted input length in characters, measured after trimming
# surrounding whitespace.
# The longest supported layout is well under 64 characters; anything beyond
# this limit is rejected without trying the pattern table.
MAX_INPUT_LENGTH: int = 256
