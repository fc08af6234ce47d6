"""Enumerations for diligentdate type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FieldKind(StrEnum):
    """Typed field of a DatePattern.

    StrEnum provides automatic string conversion: str(FieldKind.DAY) == "day".
    The value doubles as the regex group name used during extraction.
    """

    YEAR = "year"
    """Four-digit year: 2025"""

    YEAR_2 = "year2"
    """Two-digit year resolved through the century pivot: 25"""

    MONTH = "month"
    """Numeric month, one or two digits: 6, 06"""

    MONTH_NAME = "month_name"
    """Month name, abbreviated or full: Jun, June"""

    DAY = "day"
    """Day of month, one or two digits: 8, 08"""

    WEEKDAY = "weekday"
    """Weekday name, abbreviated or full: Wed, Wednesday"""

    HOUR = "hour"
    """Hour on the 24-hour clock: 0-23"""

    HOUR_12 = "hour12"
    """Hour on the 12-hour clock: 1-12 (requires a day period)"""

    MINUTE = "minute"
    """Minute: 0-59"""

    SECOND = "second"
    """Second: 0-59"""

    FRACTION = "fraction"
    """Fractional second digits: 5, 600, 600732"""

    DAY_PERIOD = "period"
    """AM/PM marker"""

    OFFSET = "offset"
    """Numeric UTC offset or Z: +0200, -08:00, Z"""

    ZONE_NAME = "zone"
    """Fixed-offset zone name: GMT, PST"""


class PatternFamily(StrEnum):
    """Group a DatePattern belongs to.

    Families appear in the Pattern Table in this declaration order.
    """

    RFC2822 = "rfc2822"
    """Internet message format: 18 Jun 2025 10:30:00 +0000"""

    RFC3339 = "rfc3339"
    """RFC 3339 / ISO 8601: 2025-06-18T10:30:00Z"""

    US_NUMERIC = "us_numeric"
    """Month first: 06/18/2025"""

    EU_NUMERIC = "eu_numeric"
    """Day first: 18/06/2025, 18.06.2025"""

    NAMED_MONTH = "named_month"
    """Spelled-out month: June 18, 2025; 18 June 2025"""

    LOOSE = "loose"
    """Year first with assorted separators: 2025/6/18, 20250618"""


__all__ = [
    "FieldKind",
    "PatternFamily",
]
