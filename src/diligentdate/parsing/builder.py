"""Result Builder: raw field texts -> validated ParsedMoment.

build() turns the named groups of a structural match into integers, resolves
names through the embedded locale tables, applies the two-digit year pivot
and the 12-hour clock, and hands the values to ParsedMoment, whose
constructor performs the range and leap-year validation.

Pure. Raises InvalidMomentError on a semantic violation; the matcher treats
that as a failed attempt for the current pattern.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping

from diligentdate.constants import FRACTION_DIGITS, TWO_DIGIT_YEAR_PIVOT
from diligentdate.diagnostics import ErrorTemplate, InvalidMomentError
from diligentdate.enums import FieldKind
from diligentdate.locale_tables import LOCALE_NAMES
from diligentdate.moment import ParsedMoment

__all__ = ["build", "expand_two_digit_year"]


def expand_two_digit_year(value: int) -> int:
    """Map a two-digit year onto a full year using TWO_DIGIT_YEAR_PIVOT.

    Examples:
        >>> expand_two_digit_year(68)
        2068
        >>> expand_two_digit_year(69)
        1969
    """
    return 2000 + value if value < TWO_DIGIT_YEAR_PIVOT else 1900 + value


def build(fields: Mapping[FieldKind, str]) -> ParsedMoment:
    """Build a ParsedMoment from extracted field texts.

    Args:
        fields: Raw text per FieldKind, as produced by a structural match.
            Year, month and day are required (either numeric or named form).

    Returns:
        Validated ParsedMoment

    Raises:
        InvalidMomentError: If a value is out of range, a name is unknown,
            or the calendar date does not exist
        KeyError: If a required date field is missing (DatePattern
            compilation guarantees it is present)
    """
    _check_weekday(fields)
    return ParsedMoment(
        year=_year(fields),
        month=_month(fields),
        day=int(fields[FieldKind.DAY]),
        hour=_hour(fields),
        minute=_optional_int(fields.get(FieldKind.MINUTE)),
        second=_optional_int(fields.get(FieldKind.SECOND)),
        microsecond=_microsecond(fields.get(FieldKind.FRACTION)),
        offset_minutes=_offset(fields),
    )


def _optional_int(text: str | None) -> int | None:
    return None if text is None else int(text)


def _year(fields: Mapping[FieldKind, str]) -> int:
    if FieldKind.YEAR_2 in fields:
        return expand_two_digit_year(int(fields[FieldKind.YEAR_2]))
    return int(fields[FieldKind.YEAR])


def _month(fields: Mapping[FieldKind, str]) -> int:
    if FieldKind.MONTH_NAME in fields:
        name = fields[FieldKind.MONTH_NAME]
        number = LOCALE_NAMES.month_number(name)
        if number is None:
            raise InvalidMomentError(ErrorTemplate.unknown_name("month", name))
        return number
    return int(fields[FieldKind.MONTH])


def _hour(fields: Mapping[FieldKind, str]) -> int | None:
    if FieldKind.HOUR_12 not in fields:
        return _optional_int(fields.get(FieldKind.HOUR))

    hour = int(fields[FieldKind.HOUR_12])
    period = fields.get(FieldKind.DAY_PERIOD)
    if period is None:
        return hour
    if not 1 <= hour <= 12:
        raise InvalidMomentError(ErrorTemplate.hour_out_of_range(hour, 1, 12))
    shift = LOCALE_NAMES.period_offset(period)
    if shift is None:
        raise InvalidMomentError(ErrorTemplate.unknown_name("day period", period))
    return hour % 12 + shift


def _check_weekday(fields: Mapping[FieldKind, str]) -> None:
    # Spelling only; the weekday is not cross-checked against the date.
    name = fields.get(FieldKind.WEEKDAY)
    if name is not None and LOCALE_NAMES.weekday_number(name) is None:
        raise InvalidMomentError(ErrorTemplate.unknown_name("weekday", name))


def _microsecond(text: str | None) -> int | None:
    if text is None:
        return None
    return int(text[:FRACTION_DIGITS].ljust(FRACTION_DIGITS, "0"))


def _offset(fields: Mapping[FieldKind, str]) -> int | None:
    if FieldKind.ZONE_NAME in fields:
        name = fields[FieldKind.ZONE_NAME]
        offset = LOCALE_NAMES.zone_offset(name)
        if offset is None:
            raise InvalidMomentError(ErrorTemplate.unknown_name("zone", name))
        return offset

    text = fields.get(FieldKind.OFFSET)
    if text is None:
        return None
    if text in ("Z", "z"):
        return 0

    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if minutes > 59:
        raise InvalidMomentError(ErrorTemplate.malformed_offset(text))
    return sign * (hours * 60 + minutes)
