"""Parse result types: ParsedMoment and NotFound.

ParsedMoment is the immutable decomposition of a successfully parsed date
string. Time-of-day and offset fields are optional and stay None when the
input did not carry them, so "2025-06-18" and "2025-06-18T00:00" remain
distinguishable.

NotFound is the normal negative outcome of parse_date(). It is returned,
never raised, and is falsy so callers can write ``if result: ...``.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from datetime import tzinfo as TZInfo
from itertools import pairwise

from diligentdate.constants import (
    MAX_OFFSET_MINUTES,
    MAX_YEAR,
    MIN_OFFSET_MINUTES,
    MIN_YEAR,
)
from diligentdate.diagnostics import Diagnostic, ErrorTemplate, InvalidMomentError

__all__ = [
    "NotFound",
    "ParsedMoment",
    "days_in_month",
    "is_leap_year",
]

_DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap rule: divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month.

    Args:
        year: Calendar year (leap years give February 29 days)
        month: Month 1-12

    Returns:
        Last valid day of the month
    """
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, slots=True)
class ParsedMoment:
    """A validated calendar date with optional time of day and UTC offset.

    Invariants (checked at construction):
        - year in [1, 9999], month in [1, 12]
        - day valid for (year, month), including leap-year February 29
        - hour in [0, 23]; minute and second in [0, 59]
        - microsecond in [0, 999999]
        - offset_minutes in [-1440, 1440)
        - minute requires hour, second requires minute, microsecond
          requires second, and an offset requires a time of day

    Attributes:
        year: Four-digit calendar year
        month: Month 1-12
        day: Day of month
        hour: Hour 0-23, or None for date-only input
        minute: Minute, or None when absent
        second: Second, or None when absent
        microsecond: Fractional second in microseconds, or None when absent
        offset_minutes: UTC offset in minutes east of UTC, or None when the
            input carried no offset (local/unknown time)

    Raises:
        InvalidMomentError: If any invariant is violated
    """

    year: int
    month: int
    day: int
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    microsecond: int | None = None
    offset_minutes: int | None = None

    def __post_init__(self) -> None:
        """Validate ranges, the leap-year calendar, and the time prefix chain."""
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidMomentError(ErrorTemplate.year_out_of_range(self.year, MIN_YEAR, MAX_YEAR))
        if not 1 <= self.month <= 12:
            raise InvalidMomentError(ErrorTemplate.month_out_of_range(self.month))
        last_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last_day:
            raise InvalidMomentError(
                ErrorTemplate.day_out_of_range(self.year, self.month, self.day, last_day)
            )

        chain = (
            ("hour", self.hour),
            ("minute", self.minute),
            ("second", self.second),
            ("microsecond", self.microsecond),
        )
        for (coarse_name, coarse), (fine_name, fine) in pairwise(chain):
            if fine is not None and coarse is None:
                raise InvalidMomentError(ErrorTemplate.incomplete_time(fine_name, coarse_name))
        if self.offset_minutes is not None and self.hour is None:
            raise InvalidMomentError(ErrorTemplate.incomplete_time("offset_minutes", "hour"))

        if self.hour is not None and not 0 <= self.hour <= 23:
            raise InvalidMomentError(ErrorTemplate.hour_out_of_range(self.hour))
        if self.minute is not None and not 0 <= self.minute <= 59:
            raise InvalidMomentError(ErrorTemplate.minute_out_of_range(self.minute))
        if self.second is not None and not 0 <= self.second <= 59:
            raise InvalidMomentError(ErrorTemplate.second_out_of_range(self.second))
        if self.microsecond is not None and not 0 <= self.microsecond <= 999_999:
            raise InvalidMomentError(ErrorTemplate.microsecond_out_of_range(self.microsecond))
        if self.offset_minutes is not None and not (
            MIN_OFFSET_MINUTES <= self.offset_minutes < MAX_OFFSET_MINUTES
        ):
            raise InvalidMomentError(
                ErrorTemplate.offset_out_of_range(
                    self.offset_minutes, MIN_OFFSET_MINUTES, MAX_OFFSET_MINUTES
                )
            )

    @property
    def has_time(self) -> bool:
        """True if the input carried a time of day."""
        return self.hour is not None

    @property
    def is_aware(self) -> bool:
        """True if the input carried a UTC offset (Z, numeric, or zone name)."""
        return self.offset_minutes is not None

    @property
    def tzinfo(self) -> timezone | None:
        """Fixed-offset timezone for the parsed offset, or None if absent.

        Raises:
            InvalidMomentError: For an offset of -1440 (-24:00), which is a
                valid ParsedMoment offset but not a valid datetime.timezone
        """
        if self.offset_minutes is None:
            return None
        if self.offset_minutes == 0:
            return timezone.utc
        if self.offset_minutes <= MIN_OFFSET_MINUTES:
            raise InvalidMomentError(ErrorTemplate.offset_not_representable(self.offset_minutes))
        return timezone(timedelta(minutes=self.offset_minutes))

    def to_date(self) -> date:
        """Return the calendar date, ignoring time and offset."""
        return date(self.year, self.month, self.day)

    def to_datetime(self, tzinfo: TZInfo | None = None) -> datetime:
        """Convert to a stdlib datetime.

        Absent time fields become zero. The parsed offset wins over ``tzinfo``;
        ``tzinfo`` is only applied when the input carried no offset.

        Args:
            tzinfo: Timezone to assign if the input had no offset
                (default: None - naive datetime)

        Returns:
            datetime for this moment

        Raises:
            InvalidMomentError: If the offset is -24:00 (see tzinfo)
        """
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour or 0,
            self.minute or 0,
            self.second or 0,
            self.microsecond or 0,
            tzinfo=self.tzinfo if self.offset_minutes is not None else tzinfo,
        )

    def to_rfc3339(self) -> str:
        """Render the canonical text of this moment.

        Date-only moments render as YYYY-MM-DD. Times render at the precision
        the input had (THH, THH:MM, THH:MM:SS, THH:MM:SS.ffffff). A zero offset
        renders as Z, any other offset as +HH:MM / -HH:MM.

        Re-parsing the result with parse_date() yields an equal ParsedMoment.

        Example:
            >>> ParsedMoment(2025, 6, 18, 10, 30, 0, offset_minutes=0).to_rfc3339()
            '2025-06-18T10:30:00Z'
        """
        text = f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if self.hour is None:
            return text
        text += f"T{self.hour:02d}"
        if self.minute is not None:
            text += f":{self.minute:02d}"
        if self.second is not None:
            text += f":{self.second:02d}"
        if self.microsecond is not None:
            text += f".{self.microsecond:06d}"
        if self.offset_minutes is not None:
            text += _format_offset(self.offset_minutes)
        return text

    def __str__(self) -> str:
        return self.to_rfc3339()


def _format_offset(offset_minutes: int) -> str:
    if offset_minutes == 0:
        return "Z"
    sign = "+" if offset_minutes > 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


@dataclass(frozen=True, slots=True)
class NotFound:
    """Negative parse outcome: no pattern produced a valid moment.

    Falsy, so ``if parse_date(text):`` reads naturally.

    Attributes:
        input_value: The input as received (repr of non-string input)
        diagnostics: Summary diagnostic first, then one diagnostic per
            pattern that matched structurally but failed semantic validation
    """

    input_value: str
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    def __bool__(self) -> bool:
        return False

    @property
    def diagnostic(self) -> Diagnostic | None:
        """The summary diagnostic explaining why nothing matched."""
        return self.diagnostics[0] if self.diagnostics else None
