"""DatePattern type and the ordered Pattern Table.

The Pattern Table is the single source of truth for which layouts are
accepted and, through its order, how structurally ambiguous input is
resolved. Earlier entries win: "01/02/2025" is read month-first because the
US numeric family precedes the EU numeric family. No locale inference takes
place.

Table order (by family):
    1. RFC 2822       18 Jun 2025 10:30:00 +0000
    2. RFC 3339       2025-06-18T10:30:00Z
    3. US numeric     06/18/2025
    4. EU numeric     18/06/2025, 18.06.2025
    5. Named month    June 18, 2025; 18 June 2025; Dec 24 13:19:25 +0200 2017
    6. Loose          2025/6/18, 20250618

Weekday names never appear in the table: the normalizer strips them before
matching.

Thread-safe. The table is built once at import and never mutated.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from diligentdate.diagnostics import ErrorTemplate, PatternSyntaxError
from diligentdate.enums import FieldKind, PatternFamily

from .tokens import field_spec, tokenize_pattern

__all__ = [
    "PATTERN_TABLE",
    "DatePattern",
    "compile_pattern",
    "patterns",
]

# Field kinds that fill the same ParsedMoment slot; a pattern may carry
# at most one field per slot.
_SLOT: dict[FieldKind, str] = {
    FieldKind.YEAR: "year",
    FieldKind.YEAR_2: "year",
    FieldKind.MONTH: "month",
    FieldKind.MONTH_NAME: "month",
    FieldKind.DAY: "day",
    FieldKind.WEEKDAY: "weekday",
    FieldKind.HOUR: "hour",
    FieldKind.HOUR_12: "hour",
    FieldKind.MINUTE: "minute",
    FieldKind.SECOND: "second",
    FieldKind.FRACTION: "fraction",
    FieldKind.DAY_PERIOD: "period",
    FieldKind.OFFSET: "offset",
    FieldKind.ZONE_NAME: "offset",
}

_REQUIRED_SLOTS: tuple[str, ...] = ("year", "month", "day")


@dataclass(frozen=True, slots=True)
class DatePattern:
    """Immutable format descriptor.

    Attributes:
        source: CLDR-style pattern string, e.g. "d MMM yyyy HH:mm:ss Z"
        family: Pattern family (used for table ordering and reporting)
        fields: Field kinds in the order they appear
        regex: Compiled case-insensitive, ASCII-digit structural matcher
            (applied with fullmatch);
            each field is a named group keyed by its FieldKind value
    """

    source: str
    family: PatternFamily
    fields: tuple[FieldKind, ...]
    regex: re.Pattern[str] = field(compare=False, repr=False)

    @property
    def has_time(self) -> bool:
        """True if the pattern carries a time of day."""
        return FieldKind.HOUR in self.fields or FieldKind.HOUR_12 in self.fields

    @property
    def has_offset(self) -> bool:
        """True if the pattern carries a UTC offset or zone name."""
        return FieldKind.OFFSET in self.fields or FieldKind.ZONE_NAME in self.fields


def compile_pattern(source: str, family: PatternFamily) -> DatePattern:
    """Compile a CLDR-style pattern string into a DatePattern.

    Args:
        source: Pattern string (see parsing.tokens for the letters)
        family: Family the pattern belongs to

    Returns:
        DatePattern with its compiled structural matcher

    Raises:
        PatternSyntaxError: On unknown pattern letters, two fields for the
            same slot, a missing year/month/day, or an unterminated quote

    Example:
        >>> p = compile_pattern("yyyy-MM-dd", PatternFamily.RFC3339)
        >>> p.fields
        (<FieldKind.YEAR: 'year'>, <FieldKind.MONTH: 'month'>, <FieldKind.DAY: 'day'>)
    """
    parts: list[str] = []
    kinds: list[FieldKind] = []
    slots: set[str] = set()

    for token in tokenize_pattern(source):
        if token.literal:
            parts.append(re.escape(token.text))
            continue

        spec = field_spec(token.text)
        if spec is None:
            raise PatternSyntaxError(ErrorTemplate.pattern_unknown_field(source, token.text))
        slot = _SLOT[spec.kind]
        if slot in slots:
            raise PatternSyntaxError(ErrorTemplate.pattern_duplicate_field(source, slot))
        slots.add(slot)
        kinds.append(spec.kind)
        parts.append(f"(?P<{spec.kind.value}>{spec.shape})")

    for required in _REQUIRED_SLOTS:
        if required not in slots:
            raise PatternSyntaxError(ErrorTemplate.pattern_missing_date_field(source, required))

    return DatePattern(
        source=source,
        family=family,
        fields=tuple(kinds),
        regex=re.compile("".join(parts), re.IGNORECASE | re.ASCII),
    )


# ==============================================================================
# PATTERN TABLE
# ==============================================================================
# Order is policy. Within a family, longer (more specific) layouts precede
# their truncated forms. Time fields use H (1-2 digits) except in RFC 2822
# and RFC 3339, where the standards fix two-digit hours.

_TABLE_SOURCES: tuple[tuple[PatternFamily, tuple[str, ...]], ...] = (
    (
        PatternFamily.RFC2822,
        (
            "d MMM yyyy HH:mm:ss Z",
            "d MMM yyyy HH:mm:ss z",
            "d MMM yyyy HH:mm Z",
            "d MMM yyyy HH:mm z",
            "d MMM yy HH:mm:ss Z",
            "d MMM yy HH:mm:ss z",
            "d MMM yyyy HH:mm:ss",
            "d MMM yyyy HH:mm",
            "d MMM yyyy HH",
            "d MMM yyyy",
        ),
    ),
    (
        PatternFamily.RFC3339,
        (
            "yyyy-MM-dd'T'HH:mm:ss.SXXX",
            "yyyy-MM-dd'T'HH:mm:ssXXX",
            "yyyy-MM-dd'T'HH:mmXXX",
            "yyyy-MM-dd'T'HHXXX",
            "yyyy-MM-dd'T'HH:mm:ss.S",
            "yyyy-MM-dd'T'HH:mm:ss",
            "yyyy-MM-dd'T'HH:mm",
            "yyyy-MM-dd'T'HH",
            "yyyy-MM-dd HH:mm:ss.SXXX",
            "yyyy-MM-dd HH:mm:ssXXX",
            "yyyy-MM-dd HH:mm:ss.S Z",
            "yyyy-MM-dd HH:mm:ss Z",
            "yyyy-MM-dd HH:mm:ss z",
            "yyyy-MM-dd HH:mm:ss.S",
            "yyyy-MM-dd HH:mm:ss",
            "yyyy-MM-dd HH:mm",
            "yyyy-MM-dd",
        ),
    ),
    (
        PatternFamily.US_NUMERIC,
        (
            "M/d/yyyy H:mm:ss",
            "M/d/yyyy H:mm",
            "M/d/yyyy h:mm:ss a",
            "M/d/yyyy h:mm a",
            "M/d/yyyy",
            "M/d/yy",
            "M-d-yyyy",
        ),
    ),
    (
        PatternFamily.EU_NUMERIC,
        (
            "d/M/yyyy H:mm:ss",
            "d/M/yyyy H:mm",
            "d/M/yyyy",
            "d/M/yy",
            "d-M-yyyy",
            "d.M.yyyy H:mm:ss",
            "d.M.yyyy H:mm",
            "d.M.yyyy",
            "d.M.yy",
        ),
    ),
    (
        PatternFamily.NAMED_MONTH,
        (
            "MMMM d, yyyy h:mm a",
            "MMMM d, yyyy H:mm:ss",
            "MMMM d, yyyy H:mm",
            "MMMM d, yyyy",
            "MMM d, yyyy h:mm a",
            "MMM d, yyyy H:mm:ss",
            "MMM d, yyyy H:mm",
            "MMM d, yyyy",
            "MMMM d yyyy h:mm a",
            "MMMM d yyyy H:mm:ss",
            "MMMM d yyyy H:mm",
            "MMMM d yyyy",
            "MMM d yyyy h:mm a",
            "MMM d yyyy H:mm:ss",
            "MMM d yyyy H:mm",
            "MMM d yyyy",
            "d MMMM yyyy H:mm:ss",
            "d MMMM yyyy H:mm",
            "d MMMM yyyy",
            # Twitter API created_at
            "MMM d HH:mm:ss Z yyyy",
            # date(1) default output
            "MMM d HH:mm:ss z yyyy",
            # C asctime()
            "MMM d HH:mm:ss yyyy",
        ),
    ),
    (
        PatternFamily.LOOSE,
        (
            "yyyy/M/d H:mm:ss",
            "yyyy/M/d H:mm",
            "yyyy/M/d",
            "yyyy-M-d H:mm:ss",
            "yyyy-M-d H:mm",
            "yyyy-M-d",
            "yyyy.M.d",
            "yyyy M d",
            "yyyyMMddHHmmss",
            "yyyyMMdd",
        ),
    ),
)

# Process-wide read-only table, built once at import.
PATTERN_TABLE: tuple[DatePattern, ...] = tuple(
    compile_pattern(source, family)
    for family, sources in _TABLE_SOURCES
    for source in sources
)


def patterns() -> tuple[DatePattern, ...]:
    """Return the Pattern Table in priority order.

    The same tuple object is returned on every call.
    """
    return PATTERN_TABLE
