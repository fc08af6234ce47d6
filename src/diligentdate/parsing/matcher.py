"""Pattern cascade: normalized text -> first valid ParsedMoment.

parse_date() walks the Pattern Table in order. Each pattern is tried as an
anchored structural match; a structural hit is handed to the Result Builder,
and a semantic rejection (month 13, April 31, February 29 in a common year)
only disqualifies that pattern. The first pattern that yields a valid moment
wins. When the whole text matches nothing, the RFC 3339 patterns get a second
pass against a leading prefix of the text.

Functions NEVER raise for bad input. A failed parse returns NotFound, which
carries a summary Diagnostic plus one Diagnostic per semantic rejection.

Thread Safety:
    Thread-safe. Reads only the immutable Pattern Table and locale tables.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from datetime import tzinfo as TZInfo
from types import MappingProxyType

from diligentdate.constants import MAX_INPUT_LENGTH
from diligentdate.diagnostics import Diagnostic, ErrorTemplate, InvalidMomentError
from diligentdate.enums import FieldKind, PatternFamily
from diligentdate.moment import NotFound, ParsedMoment

from .builder import build
from .normalizer import normalize
from .patterns import PATTERN_TABLE, DatePattern

__all__ = [
    "ParseAttempt",
    "match_pattern",
    "match_prefix",
    "parse_date",
    "parse_datetime",
]

logger = logging.getLogger(__name__)

# Patterns retried against a leading prefix after the full-text pass fails.
_PREFIX_TABLE: tuple[DatePattern, ...] = tuple(
    pattern for pattern in PATTERN_TABLE if pattern.family is PatternFamily.RFC3339
)

# Characters that would continue the token a prefix match ended inside.
_CONTINUATION_CHARS = frozenset("0123456789:.+-Zz")


@dataclass(frozen=True, slots=True)
class ParseAttempt:
    """Structural match of one DatePattern against normalized text.

    Attributes:
        text: Normalized input the pattern matched
        pattern: The DatePattern that matched
        fields: Raw field text per FieldKind (only fields present in the text)
    """

    text: str
    pattern: DatePattern
    fields: MappingProxyType[FieldKind, str]


def match_pattern(pattern: DatePattern, text: str) -> ParseAttempt | None:
    """Structurally match a single pattern against normalized text.

    No semantic validation takes place: "2025-13-45" matches "yyyy-MM-dd".

    Args:
        pattern: DatePattern to try
        text: Normalized input (see normalize())

    Returns:
        ParseAttempt with the extracted field texts, or None on mismatch
    """
    match = pattern.regex.fullmatch(text)
    if match is None:
        return None
    return _attempt(text, pattern, match)


def match_prefix(pattern: DatePattern, text: str) -> ParseAttempt | None:
    """Structurally match a pattern against the start of normalized text.

    The match must stop at a token boundary: the next character may not
    continue a number, a time, a fraction or an offset (digits, ":", ".",
    "+", "-", "Z"), and a date-only match may not be followed by the "T" that
    introduces a time. "2010-02-17T00:00:00ZT00:00:00-08:00" yields the
    leading RFC 3339 timestamp; "2025-06-18T10:30:00+05:75" yields nothing.

    Args:
        pattern: DatePattern to try
        text: Normalized input

    Returns:
        ParseAttempt for the matched prefix, or None if the pattern does not
        match a proper prefix ending at a boundary
    """
    match = pattern.regex.match(text)
    if match is None or match.end() == len(text):
        return None
    following = text[match.end()]
    if following in _CONTINUATION_CHARS:
        return None
    if not pattern.has_time and following in "Tt":
        return None
    return _attempt(match.group(), pattern, match)


def parse_date(value: str) -> ParsedMoment | NotFound:
    """Parse a free-form date string.

    Every pattern of the table is first tried against the whole normalized
    text. If none yields a valid moment, the RFC 3339 patterns are tried
    once more against a leading prefix (see match_prefix()), so feed
    timestamps followed by trailing data still parse.

    Args:
        value: Date string in any layout of the Pattern Table
            (e.g., "Wed, 18 Jun 2025 10:30:00 +0000", "06/18/2025",
            "June 18, 2025", "2025-06-18T10:30:00Z")

    Returns:
        ParsedMoment from the first pattern that matches and validates,
        otherwise NotFound

    Examples:
        >>> parse_date("2025-06-18T10:30:00Z").offset_minutes
        0
        >>> parse_date("01/02/2025").to_rfc3339()
        '2025-01-02'
        >>> bool(parse_date("Yesterday"))
        False
    """
    # Runtime defense for untyped callers
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.invalid_input_type(type(value).__name__)  # type: ignore[unreachable]
        return NotFound(input_value=repr(value), diagnostics=(diagnostic,))

    # Surrounding whitespace does not count toward the limit.
    length = len(value.strip())
    if length > MAX_INPUT_LENGTH:
        diagnostic = ErrorTemplate.input_too_long(length, MAX_INPUT_LENGTH)
        return NotFound(input_value=value, diagnostics=(diagnostic,))

    text = normalize(value)
    if not text:
        return NotFound(input_value=value, diagnostics=(ErrorTemplate.empty_input(value),))

    rejections: list[Diagnostic] = []
    moment = _first_valid(text, PATTERN_TABLE, match_pattern, rejections)
    if moment is None:
        moment = _first_valid(text, _PREFIX_TABLE, match_prefix, rejections)
    if moment is not None:
        return moment

    logger.debug("No pattern matched %r (%d semantic rejections)", value, len(rejections))
    return NotFound(
        input_value=value,
        diagnostics=(ErrorTemplate.no_matching_pattern(value), *rejections),
    )


def parse_datetime(value: str, *, tzinfo: TZInfo | None = None) -> datetime | NotFound:
    """Parse a free-form date string into a stdlib datetime.

    Missing time fields become midnight. A parsed offset always wins;
    ``tzinfo`` is assigned only when the input carried none.

    Args:
        value: Date string (see parse_date())
        tzinfo: Timezone for offset-less input (default: None - naive result)

    Returns:
        datetime, or NotFound if parse_date() finds nothing or the parsed
        offset is -24:00, which datetime.timezone cannot represent

    Example:
        >>> from datetime import UTC
        >>> parse_datetime("Apr 21 2016", tzinfo=UTC)
        datetime.datetime(2016, 4, 21, 0, 0, tzinfo=datetime.timezone.utc)
    """
    result = parse_date(value)
    if isinstance(result, NotFound):
        return result
    try:
        return result.to_datetime(tzinfo)
    except InvalidMomentError as exc:
        logger.debug("Parsed %r but cannot convert to datetime: %s", value, exc)
        diagnostics = (exc.diagnostic,) if exc.diagnostic is not None else ()
        return NotFound(input_value=value, diagnostics=diagnostics)


def _attempt(text: str, pattern: DatePattern, match: re.Match[str]) -> ParseAttempt:
    fields = {
        FieldKind(name): value
        for name, value in match.groupdict().items()
        if value is not None
    }
    return ParseAttempt(text=text, pattern=pattern, fields=MappingProxyType(fields))


def _first_valid(
    text: str,
    table: tuple[DatePattern, ...],
    matcher: Callable[[DatePattern, str], ParseAttempt | None],
    rejections: list[Diagnostic],
) -> ParsedMoment | None:
    """Return the moment built from the first valid attempt, collecting rejections."""
    for pattern in table:
        attempt = matcher(pattern, text)
        if attempt is None:
            continue
        try:
            moment = build(attempt.fields)
        except InvalidMomentError as exc:
            if exc.diagnostic is not None:
                rejections.append(replace(exc.diagnostic, pattern=pattern.source))
            continue
        logger.debug(
            "Parsed %r with pattern %r (%s)", attempt.text, pattern.source, pattern.family
        )
        return moment
    return None
