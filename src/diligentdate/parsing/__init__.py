"""Pattern-cascade parsing: free-form date string -> ParsedMoment.

- parse_date() NEVER raises for bad input; it returns NotFound
- The Pattern Table order is the only ambiguity policy (US before EU)
- All tables are immutable and built at import

Pipeline:
    normalize -> match_pattern (per table entry) -> build -> ParsedMoment
    then, if nothing matched: match_prefix (RFC 3339 entries) -> build

Public API:
    Parsing Functions:
        parse_date - Returns ParsedMoment | NotFound
        parse_datetime - Returns datetime | NotFound
        normalize - Whitespace and weekday normalization
        match_pattern - Structural match of a single DatePattern
        match_prefix - Structural match of a DatePattern against a leading prefix
        build - Raw field texts -> validated ParsedMoment

    Pattern Table:
        DatePattern - Immutable compiled pattern
        compile_pattern - Compile a CLDR-style pattern string
        patterns - The ordered Pattern Table

    Type Guards:
        is_parsed_moment - TypeIs guard for ParsedMoment

Python 3.13+. Uses Babel CLDR names + stdlib re for all matching.
"""

from .builder import build, expand_two_digit_year
from .guards import is_parsed_moment
from .matcher import ParseAttempt, match_pattern, match_prefix, parse_date, parse_datetime
from .normalizer import normalize
from .patterns import PATTERN_TABLE, DatePattern, compile_pattern, patterns

__all__ = [
    "PATTERN_TABLE",
    "DatePattern",
    "ParseAttempt",
    # Parsing functions
    "build",
    "compile_pattern",
    "expand_two_digit_year",
    # Type guards
    "is_parsed_moment",
    "match_pattern",
    "match_prefix",
    "normalize",
    "parse_date",
    "parse_datetime",
    "patterns",
]
