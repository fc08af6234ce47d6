"""Type guard for parse result narrowing.

parse_date() returns ParsedMoment | NotFound. NotFound is falsy, so a plain
``if result:`` already works at runtime; is_parsed_moment() additionally lets
mypy narrow the union.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from diligentdate import parse_date, is_parsed_moment
    >>> result = parse_date("2025-06-18")
    >>> if is_parsed_moment(result):
    ...     # mypy knows result is ParsedMoment
    ...     day = result.to_date()
"""

from typing import TypeIs

from diligentdate.moment import NotFound, ParsedMoment

__all__ = ["is_parsed_moment"]


def is_parsed_moment(value: ParsedMoment | NotFound | None) -> TypeIs[ParsedMoment]:
    """Type guard: Check if a parse result is a ParsedMoment.

    Accepts None and returns False, so the guard can also be applied to
    optional results.

    Args:
        value: Result of parse_date()

    Returns:
        True if value is a ParsedMoment, False for NotFound or None
    """
    return isinstance(value, ParsedMoment)
