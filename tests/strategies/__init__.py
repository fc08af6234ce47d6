"""Hypothesis strategies for diligentdate property-based testing.

Strategies are organized by domain:

- moments: ParsedMoment instances, calendar dates and offsets, and text
  that can never be a date

Usage:
    from tests.strategies import parsed_moments, non_date_text
    from tests.strategies.moments import offsets_minutes, two_digit_years
"""

from .moments import (
    calendar_dates,
    non_date_text,
    offsets_minutes,
    parsed_moments,
    two_digit_years,
    weekday_names,
)

__all__ = [
    "calendar_dates",
    "non_date_text",
    "offsets_minutes",
    "parsed_moments",
    "two_digit_years",
    "weekday_names",
]
