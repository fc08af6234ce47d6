"""Input normalization ahead of pattern matching.

normalize() trims, collapses whitespace runs to single spaces, and removes a
weekday name at the start or end of the string ("Wed, 18 Jun 2025",
"June 18, 2025 (Wednesday)"). Weekday names come from the embedded locale
tables and only match as whole words, so "Monaco" or "Sunset" are left alone.

Timezone abbreviations are kept: fixed-offset zone names carry the offset and
are matched by the zone-name field of the patterns that accept them.

Pure, never raises.

Python 3.13+.
"""

from __future__ import annotations

import re

from diligentdate.locale_tables import LOCALE_NAMES, names_alternation

__all__ = ["normalize"]

_WEEKDAY = names_alternation(LOCALE_NAMES.weekday_names)

# "Wed", "Wed.", "Wed,", "Wednesday ," at the start. The lookahead keeps
# "Sunset" or "Monaco" from losing their first letters.
_WEEKDAY_PREFIX_RE = re.compile(
    rf"^{_WEEKDAY}\.?(?![^\W\d_])\s?,?\s?",
    re.IGNORECASE,
)

# ", Wed", " Wednesday", " (Wed)" at the end.
_WEEKDAY_SUFFIX_RE = re.compile(
    rf"(?:\s?,\s?|\s)\(?{_WEEKDAY}\.?\)?$",
    re.IGNORECASE,
)


def normalize(raw: str) -> str:
    """Normalize a raw date string for pattern matching.

    Args:
        raw: Input as received from the caller

    Returns:
        Trimmed string with single spaces and no leading or trailing
        weekday token. Unrecognized tokens are left unchanged.

    Examples:
        >>> normalize("  Tue,  3  Jul 2012 23:02:36 +0400 ")
        '3 Jul 2012 23:02:36 +0400'
        >>> normalize("June 18, 2025 (Wednesday)")
        'June 18, 2025'
        >>> normalize("Yesterday")
        'Yesterday'
    """
    text = " ".join(raw.split())
    text = _WEEKDAY_PREFIX_RE.sub("", text, count=1)
    text = _WEEKDAY_SUFFIX_RE.sub("", text, count=1)
    return text.strip()
