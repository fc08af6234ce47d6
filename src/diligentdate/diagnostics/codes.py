"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4999: Parse outcomes (why an input produced NotFound)
        5000-5999: Moment validation (semantic range and calendar checks)
        6000-6999: Pattern definition errors (malformed DatePattern strings)
    """

    # Parse outcomes (4000-4999)
    NO_MATCHING_PATTERN = 4001
    EMPTY_INPUT = 4002
    INPUT_TOO_LONG = 4003
    INVALID_INPUT_TYPE = 4004

    # Moment validation (5000-5999)
    YEAR_OUT_OF_RANGE = 5001
    MONTH_OUT_OF_RANGE = 5002
    DAY_OUT_OF_RANGE = 5003
    HOUR_OUT_OF_RANGE = 5004
    MINUTE_OUT_OF_RANGE = 5005
    SECOND_OUT_OF_RANGE = 5006
    MICROSECOND_OUT_OF_RANGE = 5007
    OFFSET_OUT_OF_RANGE = 5008
    INCOMPLETE_TIME = 5009
    UNKNOWN_NAME = 5010
    OFFSET_NOT_REPRESENTABLE = 5011

    # Pattern definition (6000-6999)
    PATTERN_UNKNOWN_FIELD = 6001
    PATTERN_DUPLICATE_FIELD = 6002
    PATTERN_UNTERMINATED_QUOTE = 6003
    PATTERN_MISSING_DATE_FIELD = 6004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: Input text the diagnostic refers to (if any)
        pattern: DatePattern source string the diagnostic refers to (if any)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    pattern: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[NO_MATCHING_PATTERN]: No known date pattern matches 'Yesterday'
              = help: Use RFC 3339 (YYYY-MM-DDTHH:MM:SSZ) for unambiguous dates

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
