"""diligentdate exception hierarchy with structured diagnostics.

Exceptions are reserved for programming errors: constructing an invalid
ParsedMoment by hand, or defining a malformed DatePattern. An unparseable
input string is never an exception; parse_date() returns NotFound instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DiligentDateError(Exception):
    """Base exception for all diligentdate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DiligentDateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidMomentError(DiligentDateError, ValueError):
    """Field values violate a ParsedMoment invariant.

    Raised by the Result Builder and by ParsedMoment construction when a
    field is out of range (month 13, April 31, February 29 in a common year,
    offset beyond a day). The matcher treats it as a failed attempt for the
    current pattern and moves on.
    """


class PatternSyntaxError(DiligentDateError, ValueError):
    """DatePattern source string cannot be compiled.

    Raised for unknown pattern letters, repeated fields, or an unterminated
    quoted literal.
    """


__all__ = [
    "DiligentDateError",
    "InvalidMomentError",
    "PatternSyntaxError",
]
