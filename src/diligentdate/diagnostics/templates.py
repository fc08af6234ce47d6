"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _UNAMBIGUOUS_HINT = "Use RFC 3339 (YYYY-MM-DDTHH:MM:SSZ) for unambiguous dates"

    # ------------------------------------------------------------------
    # Parse outcomes
    # ------------------------------------------------------------------

    @staticmethod
    def no_matching_pattern(value: str) -> Diagnostic:
        """No pattern in the table produced a valid moment.

        Args:
            value: The input string that failed to parse

        Returns:
            Diagnostic for NO_MATCHING_PATTERN
        """
        msg = f"No known date pattern matches '{value}'"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCHING_PATTERN,
            message=msg,
            hint=ErrorTemplate._UNAMBIGUOUS_HINT,
            input_value=value,
        )

    @staticmethod
    def empty_input(value: str) -> Diagnostic:
        """Input is empty or whitespace only.

        Args:
            value: The raw input string

        Returns:
            Diagnostic for EMPTY_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_INPUT,
            message="Date string is empty",
            hint="Pass a non-blank date string",
            input_value=value,
        )

    @staticmethod
    def input_too_long(length: int, limit: int) -> Diagnostic:
        """Input exceeds the accepted length.

        Args:
            length: Length of the rejected input
            limit: Maximum accepted length

        Returns:
            Diagnostic for INPUT_TOO_LONG
        """
        msg = f"Date string of {length} characters exceeds the limit of {limit}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LONG,
            message=msg,
            hint="Extract the date portion before parsing",
        )

    @staticmethod
    def invalid_input_type(type_name: str) -> Diagnostic:
        """Input is not a string.

        Args:
            type_name: Name of the received type

        Returns:
            Diagnostic for INVALID_INPUT_TYPE
        """
        msg = f"Expected string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INPUT_TYPE,
            message=msg,
            hint="Convert the value to str before parsing",
        )

    # ------------------------------------------------------------------
    # Moment validation
    # ------------------------------------------------------------------

    @staticmethod
    def year_out_of_range(year: int, low: int, high: int) -> Diagnostic:
        """Year outside the supported window.

        Returns:
            Diagnostic for YEAR_OUT_OF_RANGE
        """
        msg = f"Year {year} is outside [{low}, {high}]"
        return Diagnostic(code=DiagnosticCode.YEAR_OUT_OF_RANGE, message=msg)

    @staticmethod
    def month_out_of_range(month: int) -> Diagnostic:
        """Month outside 1-12.

        Returns:
            Diagnostic for MONTH_OUT_OF_RANGE
        """
        msg = f"Month {month} is outside [1, 12]"
        return Diagnostic(code=DiagnosticCode.MONTH_OUT_OF_RANGE, message=msg)

    @staticmethod
    def day_out_of_range(year: int, month: int, day: int, last_day: int) -> Diagnostic:
        """Day invalid for its month (including February 29 in common years).

        Args:
            year: Calendar year
            month: Calendar month
            day: Rejected day of month
            last_day: Last valid day of that month

        Returns:
            Diagnostic for DAY_OUT_OF_RANGE
        """
        msg = f"Day {day} is outside [1, {last_day}] for {year:04d}-{month:02d}"
        return Diagnostic(
            code=DiagnosticCode.DAY_OUT_OF_RANGE,
            message=msg,
            hint="February has 29 days only in leap years" if month == 2 else None,
        )

    @staticmethod
    def hour_out_of_range(hour: int, low: int = 0, high: int = 23) -> Diagnostic:
        """Hour outside its clock range (0-23, or 1-12 with AM/PM).

        Returns:
            Diagnostic for HOUR_OUT_OF_RANGE
        """
        msg = f"Hour {hour} is outside [{low}, {high}]"
        return Diagnostic(code=DiagnosticCode.HOUR_OUT_OF_RANGE, message=msg)

    @staticmethod
    def minute_out_of_range(minute: int) -> Diagnostic:
        """Minute outside 0-59.

        Returns:
            Diagnostic for MINUTE_OUT_OF_RANGE
        """
        msg = f"Minute {minute} is outside [0, 59]"
        return Diagnostic(code=DiagnosticCode.MINUTE_OUT_OF_RANGE, message=msg)

    @staticmethod
    def second_out_of_range(second: int) -> Diagnostic:
        """Second outside 0-59.

        Returns:
            Diagnostic for SECOND_OUT_OF_RANGE
        """
        msg = f"Second {second} is outside [0, 59]"
        return Diagnostic(
            code=DiagnosticCode.SECOND_OUT_OF_RANGE,
            message=msg,
            hint="Leap seconds (:60) are not supported",
        )

    @staticmethod
    def microsecond_out_of_range(microsecond: int) -> Diagnostic:
        """Microsecond outside 0-999999.

        Returns:
            Diagnostic for MICROSECOND_OUT_OF_RANGE
        """
        msg = f"Microsecond {microsecond} is outside [0, 999999]"
        return Diagnostic(code=DiagnosticCode.MICROSECOND_OUT_OF_RANGE, message=msg)

    @staticmethod
    def offset_out_of_range(offset_minutes: int, low: int, high: int) -> Diagnostic:
        """UTC offset outside [low, high).

        Returns:
            Diagnostic for OFFSET_OUT_OF_RANGE
        """
        msg = f"UTC offset of {offset_minutes} minutes is outside [{low}, {high})"
        return Diagnostic(code=DiagnosticCode.OFFSET_OUT_OF_RANGE, message=msg)

    @staticmethod
    def offset_not_representable(offset_minutes: int) -> Diagnostic:
        """Offset valid for a ParsedMoment but outside what datetime.timezone accepts.

        Args:
            offset_minutes: The parsed offset (only -1440, i.e. -24:00)

        Returns:
            Diagnostic for OFFSET_NOT_REPRESENTABLE
        """
        msg = f"UTC offset of {offset_minutes} minutes has no datetime.timezone equivalent"
        return Diagnostic(
            code=DiagnosticCode.OFFSET_NOT_REPRESENTABLE,
            message=msg,
            hint="datetime.timezone accepts offsets strictly between -24:00 and +24:00",
        )

    @staticmethod
    def malformed_offset(text: str) -> Diagnostic:
        """Numeric offset whose minute part is not below 60.

        Args:
            text: The offset text as written (e.g. "+0575")

        Returns:
            Diagnostic for OFFSET_OUT_OF_RANGE
        """
        msg = f"UTC offset '{text}' has a minute part outside [0, 59]"
        return Diagnostic(
            code=DiagnosticCode.OFFSET_OUT_OF_RANGE,
            message=msg,
            input_value=text,
        )

    @staticmethod
    def incomplete_time(field_name: str, required: str) -> Diagnostic:
        """A time field is present without the coarser field it refines.

        Args:
            field_name: The field that is set
            required: The coarser field that is missing

        Returns:
            Diagnostic for INCOMPLETE_TIME
        """
        msg = f"Field '{field_name}' requires '{required}' to be set"
        return Diagnostic(code=DiagnosticCode.INCOMPLETE_TIME, message=msg)

    @staticmethod
    def unknown_name(kind: str, text: str) -> Diagnostic:
        """Month, weekday, day period or zone name not found in the locale tables.

        Args:
            kind: Field kind being resolved
            text: The unrecognized text

        Returns:
            Diagnostic for UNKNOWN_NAME
        """
        msg = f"Unknown {kind} name '{text}'"
        return Diagnostic(code=DiagnosticCode.UNKNOWN_NAME, message=msg, input_value=text)

    # ------------------------------------------------------------------
    # Pattern definition
    # ------------------------------------------------------------------

    @staticmethod
    def pattern_unknown_field(pattern: str, token: str) -> Diagnostic:
        """Pattern uses a letter sequence with no field mapping.

        Returns:
            Diagnostic for PATTERN_UNKNOWN_FIELD
        """
        msg = f"Unknown field '{token}' in date pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNKNOWN_FIELD,
            message=msg,
            hint="Quote literal letters with single quotes, e.g. 'T'",
            pattern=pattern,
        )

    @staticmethod
    def pattern_duplicate_field(pattern: str, field_name: str) -> Diagnostic:
        """Pattern defines the same field twice.

        Returns:
            Diagnostic for PATTERN_DUPLICATE_FIELD
        """
        msg = f"Field '{field_name}' appears more than once in date pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_DUPLICATE_FIELD,
            message=msg,
            pattern=pattern,
        )

    @staticmethod
    def pattern_missing_date_field(pattern: str, field_name: str) -> Diagnostic:
        """Pattern lacks a year, month or day field.

        Returns:
            Diagnostic for PATTERN_MISSING_DATE_FIELD
        """
        msg = f"Date pattern '{pattern}' has no {field_name} field"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MISSING_DATE_FIELD,
            message=msg,
            hint="Every date pattern needs a year (yyyy or yy), a month (M or MMM) and a day (d)",
            pattern=pattern,
        )

    @staticmethod
    def pattern_unterminated_quote(pattern: str) -> Diagnostic:
        """Quoted literal never closed.

        Returns:
            Diagnostic for PATTERN_UNTERMINATED_QUOTE
        """
        msg = f"Unterminated quoted literal in date pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNTERMINATED_QUOTE,
            message=msg,
            hint="Close the literal with a single quote; use '' for a literal quote",
            pattern=pattern,
        )
