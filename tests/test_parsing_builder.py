"""Tests for the Result Builder: raw field texts -> ParsedMoment."""

import pytest

from diligentdate import InvalidMomentError, ParsedMoment
from diligentdate.diagnostics import DiagnosticCode
from diligentdate.enums import FieldKind
from diligentdate.parsing import build, expand_two_digit_year

_DATE = {FieldKind.YEAR: "2025", FieldKind.MONTH: "06", FieldKind.DAY: "18"}
_TIME = {**_DATE, FieldKind.HOUR: "10", FieldKind.MINUTE: "30", FieldKind.SECOND: "00"}


def _rejected_code(fields: dict[FieldKind, str]) -> DiagnosticCode:
    with pytest.raises(InvalidMomentError) as exc_info:
        build(fields)
    assert exc_info.value.diagnostic is not None
    return exc_info.value.diagnostic.code


class TestExpandTwoDigitYear:
    """Century pivot at 69."""

    @pytest.mark.parametrize(
        ("value", "year"),
        [(0, 2000), (25, 2025), (68, 2068), (69, 1969), (99, 1999)],
    )
    def test_pivot(self, value: int, year: int) -> None:
        assert expand_two_digit_year(value) == year


class TestBuildDate:
    """Date fields."""

    def test_numeric_date(self) -> None:
        assert build(_DATE) == ParsedMoment(2025, 6, 18)

    def test_two_digit_year(self) -> None:
        fields = {FieldKind.YEAR_2: "69", FieldKind.MONTH: "1", FieldKind.DAY: "2"}
        assert build(fields) == ParsedMoment(1969, 1, 2)

    @pytest.mark.parametrize("name", ["June", "jun", "JUN"])
    def test_month_name(self, name: str) -> None:
        fields = {FieldKind.YEAR: "2025", FieldKind.MONTH_NAME: name, FieldKind.DAY: "18"}
        assert build(fields).month == 6

    def test_unknown_month_name(self) -> None:
        fields = {FieldKind.YEAR: "2025", FieldKind.MONTH_NAME: "Smarch", FieldKind.DAY: "1"}
        assert _rejected_code(fields) == DiagnosticCode.UNKNOWN_NAME

    def test_invalid_calendar_date(self) -> None:
        fields = {FieldKind.YEAR: "2023", FieldKind.MONTH: "02", FieldKind.DAY: "29"}
        assert _rejected_code(fields) == DiagnosticCode.DAY_OUT_OF_RANGE

    def test_weekday_spelling_checked(self) -> None:
        assert build({**_DATE, FieldKind.WEEKDAY: "Wed."}) == ParsedMoment(2025, 6, 18)
        assert _rejected_code({**_DATE, FieldKind.WEEKDAY: "Funday"}) == (
            DiagnosticCode.UNKNOWN_NAME
        )

    def test_weekday_not_cross_checked(self) -> None:
        """2025-06-18 is a Wednesday; a different weekday name is accepted."""
        assert build({**_DATE, FieldKind.WEEKDAY: "Monday"}) == ParsedMoment(2025, 6, 18)


class TestBuildTime:
    """Time-of-day fields."""

    def test_missing_time_stays_none(self) -> None:
        moment = build(_DATE)
        assert moment.hour is None
        assert moment.minute is None

    @pytest.mark.parametrize(
        ("hour", "period", "expected"),
        [("12", "AM", 0), ("1", "am", 1), ("11", "AM", 11), ("12", "PM", 12), ("1", "pm", 13)],
    )
    def test_twelve_hour_clock(self, hour: str, period: str, expected: int) -> None:
        fields = {
            **_DATE,
            FieldKind.HOUR_12: hour,
            FieldKind.MINUTE: "00",
            FieldKind.DAY_PERIOD: period,
        }
        assert build(fields).hour == expected

    @pytest.mark.parametrize("hour", ["0", "13"])
    def test_twelve_hour_range(self, hour: str) -> None:
        fields = {**_DATE, FieldKind.HOUR_12: hour, FieldKind.DAY_PERIOD: "PM"}
        assert _rejected_code(fields) == DiagnosticCode.HOUR_OUT_OF_RANGE

    @pytest.mark.parametrize(
        ("fraction", "microsecond"),
        [("5", 500_000), ("123", 123_000), ("000001", 1), ("123456789", 123_456)],
    )
    def test_fraction_to_microseconds(self, fraction: str, microsecond: int) -> None:
        assert build({**_TIME, FieldKind.FRACTION: fraction}).microsecond == microsecond


class TestBuildOffset:
    """Numeric offsets and zone names."""

    @pytest.mark.parametrize(
        ("text", "minutes"),
        [("Z", 0), ("z", 0), ("+0000", 0), ("-0000", 0), ("+0530", 330), ("-08:00", -480)],
    )
    def test_numeric_offset(self, text: str, minutes: int) -> None:
        assert build({**_TIME, FieldKind.OFFSET: text}).offset_minutes == minutes

    @pytest.mark.parametrize(
        ("name", "minutes"),
        [("GMT", 0), ("UT", 0), ("EST", -300), ("pdt", -420)],
    )
    def test_zone_name(self, name: str, minutes: int) -> None:
        assert build({**_TIME, FieldKind.ZONE_NAME: name}).offset_minutes == minutes

    def test_unknown_zone_name(self) -> None:
        assert _rejected_code({**_TIME, FieldKind.ZONE_NAME: "CEST"}) == (
            DiagnosticCode.UNKNOWN_NAME
        )

    def test_offset_minutes_above_59(self) -> None:
        assert _rejected_code({**_TIME, FieldKind.OFFSET: "+0575"}) == (
            DiagnosticCode.OFFSET_OUT_OF_RANGE
        )

    def test_offset_requires_time(self) -> None:
        assert _rejected_code({**_DATE, FieldKind.OFFSET: "+0100"}) == (
            DiagnosticCode.INCOMPLETE_TIME
        )
