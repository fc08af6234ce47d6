"""Tests for the Babel-backed locale name tables."""

import pytest

from diligentdate.locale_tables import LOCALE_NAMES, load_locale_names, names_alternation


class TestLocaleNames:
    """Lookups against the embedded English tables."""

    @pytest.mark.parametrize(
        ("name", "number"),
        [
            ("January", 1),
            ("jan", 1),
            ("MAY", 5),
            ("September", 9),
            ("Dec", 12),
            ("Sept", 9),
            ("sept", 9),
        ],
    )
    def test_month_number(self, name: str, number: int) -> None:
        assert LOCALE_NAMES.month_number(name) == number

    def test_unknown_month(self) -> None:
        assert LOCALE_NAMES.month_number("Smarch") is None

    @pytest.mark.parametrize(
        ("name", "number"),
        [
            ("Monday", 1),
            ("mon", 1),
            ("Wed.", 3),
            ("Sunday", 7),
            ("sun", 7),
            ("Tues", 2),
            ("Thur", 4),
            ("thurs", 4),
        ],
    )
    def test_weekday_number(self, name: str, number: int) -> None:
        assert LOCALE_NAMES.weekday_number(name) == number

    def test_period_offset(self) -> None:
        assert LOCALE_NAMES.period_offset("AM") == 0
        assert LOCALE_NAMES.period_offset("pm") == 12
        assert LOCALE_NAMES.period_offset("noon") is None

    def test_zone_offset(self) -> None:
        assert LOCALE_NAMES.zone_offset("mst") == -420
        assert LOCALE_NAMES.zone_offset("CEST") is None

    def test_name_tuples(self) -> None:
        assert LOCALE_NAMES.month_names_wide[0] == "January"
        assert LOCALE_NAMES.month_names_abbreviated[11] == "Dec"
        assert len(LOCALE_NAMES.month_names_wide) == 12
        assert "Wednesday" in LOCALE_NAMES.weekday_names

    def test_aliases_do_not_shift_cldr_tuples(self) -> None:
        assert len(LOCALE_NAMES.month_names_abbreviated) == 12
        assert LOCALE_NAMES.month_name_aliases == ("Sept",)
        assert {"Tues", "Thur", "Thurs"} <= set(LOCALE_NAMES.weekday_names)

    def test_tables_read_only(self) -> None:
        with pytest.raises(TypeError):
            LOCALE_NAMES.months["smarch"] = 13  # type: ignore[index]

    def test_load_is_deterministic(self) -> None:
        assert load_locale_names("en") == LOCALE_NAMES


class TestNamesAlternation:
    """Regex alternation construction."""

    def test_longest_first(self) -> None:
        assert names_alternation(["Jun", "June"]) == "(?:June|Jun)"

    def test_escaped_and_deduplicated(self) -> None:
        assert names_alternation(["a.m.", "a.m."]) == r"(?:a\.m\.)"
