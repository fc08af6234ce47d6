"""Tests for the CLDR-style pattern tokenizer and field map.

The tokenizer must follow CLDR quote escaping rules:
- Single quotes delimit literal text: 'T' produces "T"
- Two consecutive single quotes '' produce a literal single quote
- '' inside quoted text also produces a literal single quote
"""

import pytest

from diligentdate.diagnostics import DiagnosticCode, PatternSyntaxError
from diligentdate.enums import FieldKind
from diligentdate.parsing.tokens import FIELD_MAP, PatternToken, field_spec, tokenize_pattern


class TestTokenizePattern:
    """Splitting patterns into field and literal tokens."""

    def test_rfc3339_pattern(self) -> None:
        assert tokenize_pattern("yyyy-MM-dd'T'HH") == [
            PatternToken("yyyy", literal=False),
            PatternToken("-", literal=True),
            PatternToken("MM", literal=False),
            PatternToken("-", literal=True),
            PatternToken("dd", literal=False),
            PatternToken("T", literal=True),
            PatternToken("HH", literal=False),
        ]

    def test_adjacent_literals_merged(self) -> None:
        assert tokenize_pattern("MMMM d, yyyy") == [
            PatternToken("MMMM", literal=False),
            PatternToken(" ", literal=True),
            PatternToken("d", literal=False),
            PatternToken(", ", literal=True),
            PatternToken("yyyy", literal=False),
        ]

    def test_escaped_quote_outside_quoted_section(self) -> None:
        assert tokenize_pattern("h''mm") == [
            PatternToken("h", literal=False),
            PatternToken("'", literal=True),
            PatternToken("mm", literal=False),
        ]

    def test_escaped_quote_inside_quoted_section(self) -> None:
        tokens = tokenize_pattern("'o''clock' h")
        assert tokens[0] == PatternToken("o'clock ", literal=True)
        assert tokens[1] == PatternToken("h", literal=False)

    def test_unterminated_quote_raises(self) -> None:
        with pytest.raises(PatternSyntaxError) as exc_info:
            tokenize_pattern("yyyy'T")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PATTERN_UNTERMINATED_QUOTE

    def test_digits_are_literal(self) -> None:
        assert tokenize_pattern("yyyy01") == [
            PatternToken("yyyy", literal=False),
            PatternToken("01", literal=True),
        ]


class TestFieldSpec:
    """Letter runs map to field kinds."""

    @pytest.mark.parametrize(
        ("token", "kind"),
        [
            ("yyyy", FieldKind.YEAR),
            ("yy", FieldKind.YEAR_2),
            ("MMMM", FieldKind.MONTH_NAME),
            ("MMM", FieldKind.MONTH_NAME),
            ("M", FieldKind.MONTH),
            ("d", FieldKind.DAY),
            ("EEE", FieldKind.WEEKDAY),
            ("H", FieldKind.HOUR),
            ("h", FieldKind.HOUR_12),
            ("a", FieldKind.DAY_PERIOD),
            ("Z", FieldKind.OFFSET),
            ("XXX", FieldKind.OFFSET),
            ("z", FieldKind.ZONE_NAME),
        ],
    )
    def test_known_tokens(self, token: str, kind: FieldKind) -> None:
        spec = field_spec(token)
        assert spec is not None
        assert spec.kind == kind

    @pytest.mark.parametrize("token", ["S", "SSS", "SSSSSSSSS"])
    def test_any_run_of_s_is_fraction(self, token: str) -> None:
        spec = field_spec(token)
        assert spec is not None
        assert spec.kind == FieldKind.FRACTION

    @pytest.mark.parametrize("token", ["Q", "yyy", "G", ""])
    def test_unknown_tokens(self, token: str) -> None:
        assert field_spec(token) is None

    def test_field_map_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            FIELD_MAP["Q"] = FIELD_MAP["yyyy"]  # type: ignore[index]
