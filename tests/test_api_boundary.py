"""Public API surface and type guard."""

import diligentdate
from diligentdate import NotFound, ParsedMoment, is_parsed_moment, parse_date


class TestPublicApi:
    """Names exported from the package root."""

    def test_all_exports_resolve(self) -> None:
        for name in diligentdate.__all__:
            assert hasattr(diligentdate, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(diligentdate.__version__, str)
        assert diligentdate.__version__


class TestIsParsedMoment:
    """TypeIs guard narrowing."""

    def test_parsed_moment(self) -> None:
        result = parse_date("2025-06-18")
        assert is_parsed_moment(result)
        assert result.to_rfc3339() == "2025-06-18"

    def test_not_found(self) -> None:
        assert not is_parsed_moment(parse_date("Yesterday"))
        assert not is_parsed_moment(NotFound("x"))

    def test_none(self) -> None:
        assert not is_parsed_moment(None)

    def test_truthiness_agrees_with_guard(self) -> None:
        for text in ("2025-06-18", "Yesterday"):
            result = parse_date(text)
            assert bool(result) is is_parsed_moment(result)
            assert isinstance(result, ParsedMoment | NotFound)
