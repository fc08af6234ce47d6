"""CLDR-style date pattern tokenizer and field map.

DatePatterns are written in the Unicode CLDR date pattern syntax (the same
letters Babel uses), e.g. "d MMM yyyy HH:mm:ss Z". This module splits such a
pattern into field and literal tokens and maps each field token to its
FieldKind and the textual shape it accepts.

Python 3.13+.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from diligentdate.diagnostics import ErrorTemplate, PatternSyntaxError
from diligentdate.enums import FieldKind
from diligentdate.locale_tables import LOCALE_NAMES, names_alternation

__all__ = [
    "FIELD_MAP",
    "FieldSpec",
    "PatternToken",
    "field_spec",
    "tokenize_pattern",
]

# ==============================================================================
# FIELD MAP
# ==============================================================================
# ruff: noqa: ERA001 - Documentation table is not commented-out code
#
# Pattern | Field       | Accepted shape
# --------|-------------|------------------------------------------
# yyyy    | year        | exactly 4 digits
# yy      | year2       | exactly 2 digits (century pivot applies)
# MMMM    | month_name  | full month name (January)
# MMM     | month_name  | abbreviated month name (Jan, Sept)
# MM / M  | month       | 2 digits / 1-2 digits
# dd / d  | day         | 2 digits / 1-2 digits
# EEEE    | weekday     | any weekday spelling (Wednesday, Wed)
# EEE / E | weekday     | any weekday spelling
# HH / H  | hour        | 2 digits / 1-2 digits, 24-hour clock
# hh / h  | hour12      | 2 digits / 1-2 digits, 12-hour clock
# mm      | minute      | 2 digits
# ss      | second      | 2 digits
# S+      | fraction    | 1-9 digits (any run of S)
# a       | period      | AM / PM
# Z       | offset      | +HHMM / -HHMM
# XXX     | offset      | Z, +HH:MM, +HHMM
# z       | zone        | fixed-offset zone name (GMT, PST, ...)
#
# Quoted text is literal: 'T' matches the letter T. Matching is
# case-insensitive for both names and literals.
# ==============================================================================


class FieldSpec(NamedTuple):
    """Field kind and regex shape for one pattern letter run."""

    kind: FieldKind
    shape: str


class PatternToken(NamedTuple):
    """One token of a tokenized pattern.

    Attributes:
        text: Letter run for fields, literal text otherwise
        literal: True for literal text (separators and quoted text)
    """

    text: str
    literal: bool


_WEEKDAY_SHAPE = names_alternation(LOCALE_NAMES.weekday_names)
_MONTH_ABBREVIATED_SHAPE = names_alternation(
    (*LOCALE_NAMES.month_names_abbreviated, *LOCALE_NAMES.month_name_aliases)
)

FIELD_MAP: MappingProxyType[str, FieldSpec] = MappingProxyType({
    # Year
    "yyyy": FieldSpec(FieldKind.YEAR, r"\d{4}"),
    "yy": FieldSpec(FieldKind.YEAR_2, r"\d{2}"),
    # Month
    "MMMM": FieldSpec(FieldKind.MONTH_NAME, names_alternation(LOCALE_NAMES.month_names_wide)),
    "MMM": FieldSpec(FieldKind.MONTH_NAME, _MONTH_ABBREVIATED_SHAPE),
    "MM": FieldSpec(FieldKind.MONTH, r"\d{2}"),
    "M": FieldSpec(FieldKind.MONTH, r"\d{1,2}"),
    # Day
    "dd": FieldSpec(FieldKind.DAY, r"\d{2}"),
    "d": FieldSpec(FieldKind.DAY, r"\d{1,2}"),
    # Weekday
    "EEEE": FieldSpec(FieldKind.WEEKDAY, _WEEKDAY_SHAPE),
    "EEE": FieldSpec(FieldKind.WEEKDAY, _WEEKDAY_SHAPE),
    "E": FieldSpec(FieldKind.WEEKDAY, _WEEKDAY_SHAPE),
    # Hour
    "HH": FieldSpec(FieldKind.HOUR, r"\d{2}"),
    "H": FieldSpec(FieldKind.HOUR, r"\d{1,2}"),
    "hh": FieldSpec(FieldKind.HOUR_12, r"\d{2}"),
    "h": FieldSpec(FieldKind.HOUR_12, r"\d{1,2}"),
    # Minute / second
    "mm": FieldSpec(FieldKind.MINUTE, r"\d{2}"),
    "ss": FieldSpec(FieldKind.SECOND, r"\d{2}"),
    # Day period
    "a": FieldSpec(FieldKind.DAY_PERIOD, names_alternation(LOCALE_NAMES.periods)),
    # Offsets
    "Z": FieldSpec(FieldKind.OFFSET, r"[+-]\d{4}"),
    "XXX": FieldSpec(FieldKind.OFFSET, r"Z|[+-]\d{2}:?\d{2}"),
    "z": FieldSpec(FieldKind.ZONE_NAME, names_alternation(LOCALE_NAMES.zones)),
})

_FRACTION_SPEC = FieldSpec(FieldKind.FRACTION, r"\d{1,9}")


def field_spec(token: str) -> FieldSpec | None:
    """Look up the FieldSpec for a letter run, or None if unknown.

    Any run of S (S, SS, SSS, ...) is a fractional second.
    """
    if token and set(token) == {"S"}:
        return _FRACTION_SPEC
    return FIELD_MAP.get(token)


def tokenize_pattern(pattern: str) -> list[PatternToken]:
    """Tokenize a CLDR-style date pattern into field and literal tokens.

    CLDR quote escaping rules:
    - Single quotes delimit literal text: 'T' produces literal "T"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote

    Examples:
        "yyyy-MM-dd'T'HH" -> yyyy, "-", MM, "-", dd, "T", HH
        "d.M.yyyy" -> d, ".", M, ".", yyyy

    Args:
        pattern: CLDR-style date pattern

    Returns:
        List of PatternToken; adjacent literal characters are merged

    Raises:
        PatternSyntaxError: If a quoted literal is never closed
    """
    tokens: list[PatternToken] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    def flush_literal() -> None:
        if literal:
            tokens.append(PatternToken("".join(literal), literal=True))
            literal.clear()

    while i < n:
        char = pattern[i]

        if char == "'":
            # '' outside quoted section -> literal single quote
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue

            i += 1
            while True:
                if i >= n:
                    raise PatternSyntaxError(ErrorTemplate.pattern_unterminated_quote(pattern))
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue

        if char.isascii() and char.isalpha():
            flush_literal()
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append(PatternToken(pattern[i:j], literal=False))
            i = j
            continue

        literal.append(char)
        i += 1

    flush_literal()
    return tokens
