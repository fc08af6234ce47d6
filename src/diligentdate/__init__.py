"""diligentdate - Pattern-cascade parser for free-form date strings.

Turns the date layouts found in email headers, APIs, logs and user input
("Wed, 18 Jun 2025 10:30:00 +0000", "06/18/2025", "June 18, 2025",
"2025-06-18T10:30:00Z") into a validated ParsedMoment by trying an ordered
table of known patterns. Unparseable input yields NotFound, never an
exception.

Public API:
    parse_date - Parse to ParsedMoment | NotFound
    parse_datetime - Parse to datetime | NotFound
    ParsedMoment - Immutable validated date/time decomposition
    NotFound - Falsy negative outcome with diagnostics
    DatePattern - Compiled pattern descriptor
    patterns - The ordered Pattern Table
    compile_pattern - Compile a CLDR-style pattern string
    normalize - Input normalization used before matching
    build - Field texts -> ParsedMoment
    is_parsed_moment - TypeIs guard for parse results
    PatternFamily - Pattern family enum

Exceptions:
    DiligentDateError - Base exception class
    InvalidMomentError - ParsedMoment invariant violated
    PatternSyntaxError - Malformed DatePattern source

Submodules:
    diligentdate.parsing - Normalizer, Pattern Table, matcher, builder
    diligentdate.diagnostics - Diagnostic codes, templates and formatter
    diligentdate.constants - Build-time configuration
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiligentDateError,
    InvalidMomentError,
    PatternSyntaxError,
)
from .enums import FieldKind, PatternFamily
from .moment import NotFound, ParsedMoment
from .parsing import (
    DatePattern,
    build,
    compile_pattern,
    is_parsed_moment,
    normalize,
    parse_date,
    parse_datetime,
    patterns,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("diligentdate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DatePattern",
    "Diagnostic",
    "DiagnosticCode",
    "DiligentDateError",
    "FieldKind",
    "InvalidMomentError",
    "NotFound",
    "ParsedMoment",
    "PatternFamily",
    "PatternSyntaxError",
    "__version__",
    "build",
    "compile_pattern",
    "is_parsed_moment",
    "normalize",
    "parse_date",
    "parse_datetime",
    "patterns",
]
