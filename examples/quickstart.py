"""Quickstart example for diligentdate.

This example demonstrates parsing date strings from mixed sources: email
headers, APIs, spreadsheets and free text.

Note: parse_date() never raises for bad input. It returns NotFound, which is
falsy and carries diagnostics explaining what was tried.
"""

from datetime import UTC

from diligentdate import (
    NotFound,
    ParsedMoment,
    PatternFamily,
    compile_pattern,
    parse_date,
    parse_datetime,
)
from diligentdate.diagnostics import DiagnosticFormatter, OutputFormat
from diligentdate.parsing import match_pattern

# Example 1: Common layouts
print("=" * 50)
print("Example 1: Common Layouts")
print("=" * 50)

for text in (
    "Wed, 18 Jun 2025 10:30:00 +0000",
    "2025-06-18T10:30:00Z",
    "06/18/2025",
    "June 18, 2025 2:30 PM",
    "Sun Dec 24 13:19:25 +0200 2017",
):
    print(f"{text!r:40} -> {parse_date(text)}")
# Output: '06/18/2025'  -> 2025-06-18

# Example 2: Precision is preserved
print("\n" + "=" * 50)
print("Example 2: Precision and Offsets")
print("=" * 50)

moment = parse_date("2025-06-18 10:30")
assert isinstance(moment, ParsedMoment)
print(f"has_time={moment.has_time} is_aware={moment.is_aware} second={moment.second}")
# Output: has_time=True is_aware=False second=None

moment = parse_date("Mon, 2 Jan 2006 15:04:05 MST")
assert isinstance(moment, ParsedMoment)
print(f"offset_minutes={moment.offset_minutes} tzinfo={moment.tzinfo}")
# Output: offset_minutes=-420 tzinfo=UTC-07:00

# Example 3: Ambiguity policy
print("\n" + "=" * 50)
print("Example 3: Ambiguous Numeric Dates")
print("=" * 50)

print(parse_date("01/02/2025"))
# Output: 2025-01-02 (month first)
print(parse_date("18/06/2025"))
# Output: 2025-06-18 (month 18 impossible, day-first pattern used)

# Example 4: NotFound and diagnostics
print("\n" + "=" * 50)
print("Example 4: NotFound")
print("=" * 50)

result = parse_date("2023-02-29")
if not result:
    assert isinstance(result, NotFound)
    print(DiagnosticFormatter().format_all(result.diagnostics))

result = parse_date("Yesterday")
formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
if isinstance(result, NotFound) and result.diagnostic is not None:
    print(formatter.format(result.diagnostic))

# Example 5: stdlib datetime
print("\n" + "=" * 50)
print("Example 5: parse_datetime")
print("=" * 50)

print(repr(parse_datetime("Apr 21 2016", tzinfo=UTC)))
# Output: datetime.datetime(2016, 4, 21, 0, 0, tzinfo=datetime.timezone.utc)

# Example 6: Custom patterns
print("\n" + "=" * 50)
print("Example 6: Custom Pattern")
print("=" * 50)

pattern = compile_pattern("EEE d MMM yyyy 'at' H:mm", PatternFamily.NAMED_MONTH)
attempt = match_pattern(pattern, "Wed 18 Jun 2025 at 9:15")
if attempt is not None:
    print(dict(attempt.fields))

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
