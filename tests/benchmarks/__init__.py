"""Performance benchmarks for diligentdate.

Benchmarks use pytest-benchmark to measure the pattern cascade at the
front, middle and end of the Pattern Table, and the full-miss path.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
