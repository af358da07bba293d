"""Performance benchmarks for freeformdate.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in template compilation and the library sweep.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
