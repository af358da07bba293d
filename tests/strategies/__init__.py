"""Hypothesis strategies for freeformdate property-based testing.

Strategies are organized by domain:

- dates: Date/time values and their free-form renderings

Usage:
    from tests.strategies import rendered_dates, reasonable_datetimes
    from tests.strategies.dates import RENDERINGS

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - rendered_dates
    - date_by_boundary
"""

from .dates import (
    RENDERINGS,
    Rendered,
    date_by_boundary,
    reasonable_datetimes,
    rendered_dates,
)

__all__ = [
    "RENDERINGS",
    "Rendered",
    "date_by_boundary",
    "reasonable_datetimes",
    "rendered_dates",
]
