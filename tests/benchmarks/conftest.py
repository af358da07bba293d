"""pytest-benchmark configuration for freeformdate benchmarks.

Configures benchmark defaults and custom options.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add freeformdate metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "freeformdate"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def benchmark_config():
    """Configure pytest-benchmark parameters."""
    return {
        "min_rounds": 5,
        "max_time": 1.0,
        "warmup": True,
    }
