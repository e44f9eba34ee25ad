"""
Shared fixtures for the Auto Insights tests.
"""

import pandas as pd
import pytest

from auto_insights.core.config import Settings


@pytest.fixture
def latency_values():
    """Request latencies with one obvious spike at index 4."""
    return [10, 12, 11, 13, 90, 12, 11]


@pytest.fixture
def latency_frame(latency_values):
    """Latency column with monotonic minute labels."""
    return pd.DataFrame({
        "minute": pd.date_range("2025-01-01 00:00", periods=len(latency_values), freq="min"),
        "latency_ms": latency_values,
    })


@pytest.fixture
def settings():
    """Default settings, independent of any config file."""
    return Settings(max_workers=4)
