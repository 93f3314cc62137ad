"""Fixtures for ticker aggregation tests."""

import pytest

from tickerstats.models import Ticker


@pytest.fixture
def memo():
    """A fresh, empty memo table."""
    return {}


@pytest.fixture
def sample_tickers():
    """Three S1 quotes, three S2 quotes and two s3 quotes."""
    return [
        Ticker("S1", 0.1),
        Ticker("S1", 0.2),
        Ticker("S1", 0.3),
        Ticker("S2", 0.4),
        Ticker("S2", 0.5),
        Ticker("S2", 0.6),
        Ticker("s3", 0.7),
        Ticker("s3", 0.8),
    ]
