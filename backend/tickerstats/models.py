"""Data models for ticker aggregation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class NetworkName(str, Enum):
    """Closed set of networks a symbol can be routed to."""

    N1 = "N1"
    N2 = "N2"
    N3 = "N3"


@dataclass(frozen=True, slots=True)
class Ticker:
    """A single observed quote for a symbol."""

    symbol: str
    price: float


@dataclass(frozen=True, slots=True)
class NetworkStats:
    """Finalized statistics for one network: quote count and mean price."""

    count: int
    mean_price: float

    def __iter__(self) -> Iterator[int | float]:
        # Allows `count, mean = stats`
        yield self.count
        yield self.mean_price

    def to_dict(self) -> dict:
        """Serialize for JSON transmission."""
        return {
            "count": self.count,
            "mean_price": self.mean_price,
        }
