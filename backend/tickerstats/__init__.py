"""Ticker aggregation by network.

Public API:
    Ticker              - Immutable (symbol, price) quote
    NetworkName         - Closed enum of supported networks
    NetworkStats        - Finalized (count, mean_price) for one network
    SYMBOL_TABLE        - Static ordered (symbol, network) table
    resolve             - Symbol -> network lookup through a memo table
    SymbolResolver      - Long-lived owner of a memo table
    UnknownSymbolError  - Raised for symbols missing from SYMBOL_TABLE
    aggregate           - Batch of tickers -> {network: NetworkStats}
"""

from .aggregator import aggregate
from .models import NetworkName, NetworkStats, Ticker
from .resolver import SymbolResolver, UnknownSymbolError, resolve
from .symbols import SYMBOL_TABLE

__all__ = [
    "Ticker",
    "NetworkName",
    "NetworkStats",
    "SYMBOL_TABLE",
    "resolve",
    "SymbolResolver",
    "UnknownSymbolError",
    "aggregate",
]
