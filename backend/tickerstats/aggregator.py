"""Per-network aggregation of ticker batches."""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping

from .models import NetworkName, NetworkStats, Ticker
from .resolver import resolve

logger = logging.getLogger(__name__)


def aggregate(
    tickers: Iterable[Ticker],
    memo: MutableMapping[str, NetworkName] | None = None,
) -> dict[NetworkName, NetworkStats]:
    """Group tickers by network and return the count and mean price of each.

    Every ticker is resolved through one memo table for the whole batch. Pass
    `memo` to reuse resolutions across calls; otherwise a fresh one is used.

    Prices are summed in input order and divided once at the end. Networks
    with no tickers are absent from the result.

    Raises UnknownSymbolError on the first unrecognized symbol. No partial
    result is returned in that case.
    """
    if memo is None:
        memo = {}

    # network -> [count, running price sum]
    totals: dict[NetworkName, list] = {}
    consumed = 0
    for ticker in tickers:
        network = resolve(ticker.symbol, memo)
        entry = totals.setdefault(network, [0, 0.0])
        entry[0] += 1
        entry[1] += ticker.price
        consumed += 1

    result = {
        network: NetworkStats(count=count, mean_price=total / count)
        for network, (count, total) in totals.items()
    }
    logger.debug("Aggregated %d tickers into %d networks", consumed, len(result))
    return result
