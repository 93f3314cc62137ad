"""Symbol to network resolution with a memo table over the static symbol table."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping

from .models import NetworkName
from .symbols import SYMBOL_TABLE

logger = logging.getLogger(__name__)


class UnknownSymbolError(LookupError):
    """Raised when a symbol has no entry in the static symbol table."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown symbol: {symbol!r}")
        self.symbol = symbol


def resolve(symbol: str, memo: MutableMapping[str, NetworkName]) -> NetworkName:
    """Return the network for `symbol`, consulting and populating `memo`.

    A memo hit returns immediately without touching the symbol table. On a
    miss the table is scanned in order (exact, case-sensitive match) and the
    result is stored in `memo`. The memo is left untouched on failure.

    Raises UnknownSymbolError if no table entry matches.
    """
    cached = memo.get(symbol)
    if cached is not None:
        return cached

    network = _scan_table(symbol)
    if network is None:
        logger.warning("Rejected unknown symbol %r", symbol)
        raise UnknownSymbolError(symbol)

    memo[symbol] = network
    logger.debug("Resolved %s -> %s (memo size %d)", symbol, network.value, len(memo))
    return network


def _scan_table(symbol: str) -> NetworkName | None:
    """Linear scan of SYMBOL_TABLE. First match wins."""
    for table_symbol, network in SYMBOL_TABLE:
        if table_symbol == symbol:
            return network
    return None


class SymbolResolver:
    """Owns a memo table so resolutions survive across aggregation batches.

    Not thread-safe: one resolver per thread, or synchronize externally.

    Usage:
        resolver = SymbolResolver()
        resolver.resolve("S1")
        aggregate(batch, memo=resolver.memo)
    """

    def __init__(self, memo: Mapping[str, NetworkName] | None = None) -> None:
        self._memo: dict[str, NetworkName] = {}
        # Seed entries go through resolve() so the memo never disagrees with the table
        for symbol, network in (memo or {}).items():
            resolved = resolve(symbol, self._memo)
            if resolved is not network:
                raise ValueError(
                    f"Memo entry {symbol!r} -> {network!r} conflicts with symbol table ({resolved!r})"
                )

    def resolve(self, symbol: str) -> NetworkName:
        return resolve(symbol, self._memo)

    @property
    def memo(self) -> dict[str, NetworkName]:
        """The underlying memo table. Pass to aggregate() to share it."""
        return self._memo

    def clear(self) -> None:
        """Forget all memoized resolutions."""
        self._memo.clear()

    def __len__(self) -> int:
        return len(self._memo)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._memo
