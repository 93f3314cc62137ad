"""Static symbol table mapping tracked symbols to their networks."""

from .models import NetworkName

# Ordered (symbol, network) pairs. Lookups are exact and case-sensitive;
# the first matching entry wins.
SYMBOL_TABLE: tuple[tuple[str, NetworkName], ...] = (
    ("S1", NetworkName.N1),
    ("S2", NetworkName.N2),
    ("s3", NetworkName.N3),  # Lowercase on purpose; "S3" is not tracked
)

# Networks reachable from the table above
TRACKED_NETWORKS: frozenset[NetworkName] = frozenset(network for _, network in SYMBOL_TABLE)
