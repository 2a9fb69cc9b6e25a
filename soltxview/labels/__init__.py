"""
Address labels for display.

resolve_label walks the static tables in a fixed order and falls back to
the cluster-scoped token registry. The first match wins; a miss is None.
Labels are display-only and never feed back into address equality.
"""

from typing import Dict, List, Optional

from soltxview.labels import known
from soltxview.labels.tokens import Cluster, TokenInfo, TokenRegistry
from soltxview.normalizer.models import Address

# Resolution order for the exact-match tables.
STATIC_TABLES: List[Dict[Address, str]] = [
    known.by_address(known.PROGRAM_IDS),
    known.by_address(known.LOADER_IDS),
    known.by_address(known.SYSVAR_IDS),
    known.by_address({known.SYSVAR_ID: known.SYSVAR_LABEL}),
]


def _static_label(address: Address) -> Optional[str]:
    for table in STATIC_TABLES:
        label = table.get(address)
        if label is not None:
            return label
    if str(address).startswith(known.SYSVAR_PREFIX):
        return known.SYSVAR_LABEL
    return None


def resolve_label(
    address: Address,
    cluster: Cluster,
    token_registry: Optional[TokenRegistry] = None,
) -> Optional[str]:
    """
    Returns the display label for an address, or None.

    Order: program ids, loader ids, sysvar ids, generic sysvar (exact id,
    then the "Sysvar" base58 prefix), then the token registry for the
    given cluster.
    """
    label = _static_label(address)
    if label is not None:
        return label
    if token_registry is not None:
        token = token_registry.get(address, cluster)
        if token is not None:
            return token.name
    return None


def display_address(
    address: Address,
    cluster: Cluster,
    token_registry: Optional[TokenRegistry] = None,
) -> str:
    """Label when known, otherwise the base58 address string."""
    return resolve_label(address, cluster, token_registry) or str(address)


__all__ = [
    "Cluster",
    "TokenInfo",
    "TokenRegistry",
    "display_address",
    "resolve_label",
]
