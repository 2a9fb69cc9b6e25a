"""
Cluster-scoped token registry.

The host application owns fetching the token list; this module only holds
what it was given and answers lookups. Lookups are total: a miss is None.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

from soltxview.errors import TokenRegistryError
from soltxview.log import get_logger
from soltxview.normalizer.models import Address

logger = get_logger(__name__)


class Cluster(enum.Enum):
    MAINNET_BETA = "mainnet-beta"
    TESTNET = "testnet"
    DEVNET = "devnet"
    CUSTOM = "custom"

    @property
    def chain_id(self) -> int | None:
        """Chain id used by the solana token-list format; None for custom clusters."""
        return _CHAIN_IDS.get(self)

    @classmethod
    def from_name(cls, name: str) -> "Cluster":
        key = name.strip().lower()
        if key == "mainnet":
            key = cls.MAINNET_BETA.value
        for cluster in cls:
            if cluster.value == key:
                return cluster
        raise ValueError(f"unknown cluster: {name!r}")

    @classmethod
    def from_chain_id(cls, chain_id: int) -> "Cluster | None":
        for cluster, cid in _CHAIN_IDS.items():
            if cid == chain_id:
                return cluster
        return None


_CHAIN_IDS: Dict[Cluster, int] = {
    Cluster.MAINNET_BETA: 101,
    Cluster.TESTNET: 102,
    Cluster.DEVNET: 103,
}


@dataclass(frozen=True, slots=True)
class TokenInfo:
    address: Address
    symbol: str
    name: str
    decimals: int | None = None


class TokenRegistry:
    """In-memory token lookup keyed by (address, cluster)."""

    def __init__(self, tokens: Mapping[Cluster, Iterable[TokenInfo]] | None = None) -> None:
        self._tokens: Dict[Cluster, Dict[Address, TokenInfo]] = {}
        for cluster, infos in (tokens or {}).items():
            for info in infos:
                self.add(cluster, info)

    def add(self, cluster: Cluster, info: TokenInfo) -> None:
        self._tokens.setdefault(cluster, {})[info.address] = info

    def get(self, address: Address, cluster: Cluster) -> TokenInfo | None:
        return self._tokens.get(cluster, {}).get(address)

    def __len__(self) -> int:
        return sum(len(infos) for infos in self._tokens.values())

    @classmethod
    def from_token_list(cls, document: Mapping[str, Any]) -> "TokenRegistry":
        """
        Build a registry from a solana token-list document.

        Entries are assigned to clusters by chainId (101 mainnet-beta,
        102 testnet, 103 devnet). Entries with an unknown chainId or a bad
        address are skipped.

        Raises:
            TokenRegistryError: the document has no "tokens" list.
        """
        if not isinstance(document, Mapping) or not isinstance(document.get("tokens"), list):
            raise TokenRegistryError("token list document must contain a 'tokens' list")
        registry = cls()
        for entry in document["tokens"]:
            try:
                cluster = Cluster.from_chain_id(int(entry["chainId"]))
                if cluster is None:
                    logger.debug("token_skipped", reason="unknown_chain", chain_id=entry["chainId"])
                    continue
                registry.add(
                    cluster,
                    TokenInfo(
                        address=Address.from_string(entry["address"]),
                        symbol=str(entry.get("symbol", "")),
                        name=str(entry["name"]),
                        decimals=entry.get("decimals"),
                    ),
                )
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("token_skipped", reason="malformed_entry", error=str(exc))
        return registry

    @classmethod
    def from_file(cls, path: str | Path) -> "TokenRegistry":
        try:
            document = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise TokenRegistryError(f"cannot read token list {path}: {exc}") from exc
        registry = cls.from_token_list(document)
        logger.info("token_list_loaded", path=str(path), tokens=len(registry))
        return registry
