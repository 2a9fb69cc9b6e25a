"""
Environment configuration for soltxview.

- SOLTXVIEW_CLUSTER: mainnet-beta | testnet | devnet | custom (default: mainnet-beta)
- SOLTXVIEW_TOKEN_LIST: optional path to a solana token-list JSON file
- LOG_LEVEL / LOG_FORMAT: read by soltxview.log
- Loads .env from the working directory when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from soltxview.labels.tokens import Cluster, TokenRegistry
from soltxview.log import get_logger

logger = get_logger(__name__)

DEFAULT_CLUSTER = Cluster.MAINNET_BETA


def load_env() -> None:
    """Load .env from the working directory. Safe to call multiple times."""
    load_dotenv(override=False)


def get_cluster() -> Cluster:
    """
    Return SOLTXVIEW_CLUSTER from env as a Cluster.
    Unknown names fall back to mainnet-beta.
    """
    load_env()
    raw = (os.getenv("SOLTXVIEW_CLUSTER") or "").strip()
    if not raw:
        return DEFAULT_CLUSTER
    try:
        return Cluster.from_name(raw)
    except ValueError:
        logger.warning("unknown_cluster", cluster=raw, fallback=DEFAULT_CLUSTER.value)
        return DEFAULT_CLUSTER


def get_token_list_path() -> Path | None:
    """Return SOLTXVIEW_TOKEN_LIST as a Path, or None when unset."""
    load_env()
    raw = (os.getenv("SOLTXVIEW_TOKEN_LIST") or "").strip()
    return Path(raw) if raw else None


def load_token_registry() -> TokenRegistry:
    """
    Build the token registry from SOLTXVIEW_TOKEN_LIST.
    Returns an empty registry when no path is configured.
    """
    path = get_token_list_path()
    if path is None:
        return TokenRegistry()
    return TokenRegistry.from_file(path)
