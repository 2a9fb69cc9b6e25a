from typing import Any, Dict, List

from soltxview.errors import NormalizeError
from soltxview.normalizer import models
from soltxview.normalizer.normalizers import shared


def normalize(tx: dict) -> models.ParsedTransaction:
    """
    Standardizes a getTransaction RPC response.

    Both the "json" encoding (string account keys plus a message header,
    index-based instructions) and the "jsonParsed" encoding (account key
    objects carrying signer/writable, instructions either already parsed
    or keyed by address) are accepted. Loaded addresses from v0 lookup
    tables are appended after the static keys.

    Args:
        tx: The RPC response, with or without the {"result": ...} envelope.

    Returns:
        A ParsedTransaction.
    """
    result = tx.get("result", tx)
    if result is None:
        raise NormalizeError("empty getTransaction result")
    try:
        real_txn = result["transaction"]
        signatures: List[str] = list(real_txn["signatures"])
        message: Dict[str, Any] = real_txn["message"]
        raw_keys = message["accountKeys"]
        raw_instructions = message["instructions"]
        recent_blockhash = message["recentBlockhash"]
    except (KeyError, TypeError) as exc:
        raise NormalizeError(f"not a getTransaction response: missing {exc}") from exc

    if not isinstance(raw_keys, list) or not isinstance(raw_instructions, list):
        raise NormalizeError("accountKeys and instructions must be lists")

    if raw_keys and isinstance(raw_keys[0], dict):
        # jsonParsed: flags already resolved by the node, loaded keys included.
        if not all(isinstance(_key, dict) for _key in raw_keys):
            raise NormalizeError("jsonParsed accountKeys mix objects and strings")
        account_keys = tuple(
            models.AccountMeta(
                pubkey=shared.address(_key.get("pubkey")),
                is_signer=bool(_key.get("signer", False)),
                is_writable=bool(_key.get("writable", False)),
            )
            for _key in raw_keys
        )
    else:
        meta = result.get("meta") or {}
        loaded = (meta.get("loadedAddresses") or {}) if isinstance(meta, dict) else {}
        if not isinstance(loaded, dict):
            raise NormalizeError(f"malformed loadedAddresses: {loaded!r}")
        account_keys = shared.account_metas(
            [shared.address(_key) for _key in raw_keys],
            *shared.header_counts(message.get("header") or {}),
            loaded_writable=[shared.address(_key) for _key in loaded.get("writable", [])],
            loaded_readonly=[shared.address(_key) for _key in loaded.get("readonly", [])],
        )

    return models.ParsedTransaction(
        signatures=tuple(signatures),
        message=models.Message(
            account_keys=account_keys,
            instructions=tuple(shared.instructions(_ix) for _ix in raw_instructions),
            recent_blockhash=recent_blockhash,
        ),
    )
