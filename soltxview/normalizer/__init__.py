from soltxview.errors import NormalizeError
from soltxview.normalizer import models
from soltxview.normalizer.normalizers import geyser, rpc


def normalize(tx: dict) -> models.ParsedTransaction:
    """
    Normalizes a raw transaction payload, picking the normalizer by shape.

    Geyser payloads nest the transaction under a "slot"-carrying container;
    RPC payloads carry "signatures" and "message" directly (optionally inside
    a {"result": ...} envelope).
    """
    if not isinstance(tx, dict):
        raise NormalizeError(f"expected a dict, got {type(tx).__name__}")
    container = tx.get("transaction")
    if isinstance(container, dict) and "slot" in container and "transaction" in container:
        return geyser.normalize(tx)
    return rpc.normalize(tx)
