import base64
import qbase58 as base58


def b58encode(raw_bytes: bytes) -> str:
    """
    Encode raw bytes as a base58 string.

    Leading zero bytes become one "1" each and only the remainder goes
    through qbase58, which miscounts all-zero input. qbase58.encode may
    hand back bytes or str depending on the version, so the result is
    normalized to str.
    """
    stripped = bytes(raw_bytes).lstrip(b"\x00")
    prefix = "1" * (len(raw_bytes) - len(stripped))
    if not stripped:
        return prefix
    b58_encoded = base58.encode(stripped)
    readable = b58_encoded.decode("utf-8") if isinstance(b58_encoded, bytes) else b58_encoded
    return prefix + readable


def b58decode(data: str) -> bytes:
    """
    Decode a base58 string into raw bytes. Raises ValueError on bad input.

    Leading "1"s are decoded here as zero bytes, mirroring b58encode.
    """
    if not isinstance(data, str):
        raise ValueError(f"expected a base58 string, got {data!r}")
    stripped = data.lstrip("1")
    prefix = b"\x00" * (len(data) - len(stripped))
    if not stripped:
        return prefix
    try:
        return prefix + bytes(base58.decode(stripped))
    except Exception as exc:
        raise ValueError(f"invalid base58 string: {data!r}") from exc


def make_readable(data: str) -> str:
    """
    Convert a base64-encoded value (a Geyser key or payload) to base58.

    Args:
        data: A string containing the base64-encoded bytes.

    Returns:
        A string with the base58 encoding of the same bytes.
    """
    # Decode the base64 string to get raw bytes.
    raw_bytes: bytes = base64.b64decode(data)
    return b58encode(raw_bytes)
