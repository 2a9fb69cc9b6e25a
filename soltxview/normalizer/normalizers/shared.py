from typing import Any, Dict, List, Mapping, Sequence, Tuple

from soltxview.errors import InvalidAddressError, NormalizeError
from soltxview.normalizer import models


def header_counts(header: Mapping[str, Any]) -> Tuple[int, int, int]:
    """
    Reads the message header of an RPC or Geyser payload.

    Returns:
        (numRequiredSignatures, numReadonlySignedAccounts, numReadonlyUnsignedAccounts)
    """
    try:
        return (
            int(header["numRequiredSignatures"]),
            int(header["numReadonlySignedAccounts"]),
            int(header["numReadonlyUnsignedAccounts"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise NormalizeError(f"malformed message header: {header!r}") from exc


def account_metas(
    keys: Sequence[models.Address],
    num_required_signatures: int,
    num_readonly_signed: int,
    num_readonly_unsigned: int,
    loaded_writable: Sequence[models.Address] = (),
    loaded_readonly: Sequence[models.Address] = (),
) -> Tuple[models.AccountMeta, ...]:
    """
    Attaches signer/writable flags to the static account keys of a compiled
    message, followed by the lookup-table loaded addresses.

    The compiled key order is signers first, and within the signed and the
    unsigned groups writable keys come before read-only ones. The header
    counts say where each group ends.
    """
    total = len(keys)
    metas: List[models.AccountMeta] = []
    for index, key in enumerate(keys):
        if index < num_required_signatures:
            is_signer = True
            is_writable = index < num_required_signatures - num_readonly_signed
        else:
            is_signer = False
            is_writable = index < total - num_readonly_unsigned
        metas.append(models.AccountMeta(pubkey=key, is_signer=is_signer, is_writable=is_writable))
    metas.extend(models.AccountMeta(pubkey=key, is_signer=False, is_writable=True) for key in loaded_writable)
    metas.extend(models.AccountMeta(pubkey=key, is_signer=False, is_writable=False) for key in loaded_readonly)
    return tuple(metas)


def address(value: Any) -> models.Address:
    """Parses a base58 account key from an RPC payload."""
    if not isinstance(value, str):
        raise NormalizeError(f"expected a base58 account key, got {value!r}")
    try:
        return models.Address.from_string(value)
    except InvalidAddressError as exc:
        raise NormalizeError(str(exc)) from exc


def instructions(ix: Dict[str, Any]) -> models.Instruction:
    """
    Converts one RPC instruction entry into the matching model.

    - "parsed" present: DecodedInstruction (jsonParsed, known program)
    - "programId" present: PartiallyDecodedInstruction (jsonParsed, unknown program)
    - otherwise: CompactInstruction (json encoding)
    """
    try:
        if "parsed" in ix:
            return models.DecodedInstruction(
                program=ix.get("program", ""),
                program_id=address(ix["programId"]),
                parsed=ix["parsed"],
            )
        if "programId" in ix:
            return models.PartiallyDecodedInstruction(
                program_id=address(ix["programId"]),
                accounts=tuple(address(_acc) for _acc in ix.get("accounts", [])),
                data=ix.get("data", ""),
            )
        return models.CompactInstruction(
            program_id_index=int(ix["programIdIndex"]),
            accounts=tuple(int(_idx) for _idx in ix.get("accounts", [])),
            data=ix.get("data", ""),
        )
    except NormalizeError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise NormalizeError(f"malformed instruction: {ix!r}") from exc
