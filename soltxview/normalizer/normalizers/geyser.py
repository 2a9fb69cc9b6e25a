from typing import List

from soltxview.errors import InvalidAddressError, NormalizeError
from soltxview.normalizer import models
from soltxview.normalizer.normalizers import shared
from soltxview.utils import make_readable

import base64
import binascii


def _address(value: str) -> models.Address:
    try:
        return models.Address.from_base64(value)
    except InvalidAddressError as exc:
        raise NormalizeError(str(exc)) from exc


def normalize(tx: dict) -> models.ParsedTransaction:
    """
    Standardizes a Geyser-style transaction response.

    Notes:
        This Geyser-style transaction uses a modified version of the
        YellowStone Geyser Protobuf format: keys, signatures, instruction
        account lists and instruction data are all base64. Account lists
        are re-read as index bytes and data is re-encoded to base58 so the
        result matches the RPC "json" shape.

    Args:
        tx: A Geyser-style transaction response.

    Returns:
        A ParsedTransaction.
    """
    try:
        geyser_txn = tx["transaction"]["transaction"]
        geyser_meta = geyser_txn.get("meta") or {}
        real_txn = geyser_txn["transaction"]
        message = real_txn["message"]

        signatures = tuple(make_readable(_sig) for _sig in real_txn["signatures"])

        # Consolidate loadedAddresses after the static keys.
        account_keys = shared.account_metas(
            [_address(_key) for _key in message["accountKeys"]],
            *shared.header_counts(message.get("header") or {}),
            loaded_writable=[_address(_addr) for _addr in geyser_meta.get("loadedWritableAddresses", [])],
            loaded_readonly=[_address(_addr) for _addr in geyser_meta.get("loadedReadonlyAddresses", [])],
        )

        instructions: List[models.Instruction] = [
            models.CompactInstruction(
                program_id_index=int(_instr["programIdIndex"]),
                accounts=tuple(base64.b64decode(_instr.get("accounts", ""))),
                data=make_readable(_instr.get("data", "")),
            )
            for _instr in message["instructions"]
        ]

        return models.ParsedTransaction(
            signatures=signatures,
            message=models.Message(
                account_keys=account_keys,
                instructions=tuple(instructions),
                recent_blockhash=make_readable(message["recentBlockhash"]),
            ),
        )
    except NormalizeError:
        raise
    except (KeyError, TypeError, ValueError, binascii.Error) as exc:
        raise NormalizeError(f"not a Geyser transaction: {exc}") from exc
