"""
Conversion between the compact (index-based) and expanded (key-based)
instruction forms.

expand() never raises and never returns a partially filled instruction: any
reference it cannot resolve makes the whole result None. compact() reads a
signed solders Transaction and is total.
"""

from typing import List, Optional, Sequence, Tuple, Union

from solders.transaction import Transaction

from soltxview.log import get_logger
from soltxview.normalizer import models
from soltxview.normalizer.normalizers import shared
from soltxview.utils import b58decode, b58encode

logger = get_logger(__name__)


def _key_at(account_keys: Sequence[models.AccountMeta], index: int) -> Optional[models.Address]:
    if 0 <= index < len(account_keys):
        return account_keys[index].pubkey
    return None


def _find_account(
    account_keys: Sequence[models.AccountMeta], pubkey: models.Address
) -> Optional[models.AccountMeta]:
    # Matched on the key itself, so a stale position can't pick up another key's flags.
    return next((account for account in account_keys if account.pubkey == pubkey), None)


def _references(
    message: models.Message, instruction: models.Instruction
) -> Tuple[Optional[models.Address], List[Optional[models.Address]], Optional[bytes]]:
    """Program id, account keys and raw data referenced by a non-decoded instruction."""
    keys = message.account_keys
    if isinstance(instruction, models.ExpandedInstruction):
        return instruction.program_id, [account.pubkey for account in instruction.accounts], instruction.data

    try:
        data = b58decode(instruction.data)
    except ValueError:
        data = None

    if isinstance(instruction, models.CompactInstruction):
        return (
            _key_at(keys, instruction.program_id_index),
            [_key_at(keys, index) for index in instruction.accounts],
            data,
        )
    return instruction.program_id, list(instruction.accounts), data


def expand(message: models.Message, index: int) -> Optional[models.ExpandedInstruction]:
    """
    Expands the instruction at `index` into program id, flagged accounts and raw bytes.

    Returns None when the instruction was already decoded upstream, when the
    index is out of range, or when any program id, account or payload can't
    be resolved against the message's account keys.
    """
    if not 0 <= index < len(message.instructions):
        logger.debug("instruction_missing", instruction_index=index, count=len(message.instructions))
        return None
    instruction = message.instructions[index]
    if isinstance(instruction, models.DecodedInstruction):
        return None

    program_id, pubkeys, data = _references(message, instruction)
    if program_id is None or data is None:
        logger.debug("instruction_unresolved", instruction_index=index, program_resolved=program_id is not None)
        return None

    accounts: List[models.AccountMeta] = []
    for position, pubkey in enumerate(pubkeys):
        account = _find_account(message.account_keys, pubkey) if pubkey is not None else None
        if account is None:
            logger.debug("account_unresolved", instruction_index=index, position=position)
            return None
        accounts.append(account)

    return models.ExpandedInstruction(program_id=program_id, accounts=tuple(accounts), data=data)


def expand_all(message: models.Message) -> List[Optional[models.ExpandedInstruction]]:
    """expand() for every instruction of the message, in order."""
    return [expand(message, index) for index in range(len(message.instructions))]


def _position(account_keys: Sequence[models.AccountMeta], pubkey: models.Address) -> Optional[int]:
    return next((pos for pos, account in enumerate(account_keys) if account.pubkey == pubkey), None)


def to_compact(
    instruction: models.ExpandedInstruction,
    account_keys: Sequence[models.AccountMeta],
) -> Optional[models.CompactInstruction]:
    """
    Re-encodes an expanded instruction against an account-key sequence.

    Each key maps to its first position in the sequence, so the sequence
    must not repeat keys (compiled messages never do) for the result to
    reproduce the original indices. Returns None when the program id or an
    account is not in the sequence.
    """
    program_id_index = _position(account_keys, instruction.program_id)
    if program_id_index is None:
        return None
    indices: List[int] = []
    for account in instruction.accounts:
        position = _position(account_keys, account.pubkey)
        if position is None:
            return None
        indices.append(position)
    return models.CompactInstruction(
        program_id_index=program_id_index,
        accounts=tuple(indices),
        data=b58encode(instruction.data),
    )


def compact(transaction: Union[Transaction, bytes]) -> models.ParsedTransaction:
    """
    Builds the display form of a signed transaction.

    Key order and signer/writable flags come from the transaction's own
    compiled message and header; every compiled instruction becomes an
    ExpandedInstruction and every signature its base58 string.

    Args:
        transaction: A solders Transaction, or its serialized wire bytes.
    """
    if isinstance(transaction, (bytes, bytearray)):
        transaction = Transaction.from_bytes(bytes(transaction))

    message = transaction.message
    header = message.header
    account_keys = shared.account_metas(
        [models.Address.from_bytes(bytes(key)) for key in message.account_keys],
        header.num_required_signatures,
        header.num_readonly_signed_accounts,
        header.num_readonly_unsigned_accounts,
    )

    instructions = tuple(
        models.ExpandedInstruction(
            program_id=account_keys[ix.program_id_index].pubkey,
            accounts=tuple(account_keys[index] for index in bytes(ix.accounts)),
            data=bytes(ix.data),
        )
        for ix in message.instructions
    )

    return models.ParsedTransaction(
        signatures=tuple(str(signature) for signature in transaction.signatures),
        message=models.Message(
            account_keys=account_keys,
            instructions=instructions,
            recent_blockhash=str(message.recent_blockhash),
        ),
    )
