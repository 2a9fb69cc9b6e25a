from dataclasses import dataclass, field
from typing import List, Optional

from soltxview import converter, labels, parser
from soltxview.labels.tokens import Cluster, TokenRegistry
from soltxview.normalizer import models
from soltxview.parser.models import ParsedInstruction


@dataclass(slots=True)
class AccountReport:
    address: str
    label: Optional[str]
    is_signer: bool
    is_writable: bool


@dataclass(slots=True)
class InstructionReport:
    """
    Display view of one instruction.

    Attributes:
        index: Position in the message.
        program_id: base58 program id, None when it could not be resolved.
        program: Program label, or the base58 id when unlabeled.
        accounts: Accounts with labels and flags, empty when not expanded.
        operation: Decoded operation, None when the program has no decoder
            or the payload is too short.
        data: Raw payload as hex, None when not expanded.
        expanded: False when a reference could not be resolved.
        pre_decoded: The upstream parser already decoded this instruction;
            `parsed` carries its output unchanged.
    """
    index: int
    program_id: Optional[str]
    program: Optional[str]
    accounts: List[AccountReport] = field(default_factory=list)
    operation: Optional[ParsedInstruction] = None
    data: Optional[str] = None
    expanded: bool = False
    pre_decoded: bool = False
    parsed: object = None


def _describe_one(
    message: models.Message,
    index: int,
    cluster: Cluster,
    token_registry: Optional[TokenRegistry],
) -> InstructionReport:
    instruction = message.instructions[index]
    if isinstance(instruction, models.DecodedInstruction):
        return InstructionReport(
            index=index,
            program_id=str(instruction.program_id),
            program=labels.resolve_label(instruction.program_id, cluster, token_registry) or instruction.program,
            pre_decoded=True,
            parsed=instruction.parsed,
        )

    expanded = converter.expand(message, index)
    if expanded is None:
        program_id = None
        if isinstance(instruction, models.CompactInstruction):
            if 0 <= instruction.program_id_index < len(message.account_keys):
                program_id = message.account_keys[instruction.program_id_index].pubkey
        else:
            program_id = instruction.program_id
        return InstructionReport(
            index=index,
            program_id=str(program_id) if program_id is not None else None,
            program=labels.display_address(program_id, cluster, token_registry) if program_id is not None else None,
        )

    return InstructionReport(
        index=index,
        program_id=str(expanded.program_id),
        program=labels.display_address(expanded.program_id, cluster, token_registry),
        accounts=[
            AccountReport(
                address=str(account.pubkey),
                label=labels.resolve_label(account.pubkey, cluster, token_registry),
                is_signer=account.is_signer,
                is_writable=account.is_writable,
            )
            for account in expanded.accounts
        ],
        operation=parser.decode(expanded),
        data=expanded.data.hex(),
        expanded=True,
    )


def describe(
    tx: models.ParsedTransaction,
    cluster: Cluster,
    token_registry: Optional[TokenRegistry] = None,
) -> List[InstructionReport]:
    """
    Builds the display view of every instruction in a transaction.

    Unresolvable instructions are reported with expanded=False and
    instructions decoded upstream are passed through; nothing here raises
    on a well-formed ParsedTransaction.
    """
    return [
        _describe_one(tx.message, index, cluster, token_registry)
        for index in range(len(tx.message.instructions))
    ]
