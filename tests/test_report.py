"""
Tests for the per-instruction display view.
"""

from __future__ import annotations

from soltxview.labels.tokens import Cluster, TokenInfo, TokenRegistry
from soltxview.normalizer.models import (
    CompactInstruction,
    DecodedInstruction,
    Message,
    ParsedTransaction,
    PartiallyDecodedInstruction,
)
from soltxview.report import describe
from soltxview.utils import b58encode

from conftest import make_address


def _tx(message: Message, *instructions) -> ParsedTransaction:
    return ParsedTransaction(
        signatures=(b58encode(bytes(64)),),
        message=Message(
            account_keys=message.account_keys,
            instructions=tuple(instructions) or message.instructions,
            recent_blockhash=message.recent_blockhash,
        ),
    )


def test_describe_decodes_and_labels(message, payer, market, new_order_data):
    registry = TokenRegistry({Cluster.MAINNET_BETA: [TokenInfo(market, "MKT", "Test Market")]})
    (report,) = describe(_tx(message), Cluster.MAINNET_BETA, registry)

    assert report.expanded is True
    assert report.program == "Serum Program"
    assert report.operation.code == 1
    assert report.operation.instruction_name == "New Order"
    assert report.data == new_order_data.hex()
    assert [(a.address, a.label, a.is_signer, a.is_writable) for a in report.accounts] == [
        (str(market), "Test Market", False, True),
        (str(payer), None, True, True),
    ]


def test_describe_short_serum_payload_falls_back_to_raw(message):
    short = CompactInstruction(program_id_index=2, accounts=(0,), data=b58encode(b"\x00\x01"))
    (report,) = describe(_tx(message, short), Cluster.MAINNET_BETA)
    assert report.expanded is True
    assert report.operation is None
    assert report.data == "0001"


def test_describe_unresolvable_instruction(message):
    broken = CompactInstruction(program_id_index=2, accounts=(0, 9), data="")
    (report,) = describe(_tx(message, broken), Cluster.MAINNET_BETA)
    assert report.expanded is False
    assert report.program == "Serum Program"
    assert report.accounts == []
    assert report.data is None


def test_describe_unresolvable_program_index(message):
    broken = CompactInstruction(program_id_index=12, accounts=(0,), data="")
    (report,) = describe(_tx(message, broken), Cluster.MAINNET_BETA)
    assert report.expanded is False
    assert report.program_id is None
    assert report.program is None


def test_describe_passes_decoded_instruction_through(message, serum_program):
    parsed = {"type": "newOrder", "info": {"side": "bid"}}
    decoded = DecodedInstruction(program="serum", program_id=serum_program, parsed=parsed)
    tx = _tx(message, decoded, message.instructions[0])
    first, second = describe(tx, Cluster.MAINNET_BETA)

    assert first.pre_decoded is True
    assert first.parsed is parsed
    assert first.operation is None
    assert second.operation.instruction_name == "New Order"
    assert tx.message.instructions[0] is decoded


def test_describe_unknown_program_shows_raw_address(message, payer):
    program = make_address(123)
    ix = PartiallyDecodedInstruction(program_id=program, accounts=(payer,), data=b58encode(b"\xAA"))
    (report,) = describe(_tx(message, ix), Cluster.DEVNET)
    assert report.expanded is True
    assert report.program == str(program)
    assert report.operation is None
    assert report.data == "aa"
