"""
Tests for per-program instruction decoding and the decoder registry.
"""

from __future__ import annotations

import struct

import pytest

from soltxview import parser
from soltxview.labels.known import COMPUTE_BUDGET_PROGRAM_ID, SERUM_PROGRAM_ID, SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID
from soltxview.normalizer.models import Address, ExpandedInstruction
from soltxview.parser.models import ParsedInstruction, Program

from conftest import make_address


def _ix(program_id: str, data: bytes) -> ExpandedInstruction:
    return ExpandedInstruction(program_id=Address.from_string(program_id), accounts=(), data=data)


def test_serum_new_order():
    decoded = parser.decode(_ix(SERUM_PROGRAM_ID, bytes([0x01, 0x01, 0x00, 0x00, 0x00, 0x10, 0x20])))
    assert decoded.code == 1
    assert decoded.instruction_name == "New Order"
    assert decoded.program_name == "Serum Program"
    assert decoded.program_id == SERUM_PROGRAM_ID


def test_serum_unknown_code():
    decoded = parser.decode(_ix(SERUM_PROGRAM_ID, bytes([0x01, 0xFF, 0xFF, 0xFF, 0xFF])))
    assert decoded.code == 0xFFFFFFFF
    assert decoded.instruction_name == "Unknown"


@pytest.mark.parametrize(
    "code, name",
    [(0, "Initialize Market"), (2, "Match Order"), (6, "Cancel Order By Client Id"), (8, "Sweep Fees"), (9, "Unknown")],
)
def test_serum_code_table(code, name):
    decoded = parser.decode(_ix(SERUM_PROGRAM_ID, b"\x00" + struct.pack("<I", code)))
    assert (decoded.code, decoded.instruction_name) == (code, name)


@pytest.mark.parametrize("data", [b"", b"\x01", b"\x01\x01\x00\x00"])
def test_serum_short_payload_is_undecodable(data):
    assert parser.decode(_ix(SERUM_PROGRAM_ID, data)) is None


def test_system_transfer_reads_lamports():
    data = struct.pack("<IQ", 2, 1_500_000_000)
    decoded = parser.decode(_ix(SYSTEM_PROGRAM_ID, data))
    assert decoded.instruction_name == "Transfer"
    assert decoded.args == {"lamports": 1_500_000_000}


def test_system_create_account_has_no_args():
    decoded = parser.decode(_ix(SYSTEM_PROGRAM_ID, struct.pack("<I", 0) + bytes(48)))
    assert decoded.instruction_name == "Create Account"
    assert decoded.args == {}


def test_system_short_payload_is_undecodable():
    assert parser.decode(_ix(SYSTEM_PROGRAM_ID, b"\x02\x00")) is None


def test_token_and_compute_budget_tags():
    assert parser.decode(_ix(TOKEN_PROGRAM_ID, bytes([12, 0, 0]))).instruction_name == "Transfer Checked"
    assert parser.decode(_ix(TOKEN_PROGRAM_ID, bytes([200]))).instruction_name == "Unknown"
    assert parser.decode(_ix(COMPUTE_BUDGET_PROGRAM_ID, bytes([3]) + bytes(8))).instruction_name == (
        "Set Compute Unit Price"
    )
    assert parser.decode(_ix(TOKEN_PROGRAM_ID, b"")) is None


def test_unknown_program_is_not_decoded():
    ix = ExpandedInstruction(program_id=make_address(77), accounts=(), data=b"\x01\x02\x03\x04\x05")
    assert parser.decode(ix) is None


def test_register_adds_decoder_without_touching_others():
    program_address = make_address(88)

    class _MemoLikeParser(Program[ParsedInstruction]):
        program_id = str(program_address)
        program_name = "Test Program"
        desc_map = {7: "Ping"}

        def desc(self, data: bytes) -> int:
            return data[0]

    try:
        parser.register(_MemoLikeParser())
        decoded = parser.decode(ExpandedInstruction(program_id=program_address, accounts=(), data=b"\x07"))
        assert decoded.instruction_name == "Ping"
        assert parser.decode(_ix(SERUM_PROGRAM_ID, bytes([0, 1, 0, 0, 0]))).instruction_name == "New Order"
    finally:
        parser.id_to_handler.pop(program_address, None)
