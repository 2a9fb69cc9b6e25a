"""
Shared fixtures: deterministic addresses and a small three-key message.
"""

from __future__ import annotations

import pytest

from soltxview.labels.known import SERUM_PROGRAM_ID
from soltxview.normalizer.models import AccountMeta, Address, CompactInstruction, Message
from soltxview.utils import b58encode


def make_address(seed: int) -> Address:
    """Address whose 32 bytes are all `seed`."""
    return Address(bytes([seed]) * 32)


@pytest.fixture
def payer() -> Address:
    return make_address(7)


@pytest.fixture
def market() -> Address:
    return make_address(9)


@pytest.fixture
def serum_program() -> Address:
    return Address.from_string(SERUM_PROGRAM_ID)


@pytest.fixture
def account_keys(payer, market, serum_program) -> tuple[AccountMeta, ...]:
    return (
        AccountMeta(pubkey=payer, is_signer=True, is_writable=True),
        AccountMeta(pubkey=market, is_signer=False, is_writable=True),
        AccountMeta(pubkey=serum_program, is_signer=False, is_writable=False),
    )


@pytest.fixture
def new_order_data() -> bytes:
    return bytes([0x00, 0x01, 0x00, 0x00, 0x00, 0x2A, 0x2B])


@pytest.fixture
def message(account_keys, new_order_data) -> Message:
    return Message(
        account_keys=account_keys,
        instructions=(
            CompactInstruction(program_id_index=2, accounts=(1, 0), data=b58encode(new_order_data)),
        ),
        recent_blockhash=b58encode(bytes(32)),
    )
