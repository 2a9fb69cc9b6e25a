from dataclasses import dataclass, field
from typing import Any, Tuple, Union

from soltxview.errors import InvalidAddressError
from soltxview.utils import b58decode, b58encode

import base64

PUBKEY_LENGTH = 32


@dataclass(frozen=True, slots=True)
class Address:
    """
    A 32-byte public key.

    Equality and hashing use the raw bytes only. The base58 string is a
    display form and is never compared.
    """

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray)) or len(self.raw) != PUBKEY_LENGTH:
            raise InvalidAddressError(f"expected {PUBKEY_LENGTH} bytes, got {self.raw!r}")
        object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def from_string(cls, value: str) -> "Address":
        try:
            return cls(b58decode(value))
        except ValueError as exc:
            raise InvalidAddressError(f"not a base58 public key: {value!r}") from exc

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Address":
        return cls(bytes(raw))

    @classmethod
    def from_base64(cls, value: str) -> "Address":
        try:
            return cls(base64.b64decode(value, validate=True))
        except ValueError as exc:
            raise InvalidAddressError(f"not a base64 public key: {value!r}") from exc

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return b58encode(self.raw)

    def __repr__(self) -> str:
        return f"Address({str(self)!r})"


@dataclass(frozen=True, slots=True)
class AccountMeta:
    """An account key with the flags the compiled message gives it."""

    pubkey: Address
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True, slots=True)
class CompactInstruction:
    """Wire instruction: accounts by position, data base58-encoded."""

    program_id_index: int
    accounts: Tuple[int, ...]
    data: str


@dataclass(frozen=True, slots=True)
class PartiallyDecodedInstruction:
    """jsonParsed instruction the node could not decode: accounts by key."""

    program_id: Address
    accounts: Tuple[Address, ...]
    data: str


@dataclass(frozen=True, slots=True)
class DecodedInstruction:
    """
    Instruction already decoded upstream (a jsonParsed "parsed" entry).
    Carried through untouched.
    """

    program: str
    program_id: Address
    parsed: Any = field(hash=False)


@dataclass(frozen=True, slots=True)
class ExpandedInstruction:
    program_id: Address
    accounts: Tuple[AccountMeta, ...]
    data: bytes


Instruction = Union[CompactInstruction, PartiallyDecodedInstruction, DecodedInstruction, ExpandedInstruction]


@dataclass(frozen=True, slots=True)
class Message:
    account_keys: Tuple[AccountMeta, ...]
    instructions: Tuple[Instruction, ...]
    recent_blockhash: str


@dataclass(frozen=True, slots=True)
class ParsedTransaction:
    """
    A transaction in display form.

    Attributes:
        signatures: base58 signatures, fee payer first.
        message: Account keys with flags, instructions and blockhash.
    """

    signatures: Tuple[str, ...]
    message: Message
