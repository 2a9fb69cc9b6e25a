from soltxview.converter import compact, expand, expand_all, to_compact
from soltxview.labels import Cluster, TokenInfo, TokenRegistry, display_address, resolve_label
from soltxview.normalizer import normalize
from soltxview.normalizer.models import (
    AccountMeta,
    Address,
    CompactInstruction,
    DecodedInstruction,
    ExpandedInstruction,
    Message,
    ParsedTransaction,
    PartiallyDecodedInstruction,
)
from soltxview.parser import decode, register
from soltxview.report import describe

__all__ = [
    "AccountMeta",
    "Address",
    "Cluster",
    "CompactInstruction",
    "DecodedInstruction",
    "ExpandedInstruction",
    "Message",
    "ParsedTransaction",
    "PartiallyDecodedInstruction",
    "TokenInfo",
    "TokenRegistry",
    "compact",
    "decode",
    "describe",
    "display_address",
    "expand",
    "expand_all",
    "normalize",
    "register",
    "resolve_label",
    "to_compact",
]
