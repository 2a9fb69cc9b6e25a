from typing import Any, Dict

import qborsh

from soltxview.labels.known import SYSTEM_PROGRAM_ID
from soltxview.log import get_logger
from soltxview.parser.models import ParsedInstruction, Program

logger = get_logger(__name__)

TRANSFER = 2


@qborsh.schema
class TransferData:
    """
    Borsh layout of a System Program transfer.

    Attributes:
        kind: Instruction discriminant (2).
        lamports: Amount moved.
    """
    kind: qborsh.U32
    lamports: qborsh.U64


class _SystemProgramParser(Program[ParsedInstruction]):
    program_id = SYSTEM_PROGRAM_ID
    program_name = "System Program"
    min_length = 4

    desc_map = {
        0: "Create Account",
        1: "Assign",
        2: "Transfer",
        3: "Create Account With Seed",
        4: "Advance Nonce Account",
        5: "Withdraw Nonce Account",
        6: "Initialize Nonce Account",
        7: "Authorize Nonce Account",
        8: "Allocate",
        9: "Allocate With Seed",
        10: "Assign With Seed",
        11: "Transfer With Seed",
        12: "Upgrade Nonce Account",
    }

    def desc(self, data: bytes) -> int:
        return int.from_bytes(data[:4], byteorder="little", signed=False)

    def args(self, code: int, data: bytes) -> Dict[str, Any]:
        if code != TRANSFER or len(data) < 12:
            return {}
        try:
            transfer = TransferData.decode(data[:12])
        except Exception as exc:
            logger.debug("transfer_args_undecodable", error=str(exc))
            return {}
        return {"lamports": int(self._get_field(transfer, "lamports"))}

    def _get_field(self, data, field: str):
        """
        Helper method to retrieve a field from decoded data.
        Works whether data is returned as a dict or an object.
        """
        if isinstance(data, dict):
            return data.get(field)
        return getattr(data, field)


SystemProgramParser = _SystemProgramParser()
