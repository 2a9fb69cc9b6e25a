from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from soltxview.log import get_logger
from soltxview.normalizer.models import ExpandedInstruction

logger = get_logger(__name__)

UNKNOWN_OPERATION = "Unknown"


@dataclass(slots=True)
class ParsedInstruction:
    """
    Decoded operation of one instruction.

    Attributes:
        program_id: base58 program id.
        program_name: Display name of the program.
        instruction_name: Operation name, "Unknown" for codes outside the table.
        code: Operation code read from the payload.
        args: Decoded arguments, when the decoder reads any.
    """
    program_id: str
    program_name: str
    instruction_name: str
    code: int
    args: Dict[str, Any] = field(default_factory=dict)


T = TypeVar("T", bound=ParsedInstruction)


class Program(Generic[T]):
    """
    Base decoder for one on-chain program.

    Subclasses set program_id, program_name, min_length (bytes needed to
    read the operation code) and desc_map (code -> operation name), and
    implement desc(data) to read the code. Payloads shorter than
    min_length are declined with None.
    """
    program_id: str
    program_name: str
    min_length: int = 1
    desc_map: Dict[int, str] = {}

    def desc(self, data: bytes) -> int:
        raise NotImplementedError

    def args(self, code: int, data: bytes) -> Dict[str, Any]:
        return {}

    def route(self, instruction: ExpandedInstruction) -> Optional[ParsedInstruction]:
        data = instruction.data
        if len(data) < self.min_length:
            logger.debug(
                "instruction_undecodable",
                program=self.program_name,
                length=len(data),
                required=self.min_length,
            )
            return None
        code = self.desc(data)
        return ParsedInstruction(
            program_id=self.program_id,
            program_name=self.program_name,
            instruction_name=self.desc_map.get(code, UNKNOWN_OPERATION),
            code=code,
            args=self.args(code, data),
        )
