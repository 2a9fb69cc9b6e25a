from typing import Dict, Optional

from soltxview.normalizer.models import Address, ExpandedInstruction
from soltxview.parser import models, parsers

# Map program IDs to their corresponding decoders.
id_to_handler: Dict[Address, models.Program] = {}


def register(program: models.Program) -> None:
    """Adds a decoder for program.program_id, replacing any previous one."""
    id_to_handler[Address.from_string(program.program_id)] = program


for _program in (
    parsers.systemProgram.SystemProgramParser,
    parsers.computeBudget.ComputeBudgetParser,
    parsers.tokenProgram.TokenProgramParser,
    parsers.serum.SerumParser,
):
    register(_program)


def decode(instruction: ExpandedInstruction) -> Optional[models.ParsedInstruction]:
    """
    Decodes an expanded instruction with the decoder registered for its program.

    Returns:
        The decoded operation, or None when the program has no decoder or the
        payload is too short for the decoder's fixed fields.
    """
    router = id_to_handler.get(instruction.program_id)
    if router is None:
        return None
    return router.route(instruction)
