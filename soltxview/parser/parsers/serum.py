from soltxview.labels.known import SERUM_PROGRAM_ID
from soltxview.parser.models import ParsedInstruction, Program


class _SerumParser(Program[ParsedInstruction]):
    """
    Serum DEX market instructions.

    Layout: byte 0 is the layout version, bytes 1..4 the instruction code
    as a little-endian u32.
    """
    program_id = SERUM_PROGRAM_ID
    program_name = "Serum Program"
    min_length = 5

    desc_map = {
        0: "Initialize Market",
        1: "New Order",
        2: "Match Order",
        3: "Consume Events",
        4: "Cancel Order",
        5: "Settle Funds",
        6: "Cancel Order By Client Id",
        7: "Disable Market",
        8: "Sweep Fees",
    }

    def desc(self, data: bytes) -> int:
        return int.from_bytes(data[1:5], byteorder="little", signed=False)


SerumParser = _SerumParser()
