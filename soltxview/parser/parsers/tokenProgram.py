from soltxview.labels.known import TOKEN_PROGRAM_ID
from soltxview.parser.models import ParsedInstruction, Program


class _TokenProgramParser(Program[ParsedInstruction]):
    program_id = TOKEN_PROGRAM_ID
    program_name = "SPL Token Program"

    desc_map = {
        0: "Initialize Mint",
        1: "Initialize Account",
        2: "Initialize Multisig",
        3: "Transfer",
        4: "Approve",
        5: "Revoke",
        6: "Set Authority",
        7: "Mint To",
        8: "Burn",
        9: "Close Account",
        10: "Freeze Account",
        11: "Thaw Account",
        12: "Transfer Checked",
        13: "Approve Checked",
        14: "Mint To Checked",
        15: "Burn Checked",
        16: "Initialize Account 2",
        17: "Sync Native",
    }

    def desc(self, data: bytes) -> int:
        return data[0]


TokenProgramParser = _TokenProgramParser()
