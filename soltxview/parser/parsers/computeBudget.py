from soltxview.labels.known import COMPUTE_BUDGET_PROGRAM_ID
from soltxview.parser.models import ParsedInstruction, Program


class _ComputeBudgetParser(Program[ParsedInstruction]):
    program_id = COMPUTE_BUDGET_PROGRAM_ID
    program_name = "Compute Budget Program"

    desc_map = {
        0: "Request Units",
        1: "Request Heap Frame",
        2: "Set Compute Unit Limit",
        3: "Set Compute Unit Price",
        4: "Set Loaded Accounts Data Size Limit",
    }

    def desc(self, data: bytes) -> int:
        return data[0]


ComputeBudgetParser = _ComputeBudgetParser()
