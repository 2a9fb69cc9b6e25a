import json
import sys
from pprint import pprint

import soltxview
from soltxview import config
from soltxview.log import configure_structlog

if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else "example_txs/transaction.json"
    with open(path, "r") as f:
        tx = json.load(f)

    config.load_env()
    configure_structlog()
    cluster = config.get_cluster()
    token_registry = config.load_token_registry()

    print("## NORMALIZED")
    normalized = soltxview.normalize(tx)
    pprint(normalized)
    print("-" * 100)
    print("## EXPANDED")
    pprint(soltxview.expand_all(normalized.message))
    print("-" * 100)
    print("## DESCRIBED")
    pprint(soltxview.describe(normalized, cluster, token_registry))
