"""Classify a transaction receipt saved as JSON.

Usage:
    PYTHONPATH=src python scripts/classify_receipt.py receipt.json [viewer]

The file holds either an eth_getTransactionReceipt result, or an object with
`receipt`, optional `transaction` (with nested `calls`) and optional `tokens`
(token address -> {"symbol", "decimals"}).
"""

import json
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logger = logging.getLogger("classify_receipt")


def main() -> None:
    from knownevents.parser.engine import classify_transaction, is_display_worthy
    from knownevents.parser.utils.context import metadata_lookup
    from knownevents.parser.utils.formatting import render_note, render_text

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    payload = json.loads(Path(sys.argv[1]).read_text())
    viewer = sys.argv[2] if len(sys.argv) > 2 else None

    receipt = payload.get("receipt", payload)
    transaction = payload.get("transaction")
    tokens = payload.get("tokens") or {}

    events = classify_transaction(
        receipt,
        transaction=transaction,
        get_token_metadata=metadata_lookup(tokens),
        viewer=viewer,
    )
    logger.info("%d known event(s) in %s", len(events), receipt.get("transactionHash", sys.argv[1]))

    for event in events:
        marker = " " if is_display_worthy(event) else "·"
        print(f"{marker} [{event.type.value}] {render_text(event)}")
        note = render_note(event)
        if note:
            print(f"    {note}")


if __name__ == "__main__":
    main()
