#!/usr/bin/env python3
"""Bulk-import transactions from CSV into a stored snapshot."""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from propledger.config import PropLedgerConfig
from propledger.logging import setup_logging
from propledger.sinks import JsonSnapshotStorage, import_payments_csv
from propledger.store import LedgerStore

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Import a 'Date, Amount, Property Name, Category, Note' CSV"
    )
    parser.add_argument("csv_file", type=Path, help="CSV file to import")
    parser.add_argument(
        "--snapshot",
        type=Path,
        default=None,
        help="Snapshot file (default: PROPLEDGER_SNAPSHOT or propledger.json)",
    )
    args = parser.parse_args()

    config = PropLedgerConfig.from_env()
    setup_logging(config.log_level)

    storage = JsonSnapshotStorage(
        args.snapshot or config.storage.snapshot_path,
        pretty=config.storage.pretty_json,
        seed_on_empty=config.storage.seed_on_empty,
    )
    store = LedgerStore.from_state(storage.load(), storage=storage)

    result = import_payments_csv(args.csv_file, store.properties.values())
    if not result.payments:
        logger.error("No valid payment records found in %s", args.csv_file)
        return 1

    store.bulk_add_payments(result.payments)
    print(f"Imported {len(result.payments)} payments, skipped {result.skipped} rows")
    return 0


if __name__ == "__main__":
    sys.exit(main())
