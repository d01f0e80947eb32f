"""Storage, import and output adapters around the ledger state."""

from propledger.sinks.console import ConsoleSink, format_currency
from propledger.sinks.csv_file import CsvImportResult, export_summary_csv, import_payments_csv
from propledger.sinks.json_file import JsonSnapshotStorage

__all__ = [
    "ConsoleSink",
    "CsvImportResult",
    "JsonSnapshotStorage",
    "export_summary_csv",
    "format_currency",
    "import_payments_csv",
]
