"""Console sink for printing reports from scripts."""

import json
from decimal import Decimal
from typing import Any

from propledger.sinks.serialization import to_dict

CURRENCY_SYMBOLS = {"PHP": "₱", "USD": "$", "EUR": "€"}


def format_currency(amount: Decimal | int | float, currency: str = "PHP") -> str:
    """Format a whole-unit amount, e.g. ``₱25,000`` or ``-₱1,200``."""
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    value = Decimal(str(amount)).quantize(Decimal("1"))
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,}"


class ConsoleSink:
    """Output report records to console (stdout)."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, title: str, records: list[Any]) -> None:
        """Print a titled batch of records as JSON."""
        print(f"\n{'='*60}")
        print(f"{title} ({len(records)} records)")
        print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            data = to_dict(record)
            if self.pretty:
                print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            else:
                print(json.dumps(data, ensure_ascii=False, default=str))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[title] = self._counts.get(title, 0) + len(records)

    def write_table(self, title: str, headers: list[str], rows: list[list[Any]]) -> None:
        """Print rows as a left-aligned text table."""
        cells = [[str(c) for c in headers]] + [[str(c) for c in row] for row in rows]
        widths = [max(len(row[i]) for row in cells) for i in range(len(headers))]

        print(f"\n{title}")
        for idx, row in enumerate(cells):
            print("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
            if idx == 0:
                print("  ".join("-" * width for width in widths))

        self._counts[title] = self._counts.get(title, 0) + len(rows)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for title, count in self._counts.items():
            print(f"  {title}: {count} records")
