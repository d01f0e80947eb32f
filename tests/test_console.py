"""Tests for console output helpers."""

from decimal import Decimal

import pytest

from propledger.models import ChartPoint
from propledger.sinks.console import ConsoleSink, format_currency


class TestFormatCurrency:
    """Tests for currency formatting."""

    @pytest.mark.parametrize(
        ("amount", "currency", "expected"),
        [
            (Decimal("25000"), "PHP", "₱25,000"),
            (Decimal("-1200"), "PHP", "-₱1,200"),
            (Decimal("999.6"), "PHP", "₱1,000"),
            (0, "USD", "$0"),
            (1234567, "JPY", "JPY 1,234,567"),
        ],
    )
    def test_format(self, amount, currency: str, expected: str) -> None:
        assert format_currency(amount, currency) == expected


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_write_batch_and_close(self, capsys) -> None:
        """Test batches are printed and counted."""
        sink = ConsoleSink(pretty=False, max_records=1)
        points = [
            ChartPoint(name="2024-01", income=Decimal("100"), expense=Decimal("0")),
            ChartPoint(name="2024-02", income=Decimal("200"), expense=Decimal("50")),
        ]

        sink.write_batch("Chart", points)
        sink.close()

        out = capsys.readouterr().out
        assert "Chart (2 records)" in out
        assert '"name": "2024-01"' in out
        assert '"income": "100"' in out
        assert "2024-02" not in out
        assert "... and 1 more records" in out
        assert "Chart: 2 records" in out

    def test_write_table(self, capsys) -> None:
        sink = ConsoleSink()

        sink.write_table("Ledger", ["Month", "Status"], [["2024-01", "paid"], ["2024-02", "overdue"]])

        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "Ledger"
        assert lines[1] == "Month    Status"
        assert lines[2] == "-------  -------"
        assert lines[4] == "2024-02  overdue"
