#!/usr/bin/env python3
"""Generate a synthetic rental portfolio and print its reports.

The snapshot is written as JSON so it can be loaded back with
``JsonSnapshotStorage``; the monthly summary is exported as CSV.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from propledger.config import PropLedgerConfig
from propledger.engine import (
    calculate_dashboard_metrics,
    calculate_property_financials,
    generate_financial_summary,
    generate_income_statement,
    upcoming_expirations,
)
from propledger.logging import setup_logging
from propledger.scenarios import RentalPortfolioScenario
from propledger.sinks import ConsoleSink, JsonSnapshotStorage, export_summary_csv, format_currency

logger = logging.getLogger(__name__)


def print_reports(scenario: RentalPortfolioScenario, config: PropLedgerConfig) -> None:
    """Print dashboard, property and P&L reports for the generated store."""
    state = scenario.store.snapshot()
    today = scenario.today
    currency = config.reports.currency
    sink = ConsoleSink()

    metrics = calculate_dashboard_metrics(state.properties, state.tenants, state.payments, today)
    sink.write_table(
        "Dashboard",
        ["Metric", "Value"],
        [
            ["Total revenue", format_currency(metrics.total_revenue, currency)],
            ["Total expenses", format_currency(metrics.total_expenses, currency)],
            ["Net income", format_currency(metrics.net_income, currency)],
            ["Outstanding rent", format_currency(metrics.outstanding_rent, currency)],
            ["Occupancy", f"{metrics.occupancy_rate:.1f}%"],
        ],
    )

    rows = []
    for prop in state.properties:
        stats = calculate_property_financials(prop, state.payments, today)
        rows.append([
            prop.name,
            prop.property_type.value,
            f"{stats.percent_paid:.1f}%",
            format_currency(stats.remaining_balance, currency),
            f"{stats.roi:.2f}%",
            f"{stats.cap_rate:.2f}%",
        ])
    sink.write_table("Properties", ["Name", "Type", "Paid", "Balance", "ROI", "Cap rate"], rows)

    statement = generate_income_statement(state.payments, today.year)
    sink.write_table(
        f"Income statement {today.year}",
        ["Line", "Amount"],
        [["Rent", format_currency(statement.revenue.rent, currency)],
         ["Deposits", format_currency(statement.revenue.deposit, currency)],
         ["Other", format_currency(statement.revenue.other, currency)]]
        + [[name, format_currency(-amount, currency)] for name, amount in sorted(statement.expenses.items())]
        + [["Net income", format_currency(statement.net_income, currency)]],
    )

    expiring = upcoming_expirations(
        state.tenants, today, window_days=config.reports.expiration_window_days
    )
    sink.write_table(
        "Upcoming expirations",
        ["Tenant", "Lease end", "Days left"],
        [[e.tenant.name, e.tenant.lease_end, e.days_left] for e in expiring],
    )
    sink.close()


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a sample rental portfolio")
    parser.add_argument("--properties", type=int, default=5, help="Number of properties (default: 5)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date as YYYY-MM-DD (default: system date)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=project_root / "local",
        help="Directory for the snapshot and summary CSV",
    )
    args = parser.parse_args()

    config = PropLedgerConfig.from_env()
    setup_logging(config.log_level)

    scenario = RentalPortfolioScenario(
        num_properties=args.properties,
        seed=args.seed,
        today=args.today,
    )
    scenario.generate()

    output_dir = args.output_dir
    storage = JsonSnapshotStorage(output_dir / "portfolio.json", pretty=True, seed_on_empty=False)
    storage.save(scenario.store.snapshot())

    summary = generate_financial_summary(scenario.store.payments)
    export_summary_csv(summary.monthly, output_dir / "financial_summary.csv")
    logger.info("Wrote snapshot and summary to %s", output_dir)

    print_reports(scenario, config)


if __name__ == "__main__":
    main()
