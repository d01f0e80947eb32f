"""Financial derivation engine: pure functions over properties, tenants and payments."""

from propledger.engine.categories import normalize_expense_category, resolve_expense_category
from propledger.engine.dates import month_key, parse_date
from propledger.engine.ledger import chronological, generate_ledger, ledger_shortfall, outstanding_balance
from propledger.engine.move_out import calculate_move_out_financials, plan_move_out
from propledger.engine.property import calculate_portfolio_financing, calculate_property_financials
from propledger.engine.reports import (
    calculate_dashboard_metrics,
    generate_chart_series,
    generate_financial_summary,
    generate_income_statement,
    lease_status,
    upcoming_expirations,
)

__all__ = [
    "calculate_dashboard_metrics",
    "calculate_move_out_financials",
    "calculate_portfolio_financing",
    "calculate_property_financials",
    "chronological",
    "generate_chart_series",
    "generate_financial_summary",
    "generate_income_statement",
    "generate_ledger",
    "lease_status",
    "ledger_shortfall",
    "month_key",
    "normalize_expense_category",
    "outstanding_balance",
    "parse_date",
    "plan_move_out",
    "resolve_expense_category",
    "upcoming_expirations",
]
