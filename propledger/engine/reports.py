"""Portfolio and period aggregations over the payment history."""

import logging
from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from propledger.engine.categories import resolve_expense_category
from propledger.engine.dates import add_months, as_today, first_of_month, month_key, parse_date
from propledger.engine.ledger import generate_ledger, outstanding_balance
from propledger.models import (
    ChartPoint,
    DashboardMetrics,
    FinancialSummary,
    IncomeStatement,
    LeaseExpiration,
    LeaseState,
    LeaseStatus,
    Payment,
    PaymentType,
    PeriodSummary,
    Property,
    Tenant,
    TenantStatus,
)
from propledger.models.base import ZERO

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


def calculate_dashboard_metrics(
    properties: Iterable[Property],
    tenants: Iterable[Tenant],
    payments: Iterable[Payment],
    today: date | datetime | None = None,
) -> DashboardMetrics:
    """Headline portfolio figures.

    Outstanding rent only counts active tenants' overdue and partial
    installments. Occupancy is active tenants per rental (non-personal)
    property.
    """
    payments = list(payments)
    tenants = list(tenants)

    total_revenue = sum((p.amount for p in payments if p.is_revenue), ZERO)
    total_expenses = sum((p.amount for p in payments if p.is_expense), ZERO)

    active = [t for t in tenants if t.status == TenantStatus.ACTIVE]
    outstanding = sum(
        (outstanding_balance(generate_ledger(t, payments, today)) for t in active),
        ZERO,
    )

    rental_count = sum(1 for p in properties if not p.is_personal)
    occupancy = Decimal(len(active)) / rental_count * HUNDRED if rental_count > 0 else ZERO

    return DashboardMetrics(
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_income=total_revenue - total_expenses,
        outstanding_rent=outstanding,
        occupancy_rate=occupancy,
    )


def _payment_month_key(payment: Payment) -> str | None:
    if payment.month_key:
        return payment.month_key
    d = parse_date(payment.date)
    return month_key(d) if d is not None else None


def generate_chart_series(
    payments: Iterable[Payment],
    today: date | datetime | None = None,
    months: int = 6,
) -> list[ChartPoint]:
    """Monthly income and expense totals for the trailing ``months`` months.

    Income is every payment that is not an expense, equity included.
    """
    current = first_of_month(as_today(today))
    keys = [month_key(add_months(current, -offset)) for offset in range(months - 1, -1, -1)]

    income: dict[str, Decimal] = defaultdict(lambda: ZERO)
    expense: dict[str, Decimal] = defaultdict(lambda: ZERO)
    wanted = set(keys)
    for p in payments:
        key = _payment_month_key(p)
        if key not in wanted:
            continue
        if p.is_expense:
            expense[key] += p.amount
        else:
            income[key] += p.amount

    return [ChartPoint(name=key, income=income[key], expense=expense[key]) for key in keys]


def generate_income_statement(payments: Iterable[Payment], year: int) -> IncomeStatement:
    """Profit and loss for one calendar year.

    Late fees are reported as "other" revenue. Expenses are grouped by
    ``resolve_expense_category``; equity payments are not part of P&L.
    """
    statement = IncomeStatement(year=year)
    revenue = statement.revenue

    for p in payments:
        d = parse_date(p.date)
        if d is None or d.year != year:
            continue

        if p.payment_type == PaymentType.RENT:
            revenue.rent += p.amount
            revenue.total += p.amount
        elif p.payment_type == PaymentType.DEPOSIT:
            revenue.deposit += p.amount
            revenue.total += p.amount
        elif p.payment_type == PaymentType.LATE_FEE:
            revenue.other += p.amount
            revenue.total += p.amount
        elif p.payment_type == PaymentType.EXPENSE:
            category = resolve_expense_category(p)
            statement.expenses[category] = statement.expenses.get(category, ZERO) + p.amount
            statement.total_expenses += p.amount

    statement.net_income = revenue.total - statement.total_expenses
    return statement


def generate_financial_summary(payments: Iterable[Payment]) -> FinancialSummary:
    """Income, expense and net per month and per year, newest period first.

    Payments without a usable date are skipped.
    """
    monthly: dict[str, list[Decimal]] = {}
    yearly: dict[str, list[Decimal]] = {}
    skipped = 0

    for p in payments:
        d = parse_date(p.date)
        if d is None:
            skipped += 1
            continue

        buckets = (
            monthly.setdefault(f"{d.year:04d}-{d.month:02d}", [ZERO, ZERO]),
            yearly.setdefault(f"{d.year:04d}", [ZERO, ZERO]),
        )
        for bucket in buckets:
            if p.is_expense:
                bucket[1] += p.amount
            elif p.is_revenue:
                bucket[0] += p.amount

    if skipped:
        logger.debug("Financial summary skipped %d payments without a usable date", skipped)

    return FinancialSummary(monthly=_period_rows(monthly), yearly=_period_rows(yearly))


def _period_rows(buckets: dict[str, list[Decimal]]) -> tuple[PeriodSummary, ...]:
    return tuple(
        PeriodSummary(period=period, income=income, expense=expense, net=income - expense)
        for period, (income, expense) in sorted(buckets.items(), reverse=True)
    )


def _days_until(end: date, today: date) -> int:
    return (end - today).days


def upcoming_expirations(
    tenants: Iterable[Tenant],
    today: date | datetime | None = None,
    window_days: int = 60,
) -> list[LeaseExpiration]:
    """Active leases ending within ``window_days`` days, soonest first."""
    today = as_today(today)
    watchlist = []
    for tenant in tenants:
        if tenant.status != TenantStatus.ACTIVE:
            continue
        end = parse_date(tenant.lease_end)
        if end is None:
            continue
        days_left = _days_until(end, today)
        if 0 <= days_left <= window_days:
            watchlist.append(LeaseExpiration(tenant=tenant, days_left=days_left))

    watchlist.sort(key=lambda item: item.days_left)
    return watchlist


def lease_status(
    tenant: Tenant,
    today: date | datetime | None = None,
    warning_days: int = 30,
) -> LeaseStatus | None:
    """Badge for the tenant list: moved out, expired, or expiring soon."""
    if tenant.status == TenantStatus.PAST:
        return LeaseStatus(state=LeaseState.MOVED_OUT)

    end = parse_date(tenant.lease_end)
    if end is None:
        return None

    days_left = _days_until(end, as_today(today))
    if days_left < 0:
        return LeaseStatus(state=LeaseState.EXPIRED, days=abs(days_left))
    if days_left <= warning_days:
        return LeaseStatus(state=LeaseState.EXPIRING, days=days_left)
    return None
