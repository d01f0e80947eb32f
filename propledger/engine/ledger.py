"""Rent obligation ledger with FIFO payment allocation.

The ledger is the single source of truth for what a tenant owes. Every
month of the lease produces one installment; the tenant's rent payments
are pooled and applied oldest installment first, regardless of which
month a payment was made in.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from propledger.engine.dates import add_months, as_today, clamp_day, first_of_month, iter_months, parse_date
from propledger.exceptions import InvalidInputError
from propledger.models import (
    InstallmentStatus,
    Payment,
    PaymentType,
    RentInstallment,
    Tenant,
    TenantStatus,
)
from propledger.models.base import ZERO

logger = logging.getLogger(__name__)


def ledger_horizon(tenant: Tenant, today: date | datetime | None = None) -> tuple[date, date]:
    """Return the first and last month (as first-of-month dates) of the ledger.

    Past tenants with a lease end run to the month after the end month;
    everyone else runs to the month after ``today``.

    Raises
    ------
    InvalidInputError
        If the tenant has no usable lease start.
    """
    lease_start = parse_date(tenant.lease_start)
    if lease_start is None:
        raise InvalidInputError(
            f"Tenant {tenant.tenant_id} has no usable lease start: {tenant.lease_start!r}"
        )

    lease_end = parse_date(tenant.lease_end)
    if tenant.status == TenantStatus.PAST and lease_end is not None:
        end = add_months(first_of_month(lease_end), 1)
    else:
        end = add_months(first_of_month(as_today(today)), 1)

    return first_of_month(lease_start), end


def _validate_tenant(tenant: Tenant) -> None:
    if not isinstance(tenant.rent_due_day, int) or not 1 <= tenant.rent_due_day <= 31:
        raise InvalidInputError(
            f"Tenant {tenant.tenant_id} rent due day must be 1-31, got {tenant.rent_due_day!r}"
        )
    if tenant.rent_amount < 0:
        raise InvalidInputError(
            f"Tenant {tenant.tenant_id} rent amount cannot be negative: {tenant.rent_amount}"
        )


def tenant_rent_payments(tenant: Tenant, payments: Iterable[Payment]) -> list[Payment]:
    """Rent payments made by ``tenant``, oldest first."""
    rent = [
        p for p in payments
        if p.tenant_id == tenant.tenant_id and p.payment_type == PaymentType.RENT
    ]
    return sorted(rent, key=lambda p: parse_date(p.date) or date.min)


def generate_ledger(
    tenant: Tenant,
    payments: Iterable[Payment],
    today: date | datetime | None = None,
) -> list[RentInstallment]:
    """Build the tenant's rent ledger, newest month first.

    Parameters
    ----------
    tenant : Tenant
        Lease terms to project.
    payments : Iterable[Payment]
        All payments; only the tenant's ``Rent`` payments are applied.
    today : date | datetime | None
        Reference day for the horizon and overdue checks.

    Returns
    -------
    list[RentInstallment]
        One installment per lease month, newest first. Reverse it for
        chronological order.
    """
    _validate_tenant(tenant)
    today = as_today(today)
    start, end = ledger_horizon(tenant, today)

    installments = [
        RentInstallment(
            month_key=f"{month.year:04d}-{month.month:02d}",
            due_date=clamp_day(month.year, month.month, tenant.rent_due_day),
            amount_due=tenant.rent_amount,
            amount_paid=ZERO,
            status=InstallmentStatus.PENDING,
            tenant_name=tenant.name,
            property_id=tenant.property_id,
        )
        for month in iter_months(start, end)
    ]

    pool = sum((p.amount for p in tenant_rent_payments(tenant, payments)), ZERO)
    for installment in installments:
        if pool <= 0:
            break
        applied = min(installment.amount_due, pool)
        installment.amount_paid += applied
        pool -= applied

    is_past = tenant.status == TenantStatus.PAST
    for installment in installments:
        installment.status = _installment_status(installment, today, is_past)

    logger.debug(
        "Ledger for tenant %s: %d installments, %s unapplied",
        tenant.tenant_id,
        len(installments),
        pool,
    )

    installments.reverse()
    return installments


def _installment_status(installment: RentInstallment, today: date, is_past: bool) -> InstallmentStatus:
    if installment.amount_paid >= installment.amount_due:
        return InstallmentStatus.PAID
    if installment.amount_paid > 0:
        return InstallmentStatus.PARTIAL
    if installment.due_date <= today or is_past:
        return InstallmentStatus.OVERDUE
    return InstallmentStatus.PENDING


def chronological(ledger: list[RentInstallment]) -> list[RentInstallment]:
    """Return a newest-first ledger in oldest-first order."""
    return list(reversed(ledger))


def ledger_shortfall(ledger: Iterable[RentInstallment]) -> Decimal:
    """Total rent still owed across every installment."""
    return sum((row.shortfall for row in ledger), ZERO)


def outstanding_balance(ledger: Iterable[RentInstallment]) -> Decimal:
    """Rent owed on installments that are already overdue or partially paid."""
    return sum(
        (
            row.shortfall
            for row in ledger
            if row.status in (InstallmentStatus.OVERDUE, InstallmentStatus.PARTIAL)
        ),
        ZERO,
    )
