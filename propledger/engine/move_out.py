"""Move-out settlement: deposit held against unpaid rent."""

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from propledger.engine.dates import parse_date
from propledger.engine.ledger import generate_ledger, ledger_shortfall
from propledger.exceptions import InvalidInputError
from propledger.models import (
    MoveOutFinancials,
    MoveOutSettlement,
    Payment,
    PaymentMethod,
    PaymentType,
    Tenant,
    TenantStatus,
)
from propledger.models.base import ZERO, to_decimal

logger = logging.getLogger(__name__)

REFUND_NOTE = "Security Deposit Refund (Lease End)"
SETTLEMENT_NOTE = "Final Settlement Payment (Lease End)"
DEDUCTION_NOTE = "Deposit Deduction: {reason}"


def deposits_held(tenant: Tenant, payments: Iterable[Payment]) -> Decimal:
    return sum(
        (
            p.amount
            for p in payments
            if p.tenant_id == tenant.tenant_id and p.payment_type == PaymentType.DEPOSIT
        ),
        ZERO,
    )


def calculate_move_out_financials(
    tenant: Tenant,
    payments: Iterable[Payment],
    today: date | datetime | None = None,
) -> MoveOutFinancials:
    """Project the tenant's deposit position if they moved out now.

    ``net_refundable`` is negative when unpaid rent exceeds the deposit.
    """
    payments = list(payments)
    held = deposits_held(tenant, payments)
    unpaid = ledger_shortfall(generate_ledger(tenant, payments, today))
    return MoveOutFinancials(
        deposit_held=held,
        unpaid_rent=unpaid,
        net_refundable=held - unpaid,
    )


def _payment_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def plan_move_out(
    tenant: Tenant,
    payments: Iterable[Payment],
    termination_date: date,
    deductions: Decimal | int | str = ZERO,
    deduction_reason: str = "Cleaning / Repairs",
    process_refund: bool = True,
    today: date | datetime | None = None,
) -> MoveOutSettlement:
    """Work out the transactions that settle a tenant's move-out.

    Nothing is written; pass the result to ``LedgerStore.commit_move_out``.

    Parameters
    ----------
    tenant : Tenant
        Tenant moving out.
    payments : Iterable[Payment]
        All payments.
    termination_date : date
        Date the lease ends; used for the new transactions and lease end.
    deductions : Decimal
        Amount kept from the deposit for repairs and cleaning.
    deduction_reason : str
        Reason recorded on the deduction transaction.
    process_refund : bool
        Record the refund or settlement transaction.
    today : date | datetime | None
        Reference day for the ledger.

    Returns
    -------
    MoveOutSettlement
        Financial position, transactions to record and the archived tenant.
    """
    termination = parse_date(termination_date)
    if termination is None:
        raise InvalidInputError(f"Invalid termination date: {termination_date!r}")

    deductions = to_decimal(deductions)
    if deductions < 0:
        raise InvalidInputError(f"Deductions cannot be negative: {deductions}")

    financials = calculate_move_out_financials(tenant, payments, today)
    final_refund = financials.net_refundable - deductions

    new_payments: list[Payment] = []
    if process_refund and final_refund > 0:
        new_payments.append(
            Payment(
                payment_id=_payment_id("ref"),
                property_id=tenant.property_id,
                tenant_id=tenant.tenant_id,
                amount=final_refund,
                date=termination,
                payment_type=PaymentType.EXPENSE,
                method=PaymentMethod.CASH,
                note=REFUND_NOTE,
            )
        )
    elif process_refund and final_refund < 0:
        new_payments.append(
            Payment(
                payment_id=_payment_id("set"),
                property_id=tenant.property_id,
                tenant_id=tenant.tenant_id,
                amount=abs(final_refund),
                date=termination,
                payment_type=PaymentType.RENT,
                method=PaymentMethod.CASH,
                note=SETTLEMENT_NOTE,
            )
        )

    if deductions > 0:
        new_payments.append(
            Payment(
                payment_id=_payment_id("ded"),
                property_id=tenant.property_id,
                tenant_id=tenant.tenant_id,
                amount=deductions,
                date=termination,
                payment_type=PaymentType.EXPENSE,
                method=PaymentMethod.OTHER,
                note=DEDUCTION_NOTE.format(reason=deduction_reason),
            )
        )

    logger.debug(
        "Move-out plan for tenant %s: refund %s, %d transactions",
        tenant.tenant_id,
        final_refund,
        len(new_payments),
    )

    return MoveOutSettlement(
        financials=financials,
        deductions=deductions,
        final_refund=final_refund,
        payments=tuple(new_payments),
        tenant=replace(tenant, status=TenantStatus.PAST, lease_end=termination),
    )
