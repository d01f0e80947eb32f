"""Per-property equity, valuation and return analytics."""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from propledger.engine.dates import as_today, months_between, parse_date
from propledger.exceptions import InvalidInputError
from propledger.models import (
    Payment,
    PaymentType,
    PortfolioFinancing,
    Property,
    PropertyFinancials,
)
from propledger.models.base import ZERO

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


def current_value(prop: Property) -> Decimal:
    """Market value when recorded and nonzero, else the purchase price."""
    if prop.current_market_value:
        return prop.current_market_value
    return prop.purchase_price


def _sum_types(payments: Iterable[Payment], *types: PaymentType) -> Decimal:
    return sum((p.amount for p in payments if p.payment_type in types), ZERO)


def calculate_property_financials(
    prop: Property,
    payments: Iterable[Payment],
    today: date | datetime | None = None,
) -> PropertyFinancials:
    """Compute the financial snapshot of one property.

    Personal-use properties get an appreciation ROI and no cap rate. Rental
    properties get cash-on-cash ROI and a cap rate annualised over the
    months owned (at least one).

    Raises
    ------
    InvalidInputError
        If the purchase price is negative.
    """
    price = prop.purchase_price
    if price < 0:
        raise InvalidInputError(f"Property {prop.property_id} has a negative purchase price: {price}")

    prop_payments = [p for p in payments if p.property_id == prop.property_id]

    total_equity_paid = (prop.down_payment or ZERO) + _sum_types(prop_payments, PaymentType.EQUITY)
    remaining_balance = max(ZERO, price - total_equity_paid)
    raw_percent = total_equity_paid / price * HUNDRED if price > 0 else ZERO
    percent_paid = min(HUNDRED, raw_percent)

    value = current_value(prop)
    valuation_delta = value - price

    total_revenue = _sum_types(
        prop_payments, PaymentType.RENT, PaymentType.DEPOSIT, PaymentType.LATE_FEE
    )
    total_expenses = _sum_types(prop_payments, PaymentType.EXPENSE)
    net_income = total_revenue - total_expenses

    cap_rate = ZERO
    if prop.is_personal:
        roi = (value - price) / price * HUNDRED if price > 0 else ZERO
    else:
        roi = net_income / total_equity_paid * HUNDRED if total_equity_paid > 0 else ZERO
        months_owned = max(1, _months_owned(prop, today))
        annualized_noi = net_income / months_owned * 12
        cap_rate = annualized_noi / price * HUNDRED if price > 0 else ZERO

    return PropertyFinancials(
        property_id=prop.property_id,
        is_personal=prop.is_personal,
        total_equity_paid=total_equity_paid,
        remaining_balance=remaining_balance,
        percent_paid=percent_paid,
        is_fully_paid=percent_paid >= HUNDRED,
        current_value=value,
        valuation_delta=valuation_delta,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_income=net_income,
        roi=roi,
        cap_rate=cap_rate,
    )


def _months_owned(prop: Property, today: date | datetime | None) -> int:
    purchased = parse_date(prop.purchase_date)
    if purchased is None:
        # No usable purchase date: annualise over a single month
        return 1
    return months_between(purchased, as_today(today))


def calculate_portfolio_financing(
    properties: Iterable[Property],
    payments: Iterable[Payment],
    today: date | datetime | None = None,
) -> PortfolioFinancing:
    """Roll property snapshots up into total assets, equity and debt."""
    payments = list(payments)
    details = tuple(calculate_property_financials(p, payments, today) for p in properties)

    total_assets = sum((d.current_value for d in details), ZERO)
    total_equity = sum((d.total_equity_paid for d in details), ZERO)
    total_debt = sum((d.remaining_balance for d in details), ZERO)
    equity_ratio = total_equity / total_assets * HUNDRED if total_assets > 0 else ZERO

    logger.debug("Portfolio financing over %d properties", len(details))

    return PortfolioFinancing(
        total_assets=total_assets,
        total_equity=total_equity,
        total_debt=total_debt,
        equity_ratio=equity_ratio,
        details=details,
    )
