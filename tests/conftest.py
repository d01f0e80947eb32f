"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from propledger.models import (
    Payment,
    PaymentType,
    Property,
    PropertyType,
    Tenant,
    TenantStatus,
)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed reference day injected into every engine call."""
    return date(2024, 3, 10)


@pytest.fixture
def rental_property() -> Property:
    """Residential rental bought for 1,000,000 with 200,000 down."""
    return Property(
        property_id="prop-001",
        name="Sunset Heights Apt 4B",
        property_type=PropertyType.RESIDENTIAL,
        purchase_price=Decimal("1000000"),
        purchase_date=date(2023, 3, 1),
        down_payment=Decimal("200000"),
        monthly_amortization=Decimal("15000"),
    )


@pytest.fixture
def personal_property() -> Property:
    """Vacation home that has appreciated."""
    return Property(
        property_id="prop-002",
        name="Tagaytay Vacation Home",
        property_type=PropertyType.PERSONAL,
        purchase_price=Decimal("12000000"),
        purchase_date=date(2019, 11, 10),
        down_payment=Decimal("4000000"),
        current_market_value=Decimal("14500000"),
    )


@pytest.fixture
def active_tenant() -> Tenant:
    """Active tenant paying 10,000 on the 5th since January 2024."""
    return Tenant(
        tenant_id="ten-001",
        property_id="prop-001",
        name="Juan Dela Cruz",
        rent_amount=Decimal("10000"),
        rent_due_day=5,
        lease_start=date(2024, 1, 1),
        status=TenantStatus.ACTIVE,
    )


def make_payment(
    payment_id: str,
    amount: str | int,
    when: date | None,
    payment_type: PaymentType,
    property_id: str = "prop-001",
    tenant_id: str | None = None,
    **kwargs,
) -> Payment:
    """Build a payment with sensible defaults for tests."""
    return Payment(
        payment_id=payment_id,
        property_id=property_id,
        amount=Decimal(str(amount)),
        date=when,
        payment_type=payment_type,
        tenant_id=tenant_id,
        **kwargs,
    )
