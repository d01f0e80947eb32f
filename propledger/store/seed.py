"""Demo portfolio written on first run."""

from datetime import date
from decimal import Decimal

from propledger.models import (
    LedgerState,
    Payment,
    PaymentMethod,
    PaymentType,
    Property,
    PropertyType,
    Tenant,
)


def seed_state() -> LedgerState:
    """Return a small portfolio: two rentals, one vacation home, two tenants."""
    properties = [
        Property(
            property_id="prop_1",
            name="Sunset Heights Apt 4B",
            address="123 Sunset Blvd, Makati City",
            property_type=PropertyType.RESIDENTIAL,
            purchase_price=Decimal("8500000"),
            purchase_date=date(2021, 6, 15),
            down_payment=Decimal("1700000"),
            monthly_amortization=Decimal("45000"),
        ),
        Property(
            property_id="prop_2",
            name="Downtown Commercial Unit",
            address="45 Corporate Drive, BGC",
            property_type=PropertyType.COMMERCIAL,
            purchase_price=Decimal("15000000"),
            purchase_date=date(2020, 1, 20),
            down_payment=Decimal("5000000"),
            monthly_amortization=Decimal("85000"),
        ),
        Property(
            property_id="prop_3",
            name="Tagaytay Vacation Home",
            address="Highlands Dr, Tagaytay",
            property_type=PropertyType.PERSONAL,
            purchase_price=Decimal("12000000"),
            purchase_date=date(2019, 11, 10),
            down_payment=Decimal("4000000"),
            monthly_amortization=Decimal("35000"),
            current_market_value=Decimal("14500000"),
        ),
    ]

    tenants = [
        Tenant(
            tenant_id="ten_1",
            property_id="prop_1",
            name="Juan Dela Cruz",
            email="juan@example.com",
            rent_amount=Decimal("25000"),
            rent_due_day=5,
            lease_start=date(2023, 1, 1),
        ),
        Tenant(
            tenant_id="ten_2",
            property_id="prop_2",
            name="TechStart Inc.",
            email="billing@techstart.ph",
            rent_amount=Decimal("85000"),
            rent_due_day=15,
            lease_start=date(2023, 3, 1),
        ),
    ]

    payments = [
        Payment(
            payment_id="pay_1",
            property_id="prop_1",
            tenant_id="ten_1",
            amount=Decimal("25000"),
            date=date(2023, 1, 5),
            payment_type=PaymentType.RENT,
            method=PaymentMethod.GCASH,
        ),
        Payment(
            payment_id="pay_2",
            property_id="prop_1",
            tenant_id="ten_1",
            amount=Decimal("25000"),
            date=date(2023, 2, 5),
            payment_type=PaymentType.RENT,
            method=PaymentMethod.BANK_TRANSFER,
        ),
        Payment(
            payment_id="pay_3",
            property_id="prop_2",
            tenant_id="ten_2",
            amount=Decimal("85000"),
            date=date(2023, 3, 15),
            payment_type=PaymentType.RENT,
            method=PaymentMethod.CHEQUE,
        ),
        Payment(
            payment_id="pay_4",
            property_id="prop_3",
            amount=Decimal("5000"),
            date=date(2023, 4, 1),
            payment_type=PaymentType.EXPENSE,
            method=PaymentMethod.CASH,
            note="Maintenance: Garden",
        ),
    ]

    return LedgerState.of(properties, tenants, payments)
