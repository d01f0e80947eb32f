"""Property, tenant and transaction generators."""

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from propledger.engine.dates import add_months, as_today
from propledger.generators.base import BaseGenerator
from propledger.models import (
    ExpenseCategory,
    Payment,
    PaymentMethod,
    PaymentType,
    Property,
    PropertyType,
    Tenant,
    TenantStatus,
)


def _round_to(value: float, step: int) -> Decimal:
    return Decimal(int(round(value / step)) * step)


class PropertyGenerator(BaseGenerator):
    """Generate synthetic properties with acquisition terms."""

    PROPERTY_TYPES = list(PropertyType)
    TYPE_WEIGHTS = [0.55, 0.25, 0.05, 0.15]

    # Purchase price ranges by type (PHP)
    PRICE_RANGES = {
        PropertyType.RESIDENTIAL: (3_000_000, 12_000_000),
        PropertyType.COMMERCIAL: (8_000_000, 30_000_000),
        PropertyType.INDUSTRIAL: (15_000_000, 60_000_000),
        PropertyType.PERSONAL: (5_000_000, 20_000_000),
    }

    def generate(
        self,
        property_type: PropertyType | None = None,
        today: date | None = None,
    ) -> Property:
        """Generate a property.

        Parameters
        ----------
        property_type : PropertyType | None
            Fixed type, or None to draw one.
        today : date | None
            Reference day; purchases fall 1-8 years before it.

        Returns
        -------
        Property
            Generated property.
        """
        today = as_today(today)
        if property_type is None:
            property_type = random.choices(self.PROPERTY_TYPES, weights=self.TYPE_WEIGHTS, k=1)[0]

        low, high = self.PRICE_RANGES[property_type]
        price = _round_to(random.uniform(low, high), 50_000)
        down_payment = _round_to(float(price) * random.uniform(0.10, 0.40), 10_000)
        term_months = random.choice([120, 180, 240])
        amortization = _round_to(float(price - down_payment) / term_months, 500)

        market_value = None
        if random.random() < 0.5:
            market_value = _round_to(float(price) * random.uniform(0.9, 1.4), 50_000)

        kind = {
            PropertyType.RESIDENTIAL: "Residences",
            PropertyType.COMMERCIAL: "Commercial Unit",
            PropertyType.INDUSTRIAL: "Warehouse",
            PropertyType.PERSONAL: "Vacation Home",
        }[property_type]

        return Property(
            property_id=self.new_id("prop"),
            name=f"{self.fake.last_name()} {kind}",
            address=self.fake.address().replace("\n", ", "),
            property_type=property_type,
            purchase_price=price,
            purchase_date=today - timedelta(days=random.randint(365, 8 * 365)),
            down_payment=down_payment,
            monthly_amortization=amortization,
            current_market_value=market_value,
        )

    def generate_batch(self, count: int, today: date | None = None) -> Iterator[Property]:
        """Generate multiple properties.

        Yields
        ------
        Property
            Generated properties.
        """
        for _ in range(count):
            yield self.generate(today=today)


class TenantGenerator(BaseGenerator):
    """Generate tenants for rental properties."""

    # Monthly rent as a share of purchase price
    RENT_YIELD = (0.004, 0.007)

    def generate(
        self,
        prop: Property,
        lease_start: date,
        lease_months: int | None = None,
        status: TenantStatus = TenantStatus.ACTIVE,
    ) -> Tenant:
        """Generate a tenant leasing ``prop`` from ``lease_start``."""
        rent = _round_to(float(prop.purchase_price) * random.uniform(*self.RENT_YIELD), 500)
        if lease_months is None:
            lease_months = random.choice([6, 12, 12, 24, 36])

        if prop.property_type == PropertyType.RESIDENTIAL:
            name = self.fake.name()
        else:
            name = self.fake.company()

        return Tenant(
            tenant_id=self.new_id("ten"),
            property_id=prop.property_id,
            name=name,
            email=self.fake.email(),
            rent_amount=rent,
            rent_due_day=random.randint(1, 28),
            lease_start=lease_start,
            lease_end=add_months(lease_start, lease_months) - timedelta(days=1),
            status=status,
        )


class PaymentGenerator(BaseGenerator):
    """Generate deposits, amortization and expense transactions."""

    EXPENSE_CATEGORIES = [c for c in ExpenseCategory if c != ExpenseCategory.MORTGAGE]
    EXPENSE_RANGES = {
        ExpenseCategory.MAINTENANCE: (1_500, 40_000),
        ExpenseCategory.TAX: (10_000, 90_000),
        ExpenseCategory.INSURANCE: (5_000, 30_000),
        ExpenseCategory.UTILITIES: (1_000, 8_000),
        ExpenseCategory.HOA: (2_000, 12_000),
        ExpenseCategory.MARKETING: (500, 5_000),
        ExpenseCategory.LEGAL: (5_000, 50_000),
        ExpenseCategory.OTHER: (500, 10_000),
    }
    METHODS = list(PaymentMethod)

    def deposit(self, tenant: Tenant, when: date, months: int = 2) -> Payment:
        """Security deposit of ``months`` months of rent."""
        return Payment(
            payment_id=self.new_id("dep"),
            property_id=tenant.property_id,
            tenant_id=tenant.tenant_id,
            amount=tenant.rent_amount * months,
            date=when,
            payment_type=PaymentType.DEPOSIT,
            method=random.choice(self.METHODS),
            note="Security deposit",
        )

    def rent(self, tenant: Tenant, when: date, amount: Decimal | None = None) -> Payment:
        return Payment(
            payment_id=self.new_id("pay"),
            property_id=tenant.property_id,
            tenant_id=tenant.tenant_id,
            amount=tenant.rent_amount if amount is None else amount,
            date=when,
            payment_type=PaymentType.RENT,
            method=random.choice(self.METHODS),
        )

    def late_fee(self, tenant: Tenant, when: date, rate: float = 0.05) -> Payment:
        return Payment(
            payment_id=self.new_id("fee"),
            property_id=tenant.property_id,
            tenant_id=tenant.tenant_id,
            amount=_round_to(float(tenant.rent_amount) * rate, 100),
            date=when,
            payment_type=PaymentType.LATE_FEE,
            method=random.choice(self.METHODS),
        )

    def equity(self, prop: Property, when: date) -> Payment:
        """Monthly amortization paid towards the purchase price."""
        return Payment(
            payment_id=self.new_id("eq"),
            property_id=prop.property_id,
            amount=prop.monthly_amortization,
            date=when,
            payment_type=PaymentType.EQUITY,
            method=PaymentMethod.BANK_TRANSFER,
            note="Monthly Amortization",
        )

    def expense(
        self,
        prop: Property,
        when: date,
        category: ExpenseCategory | None = None,
        legacy_note: bool = False,
    ) -> Payment:
        """Property expense.

        With ``legacy_note`` the category is only written as a
        ``"Category: note"`` prefix, like records from older versions.
        """
        if category is None:
            category = random.choice(self.EXPENSE_CATEGORIES)
        low, high = self.EXPENSE_RANGES[category]
        detail = self.fake.sentence(nb_words=3).rstrip(".")

        return Payment(
            payment_id=self.new_id("exp"),
            property_id=prop.property_id,
            amount=_round_to(random.uniform(low, high), 50),
            date=when,
            payment_type=PaymentType.EXPENSE,
            method=random.choice(self.METHODS),
            note=f"{category.value}: {detail}" if legacy_note else detail,
            expense_category=None if legacy_note else category,
        )
