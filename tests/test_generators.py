"""Tests for synthetic portfolio generators."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from propledger.engine.categories import resolve_expense_category
from propledger.engine.ledger import generate_ledger, outstanding_balance
from propledger.generators import PaymentGenerator, PropertyGenerator, RentBehavior, TenantGenerator
from propledger.models import (
    ExpenseCategory,
    InstallmentStatus,
    PaymentType,
    Property,
    PropertyType,
    Tenant,
    TenantStatus,
)


class TestPropertyGenerator:
    """Tests for PropertyGenerator."""

    def test_generate_within_ranges(self, seed: int, today: date) -> None:
        """Test generated properties respect price and date ranges."""
        gen = PropertyGenerator(seed=seed)

        for prop in gen.generate_batch(20, today=today):
            low, high = PropertyGenerator.PRICE_RANGES[prop.property_type]
            assert low <= prop.purchase_price <= high
            assert 0 < prop.down_payment < prop.purchase_price
            assert prop.monthly_amortization > 0
            assert today - timedelta(days=8 * 365) <= prop.purchase_date <= today - timedelta(days=365)
            assert prop.property_id.startswith("prop_")

    def test_fixed_type(self, seed: int, today: date) -> None:
        prop = PropertyGenerator(seed=seed).generate(property_type=PropertyType.PERSONAL, today=today)

        assert prop.is_personal
        assert prop.name.endswith("Vacation Home")

    def test_reproducible(self, seed: int, today: date) -> None:
        """Same seed yields the same property."""
        first = PropertyGenerator(seed=seed).generate(today=today)
        second = PropertyGenerator(seed=seed).generate(today=today)

        assert first == second


class TestTenantGenerator:
    """Tests for TenantGenerator."""

    def test_lease_terms(self, seed: int, rental_property: Property) -> None:
        tenant = TenantGenerator(seed=seed).generate(rental_property, date(2024, 1, 15), lease_months=12)

        assert tenant.property_id == rental_property.property_id
        assert tenant.lease_end == date(2025, 1, 14)
        assert 1 <= tenant.rent_due_day <= 28
        assert tenant.rent_amount > 0
        assert tenant.status == TenantStatus.ACTIVE

    def test_past_status(self, seed: int, rental_property: Property) -> None:
        tenant = TenantGenerator(seed=seed).generate(
            rental_property, date(2022, 1, 1), status=TenantStatus.PAST
        )

        assert tenant.status == TenantStatus.PAST
        assert tenant.lease_end > tenant.lease_start


class TestPaymentGenerator:
    """Tests for PaymentGenerator."""

    @pytest.fixture
    def gen(self, seed: int) -> PaymentGenerator:
        return PaymentGenerator(seed=seed)

    def test_deposit_is_two_months_rent(self, gen: PaymentGenerator, active_tenant: Tenant) -> None:
        payment = gen.deposit(active_tenant, date(2024, 1, 1))

        assert payment.payment_type == PaymentType.DEPOSIT
        assert payment.amount == Decimal("20000")
        assert payment.tenant_id == active_tenant.tenant_id

    def test_rent_and_late_fee(self, gen: PaymentGenerator, active_tenant: Tenant) -> None:
        rent = gen.rent(active_tenant, date(2024, 1, 5))
        partial = gen.rent(active_tenant, date(2024, 2, 5), Decimal("5000"))
        fee = gen.late_fee(active_tenant, date(2024, 2, 20))

        assert rent.amount == Decimal("10000")
        assert partial.amount == Decimal("5000")
        assert fee.payment_type == PaymentType.LATE_FEE
        assert fee.amount == Decimal("500")

    def test_equity_uses_amortization(self, gen: PaymentGenerator, rental_property: Property) -> None:
        payment = gen.equity(rental_property, date(2024, 1, 3))

        assert payment.payment_type == PaymentType.EQUITY
        assert payment.amount == Decimal("15000")
        assert payment.tenant_id is None

    def test_structured_expense(self, gen: PaymentGenerator, rental_property: Property) -> None:
        payment = gen.expense(rental_property, date(2024, 1, 3), category=ExpenseCategory.TAX)

        low, high = PaymentGenerator.EXPENSE_RANGES[ExpenseCategory.TAX]
        assert payment.expense_category == ExpenseCategory.TAX
        assert low <= payment.amount <= high
        assert resolve_expense_category(payment) == "Tax"

    def test_legacy_note_expense(self, gen: PaymentGenerator, rental_property: Property) -> None:
        """Legacy expenses carry the category only in the note."""
        payment = gen.expense(rental_property, date(2024, 1, 3), category=ExpenseCategory.HOA, legacy_note=True)

        assert payment.expense_category is None
        assert payment.note.startswith("HOA: ")
        assert resolve_expense_category(payment) == "HOA"

    def test_ids_are_unique(self, gen: PaymentGenerator, active_tenant: Tenant) -> None:
        ids = {gen.rent(active_tenant, date(2024, 1, 5)).payment_id for _ in range(50)}

        assert len(ids) == 50


class TestRentBehavior:
    """Tests for RentBehavior."""

    def test_good_payer_keeps_ledger_current(self, seed: int, active_tenant: Tenant, today: date) -> None:
        behavior = RentBehavior(seed=seed)

        payments = behavior.rent_history(
            active_tenant, on_time_rate=1.0, late_rate=0.0, delinquent_rate=0.0, reference_date=today
        )

        assert len(payments) == 3
        assert all(p.date <= today for p in payments)
        ledger = generate_ledger(active_tenant, payments, today)
        statuses = [row.status for row in ledger]
        assert statuses == [
            InstallmentStatus.PENDING,
            InstallmentStatus.PAID,
            InstallmentStatus.PAID,
            InstallmentStatus.PAID,
        ]

    def test_delinquent_payer_stops_paying(self, seed: int, active_tenant: Tenant) -> None:
        behavior = RentBehavior(seed=seed)
        reference = date(2025, 1, 10)

        payments = behavior.rent_history(
            active_tenant, on_time_rate=0.0, late_rate=0.0, delinquent_rate=1.0, reference_date=reference
        )

        assert 2 <= len(payments) <= 6
        assert outstanding_balance(generate_ledger(active_tenant, payments, reference)) > 0

    def test_past_tenant_history_ends_at_lease_end(self, seed: int, active_tenant: Tenant) -> None:
        tenant = Tenant(
            tenant_id="ten-009",
            property_id="prop-001",
            name="Former",
            rent_amount=Decimal("8000"),
            rent_due_day=10,
            lease_start=date(2023, 1, 1),
            lease_end=date(2023, 6, 30),
            status=TenantStatus.PAST,
        )

        payments = RentBehavior(seed=seed).rent_history(
            tenant, on_time_rate=1.0, late_rate=0.0, delinquent_rate=0.0, reference_date=date(2024, 6, 1)
        )

        assert len(payments) == 6
        assert max(p.date for p in payments) <= date(2023, 6, 30) + timedelta(days=3)

    def test_shared_payment_generator(self, seed: int, active_tenant: Tenant, today: date) -> None:
        """Histories drawn from one payment generator never reuse ids."""
        payment_gen = PaymentGenerator(seed=seed)
        behavior = RentBehavior(seed=seed, payment_gen=payment_gen)

        first = behavior.rent_history(active_tenant, reference_date=today)
        second = behavior.rent_history(active_tenant, reference_date=today)
        ids = [p.payment_id for p in first + second]

        assert len(ids) == len(set(ids))
