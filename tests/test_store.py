"""Tests for LedgerStore mutations and referential integrity."""

import json
import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from propledger.engine.move_out import plan_move_out
from propledger.exceptions import EntityNotFoundError, InvalidInputError, ReferentialIntegrityError
from propledger.logging import JsonFormatter
from propledger.models import LedgerState, PaymentType, Property, Tenant, TenantStatus
from propledger.store import LedgerStore
from propledger.store.seed import seed_state

from conftest import make_payment


class RecordingStorage:
    """Storage double that keeps every saved snapshot."""

    def __init__(self) -> None:
        self.saved: list[LedgerState] = []

    def save(self, state: LedgerState) -> None:
        self.saved.append(state)


@pytest.fixture
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture
def store(storage: RecordingStorage, rental_property: Property, active_tenant: Tenant) -> LedgerStore:
    """Store holding one property and one tenant, save history cleared."""
    s = LedgerStore(storage=storage)
    s.add_property(rental_property)
    s.add_tenant(active_tenant)
    storage.saved.clear()
    return s


class TestProperties:
    """Tests for property CRUD."""

    def test_add_persists_snapshot(self, storage: RecordingStorage, rental_property: Property) -> None:
        """Each mutation saves the whole state."""
        store = LedgerStore(storage=storage)

        store.add_property(rental_property)

        assert len(storage.saved) == 1
        assert storage.saved[0].properties == (rental_property,)

    def test_update_replaces_record(self, store: LedgerStore, rental_property: Property) -> None:
        """Test updating an existing property."""
        store.update_property(replace(rental_property, name="Renamed"))

        assert store.properties["prop-001"].name == "Renamed"

    def test_update_unknown_raises(self, store: LedgerStore, personal_property: Property) -> None:
        with pytest.raises(EntityNotFoundError):
            store.update_property(personal_property)

    def test_negative_price_rejected(self, store: LedgerStore, personal_property: Property) -> None:
        with pytest.raises(InvalidInputError):
            store.add_property(replace(personal_property, purchase_price=Decimal("-5")))

    def test_delete_leaves_dependents(self, store: LedgerStore) -> None:
        """Deleting a property keeps its tenants and payments."""
        store.add_payment(make_payment("p1", 100, date(2024, 1, 5), PaymentType.RENT, tenant_id="ten-001"))

        store.delete_property("prop-001")

        assert "prop-001" not in store.properties
        assert "ten-001" in store.tenants
        assert len(store.payments) == 1

    def test_delete_unknown_raises(self, store: LedgerStore) -> None:
        with pytest.raises(EntityNotFoundError):
            store.delete_property("missing")


class TestTenants:
    """Tests for tenant CRUD and validation."""

    def test_unknown_property_rejected(self, store: LedgerStore, active_tenant: Tenant) -> None:
        """Test referential integrity on tenant creation."""
        with pytest.raises(ReferentialIntegrityError, match="prop-xxx"):
            store.add_tenant(replace(active_tenant, tenant_id="t2", property_id="prop-xxx"))

    def test_missing_lease_start_rejected(self, store: LedgerStore, active_tenant: Tenant) -> None:
        with pytest.raises(InvalidInputError, match="lease start"):
            store.add_tenant(replace(active_tenant, tenant_id="t2", lease_start=None))

    @pytest.mark.parametrize("due_day", [0, 29, 31])
    def test_due_day_range(self, store: LedgerStore, active_tenant: Tenant, due_day: int) -> None:
        with pytest.raises(InvalidInputError, match="1-28"):
            store.add_tenant(replace(active_tenant, tenant_id="t2", rent_due_day=due_day))

    def test_update_and_delete(self, store: LedgerStore, active_tenant: Tenant) -> None:
        """Test tenant update then delete."""
        store.update_tenant(replace(active_tenant, rent_amount=Decimal("12000")))
        assert store.tenants["ten-001"].rent_amount == Decimal("12000")

        store.delete_tenant("ten-001")
        assert store.tenants == {}

        with pytest.raises(EntityNotFoundError):
            store.delete_tenant("ten-001")

    def test_update_unknown_raises(self, store: LedgerStore, active_tenant: Tenant) -> None:
        with pytest.raises(EntityNotFoundError):
            store.update_tenant(replace(active_tenant, tenant_id="ghost"))


class TestPayments:
    """Tests for payment CRUD."""

    def test_month_key_follows_date(self, store: LedgerStore) -> None:
        """A stale month key is replaced from the payment date."""
        payment = make_payment(
            "p1", 100, date(2024, 2, 29), PaymentType.RENT, tenant_id="ten-001", month_key="1999-01"
        )

        store.add_payment(payment)

        assert store.payments[0].month_key == "2024-02"

    def test_unknown_tenant_rejected(self, store: LedgerStore) -> None:
        with pytest.raises(ReferentialIntegrityError, match="ghost"):
            store.add_payment(make_payment("p1", 100, date(2024, 1, 1), PaymentType.RENT, tenant_id="ghost"))

    def test_unknown_property_rejected(self, store: LedgerStore) -> None:
        with pytest.raises(ReferentialIntegrityError):
            store.add_payment(make_payment("p1", 100, date(2024, 1, 1), PaymentType.EXPENSE, property_id="nope"))

    def test_negative_amount_rejected(self, store: LedgerStore) -> None:
        with pytest.raises(InvalidInputError):
            store.add_payment(make_payment("p1", -1, date(2024, 1, 1), PaymentType.EXPENSE))

    def test_undated_payment_rejected(self, store: LedgerStore) -> None:
        with pytest.raises(InvalidInputError):
            store.add_payment(make_payment("p1", 100, None, PaymentType.EXPENSE))

    def test_bulk_add_single_save(self, store: LedgerStore, storage: RecordingStorage) -> None:
        """Bulk add saves once and returns the count."""
        payments = [
            make_payment(f"p{i}", 100, date(2024, 1, i), PaymentType.EXPENSE) for i in range(1, 6)
        ]

        count = store.bulk_add_payments(payments)

        assert count == 5
        assert len(storage.saved) == 1
        assert len(store.payments) == 5

    def test_bulk_add_is_all_or_nothing(self, store: LedgerStore, storage: RecordingStorage) -> None:
        payments = [
            make_payment("ok", 100, date(2024, 1, 1), PaymentType.EXPENSE),
            make_payment("bad", 100, date(2024, 1, 1), PaymentType.EXPENSE, property_id="nope"),
        ]

        with pytest.raises(ReferentialIntegrityError):
            store.bulk_add_payments(payments)

        assert store.payments == []
        assert storage.saved == []

    def test_update_and_delete(self, store: LedgerStore) -> None:
        """Test payment update then delete."""
        store.add_payment(make_payment("p1", 100, date(2024, 1, 1), PaymentType.EXPENSE))

        store.update_payment(make_payment("p1", 250, date(2024, 3, 1), PaymentType.EXPENSE))
        assert store.payments[0].amount == Decimal("250")
        assert store.payments[0].month_key == "2024-03"

        store.delete_payment("p1")
        assert store.payments == []

    def test_update_and_delete_unknown(self, store: LedgerStore) -> None:
        with pytest.raises(EntityNotFoundError):
            store.update_payment(make_payment("nope", 1, date(2024, 1, 1), PaymentType.EXPENSE))
        with pytest.raises(EntityNotFoundError):
            store.delete_payment("nope")


class TestMoveOut:
    """Tests for committing a move-out settlement."""

    def test_commit_records_transactions_and_archives(
        self, store: LedgerStore, storage: RecordingStorage, today: date
    ) -> None:
        store.add_payment(make_payment("d1", 50000, date(2023, 12, 1), PaymentType.DEPOSIT, tenant_id="ten-001"))
        storage.saved.clear()

        settlement = plan_move_out(
            store.tenants["ten-001"],
            store.payments,
            date(2024, 3, 31),
            deductions=2000,
            today=today,
        )
        store.commit_move_out(settlement)

        tenant = store.tenants["ten-001"]
        assert tenant.status == TenantStatus.PAST
        assert tenant.lease_end == date(2024, 3, 31)
        assert len(store.payments) == 3
        assert len(storage.saved) == 1

    def test_commit_unknown_tenant(self, store: LedgerStore, active_tenant: Tenant, today: date) -> None:
        settlement = plan_move_out(replace(active_tenant, tenant_id="ghost"), [], date(2024, 3, 31), today=today)

        with pytest.raises(EntityNotFoundError):
            store.commit_move_out(settlement)


class TestQueries:
    """Tests for lookup helpers and snapshots."""

    def test_lookups(self, store: LedgerStore) -> None:
        store.add_payment(make_payment("p1", 100, date(2024, 1, 1), PaymentType.RENT, tenant_id="ten-001"))
        store.add_payment(make_payment("p2", 50, date(2024, 1, 2), PaymentType.EXPENSE))

        assert [t.tenant_id for t in store.get_property_tenants("prop-001")] == ["ten-001"]
        assert len(store.get_property_payments("prop-001")) == 2
        assert [p.payment_id for p in store.get_tenant_payments("ten-001")] == ["p1"]
        assert store.get_property_tenants("missing") == []

    def test_snapshot_roundtrip_through_from_state(self) -> None:
        state = seed_state()

        store = LedgerStore.from_state(state)

        assert store.summary() == {"properties": 3, "tenants": 2, "payments": 4}
        assert store.snapshot() == state
        assert store.storage is None


def test_move_out_log_carries_settlement_fields(
    store: LedgerStore, today: date, caplog: pytest.LogCaptureFixture
) -> None:
    """The move-out log record renders its settlement fields as JSON."""
    store.add_payment(make_payment("d1", 50000, date(2023, 12, 1), PaymentType.DEPOSIT, tenant_id="ten-001"))
    settlement = plan_move_out(store.tenants["ten-001"], store.payments, date(2024, 3, 31), today=today)

    with caplog.at_level(logging.INFO, logger="propledger.store.ledger"):
        store.commit_move_out(settlement)

    (record,) = [r for r in caplog.records if "moved out" in r.getMessage()]
    data = json.loads(JsonFormatter().format(record))
    assert data["tenant_id"] == "ten-001"
    assert data["final_refund"] == "10000"
    assert data["deductions"] == "0"
