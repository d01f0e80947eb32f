"""Ledger state store with referential integrity."""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from propledger.engine.dates import month_key, parse_date
from propledger.exceptions import EntityNotFoundError, InvalidInputError, ReferentialIntegrityError
from propledger.models import (
    LedgerState,
    MoveOutSettlement,
    Payment,
    Property,
    Tenant,
)

logger = logging.getLogger(__name__)


@dataclass
class LedgerStore:
    """Mutable container for the application state.

    Every mutation replaces the affected record and, when a storage backend
    is attached, saves the whole snapshot. The engine only ever sees
    ``snapshot()`` output.
    """

    properties: dict[str, Property] = field(default_factory=dict)
    tenants: dict[str, Tenant] = field(default_factory=dict)
    payments: list[Payment] = field(default_factory=list)
    storage: Any = None  # Anything with save(LedgerState)

    @classmethod
    def from_state(cls, state: LedgerState, storage: Any = None) -> "LedgerStore":
        """Build a store from a snapshot without re-validating references."""
        return cls(
            properties={p.property_id: p for p in state.properties},
            tenants={t.tenant_id: t for t in state.tenants},
            payments=list(state.payments),
            storage=storage,
        )

    def snapshot(self) -> LedgerState:
        return LedgerState.of(self.properties.values(), self.tenants.values(), self.payments)

    def _persist(self) -> None:
        if self.storage is not None:
            self.storage.save(self.snapshot())

    # Properties
    def add_property(self, prop: Property) -> None:
        """Add a property to the store."""
        if prop.purchase_price < 0:
            raise InvalidInputError(f"Property {prop.property_id} has a negative purchase price")
        self.properties[prop.property_id] = prop
        self._persist()

    def update_property(self, prop: Property) -> None:
        if prop.property_id not in self.properties:
            raise EntityNotFoundError(f"Property {prop.property_id} not found")
        self.add_property(prop)

    def delete_property(self, property_id: str) -> None:
        """Remove a property. Its tenants and payments are left untouched."""
        if self.properties.pop(property_id, None) is None:
            raise EntityNotFoundError(f"Property {property_id} not found")
        self._persist()

    # Tenants
    def add_tenant(self, tenant: Tenant) -> None:
        """Add a tenant to the store."""
        if tenant.property_id not in self.properties:
            raise ReferentialIntegrityError(f"Property {tenant.property_id} not found")
        if parse_date(tenant.lease_start) is None:
            raise InvalidInputError(f"Tenant {tenant.tenant_id} has no usable lease start")
        if not 1 <= tenant.rent_due_day <= 28:
            raise InvalidInputError(
                f"Tenant {tenant.tenant_id} rent due day must be 1-28, got {tenant.rent_due_day}"
            )
        self.tenants[tenant.tenant_id] = tenant
        self._persist()

    def update_tenant(self, tenant: Tenant) -> None:
        if tenant.tenant_id not in self.tenants:
            raise EntityNotFoundError(f"Tenant {tenant.tenant_id} not found")
        self.add_tenant(tenant)

    def delete_tenant(self, tenant_id: str) -> None:
        if self.tenants.pop(tenant_id, None) is None:
            raise EntityNotFoundError(f"Tenant {tenant_id} not found")
        self._persist()

    # Payments
    def _check_payment(self, payment: Payment) -> Payment:
        if payment.property_id not in self.properties:
            raise ReferentialIntegrityError(f"Property {payment.property_id} not found")
        if payment.tenant_id and payment.tenant_id not in self.tenants:
            raise ReferentialIntegrityError(f"Tenant {payment.tenant_id} not found")
        if payment.amount < 0:
            raise InvalidInputError(f"Payment {payment.payment_id} amount cannot be negative")
        # Keep the month bucket in step with the date
        return replace(payment, month_key=month_key(payment.date))

    def add_payment(self, payment: Payment) -> None:
        """Add a payment to the store."""
        self.payments.append(self._check_payment(payment))
        self._persist()

    def bulk_add_payments(self, payments: Iterable[Payment]) -> int:
        """Add several payments with a single save; all or nothing."""
        checked = [self._check_payment(p) for p in payments]
        self.payments.extend(checked)
        self._persist()
        logger.info("Added %d payments", len(checked))
        return len(checked)

    def update_payment(self, payment: Payment) -> None:
        checked = self._check_payment(payment)
        for idx, existing in enumerate(self.payments):
            if existing.payment_id == payment.payment_id:
                self.payments[idx] = checked
                self._persist()
                return
        raise EntityNotFoundError(f"Payment {payment.payment_id} not found")

    def delete_payment(self, payment_id: str) -> None:
        remaining = [p for p in self.payments if p.payment_id != payment_id]
        if len(remaining) == len(self.payments):
            raise EntityNotFoundError(f"Payment {payment_id} not found")
        self.payments = remaining
        self._persist()

    def commit_move_out(self, settlement: MoveOutSettlement) -> None:
        """Record settlement transactions and archive the tenant, saving once."""
        tenant = settlement.tenant
        if tenant.tenant_id not in self.tenants:
            raise EntityNotFoundError(f"Tenant {tenant.tenant_id} not found")

        checked = [self._check_payment(p) for p in settlement.payments]
        self.payments.extend(checked)
        self.tenants[tenant.tenant_id] = tenant
        self._persist()
        logger.info(
            "Tenant %s moved out on %s with %d settlement transactions",
            tenant.tenant_id,
            tenant.lease_end,
            len(checked),
            extra={
                "extra": {
                    "tenant_id": tenant.tenant_id,
                    "final_refund": settlement.final_refund,
                    "deductions": settlement.deductions,
                }
            },
        )

    # Query methods
    def get_property_tenants(self, property_id: str) -> list[Tenant]:
        """Get all tenants of a property."""
        return [t for t in self.tenants.values() if t.property_id == property_id]

    def get_property_payments(self, property_id: str) -> list[Payment]:
        """Get all payments recorded against a property."""
        return [p for p in self.payments if p.property_id == property_id]

    def get_tenant_payments(self, tenant_id: str) -> list[Payment]:
        """Get all payments made by or to a tenant."""
        return [p for p in self.payments if p.tenant_id == tenant_id]

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "tenants": len(self.tenants),
            "payments": len(self.payments),
        }
