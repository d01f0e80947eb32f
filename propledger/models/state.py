"""Immutable application state snapshot."""

from dataclasses import dataclass

from propledger.models.payment import Payment
from propledger.models.property import Property
from propledger.models.tenant import Tenant


@dataclass(frozen=True)
class LedgerState:
    """Everything the engine reads: properties, tenants and payments.

    Passed by value between the store, snapshot storage and the engine.
    """

    properties: tuple[Property, ...] = ()
    tenants: tuple[Tenant, ...] = ()
    payments: tuple[Payment, ...] = ()

    @classmethod
    def of(cls, properties=(), tenants=(), payments=()) -> "LedgerState":
        return cls(tuple(properties), tuple(tenants), tuple(payments))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "tenants": len(self.tenants),
            "payments": len(self.payments),
        }
