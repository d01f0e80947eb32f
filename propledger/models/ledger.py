"""Derived rent obligation records."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from propledger.models.enums import InstallmentStatus


@dataclass
class RentInstallment:
    """One month of rent owed by a tenant and how much of it is covered."""

    month_key: str
    due_date: date
    amount_due: Decimal
    amount_paid: Decimal
    status: InstallmentStatus
    tenant_name: str = ""
    property_id: str = ""

    @property
    def shortfall(self) -> Decimal:
        return max(Decimal("0"), self.amount_due - self.amount_paid)
