"""Tenant model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from propledger.models.base import to_decimal
from propledger.models.enums import TenantStatus


@dataclass
class Tenant:
    """Lease holder occupying a property."""

    tenant_id: str
    property_id: str
    name: str
    rent_amount: Decimal
    rent_due_day: int  # 1-28
    lease_start: date | None
    lease_end: date | None = None  # Ledger horizon once the tenant is past
    status: TenantStatus = TenantStatus.ACTIVE
    email: str = ""

    def __post_init__(self) -> None:
        self.rent_amount = to_decimal(self.rent_amount)
        self.status = TenantStatus(self.status)

    @property
    def is_active(self) -> bool:
        return self.status == TenantStatus.ACTIVE
