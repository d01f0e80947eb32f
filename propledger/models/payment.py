"""Payment (cash transaction) model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from propledger.models.base import to_decimal
from propledger.models.enums import (
    REVENUE_TYPES,
    ExpenseCategory,
    PaymentMethod,
    PaymentType,
)


@dataclass
class Payment:
    """Cash movement against a property, optionally tied to a tenant."""

    payment_id: str
    property_id: str
    amount: Decimal
    date: date | None
    payment_type: PaymentType
    method: PaymentMethod = PaymentMethod.CASH
    tenant_id: str | None = None  # None for property-level expenses/equity
    note: str | None = None
    month_key: str | None = None  # YYYY-MM of date
    expense_category: ExpenseCategory | None = None  # Only meaningful for expenses

    def __post_init__(self) -> None:
        self.amount = to_decimal(self.amount)
        self.payment_type = PaymentType(self.payment_type)
        self.method = PaymentMethod(self.method)
        if self.expense_category is not None:
            self.expense_category = ExpenseCategory(self.expense_category)
        if self.month_key is None and isinstance(self.date, date):
            self.month_key = f"{self.date.year:04d}-{self.date.month:02d}"

    @property
    def is_revenue(self) -> bool:
        return self.payment_type in REVENUE_TYPES

    @property
    def is_expense(self) -> bool:
        return self.payment_type == PaymentType.EXPENSE
