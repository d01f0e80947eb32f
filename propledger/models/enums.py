"""Enumeration types for rental bookkeeping entities."""

from enum import Enum


class PropertyType(str, Enum):
    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"
    PERSONAL = "Personal Use"


class PaymentType(str, Enum):
    RENT = "Rent"
    DEPOSIT = "Deposit"
    EXPENSE = "Expense"
    EQUITY = "Equity"
    LATE_FEE = "Late Fee"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    GCASH = "GCash"
    BANK_TRANSFER = "Bank Transfer"
    CHEQUE = "Cheque"
    OTHER = "Other"


class TenantStatus(str, Enum):
    ACTIVE = "active"
    PAST = "past"


class InstallmentStatus(str, Enum):
    PAID = "paid"
    PARTIAL = "partial"
    OVERDUE = "overdue"
    PENDING = "pending"


class ExpenseCategory(str, Enum):
    MAINTENANCE = "Maintenance"
    TAX = "Tax"
    INSURANCE = "Insurance"
    UTILITIES = "Utilities"
    MORTGAGE = "Mortgage"
    HOA = "HOA"
    MARKETING = "Marketing"
    LEGAL = "Legal"
    OTHER = "Other"


class LeaseState(str, Enum):
    MOVED_OUT = "moved_out"
    EXPIRED = "expired"
    EXPIRING = "expiring"


# Payment types counted as revenue in every report
REVENUE_TYPES = frozenset({PaymentType.RENT, PaymentType.DEPOSIT, PaymentType.LATE_FEE})
