"""Domain models for rental property bookkeeping."""

from propledger.models.enums import (
    REVENUE_TYPES,
    ExpenseCategory,
    InstallmentStatus,
    LeaseState,
    PaymentMethod,
    PaymentType,
    PropertyType,
    TenantStatus,
)
from propledger.models.ledger import RentInstallment
from propledger.models.payment import Payment
from propledger.models.property import Property
from propledger.models.reports import (
    ChartPoint,
    DashboardMetrics,
    FinancialSummary,
    IncomeStatement,
    LeaseExpiration,
    LeaseStatus,
    MoveOutFinancials,
    MoveOutSettlement,
    PeriodSummary,
    PortfolioFinancing,
    PropertyFinancials,
    RevenueBreakdown,
)
from propledger.models.state import LedgerState
from propledger.models.tenant import Tenant

__all__ = [
    "REVENUE_TYPES",
    "ChartPoint",
    "DashboardMetrics",
    "ExpenseCategory",
    "FinancialSummary",
    "IncomeStatement",
    "InstallmentStatus",
    "LeaseExpiration",
    "LeaseState",
    "LeaseStatus",
    "LedgerState",
    "MoveOutFinancials",
    "MoveOutSettlement",
    "Payment",
    "PaymentMethod",
    "PaymentType",
    "PeriodSummary",
    "PortfolioFinancing",
    "Property",
    "PropertyFinancials",
    "PropertyType",
    "RentInstallment",
    "RevenueBreakdown",
    "Tenant",
    "TenantStatus",
]
