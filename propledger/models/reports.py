"""Read-only view models produced by the financial engine."""

from dataclasses import dataclass, field
from decimal import Decimal

from propledger.models.enums import LeaseState
from propledger.models.payment import Payment
from propledger.models.tenant import Tenant


@dataclass(frozen=True)
class MoveOutFinancials:
    """Deposit position of a tenant at move-out."""

    deposit_held: Decimal
    unpaid_rent: Decimal
    net_refundable: Decimal  # Negative when the tenant still owes money


@dataclass(frozen=True)
class MoveOutSettlement:
    """Transactions and tenant update that commit a move-out."""

    financials: MoveOutFinancials
    deductions: Decimal
    final_refund: Decimal
    payments: tuple[Payment, ...]
    tenant: Tenant


@dataclass(frozen=True)
class PropertyFinancials:
    """Equity, income and return snapshot for a single property."""

    property_id: str
    is_personal: bool
    total_equity_paid: Decimal
    remaining_balance: Decimal
    percent_paid: Decimal
    is_fully_paid: bool
    current_value: Decimal
    valuation_delta: Decimal
    total_revenue: Decimal
    total_expenses: Decimal
    net_income: Decimal
    roi: Decimal
    cap_rate: Decimal


@dataclass(frozen=True)
class PortfolioFinancing:
    """Equity versus outstanding debt across all properties."""

    total_assets: Decimal
    total_equity: Decimal
    total_debt: Decimal
    equity_ratio: Decimal
    details: tuple[PropertyFinancials, ...] = ()


@dataclass(frozen=True)
class DashboardMetrics:
    total_revenue: Decimal
    total_expenses: Decimal
    net_income: Decimal
    outstanding_rent: Decimal
    occupancy_rate: Decimal


@dataclass(frozen=True)
class ChartPoint:
    """Income and expense totals for one month of the trailing chart."""

    name: str  # YYYY-MM
    income: Decimal
    expense: Decimal


@dataclass
class RevenueBreakdown:
    rent: Decimal = Decimal("0")
    deposit: Decimal = Decimal("0")
    other: Decimal = Decimal("0")  # Late fees
    total: Decimal = Decimal("0")


@dataclass
class IncomeStatement:
    """Profit and loss for one calendar year."""

    year: int
    revenue: RevenueBreakdown = field(default_factory=RevenueBreakdown)
    expenses: dict[str, Decimal] = field(default_factory=dict)
    total_expenses: Decimal = Decimal("0")
    net_income: Decimal = Decimal("0")


@dataclass(frozen=True)
class PeriodSummary:
    period: str  # YYYY-MM or YYYY
    income: Decimal
    expense: Decimal
    net: Decimal


@dataclass(frozen=True)
class FinancialSummary:
    monthly: tuple[PeriodSummary, ...]
    yearly: tuple[PeriodSummary, ...]


@dataclass(frozen=True)
class LeaseExpiration:
    tenant: Tenant
    days_left: int


@dataclass(frozen=True)
class LeaseStatus:
    """Lease warning badge for a tenant."""

    state: LeaseState
    days: int | None = None  # Days left (expiring) or days since end (expired)
