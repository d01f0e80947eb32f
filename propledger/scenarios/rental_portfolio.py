"""Rental portfolio scenario: properties, tenants and years of transactions."""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import Any

from propledger.engine import (
    calculate_dashboard_metrics,
    calculate_portfolio_financing,
    generate_ledger,
)
from propledger.engine.dates import add_months, as_today, iter_months
from propledger.generators import PaymentGenerator, PropertyGenerator, RentBehavior, TenantGenerator
from propledger.models import PropertyType, TenantStatus
from propledger.store import LedgerStore

logger = logging.getLogger(__name__)


class RentalPortfolioScenario:
    """Generate a small landlord's portfolio with realistic cash history.

    This scenario creates:
    - Rental and personal-use properties with down payments and
      monthly amortization paid as equity
    - A past tenant and a current tenant on most rental properties
    - Rent histories with on-time, late, partial and delinquent payers
    - Deposits, late fees and categorised expenses, some recorded in the
      legacy ``"Category: note"`` form
    """

    def __init__(
        self,
        num_properties: int = 5,
        personal_rate: float = 0.20,
        occupancy: float = 0.80,
        history_months: int = 24,
        legacy_note_rate: float = 0.25,
        seed: int | None = None,
        today: date | None = None,
    ) -> None:
        """Initialize rental portfolio scenario.

        Parameters
        ----------
        num_properties : int
            Number of properties to generate.
        personal_rate : float
            Share of properties held for personal use.
        occupancy : float
            Share of rental properties with a current tenant.
        history_months : int
            Months of equity and expense history per property.
        legacy_note_rate : float
            Share of expenses written with a note prefix instead of a category.
        seed : int | None
            Random seed for reproducibility.
        today : date | None
            Reference day for all generated dates.
        """
        self.num_properties = num_properties
        self.personal_rate = personal_rate
        self.occupancy = occupancy
        self.history_months = history_months
        self.legacy_note_rate = legacy_note_rate
        self.seed = seed
        self.today = as_today(today)

        if seed is not None:
            random.seed(seed)

        self.store = LedgerStore()
        self._property_gen = PropertyGenerator(seed=seed)
        self._tenant_gen = TenantGenerator(seed=seed)
        self._payment_gen = PaymentGenerator(seed=seed)
        self._rent_behavior = RentBehavior(seed=seed, payment_gen=self._payment_gen)

    def generate(self) -> LedgerStore:
        """Generate all data for the rental portfolio scenario.

        Returns
        -------
        LedgerStore
            Store containing all generated data.
        """
        logger.info(
            "Starting rental portfolio scenario: %d properties, %.0f%% occupancy",
            self.num_properties,
            self.occupancy * 100,
        )

        num_personal = int(round(self.num_properties * self.personal_rate))
        for i in range(self.num_properties):
            prop_type = PropertyType.PERSONAL if i < num_personal else None
            if prop_type is None:
                prop_type = random.choice(
                    [PropertyType.RESIDENTIAL, PropertyType.RESIDENTIAL, PropertyType.COMMERCIAL]
                )
            prop = self._property_gen.generate(property_type=prop_type, today=self.today)
            self.store.add_property(prop)
            self._generate_property_history(prop)

        rentals = [p for p in self.store.properties.values() if not p.is_personal]
        occupied = rentals[: int(round(len(rentals) * self.occupancy))]
        for prop in rentals:
            self._generate_tenancies(prop, occupied=prop in occupied)

        logger.info("Generated %s", self.store.summary())
        return self.store

    def _history_start(self, purchase_date: date) -> date:
        return max(purchase_date, add_months(self.today, -self.history_months))

    def _generate_property_history(self, prop) -> None:
        start = self._history_start(prop.purchase_date)
        for month in iter_months(start, self.today):
            paid_on = month + timedelta(days=random.randint(0, 9))
            if paid_on > self.today:
                break
            if prop.monthly_amortization > 0:
                self.store.add_payment(self._payment_gen.equity(prop, paid_on))
            if random.random() < 0.4:
                legacy = random.random() < self.legacy_note_rate
                self.store.add_payment(self._payment_gen.expense(prop, paid_on, legacy_note=legacy))

    def _generate_tenancies(self, prop, occupied: bool) -> None:
        start = self._history_start(prop.purchase_date)

        # Former tenant for the first year of the window
        if add_months(start, 12) < self.today:
            past = self._tenant_gen.generate(
                prop, lease_start=start, lease_months=12, status=TenantStatus.PAST
            )
            self._add_tenant_with_history(past)
            start = add_months(start, 12)

        if occupied:
            current = self._tenant_gen.generate(prop, lease_start=start)
            self._add_tenant_with_history(current)

    def _add_tenant_with_history(self, tenant) -> None:
        self.store.add_tenant(tenant)
        self.store.add_payment(self._payment_gen.deposit(tenant, tenant.lease_start))
        history = self._rent_behavior.rent_history(tenant, reference_date=self.today)
        self.store.bulk_add_payments(history)

    def get_portfolio_summary(self) -> dict[str, Any]:
        """Get portfolio summary statistics.

        Returns
        -------
        dict
            Summary with counts, dashboard metrics and financing totals.
        """
        state = self.store.snapshot()
        metrics = calculate_dashboard_metrics(
            state.properties, state.tenants, state.payments, self.today
        )
        financing = calculate_portfolio_financing(state.properties, state.payments, self.today)

        status_counts: dict[str, int] = {}
        for tenant in state.tenants:
            if tenant.status != TenantStatus.ACTIVE:
                continue
            for row in generate_ledger(tenant, state.payments, self.today):
                status_counts[row.status.value] = status_counts.get(row.status.value, 0) + 1

        return {
            **state.summary(),
            "total_revenue": metrics.total_revenue,
            "net_income": metrics.net_income,
            "outstanding_rent": metrics.outstanding_rent,
            "occupancy_rate": metrics.occupancy_rate,
            "total_assets": financing.total_assets,
            "total_debt": financing.total_debt,
            "installment_status_distribution": status_counts,
        }
