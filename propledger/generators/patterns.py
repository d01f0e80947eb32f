"""Behavioral patterns for realistic rent payment histories."""

import random
from datetime import date, timedelta

from propledger.engine.dates import as_today, clamp_day, iter_months, parse_date
from propledger.generators.rental import PaymentGenerator
from propledger.models import Payment, Tenant, TenantStatus


class RentBehavior:
    """Simulate how a tenant pays rent over the life of a lease."""

    BEHAVIORS = ["good", "occasional_late", "partial_payer", "delinquent"]

    def __init__(
        self,
        seed: int | None = None,
        payment_gen: PaymentGenerator | None = None,
    ) -> None:
        if seed is not None:
            random.seed(seed)
        self._payments = payment_gen or PaymentGenerator(seed=seed)

    def rent_history(
        self,
        tenant: Tenant,
        on_time_rate: float = 0.75,
        late_rate: float = 0.15,
        delinquent_rate: float = 0.10,
        reference_date: date | None = None,
    ) -> list[Payment]:
        """Generate rent and late fee payments up to ``reference_date``.

        Parameters
        ----------
        tenant : Tenant
            Tenant whose due dates drive the history.
        on_time_rate : float
            Weight of tenants who pay within a few days of the due date.
        late_rate : float
            Weight of tenants who sometimes pay late or short.
        delinquent_rate : float
            Weight of tenants who stop paying after a few months.
        reference_date : date | None
            Current date; nothing is generated after it.

        Returns
        -------
        list[Payment]
            Payments in date order.
        """
        today = as_today(reference_date)
        start = parse_date(tenant.lease_start)
        end = today
        lease_end = parse_date(tenant.lease_end)
        if tenant.status == TenantStatus.PAST and lease_end is not None:
            end = min(today, lease_end)

        behavior = random.choices(
            self.BEHAVIORS,
            weights=[on_time_rate, late_rate * 0.6, late_rate * 0.4, delinquent_rate],
            k=1,
        )[0]
        stop_after = random.randint(2, 6)

        payments: list[Payment] = []
        for number, month in enumerate(iter_months(start, end), start=1):
            due = clamp_day(month.year, month.month, tenant.rent_due_day)
            if due > end:
                break

            if behavior == "good":
                paid = due + timedelta(days=random.randint(-3, 3))
                payments.append(self._payments.rent(tenant, paid))

            elif behavior == "occasional_late":
                if random.random() < 0.8:
                    payments.append(self._payments.rent(tenant, due + timedelta(days=random.randint(0, 5))))
                else:
                    paid = due + timedelta(days=random.randint(10, 30))
                    payments.append(self._payments.rent(tenant, paid))
                    payments.append(self._payments.late_fee(tenant, paid))

            elif behavior == "partial_payer":
                share = random.choice([0.5, 0.75, 1.0, 1.0])
                amount = (tenant.rent_amount * int(share * 100)) / 100
                payments.append(self._payments.rent(tenant, due + timedelta(days=random.randint(0, 10)), amount))

            else:  # delinquent
                if number <= stop_after:
                    payments.append(self._payments.rent(tenant, due + timedelta(days=random.randint(0, 15))))

        return [p for p in sorted(payments, key=lambda p: p.date) if p.date <= today]
