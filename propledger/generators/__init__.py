"""Synthetic data generators for rental portfolios."""

from propledger.generators.patterns import RentBehavior
from propledger.generators.rental import PaymentGenerator, PropertyGenerator, TenantGenerator

__all__ = [
    "PaymentGenerator",
    "PropertyGenerator",
    "RentBehavior",
    "TenantGenerator",
]
