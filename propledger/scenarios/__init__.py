"""Scenarios for generating realistic rental bookkeeping data sets."""

from propledger.scenarios.rental_portfolio import RentalPortfolioScenario

__all__ = ["RentalPortfolioScenario"]
