"""Rental property bookkeeping: rent ledgers, settlements and portfolio reports."""

__version__ = "0.1.0"
