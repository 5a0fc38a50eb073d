"""Merchant transaction dashboard: filtering and monthly aggregation of card transactions."""

__version__ = "1.0.0"
