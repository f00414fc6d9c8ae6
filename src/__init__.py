"""Household ledger aggregation package."""
