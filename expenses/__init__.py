"""Expenses: running costs deducted from gross revenue."""
