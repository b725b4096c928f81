"""Cashbook: income and expense tracking with role-based reports."""

__version__ = "1.0.0"
