"""Monetary domain package.

This package contains the value types for monetary amounts: the fixed-point
CurrencyAmount, CurrencyCode, the Rates table and Money itself.
"""
