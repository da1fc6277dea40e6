"""Exceptions raised by the monetary domain.

Construction errors (`InvalidCodeError`, `InvalidRateError`) surface where the value is built.
Everything that can go wrong while a `DeferredOperation` is executed derives from `ConversionError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monet.domain.monetary.currency_code import CurrencyCode


class MonetError(Exception):
    """Base class for all errors raised by this library."""


class InvalidCodeError(MonetError, ValueError):
    """Raised when a currency code is not exactly 3 uppercase ASCII letters."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Currency code must be exactly 3 uppercase ASCII letters (A-Z), but provided value is: {code!r}")


class CurrencyMismatchError(MonetError, ValueError):
    """Raised when two Money values of different currencies are compared without rates."""

    def __init__(self, left: CurrencyCode, right: CurrencyCode):
        self.left = left
        self.right = right
        super().__init__(f"Cannot compare different currencies without rates: {left} and {right}")


class InvalidRateError(MonetError, ValueError):
    """Raised when a rate table entry is not a strictly positive worth."""

    def __init__(self, code: CurrencyCode, worth: object):
        self.code = code
        self.worth = worth
        super().__init__(f"Worth of currency {code} must be > 0, but provided value is: {worth}")


class ConversionError(MonetError):
    """Base class for failures while executing a deferred operation."""


class UnknownCurrencyError(ConversionError, LookupError):
    """Raised when a currency code is missing from the rate table."""

    def __init__(self, code: CurrencyCode):
        self.code = code
        super().__init__(f"No rate found for currency {code}")


class AmountOverflowError(ConversionError, OverflowError):
    """Raised when an amount leaves the signed 128-bit range."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Amount {value} does not fit into a signed 128-bit integer")


class DivisionByZeroError(ConversionError, ZeroDivisionError):
    """Raised when an amount or a money value is divided by zero."""

    def __init__(self, dividend: object):
        self.dividend = dividend
        super().__init__(f"Cannot divide {dividend} by zero")
