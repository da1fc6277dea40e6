__version__ = "0.1.0"

from monet.domain.errors import (
    AmountOverflowError,
    ConversionError,
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidCodeError,
    InvalidRateError,
    MonetError,
    UnknownCurrencyError,
)
from monet.domain.monetary.currency_amount import AMOUNT_EXPONENT, AMOUNT_UNIT, CurrencyAmount
from monet.domain.monetary.currency_code import CurrencyCode
from monet.domain.monetary.exponent import Exponent
from monet.domain.monetary.money import Money
from monet.domain.monetary.rates import Rates
from monet.domain.operation.operation import DeferredOperation, OperationKind, sum_of
from monet.domain.operation.resolution import Resolution, ResolutionState

__all__ = [
    "AMOUNT_EXPONENT",
    "AMOUNT_UNIT",
    "AmountOverflowError",
    "ConversionError",
    "CurrencyAmount",
    "CurrencyCode",
    "CurrencyMismatchError",
    "DeferredOperation",
    "DivisionByZeroError",
    "Exponent",
    "InvalidCodeError",
    "InvalidRateError",
    "MonetError",
    "Money",
    "OperationKind",
    "Rates",
    "Resolution",
    "ResolutionState",
    "UnknownCurrencyError",
    "sum_of",
]
