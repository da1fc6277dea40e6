from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from monet.domain.monetary.currency_code import CurrencyCode

# Minor-unit digits used when a code is not listed below
DEFAULT_ISO_EXPONENT: Final[int] = 2

# Fiat currencies
USD = CurrencyCode.from_str("USD")
EUR = CurrencyCode.from_str("EUR")
CHF = CurrencyCode.from_str("CHF")
GBP = CurrencyCode.from_str("GBP")
JPY = CurrencyCode.from_str("JPY")
CNY = CurrencyCode.from_str("CNY")
KRW = CurrencyCode.from_str("KRW")
BHD = CurrencyCode.from_str("BHD")
KWD = CurrencyCode.from_str("KWD")
CLF = CurrencyCode.from_str("CLF")

# Commodities (ISO 4217 "X" codes have no minor unit)
XAU = CurrencyCode.from_str("XAU")
XAG = CurrencyCode.from_str("XAG")

# ISO 4217 minor units, only for codes that matter for display precision
ISO_4217_EXPONENTS: Final[Mapping[CurrencyCode, int]] = MappingProxyType(
    {
        USD: 2,
        EUR: 2,
        CHF: 2,
        GBP: 2,
        CNY: 2,
        JPY: 0,
        KRW: 0,
        BHD: 3,
        KWD: 3,
        CLF: 4,
        XAU: 0,
        XAG: 0,
    },
)


def iso_exponent_of(code: CurrencyCode) -> int:
    """Return ISO 4217 minor-unit digits for $code, `DEFAULT_ISO_EXPONENT` for unlisted codes."""
    return ISO_4217_EXPONENTS.get(code, DEFAULT_ISO_EXPONENT)
