from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from monet.domain.errors import InvalidRateError, UnknownCurrencyError
from monet.domain.monetary.currency_amount import CurrencyAmount
from monet.domain.monetary.currency_code import CurrencyCode

logger = logging.getLogger(__name__)


class Rates(Mapping[CurrencyCode, CurrencyAmount]):
    """Read-only exchange-rate table.

    Each entry tells how many reference units one unit of a currency is worth.
    If USD is worth `1_000_000` and CHF is worth `2_000_000`, then 2 USD are needed
    to make 1 CHF.

    The table never changes after construction. To update rates, build a new table
    (see `replace`) and hand it to readers; threads sharing one table need no locking.

    Examples:
        >>> rates = Rates.with_rates({"USD": 1_000_000, "CHF": 1_100_000})
        >>> rates.worth(CurrencyCode.from_str("CHF"))
        CurrencyAmount(1100000)
    """

    __slots__ = ("_map",)

    def __init__(self, rates: Mapping[CurrencyCode | str, CurrencyAmount | int] | None = None):
        """Initialize the table.

        Args:
            rates: Mapping from currency code (CurrencyCode or str) to its worth.

        Raises:
            InvalidCodeError: If a key is not a valid currency code.
            InvalidRateError: If a worth is not strictly positive.
            ValueError: If two keys resolve to the same currency code.
        """
        normalized: dict[CurrencyCode, CurrencyAmount] = {}
        for key, worth in (rates or {}).items():
            code = CurrencyCode.coerce(key)
            amount = CurrencyAmount(worth)

            # Raise: duplicated code (e.g. given both as str and CurrencyCode)
            if code in normalized:
                raise ValueError(f"Currency code {code} is defined more than once in $rates")

            # Raise: worth is used as a divisor during conversion
            if amount.value <= 0:
                raise InvalidRateError(code, worth)

            normalized[code] = amount

        self._map = MappingProxyType(normalized)
        logger.debug(f"Created Rates with {len(normalized)} currency(ies): {', '.join(str(c) for c in normalized)}")

    # region Constructors

    @classmethod
    def new(cls) -> Rates:
        """Empty table; every lookup fails."""
        return cls()

    @classmethod
    def with_rates(cls, rates: Mapping[CurrencyCode | str, CurrencyAmount | int]) -> Rates:
        """Construct a table with given rates."""
        return cls(rates)

    def replace(self, rates: Mapping[CurrencyCode | str, CurrencyAmount | int]) -> Rates:
        """Return a new table with $rates merged over this table's entries.

        This table is left untouched.

        Raises:
            ValueError: If two keys of $rates resolve to the same currency code.
        """
        updates: dict[CurrencyCode, CurrencyAmount | int] = {}
        for key, worth in rates.items():
            code = CurrencyCode.coerce(key)

            # Raise: duplicated code (e.g. given both as str and CurrencyCode)
            if code in updates:
                raise ValueError(f"Currency code {code} is defined more than once in $rates")

            updates[code] = worth

        return Rates({**self._map, **updates})

    # endregion

    # region Lookup

    def worth(self, code: CurrencyCode | str) -> CurrencyAmount:
        """Get the worth of a currency in reference units.

        Raises:
            UnknownCurrencyError: If $code is not in this table.
        """
        code = CurrencyCode.coerce(code)
        try:
            return self._map[code]
        except KeyError:
            raise UnknownCurrencyError(code) from None

    def lookup(self, code: CurrencyCode | str) -> CurrencyAmount:
        """Alias of `worth`."""
        return self.worth(code)

    def convert(self, amount: CurrencyAmount, from_code: CurrencyCode, to_code: CurrencyCode) -> CurrencyAmount:
        """Convert $amount of $from_code into $to_code.

        Computes `amount * worth(from_code) / worth(to_code)`, rounding half away from zero.
        Both codes are looked up even when they are equal; the amount is then returned unchanged.

        Raises:
            UnknownCurrencyError: If either code is missing.
            AmountOverflowError: If the result does not fit into 128 bits.
        """
        worth_from = self.worth(from_code)
        worth_to = self.worth(to_code)
        if from_code == to_code:
            return amount
        return amount.mul_div(worth_from, worth_to)

    def codes(self) -> list[CurrencyCode]:
        return list(self._map)

    # endregion

    # region Mapping protocol

    def __getitem__(self, code: CurrencyCode | str) -> CurrencyAmount:
        return self.worth(code)

    def __contains__(self, code: object) -> bool:
        if isinstance(code, str):
            return any(c.to_str() == code for c in self._map)
        return code in self._map

    def get(self, code, default=None):
        return self.worth(code) if code in self else default

    def __iter__(self) -> Iterator[CurrencyCode]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rates):
            return NotImplemented
        return dict(self._map) == dict(other._map)

    __hash__ = None

    def __repr__(self) -> str:
        entries = ", ".join(f"{code}: {worth.value}" for code, worth in self._map.items())
        return f"{self.__class__.__name__}({{{entries}}})"
