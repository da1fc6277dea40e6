from __future__ import annotations

from functools import total_ordering
from typing import Final

from monet.utils.numeric_tools import div_round_half_away, mul_div, require_int128

# How many `CurrencyAmount` make one whole unit of a currency
AMOUNT_UNIT: Final[int] = 1_000_000
# AMOUNT_UNIT == 10 ** AMOUNT_EXPONENT
AMOUNT_EXPONENT: Final[int] = 6


@total_ordering
class CurrencyAmount:
    """Fixed-point amount of currency, stored as an integer count of unit fractions.

    `CurrencyAmount(AMOUNT_UNIT)` is one whole unit. The stored integer always fits
    into a signed 128-bit integer; leaving that range raises `AmountOverflowError`
    instead of wrapping around.

    Rounding policy: every division (`/`, `div_round`, `mul_div` and the `into_*`
    helpers) rounds half away from zero. `CurrencyAmount(5) / CurrencyAmount(2)` is 3,
    `CurrencyAmount(-5) / CurrencyAmount(2)` is -3. Addition, subtraction and
    multiplication are exact.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        """Initialize from a raw integer amount.

        Args:
            value: Count of unit fractions (see `AMOUNT_UNIT`).

        Raises:
            TypeError: If $value is not an int (floats are never accepted).
            AmountOverflowError: If $value does not fit into 128 bits.
        """
        if isinstance(value, CurrencyAmount):
            value = value.value

        # Raise: only exact integers are valid amounts; bool is an int subclass but never a meaningful amount
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"$value must be an int, but provided value is: {value!r} (type '{type(value).__name__}')")

        self._value = require_int128(value)

    # region Constructors

    @classmethod
    def with_unit(cls, unit: int) -> CurrencyAmount:
        """Amount of $unit whole units."""
        return cls(unit * AMOUNT_UNIT)

    @classmethod
    def with_tenths(cls, tenths: int) -> CurrencyAmount:
        return cls(tenths * (AMOUNT_UNIT // 10))

    @classmethod
    def with_cents(cls, cents: int) -> CurrencyAmount:
        return cls(cents * (AMOUNT_UNIT // 100))

    @classmethod
    def with_thousands(cls, thousands: int) -> CurrencyAmount:
        return cls(thousands * (AMOUNT_UNIT // 1000))

    # endregion

    # region Conversions

    def into_unit(self) -> CurrencyAmount:
        """Number of whole units in this amount, rounded half away from zero."""
        return CurrencyAmount(div_round_half_away(self._value, AMOUNT_UNIT))

    def into_tenths(self) -> CurrencyAmount:
        return CurrencyAmount(div_round_half_away(self._value, AMOUNT_UNIT // 10))

    def into_cents(self) -> CurrencyAmount:
        return CurrencyAmount(div_round_half_away(self._value, AMOUNT_UNIT // 100))

    def into_thousands(self) -> CurrencyAmount:
        return CurrencyAmount(div_round_half_away(self._value, AMOUNT_UNIT // 1000))

    # endregion

    @property
    def value(self) -> int:
        """Get the raw integer amount."""
        return self._value

    def div_round(self, divisor: CurrencyAmount | int) -> CurrencyAmount:
        """Divide by $divisor, rounding half away from zero.

        Raises:
            DivisionByZeroError: If $divisor is zero.
        """
        return CurrencyAmount(div_round_half_away(self._value, int(divisor)))

    def mul_div(self, numerator: CurrencyAmount | int, denominator: CurrencyAmount | int) -> CurrencyAmount:
        """Compute `self * numerator / denominator` rounding only once at the end.

        Raises:
            DivisionByZeroError: If $denominator is zero.
            AmountOverflowError: If the result does not fit into 128 bits.
        """
        return CurrencyAmount(mul_div(self._value, int(numerator), int(denominator)))

    # region Arithmetic

    def __add__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return CurrencyAmount(self._value + other._value)

    def __sub__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return CurrencyAmount(self._value - other._value)

    def __mul__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return CurrencyAmount(self._value * other._value)

    def __truediv__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self.div_round(other)

    def __neg__(self) -> CurrencyAmount:
        return CurrencyAmount(-self._value)

    def __abs__(self) -> CurrencyAmount:
        return CurrencyAmount(abs(self._value))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value})"
