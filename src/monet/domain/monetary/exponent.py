from __future__ import annotations

from decimal import Decimal

from monet.domain.monetary.currency_amount import CurrencyAmount
from monet.utils.numeric_tools import truncating_div


class Exponent:
    """Dimensionless scalar written as `amount / 10 ** exponent`.

    Used as the right-hand side of Money multiplication and division:
    `money * Exponent(15, 1)` multiplies by 1.5.

    Warning:
        Equality compares the integer part of both sides only
        (`amount // 10 ** exponent`, truncated toward zero), so
        `Exponent(1_000, 2) == Exponent(10, 0)` but also
        `Exponent(1_050, 2) == Exponent(10, 0)`. Compare `as_decimal()` when exact
        equality is needed.
    """

    __slots__ = ("_amount", "_exponent")

    def __init__(self, amount: CurrencyAmount | int, exponent: int = 0):
        """Initialize a new Exponent.

        Args:
            amount: Scaled integer value.
            exponent: Non-negative power of ten dividing $amount.

        Raises:
            ValueError: If $exponent is negative.
        """
        # Raise: negative exponents would turn the scalar into a multiplication by 10^n
        if not isinstance(exponent, int) or isinstance(exponent, bool) or exponent < 0:
            raise ValueError(f"$exponent must be a non-negative int, but provided value is: {exponent!r}")

        self._amount = CurrencyAmount(amount)
        self._exponent = exponent

    @property
    def amount(self) -> CurrencyAmount:
        return self._amount

    @property
    def exponent(self) -> int:
        return self._exponent

    @property
    def scale(self) -> int:
        """The divisor `10 ** exponent`."""
        return 10**self._exponent

    def as_decimal(self) -> Decimal:
        """Exact decimal value of this scalar."""
        return Decimal(self._amount.value).scaleb(-self._exponent)

    def _whole_part(self) -> int:
        return truncating_div(self._amount.value, self.scale)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Exponent):
            return NotImplemented
        return self._whole_part() == other._whole_part()

    def __hash__(self) -> int:
        return hash(self._whole_part())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._amount.value}, {self._exponent})"

