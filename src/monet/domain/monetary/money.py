from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import TYPE_CHECKING, Any, Final

from monet.domain.errors import CurrencyMismatchError
from monet.domain.monetary.currency_amount import AMOUNT_EXPONENT, AMOUNT_UNIT, CurrencyAmount
from monet.domain.monetary.currency_code import CurrencyCode

if TYPE_CHECKING:
    from monet.domain.monetary.rates import Rates
    from monet.domain.operation.operation import DeferredOperation

# Display precision can not go beyond the digits an amount actually stores
MAX_DISPLAY_PRECISION: Final[int] = AMOUNT_EXPONENT

_FORMAT_SPEC_PATTERN = re.compile(r"^(?P<layout>.*?)(?:\.(?P<precision>\d+))?$")


class Money:
    """An amount of money in one currency.

    `amount` is a `CurrencyAmount`, i.e. fractions of a unit (see `AMOUNT_UNIT`).
    Money is immutable; arithmetic never changes an existing instance.

    Arithmetic operators do not return Money. `a + b`, `a - b`, `a * x` and `a / x`
    return a `DeferredOperation`, since combining different currencies needs a rate
    table the call site does not have. Call `execute(rates)` on the result to get Money.

    For `*` and `/` the right side is a dimensionless scalar (`Exponent`, `int`,
    `Decimal`, or Money whose amount is read as `amount / AMOUNT_UNIT` with its
    currency ignored). Money times Money is never "squared currency".

    Examples:
        >>> rates = Rates.with_rates({"USD": 1_000_000})
        >>> owned = Money.with_str_code(CurrencyAmount.with_unit(2), "USD")
        >>> paid = Money.with_str_code(CurrencyAmount.with_unit(1), "USD")
        >>> (owned - paid).execute(rates) == Money.with_str_code(CurrencyAmount.with_unit(1), "USD")
        True
    """

    __slots__ = ("_amount", "_currency_code")

    def __init__(self, amount: CurrencyAmount | int, currency_code: CurrencyCode | str):
        """Initialize Money with amount and currency code.

        Args:
            amount: Fractions of a unit, as CurrencyAmount or int.
            currency_code: CurrencyCode, or str parsed with `CurrencyCode.from_str`.

        Raises:
            InvalidCodeError: If $currency_code is not a valid code.
            TypeError: If $amount is not an int or CurrencyAmount.
        """
        self._currency_code = CurrencyCode.coerce(currency_code)
        self._amount = CurrencyAmount(amount)

    # region Constructors

    @classmethod
    def with_code(cls, amount: CurrencyAmount | int, currency_code: CurrencyCode) -> Money:
        return cls(amount, currency_code)

    @classmethod
    def with_str_code(cls, amount: CurrencyAmount | int, currency_code: str) -> Money:
        """Create Money from an amount and a code string like "USD".

        Raises:
            InvalidCodeError: If $currency_code is not exactly 3 uppercase ASCII letters.
        """
        return cls(amount, CurrencyCode.from_str(currency_code))

    @classmethod
    def with_cents(cls, cents: int, currency_code: str) -> Money:
        """Like `with_str_code`, but with an amount given in hundredths of a unit."""
        return cls.with_str_code(CurrencyAmount.with_cents(cents), currency_code)

    @classmethod
    def parse(cls, value_str: str) -> Money:
        """Parse Money from a string like '12.10 CHF'.

        Digits beyond `AMOUNT_EXPONENT` decimals are rounded half away from zero.

        Raises:
            ValueError: If the string is not in format 'value currency_code'.
            InvalidCodeError: If the currency part is not a valid code.
        """
        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, code_part = parts
        try:
            value = Decimal(value_part)
        except InvalidOperation as e:
            raise ValueError(f"Invalid value part '{value_part}' in string '{value_str}'") from e

        # Raise: NaN and Infinity have no fixed-point representation
        if not value.is_finite():
            raise ValueError(f"Invalid value part '{value_part}' in string '{value_str}'")

        # Enough digits for any 128-bit amount, so scaling never rounds before quantize does
        with localcontext() as ctx:
            ctx.prec = 80
            try:
                amount = int((value * AMOUNT_UNIT).quantize(Decimal(1), rounding=ROUND_HALF_UP))
            except InvalidOperation as e:
                raise ValueError(f"Value part '{value_part}' in string '{value_str}' is too large") from e
        return cls(amount, CurrencyCode.from_str(code_part))

    # endregion

    @property
    def amount(self) -> CurrencyAmount:
        return self._amount

    @property
    def currency_code(self) -> CurrencyCode:
        return self._currency_code

    # region Conversion

    def execute(self, rates: Rates) -> Money:
        """A single Money is an operation that is already resolved.

        The currency is still looked up, so a table missing it fails like any other operation.

        Raises:
            UnknownCurrencyError: If the currency is missing from $rates.
        """
        rates.worth(self._currency_code)
        return self

    def into_code(self, currency_code: CurrencyCode | str, rates: Rates) -> Money:
        """Convert this Money into another currency.

        Raises:
            UnknownCurrencyError: If either currency is missing from $rates.
            AmountOverflowError: If the converted amount does not fit into 128 bits.
        """
        target = CurrencyCode.coerce(currency_code)
        return Money(rates.convert(self._amount, self._currency_code, target), target)

    # endregion

    # region Comparison

    def compare(self, other: Money, rates: Rates | None = None) -> int:
        """Compare with $other, returning -1, 0 or 1.

        Args:
            other: Money to compare with.
            rates: Used to convert $other into this currency when the currencies differ.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies differ and no $rates were given.
            UnknownCurrencyError: If conversion needs a currency missing from $rates.
        """
        # Raise: only Money has a currency to compare
        if not isinstance(other, Money):
            raise TypeError(f"$other must be Money, but provided value is: {other!r} (type '{type(other).__name__}')")

        if other.currency_code == self._currency_code:
            other_amount = other.amount
        elif rates is None:
            raise CurrencyMismatchError(self._currency_code, other.currency_code)
        else:
            other_amount = other.into_code(self._currency_code, rates).amount

        return (self._amount > other_amount) - (self._amount < other_amount)

    def __eq__(self, other) -> bool:
        """Money of different currencies is never equal."""
        if not isinstance(other, Money):
            return False
        return self._currency_code == other._currency_code and self._amount == other._amount

    def __hash__(self) -> int:
        return hash((self._amount, self._currency_code))

    # Ordering needs the same currency; CurrencyMismatchError otherwise
    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) >= 0

    # endregion

    # region Arithmetic

    def __add__(self, other) -> DeferredOperation:
        from monet.domain.operation.operation import DeferredOperation, OperationKind

        return DeferredOperation.build(OperationKind.ADD, self, other)

    def __sub__(self, other) -> DeferredOperation:
        from monet.domain.operation.operation import DeferredOperation, OperationKind

        return DeferredOperation.build(OperationKind.SUB, self, other)

    def __mul__(self, other) -> DeferredOperation:
        from monet.domain.operation.operation import DeferredOperation, OperationKind

        return DeferredOperation.build(OperationKind.MUL, self, other)

    def __truediv__(self, other) -> DeferredOperation:
        from monet.domain.operation.operation import DeferredOperation, OperationKind

        return DeferredOperation.build(OperationKind.DIV, self, other)

    def __neg__(self) -> Money:
        return Money(-self._amount, self._currency_code)

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return Money(abs(self._amount), self._currency_code)

    # endregion

    # region Serialization

    def to_dict(self) -> dict[str, Any]:
        """Encode as `{"currency_code": ..., "amount": ..., "exponent": ...}`."""
        from monet.serialization.money_record import MoneyRecord

        return MoneyRecord.from_money(self).model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Money:
        """Decode from the dict produced by `to_dict`.

        Raises:
            pydantic.ValidationError: If $data is not a valid money record.
        """
        from monet.serialization.money_record import MoneyRecord

        return MoneyRecord.model_validate(data).to_money()

    def to_json(self) -> str:
        from monet.serialization.money_record import MoneyRecord

        return MoneyRecord.from_money(self).model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> Money:
        from monet.serialization.money_record import MoneyRecord

        return MoneyRecord.model_validate_json(data).to_money()

    # endregion

    # region String representations

    def format(self, precision: int | None = None) -> str:
        """Return string like '12.10 CHF'.

        Args:
            precision: Decimal digits to show, 0 to `MAX_DISPLAY_PRECISION`. Defaults to the
                ISO 4217 minor units of the currency. Extra digits are cut off, not rounded.

        Raises:
            ValueError: If $precision is outside 0..MAX_DISPLAY_PRECISION.
        """
        if precision is None:
            precision = self._currency_code.iso_exponent

        # Raise: an amount holds no digits past MAX_DISPLAY_PRECISION
        if precision < 0 or precision > MAX_DISPLAY_PRECISION:
            raise ValueError(f"$precision must be between 0 and {MAX_DISPLAY_PRECISION}, but provided value is: {precision}")

        sign = "-" if self._amount.value < 0 else ""
        units, fraction = divmod(abs(self._amount.value), AMOUNT_UNIT)
        if precision == 0:
            return f"{sign}{units} {self._currency_code}"

        decimals = fraction // 10 ** (MAX_DISPLAY_PRECISION - precision)
        return f"{sign}{units}.{decimals:0{precision}d} {self._currency_code}"

    def __format__(self, format_spec: str) -> str:
        """Support f-strings like f"{money:.6}" or f"{money:>20}"."""
        match = _FORMAT_SPEC_PATTERN.match(format_spec)
        precision = match.group("precision")
        text = self.format(int(precision) if precision is not None else None)
        return format(text, match.group("layout"))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        """Return string like 'Money(12100000, CHF)'."""
        return f"{self.__class__.__name__}({self._amount.value}, {self._currency_code})"

    # endregion
