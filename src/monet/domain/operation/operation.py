from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from decimal import Decimal
from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING, Union

from monet.domain.errors import ConversionError, DivisionByZeroError
from monet.domain.monetary.currency_amount import AMOUNT_EXPONENT
from monet.domain.monetary.currency_code import CurrencyCode
from monet.domain.monetary.exponent import Exponent
from monet.domain.monetary.money import Money
from monet.domain.operation.resolution import Resolution

if TYPE_CHECKING:
    from monet.domain.monetary.rates import Rates

logger = logging.getLogger(__name__)


class OperationKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def is_scalar(self) -> bool:
        """True when the right operand is a dimensionless factor (MUL, DIV)."""
        return self in (OperationKind.MUL, OperationKind.DIV)


Operand = Union[Money, "DeferredOperation"]
ScalarOperand = Union[Exponent, int, Decimal, Money, "DeferredOperation"]


class DeferredOperation:
    """Arithmetic over Money that is computed only when a rate table is supplied.

    Built by operators on Money and on other DeferredOperations:
    `a + b` is `DeferredOperation(ADD, a, b)` and `(a + b) - c` is
    `DeferredOperation(SUB, DeferredOperation(ADD, a, b), c)`.

    Nothing is converted and no currency mismatch is reported until `execute`.

    Result currency:
        The result is always in the currency of the leftmost Money of the whole
        expression (see `result_currency`). `(a + b - c).execute(rates)` is in `a`'s
        currency whatever the currencies of `b` and `c` are. Both sides of a node are
        resolved first; a nested right operand such as `(b + c)` in `a + (b + c)` is
        computed in its own leftmost currency and the resulting Money is converted once:
        `amount * worth(own currency) / worth(result currency)`, rounded half away from zero.

    Multiplication and division:
        The right operand is a dimensionless scalar. `Exponent(a, e)` means `a / 10**e`,
        an `int` or `Decimal` means itself (kept as given until `execute`), and Money
        (or a nested operation, resolved in its own leftmost currency) means
        `amount / AMOUNT_UNIT` with the currency ignored.
        Dividing by a zero scalar raises `DivisionByZeroError`.
    """

    __slots__ = ("_kind", "_left", "_right")

    def __init__(self, kind: OperationKind, left: Operand, right: Operand | ScalarOperand):
        """Initialize a new operation node.

        Args:
            kind: The arithmetic operation.
            left: Money or DeferredOperation.
            right: Money or DeferredOperation for ADD/SUB; for MUL/DIV also an Exponent,
                int or finite Decimal.

        Raises:
            TypeError: If an operand has an unsupported type.
        """
        # Raise: the left side decides the currency, so it must be money-valued
        if not isinstance(left, (Money, DeferredOperation)):
            raise TypeError(f"$left must be Money or DeferredOperation, but provided value is: {left!r}")

        if kind.is_scalar:
            _check_scalar(right)
        # Raise: ADD/SUB combine money with money
        elif not isinstance(right, (Money, DeferredOperation)):
            raise TypeError(f"$right of {kind.name} must be Money or DeferredOperation, but provided value is: {right!r}")

        self._kind = kind
        self._left = left
        self._right = right

    @classmethod
    def build(cls, kind: OperationKind, left: Operand, right: object) -> DeferredOperation:
        """Create a node from an operator call.

        Scalars are only type-checked here; their range is checked by `execute`, so an
        out-of-range factor fails like every other conversion error.

        Raises:
            TypeError: If $right can not be used with $kind.
        """
        return cls(kind, left, right)

    @property
    def kind(self) -> OperationKind:
        return self._kind

    @property
    def left(self) -> Operand:
        return self._left

    @property
    def right(self) -> Operand | ScalarOperand:
        return self._right

    # region Structure

    def result_currency(self) -> CurrencyCode:
        """Currency of the leftmost Money in the expression; the result is always in it."""
        node: Operand = self
        while isinstance(node, DeferredOperation):
            node = node._left
        return node.currency_code

    def operands(self) -> Iterator[Money]:
        """Yield every Money of the expression from left to right (scalar Money included)."""
        stack: list[object] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, DeferredOperation):
                stack.append(node._right)
                stack.append(node._left)
            elif isinstance(node, Money):
                yield node

    @property
    def depth(self) -> int:
        """Number of operation levels; `a + b` has depth 1."""
        deepest = 0
        stack: list[tuple[object, int]] = [(self, 1)]
        while stack:
            node, level = stack.pop()
            if isinstance(node, DeferredOperation):
                deepest = max(deepest, level)
                stack.append((node._left, level + 1))
                stack.append((node._right, level + 1))
        return deepest

    # endregion

    # region Execution

    def execute(self, rates: Rates) -> Money:
        """Resolve the expression against $rates.

        Evaluated depth-first with an explicit stack, so long chains do not hit the
        interpreter recursion limit. Every node resolves both sides to concrete values
        first, in the currency of their own leftmost Money, and then combines them.
        Either the final Money is returned or the first error is raised; no intermediate
        value escapes.

        Raises:
            UnknownCurrencyError: If a currency of the expression is missing from $rates.
            AmountOverflowError: If a scalar, an intermediate or the final amount leaves the 128-bit range.
            DivisionByZeroError: If the expression divides by a zero scalar.
        """
        # Each entry: (node, expanded, used as scalar factor)
        stack: list[tuple[object, bool, bool]] = [(self, False, False)]
        values: list[Money | ScalarOperand] = []

        while stack:
            node, expanded, scalar = stack.pop()

            if not isinstance(node, DeferredOperation):
                # Money as a factor is never looked up; its currency is ignored
                values.append(node if scalar else node.execute(rates))
                continue

            if expanded:
                right = values.pop()
                left = values.pop()
                values.append(_apply(node._kind, left, right, rates))
                continue

            stack.append((node, True, scalar))
            stack.append((node._right, False, node._kind.is_scalar))
            stack.append((node._left, False, False))

        result = values.pop()
        logger.debug(f"Executed {self._kind.name} operation into {result!r}")
        return result

    def resolve(self, rates: Rates) -> Resolution:
        """Execute against $rates and record the outcome instead of raising.

        Returns:
            Resolution in state RESOLVED with the Money, or FAILED with the ConversionError.
        """
        resolution = Resolution(self)
        try:
            money = self.execute(rates)
        except ConversionError as e:
            resolution.fail(e)
        else:
            resolution.succeed(money)
        return resolution

    # endregion

    # region Chaining

    def __add__(self, other) -> DeferredOperation:
        return DeferredOperation.build(OperationKind.ADD, self, other)

    def __sub__(self, other) -> DeferredOperation:
        return DeferredOperation.build(OperationKind.SUB, self, other)

    def __mul__(self, other) -> DeferredOperation:
        return DeferredOperation.build(OperationKind.MUL, self, other)

    def __truediv__(self, other) -> DeferredOperation:
        return DeferredOperation.build(OperationKind.DIV, self, other)

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, DeferredOperation):
            return NotImplemented
        return self._kind == other._kind and self._left == other._left and self._right == other._right

    def __hash__(self) -> int:
        return hash((self._kind, self._left, self._right))

    def __repr__(self) -> str:
        return f"({self._left!r} {self._kind.value} {self._right!r})"


def sum_of(operands: Iterable[Operand]) -> Operand:
    """Add all $operands left to right; the first one decides the result currency.

    A single operand is returned as is (Money and DeferredOperation both `execute`).

    Raises:
        ValueError: If $operands is empty.
    """
    items = list(operands)
    if not items:
        raise ValueError("Cannot call `sum_of` because $operands is empty")
    return reduce(lambda acc, item: DeferredOperation(OperationKind.ADD, acc, item), items)


# region Helpers


def _check_scalar(value: object) -> None:
    if isinstance(value, (Exponent, Money, DeferredOperation)):
        return

    # Raise: floats are never accepted as factors; bool is no number here
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise TypeError(f"Scalar must be Exponent, int, Decimal or Money, but provided value is: {value!r} (type '{type(value).__name__}')")

    # Raise: NaN and Infinity are no scalars
    if isinstance(value, Decimal) and not value.is_finite():
        raise TypeError(f"Scalar must be a finite Decimal, but provided value is: {value!r}")


def _to_exponent(scalar: Money | Exponent | int | Decimal) -> Exponent:
    """Turn a resolved scalar into an Exponent; raises AmountOverflowError when out of range."""
    if isinstance(scalar, Exponent):
        return scalar
    if isinstance(scalar, Money):
        return Exponent(scalar.amount, AMOUNT_EXPONENT)
    if isinstance(scalar, int):
        return Exponent(scalar, 0)

    sign, digits, exponent = scalar.as_tuple()
    coefficient = int("".join(map(str, digits))) * (-1 if sign else 1)
    if exponent >= 0:
        return Exponent(coefficient * 10**exponent, 0)
    return Exponent(coefficient, -exponent)


def _apply(kind: OperationKind, left: Money, right: Money | ScalarOperand, rates: Rates) -> Money:
    currency_code = left.currency_code

    if not kind.is_scalar:
        # Right side is already resolved in its own currency; convert it once
        converted = right.into_code(currency_code, rates).amount
        if kind == OperationKind.ADD:
            return Money(left.amount + converted, currency_code)
        return Money(left.amount - converted, currency_code)

    factor = _to_exponent(right)
    if kind == OperationKind.MUL:
        return Money(left.amount.mul_div(factor.amount, factor.scale), currency_code)

    # Raise: a zero factor would otherwise surface as a generic division error
    if factor.amount.value == 0:
        raise DivisionByZeroError(left)
    return Money(left.amount.mul_div(factor.scale, factor.amount), currency_code)


# endregion
