from __future__ import annotations

from typing import Final

from monet.domain.errors import AmountOverflowError, DivisionByZeroError

# Bounds of a signed 128-bit integer; every stored amount must fit in between
INT128_MIN: Final[int] = -(2**127)
INT128_MAX: Final[int] = 2**127 - 1


def require_int128(value: int) -> int:
    """Return $value unchanged when it fits into a signed 128-bit integer.

    Raises:
        AmountOverflowError: If $value is outside [INT128_MIN, INT128_MAX].
    """
    if value < INT128_MIN or value > INT128_MAX:
        raise AmountOverflowError(value)
    return value


def div_round_half_away(dividend: int, divisor: int) -> int:
    """Integer division rounded half away from zero.

    Ties move away from zero: 5 / 2 == 3, -5 / 2 == -3, 4 / 3 == 1.

    Args:
        dividend: Value to divide.
        divisor: Non-zero divisor.

    Returns:
        The rounded quotient.

    Raises:
        DivisionByZeroError: If $divisor is 0.

    Examples:
        >>> div_round_half_away(7, 2)
        4
        >>> div_round_half_away(-7, 2)
        -4
        >>> div_round_half_away(7, 3)
        2
    """
    if divisor == 0:
        raise DivisionByZeroError(dividend)

    quotient, remainder = divmod(abs(dividend), abs(divisor))
    if 2 * remainder >= abs(divisor):
        quotient += 1

    negative = (dividend < 0) != (divisor < 0)
    return -quotient if negative else quotient


def truncating_div(dividend: int, divisor: int) -> int:
    """Integer division truncated toward zero: -7 / 2 == -3, unlike `//` which gives -4.

    Raises:
        DivisionByZeroError: If $divisor is 0.
    """
    if divisor == 0:
        raise DivisionByZeroError(dividend)

    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def mul_div(value: int, numerator: int, denominator: int) -> int:
    """Compute `value * numerator / denominator` with a single rounding step.

    The product is kept exact; only the final quotient is rounded (half away from zero)
    and checked against the 128-bit range.
    """
    return require_int128(div_round_half_away(value * numerator, denominator))
