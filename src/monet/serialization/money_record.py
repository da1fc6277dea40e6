"""Stable structured encoding of Money.

Field order is part of the format: `currency_code`, `amount`, `exponent`.
A record's value is `amount / 10 ** exponent` units of `currency_code`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, field_validator

from monet.domain.monetary.currency_amount import AMOUNT_EXPONENT
from monet.domain.monetary.currency_code import CurrencyCode
from monet.domain.monetary.money import Money
from monet.utils.numeric_tools import div_round_half_away


class MoneyRecord(BaseModel):
    """Serializable form of Money.

    Records written by this library always use `exponent == AMOUNT_EXPONENT`. Records
    with another exponent are rescaled on decoding; extra digits are rounded half away
    from zero, which is a silent precision loss.
    """

    currency_code: str = Field(..., description="Three uppercase ASCII letters, e.g. 'USD'")
    amount: StrictInt = Field(..., description="Scaled integer amount")
    exponent: StrictInt = Field(AMOUNT_EXPONENT, ge=0, description="Value is amount / 10 ** exponent")

    model_config = {"frozen": True}

    @field_validator("currency_code")
    @classmethod
    def validate_currency_code(cls, v: str) -> str:
        """Reject anything `CurrencyCode.from_str` rejects."""
        CurrencyCode.from_str(v)
        return v

    @classmethod
    def from_money(cls, money: Money) -> MoneyRecord:
        return cls(currency_code=money.currency_code.to_str(), amount=money.amount.value, exponent=AMOUNT_EXPONENT)

    def to_money(self) -> Money:
        """Rebuild Money, rescaling the amount to `AMOUNT_EXPONENT`.

        Raises:
            AmountOverflowError: If the rescaled amount does not fit into 128 bits.
        """
        if self.exponent <= AMOUNT_EXPONENT:
            amount = self.amount * 10 ** (AMOUNT_EXPONENT - self.exponent)
        else:
            amount = div_round_half_away(self.amount, 10 ** (self.exponent - AMOUNT_EXPONENT))
        return Money.with_str_code(amount, self.currency_code)
