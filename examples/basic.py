from __future__ import annotations

import logging

from monet import CurrencyAmount, Money, Rates

logger = logging.getLogger(__name__)


def run() -> None:
    # Every currency is worth some amount of a common reference (here: USD)
    rates = Rates.with_rates({"USD": 1_000_000, "CHF": 1_100_000, "JPY": 6_700})

    money_1 = Money.with_str_code(CurrencyAmount.with_cents(12345), "CHF")
    logger.info(f"Money 1: {money_1}")

    money_2 = Money.parse("54321 JPY")
    logger.info(f"Money 2: {money_2}")

    # Arithmetic is deferred; the result takes the currency of the leftmost Money
    total = (money_1 + money_2).execute(rates)
    logger.info(f"Total: {total:.4}")

    # Conversion failures are recorded instead of raised
    resolution = (money_1 + Money.parse("1 EUR")).resolve(rates)
    logger.info(f"Without EUR rate: {resolution}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
