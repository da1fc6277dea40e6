from __future__ import annotations

import logging

from monet import Money, Rates, sum_of

logger = logging.getLogger(__name__)


# Load items from a database or something
def cart() -> list[tuple[str, Money]]:
    return [
        ("Soap", Money.with_cents(500, "CHF")),
        ("AMD Ryzen R9 3900x", Money.with_cents(51500, "CHF")),
        ("Some Item", Money.with_cents(1850, "CHF")),
        ("Bag", Money.with_cents(50, "CHF")),
        ("Discount", Money.with_cents(-1500, "CHF")),
    ]


def run() -> None:
    rates = Rates.with_rates({"CHF": 1_000_000})
    items = cart()

    total = sum_of(price for _, price in items).execute(rates)

    logger.info("Your cart")
    for name, price in items:
        logger.info(f"{price:>20} | {name}")
    logger.info(f"{'TOTAL':-^30}")
    logger.info(f"{total}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
