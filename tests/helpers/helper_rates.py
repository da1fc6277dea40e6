from __future__ import annotations

from monet.domain.monetary.rates import Rates


def create_rates() -> Rates:
    """Create the rate table shared by most tests.

    Returns:
        Rates where USD is the reference (1_000_000) and CHF, EUR, GBP are worth
        1.1, 1.2 and 1.5 USD.
    """
    return Rates.with_rates(
        {
            "USD": 1_000_000,
            "CHF": 1_100_000,
            "EUR": 1_200_000,
            "GBP": 1_500_000,
        },
    )


def create_usd_chf_rates() -> Rates:
    """Create a table with only USD (1_000_000) and CHF (1_100_000)."""
    return Rates.with_rates({"USD": 1_000_000, "CHF": 1_100_000})
