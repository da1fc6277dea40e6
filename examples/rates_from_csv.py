"""
Loads a rate table from CSV and converts a price into every listed currency.

The CSV path is read from environment variable MONET_RATES_CSV, which can be put into
a .env file next to this script:
    MONET_RATES_CSV='path/to/rates.csv'
Without it, the bundled `rates.csv` is used.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from monet import Money
from monet.io.rates_from_dataframe import rates_from_csv

logger = logging.getLogger(__name__)

# load path from .env file
load_dotenv()
RATES_CSV_PATH: Path = Path(os.environ.get("MONET_RATES_CSV", Path(__file__).with_name("rates.csv")))


def run() -> None:
    rates = rates_from_csv(RATES_CSV_PATH)
    price = Money.parse("99.90 CHF")

    for code in rates:
        logger.info(f"{price} = {price.into_code(code, rates)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
