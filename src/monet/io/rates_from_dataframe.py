from __future__ import annotations

# Build a `Rates` table from caller-supplied tabular data (a pandas DataFrame or a CSV file).
# Fetching rates from the network is out of scope; callers bring their own data.

import logging
from pathlib import Path

import pandas as pd

from monet.domain.monetary.rates import Rates

logger = logging.getLogger(__name__)

DEFAULT_CODE_COLUMN = "code"
DEFAULT_WORTH_COLUMN = "worth"


def rates_from_dataframe(df: pd.DataFrame, code_column: str = DEFAULT_CODE_COLUMN, worth_column: str = DEFAULT_WORTH_COLUMN) -> Rates:
    """Create `Rates` from a DataFrame with one row per currency.

    Input DataFrame has to meet these requirements:
    - Columns: $code_column (3-letter codes) and $worth_column (integer worth in reference units).
    - No code appears twice.
    - Worth values are integers. Floats are accepted only when they have no fractional part
      (pandas turns int columns with missing values into floats).

    Args:
        df: Source data.
        code_column: Name of the column with currency codes.
        worth_column: Name of the column with worth values.

    Returns:
        The rate table.

    Raises:
        ValueError: If $df is not a DataFrame, a column is missing, or a code is duplicated.
        TypeError: If a worth value is not integral.
        InvalidCodeError: If a code is malformed.
        InvalidRateError: If a worth is not strictly positive.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}. Please provide your rates as a pandas DataFrame.")

    # Check: required columns present
    missing = [c for c in (code_column, worth_column) if c not in df.columns]
    if missing:
        raise ValueError(f"The provided DataFrame is missing required columns: {', '.join(missing)}")

    # Check: each currency defined once
    duplicated = df[code_column][df[code_column].duplicated()].tolist()
    if duplicated:
        raise ValueError(f"The provided DataFrame defines these codes more than once: {', '.join(map(str, duplicated))}")

    rates: dict[str, int] = {}
    for code, worth in zip(df[code_column].tolist(), df[worth_column].tolist()):
        rates[code] = _as_integral_worth(code, worth)

    logger.debug(f"Loaded {len(rates)} rate(s) from DataFrame columns '{code_column}' and '{worth_column}'")
    return Rates.with_rates(rates)


def rates_from_csv(path: Path | str, code_column: str = DEFAULT_CODE_COLUMN, worth_column: str = DEFAULT_WORTH_COLUMN) -> Rates:
    """Read a CSV file with a header row and build `Rates` via `rates_from_dataframe`."""
    df = pd.read_csv(path, dtype={code_column: str}, keep_default_na=False)
    logger.info(f"Read {len(df)} row(s) of rates from {path}")
    return rates_from_dataframe(df, code_column=code_column, worth_column=worth_column)


def _as_integral_worth(code: object, worth: object) -> int:
    if isinstance(worth, bool):
        raise TypeError(f"Worth of '{code}' must be an integer, but provided value is: {worth!r}")
    if isinstance(worth, int):
        return worth
    if isinstance(worth, float) and worth.is_integer():
        return int(worth)
    raise TypeError(f"Worth of '{code}' must be an integer, but provided value is: {worth!r}")
