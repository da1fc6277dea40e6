import pandas as pd
import pytest

from monet.domain.errors import InvalidCodeError, InvalidRateError
from monet.domain.monetary.currency_amount import CurrencyAmount
from monet.domain.monetary.currency_registry import CHF, USD
from monet.io.rates_from_dataframe import rates_from_csv, rates_from_dataframe


def test_rates_from_dataframe():
    df = pd.DataFrame({"code": ["USD", "CHF"], "worth": [1_000_000, 1_100_000]})

    rates = rates_from_dataframe(df)

    assert len(rates) == 2
    assert rates.worth(USD) == CurrencyAmount(1_000_000)
    assert rates.worth(CHF) == CurrencyAmount(1_100_000)


def test_custom_column_names():
    df = pd.DataFrame({"currency": ["USD"], "value": [1_000_000]})
    rates = rates_from_dataframe(df, code_column="currency", worth_column="value")
    assert rates.worth("USD") == CurrencyAmount(1_000_000)


def test_integral_float_worth_is_accepted():
    df = pd.DataFrame({"code": ["USD"], "worth": [1_000_000.0]})
    assert rates_from_dataframe(df).worth(USD) == CurrencyAmount(1_000_000)


def test_fractional_worth_raises():
    df = pd.DataFrame({"code": ["USD"], "worth": [1.5]})
    with pytest.raises(TypeError):
        rates_from_dataframe(df)


def test_not_a_dataframe_raises():
    with pytest.raises(ValueError):
        rates_from_dataframe({"code": ["USD"], "worth": [1]})


def test_missing_column_raises():
    df = pd.DataFrame({"code": ["USD"]})
    with pytest.raises(ValueError) as exc_info:
        rates_from_dataframe(df)
    assert "worth" in str(exc_info.value)


def test_duplicate_code_raises():
    df = pd.DataFrame({"code": ["USD", "USD"], "worth": [1, 2]})
    with pytest.raises(ValueError):
        rates_from_dataframe(df)


def test_invalid_values_raise_domain_errors():
    with pytest.raises(InvalidCodeError):
        rates_from_dataframe(pd.DataFrame({"code": ["usd"], "worth": [1]}))
    with pytest.raises(InvalidRateError):
        rates_from_dataframe(pd.DataFrame({"code": ["USD"], "worth": [0]}))


def test_rates_from_csv(tmp_path):
    path = tmp_path / "rates.csv"
    path.write_text("code,worth\nUSD,1000000\nCHF,1100000\n")

    rates = rates_from_csv(path)

    assert rates.worth(USD) == CurrencyAmount(1_000_000)
    assert rates.worth(CHF) == CurrencyAmount(1_100_000)
