import pytest

from monet.domain.errors import InvalidCodeError
from monet.domain.monetary.currency_code import CurrencyCode
from monet.domain.monetary.currency_registry import CHF, JPY, USD


def test_from_str_round_trip():
    code = CurrencyCode.from_str("USD")
    assert code.to_str() == "USD"
    assert str(code) == "USD"
    assert code.as_bytes() == b"USD"
    assert CurrencyCode.from_str(code.to_str()) == code


def test_construct_from_bytes():
    assert CurrencyCode(b"CHF") == CurrencyCode.from_str("CHF")
    assert CurrencyCode(bytearray(b"CHF")) == CHF


@pytest.mark.parametrize(
    "value",
    ["usd", "Usd", "US", "USDD", "", "U1D", "US ", " USD", "ÜSD", "U-D"],
)
def test_from_str_rejects_malformed_codes(value):
    with pytest.raises(InvalidCodeError) as exc_info:
        CurrencyCode.from_str(value)
    assert exc_info.value.code == value


@pytest.mark.parametrize("value", [None, 123, b"USD"])
def test_from_str_rejects_non_str(value):
    with pytest.raises(InvalidCodeError):
        CurrencyCode.from_str(value)


@pytest.mark.parametrize("value", [b"usd", b"US", b"USDX", "USD"])
def test_constructor_rejects_invalid_bytes(value):
    with pytest.raises(InvalidCodeError):
        CurrencyCode(value)


def test_invalid_code_error_is_value_error():
    with pytest.raises(ValueError):
        CurrencyCode.from_str("xx")


def test_equality_and_hash_are_structural():
    assert CurrencyCode.from_str("EUR") == CurrencyCode.from_str("EUR")
    assert CurrencyCode.from_str("EUR") != CurrencyCode.from_str("GBP")
    assert CurrencyCode.from_str("EUR") != "EUR"
    assert len({CurrencyCode.from_str("EUR"), CurrencyCode.from_str("EUR"), USD}) == 2


def test_coerce_accepts_str_and_code():
    assert CurrencyCode.coerce("USD") == USD
    assert CurrencyCode.coerce(USD) is USD


@pytest.mark.parametrize(
    "code, expected",
    [
        ("USD", 2),
        ("JPY", 0),
        ("BHD", 3),
        ("CLF", 4),
        ("XAU", 0),
        # Not registered -> default
        ("ABC", 2),
    ],
)
def test_iso_exponent(code, expected):
    assert CurrencyCode.from_str(code).iso_exponent == expected


def test_repr():
    assert repr(JPY) == "CurrencyCode('JPY')"
