import pytest

from monet.domain.errors import ConversionError, UnknownCurrencyError
from monet.domain.monetary.currency_registry import JPY
from monet.domain.monetary.money import Money
from monet.domain.monetary.rates import Rates
from monet.domain.operation.resolution import Resolution, ResolutionState
from tests.helpers.helper_rates import create_rates, create_usd_chf_rates


def test_resolve_success():
    op = Money(1_000_000, "CHF") + Money(1_100_000, "USD")

    resolution = op.resolve(create_usd_chf_rates())

    assert resolution.state == ResolutionState.RESOLVED
    assert resolution.is_resolved
    assert not resolution.is_failed
    assert resolution.money == Money(2_000_000, "CHF")
    assert resolution.error is None
    assert resolution.unwrap() == Money(2_000_000, "CHF")
    assert resolution.operation is op


def test_resolve_failure_keeps_error_and_no_money():
    op = Money(1, "USD") + Money(1, "JPY")

    resolution = op.resolve(create_rates())

    assert resolution.state == ResolutionState.FAILED
    assert resolution.is_failed
    assert resolution.money is None
    assert isinstance(resolution.error, UnknownCurrencyError)
    with pytest.raises(UnknownCurrencyError):
        resolution.unwrap()


def test_resolve_failure_on_division_by_zero():
    resolution = (Money(1, "USD") / 0).resolve(create_rates())
    assert resolution.is_failed
    assert isinstance(resolution.error, ConversionError)


def test_resolve_empty_rates():
    resolution = (Money(1, "USD") + Money(1, "USD")).resolve(Rates.new())
    assert resolution.is_failed


def test_new_resolution_is_unresolved():
    resolution = Resolution(Money(1, "USD"))
    assert resolution.state == ResolutionState.UNRESOLVED
    with pytest.raises(ValueError):
        resolution.unwrap()


def test_terminal_state_can_not_change():
    resolution = Resolution(Money(1, "USD"))
    resolution.succeed(Money(1, "USD"))

    with pytest.raises(ValueError):
        resolution.fail(UnknownCurrencyError(JPY))
    with pytest.raises(ValueError):
        resolution.succeed(Money(2, "USD"))

    assert resolution.money == Money(1, "USD")
    assert resolution.error is None
