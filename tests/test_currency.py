"""Tests for currency canonicalisation and the CurrencyCode capability."""

from enum import Enum

import pytest

from subunit_money.currency import Currency, CurrencyCode, canonical_currency
from subunit_money.errors import CurrencyNotFoundError


class Wallet(Enum):
    MAIN = "main"
    YEN = "yen"

    def code(self):
        return Currency.USD if self is Wallet.MAIN else "jpy"


def test_currency_member_is_canonical():
    assert canonical_currency(Currency.CHF) is Currency.CHF
    assert Currency.CHF.code() is Currency.CHF


def test_currency_str():
    assert str(Currency.USD) == "USD"
    assert f"{Currency.USD}" == "USD"


def test_caller_enum_satisfies_capability():
    assert isinstance(Wallet.MAIN, CurrencyCode)
    assert not isinstance("USD", CurrencyCode)


def test_caller_enum_resolves():
    assert canonical_currency(Wallet.MAIN) is Currency.USD
    assert canonical_currency(Wallet.YEN) is Currency.JPY


def test_code_strings_are_normalised():
    assert canonical_currency("usd") is Currency.USD
    assert canonical_currency("  Kwd\n") is Currency.KWD


@pytest.mark.parametrize("value", ["Dollar", None, 3.5, object()])
def test_unknown_values(value):
    with pytest.raises(CurrencyNotFoundError) as exc_info:
        canonical_currency(value)
    assert exc_info.value.currency is value
