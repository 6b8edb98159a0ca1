"""
Subunit factor table.

Maps each canonical currency to the number of subunits in one major unit
(1, 100 or 1000). The table is assembled once at import time from three
disjoint currency sets and is read-only afterwards.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from .currency import Currency, canonical_currency
from .errors import CurrencyNotFoundError


logger = logging.getLogger(__name__)


ZERO_DECIMAL_CURRENCIES = frozenset(
    Currency(code)
    for code in (
        "BIF", "CLP", "DJF", "GNF", "JPY", "KMF", "KRW", "MGA", "PYG", "RWF", "UGX", "VND", "VUV",
        "XAF", "XOF", "XPF",
    )
)

TWO_DECIMAL_CURRENCIES = frozenset(
    Currency(code)
    for code in (
        "AED", "ALL", "AMD", "ANG", "ARS", "AUD", "AWG", "AZN", "BBD", "BDT", "BMD", "BND", "BOB",
        "BRL", "BSD", "BWP", "BZD", "CAD", "CHF", "CNY", "COP", "CRC", "CUP", "CZK", "DKK", "DOP",
        "DZD", "EGP", "ETB", "EUR", "FJD", "GBP", "GHS", "GIP", "GMD", "GTQ", "GYD", "HKD", "HNL",
        "HRK", "HTG", "HUF", "IDR", "ILS", "INR", "JMD", "KES", "KGS", "KHR", "KYD", "KZT", "LAK",
        "LBP", "LKR", "LRD", "LSL", "MAD", "MDL", "MKD", "MMK", "MNT", "MOP", "MUR", "MVR", "MWK",
        "MXN", "MYR", "NAD", "NGN", "NIO", "NOK", "NPR", "NZD", "PEN", "PGK", "PHP", "PKR", "PLN",
        "QAR", "RUB", "SAR", "SCR", "SEK", "SGD", "SLL", "SOS", "SSP", "SVC", "SZL", "THB", "TTD",
        "TWD", "TZS", "USD", "UYU", "UZS", "YER", "ZAR",
    )
)

THREE_DECIMAL_CURRENCIES = frozenset(
    Currency(code) for code in ("BHD", "JOD", "KWD", "OMR", "TND")
)


def _build_factor_table() -> Mapping[Currency, int]:
    # The three sets are disjoint by curation; insertion order is irrelevant.
    table: dict[Currency, int] = {}
    for currencies, factor in (
        (ZERO_DECIMAL_CURRENCIES, 1),
        (TWO_DECIMAL_CURRENCIES, 100),
        (THREE_DECIMAL_CURRENCIES, 1000),
    ):
        for currency in currencies:
            table[currency] = factor
    logger.debug("Subunit factor table built with %d currencies", len(table))
    return MappingProxyType(table)


SUBUNIT_FACTORS: Mapping[Currency, int] = _build_factor_table()

_DECIMAL_PLACES = {1: 0, 100: 2, 1000: 3}


def _lookup(currency: Any) -> int:
    try:
        return SUBUNIT_FACTORS[canonical_currency(currency)]
    except KeyError:
        raise CurrencyNotFoundError(currency) from None


def factor_of(currency: Any) -> float:
    """Return the subunits-per-major-unit factor of ``currency`` as a float.

    Args:
        currency: A ``Currency``, a ``CurrencyCode`` implementation or a
            code string.

    Raises:
        CurrencyNotFoundError: If the currency is absent from the table.
    """
    return float(_lookup(currency))


def decimal_places(currency: Any) -> int:
    """Number of decimal digits in the major unit (0, 2 or 3)."""
    return _DECIMAL_PLACES[_lookup(currency)]


def is_supported(currency: Any) -> bool:
    try:
        _lookup(currency)
    except CurrencyNotFoundError:
        return False
    return True


def supported_currencies() -> list[Currency]:
    return sorted(SUBUNIT_FACTORS, key=lambda c: c.value)
