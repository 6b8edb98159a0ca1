"""
Currency identifiers and the capability callers implement to name theirs.

Applications usually define their own currency enumeration (only the
currencies they accept). Any such type plugs in by implementing
``CurrencyCode.code()``, which answers with a canonical ``Currency`` member
or an uppercase ISO-4217 string.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol, Union, runtime_checkable

from .errors import CurrencyNotFoundError


logger = logging.getLogger(__name__)


class Currency(str, Enum):
    """Canonical ISO-4217 codes with a known subunit factor."""

    AED = "AED"
    ALL = "ALL"
    AMD = "AMD"
    ANG = "ANG"
    ARS = "ARS"
    AUD = "AUD"
    AWG = "AWG"
    AZN = "AZN"
    BBD = "BBD"
    BDT = "BDT"
    BHD = "BHD"
    BIF = "BIF"
    BMD = "BMD"
    BND = "BND"
    BOB = "BOB"
    BRL = "BRL"
    BSD = "BSD"
    BWP = "BWP"
    BZD = "BZD"
    CAD = "CAD"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CRC = "CRC"
    CUP = "CUP"
    CZK = "CZK"
    DJF = "DJF"
    DKK = "DKK"
    DOP = "DOP"
    DZD = "DZD"
    EGP = "EGP"
    ETB = "ETB"
    EUR = "EUR"
    FJD = "FJD"
    GBP = "GBP"
    GHS = "GHS"
    GIP = "GIP"
    GMD = "GMD"
    GNF = "GNF"
    GTQ = "GTQ"
    GYD = "GYD"
    HKD = "HKD"
    HNL = "HNL"
    HRK = "HRK"
    HTG = "HTG"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    JMD = "JMD"
    JOD = "JOD"
    JPY = "JPY"
    KES = "KES"
    KGS = "KGS"
    KHR = "KHR"
    KMF = "KMF"
    KRW = "KRW"
    KWD = "KWD"
    KYD = "KYD"
    KZT = "KZT"
    LAK = "LAK"
    LBP = "LBP"
    LKR = "LKR"
    LRD = "LRD"
    LSL = "LSL"
    MAD = "MAD"
    MDL = "MDL"
    MGA = "MGA"
    MKD = "MKD"
    MMK = "MMK"
    MNT = "MNT"
    MOP = "MOP"
    MUR = "MUR"
    MVR = "MVR"
    MWK = "MWK"
    MXN = "MXN"
    MYR = "MYR"
    NAD = "NAD"
    NGN = "NGN"
    NIO = "NIO"
    NOK = "NOK"
    NPR = "NPR"
    NZD = "NZD"
    OMR = "OMR"
    PEN = "PEN"
    PGK = "PGK"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    PYG = "PYG"
    QAR = "QAR"
    RUB = "RUB"
    RWF = "RWF"
    SAR = "SAR"
    SCR = "SCR"
    SEK = "SEK"
    SGD = "SGD"
    SLL = "SLL"
    SOS = "SOS"
    SSP = "SSP"
    SVC = "SVC"
    SZL = "SZL"
    THB = "THB"
    TND = "TND"
    TTD = "TTD"
    TWD = "TWD"
    TZS = "TZS"
    UGX = "UGX"
    USD = "USD"
    UYU = "UYU"
    UZS = "UZS"
    VND = "VND"
    VUV = "VUV"
    XAF = "XAF"
    XOF = "XOF"
    XPF = "XPF"
    YER = "YER"
    ZAR = "ZAR"

    def code(self) -> "Currency":
        return self

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class CurrencyCode(Protocol):
    """Anything that can name its canonical currency code.

    Implementations must be hashable and comparable for equality; a small
    ``Enum`` is the usual choice.
    """

    def code(self) -> Union[Currency, str]:
        ...


def canonical_currency(currency: Any) -> Currency:
    """Resolve a currency, a ``CurrencyCode`` or a code string to ``Currency``.

    Raises:
        CurrencyNotFoundError: carrying the caller's original value when the
            code is not a known ``Currency``.
    """
    if isinstance(currency, Currency):
        return currency

    code = currency.code() if isinstance(currency, CurrencyCode) else currency
    if isinstance(code, Currency):
        return code
    if isinstance(code, str):
        try:
            return Currency(code.strip().upper())
        except ValueError:
            pass

    logger.debug("Unknown currency code %r (from %r)", code, currency)
    raise CurrencyNotFoundError(currency)
