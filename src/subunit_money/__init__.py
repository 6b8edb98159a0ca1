"""
subunit-money — exact subunits ↔ floating major units for one currency.

Integer subunit counts for storage and the wire, floats for display:
Subunits → factor table → Major units, and back with an overflow guard.
"""

__version__ = "0.1.0"

from .currency import Currency, CurrencyCode, canonical_currency
from .errors import (
    ConversionError,
    CurrencyNotFoundError,
    MoneyError,
    RangeExceededError,
)
from .factor import (
    SUBUNIT_FACTORS,
    decimal_places,
    factor_of,
    is_supported,
    supported_currencies,
)
from .money import (
    MAX_ALLOWED,
    MIN_ALLOWED,
    SUBUNIT_MAX,
    SUBUNIT_MIN,
    HighestUnit,
    LowestSubunit,
    MonetaryValue,
    scaled_to_subunits,
)

__all__ = [
    "Currency", "CurrencyCode", "canonical_currency",
    "MoneyError", "ConversionError", "CurrencyNotFoundError", "RangeExceededError",
    "SUBUNIT_FACTORS", "factor_of", "decimal_places", "is_supported", "supported_currencies",
    "MonetaryValue", "LowestSubunit", "HighestUnit", "scaled_to_subunits",
    "SUBUNIT_MAX", "SUBUNIT_MIN", "MAX_ALLOWED", "MIN_ALLOWED",
]
