"""Conversion between exact subunit counts and floating major-unit amounts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Callable, Generic, Mapping, TypeVar

from .currency import canonical_currency
from .errors import RangeExceededError
from .factor import factor_of


logger = logging.getLogger(__name__)

LowestSubunit = int
HighestUnit = float

SUBUNIT_MAX = 2**63 - 1
SUBUNIT_MIN = -(2**63)

# Float bounds keep the range check itself from building an out-of-range int.
MAX_ALLOWED = float(SUBUNIT_MAX)
MIN_ALLOWED = float(SUBUNIT_MIN)

_SUBUNIT_QUANT = Decimal(1)

A = TypeVar("A", int, float)
C = TypeVar("C")


def scaled_to_subunits(value: float, rounding: str = ROUND_HALF_UP) -> int:
    """Narrow an already-scaled float to an integer subunit count.

    Raises RangeExceededError unless MIN_ALLOWED <= value <= MAX_ALLOWED
    (NaN never is). ``rounding`` is a ``decimal`` rounding mode; ROUND_DOWN
    is the plain truncating cast.
    """
    if not MIN_ALLOWED <= value <= MAX_ALLOWED:
        logger.debug("Scaled amount %r outside [%r, %r]", value, MIN_ALLOWED, MAX_ALLOWED)
        raise RangeExceededError(value)
    subunits = int(Decimal(value).quantize(_SUBUNIT_QUANT, rounding=rounding))
    # MAX_ALLOWED is 2**63 after float rounding; the boundary lands on SUBUNIT_MAX.
    return min(subunits, SUBUNIT_MAX)


@dataclass(frozen=True, eq=False)
class MonetaryValue(Generic[A, C]):
    """An amount of ``currency`` held either as subunits (int) or major units (float).

    Values are immutable; every conversion returns a new instance carrying
    the same currency. Equality includes the representation, so 100 subunits
    never equal 100.0 major units.
    """

    amount: A
    currency: C

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise TypeError(f"Amount must be an int or a float, got {type(self.amount).__name__}")
        if isinstance(self.amount, int) and not SUBUNIT_MIN <= self.amount <= SUBUNIT_MAX:
            raise RangeExceededError(self.amount)

    @classmethod
    def from_subunits(cls, amount: int, currency: C) -> MonetaryValue[int, C]:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"Subunit amount must be an int, got {type(amount).__name__}")
        return cls(amount, currency)

    @classmethod
    def from_major_units(cls, amount: float, currency: C) -> MonetaryValue[float, C]:
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise TypeError(f"Major-unit amount must be a float, got {type(amount).__name__}")
        try:
            major = float(amount)
        except OverflowError:
            raise RangeExceededError(amount) from None
        return cls(major, currency)

    @property
    def is_subunits(self) -> bool:
        return isinstance(self.amount, int)

    @property
    def is_major_units(self) -> bool:
        return isinstance(self.amount, float)

    def _key(self) -> tuple:
        return (self.is_subunits, self.amount, self.currency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonetaryValue):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_major_units(self) -> MonetaryValue[float, C]:
        """Divide the subunit count by the currency factor."""
        if not self.is_subunits:
            raise TypeError("Value is already in major units")
        factor = factor_of(self.currency)
        return type(self)(self.amount / factor, self.currency)

    def to_subunits(self, rounding: str = ROUND_HALF_UP) -> MonetaryValue[int, C]:
        """Scale the major-unit amount by the currency factor and narrow it to int.

        Raises:
            CurrencyNotFoundError: If the currency has no factor.
            RangeExceededError: If the scaled amount does not fit in 64 bits.
        """
        if not self.is_major_units:
            raise TypeError("Value is already in subunits")
        factor = factor_of(self.currency)
        return type(self)(scaled_to_subunits(self.amount * factor, rounding), self.currency)

    def convert(self) -> MonetaryValue[Any, C]:
        """Switch to the other representation."""
        if self.is_subunits:
            return self.to_major_units()
        return self.to_subunits()

    def round_trip(self) -> MonetaryValue[A, C]:
        return self.convert().convert()

    def to_dict(self) -> dict:
        currency = self.currency.value if isinstance(self.currency, Enum) else self.currency
        return {"amount": self.amount, "currency": currency}

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        currency_factory: Callable[[Any], Any] = canonical_currency,
    ) -> MonetaryValue[Any, Any]:
        """Rebuild a value from ``to_dict`` output; extra keys are ignored.

        With the default factory, currency codes are normalised and unknown
        ones raise CurrencyNotFoundError.
        """
        amount = data["amount"]
        currency = currency_factory(data["currency"])
        if isinstance(amount, float):
            return cls.from_major_units(amount, currency)
        return cls.from_subunits(amount, currency)
