"""
subunit-money error types.

Specific exceptions for each reason a conversion can fail, enabling
callers to handle each case appropriately (reject, log, surface upstream).
"""

from __future__ import annotations

from typing import Any


class MoneyError(Exception):
    """Base error for all subunit-money operations."""
    pass


class ConversionError(MoneyError):
    """Base error for a failed conversion between representations.

    Conversion errors are plain values: two errors of the same class with the
    same payload compare equal.
    """

    def _payload(self) -> tuple:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))


class CurrencyNotFoundError(ConversionError):
    """Currency has no entry in the subunit factor table."""
    def __init__(self, currency: Any):
        self.currency = currency
        super().__init__(f"Currency not found in subunit factor table: {currency!r}")

    def _payload(self) -> tuple:
        return (self.currency,)


class RangeExceededError(ConversionError):
    """Scaled amount cannot be represented as a 64-bit subunit count."""
    def __init__(self, value: float | int):
        self.value = value
        super().__init__(f"Amount {value!r} is outside the supported subunit range")

    def _payload(self) -> tuple:
        # repr keeps NaN payloads comparable
        return (repr(self.value),)
