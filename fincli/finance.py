"""Percentages and interest rates expressed as fractions."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from fincli.money import string_fixed

_HUNDRED = Decimal(100)


class RateFrequency(str, Enum):
    """How often a rate applies."""

    ANNUAL = "annual"
    MONTHLY = "monthly"
    BIWEEKLY = "biweekly"
    WEEKLY = "weekly"


class _Fraction:
    """A value given in percent and stored as a fraction."""

    __slots__ = ("value",)

    def __init__(self, percent) -> None:
        self.value = Decimal(percent) / _HUNDRED

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self), self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value * _HUNDRED})"


class Percent(_Fraction):
    """A percentage, shown as a whole number."""

    def apply_to(self, amount) -> Decimal:
        """Return this percentage of ``amount``."""
        return Decimal(amount) * self.value

    def __str__(self) -> str:
        return string_fixed(self.value * _HUNDRED, 0) + "%"


class Rate(_Fraction):
    """An interest rate, shown to two decimal places."""

    def apply_to(self, amount) -> Decimal:
        """Return the interest this rate yields on ``amount``."""
        return Decimal(amount) * self.value

    def __str__(self) -> str:
        return string_fixed(self.value * _HUNDRED, 2) + "%"