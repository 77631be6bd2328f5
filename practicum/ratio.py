"""Exact rational numbers kept in lowest terms."""

from __future__ import annotations

import math

_ZERO_DENOMINATOR = "Error! Division by ZERO"


def _normalized(numerator: int, denominator: int) -> tuple[int, int]:
    if denominator == 0:
        raise ZeroDivisionError(_ZERO_DENOMINATOR)
    if denominator < 0 and numerator:
        numerator, denominator = -numerator, -denominator
    if numerator == 0 or denominator == 1:
        return numerator, 1
    divider = math.gcd(abs(numerator), denominator)
    return numerator // divider, denominator // divider


class Ratio:
    """A fraction with a positive denominator, reduced by the common divisor.

    A zero denominator raises ZeroDivisionError.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        self._numerator, self._denominator = _normalized(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def set(self, numerator: int, denominator: int) -> None:
        """Replace the value of this fraction."""
        self._numerator, self._denominator = _normalized(numerator, denominator)

    def __add__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __sub__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __mul__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __truediv__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __pos__(self) -> Ratio:
        return Ratio(self._numerator, self._denominator)

    def __neg__(self) -> Ratio:
        return Ratio(-self._numerator, self._denominator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __lt__(self, other: Ratio) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self._numerator * other._denominator < other._numerator * self._denominator

    def __le__(self, other: Ratio) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: Ratio) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self._numerator * other._denominator > other._numerator * self._denominator

    def __ge__(self, other: Ratio) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self == other or self > other

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def div(self) -> int:
        """The integer part, truncated toward zero."""
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def mod(self) -> int:
        """The remainder; for a non-positive numerator counted up from the denominator."""
        if self._numerator > 0:
            return self._numerator % self._denominator
        return self._denominator - abs(self._numerator) % self._denominator

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __repr__(self) -> str:
        return f"Ratio({self._numerator}, {self._denominator})"