"""Moments of a discrete random variable."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class StochasticVariable:
    """A discrete random variable given by its values and their probabilities."""

    values: tuple[float, ...]
    probabilities: tuple[float, ...]

    def __init__(
        self, values: Sequence[float], probabilities: Sequence[float]
    ) -> None:
        if len(values) != len(probabilities):
            raise ValueError("values and probabilities differ in length")
        object.__setattr__(self, "values", tuple(values))
        object.__setattr__(self, "probabilities", tuple(probabilities))

    def raw_moment(self, k: int) -> float:
        """The k-th moment about zero."""
        return sum(
            (float(v) ** k * p for v, p in zip(self.values, self.probabilities)),
            0.0,
        )

    def mean(self) -> float:
        return self.raw_moment(1)

    def central_moment(self, k: int) -> float:
        """The k-th moment about the mean."""
        mean = self.mean()
        return sum(
            ((v - mean) ** k * p for v, p in zip(self.values, self.probabilities)),
            0.0,
        )

    def variance(self) -> float:
        return self.central_moment(2)