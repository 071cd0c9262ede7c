"""Storeless central moment accumulators.

Numerically stable updating formulas (West's algorithm, extended to the
third and fourth central moments) that maintain running moments of a
scalar stream without storing the observations.

Each class extends the previous one, so a ``FourthMoment`` can stand in
wherever a ``SecondMoment`` is expected. This is what allows several
statistics (variance, skewness, kurtosis, ...) to share one accumulator.
"""

from __future__ import annotations
import numpy as np
from typing import Iterable


class FirstMoment:
    """Running mean of a scalar stream.

    Attributes
    ----------
    n : int
        Number of samples seen.
    m1 : float
        Running mean estimate.
    dev : float
        Deviation of the latest sample from the previous mean.
    n_dev : float
        ``dev / n`` for the latest sample.
    """

    def __init__(self):
        self.n = 0
        self.m1 = 0.0
        self.dev = 0.0
        self.n_dev = 0.0

    def add(self, x: float) -> None:
        """Update the moment with a single observation.

        Parameters
        ----------
        x : float
            New observation.
        """
        x = float(x)
        self.n += 1
        self.dev = x - self.m1
        self.n_dev = self.dev / self.n
        self.m1 += self.n_dev

    def add_batch(self, X: Iterable[float]) -> None:
        """Update the moment with each observation of ``X`` in order."""
        for x in np.asarray(X, dtype=float).ravel():
            self.add(x)

    def reset(self) -> None:
        """Reset all moments to the empty state."""
        self.n = 0
        self.m1 = 0.0
        self.dev = 0.0
        self.n_dev = 0.0

    def copy(self) -> "FirstMoment":
        """Return an independent accumulator with the same state."""
        other = type(self)()
        other.__dict__.update(self.__dict__)
        return other

    def state(self) -> dict:
        """Moment fields that fully describe this accumulator."""
        return {"n": self.n, "m1": self.m1}

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self.state().items())
        return f"{type(self).__name__}({fields})"


class SecondMoment(FirstMoment):
    """Running sum of squared deviations from the mean.

    Attributes
    ----------
    m2 : float
        Sum of squares of differences from the current mean.
    """

    def __init__(self):
        super().__init__()
        self.m2 = 0.0

    def add(self, x: float) -> None:
        super().add(x)
        self.m2 += (self.n - 1) * self.dev * self.n_dev

    def reset(self) -> None:
        super().reset()
        self.m2 = 0.0

    def state(self) -> dict:
        state = super().state()
        state["m2"] = self.m2
        return state


class ThirdMoment(SecondMoment):
    """Running sum of cubed deviations from the mean.

    Attributes
    ----------
    m3 : float
        Sum of cubes of differences from the current mean.
    """

    def __init__(self):
        super().__init__()
        self.m3 = 0.0

    def add(self, x: float) -> None:
        prev_m2 = self.m2
        super().add(x)
        n = float(self.n)
        n_dev_sq = self.n_dev * self.n_dev
        self.m3 = (
            self.m3
            - 3.0 * self.n_dev * prev_m2
            + (n - 1) * (n - 2) * n_dev_sq * self.dev
        )

    def reset(self) -> None:
        super().reset()
        self.m3 = 0.0

    def state(self) -> dict:
        state = super().state()
        state["m3"] = self.m3
        return state


class FourthMoment(ThirdMoment):
    """Running sum of fourth powers of deviations from the mean.

    Attributes
    ----------
    m4 : float
        Sum of fourth powers of differences from the current mean.
    """

    def __init__(self):
        super().__init__()
        self.m4 = 0.0

    def add(self, x: float) -> None:
        prev_m3 = self.m3
        prev_m2 = self.m2
        super().add(x)
        n = float(self.n)
        n_dev_sq = self.n_dev * self.n_dev
        self.m4 = (
            self.m4
            - 4.0 * self.n_dev * prev_m3
            + 6.0 * n_dev_sq * prev_m2
            + (n * n - 3.0 * (n - 1)) * (n_dev_sq * n_dev_sq * (n - 1) * n)
        )

    def reset(self) -> None:
        super().reset()
        self.m4 = 0.0

    def state(self) -> dict:
        state = super().state()
        state["m4"] = self.m4
        return state
