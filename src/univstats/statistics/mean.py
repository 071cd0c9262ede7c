"""Arithmetic mean, streaming or over an array."""

from __future__ import annotations
import numpy as np
from typing import Optional

from .base import StorelessStatistic
from ..utils.validation import ArrayLike, resolve_window


class Mean(StorelessStatistic):
    """Arithmetic mean of the observations.

    Streaming results come from the running first moment. Array
    evaluation uses the corrected two-pass formula

        xbar = sum(x) / n
        mean = xbar + sum(x - xbar) / n

    where the second pass removes most of the rounding error left by
    the first.

    Parameters
    ----------
    moment : FirstMoment or None
        Externally owned moment to read from (any higher moment works
        as well). If None, the mean owns a fresh ``FirstMoment``.
    """

    def result(self) -> float:
        """Current mean, or NaN if no observations have been seen."""
        if self.moment.n == 0:
            return float("nan")
        return float(self.moment.m1)

    def evaluate(self, values: ArrayLike, begin: int = 0,
                 length: Optional[int] = None) -> float:
        """Mean of ``values[begin:begin + length]``.

        Does not change the internal state of the statistic.

        Parameters
        ----------
        values : array_like
            Input observations.
        begin : int
            Index of the first element to include.
        length : int or None
            Number of elements to include. If None, runs to the end of
            ``values``.

        Returns
        -------
        float
            The mean, or NaN if the window is empty.

        Raises
        ------
        InvalidArgumentError
            If ``values`` is None or the window is out of bounds.
        """
        window, non_empty = resolve_window(values, begin, length)
        if not non_empty:
            return float("nan")

        n = window.shape[0]
        # non-finite input propagates as NaN or inf
        with np.errstate(invalid="ignore", over="ignore"):
            xbar = window.sum() / n
            correction = (window - xbar).sum()
            return float(xbar + correction / n)
