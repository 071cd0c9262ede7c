"""Unbiased sample variance.

Uses the definitional formula

    variance = sum((x_i - mean)^2) / (n - 1)

but never evaluates it naively. Streaming results come from West's
updating algorithm (via ``SecondMoment``); array evaluation uses a
corrected two-pass sum. Both are described in Chan, T. F. and
J. G. Lewis 1979, Communications of the ACM, vol. 22 no. 9, pp. 526-531.

This class is not thread-safe. Callers sharing an instance (or a
moment) across threads must lock around ``add`` and ``reset``.
"""

from __future__ import annotations
import numpy as np
from typing import Optional

from .base import StorelessStatistic
from .mean import Mean
from ..moments.central import SecondMoment
from ..utils.validation import ArrayLike, resolve_window


class Variance(StorelessStatistic):
    """Unbiased sample variance, streaming or over an array.

    Usage:
        var = Variance()
        for x_t in stream:
            var.add(x_t)
        var.result()

        # sharing one accumulator with another statistic
        m4 = FourthMoment()
        var = Variance(m4)        # passive reader: the owner feeds m4

    Parameters
    ----------
    moment : SecondMoment or None
        Externally owned moment to read from. Third or fourth moments
        work here as well. If None, the variance owns a fresh
        ``SecondMoment``.

    Attributes
    ----------
    moment : SecondMoment
        Underlying moment accumulator.
    owns_moment : bool
        False when ``moment`` was supplied by the caller. ``add`` and
        ``reset`` then leave it untouched.
    """

    moment_class = SecondMoment

    def result(self) -> float:
        """Current variance estimate.

        Returns
        -------
        float
            NaN if no observations were seen, 0.0 for a single
            observation, ``m2 / (n - 1)`` otherwise.
        """
        n = self.moment.n
        if n == 0:
            return float("nan")
        elif n == 1:
            return 0.0
        return float(self.moment.m2 / (n - 1.0))

    def evaluate(self, values: ArrayLike, begin: int = 0,
                 length: Optional[int] = None, *,
                 mean: Optional[float] = None) -> float:
        """Variance of ``values[begin:begin + length]``.

        If ``mean`` is not given it is computed from the same window
        with ``Mean.evaluate``. Does not change the internal state of the
        statistic, even when the moment is owned.

        Parameters
        ----------
        values : array_like
            Input observations.
        begin : int
            Index of the first element to include.
        length : int or None
            Number of elements to include. If None, runs to the end of
            ``values``.
        mean : float, optional
            Precomputed mean of the window.

        Returns
        -------
        float
            The variance, NaN for an empty window, 0.0 for a single value.

        Raises
        ------
        InvalidArgumentError
            If ``values`` is None or the window is out of bounds.
        """
        window, non_empty = resolve_window(values, begin, length)
        if not non_empty:
            return float("nan")
        if window.shape[0] == 1:
            return 0.0

        if mean is None:
            mean = Mean().evaluate(window)
        return _two_pass_variance(window, float(mean))


def _two_pass_variance(window: np.ndarray, mean: float) -> float:
    """Corrected two-pass variance of ``window`` around ``mean``.

    ``accum2`` is the residual sum of deviations. It is zero for the
    exact mean, so subtracting ``accum2**2 / n`` compensates both for
    rounding in the mean and for a mean supplied from elsewhere.
    """
    n = window.shape[0]
    with np.errstate(invalid="ignore", over="ignore"):
        dev = window - mean
        accum = np.dot(dev, dev)
        accum2 = dev.sum()
        return float((accum - accum2 * accum2 / n) / (n - 1))
