"""Sample standard deviation: the square root of ``Variance``."""

from __future__ import annotations
import numpy as np
from typing import Optional

from .base import StorelessStatistic
from .variance import Variance
from ..moments.central import SecondMoment
from ..utils.validation import ArrayLike


class StandardDeviation(StorelessStatistic):
    """Square root of the unbiased sample variance.

    Parameters
    ----------
    moment : SecondMoment or None
        Externally owned moment to read from. If None, a fresh
        ``SecondMoment`` is created and owned.

    Attributes
    ----------
    variance : Variance
        Reader over ``moment`` that produces the underlying variance.
    """

    moment_class = SecondMoment

    def __init__(self, moment: Optional[SecondMoment] = None):
        super().__init__(moment)
        # feeding happens through this statistic, never through the reader
        self.variance = Variance(self.moment)

    def result(self) -> float:
        """Current standard deviation (NaN when empty, 0.0 for one sample)."""
        with np.errstate(invalid="ignore"):
            return float(np.sqrt(self.variance.result()))

    def evaluate(self, values: ArrayLike, begin: int = 0,
                 length: Optional[int] = None, *,
                 mean: Optional[float] = None) -> float:
        """Standard deviation of ``values[begin:begin + length]``.

        Takes the same arguments as ``Variance.evaluate``.
        """
        var = self.variance.evaluate(values, begin, length, mean=mean)
        with np.errstate(invalid="ignore"):
            return float(np.sqrt(var))
