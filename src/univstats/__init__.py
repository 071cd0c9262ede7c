"""univstats: Numerically stable storeless univariate statistics.

Running and array-based sample variance built on West's updating
algorithm, with moment accumulators that several statistics can share.
"""

__version__ = "0.1.0"

from .moments.central import FirstMoment, SecondMoment, ThirdMoment, FourthMoment
from .statistics.mean import Mean
from .statistics.variance import Variance
from .statistics.standard_deviation import StandardDeviation
from .utils.validation import InvalidArgumentError

__all__ = [
    "FirstMoment",
    "SecondMoment",
    "ThirdMoment",
    "FourthMoment",
    "Mean",
    "Variance",
    "StandardDeviation",
    "InvalidArgumentError",
]
